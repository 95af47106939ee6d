"""
Push notification relay (Firebase Cloud Messaging).
"""

from chatterjoy.notifications.push_relay import PushRelay, load_service_account

__all__ = [
    "PushRelay",
    "load_service_account",
]
