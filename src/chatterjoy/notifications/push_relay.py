"""
Push notification relay over Firebase Cloud Messaging.

Forwards a token/title/body triple to FCM through the Firebase Admin SDK.
The Firebase app is initialised lazily on first use, so a service started
without credentials still serves every other route.
"""

import asyncio
import json
from pathlib import Path
from typing import Any, Optional

import firebase_admin
import structlog
from firebase_admin import credentials, messaging
from firebase_admin.exceptions import FirebaseError
from google.auth.exceptions import GoogleAuthError

from chatterjoy.exceptions import ConfigurationError, PushDeliveryError
from chatterjoy.models.pipeline_models import PushNotification
from chatterjoy.monitoring.metrics import push_notifications_total

logger = structlog.get_logger(__name__)


def load_service_account(
    service_account_key: Optional[str] = None,
    service_account_path: Optional[str] = None,
) -> dict[str, Any] | str | None:
    """
    Resolve Firebase service account credentials.

    Args:
        service_account_key: Service account JSON document as a string
        service_account_path: Path to the service account JSON file

    Returns:
        Parsed service account dict, a file path, or None when neither is set

    Raises:
        ConfigurationError: The JSON string cannot be parsed
    """
    if service_account_key:
        try:
            info = json.loads(service_account_key)
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                "FIREBASE_SERVICE_ACCOUNT_KEY is not valid JSON",
                details={"parse_error": e.msg},
            ) from e
        if not isinstance(info, dict):
            raise ConfigurationError("FIREBASE_SERVICE_ACCOUNT_KEY must be a JSON object")
        return info
    if service_account_path:
        return str(Path(service_account_path))
    return None


class PushRelay:
    """
    Sends notifications to devices through FCM.

    Attributes:
        service_account_key: Service account JSON document as a string
        service_account_path: Path to the service account JSON file
        app_name: Name of the firebase_admin app owned by this relay
    """

    def __init__(
        self,
        service_account_key: Optional[str] = None,
        service_account_path: Optional[str] = None,
        app_name: str = "chatterjoy-push",
    ):
        self.service_account_key = service_account_key
        self.service_account_path = service_account_path
        self.app_name = app_name
        self._app: Optional[firebase_admin.App] = None

    def ensure_configured(self) -> None:
        if not (self.service_account_key or self.service_account_path):
            raise ConfigurationError(
                "Push notifications are not configured: set FIREBASE_SERVICE_ACCOUNT_KEY "
                "or FIREBASE_SERVICE_ACCOUNT_PATH",
                details={"setting": "FIREBASE_SERVICE_ACCOUNT_KEY"},
            )

    def _get_app(self) -> firebase_admin.App:
        """Get or initialise the named Firebase app."""
        if self._app is not None:
            return self._app

        self.ensure_configured()
        try:
            self._app = firebase_admin.get_app(self.app_name)
            return self._app
        except ValueError:
            pass  # Not initialised yet

        try:
            cred = credentials.Certificate(
                load_service_account(self.service_account_key, self.service_account_path)
            )
        except (ValueError, OSError) as e:
            raise ConfigurationError(
                f"Invalid Firebase service account: {e}",
                details={"error_type": type(e).__name__},
            ) from e

        self._app = firebase_admin.initialize_app(cred, name=self.app_name)
        logger.info("Firebase app initialized", app_name=self.app_name)
        return self._app

    async def send(self, notification: PushNotification) -> str:
        """
        Send one notification.

        Args:
            notification: Target token plus title/body

        Returns:
            FCM message id

        Raises:
            ConfigurationError: Firebase credentials missing or invalid
            PushDeliveryError: Missing token or FCM rejected the message
        """
        app = self._get_app()

        if not notification.token:
            push_notifications_total.labels(outcome="rejected").inc()
            raise PushDeliveryError("Device token is required")

        message = messaging.Message(
            notification=messaging.Notification(
                title=notification.title,
                body=notification.body,
            ),
            token=notification.token,
        )

        try:
            # The Admin SDK is blocking; keep it off the event loop
            response = await asyncio.to_thread(messaging.send, message, app=app)
        except (FirebaseError, GoogleAuthError, ValueError) as e:
            # Credential refresh failures (revoked key, token endpoint down) surface as GoogleAuthError
            logger.error(
                "Error sending push notification",
                error=str(e),
                error_type=type(e).__name__,
                code=getattr(e, "code", None),
            )
            push_notifications_total.labels(outcome="failed").inc()
            raise PushDeliveryError(
                str(e),
                details={"error_type": type(e).__name__, "code": getattr(e, "code", None)},
            ) from e

        logger.info("Successfully sent push notification", message_id=response)
        push_notifications_total.labels(outcome="sent").inc()
        return response
