"""
Unit tests for the ChatterJoy service.

Test individual components in isolation:
- Data models (provider shapes, outcomes, defaulting rules)
- Provider client (status/timeout/parse classification)
- Pipeline stages and orchestrator (fail-fast, fallbacks)
- Push relay (Firebase patched out)
"""
