"""Fake inference providers built on httpx.MockTransport."""

from typing import Any, Dict

import httpx


EMOTION_HOST = "emotion.test"
REPLY_HOST = "reply.test"
EMOTION_URL = f"https://{EMOTION_HOST}/models/emotion-classifier"
REPLY_URL = f"https://{REPLY_HOST}/v1beta/models/gemini-test:generateContent"


def generation_payload(text: str) -> Dict[str, Any]:
    """Minimal well-formed generation response carrying `text`."""
    return {
        "candidates": [
            {"content": {"parts": [{"text": text}], "role": "model"}, "finishReason": "STOP"}
        ]
    }


class FakeProviders:
    """Serves canned responses for the classification and generation hosts.

    Usage:
        fake_providers.set_emotion(200, json=[[{"label": "joy", "score": 0.9}]])
        fake_providers.set_reply(500, text="Internal error")
        fake_providers.raise_on(REPLY_HOST, httpx.ReadTimeout)
        fake_providers.calls_to(EMOTION_HOST)  # recorded httpx.Request objects
    """

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self._responses: Dict[str, tuple[int, Dict[str, Any]]] = {
            EMOTION_HOST: (200, {"json": [[{"label": "joy", "score": 0.8}]]}),
            REPLY_HOST: (200, {"json": generation_payload("Glad to hear it!")}),
        }
        self._errors: Dict[str, type[Exception]] = {}

    def set_emotion(self, status_code: int, **kwargs: Any) -> None:
        self._responses[EMOTION_HOST] = (status_code, kwargs)

    def set_reply(self, status_code: int, **kwargs: Any) -> None:
        self._responses[REPLY_HOST] = (status_code, kwargs)

    def raise_on(self, host: str, error_class: type[Exception]) -> None:
        self._errors[host] = error_class

    def calls_to(self, host: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.host == host]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        host = request.url.host
        if host in self._errors:
            raise self._errors[host](f"Simulated failure for {host}", request=request)
        if host not in self._responses:
            return httpx.Response(404, text="Unknown host")
        status_code, kwargs = self._responses[host]
        return httpx.Response(status_code, **kwargs)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)
