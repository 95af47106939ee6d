"""
HTTP client for the external inference providers.

Communicates with provider endpoints using a pooled httpx AsyncClient.
Every call is a single attempt: there is no retry and no backoff. Failures
are returned as ProviderFailure values, never raised, so stages can branch
on the outcome explicitly.
"""

import time
from typing import Any, Mapping, Optional

import httpx
import structlog

from chatterjoy.models.enums import FailureKind
from chatterjoy.models.outcomes import ProviderFailure, ProviderResult, ProviderSuccess
from chatterjoy.monitoring.metrics import provider_calls_total, provider_latency_seconds


logger = structlog.get_logger(__name__)

GATEWAY_TIMEOUT = 504
BAD_GATEWAY = 502


def redact_target(url: httpx.URL) -> str:
    """Render a URL for logs without its query string (API keys travel there)."""
    port = f":{url.port}" if url.port else ""
    return f"{url.scheme}://{url.host}{port}{url.path}"


class ProviderClient:
    """
    Provider-agnostic JSON-over-HTTP client.

    Responsibilities:
    - POST a JSON payload to an absolute endpoint URL with caller headers/params
    - Classify the outcome (upstream status, parse failure, timeout, network error)
    - Log one entry per attempt and record call metrics

    Does NOT handle:
    - Payload construction or response shape interpretation (stages do that)
    - Retries (a failed call is final)
    """

    def __init__(
        self,
        timeout: float = 30.0,
        connection_limits: Optional[httpx.Limits] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize provider client.

        Args:
            timeout: Bound on connect/read/write/pool waits, in seconds
            connection_limits: httpx connection pool limits (default: 10 max connections)
            transport: Custom httpx transport (used by tests to fake providers)
        """
        if connection_limits is None:
            connection_limits = httpx.Limits(
                max_keepalive_connections=5,
                max_connections=10,
                keepalive_expiry=30.0
            )

        self.timeout = timeout
        self._connection_limits = connection_limits
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

        logger.info(
            "Provider client initialized",
            timeout=timeout,
            connection_limits=str(connection_limits),
        )

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the async HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                limits=self._connection_limits,
                transport=self._transport,
            )
            logger.debug("Created new httpx AsyncClient")
        return self._client

    async def call(
        self,
        endpoint_url: str,
        headers: Mapping[str, str],
        payload: Any,
        params: Optional[Mapping[str, str]] = None,
        provider: str = "unknown",
    ) -> ProviderResult:
        """
        POST `payload` as JSON to `endpoint_url` and classify the result.

        Args:
            endpoint_url: Absolute provider URL
            headers: Request headers (auth, content type)
            payload: JSON-serializable request body
            params: Query parameters (e.g. an API key)
            provider: Label used in logs and metrics

        Returns:
            ProviderSuccess with the parsed JSON body, or ProviderFailure:
            - upstream non-2xx: upstream status code and body text
            - 2xx with unparseable body: 502
            - timeout: 504
            - connection/transport error: 502

        Raises:
            ValueError: endpoint_url is not an absolute URL
        """
        try:
            url = httpx.URL(endpoint_url)
        except httpx.InvalidURL as e:
            raise ValueError(f"Invalid provider URL: {e}") from e
        if not url.is_absolute_url:
            raise ValueError(f"Provider URL must be absolute: {endpoint_url!r}")

        target = redact_target(url)
        logger.info("Calling provider", provider=provider, target=target)

        start_time = time.perf_counter()
        try:
            client = await self._get_client()
            response = await client.post(
                url,
                headers=dict(headers),
                params=dict(params) if params else None,
                json=payload,
            )
        except httpx.TimeoutException as e:
            return self._failure(
                provider, target, start_time,
                status_code=GATEWAY_TIMEOUT,
                message=f"Provider request timed out after {self.timeout}s",
                kind=FailureKind.TIMEOUT,
                error_type=type(e).__name__,
            )
        except httpx.RequestError as e:
            return self._failure(
                provider, target, start_time,
                status_code=BAD_GATEWAY,
                message=f"Unable to reach provider: {e}",
                kind=FailureKind.CONNECTION,
                error_type=type(e).__name__,
            )

        if not response.is_success:
            # Upstream status and body are surfaced verbatim
            return self._failure(
                provider, target, start_time,
                status_code=response.status_code,
                message=response.text or response.reason_phrase,
                kind=FailureKind.HTTP_STATUS,
            )

        try:
            data = response.json()
        except ValueError as e:
            return self._failure(
                provider, target, start_time,
                status_code=BAD_GATEWAY,
                message=f"Invalid JSON response from provider: {e}",
                kind=FailureKind.PARSE,
                upstream_status=response.status_code,
            )

        latency_ms = int((time.perf_counter() - start_time) * 1000)
        logger.info(
            "Provider call succeeded",
            provider=provider,
            target=target,
            status_code=response.status_code,
            latency_ms=latency_ms,
        )
        provider_calls_total.labels(provider=provider, outcome="success").inc()
        provider_latency_seconds.labels(
            provider=provider, success="true"
        ).observe(latency_ms / 1000.0)

        return ProviderSuccess(
            status_code=response.status_code,
            data=data,
            latency_ms=latency_ms,
        )

    def _failure(
        self,
        provider: str,
        target: str,
        start_time: float,
        status_code: int,
        message: str,
        kind: FailureKind,
        **log_fields: Any,
    ) -> ProviderFailure:
        latency_ms = int((time.perf_counter() - start_time) * 1000)
        logger.warning(
            "Provider call failed",
            provider=provider,
            target=target,
            status_code=status_code,
            failure_kind=kind.value,
            latency_ms=latency_ms,
            error=message[:500],
            **log_fields,
        )
        provider_calls_total.labels(provider=provider, outcome=kind.value).inc()
        provider_latency_seconds.labels(
            provider=provider, success="false"
        ).observe(latency_ms / 1000.0)

        return ProviderFailure(
            status_code=status_code,
            message=message,
            kind=kind,
            latency_ms=latency_ms,
        )

    async def close(self):
        """Close the HTTP client connection."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            logger.debug("Closed provider client connection")

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(timeout={self.timeout}s)"
