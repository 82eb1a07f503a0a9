"""Vendor Token Provider.

Acquires and caches the bearer token used by every AgentLink API call.

The token is obtained by posting the vendor client id and secret to
``/auth/vendor`` and is considered stale one minute before the expiry the
API reports. Refresh is lazy: the first caller that sees an absent or
stale token re-authenticates.

A single ``asyncio.Lock`` guards the cached token. The authentication
request itself runs outside the lock, so two callers racing on a stale
token may both re-authenticate; the last response wins.
"""

import asyncio
import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

import httpx
from opentelemetry import trace

from agentlink.observability import token_refresh_failures, token_refreshes

from .errors import AgentLinkAuthenticationError

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)

AUTH_PATH = "/auth/vendor"
TRACE_ID_HEADER = "frontegg-trace-id"
EXPIRY_BUFFER_SECONDS = 60


@dataclass
class VendorToken:
    """Cached vendor bearer token.

    Attributes:
        access_token: The bearer token
        expires_at: Absolute time (UTC) after which the token must be refreshed,
            already reduced by the expiry buffer
    """

    access_token: str
    expires_at: datetime

    def is_expired(self) -> bool:
        return datetime.now(UTC) >= self.expires_at


class VendorTokenProvider:
    """Authenticates against ``/auth/vendor`` and caches the resulting token."""

    def __init__(self, http_client: httpx.AsyncClient, client_id: str, secret: str) -> None:
        """Initialize the provider.

        Args:
            http_client: Client bound to the region base URL
            client_id: Vendor client id
            secret: Vendor API secret
        """
        self._http_client = http_client
        self._client_id = client_id
        self._secret = secret
        self._token: VendorToken | None = None
        self._lock = asyncio.Lock()

    async def get_access_token_async(self) -> str:
        """Return a valid bearer token, authenticating first when needed.

        Raises:
            AgentLinkAuthenticationError: If authentication fails
        """
        with tracer.start_as_current_span("vendor_token.get_access_token") as span:
            async with self._lock:
                cached = self._token
            if cached is not None and not cached.is_expired():
                span.set_attribute("vendor_token.cache_hit", True)
                return cached.access_token

            span.set_attribute("vendor_token.cache_hit", False)
            token = await self.authenticate_async()
            return token.access_token

    async def authenticate_async(self) -> VendorToken:
        """Exchange the vendor credentials for a new token and cache it.

        Raises:
            AgentLinkAuthenticationError: On a non-200 response or transport failure
        """
        with tracer.start_as_current_span("vendor_token.authenticate") as span:
            span.set_attribute("vendor_token.client_id", self._client_id)
            logger.debug("Authenticating vendor", extra={"client_id": self._client_id})

            try:
                response = await self._http_client.post(
                    AUTH_PATH,
                    json={"clientId": self._client_id, "secret": self._secret},
                    headers={"Content-Type": "application/json", "Accept": "application/json"},
                )
            except httpx.TimeoutException as e:
                token_refresh_failures.add(1, {"reason": "timeout"})
                logger.error("Vendor authentication timed out", extra={"client_id": self._client_id}, exc_info=e)
                raise AgentLinkAuthenticationError(message="Timeout authenticating vendor", operation="authenticate") from e
            except httpx.RequestError as e:
                token_refresh_failures.add(1, {"reason": "network"})
                logger.error("Vendor authentication network error", extra={"client_id": self._client_id}, exc_info=e)
                raise AgentLinkAuthenticationError(message=f"Network error authenticating vendor: {e}", operation="authenticate") from e

            trace_id = response.headers.get(TRACE_ID_HEADER)
            span.set_attribute("http.status_code", response.status_code)
            if trace_id:
                logger.debug("Received frontegg trace id", extra={"trace_id": trace_id, "operation": "authenticate"})

            if response.status_code != 200:
                token_refresh_failures.add(1, {"reason": "status", "status_code": response.status_code})
                error = AgentLinkAuthenticationError(
                    message=f"authentication failed with status {response.status_code}: {response.text}",
                    status_code=response.status_code,
                    response_body=response.text,
                    trace_id=trace_id,
                    operation="authenticate",
                )
                logger.error(
                    "Vendor authentication failed",
                    extra={"client_id": self._client_id, "status_code": response.status_code, "trace_id": trace_id},
                )
                raise error

            try:
                payload = response.json()
                access_token = payload["token"]
                expires_in = int(payload.get("expiresIn", 0))
            except (ValueError, KeyError, TypeError) as e:
                token_refresh_failures.add(1, {"reason": "decode"})
                raise AgentLinkAuthenticationError(
                    message=f"failed to decode auth response: {e}",
                    status_code=response.status_code,
                    response_body=response.text,
                    trace_id=trace_id,
                    operation="authenticate",
                ) from e

            token = VendorToken(
                access_token=access_token,
                expires_at=datetime.now(UTC) + timedelta(seconds=expires_in - EXPIRY_BUFFER_SECONDS),
            )
            async with self._lock:
                self._token = token

            token_refreshes.add(1)
            logger.info("Successfully authenticated with Frontegg", extra={"client_id": self._client_id, "expires_in": expires_in})
            return token

    def clear(self) -> None:
        """Drop the cached token so the next call re-authenticates."""
        self._token = None
        logger.info("Cleared cached vendor token")
