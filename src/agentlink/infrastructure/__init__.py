"""Infrastructure layer: HTTP adapters for the AgentLink API."""

from .adapters import AgentLinkApiClient, AgentLinkApiError, AgentLinkAuthenticationError, VendorToken, VendorTokenProvider

__all__ = [
    "AgentLinkApiClient",
    "AgentLinkApiError",
    "AgentLinkAuthenticationError",
    "VendorToken",
    "VendorTokenProvider",
]
