"""AgentLink API adapters."""

from .agentlink_api_client import AgentLinkApiClient
from .errors import AgentLinkApiError, AgentLinkAuthenticationError
from .vendor_token_provider import VendorToken, VendorTokenProvider

__all__ = [
    "AgentLinkApiClient",
    "AgentLinkApiError",
    "AgentLinkAuthenticationError",
    "VendorToken",
    "VendorTokenProvider",
]
