"""MCP configuration models."""

from dataclasses import dataclass
from typing import Any

DEFAULT_MCP_API_TIMEOUT_MS = 5000


@dataclass
class McpConfiguration:
    """Per-application MCP configuration: where tool calls are proxied."""

    id: str
    app_id: str
    base_url: str = ""
    api_timeout: int = 0
    vendor_id: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "McpConfiguration":
        return cls(
            id=data.get("id") or "",
            app_id=data.get("appId") or "",
            base_url=data.get("baseUrl") or "",
            api_timeout=int(data.get("apiTimeout") or 0),
            vendor_id=data.get("vendorId") or "",
        )


@dataclass
class McpConfigurationRequest:
    """Body of the create-or-update call (the endpoint is idempotent per app)."""

    app_id: str
    base_url: str
    api_timeout: int = DEFAULT_MCP_API_TIMEOUT_MS

    def to_dict(self) -> dict[str, Any]:
        return {"appId": self.app_id, "baseUrl": self.base_url, "apiTimeout": self.api_timeout}
