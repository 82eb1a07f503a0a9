"""MCP configuration source models."""

from dataclasses import dataclass
from typing import Any

from .payload import compact_payload

DEFAULT_SOURCE_API_TIMEOUT_MS = 3000


@dataclass
class Source:
    """A named upstream endpoint tools are pulled from."""

    id: str
    name: str
    app_id: str = ""
    vendor_id: str = ""
    type: str = ""
    source_url: str = ""
    secret: str = ""
    api_timeout: int = 0
    enabled: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Source":
        return cls(
            id=data.get("id") or "",
            name=data.get("name") or "",
            app_id=data.get("appId") or "",
            vendor_id=data.get("vendorId") or "",
            type=data.get("type") or "",
            source_url=data.get("sourceUrl") or "",
            secret=data.get("secret") or "",
            api_timeout=int(data.get("apiTimeout") or 0),
            enabled=bool(data.get("enabled", False)),
        )


@dataclass
class CreateSourceRequest:
    app_id: str
    name: str
    type: str
    source_url: str
    api_timeout: int = DEFAULT_SOURCE_API_TIMEOUT_MS
    enabled: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "appId": self.app_id,
            "name": self.name,
            "type": self.type,
            "sourceUrl": self.source_url,
            "apiTimeout": self.api_timeout,
            "enabled": self.enabled,
        }


@dataclass
class UpdateSourceRequest:
    app_id: str
    name: str | None = None
    type: str | None = None
    source_url: str | None = None
    api_timeout: int | None = None
    enabled: bool | None = None

    def to_dict(self) -> dict[str, Any]:
        return compact_payload(
            {
                "appId": self.app_id,
                "name": self.name,
                "type": self.type,
                "sourceUrl": self.source_url,
                "apiTimeout": self.api_timeout or None,
                "enabled": self.enabled,
            },
            required=("appId",),
        )
