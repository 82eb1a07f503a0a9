"""Vendor-wide settings: allowed origins and identity configuration."""

from dataclasses import dataclass, field
from typing import Any


def normalize_origin(origin: str) -> str:
    """Strip the trailing slash the API appends to stored origins."""
    return origin.removesuffix("/")


@dataclass
class VendorConfig:
    id: str
    name: str = ""
    allowed_origins: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "VendorConfig":
        return cls(
            id=data.get("id") or "",
            name=data.get("name") or "",
            allowed_origins=list(data.get("allowedOrigins") or []),
        )

    @property
    def normalized_origins(self) -> list[str]:
        return [normalize_origin(origin) for origin in self.allowed_origins]


@dataclass
class IdentityConfiguration:
    id: str
    default_token_expiration: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "IdentityConfiguration":
        return cls(
            id=data.get("id") or "",
            default_token_expiration=int(data.get("defaultTokenExpiration") or 0),
        )


@dataclass
class UpdateIdentityConfigurationRequest:
    default_token_expiration: int | None = None

    def to_dict(self) -> dict[str, Any]:
        if self.default_token_expiration is None:
            return {}
        return {"defaultTokenExpiration": self.default_token_expiration}
