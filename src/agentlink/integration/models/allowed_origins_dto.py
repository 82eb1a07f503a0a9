"""Allowed origins DTO."""

from dataclasses import dataclass, field


@dataclass
class AllowedOriginsDto:
    """Vendor-wide CORS allowed origins, identified by the vendor id."""

    id: str
    allowed_origins: list[str] = field(default_factory=list)
