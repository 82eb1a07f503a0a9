"""Provider application DTO."""

from dataclasses import dataclass


@dataclass
class ProviderApplicationDto:
    """Application resolved at provider startup (None when no application_name is configured)."""

    id: str | None = None
    name: str | None = None
