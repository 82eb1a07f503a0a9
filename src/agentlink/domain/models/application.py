"""Application models.

An application is the Frontegg entity every AgentLink source, tool and
MCP configuration hangs off.
"""

from dataclasses import dataclass, field
from typing import Any

from .payload import compact_payload


@dataclass
class Application:
    """Application as returned by ``/applications/resources/applications/v1``."""

    id: str
    name: str
    vendor_id: str = ""
    app_url: str = ""
    login_url: str = ""
    logo_url: str = ""
    access_type: str = ""
    is_default: bool = False
    is_active: bool = False
    type: str = ""
    frontend_stack: str = ""
    description: str = ""
    created_at: str = ""
    updated_at: str = ""
    integration_finished_at: str = ""
    metadata: dict[str, Any] = field(default_factory=dict)
    app_host: str = ""
    allow_dcr: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Application":
        return cls(
            id=data.get("id") or "",
            name=data.get("name") or "",
            vendor_id=data.get("vendorId") or "",
            app_url=data.get("appURL") or "",
            login_url=data.get("loginURL") or "",
            logo_url=data.get("logoURL") or "",
            access_type=data.get("accessType") or "",
            is_default=bool(data.get("isDefault", False)),
            is_active=bool(data.get("isActive", False)),
            type=data.get("type") or "",
            frontend_stack=data.get("frontendStack") or "",
            description=data.get("description") or "",
            created_at=data.get("createdAt") or "",
            updated_at=data.get("updatedAt") or "",
            integration_finished_at=data.get("integrationFinishedAt") or "",
            metadata=data.get("metadata") or {},
            app_host=data.get("appHost") or "",
            allow_dcr=bool(data.get("allowDcr", False)),
        )


@dataclass
class CreateApplicationRequest:
    """Body of the application create call."""

    name: str
    app_url: str
    login_url: str
    logo_url: str | None = None
    access_type: str | None = None
    is_default: bool | None = None
    is_active: bool | None = None
    type: str | None = None
    frontend_stack: str | None = None
    description: str | None = None
    metadata: dict[str, Any] | None = None
    allow_dcr: bool | None = None

    def to_dict(self) -> dict[str, Any]:
        return compact_payload(
            {
                "name": self.name,
                "appURL": self.app_url,
                "loginURL": self.login_url,
                "logoURL": self.logo_url,
                "accessType": self.access_type,
                "isDefault": self.is_default,
                "isActive": self.is_active,
                "type": self.type,
                "frontendStack": self.frontend_stack,
                "description": self.description,
                "metadata": self.metadata,
                "allowDcr": self.allow_dcr,
            },
            required=("name", "appURL", "loginURL"),
        )


@dataclass
class UpdateApplicationRequest:
    """Body of the application PATCH call.

    The API does not accept ``frontendStack`` or ``metadata`` on update.
    """

    name: str | None = None
    app_url: str | None = None
    login_url: str | None = None
    logo_url: str | None = None
    access_type: str | None = None
    is_default: bool | None = None
    is_active: bool | None = None
    type: str | None = None
    description: str | None = None
    allow_dcr: bool | None = None

    def to_dict(self) -> dict[str, Any]:
        return compact_payload(
            {
                "name": self.name,
                "appURL": self.app_url,
                "loginURL": self.login_url,
                "logoURL": self.logo_url,
                "accessType": self.access_type,
                "isDefault": self.is_default,
                "isActive": self.is_active,
                "type": self.type,
                "description": self.description,
                "allowDcr": self.allow_dcr,
            }
        )
