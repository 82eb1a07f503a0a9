"""Internal tool models.

Internal tools are produced by importing an OpenAPI or GraphQL schema and
then persisted through the upsert endpoint.
"""

from dataclasses import dataclass, field
from typing import Any

from .payload import compact_payload


@dataclass
class InternalTool:
    name: str
    description: str = ""
    id: str = ""
    vendor_id: str = ""
    app_id: str = ""
    original_method: str = ""
    original_path: str = ""
    is_active: bool = False
    schema: dict[str, Any] = field(default_factory=dict)
    authentication_type: str = ""
    source_id: str = ""

    def to_dict(self) -> dict[str, Any]:
        return compact_payload(
            {
                "id": self.id,
                "vendorId": self.vendor_id,
                "appId": self.app_id,
                "name": self.name,
                "description": self.description,
                "originalMethod": self.original_method,
                "originalPath": self.original_path,
                "isActive": self.is_active,
                "schema": self.schema,
                "authenticationType": self.authentication_type,
                "sourceId": self.source_id,
            },
            required=("name", "description", "isActive"),
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "InternalTool":
        return cls(
            id=data.get("id") or "",
            vendor_id=data.get("vendorId") or "",
            app_id=data.get("appId") or "",
            name=data.get("name") or "",
            description=data.get("description") or "",
            original_method=data.get("originalMethod") or "",
            original_path=data.get("originalPath") or "",
            is_active=bool(data.get("isActive", False)),
            schema=data.get("schema") or {},
            authentication_type=data.get("authenticationType") or "",
            source_id=data.get("sourceId") or "",
        )


@dataclass
class UpsertToolsRequest:
    app_id: str
    tools: list[InternalTool]
    tool_type: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return compact_payload(
            {
                "appId": self.app_id,
                "toolType": self.tool_type,
                "tools": [tool.to_dict() for tool in self.tools],
            },
            required=("appId", "tools"),
        )
