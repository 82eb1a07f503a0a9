"""Test data factories.

Build AgentLink API payloads (camelCase dicts, as the API returns them) and
the matching domain models, with sensible defaults that can be overridden.
"""

from typing import Any
from uuid import uuid4

from agentlink.domain.models import Application, InternalTool, Policy, Source

# ============================================================================
# APPLICATION FACTORY
# ============================================================================


class ApplicationFactory:
    """Factory for application payloads and models."""

    @staticmethod
    def payload(app_id: str | None = None, name: str = "Test Application", **overrides: Any) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "id": app_id or str(uuid4()),
            "name": name,
            "vendorId": "vendor-1",
            "appURL": "https://app.example.com",
            "loginURL": "https://app.example.com/login",
            "accessType": "FREE_ACCESS",
            "isDefault": False,
            "isActive": True,
            "type": "agent",
            "frontendStack": "react",
            "createdAt": "2024-01-01T00:00:00Z",
            "updatedAt": "2024-01-01T00:00:00Z",
        }
        payload.update(overrides)
        return payload

    @staticmethod
    def create(app_id: str | None = None, name: str = "Test Application", **overrides: Any) -> Application:
        return Application.from_dict(ApplicationFactory.payload(app_id, name, **overrides))


# ============================================================================
# SOURCE FACTORY
# ============================================================================


class SourceFactory:
    """Factory for source payloads and models."""

    @staticmethod
    def payload(source_id: str | None = None, name: str = "Test Source", app_id: str = "app-1", **overrides: Any) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "id": source_id or str(uuid4()),
            "name": name,
            "appId": app_id,
            "vendorId": "vendor-1",
            "type": "REST",
            "sourceUrl": "https://api.example.com",
            "apiTimeout": 3000,
            "enabled": True,
        }
        payload.update(overrides)
        return payload

    @staticmethod
    def create(source_id: str | None = None, name: str = "Test Source", app_id: str = "app-1", **overrides: Any) -> Source:
        return Source.from_dict(SourceFactory.payload(source_id, name, app_id, **overrides))


# ============================================================================
# TOOL FACTORY
# ============================================================================


class ToolFactory:
    """Factory for internal tool payloads."""

    @staticmethod
    def payload(tool_id: str | None = None, name: str = "get_users", **overrides: Any) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "id": tool_id or str(uuid4()),
            "name": name,
            "description": f"Tool {name}",
            "originalMethod": "GET",
            "originalPath": f"/{name}",
            "isActive": True,
            "schema": {"type": "object"},
        }
        payload.update(overrides)
        return payload

    @staticmethod
    def create_many(count: int) -> list[InternalTool]:
        return [InternalTool.from_dict(ToolFactory.payload(tool_id=f"tool-{i + 1}", name=f"tool_{i + 1}")) for i in range(count)]


# ============================================================================
# POLICY FACTORY
# ============================================================================


class PolicyFactory:
    """Factory for policy payloads and models."""

    @staticmethod
    def payload(policy_id: str | None = None, name: str = "Test Policy", **overrides: Any) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "id": policy_id or str(uuid4()),
            "name": name,
            "type": "CONDITIONAL",
            "enabled": True,
            "vendorId": "vendor-1",
            "appIds": ["app-1"],
            "internalToolIds": ["tool-1"],
            "createdAt": "2024-01-01T00:00:00Z",
            "updatedAt": "2024-01-01T00:00:00Z",
        }
        payload.update(overrides)
        return payload

    @staticmethod
    def create(policy_id: str | None = None, name: str = "Test Policy", **overrides: Any) -> Policy:
        return Policy.from_dict(PolicyFactory.payload(policy_id, name, **overrides))
