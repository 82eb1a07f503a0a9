"""RBAC policy commands with handlers.

An RBAC policy restricts a set of internal tools to callers holding the
given role keys (RBAC_ROLES) or permission keys (RBAC_PERMISSIONS).
"""

import logging
import time
from dataclasses import dataclass, field

from neuroglia.core import OperationResult
from neuroglia.mediation import Command, CommandHandler
from neuroglia.observability.tracing import add_span_attributes

from agentlink.application.handler_base import AgentLinkHandlerBase
from agentlink.domain.enums import RbacPolicyType
from agentlink.domain.models import CreateRbacPolicyRequest, Policy, UpdateRbacPolicyRequest
from agentlink.infrastructure import AgentLinkApiClient, AgentLinkApiError

log = logging.getLogger(__name__)


def _validate_rbac_type(policy_type: str) -> str | None:
    try:
        RbacPolicyType(policy_type)
    except ValueError:
        return f"Invalid RBAC policy type: {policy_type}. Valid types: {', '.join(t.value for t in RbacPolicyType)}"
    return None


@dataclass
class CreateRbacPolicyCommand(Command[OperationResult[Policy]]):
    """Command to create an RBAC policy."""

    name: str

    type: str
    """RBAC_ROLES or RBAC_PERMISSIONS."""

    keys: list[str]
    """Role or permission keys, depending on the type."""

    internal_tool_ids: list[str]
    """Tools the policy applies to. At least one is required."""

    description: str = ""
    enabled: bool = True
    app_ids: list[str] = field(default_factory=list)
    tenant_id: str = ""


class CreateRbacPolicyCommandHandler(AgentLinkHandlerBase, CommandHandler[CreateRbacPolicyCommand, OperationResult[Policy]]):
    def __init__(self, api_client: AgentLinkApiClient):
        super().__init__(api_client)

    async def handle_async(self, request: CreateRbacPolicyCommand) -> OperationResult[Policy]:
        command = request
        start_time = time.time()
        add_span_attributes({"policy.name": command.name, "policy.type": command.type, "policy.tools_count": len(command.internal_tool_ids)})

        if not command.internal_tool_ids:
            log.warning(f"RBAC policy {command.name} rejected: no internal tool ids")
            return self.bad_request("At least one internal_tool_id is required for RBAC policies")

        type_error = _validate_rbac_type(command.type)
        if type_error:
            return self.bad_request(type_error)

        try:
            policy = await self.api_client.create_rbac_policy_async(
                CreateRbacPolicyRequest(
                    name=command.name,
                    type=command.type,
                    keys=command.keys,
                    internal_tool_ids=command.internal_tool_ids,
                    enabled=command.enabled,
                    description=command.description,
                    app_ids=command.app_ids,
                    tenant_id=command.tenant_id,
                )
            )
        except AgentLinkApiError as e:
            return self._remote_error("create", "RBAC policy", e)

        if policy is None:
            return self.internal_server_error("Unable to create RBAC policy: the created policy could not be read back")

        self._record_operation("rbac_policy", "create", start_time)
        return self.created(policy)


@dataclass
class UpdateRbacPolicyCommand(Command[OperationResult[Policy]]):
    """Command to update an RBAC policy. Unset fields are left unchanged."""

    policy_id: str
    name: str | None = None
    description: str | None = None
    enabled: bool | None = None
    app_ids: list[str] | None = None
    tenant_id: str | None = None
    internal_tool_ids: list[str] | None = None
    keys: list[str] | None = None


class UpdateRbacPolicyCommandHandler(AgentLinkHandlerBase, CommandHandler[UpdateRbacPolicyCommand, OperationResult[Policy]]):
    def __init__(self, api_client: AgentLinkApiClient):
        super().__init__(api_client)

    async def handle_async(self, request: UpdateRbacPolicyCommand) -> OperationResult[Policy]:
        command = request
        start_time = time.time()
        add_span_attributes({"policy.id": command.policy_id})

        try:
            policy = await self.api_client.update_rbac_policy_async(
                command.policy_id,
                UpdateRbacPolicyRequest(
                    name=command.name,
                    description=command.description,
                    enabled=command.enabled,
                    app_ids=command.app_ids,
                    tenant_id=command.tenant_id,
                    internal_tool_ids=command.internal_tool_ids,
                    keys=command.keys,
                ),
            )
        except AgentLinkApiError as e:
            return self._remote_error("update", "RBAC policy", e)

        if policy is None:
            return self.not_found(Policy, command.policy_id)

        self._record_operation("rbac_policy", "update", start_time)
        return self.ok(policy)
