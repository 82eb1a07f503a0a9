"""Conditional policy commands with handlers.

A conditional policy evaluates its targeting conditions against each tool
call and applies the ``then`` result (e.g. require approval) on a match.
"""

import time
from dataclasses import dataclass, field
from typing import Any

from neuroglia.core import OperationResult
from neuroglia.mediation import Command, CommandHandler
from neuroglia.observability.tracing import add_span_attributes

from agentlink.application.handler_base import AgentLinkHandlerBase
from agentlink.domain.models import CreateConditionalPolicyRequest, Policy, PolicyTargeting, UpdateConditionalPolicyRequest
from agentlink.infrastructure import AgentLinkApiClient, AgentLinkApiError


@dataclass
class CreateConditionalPolicyCommand(Command[OperationResult[Policy]]):
    """Command to create a conditional policy."""

    name: str
    targeting: PolicyTargeting | None = None
    internal_tool_ids: list[str] = field(default_factory=list)
    description: str = ""
    enabled: bool = True
    app_ids: list[str] = field(default_factory=list)
    tenant_id: str = ""
    metadata: dict[str, Any] | None = None


class CreateConditionalPolicyCommandHandler(AgentLinkHandlerBase, CommandHandler[CreateConditionalPolicyCommand, OperationResult[Policy]]):
    def __init__(self, api_client: AgentLinkApiClient):
        super().__init__(api_client)

    async def handle_async(self, request: CreateConditionalPolicyCommand) -> OperationResult[Policy]:
        command = request
        start_time = time.time()
        add_span_attributes(
            {
                "policy.name": command.name,
                "policy.conditions_count": len(command.targeting.conditions) if command.targeting else 0,
            }
        )

        try:
            policy = await self.api_client.create_conditional_policy_async(
                CreateConditionalPolicyRequest(
                    name=command.name,
                    internal_tool_ids=command.internal_tool_ids,
                    enabled=command.enabled,
                    description=command.description,
                    app_ids=command.app_ids,
                    tenant_id=command.tenant_id,
                    targeting=command.targeting,
                    metadata=command.metadata,
                )
            )
        except AgentLinkApiError as e:
            return self._remote_error("create", "conditional policy", e)

        if policy is None:
            return self.internal_server_error("Unable to create conditional policy: the created policy could not be read back")

        self._record_operation("conditional_policy", "create", start_time)
        return self.created(policy)


@dataclass
class UpdateConditionalPolicyCommand(Command[OperationResult[Policy]]):
    """Command to update a conditional policy. Unset fields are left unchanged."""

    policy_id: str
    name: str | None = None
    description: str | None = None
    enabled: bool | None = None
    app_ids: list[str] | None = None
    tenant_id: str | None = None
    internal_tool_ids: list[str] | None = None
    targeting: PolicyTargeting | None = None
    metadata: dict[str, Any] | None = None


class UpdateConditionalPolicyCommandHandler(AgentLinkHandlerBase, CommandHandler[UpdateConditionalPolicyCommand, OperationResult[Policy]]):
    def __init__(self, api_client: AgentLinkApiClient):
        super().__init__(api_client)

    async def handle_async(self, request: UpdateConditionalPolicyCommand) -> OperationResult[Policy]:
        command = request
        start_time = time.time()
        add_span_attributes({"policy.id": command.policy_id})

        try:
            policy = await self.api_client.update_conditional_policy_async(
                command.policy_id,
                UpdateConditionalPolicyRequest(
                    name=command.name,
                    description=command.description,
                    enabled=command.enabled,
                    app_ids=command.app_ids,
                    tenant_id=command.tenant_id,
                    internal_tool_ids=command.internal_tool_ids,
                    targeting=command.targeting,
                    metadata=command.metadata,
                ),
            )
        except AgentLinkApiError as e:
            return self._remote_error("update", "conditional policy", e)

        if policy is None:
            return self.not_found(Policy, command.policy_id)

        self._record_operation("conditional_policy", "update", start_time)
        return self.ok(policy)
