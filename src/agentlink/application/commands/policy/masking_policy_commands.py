"""Masking policy commands with handlers.

A masking policy redacts sensitive values, picked by detector, from the
responses of the tools it targets.
"""

import time
from dataclasses import dataclass, field
from typing import Any

from neuroglia.core import OperationResult
from neuroglia.mediation import Command, CommandHandler
from neuroglia.observability.tracing import add_span_attributes

from agentlink.application.handler_base import AgentLinkHandlerBase
from agentlink.domain.enums import MaskingDetector
from agentlink.domain.models import CreateMaskingPolicyRequest, MaskingPolicyConfiguration, Policy, PolicyTargeting, UpdateMaskingPolicyRequest
from agentlink.infrastructure import AgentLinkApiClient, AgentLinkApiError


def parse_detectors(detectors: list[str]) -> MaskingPolicyConfiguration:
    """Build a masking configuration from detector names.

    Raises:
        ValueError: If a name is not a known detector
    """
    enabled: set[MaskingDetector] = set()
    for name in detectors:
        try:
            enabled.add(MaskingDetector(name))
        except ValueError:
            raise ValueError(f"Unknown masking detector: {name}. Valid detectors: {', '.join(d.value for d in MaskingDetector)}") from None
    return MaskingPolicyConfiguration(detectors=enabled)


@dataclass
class CreateMaskingPolicyCommand(Command[OperationResult[Policy]]):
    """Command to create a masking policy."""

    name: str

    detectors: list[str]
    """Enabled detectors, e.g. ["creditCard", "emailAddress"]."""

    internal_tool_ids: list[str] = field(default_factory=list)
    description: str = ""
    enabled: bool = True
    app_ids: list[str] = field(default_factory=list)
    tenant_id: str = ""
    targeting: PolicyTargeting | None = None
    metadata: dict[str, Any] | None = None


class CreateMaskingPolicyCommandHandler(AgentLinkHandlerBase, CommandHandler[CreateMaskingPolicyCommand, OperationResult[Policy]]):
    def __init__(self, api_client: AgentLinkApiClient):
        super().__init__(api_client)

    async def handle_async(self, request: CreateMaskingPolicyCommand) -> OperationResult[Policy]:
        command = request
        start_time = time.time()
        add_span_attributes({"policy.name": command.name, "policy.detectors": ",".join(command.detectors)})

        try:
            configuration = parse_detectors(command.detectors)
        except ValueError as e:
            return self.bad_request(str(e))

        try:
            policy = await self.api_client.create_masking_policy_async(
                CreateMaskingPolicyRequest(
                    name=command.name,
                    policy_configuration=configuration,
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
            return self._remote_error("create", "masking policy", e)

        if policy is None:
            return self.internal_server_error("Unable to create masking policy: the created policy could not be read back")

        self._record_operation("masking_policy", "create", start_time)
        return self.created(policy)


@dataclass
class UpdateMaskingPolicyCommand(Command[OperationResult[Policy]]):
    """Command to update a masking policy. Unset fields are left unchanged."""

    policy_id: str
    name: str | None = None
    description: str | None = None
    enabled: bool | None = None
    app_ids: list[str] | None = None
    tenant_id: str | None = None
    internal_tool_ids: list[str] | None = None
    detectors: list[str] | None = None
    targeting: PolicyTargeting | None = None
    metadata: dict[str, Any] | None = None


class UpdateMaskingPolicyCommandHandler(AgentLinkHandlerBase, CommandHandler[UpdateMaskingPolicyCommand, OperationResult[Policy]]):
    def __init__(self, api_client: AgentLinkApiClient):
        super().__init__(api_client)

    async def handle_async(self, request: UpdateMaskingPolicyCommand) -> OperationResult[Policy]:
        command = request
        start_time = time.time()
        add_span_attributes({"policy.id": command.policy_id})

        configuration = None
        if command.detectors is not None:
            try:
                configuration = parse_detectors(command.detectors)
            except ValueError as e:
                return self.bad_request(str(e))

        try:
            policy = await self.api_client.update_masking_policy_async(
                command.policy_id,
                UpdateMaskingPolicyRequest(
                    name=command.name,
                    description=command.description,
                    enabled=command.enabled,
                    app_ids=command.app_ids,
                    tenant_id=command.tenant_id,
                    internal_tool_ids=command.internal_tool_ids,
                    targeting=command.targeting,
                    policy_configuration=configuration,
                    metadata=command.metadata,
                ),
            )
        except AgentLinkApiError as e:
            return self._remote_error("update", "masking policy", e)

        if policy is None:
            return self.not_found(Policy, command.policy_id)

        self._record_operation("masking_policy", "update", start_time)
        return self.ok(policy)
