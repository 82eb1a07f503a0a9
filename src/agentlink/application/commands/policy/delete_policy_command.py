"""Delete policy command with handler."""

import time
from dataclasses import dataclass

from neuroglia.core import OperationResult
from neuroglia.mediation import Command, CommandHandler
from neuroglia.observability.tracing import add_span_attributes

from agentlink.application.handler_base import AgentLinkHandlerBase
from agentlink.infrastructure import AgentLinkApiClient, AgentLinkApiError


@dataclass
class DeletePolicyCommand(Command[OperationResult]):
    """Command to delete a policy of any type (RBAC, masking or conditional)."""

    policy_id: str

    policy_kind: str = "policy"
    """Used in error messages only, e.g. "RBAC policy"."""


class DeletePolicyCommandHandler(AgentLinkHandlerBase, CommandHandler[DeletePolicyCommand, OperationResult]):
    def __init__(self, api_client: AgentLinkApiClient):
        super().__init__(api_client)

    async def handle_async(self, request: DeletePolicyCommand) -> OperationResult:
        command = request
        start_time = time.time()
        add_span_attributes({"policy.id": command.policy_id})

        try:
            await self.api_client.delete_policy_async(command.policy_id)
        except AgentLinkApiError as e:
            return self._remote_error("delete", command.policy_kind, e)

        self._record_operation("policy", "delete", start_time)
        return self.no_content()
