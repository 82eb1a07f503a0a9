"""Delete application command with handler."""

import time
from dataclasses import dataclass

from neuroglia.core import OperationResult
from neuroglia.mediation import Command, CommandHandler
from neuroglia.observability.tracing import add_span_attributes

from agentlink.application.handler_base import AgentLinkHandlerBase
from agentlink.infrastructure import AgentLinkApiClient, AgentLinkApiError


@dataclass
class DeleteApplicationCommand(Command[OperationResult]):
    """Command to delete an application."""

    application_id: str


class DeleteApplicationCommandHandler(AgentLinkHandlerBase, CommandHandler[DeleteApplicationCommand, OperationResult]):
    def __init__(self, api_client: AgentLinkApiClient):
        super().__init__(api_client)

    async def handle_async(self, request: DeleteApplicationCommand) -> OperationResult:
        command = request
        start_time = time.time()
        add_span_attributes({"application.id": command.application_id})

        try:
            await self.api_client.delete_application_async(command.application_id)
        except AgentLinkApiError as e:
            return self._remote_error("delete", "application", e)

        self._record_operation("application", "delete", start_time)
        return self.no_content()
