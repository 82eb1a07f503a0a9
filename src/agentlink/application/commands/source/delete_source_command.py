"""Delete source command with handler."""

import time
from dataclasses import dataclass

from neuroglia.core import OperationResult
from neuroglia.mediation import Command, CommandHandler
from neuroglia.observability.tracing import add_span_attributes

from agentlink.application.handler_base import AgentLinkHandlerBase
from agentlink.infrastructure import AgentLinkApiClient, AgentLinkApiError


@dataclass
class DeleteSourceCommand(Command[OperationResult]):
    source_id: str
    application_id: str


class DeleteSourceCommandHandler(AgentLinkHandlerBase, CommandHandler[DeleteSourceCommand, OperationResult]):
    def __init__(self, api_client: AgentLinkApiClient):
        super().__init__(api_client)

    async def handle_async(self, request: DeleteSourceCommand) -> OperationResult:
        command = request
        start_time = time.time()
        add_span_attributes({"source.id": command.source_id, "source.application_id": command.application_id})

        try:
            await self.api_client.delete_source_async(command.application_id, command.source_id)
        except AgentLinkApiError as e:
            return self._remote_error("delete", "source", e)

        self._record_operation("source", "delete", start_time)
        return self.no_content()
