"""Update source command with handler."""

import time
from dataclasses import dataclass

from neuroglia.core import OperationResult
from neuroglia.mediation import Command, CommandHandler
from neuroglia.observability.tracing import add_span_attributes

from agentlink.application.handler_base import AgentLinkHandlerBase
from agentlink.domain.models import Source, UpdateSourceRequest
from agentlink.infrastructure import AgentLinkApiClient, AgentLinkApiError


@dataclass
class UpdateSourceCommand(Command[OperationResult[Source]]):
    """Command to update a source. Unset fields are left unchanged."""

    source_id: str
    application_id: str
    name: str | None = None
    type: str | None = None
    source_url: str | None = None
    api_timeout: int | None = None
    enabled: bool | None = None


class UpdateSourceCommandHandler(AgentLinkHandlerBase, CommandHandler[UpdateSourceCommand, OperationResult[Source]]):
    def __init__(self, api_client: AgentLinkApiClient):
        super().__init__(api_client)

    async def handle_async(self, request: UpdateSourceCommand) -> OperationResult[Source]:
        command = request
        start_time = time.time()
        add_span_attributes({"source.id": command.source_id, "source.application_id": command.application_id})

        try:
            source = await self.api_client.update_source_async(
                command.source_id,
                UpdateSourceRequest(
                    app_id=command.application_id,
                    name=command.name,
                    type=command.type,
                    source_url=command.source_url,
                    api_timeout=command.api_timeout,
                    enabled=command.enabled,
                ),
            )
        except AgentLinkApiError as e:
            return self._remote_error("update", "source", e)

        self._record_operation("source", "update", start_time)
        return self.ok(source)
