"""Create source command with handler.

Registers an upstream endpoint under an application's MCP configuration.
Tools are not discovered here; see ImportToolsCommand.
"""

import logging
import time
from dataclasses import dataclass

from neuroglia.core import OperationResult
from neuroglia.mediation import Command, CommandHandler
from neuroglia.observability.tracing import add_span_attributes

from agentlink.application.handler_base import AgentLinkHandlerBase
from agentlink.domain.enums import SourceType
from agentlink.domain.models import DEFAULT_SOURCE_API_TIMEOUT_MS, CreateSourceRequest, Source
from agentlink.infrastructure import AgentLinkApiClient, AgentLinkApiError

log = logging.getLogger(__name__)


@dataclass
class CreateSourceCommand(Command[OperationResult[Source]]):
    """Command to create a source."""

    application_id: str
    """Application the source belongs to."""

    name: str

    type: str
    """Source type: REST, GRAPHQL, MOCK, MCP_PROXY, FRONTEGG or CUSTOM_INTEGRATION."""

    source_url: str

    api_timeout: int = DEFAULT_SOURCE_API_TIMEOUT_MS
    """API timeout in milliseconds."""

    enabled: bool = True


class CreateSourceCommandHandler(AgentLinkHandlerBase, CommandHandler[CreateSourceCommand, OperationResult[Source]]):
    def __init__(self, api_client: AgentLinkApiClient):
        super().__init__(api_client)

    async def handle_async(self, request: CreateSourceCommand) -> OperationResult[Source]:
        command = request
        start_time = time.time()
        add_span_attributes({"source.name": command.name, "source.type": command.type, "source.application_id": command.application_id})

        try:
            SourceType(command.type)
        except ValueError:
            log.warning(f"Invalid source type: {command.type}")
            return self.bad_request(f"Invalid source type: {command.type}. Valid types: {', '.join(t.value for t in SourceType)}")

        try:
            source = await self.api_client.create_source_async(
                CreateSourceRequest(
                    app_id=command.application_id,
                    name=command.name,
                    type=command.type,
                    source_url=command.source_url,
                    api_timeout=command.api_timeout,
                    enabled=command.enabled,
                )
            )
        except AgentLinkApiError as e:
            return self._remote_error("create", "source", e)

        self._record_operation("source", "create", start_time)
        return self.created(source)
