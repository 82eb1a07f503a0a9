"""Delete MCP configuration command with handler."""

import logging
from dataclasses import dataclass

from neuroglia.core import OperationResult
from neuroglia.mediation import Command, CommandHandler

from agentlink.application.handler_base import AgentLinkHandlerBase
from agentlink.infrastructure import AgentLinkApiClient

log = logging.getLogger(__name__)


@dataclass
class DeleteMcpConfigurationCommand(Command[OperationResult]):
    """Forget an MCP configuration.

    The API has no delete endpoint; the configuration stays in Frontegg and
    is removed with its application.
    """

    application_id: str


class DeleteMcpConfigurationCommandHandler(AgentLinkHandlerBase, CommandHandler[DeleteMcpConfigurationCommand, OperationResult]):
    def __init__(self, api_client: AgentLinkApiClient):
        super().__init__(api_client)

    async def handle_async(self, request: DeleteMcpConfigurationCommand) -> OperationResult:
        log.info(f"MCP configuration of application {request.application_id} released without a remote call")
        return self.no_content()
