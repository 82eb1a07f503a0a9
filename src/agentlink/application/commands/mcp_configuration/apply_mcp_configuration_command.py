"""Apply MCP configuration command with handler.

The MCP configuration endpoint is create-or-update keyed by application,
so creation and update both go through this command.
"""

import time
from dataclasses import dataclass

from neuroglia.core import OperationResult
from neuroglia.mediation import Command, CommandHandler
from neuroglia.observability.tracing import add_span_attributes

from agentlink.application.handler_base import AgentLinkHandlerBase
from agentlink.domain.models import DEFAULT_MCP_API_TIMEOUT_MS, McpConfiguration, McpConfigurationRequest
from agentlink.infrastructure import AgentLinkApiClient, AgentLinkApiError


@dataclass
class ApplyMcpConfigurationCommand(Command[OperationResult[McpConfiguration]]):
    """Command to create or update the MCP configuration of an application."""

    application_id: str

    base_url: str
    """Base URL tool calls are proxied to."""

    api_timeout: int = DEFAULT_MCP_API_TIMEOUT_MS
    """API timeout in milliseconds."""


class ApplyMcpConfigurationCommandHandler(AgentLinkHandlerBase, CommandHandler[ApplyMcpConfigurationCommand, OperationResult[McpConfiguration]]):
    def __init__(self, api_client: AgentLinkApiClient):
        super().__init__(api_client)

    async def handle_async(self, request: ApplyMcpConfigurationCommand) -> OperationResult[McpConfiguration]:
        command = request
        start_time = time.time()
        add_span_attributes({"mcp_configuration.application_id": command.application_id, "mcp_configuration.base_url": command.base_url})

        try:
            configuration = await self.api_client.apply_mcp_configuration_async(
                McpConfigurationRequest(app_id=command.application_id, base_url=command.base_url, api_timeout=command.api_timeout)
            )
        except AgentLinkApiError as e:
            return self._remote_error("apply", "MCP configuration", e)

        self._record_operation("mcp_configuration", "apply", start_time)
        return self.ok(configuration)
