"""Get MCP configuration query with handler."""

from dataclasses import dataclass

from neuroglia.core import OperationResult
from neuroglia.mediation import Query, QueryHandler

from agentlink.application.handler_base import AgentLinkHandlerBase
from agentlink.domain.models import McpConfiguration
from agentlink.infrastructure import AgentLinkApiClient, AgentLinkApiError


@dataclass
class GetMcpConfigurationQuery(Query[OperationResult[McpConfiguration]]):
    application_id: str


class GetMcpConfigurationQueryHandler(AgentLinkHandlerBase, QueryHandler[GetMcpConfigurationQuery, OperationResult[McpConfiguration]]):
    def __init__(self, api_client: AgentLinkApiClient):
        super().__init__(api_client)

    async def handle_async(self, request: GetMcpConfigurationQuery) -> OperationResult[McpConfiguration]:
        try:
            configuration = await self.api_client.get_mcp_configuration_async(request.application_id)
        except AgentLinkApiError as e:
            return self._remote_error("read", "MCP configuration", e)

        if configuration is None:
            return self.not_found(McpConfiguration, request.application_id)
        return self.ok(configuration)
