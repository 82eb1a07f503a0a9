"""Get identity configuration query with handler."""

from dataclasses import dataclass

from neuroglia.core import OperationResult
from neuroglia.mediation import Query, QueryHandler

from agentlink.application.handler_base import AgentLinkHandlerBase
from agentlink.domain.models import IdentityConfiguration
from agentlink.infrastructure import AgentLinkApiClient, AgentLinkApiError


@dataclass
class GetIdentityConfigurationQuery(Query[OperationResult[IdentityConfiguration]]):
    pass


class GetIdentityConfigurationQueryHandler(AgentLinkHandlerBase, QueryHandler[GetIdentityConfigurationQuery, OperationResult[IdentityConfiguration]]):
    def __init__(self, api_client: AgentLinkApiClient):
        super().__init__(api_client)

    async def handle_async(self, request: GetIdentityConfigurationQuery) -> OperationResult[IdentityConfiguration]:
        try:
            config = await self.api_client.get_identity_configuration_async()
        except AgentLinkApiError as e:
            return self._remote_error("read", "identity configuration", e)
        return self.ok(config)
