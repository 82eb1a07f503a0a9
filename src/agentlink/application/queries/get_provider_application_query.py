"""Get provider application query with handler."""

from dataclasses import dataclass

from neuroglia.core import OperationResult
from neuroglia.mediation import Query, QueryHandler

from agentlink.application.handler_base import AgentLinkHandlerBase
from agentlink.infrastructure import AgentLinkApiClient
from agentlink.integration.models import ProviderApplicationDto


@dataclass
class GetProviderApplicationQuery(Query[OperationResult[ProviderApplicationDto]]):
    """Query the application the provider resolved from ``application_name`` at startup.

    Makes no remote call. Both fields are None when no application is configured.
    """


class GetProviderApplicationQueryHandler(AgentLinkHandlerBase, QueryHandler[GetProviderApplicationQuery, OperationResult[ProviderApplicationDto]]):
    def __init__(self, api_client: AgentLinkApiClient):
        super().__init__(api_client)

    async def handle_async(self, request: GetProviderApplicationQuery) -> OperationResult[ProviderApplicationDto]:
        return self.ok(
            ProviderApplicationDto(
                id=self.api_client.application_id or None,
                name=self.api_client.application_name or None,
            )
        )
