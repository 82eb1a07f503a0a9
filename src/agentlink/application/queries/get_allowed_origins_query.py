"""Get allowed origins query with handler."""

from dataclasses import dataclass

from neuroglia.core import OperationResult
from neuroglia.mediation import Query, QueryHandler

from agentlink.application.handler_base import AgentLinkHandlerBase
from agentlink.infrastructure import AgentLinkApiClient, AgentLinkApiError
from agentlink.integration.models import AllowedOriginsDto


@dataclass
class GetAllowedOriginsQuery(Query[OperationResult[AllowedOriginsDto]]):
    """Query the vendor's allowed origins, with trailing slashes trimmed."""


class GetAllowedOriginsQueryHandler(AgentLinkHandlerBase, QueryHandler[GetAllowedOriginsQuery, OperationResult[AllowedOriginsDto]]):
    def __init__(self, api_client: AgentLinkApiClient):
        super().__init__(api_client)

    async def handle_async(self, request: GetAllowedOriginsQuery) -> OperationResult[AllowedOriginsDto]:
        try:
            config = await self.api_client.get_vendor_config_async()
        except AgentLinkApiError as e:
            return self._remote_error("read", "vendor config", e)

        return self.ok(AllowedOriginsDto(id=config.id, allowed_origins=config.normalized_origins))
