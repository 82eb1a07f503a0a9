"""Get application query with handler."""

from dataclasses import dataclass

from neuroglia.core import OperationResult
from neuroglia.mediation import Query, QueryHandler

from agentlink.application.handler_base import AgentLinkHandlerBase
from agentlink.domain.models import Application
from agentlink.infrastructure import AgentLinkApiClient, AgentLinkApiError


@dataclass
class GetApplicationQuery(Query[OperationResult[Application]]):
    """Query to read an application by id. Not found means it was deleted outside of this provider."""

    application_id: str


class GetApplicationQueryHandler(AgentLinkHandlerBase, QueryHandler[GetApplicationQuery, OperationResult[Application]]):
    def __init__(self, api_client: AgentLinkApiClient):
        super().__init__(api_client)

    async def handle_async(self, request: GetApplicationQuery) -> OperationResult[Application]:
        try:
            application = await self.api_client.get_application_async(request.application_id)
        except AgentLinkApiError as e:
            return self._remote_error("read", "application", e)

        if application is None:
            return self.not_found(Application, request.application_id)
        return self.ok(application)
