"""Get source query with handler."""

from dataclasses import dataclass

from neuroglia.core import OperationResult
from neuroglia.mediation import Query, QueryHandler

from agentlink.application.handler_base import AgentLinkHandlerBase
from agentlink.domain.models import Source
from agentlink.infrastructure import AgentLinkApiClient, AgentLinkApiError


@dataclass
class GetSourceQuery(Query[OperationResult[Source]]):
    """Query to read a source of an application by id."""

    application_id: str
    source_id: str


class GetSourceQueryHandler(AgentLinkHandlerBase, QueryHandler[GetSourceQuery, OperationResult[Source]]):
    def __init__(self, api_client: AgentLinkApiClient):
        super().__init__(api_client)

    async def handle_async(self, request: GetSourceQuery) -> OperationResult[Source]:
        try:
            source = await self.api_client.get_source_async(request.application_id, request.source_id)
        except AgentLinkApiError as e:
            return self._remote_error("read", "source", e)

        if source is None:
            return self.not_found(Source, request.source_id)
        return self.ok(source)


@dataclass
class GetSourcesQuery(Query[OperationResult[list[Source]]]):
    """Query to list the sources of an application."""

    application_id: str


class GetSourcesQueryHandler(AgentLinkHandlerBase, QueryHandler[GetSourcesQuery, OperationResult[list[Source]]]):
    def __init__(self, api_client: AgentLinkApiClient):
        super().__init__(api_client)

    async def handle_async(self, request: GetSourcesQuery) -> OperationResult[list[Source]]:
        try:
            sources = await self.api_client.get_sources_async(request.application_id)
        except AgentLinkApiError as e:
            return self._remote_error("read", "sources", e)
        return self.ok(sources)
