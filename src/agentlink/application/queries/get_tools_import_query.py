"""Get tools import query with handler.

The API cannot tell which schema produced a source's tools, so the status
is rebuilt locally: the schema hash is recomputed from the file when it
still exists, which lets callers detect that the file changed since the
last import.
"""

import logging
from dataclasses import dataclass

from neuroglia.core import OperationResult
from neuroglia.mediation import Query, QueryHandler

from agentlink.application.handler_base import AgentLinkHandlerBase
from agentlink.application.services import read_schema_file
from agentlink.infrastructure import AgentLinkApiClient
from agentlink.integration.models import UNKNOWN_TOOLS_COUNT, ToolsImportDto

log = logging.getLogger(__name__)


@dataclass
class GetToolsImportQuery(Query[OperationResult[ToolsImportDto]]):
    application_id: str
    source_id: str
    schema_file: str
    schema_type: str

    schema_hash: str = ""
    """Hash recorded at the last import, kept when the file is gone."""

    tools_count: int = UNKNOWN_TOOLS_COUNT


class GetToolsImportQueryHandler(AgentLinkHandlerBase, QueryHandler[GetToolsImportQuery, OperationResult[ToolsImportDto]]):
    def __init__(self, api_client: AgentLinkApiClient):
        super().__init__(api_client)

    async def handle_async(self, request: GetToolsImportQuery) -> OperationResult[ToolsImportDto]:
        query = request
        schema_hash = query.schema_hash
        try:
            schema_hash = read_schema_file(query.schema_file).sha256
        except OSError:
            log.debug(f"Schema file {query.schema_file} is gone, keeping the recorded hash")

        return self.ok(
            ToolsImportDto(
                id=ToolsImportDto.make_id(query.application_id, query.source_id),
                application_id=query.application_id,
                source_id=query.source_id,
                schema_file=query.schema_file,
                schema_type=query.schema_type,
                schema_hash=schema_hash,
                tools_count=query.tools_count,
            )
        )
