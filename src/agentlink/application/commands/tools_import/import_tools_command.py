"""Import tools command with handler.

Uploads a schema file (OpenAPI or GraphQL) for a source, then upserts the
discovered tools with the source id stamped on each of them. Running the
command again re-imports the file, which is how schema changes are applied.
"""

import logging
import time
from dataclasses import dataclass

from neuroglia.core import OperationResult
from neuroglia.mediation import Command, CommandHandler
from neuroglia.observability.tracing import add_span_attributes
from opentelemetry import trace

from agentlink.application.handler_base import AgentLinkHandlerBase
from agentlink.application.services import read_schema_file
from agentlink.domain.enums import SchemaType
from agentlink.infrastructure import AgentLinkApiClient, AgentLinkApiError
from agentlink.integration.models import UNKNOWN_TOOLS_COUNT, ToolsImportDto

log = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)


@dataclass
class ImportToolsCommand(Command[OperationResult[ToolsImportDto]]):
    """Command to import the tools described by a schema file into a source."""

    application_id: str

    source_id: str

    schema_file: str
    """Path to the schema file."""

    schema_type: str
    """'openapi' for REST sources, 'graphql' for GRAPHQL sources."""


class ImportToolsCommandHandler(AgentLinkHandlerBase, CommandHandler[ImportToolsCommand, OperationResult[ToolsImportDto]]):
    def __init__(self, api_client: AgentLinkApiClient):
        super().__init__(api_client)

    async def handle_async(self, request: ImportToolsCommand) -> OperationResult[ToolsImportDto]:
        command = request
        start_time = time.time()
        add_span_attributes(
            {
                "tools_import.application_id": command.application_id,
                "tools_import.source_id": command.source_id,
                "tools_import.schema_type": command.schema_type,
            }
        )

        try:
            schema_file = read_schema_file(command.schema_file)
        except OSError as e:
            log.warning(f"Unable to read schema file {command.schema_file}: {e}")
            return self.bad_request(f"Unable to read schema file: {e}")

        try:
            schema_type = SchemaType(command.schema_type)
        except ValueError:
            return self.bad_request("schema_type must be 'openapi' or 'graphql'")

        with tracer.start_as_current_span("import_tools") as span:
            try:
                tools = await self.api_client.import_and_upsert_schema_async(
                    command.application_id,
                    command.source_id,
                    schema_type.source_type.value,
                    schema_file.content,
                    schema_file.filename,
                )
            except AgentLinkApiError as e:
                return self._remote_error("import", "schema", e)
            span.set_attribute("tools_import.tools_discovered", len(tools))

        dto = ToolsImportDto(
            id=ToolsImportDto.make_id(command.application_id, command.source_id),
            application_id=command.application_id,
            source_id=command.source_id,
            schema_file=command.schema_file,
            schema_type=schema_type.value,
            schema_hash=schema_file.sha256,
            # The import response is not a reliable count of persisted tools
            tools_count=UNKNOWN_TOOLS_COUNT,
        )

        self._record_operation("tools_import", "import", start_time)
        log.info(f"Imported {len(tools)} tools into source {command.source_id} from {schema_file.filename}")
        return self.ok(dto)
