"""Delete tools import command with handler."""

import time
from dataclasses import dataclass, field

from neuroglia.core import OperationResult
from neuroglia.mediation import Command, CommandHandler
from neuroglia.observability.tracing import add_span_attributes

from agentlink.application.handler_base import AgentLinkHandlerBase
from agentlink.infrastructure import AgentLinkApiClient, AgentLinkApiError

CLEANUP_WARNING = "Cleanup Warning"


@dataclass
class ToolsCleanupResult:
    """Outcome of a best effort tools cleanup."""

    warnings: list[str] = field(default_factory=list)


@dataclass
class DeleteToolsImportCommand(Command[OperationResult[ToolsCleanupResult]]):
    """Delete every tool imported into a source.

    Cleanup is best effort: failures are reported as warnings and never fail
    the command.
    """

    application_id: str
    source_id: str


class DeleteToolsImportCommandHandler(AgentLinkHandlerBase, CommandHandler[DeleteToolsImportCommand, OperationResult[ToolsCleanupResult]]):
    def __init__(self, api_client: AgentLinkApiClient):
        super().__init__(api_client)

    async def handle_async(self, request: DeleteToolsImportCommand) -> OperationResult[ToolsCleanupResult]:
        command = request
        start_time = time.time()
        add_span_attributes({"tools_import.application_id": command.application_id, "tools_import.source_id": command.source_id})

        result = ToolsCleanupResult()
        try:
            result.warnings.extend(await self.api_client.delete_tools_by_source_async(command.application_id, command.source_id))
        except AgentLinkApiError as e:
            result.warnings.append(f"{CLEANUP_WARNING}: Unable to delete tools: {e}")

        self._record_operation("tools_import", "delete", start_time)
        return self.ok(result)
