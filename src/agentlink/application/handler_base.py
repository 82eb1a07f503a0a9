import logging
import time

from neuroglia.core import OperationResult

from agentlink.infrastructure import AgentLinkApiClient
from agentlink.observability import resource_operation_failures, resource_operations, resource_processing_time

log = logging.getLogger(__name__)


class AgentLinkHandlerBase:
    """Represents the base class of the command and query handlers that act on AgentLink resources."""

    api_client: AgentLinkApiClient
    """ Gets the authenticated client shared by every handler """

    def __init__(self, api_client: AgentLinkApiClient):
        self.api_client = api_client

    def _remote_error(self, verb: str, resource: str, error: Exception) -> OperationResult:
        """Turns a failed API call into a 500 result reading "Unable to <verb> <resource>: <error>"."""
        resource_operation_failures.add(1, {"resource": resource, "operation": verb})
        log.error(f"Unable to {verb} {resource}: {error}")
        return self.internal_server_error(f"Unable to {verb} {resource}: {error}")  # type: ignore[attr-defined]

    def _record_operation(self, resource: str, operation: str, start_time: float) -> None:
        processing_time_ms = (time.time() - start_time) * 1000
        resource_operations.add(1, {"resource": resource, "operation": operation})
        resource_processing_time.record(processing_time_ms, {"resource": resource, "operation": operation})
