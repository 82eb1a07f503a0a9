"""Business metrics for the AgentLink provisioning client.

Defines OpenTelemetry metrics for:
- Authentication: vendor token refreshes
- API calls: every request sent to the AgentLink API
- Resources: lifecycle operations handled by the application layer
- Tools: schema imports and tool cleanup
"""

from opentelemetry import metrics

meter = metrics.get_meter(__name__)

# =============================================================================
# AUTHENTICATION METRICS
# =============================================================================

token_refreshes = meter.create_counter(
    name="agentlink.auth.token_refreshes",
    description="Total vendor token acquisitions",
    unit="1",
)

token_refresh_failures = meter.create_counter(
    name="agentlink.auth.token_refresh_failures",
    description="Total failed vendor authentications",
    unit="1",
)

# =============================================================================
# API METRICS
# =============================================================================

api_requests = meter.create_counter(
    name="agentlink.api.requests",
    description="Total requests sent to the AgentLink API",
    unit="1",
)

api_request_failures = meter.create_counter(
    name="agentlink.api.request_failures",
    description="Total AgentLink API requests that failed in transport",
    unit="1",
)

api_request_duration = meter.create_histogram(
    name="agentlink.api.request_duration",
    description="Round trip time of AgentLink API requests",
    unit="ms",
)

# =============================================================================
# RESOURCE METRICS
# =============================================================================

resource_operations = meter.create_counter(
    name="agentlink.resources.operations",
    description="Total resource lifecycle operations",
    unit="1",
)

resource_operation_failures = meter.create_counter(
    name="agentlink.resources.operation_failures",
    description="Total failed resource lifecycle operations",
    unit="1",
)

resource_processing_time = meter.create_histogram(
    name="agentlink.resource.processing_time",
    description="Time to process resource lifecycle operations",
    unit="ms",
)

# =============================================================================
# TOOL METRICS
# =============================================================================

tools_imported = meter.create_counter(
    name="agentlink.tools.imported",
    description="Total tools discovered from uploaded schemas",
    unit="1",
)

tools_deleted = meter.create_counter(
    name="agentlink.tools.deleted",
    description="Total imported tools deleted",
    unit="1",
)

tool_cleanup_failures = meter.create_counter(
    name="agentlink.tools.cleanup_failures",
    description="Total tools that could not be deleted during cleanup",
    unit="1",
)
