"""AgentLink API Client.

Thin async wrapper over the Frontegg AgentLink REST API. Every call goes
through ``send_async``, which attaches the vendor bearer token obtained
from ``VendorTokenProvider`` and logs the ``frontegg-trace-id`` response
header for support requests.

Wrappers check the documented success status codes and raise
``AgentLinkApiError`` with the response body on anything else. Single
resource reads return ``None`` on 404 so callers can treat the resource
as gone.

Usage:
    async with AgentLinkApiClient(base_url, client_id, secret) as client:
        await client.authenticate_async()
        app = await client.find_or_create_application_async("my-app", url, url)
        sources = await client.get_sources_async(app.id)
"""

import logging
import time
from typing import Any

import httpx
from opentelemetry import trace

from agentlink.domain.enums import SourceType
from agentlink.domain.models import (
    Application,
    CreateApplicationRequest,
    CreateConditionalPolicyRequest,
    CreateMaskingPolicyRequest,
    CreateRbacPolicyRequest,
    CreateSourceRequest,
    IdentityConfiguration,
    InternalTool,
    McpConfiguration,
    McpConfigurationRequest,
    Policy,
    Source,
    UpdateApplicationRequest,
    UpdateConditionalPolicyRequest,
    UpdateIdentityConfigurationRequest,
    UpdateMaskingPolicyRequest,
    UpdateRbacPolicyRequest,
    UpdateSourceRequest,
    UpsertToolsRequest,
    VendorConfig,
)
from agentlink.observability import api_request_duration, api_request_failures, api_requests, tool_cleanup_failures, tools_deleted, tools_imported

from .errors import AgentLinkApiError
from .vendor_token_provider import TRACE_ID_HEADER, VendorToken, VendorTokenProvider

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)

DEFAULT_HTTP_TIMEOUT_SECONDS = 30.0

APPLICATIONS_PATH = "/applications/resources/applications/v1"
SOURCES_PATH = "/app-integrations/resources/app-mcp-configuration-sources/v1"
MCP_CONFIGURATIONS_PATH = "/app-integrations/resources/app-mcp-configurations/v1"
INTERNAL_TOOLS_PATH = "/app-integrations/resources/internal-tools/v1"
POLICIES_PATH = "/app-integrations/resources/policies/v1"
VENDORS_PATH = "/vendors"
IDENTITY_CONFIGURATION_PATH = "/identity/resources/configurations/v1"


class AgentLinkApiClient:
    """Authenticated client for the AgentLink provisioning endpoints.

    The client remembers the application resolved by
    ``find_or_create_application_async`` in ``application_id`` and
    ``application_name`` so resources that belong to "the provider's
    application" can default to it.
    """

    def __init__(
        self,
        base_url: str,
        client_id: str,
        secret: str,
        http_timeout: float = DEFAULT_HTTP_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Region API host, e.g. ``https://api.frontegg.com``
            client_id: Vendor client id
            secret: Vendor API secret
            http_timeout: HTTP request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.base_url = base_url.rstrip("/")
        self.application_id: str | None = None
        self.application_name: str | None = None
        self._http_client = httpx.AsyncClient(base_url=self.base_url, timeout=http_timeout, transport=transport)
        self._token_provider = VendorTokenProvider(self._http_client, client_id, secret)

        logger.info("AgentLinkApiClient initialized", extra={"base_url": self.base_url, "client_id": client_id})

    async def __aenter__(self) -> "AgentLinkApiClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close_async()

    async def close_async(self) -> None:
        await self._http_client.aclose()

    @property
    def token_provider(self) -> VendorTokenProvider:
        return self._token_provider

    async def authenticate_async(self) -> VendorToken:
        """Authenticate eagerly; later calls refresh the token lazily."""
        return await self._token_provider.authenticate_async()

    # =========================================================================
    # Transport
    # =========================================================================

    async def send_async(
        self,
        method: str,
        path: str,
        body: Any = None,
        params: dict[str, str] | None = None,
        files: dict[str, tuple[str, bytes]] | None = None,
        data: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Send an authenticated request and return the raw response.

        ``body`` is sent as JSON. ``files`` and ``data`` send a multipart
        form instead, letting httpx set the boundary content type.

        Raises:
            AgentLinkAuthenticationError: If a token cannot be obtained
            AgentLinkApiError: On transport failures
        """
        token = await self._token_provider.get_access_token_async()
        headers = {"Authorization": f"Bearer {token}", "Accept": "application/json"}
        operation = f"{method} {path}"

        with tracer.start_as_current_span("agentlink_api.send") as span:
            span.set_attribute("http.method", method)
            span.set_attribute("http.route", path)
            start_time = time.time()
            try:
                if files is not None:
                    response = await self._http_client.request(method, path, params=params, files=files, data=data, headers=headers)
                else:
                    headers["Content-Type"] = "application/json"
                    response = await self._http_client.request(method, path, params=params, json=body, headers=headers)
            except httpx.TimeoutException as e:
                api_request_failures.add(1, {"method": method, "reason": "timeout"})
                logger.error("AgentLink API request timed out", extra={"operation": operation}, exc_info=e)
                raise AgentLinkApiError(message=f"Timeout calling {operation}", operation=operation) from e
            except httpx.RequestError as e:
                api_request_failures.add(1, {"method": method, "reason": "network"})
                logger.error("AgentLink API network error", extra={"operation": operation}, exc_info=e)
                raise AgentLinkApiError(message=f"Network error calling {operation}: {e}", operation=operation) from e

            elapsed_ms = (time.time() - start_time) * 1000
            span.set_attribute("http.status_code", response.status_code)
            api_requests.add(1, {"method": method, "status_code": response.status_code})
            api_request_duration.record(elapsed_ms, {"method": method})

            trace_id = response.headers.get(TRACE_ID_HEADER)
            if trace_id:
                span.set_attribute("frontegg.trace_id", trace_id)
                logger.info("Frontegg API response", extra={"operation": operation, "status_code": response.status_code, "frontegg_trace_id": trace_id})

            return response

    @staticmethod
    def _ensure_status(response: httpx.Response, operation: str, *expected: int) -> None:
        if response.status_code in expected:
            return
        trace_id = response.headers.get(TRACE_ID_HEADER)
        logger.error(
            f"Failed to {operation}",
            extra={"status_code": response.status_code, "response": response.text, "frontegg_trace_id": trace_id},
        )
        raise AgentLinkApiError.unexpected_status(operation, response.status_code, response.text, trace_id)

    @staticmethod
    def _decode(response: httpx.Response, operation: str) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise AgentLinkApiError(
                message=f"failed to decode {operation} response: {e}",
                status_code=response.status_code,
                response_body=response.text,
                trace_id=response.headers.get(TRACE_ID_HEADER),
                operation=operation,
            ) from e

    # =========================================================================
    # Applications
    # =========================================================================

    async def get_applications_async(self) -> list[Application]:
        response = await self.send_async("GET", APPLICATIONS_PATH)
        self._ensure_status(response, "get applications", 200)
        applications = [Application.from_dict(item) for item in self._decode(response, "applications") or []]
        logger.info("Fetched applications", extra={"count": len(applications), "names": [app.name for app in applications]})
        return applications

    async def find_application_by_name_async(self, name: str) -> Application | None:
        for application in await self.get_applications_async():
            if application.name == name:
                logger.info("Found application by name", extra={"application_name": name, "id": application.id})
                return application
        logger.info("Application not found by name", extra={"application_name": name})
        return None

    async def create_application_async(self, request: CreateApplicationRequest) -> Application:
        logger.info("Creating application", extra={"application_name": request.name})
        response = await self.send_async("POST", APPLICATIONS_PATH, request.to_dict())
        self._ensure_status(response, "create application", 201)
        application = Application.from_dict(self._decode(response, "application"))
        logger.info("Created application", extra={"application_name": application.name, "id": application.id})
        return application

    async def find_or_create_application_async(self, name: str, app_url: str, login_url: str) -> Application:
        """Return the application called ``name``, creating a web application if none exists.

        The resolved application becomes the client's default application.
        """
        application = await self.find_application_by_name_async(name)
        if application is None:
            logger.info("Application not found, creating new application", extra={"application_name": name})
            application = await self.create_application_async(CreateApplicationRequest(name=name, app_url=app_url, login_url=login_url, type="web"))

        self.application_id = application.id
        self.application_name = application.name
        return application

    async def get_application_async(self, application_id: str) -> Application | None:
        response = await self.send_async("GET", f"{APPLICATIONS_PATH}/{application_id}")
        if response.status_code == 404:
            return None
        self._ensure_status(response, "get application", 200)
        return Application.from_dict(self._decode(response, "application"))

    async def update_application_async(self, application_id: str, request: UpdateApplicationRequest) -> Application | None:
        logger.info("Updating application", extra={"id": application_id})
        response = await self.send_async("PATCH", f"{APPLICATIONS_PATH}/{application_id}", request.to_dict())
        self._ensure_status(response, "update application", 200, 201)
        return await self.get_application_async(application_id)

    async def delete_application_async(self, application_id: str) -> None:
        logger.info("Deleting application", extra={"id": application_id})
        response = await self.send_async("DELETE", f"{APPLICATIONS_PATH}/{application_id}")
        self._ensure_status(response, "delete application", 200, 204)

    # =========================================================================
    # Sources
    # =========================================================================

    async def get_sources_async(self, app_id: str) -> list[Source]:
        response = await self.send_async("GET", SOURCES_PATH, params={"appId": app_id})
        self._ensure_status(response, "get sources", 200)
        sources = [Source.from_dict(item) for item in self._decode(response, "sources") or []]
        logger.info("Fetched sources", extra={"app_id": app_id, "count": len(sources), "names": [source.name for source in sources]})
        return sources

    async def find_source_by_name_async(self, app_id: str, name: str) -> Source | None:
        for source in await self.get_sources_async(app_id):
            if source.name == name:
                logger.info("Found source by name", extra={"source_name": name, "id": source.id})
                return source
        return None

    async def get_source_async(self, app_id: str, source_id: str) -> Source | None:
        """Sources have no single-item endpoint; scan the application's list."""
        for source in await self.get_sources_async(app_id):
            if source.id == source_id:
                return source
        return None

    async def create_source_async(self, request: CreateSourceRequest) -> Source:
        logger.info("Creating source", extra={"source_name": request.name, "type": request.type, "app_id": request.app_id})
        response = await self.send_async("POST", SOURCES_PATH, request.to_dict())
        self._ensure_status(response, "create source", 200, 201)
        source = Source.from_dict(self._decode(response, "source"))
        logger.info("Created source", extra={"source_name": source.name, "id": source.id})
        return source

    async def find_or_create_source_async(self, app_id: str, name: str, source_type: str, source_url: str, api_timeout: int) -> Source:
        source = await self.find_source_by_name_async(app_id, name)
        if source is not None:
            return source

        logger.info("Source not found, creating new source", extra={"source_name": name})
        return await self.create_source_async(
            CreateSourceRequest(app_id=app_id, name=name, type=source_type, source_url=source_url, api_timeout=api_timeout, enabled=True)
        )

    async def update_source_async(self, source_id: str, request: UpdateSourceRequest) -> Source:
        logger.info("Updating source", extra={"id": source_id})
        response = await self.send_async("PATCH", f"{SOURCES_PATH}/{source_id}", request.to_dict())
        self._ensure_status(response, "update source", 200)
        return Source.from_dict(self._decode(response, "source"))

    async def delete_source_async(self, app_id: str, source_id: str) -> None:
        logger.info("Deleting source", extra={"id": source_id, "app_id": app_id})
        response = await self.send_async("DELETE", f"{SOURCES_PATH}/{source_id}", params={"appId": app_id})
        self._ensure_status(response, "delete source", 200, 204)

    # =========================================================================
    # MCP configuration
    # =========================================================================

    async def apply_mcp_configuration_async(self, request: McpConfigurationRequest) -> McpConfiguration:
        """Create or update the MCP configuration of an application."""
        logger.info("Applying MCP configuration", extra={"app_id": request.app_id, "base_url": request.base_url})
        response = await self.send_async("POST", MCP_CONFIGURATIONS_PATH, request.to_dict())
        self._ensure_status(response, "create/update MCP configuration", 200, 201)
        return McpConfiguration.from_dict(self._decode(response, "MCP configuration"))

    async def get_mcp_configuration_async(self, app_id: str) -> McpConfiguration | None:
        response = await self.send_async("GET", MCP_CONFIGURATIONS_PATH, params={"appId": app_id})
        if response.status_code == 404:
            return None
        self._ensure_status(response, "get MCP configuration", 200)
        return McpConfiguration.from_dict(self._decode(response, "MCP configuration"))

    # =========================================================================
    # Internal tools
    # =========================================================================

    async def import_openapi_schema_async(self, app_id: str, content: bytes, filename: str) -> list[InternalTool]:
        return await self._import_schema_async(app_id, content, filename, "openapi")

    async def import_graphql_schema_async(self, app_id: str, content: bytes, filename: str) -> list[InternalTool]:
        return await self._import_schema_async(app_id, content, filename, "graphql")

    async def _import_schema_async(self, app_id: str, content: bytes, filename: str, field_name: str) -> list[InternalTool]:
        logger.info(f"Importing {field_name} schema", extra={"app_id": app_id, "schema_filename": filename})
        response = await self.send_async(
            "POST",
            f"{INTERNAL_TOOLS_PATH}/{field_name}/import",
            data={"appId": app_id},
            files={field_name: (filename, content)},
        )
        self._ensure_status(response, "import schema", 200, 201)
        tools = [InternalTool.from_dict(item) for item in self._decode(response, "import") or []]
        tools_imported.add(len(tools), {"schema_type": field_name})
        logger.info("Imported schema", extra={"tools_count": len(tools)})
        return tools

    async def upsert_tools_async(self, request: UpsertToolsRequest) -> list[InternalTool]:
        logger.info("Upserting tools", extra={"app_id": request.app_id, "tool_type": request.tool_type, "tools_count": len(request.tools)})
        response = await self.send_async("POST", f"{INTERNAL_TOOLS_PATH}/upsert", request.to_dict())
        self._ensure_status(response, "upsert tools", 200)
        return [InternalTool.from_dict(item) for item in self._decode(response, "upsert") or []]

    async def import_and_upsert_schema_async(self, app_id: str, source_id: str, source_type: str, content: bytes, filename: str) -> list[InternalTool]:
        """Import a schema for a source and persist the discovered tools.

        REST sources take an OpenAPI document, GRAPHQL sources a GraphQL SDL.
        Returns the discovered tools; an empty schema skips the upsert.

        Raises:
            AgentLinkApiError: If the source type cannot import schemas or a call fails
        """
        if source_type == SourceType.REST.value:
            tools = await self.import_openapi_schema_async(app_id, content, filename)
        elif source_type == SourceType.GRAPHQL.value:
            tools = await self.import_graphql_schema_async(app_id, content, filename)
        else:
            raise AgentLinkApiError(message=f"schema import not supported for source type: {source_type}", operation="import schema")

        if not tools:
            logger.info("No tools found in schema, skipping upsert", extra={"app_id": app_id, "source_id": source_id})
            return tools

        for tool in tools:
            tool.source_id = source_id

        await self.upsert_tools_async(UpsertToolsRequest(app_id=app_id, tool_type=source_type, tools=tools))
        return tools

    async def get_tools_by_source_async(self, app_id: str, source_id: str) -> list[InternalTool]:
        response = await self.send_async("GET", INTERNAL_TOOLS_PATH, params={"appId": app_id, "sourceId": source_id})
        self._ensure_status(response, "get tools", 200)
        payload = self._decode(response, "tools") or {}
        return [InternalTool.from_dict(item) for item in payload.get("items") or []]

    async def delete_tool_async(self, app_id: str, tool_id: str) -> None:
        response = await self.send_async("DELETE", f"{INTERNAL_TOOLS_PATH}/{tool_id}", params={"appId": app_id})
        self._ensure_status(response, "delete tool", 200, 204)
        tools_deleted.add(1)

    async def delete_tools_by_source_async(self, app_id: str, source_id: str) -> list[str]:
        """Delete every tool imported for a source.

        Failing to list the tools raises. Individual delete failures are
        logged and skipped; their messages are returned as warnings.
        """
        logger.info("Deleting tools by source", extra={"app_id": app_id, "source_id": source_id})
        warnings: list[str] = []
        for tool in await self.get_tools_by_source_async(app_id, source_id):
            try:
                await self.delete_tool_async(app_id, tool.id)
            except AgentLinkApiError as e:
                tool_cleanup_failures.add(1)
                logger.warning("Failed to delete tool", extra={"tool_id": tool.id, "error": str(e)})
                warnings.append(f"Failed to delete tool {tool.id}: {e}")
        return warnings

    # =========================================================================
    # Policies
    # =========================================================================

    async def _create_policy_async(self, path: str, payload: dict[str, Any], kind: str) -> str:
        logger.info(f"Creating {kind} policy", extra={"policy_name": payload.get("name")})
        response = await self.send_async("POST", path, payload)
        self._ensure_status(response, f"create {kind} policy", 200, 201)
        data = self._decode(response, "policy")
        policy_id = data.get("id") if isinstance(data, dict) else None
        if not policy_id:
            raise AgentLinkApiError(
                message=f"failed to create {kind} policy: response has no policy id",
                status_code=response.status_code,
                response_body=response.text,
                trace_id=response.headers.get(TRACE_ID_HEADER),
                operation=f"create {kind} policy",
            )
        return policy_id

    async def _get_policy_async(self, path: str, kind: str) -> Policy | None:
        response = await self.send_async("GET", path)
        if response.status_code == 404:
            return None
        self._ensure_status(response, f"get {kind} policy", 200)
        return Policy.from_dict(self._decode(response, "policy"))

    async def _update_policy_async(self, path: str, payload: dict[str, Any], kind: str) -> None:
        logger.info(f"Updating {kind} policy", extra={"path": path})
        response = await self.send_async("PATCH", path, payload)
        self._ensure_status(response, f"update {kind} policy", 200)

    async def create_conditional_policy_async(self, request: CreateConditionalPolicyRequest) -> Policy | None:
        policy_id = await self._create_policy_async(POLICIES_PATH, request.to_dict(), "conditional")
        return await self.get_conditional_policy_async(policy_id)

    async def get_conditional_policy_async(self, policy_id: str) -> Policy | None:
        return await self._get_policy_async(f"{POLICIES_PATH}/{policy_id}", "conditional")

    async def update_conditional_policy_async(self, policy_id: str, request: UpdateConditionalPolicyRequest) -> Policy | None:
        await self._update_policy_async(f"{POLICIES_PATH}/{policy_id}", request.to_dict(), "conditional")
        return await self.get_conditional_policy_async(policy_id)

    async def create_rbac_policy_async(self, request: CreateRbacPolicyRequest) -> Policy | None:
        policy_id = await self._create_policy_async(f"{POLICIES_PATH}/rbac", request.to_dict(), "RBAC")
        return await self.get_rbac_policy_async(policy_id)

    async def get_rbac_policy_async(self, policy_id: str) -> Policy | None:
        return await self._get_policy_async(f"{POLICIES_PATH}/rbac/{policy_id}", "RBAC")

    async def update_rbac_policy_async(self, policy_id: str, request: UpdateRbacPolicyRequest) -> Policy | None:
        await self._update_policy_async(f"{POLICIES_PATH}/rbac/{policy_id}", request.to_dict(), "RBAC")
        return await self.get_rbac_policy_async(policy_id)

    async def create_masking_policy_async(self, request: CreateMaskingPolicyRequest) -> Policy | None:
        policy_id = await self._create_policy_async(f"{POLICIES_PATH}/masking", request.to_dict(), "masking")
        return await self.get_masking_policy_async(policy_id)

    async def get_masking_policy_async(self, policy_id: str) -> Policy | None:
        return await self._get_policy_async(f"{POLICIES_PATH}/masking/{policy_id}", "masking")

    async def update_masking_policy_async(self, policy_id: str, request: UpdateMaskingPolicyRequest) -> Policy | None:
        await self._update_policy_async(f"{POLICIES_PATH}/masking/{policy_id}", request.to_dict(), "masking")
        return await self.get_masking_policy_async(policy_id)

    async def delete_policy_async(self, policy_id: str) -> None:
        """Delete a policy of any type."""
        logger.info("Deleting policy", extra={"id": policy_id})
        response = await self.send_async("DELETE", f"{POLICIES_PATH}/{policy_id}")
        self._ensure_status(response, "delete policy", 200, 204)

    # =========================================================================
    # Vendor and identity configuration
    # =========================================================================

    async def get_vendor_config_async(self) -> VendorConfig:
        response = await self.send_async("GET", VENDORS_PATH)
        self._ensure_status(response, "get vendor config", 200)
        config = VendorConfig.from_dict(self._decode(response, "vendor config"))
        logger.info("Fetched vendor configuration", extra={"vendor_id": config.id, "allowed_origins": config.allowed_origins})
        return config

    async def update_allowed_origins_async(self, origins: list[str]) -> VendorConfig:
        logger.info("Updating allowed origins", extra={"origins": origins})
        response = await self.send_async("PUT", VENDORS_PATH, {"allowedOrigins": list(origins)})
        self._ensure_status(response, "update allowed origins", 200)
        return VendorConfig.from_dict(self._decode(response, "vendor config"))

    async def get_identity_configuration_async(self) -> IdentityConfiguration:
        """Fetch the identity configuration.

        The endpoint is add-or-update only; posting an empty body returns
        the current state unchanged.
        """
        response = await self.send_async("POST", IDENTITY_CONFIGURATION_PATH, {})
        self._ensure_status(response, "get identity configuration", 200, 201)
        return IdentityConfiguration.from_dict(self._decode(response, "identity configuration"))

    async def update_identity_configuration_async(self, request: UpdateIdentityConfigurationRequest) -> IdentityConfiguration:
        logger.info("Updating identity configuration", extra={"default_token_expiration": request.default_token_expiration})
        response = await self.send_async("POST", IDENTITY_CONFIGURATION_PATH, request.to_dict())
        self._ensure_status(response, "update identity configuration", 200, 201)
        return IdentityConfiguration.from_dict(self._decode(response, "identity configuration"))
