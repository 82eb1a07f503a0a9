"""Provider bootstrap.

Turns ``Settings`` into an authenticated ``AgentLinkApiClient``:

1. resolve the API host and check the credentials
2. authenticate eagerly so bad credentials fail at startup
3. find or create the provider application when ``application_name`` is set
4. find or create each configured source, importing its schema file if any
"""

import logging

import httpx
from opentelemetry import trace

from agentlink.application.settings import ProviderConfigurationError, Settings, SourceSettings
from agentlink.domain.enums import SourceType
from agentlink.infrastructure import AgentLinkApiClient, AgentLinkApiError

from .schema_file import read_schema_file

log = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)

PLACEHOLDER_APPLICATION_URL = "https://localhost"


class ProviderConfigurator:
    """Builds the API client the resource handlers share."""

    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None):
        self.settings = settings
        self._transport = transport

    async def configure_async(self) -> AgentLinkApiClient:
        """Validate settings, authenticate and reconcile the provider application and sources.

        Raises:
            ProviderConfigurationError: On invalid settings or any failed bootstrap step
        """
        base_url = self.settings.resolve_base_url()
        self.settings.validate_credentials()

        client = AgentLinkApiClient(
            base_url=base_url,
            client_id=self.settings.client_id,
            secret=self.settings.secret,
            http_timeout=self.settings.http_timeout,
            transport=self._transport,
        )
        try:
            await self._bootstrap_async(client)
        except Exception:
            await client.close_async()
            raise

        log.info(f"Provider configured against {base_url} (application: {client.application_name or 'none'})")
        return client

    async def _bootstrap_async(self, client: AgentLinkApiClient) -> None:
        with tracer.start_as_current_span("configure_provider") as span:
            span.set_attribute("provider.base_url", client.base_url)
            try:
                await client.authenticate_async()
            except AgentLinkApiError as e:
                raise ProviderConfigurationError(
                    "Unable to Authenticate with Frontegg API",
                    f"An unexpected error occurred when authenticating with the Frontegg API. Error: {e}",
                ) from e

            application_name = self.settings.application_name
            if application_name:
                try:
                    await client.find_or_create_application_async(application_name, PLACEHOLDER_APPLICATION_URL, PLACEHOLDER_APPLICATION_URL)
                except AgentLinkApiError as e:
                    raise ProviderConfigurationError(
                        "Unable to Find or Create Application",
                        f"Failed to find or create application '{application_name}': {e}",
                    ) from e
                span.set_attribute("provider.application_id", client.application_id or "")

            if not self.settings.sources:
                return
            if not client.application_id:
                raise ProviderConfigurationError("Application Required for Sources", "An application_name must be configured to create sources.")

            for source_settings in self.settings.sources:
                await self._reconcile_source_async(client, client.application_id, source_settings)

    async def _reconcile_source_async(self, client: AgentLinkApiClient, app_id: str, source_settings: SourceSettings) -> None:
        try:
            source = await client.find_or_create_source_async(
                app_id,
                source_settings.name,
                source_settings.type,
                source_settings.source_url,
                source_settings.api_timeout,
            )
        except AgentLinkApiError as e:
            raise ProviderConfigurationError(
                "Unable to Find or Create Source",
                f"Failed to find or create source '{source_settings.name}': {e}",
            ) from e

        if not source_settings.schema_file:
            return

        if source_settings.type not in (SourceType.REST.value, SourceType.GRAPHQL.value):
            raise ProviderConfigurationError(
                "Invalid Source Type for Schema Import",
                f"Schema import is only supported for REST and GRAPHQL sources, got '{source_settings.type}'",
            )

        try:
            schema_file = read_schema_file(source_settings.schema_file)
        except OSError as e:
            raise ProviderConfigurationError(
                "Unable to Read Schema File",
                f"Failed to read schema file '{source_settings.schema_file}': {e}",
            ) from e

        try:
            await client.import_and_upsert_schema_async(app_id, source.id, source_settings.type, schema_file.content, schema_file.filename)
        except AgentLinkApiError as e:
            raise ProviderConfigurationError(
                "Unable to Import Schema",
                f"Failed to import schema for source '{source_settings.name}': {e}",
            ) from e
