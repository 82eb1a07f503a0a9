"""Composition root.

Builds the authenticated API client from settings and wires every resource
command and query to its handler. ``AgentLinkProvider.execute_async`` plays
the part of the mediator: it routes a request to the handler registered for
its type.

Usage:
    provider = await create_provider_async()
    result = await provider.execute_async(GetApplicationQuery(application_id="..."))
    await provider.close_async()
"""

import logging
from typing import Any

import httpx
from neuroglia.core import OperationResult
from neuroglia.mediation import Command, Query

from agentlink.application.commands import (ApplyMcpConfigurationCommand, ApplyMcpConfigurationCommandHandler, ClearAllowedOriginsCommand, ClearAllowedOriginsCommandHandler,
                                            CreateApplicationCommand, CreateApplicationCommandHandler, CreateConditionalPolicyCommand, CreateConditionalPolicyCommandHandler,
                                            CreateMaskingPolicyCommand, CreateMaskingPolicyCommandHandler, CreateRbacPolicyCommand, CreateRbacPolicyCommandHandler,
                                            CreateSourceCommand, CreateSourceCommandHandler, DeleteApplicationCommand, DeleteApplicationCommandHandler,
                                            DeleteIdentityConfigurationCommand, DeleteIdentityConfigurationCommandHandler, DeleteMcpConfigurationCommand,
                                            DeleteMcpConfigurationCommandHandler, DeletePolicyCommand, DeletePolicyCommandHandler, DeleteSourceCommand, DeleteSourceCommandHandler,
                                            DeleteToolsImportCommand, DeleteToolsImportCommandHandler, ImportToolsCommand, ImportToolsCommandHandler, SetAllowedOriginsCommand,
                                            SetAllowedOriginsCommandHandler, SetIdentityConfigurationCommand, SetIdentityConfigurationCommandHandler, UpdateApplicationCommand,
                                            UpdateApplicationCommandHandler, UpdateConditionalPolicyCommand, UpdateConditionalPolicyCommandHandler, UpdateMaskingPolicyCommand,
                                            UpdateMaskingPolicyCommandHandler, UpdateRbacPolicyCommand, UpdateRbacPolicyCommandHandler, UpdateSourceCommand, UpdateSourceCommandHandler)
from agentlink.application.queries import (GetAllowedOriginsQuery, GetAllowedOriginsQueryHandler, GetApplicationQuery, GetApplicationQueryHandler, GetConditionalPolicyQuery,
                                           GetConditionalPolicyQueryHandler, GetIdentityConfigurationQuery, GetIdentityConfigurationQueryHandler, GetMaskingPolicyQuery,
                                           GetMaskingPolicyQueryHandler, GetMcpConfigurationQuery, GetMcpConfigurationQueryHandler, GetProviderApplicationQuery,
                                           GetProviderApplicationQueryHandler, GetRbacPolicyQuery, GetRbacPolicyQueryHandler, GetSourceQuery, GetSourceQueryHandler, GetSourcesQuery,
                                           GetSourcesQueryHandler, GetToolsImportQuery, GetToolsImportQueryHandler)
from agentlink.application.services import ProviderConfigurator, configure_logging
from agentlink.application.settings import Settings, app_settings
from agentlink.infrastructure import AgentLinkApiClient

log = logging.getLogger(__name__)

HANDLER_TYPES: list[tuple[type, type]] = [
    # Application
    (CreateApplicationCommand, CreateApplicationCommandHandler),
    (UpdateApplicationCommand, UpdateApplicationCommandHandler),
    (DeleteApplicationCommand, DeleteApplicationCommandHandler),
    (GetApplicationQuery, GetApplicationQueryHandler),
    (GetProviderApplicationQuery, GetProviderApplicationQueryHandler),
    # Source
    (CreateSourceCommand, CreateSourceCommandHandler),
    (UpdateSourceCommand, UpdateSourceCommandHandler),
    (DeleteSourceCommand, DeleteSourceCommandHandler),
    (GetSourceQuery, GetSourceQueryHandler),
    (GetSourcesQuery, GetSourcesQueryHandler),
    # MCP configuration
    (ApplyMcpConfigurationCommand, ApplyMcpConfigurationCommandHandler),
    (DeleteMcpConfigurationCommand, DeleteMcpConfigurationCommandHandler),
    (GetMcpConfigurationQuery, GetMcpConfigurationQueryHandler),
    # Tools import
    (ImportToolsCommand, ImportToolsCommandHandler),
    (DeleteToolsImportCommand, DeleteToolsImportCommandHandler),
    (GetToolsImportQuery, GetToolsImportQueryHandler),
    # Policies
    (CreateRbacPolicyCommand, CreateRbacPolicyCommandHandler),
    (UpdateRbacPolicyCommand, UpdateRbacPolicyCommandHandler),
    (GetRbacPolicyQuery, GetRbacPolicyQueryHandler),
    (CreateMaskingPolicyCommand, CreateMaskingPolicyCommandHandler),
    (UpdateMaskingPolicyCommand, UpdateMaskingPolicyCommandHandler),
    (GetMaskingPolicyQuery, GetMaskingPolicyQueryHandler),
    (CreateConditionalPolicyCommand, CreateConditionalPolicyCommandHandler),
    (UpdateConditionalPolicyCommand, UpdateConditionalPolicyCommandHandler),
    (GetConditionalPolicyQuery, GetConditionalPolicyQueryHandler),
    (DeletePolicyCommand, DeletePolicyCommandHandler),
    # Vendor
    (SetAllowedOriginsCommand, SetAllowedOriginsCommandHandler),
    (ClearAllowedOriginsCommand, ClearAllowedOriginsCommandHandler),
    (GetAllowedOriginsQuery, GetAllowedOriginsQueryHandler),
    (SetIdentityConfigurationCommand, SetIdentityConfigurationCommandHandler),
    (DeleteIdentityConfigurationCommand, DeleteIdentityConfigurationCommandHandler),
    (GetIdentityConfigurationQuery, GetIdentityConfigurationQueryHandler),
]


class AgentLinkProvider:
    """A configured API client plus one handler instance per request type."""

    def __init__(self, api_client: AgentLinkApiClient):
        self.api_client = api_client
        self._handlers: dict[type, Any] = {request_type: handler_type(api_client) for request_type, handler_type in HANDLER_TYPES}

    async def execute_async(self, request: Command | Query) -> OperationResult:
        """Route a command or query to its handler.

        Raises:
            KeyError: If no handler is registered for the request type
        """
        handler = self._handlers.get(type(request))
        if handler is None:
            raise KeyError(f"No handler registered for {type(request).__name__}")
        log.debug(f"Executing {type(request).__name__}")
        return await handler.handle_async(request)

    async def close_async(self) -> None:
        await self.api_client.close_async()

    async def __aenter__(self) -> "AgentLinkProvider":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close_async()


async def create_provider_async(settings: Settings | None = None, transport: httpx.AsyncBaseTransport | None = None) -> AgentLinkProvider:
    """Configure logging, bootstrap the API client and register the handlers.

    Raises:
        ProviderConfigurationError: If the settings are invalid or bootstrap fails
    """
    settings = settings or app_settings
    configure_logging(log_level=settings.log_level, file=settings.log_file_enabled, filename=settings.log_filename)

    log.debug("Creating AgentLink provider...")
    api_client = await ProviderConfigurator(settings, transport=transport).configure_async()
    return AgentLinkProvider(api_client)
