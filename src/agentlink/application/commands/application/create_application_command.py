"""Create application command with handler."""

import time
from dataclasses import dataclass

from neuroglia.core import OperationResult
from neuroglia.mediation import Command, CommandHandler
from neuroglia.observability.tracing import add_span_attributes

from agentlink.application.handler_base import AgentLinkHandlerBase
from agentlink.domain.models import Application, CreateApplicationRequest
from agentlink.infrastructure import AgentLinkApiClient, AgentLinkApiError


@dataclass
class CreateApplicationCommand(Command[OperationResult[Application]]):
    """Command to create a Frontegg application."""

    name: str
    """Display name of the application."""

    app_url: str
    """URL the application is served from."""

    login_url: str
    """URL of the application's login page."""

    logo_url: str = ""

    access_type: str = "FREE_ACCESS"
    """FREE_ACCESS or MANAGED_ACCESS."""

    is_default: bool = False

    is_active: bool = True

    type: str = "agent"
    """Application type: web, mobile-ios, mobile-android, agent or other."""

    frontend_stack: str = "react"

    description: str = ""

    allow_dcr: bool = False
    """Whether dynamic client registration is allowed."""


class CreateApplicationCommandHandler(AgentLinkHandlerBase, CommandHandler[CreateApplicationCommand, OperationResult[Application]]):
    def __init__(self, api_client: AgentLinkApiClient):
        super().__init__(api_client)

    async def handle_async(self, request: CreateApplicationCommand) -> OperationResult[Application]:
        command = request
        start_time = time.time()
        add_span_attributes({"application.name": command.name, "application.type": command.type})

        try:
            application = await self.api_client.create_application_async(
                CreateApplicationRequest(
                    name=command.name,
                    app_url=command.app_url,
                    login_url=command.login_url,
                    logo_url=command.logo_url,
                    access_type=command.access_type,
                    is_default=command.is_default,
                    is_active=command.is_active,
                    type=command.type,
                    frontend_stack=command.frontend_stack,
                    description=command.description,
                    allow_dcr=command.allow_dcr,
                )
            )
        except AgentLinkApiError as e:
            return self._remote_error("create", "application", e)

        self._record_operation("application", "create", start_time)
        return self.created(application)
