"""Update application command with handler."""

import time
from dataclasses import dataclass

from neuroglia.core import OperationResult
from neuroglia.mediation import Command, CommandHandler
from neuroglia.observability.tracing import add_span_attributes

from agentlink.application.handler_base import AgentLinkHandlerBase
from agentlink.domain.models import Application, UpdateApplicationRequest
from agentlink.infrastructure import AgentLinkApiClient, AgentLinkApiError


@dataclass
class UpdateApplicationCommand(Command[OperationResult[Application]]):
    """Command to update an application.

    The frontend stack is fixed at creation and cannot be changed here.
    """

    application_id: str
    name: str
    app_url: str
    login_url: str
    logo_url: str = ""
    access_type: str = "FREE_ACCESS"
    is_default: bool = False
    is_active: bool = True
    type: str = "agent"
    description: str = ""
    allow_dcr: bool = False


class UpdateApplicationCommandHandler(AgentLinkHandlerBase, CommandHandler[UpdateApplicationCommand, OperationResult[Application]]):
    def __init__(self, api_client: AgentLinkApiClient):
        super().__init__(api_client)

    async def handle_async(self, request: UpdateApplicationCommand) -> OperationResult[Application]:
        command = request
        start_time = time.time()
        add_span_attributes({"application.id": command.application_id})

        try:
            application = await self.api_client.update_application_async(
                command.application_id,
                UpdateApplicationRequest(
                    name=command.name,
                    app_url=command.app_url,
                    login_url=command.login_url,
                    logo_url=command.logo_url,
                    access_type=command.access_type,
                    is_default=command.is_default,
                    is_active=command.is_active,
                    type=command.type,
                    description=command.description,
                    allow_dcr=command.allow_dcr,
                ),
            )
        except AgentLinkApiError as e:
            return self._remote_error("update", "application", e)

        if application is None:
            return self.not_found(Application, command.application_id)

        self._record_operation("application", "update", start_time)
        return self.ok(application)
