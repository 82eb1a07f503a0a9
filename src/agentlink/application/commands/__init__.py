"""Command handlers for every AgentLink resource kind."""

from .application import (CreateApplicationCommand, CreateApplicationCommandHandler, DeleteApplicationCommand, DeleteApplicationCommandHandler, UpdateApplicationCommand,
                          UpdateApplicationCommandHandler)
from .mcp_configuration import ApplyMcpConfigurationCommand, ApplyMcpConfigurationCommandHandler, DeleteMcpConfigurationCommand, DeleteMcpConfigurationCommandHandler
from .policy import (CreateConditionalPolicyCommand, CreateConditionalPolicyCommandHandler, CreateMaskingPolicyCommand, CreateMaskingPolicyCommandHandler, CreateRbacPolicyCommand,
                     CreateRbacPolicyCommandHandler, DeletePolicyCommand, DeletePolicyCommandHandler, UpdateConditionalPolicyCommand, UpdateConditionalPolicyCommandHandler,
                     UpdateMaskingPolicyCommand, UpdateMaskingPolicyCommandHandler, UpdateRbacPolicyCommand, UpdateRbacPolicyCommandHandler)
from .source import CreateSourceCommand, CreateSourceCommandHandler, DeleteSourceCommand, DeleteSourceCommandHandler, UpdateSourceCommand, UpdateSourceCommandHandler
from .tools_import import DeleteToolsImportCommand, DeleteToolsImportCommandHandler, ImportToolsCommand, ImportToolsCommandHandler, ToolsCleanupResult
from .vendor import (ClearAllowedOriginsCommand, ClearAllowedOriginsCommandHandler, DeleteIdentityConfigurationCommand, DeleteIdentityConfigurationCommandHandler,
                     SetAllowedOriginsCommand, SetAllowedOriginsCommandHandler, SetIdentityConfigurationCommand, SetIdentityConfigurationCommandHandler)

__all__ = [
    # Application
    "CreateApplicationCommand",
    "CreateApplicationCommandHandler",
    "UpdateApplicationCommand",
    "UpdateApplicationCommandHandler",
    "DeleteApplicationCommand",
    "DeleteApplicationCommandHandler",
    # Source
    "CreateSourceCommand",
    "CreateSourceCommandHandler",
    "UpdateSourceCommand",
    "UpdateSourceCommandHandler",
    "DeleteSourceCommand",
    "DeleteSourceCommandHandler",
    # MCP configuration
    "ApplyMcpConfigurationCommand",
    "ApplyMcpConfigurationCommandHandler",
    "DeleteMcpConfigurationCommand",
    "DeleteMcpConfigurationCommandHandler",
    # Tools import
    "ImportToolsCommand",
    "ImportToolsCommandHandler",
    "DeleteToolsImportCommand",
    "DeleteToolsImportCommandHandler",
    "ToolsCleanupResult",
    # Policies
    "CreateRbacPolicyCommand",
    "CreateRbacPolicyCommandHandler",
    "UpdateRbacPolicyCommand",
    "UpdateRbacPolicyCommandHandler",
    "CreateMaskingPolicyCommand",
    "CreateMaskingPolicyCommandHandler",
    "UpdateMaskingPolicyCommand",
    "UpdateMaskingPolicyCommandHandler",
    "CreateConditionalPolicyCommand",
    "CreateConditionalPolicyCommandHandler",
    "UpdateConditionalPolicyCommand",
    "UpdateConditionalPolicyCommandHandler",
    "DeletePolicyCommand",
    "DeletePolicyCommandHandler",
    # Vendor
    "SetAllowedOriginsCommand",
    "SetAllowedOriginsCommandHandler",
    "ClearAllowedOriginsCommand",
    "ClearAllowedOriginsCommandHandler",
    "SetIdentityConfigurationCommand",
    "SetIdentityConfigurationCommandHandler",
    "DeleteIdentityConfigurationCommand",
    "DeleteIdentityConfigurationCommandHandler",
]
