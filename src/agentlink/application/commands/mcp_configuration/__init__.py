"""MCP configuration commands."""

from .apply_mcp_configuration_command import ApplyMcpConfigurationCommand, ApplyMcpConfigurationCommandHandler
from .delete_mcp_configuration_command import DeleteMcpConfigurationCommand, DeleteMcpConfigurationCommandHandler

__all__ = [
    "ApplyMcpConfigurationCommand",
    "ApplyMcpConfigurationCommandHandler",
    "DeleteMcpConfigurationCommand",
    "DeleteMcpConfigurationCommandHandler",
]
