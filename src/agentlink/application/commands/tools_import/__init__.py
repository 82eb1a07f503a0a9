"""Tools import commands."""

from .delete_tools_import_command import CLEANUP_WARNING, DeleteToolsImportCommand, DeleteToolsImportCommandHandler, ToolsCleanupResult
from .import_tools_command import ImportToolsCommand, ImportToolsCommandHandler

__all__ = [
    "CLEANUP_WARNING",
    "ImportToolsCommand",
    "ImportToolsCommandHandler",
    "DeleteToolsImportCommand",
    "DeleteToolsImportCommandHandler",
    "ToolsCleanupResult",
]
