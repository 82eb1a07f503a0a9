"""Application commands."""

from .create_application_command import CreateApplicationCommand, CreateApplicationCommandHandler
from .delete_application_command import DeleteApplicationCommand, DeleteApplicationCommandHandler
from .update_application_command import UpdateApplicationCommand, UpdateApplicationCommandHandler

__all__ = [
    "CreateApplicationCommand",
    "CreateApplicationCommandHandler",
    "UpdateApplicationCommand",
    "UpdateApplicationCommandHandler",
    "DeleteApplicationCommand",
    "DeleteApplicationCommandHandler",
]
