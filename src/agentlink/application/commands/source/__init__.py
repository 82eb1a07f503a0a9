"""Source commands."""

from .create_source_command import CreateSourceCommand, CreateSourceCommandHandler
from .delete_source_command import DeleteSourceCommand, DeleteSourceCommandHandler
from .update_source_command import UpdateSourceCommand, UpdateSourceCommandHandler

__all__ = [
    "CreateSourceCommand",
    "CreateSourceCommandHandler",
    "UpdateSourceCommand",
    "UpdateSourceCommandHandler",
    "DeleteSourceCommand",
    "DeleteSourceCommandHandler",
]
