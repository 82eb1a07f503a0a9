"""Policy commands."""

from .conditional_policy_commands import (CreateConditionalPolicyCommand, CreateConditionalPolicyCommandHandler, UpdateConditionalPolicyCommand,
                                          UpdateConditionalPolicyCommandHandler)
from .delete_policy_command import DeletePolicyCommand, DeletePolicyCommandHandler
from .masking_policy_commands import CreateMaskingPolicyCommand, CreateMaskingPolicyCommandHandler, UpdateMaskingPolicyCommand, UpdateMaskingPolicyCommandHandler, parse_detectors
from .rbac_policy_commands import CreateRbacPolicyCommand, CreateRbacPolicyCommandHandler, UpdateRbacPolicyCommand, UpdateRbacPolicyCommandHandler

__all__ = [
    "CreateRbacPolicyCommand",
    "CreateRbacPolicyCommandHandler",
    "UpdateRbacPolicyCommand",
    "UpdateRbacPolicyCommandHandler",
    "CreateMaskingPolicyCommand",
    "CreateMaskingPolicyCommandHandler",
    "UpdateMaskingPolicyCommand",
    "UpdateMaskingPolicyCommandHandler",
    "parse_detectors",
    "CreateConditionalPolicyCommand",
    "CreateConditionalPolicyCommandHandler",
    "UpdateConditionalPolicyCommand",
    "UpdateConditionalPolicyCommandHandler",
    "DeletePolicyCommand",
    "DeletePolicyCommandHandler",
]
