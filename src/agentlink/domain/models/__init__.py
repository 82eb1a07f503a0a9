"""Wire models exchanged with the AgentLink API."""

from .application import Application, CreateApplicationRequest, UpdateApplicationRequest
from .mcp_configuration import DEFAULT_MCP_API_TIMEOUT_MS, McpConfiguration, McpConfigurationRequest
from .policy import (
    CreateConditionalPolicyRequest,
    CreateMaskingPolicyRequest,
    CreateRbacPolicyRequest,
    MaskingPolicyConfiguration,
    Policy,
    PolicyCondition,
    PolicyTargeting,
    UpdateConditionalPolicyRequest,
    UpdateMaskingPolicyRequest,
    UpdateRbacPolicyRequest,
)
from .source import DEFAULT_SOURCE_API_TIMEOUT_MS, CreateSourceRequest, Source, UpdateSourceRequest
from .tool import InternalTool, UpsertToolsRequest
from .vendor import IdentityConfiguration, UpdateIdentityConfigurationRequest, VendorConfig, normalize_origin

__all__ = [
    "Application",
    "CreateApplicationRequest",
    "UpdateApplicationRequest",
    "DEFAULT_MCP_API_TIMEOUT_MS",
    "McpConfiguration",
    "McpConfigurationRequest",
    "CreateConditionalPolicyRequest",
    "CreateMaskingPolicyRequest",
    "CreateRbacPolicyRequest",
    "MaskingPolicyConfiguration",
    "Policy",
    "PolicyCondition",
    "PolicyTargeting",
    "UpdateConditionalPolicyRequest",
    "UpdateMaskingPolicyRequest",
    "UpdateRbacPolicyRequest",
    "DEFAULT_SOURCE_API_TIMEOUT_MS",
    "CreateSourceRequest",
    "Source",
    "UpdateSourceRequest",
    "InternalTool",
    "UpsertToolsRequest",
    "IdentityConfiguration",
    "UpdateIdentityConfigurationRequest",
    "VendorConfig",
    "normalize_origin",
]
