"""Query handlers for every AgentLink resource kind."""

from .get_allowed_origins_query import GetAllowedOriginsQuery, GetAllowedOriginsQueryHandler
from .get_application_query import GetApplicationQuery, GetApplicationQueryHandler
from .get_identity_configuration_query import GetIdentityConfigurationQuery, GetIdentityConfigurationQueryHandler
from .get_mcp_configuration_query import GetMcpConfigurationQuery, GetMcpConfigurationQueryHandler
from .get_policy_query import (GetConditionalPolicyQuery, GetConditionalPolicyQueryHandler, GetMaskingPolicyQuery, GetMaskingPolicyQueryHandler, GetRbacPolicyQuery,
                               GetRbacPolicyQueryHandler)
from .get_provider_application_query import GetProviderApplicationQuery, GetProviderApplicationQueryHandler
from .get_source_query import GetSourceQuery, GetSourceQueryHandler, GetSourcesQuery, GetSourcesQueryHandler
from .get_tools_import_query import GetToolsImportQuery, GetToolsImportQueryHandler

__all__ = [
    "GetApplicationQuery",
    "GetApplicationQueryHandler",
    "GetProviderApplicationQuery",
    "GetProviderApplicationQueryHandler",
    "GetSourceQuery",
    "GetSourceQueryHandler",
    "GetSourcesQuery",
    "GetSourcesQueryHandler",
    "GetMcpConfigurationQuery",
    "GetMcpConfigurationQueryHandler",
    "GetToolsImportQuery",
    "GetToolsImportQueryHandler",
    "GetRbacPolicyQuery",
    "GetRbacPolicyQueryHandler",
    "GetMaskingPolicyQuery",
    "GetMaskingPolicyQueryHandler",
    "GetConditionalPolicyQuery",
    "GetConditionalPolicyQueryHandler",
    "GetAllowedOriginsQuery",
    "GetAllowedOriginsQueryHandler",
    "GetIdentityConfigurationQuery",
    "GetIdentityConfigurationQueryHandler",
]
