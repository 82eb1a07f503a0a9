from .allowed_origins_dto import AllowedOriginsDto
from .provider_application_dto import ProviderApplicationDto
from .tools_import_dto import UNKNOWN_TOOLS_COUNT, ToolsImportDto

__all__ = [
    "AllowedOriginsDto",
    "ProviderApplicationDto",
    "ToolsImportDto",
    "UNKNOWN_TOOLS_COUNT",
]
