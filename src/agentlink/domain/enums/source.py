"""Source and tool import enumerations."""

from enum import Enum


class SourceType(str, Enum):
    """Type of upstream source an MCP configuration pulls tools from."""

    REST = "REST"
    GRAPHQL = "GRAPHQL"
    MOCK = "MOCK"
    MCP_PROXY = "MCP_PROXY"
    FRONTEGG = "FRONTEGG"
    CUSTOM_INTEGRATION = "CUSTOM_INTEGRATION"

    @property
    def supports_schema_import(self) -> bool:
        """Only REST and GraphQL sources can be populated from a schema file."""
        return self in (SourceType.REST, SourceType.GRAPHQL)


class SchemaType(str, Enum):
    """Format of a schema file uploaded for tool discovery."""

    OPENAPI = "openapi"  # OpenAPI 3.x (JSON or YAML)
    GRAPHQL = "graphql"  # GraphQL SDL

    @property
    def source_type(self) -> SourceType:
        """The source type whose tools this schema describes."""
        if self is SchemaType.OPENAPI:
            return SourceType.REST
        return SourceType.GRAPHQL
