"""Application services package.

Logging setup, schema file handling and provider bootstrap.
"""

from .logger import configure_logging
from .provider_configurator import ProviderConfigurator
from .schema_file import SchemaFile, hash_schema, read_schema_file

__all__ = [
    "configure_logging",
    "ProviderConfigurator",
    "SchemaFile",
    "hash_schema",
    "read_schema_file",
]
