"""Tools import DTO.

A tools import has no remote identity of its own: it is the set of tools
imported from one schema file into one source, keyed ``<app id>:<source id>``.
"""

from dataclasses import dataclass

UNKNOWN_TOOLS_COUNT = -1


@dataclass
class ToolsImportDto:
    id: str
    application_id: str
    source_id: str
    schema_file: str
    schema_type: str
    schema_hash: str = ""  # sha256 of the file content at the last import
    tools_count: int = UNKNOWN_TOOLS_COUNT

    @staticmethod
    def make_id(application_id: str, source_id: str) -> str:
        return f"{application_id}:{source_id}"
