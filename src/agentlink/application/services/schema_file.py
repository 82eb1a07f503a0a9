"""Schema file helpers for tool imports."""

import hashlib
import os
from dataclasses import dataclass


@dataclass
class SchemaFile:
    """A schema file read from disk, ready to upload."""

    path: str
    content: bytes

    @property
    def filename(self) -> str:
        return os.path.basename(self.path)

    @property
    def sha256(self) -> str:
        return hash_schema(self.content)


def hash_schema(content: bytes) -> str:
    """Hex SHA-256 of the schema content, used to detect schema changes."""
    return hashlib.sha256(content).hexdigest()


def read_schema_file(path: str) -> SchemaFile:
    """Read a schema file.

    Raises:
        OSError: If the file cannot be read
    """
    with open(path, "rb") as f:
        return SchemaFile(path=path, content=f.read())
