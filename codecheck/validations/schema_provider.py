"""
GraphQL schema providers — map a schema identifier to a pre-fetched
introspection document.

Retrieval and refresh of the documents happen outside this package; a
provider only reads what is already there. Providers are injected per call.
"""
from __future__ import annotations

import gzip
import json
import logging
from pathlib import Path
from typing import Dict, List, Mapping, Protocol

logger = logging.getLogger(__name__)


class UnsupportedSchemaError(ValueError):
    """Raised when a provider has no document for the requested identifier."""


class SchemaProvider(Protocol):
    def supported_schemas(self) -> List[str]:
        ...

    def load(self, schema_name: str) -> dict:
        ...


def unwrap_introspection(document: Mapping) -> dict:
    """Accept both ``{"data": {"__schema": ...}}`` and ``{"__schema": ...}``."""
    if "data" in document and isinstance(document["data"], Mapping):
        document = document["data"]
    if "__schema" not in document:
        raise ValueError("Introspection document has no '__schema' key")
    return dict(document)


class StaticSchemaProvider:
    """In-memory provider over caller-supplied introspection documents."""

    def __init__(self, documents: Mapping[str, Mapping]):
        self._documents: Dict[str, Mapping] = dict(documents)

    def supported_schemas(self) -> List[str]:
        return sorted(self._documents)

    def load(self, schema_name: str) -> dict:
        if schema_name not in self._documents:
            raise UnsupportedSchemaError(schema_name)
        return unwrap_introspection(self._documents[schema_name])


class IntrospectionFileProvider:
    """
    Reads ``<directory>/<name>_schema.json`` or ``<name>_schema.json.gz``.

    Files are read on every ``load`` call.
    """

    SUFFIXES = ("_schema.json", "_schema.json.gz")

    def __init__(self, directory: str | Path):
        self.directory = Path(directory)

    def _path_for(self, schema_name: str) -> Path | None:
        for suffix in self.SUFFIXES:
            candidate = self.directory / f"{schema_name}{suffix}"
            if candidate.is_file():
                return candidate
        return None

    def supported_schemas(self) -> List[str]:
        if not self.directory.is_dir():
            return []
        names = set()
        for path in self.directory.iterdir():
            for suffix in self.SUFFIXES:
                if path.name.endswith(suffix):
                    names.add(path.name[: -len(suffix)])
        return sorted(names)

    def load(self, schema_name: str) -> dict:
        path = self._path_for(schema_name)
        if path is None:
            raise UnsupportedSchemaError(schema_name)
        logger.debug("Loading introspection document %s", path)
        if path.suffix == ".gz":
            with gzip.open(path, "rt", encoding="utf-8") as f:
                return unwrap_introspection(json.load(f))
        with open(path, encoding="utf-8") as f:
            return unwrap_introspection(json.load(f))
