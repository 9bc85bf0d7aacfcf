"""
Schema resolution — map a component tag name to its structural schema.

A resolver is built once per validation call by one of three strategies:

- ``EXPLICIT``: caller-supplied mapping, exact key lookup only
- ``TAG_MAPPING``: package maps tag → type name, schema is ``<Type>Schema``
- ``CONVENTIONAL_NAMING``: tries ``<tag>PropsSchema`` then ``<tag>Schema``

Resolvers are read-only after construction and are discarded after the call.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Mapping, Optional

from codecheck.config.constants import FACTORY_CALLEE_NAMES, GENERIC_HTML_ELEMENTS, NUMERIC_ATTRIBUTE_NAMES
from codecheck.models.component import WalkerConfig
from codecheck.schemas.packages import PACKAGES, ComponentSchemaPackage
from codecheck.validations.structural_schema import StructuralSchema, SupportsValidate, as_structural_schema

logger = logging.getLogger(__name__)


class UnsupportedPackageError(ValueError):
    """Raised at resolver construction for an unknown package identifier."""

    def __init__(self, package_name: str):
        self.package_name = package_name
        super().__init__(
            f"Unsupported package: {package_name}. "
            f"Supported packages are: {', '.join(PACKAGES)}"
        )


class ResolverStrategy(str, Enum):
    EXPLICIT = "explicit"
    TAG_MAPPING = "tag_mapping"
    CONVENTIONAL_NAMING = "conventional_naming"


@dataclass(frozen=True)
class SchemaResolver:
    """``tag_name → schema | None`` plus the walker settings that go with it."""

    strategy: ResolverStrategy
    lookup: Callable[[str], Optional[SupportsValidate]]
    walker_config: WalkerConfig
    package_name: Optional[str] = None

    def __call__(self, tag_name: str) -> Optional[SupportsValidate]:
        return self.lookup(tag_name)


def _walker_config(factory_callees=FACTORY_CALLEE_NAMES) -> WalkerConfig:
    return WalkerConfig(
        ignored_elements=GENERIC_HTML_ELEMENTS,
        factory_callees=tuple(factory_callees),
        numeric_attributes=NUMERIC_ATTRIBUTE_NAMES,
    )


# ======================================================================
# Strategies
# ======================================================================

def explicit_resolver(schemas: Mapping[str, Any]) -> SchemaResolver:
    """
    Exact-key resolver over a caller mapping. Values may be JSON Schema
    mappings or objects exposing ``validate``; they are wrapped up front so a
    malformed schema is rejected before any block is processed.
    """
    wrapped = {tag: as_structural_schema(schema) for tag, schema in schemas.items()}
    return SchemaResolver(
        strategy=ResolverStrategy.EXPLICIT,
        lookup=wrapped.get,
        walker_config=_walker_config(),
    )


def _resolve_by_tag_mapping(package: ComponentSchemaPackage) -> Callable[[str], Optional[StructuralSchema]]:
    tag_to_type = package.tag_to_type or {}

    def lookup(tag_name: str) -> Optional[StructuralSchema]:
        type_name = tag_to_type.get(tag_name)
        if type_name is None:
            return None
        document = package.schemas.get(f"{type_name}Schema")
        return StructuralSchema(document) if document is not None else None

    return lookup


def _resolve_by_conventional_names(package: ComponentSchemaPackage) -> Callable[[str], Optional[StructuralSchema]]:
    def lookup(tag_name: str) -> Optional[StructuralSchema]:
        for schema_name in (f"{tag_name}PropsSchema", f"{tag_name}Schema"):
            document = package.schemas.get(schema_name)
            if document is not None:
                return StructuralSchema(document)
        return None

    return lookup


def package_resolver(package_name: str) -> SchemaResolver:
    """Select the strategy a built-in package declares, or raise."""
    package = PACKAGES.get(package_name)
    if package is None:
        raise UnsupportedPackageError(package_name)

    if package.tag_to_type:
        strategy = ResolverStrategy.TAG_MAPPING
        lookup = _resolve_by_tag_mapping(package)
    else:
        strategy = ResolverStrategy.CONVENTIONAL_NAMING
        lookup = _resolve_by_conventional_names(package)

    logger.debug("Resolver for %s uses %s", package_name, strategy.value)
    return SchemaResolver(
        strategy=strategy,
        lookup=lookup,
        walker_config=_walker_config(package.factory_callees),
        package_name=package_name,
    )


def build_resolver(
    schemas: Optional[Mapping[str, Any]] = None,
    package_name: Optional[str] = None,
) -> SchemaResolver:
    """Build the resolver for one call from exactly one resolver spec."""
    if (schemas is None) == (package_name is None):
        raise ValueError("exactly one of 'schemas' or 'package_name' must be provided")
    if schemas is not None:
        return explicit_resolver(schemas)
    return package_resolver(package_name)
