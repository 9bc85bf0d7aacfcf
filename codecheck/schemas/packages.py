"""
Built-in component schema packages, keyed by package identifier.

Each package declares which resolution strategy applies to it: a package
with a tag-to-type mapping resolves through that mapping, any other package
resolves by conventional schema names.
"""
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from codecheck.config.constants import FACTORY_CALLEE_NAMES
from codecheck.schemas import app_home, point_of_sale


@dataclass(frozen=True)
class ComponentSchemaPackage:
    """Schema documents of one package plus how its tags are resolved."""

    name: str
    schemas: Mapping[str, dict]
    tag_to_type: Optional[Mapping[str, str]] = None
    factory_callees: Tuple[str, ...] = field(default=())


APP_HOME = ComponentSchemaPackage(
    name="@shopify/app-bridge-ui-types",
    schemas=MappingProxyType(app_home.SCHEMAS),
    tag_to_type=MappingProxyType(app_home.TAG_TO_TYPE_MAPPING),
)

POINT_OF_SALE = ComponentSchemaPackage(
    name="@shopify/ui-extensions/point-of-sale",
    schemas=MappingProxyType(point_of_sale.SCHEMAS),
    factory_callees=FACTORY_CALLEE_NAMES,
)

POINT_OF_SALE_REACT = ComponentSchemaPackage(
    name="@shopify/ui-extensions-react/point-of-sale",
    schemas=MappingProxyType(point_of_sale.SCHEMAS),
)

PACKAGES: Mapping[str, ComponentSchemaPackage] = MappingProxyType({
    pkg.name: pkg for pkg in (APP_HOME, POINT_OF_SALE_REACT, POINT_OF_SALE)
})
