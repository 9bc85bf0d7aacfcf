"""
Component usage types produced while walking one parsed markup tree.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Tuple


class ExpressionValue(str):
    """
    Source text of a non-literal attribute expression (``{handler}``,
    ``{count + 1}``...). Never evaluated; the schema check can only confirm
    the attribute is declared.
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return f"ExpressionValue({str.__repr__(self)})"


@dataclass(frozen=True)
class ComponentUsage:
    """One component occurrence: tag, extracted attributes, and its source text."""

    tag_name: str
    attributes: Dict[str, Any] = field(default_factory=dict)
    source_span: str = ""

    def expression_attributes(self) -> Dict[str, ExpressionValue]:
        return {
            k: v for k, v in self.attributes.items() if isinstance(v, ExpressionValue)
        }


@dataclass(frozen=True)
class WalkerConfig:
    """
    Immutable configuration for the component tree walker.

    ignored_elements: generic markup tags that never carry a component schema,
        matched exactly (``<button>`` is ignored, ``<Button>`` is not).
    factory_callees: member names recognised as ``obj.<name>(Tag, {...})``
        component factory calls; empty disables the factory-call rule.
    numeric_attributes: string-literal attributes coerced to numbers.
    """

    ignored_elements: FrozenSet[str] = frozenset()
    factory_callees: Tuple[str, ...] = ()
    numeric_attributes: FrozenSet[str] = frozenset()

    def is_ignored(self, tag_name: str) -> bool:
        return tag_name in self.ignored_elements
