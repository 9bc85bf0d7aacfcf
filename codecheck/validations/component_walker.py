"""
Component usage discovery over a TSX syntax tree.

Two visitor rules run over one pre-order walk and feed a single
``ComponentUsage`` stream, in document order:

- markup rule: ``<Tag attr="x" flag {...}>`` opening and self-closing elements
- factory-call rule: ``root.createComponent(Tag, {attr: "x"})``

Attribute values are decoded only when they are literals; anything else is
kept as an ``ExpressionValue`` holding its source text.
"""
import logging
from typing import Any, Dict, List, Optional, Tuple

from codecheck.models.component import ComponentUsage, ExpressionValue, WalkerConfig
from codecheck.validations.treesitter_utils import node_text, parse_source

logger = logging.getLogger(__name__)

MARKUP_ELEMENT_TYPES = ("jsx_opening_element", "jsx_self_closing_element")

# Returned by _decode_literal for anything that is not a literal.
_NOT_LITERAL = object()


# ======================================================================
# Literal decoding
# ======================================================================

def _to_number(text: str) -> Any:
    cleaned = text.replace("_", "")
    try:
        return int(cleaned, 0)
    except ValueError:
        pass
    try:
        return float(cleaned)
    except ValueError:
        return _NOT_LITERAL


def _string_content(node, source: bytes) -> str:
    return node_text(node, source)[1:-1]


def _object_key(node, source: bytes) -> Optional[str]:
    if node.type in ("property_identifier", "identifier", "number"):
        return node_text(node, source)
    if node.type == "string":
        return _string_content(node, source)
    return None


def _decode_literal(node, source: bytes) -> Any:
    """Decode a literal expression node, or return ``_NOT_LITERAL``."""
    kind = node.type
    if kind == "string":
        return _string_content(node, source)
    if kind == "template_string":
        if any(child.type == "template_substitution" for child in node.named_children):
            return _NOT_LITERAL
        return _string_content(node, source)
    if kind == "number":
        return _to_number(node_text(node, source))
    if kind == "true":
        return True
    if kind == "false":
        return False
    if kind == "null":
        return None
    if kind == "unary_expression":
        operator = node.child_by_field_name("operator")
        argument = node.child_by_field_name("argument")
        if operator is not None and argument is not None and argument.type == "number":
            value = _to_number(node_text(argument, source))
            if value is _NOT_LITERAL:
                return value
            sign = node_text(operator, source)
            if sign == "-":
                return -value
            if sign == "+":
                return value
        return _NOT_LITERAL
    if kind == "parenthesized_expression" and node.named_child_count == 1:
        return _decode_literal(node.named_children[0], source)
    if kind == "array":
        items = []
        for child in node.named_children:
            if child.type == "comment":
                continue
            value = _decode_literal(child, source)
            if value is _NOT_LITERAL:
                return value
            items.append(value)
        return items
    if kind == "object":
        decoded = {}
        for child in node.named_children:
            if child.type == "comment":
                continue
            if child.type != "pair":
                return _NOT_LITERAL
            key = _object_key(child.child_by_field_name("key"), source)
            value = _decode_literal(child.child_by_field_name("value"), source)
            if key is None or value is _NOT_LITERAL:
                return _NOT_LITERAL
            decoded[key] = value
        return decoded
    return _NOT_LITERAL


def _decode_value(node, source: bytes) -> Any:
    """Literal value of *node*, falling back to its source text."""
    value = _decode_literal(node, source)
    if value is _NOT_LITERAL:
        return ExpressionValue(node_text(node, source))
    return value


def _coerce_numeric(name: str, value: str, config: WalkerConfig) -> Any:
    if name not in config.numeric_attributes:
        return value
    number = _to_number(value.strip()) if value.strip() else _NOT_LITERAL
    return value if number is _NOT_LITERAL else number


# ======================================================================
# Markup rule
# ======================================================================

def _tag_name(element, source: bytes) -> Optional[str]:
    name_node = element.child_by_field_name("name")
    if name_node is None:
        return None  # fragment
    text = node_text(name_node, source).strip()
    if name_node.type == "jsx_namespace_name":
        return text.split(":")[-1]
    if name_node.type in ("member_expression", "nested_identifier"):
        return text.split(".")[-1]
    return text


def _markup_attributes(element, source: bytes, config: WalkerConfig) -> Dict[str, Any]:
    attributes: Dict[str, Any] = {}
    for child in element.named_children:
        if child.type != "jsx_attribute":
            continue  # spreads, the tag name, type arguments
        parts = [c for c in child.named_children if c.type != "comment"]
        if not parts:
            continue
        name = node_text(parts[0], source)
        if len(parts) == 1:
            attributes[name] = True
            continue
        value_node = parts[-1]
        if value_node.type == "string":
            attributes[name] = _coerce_numeric(name, _string_content(value_node, source), config)
        elif value_node.type == "jsx_expression":
            inner = [c for c in value_node.named_children if c.type != "comment"]
            if len(inner) == 1:
                attributes[name] = _decode_value(inner[0], source)
            else:
                attributes[name] = ExpressionValue(node_text(value_node, source)[1:-1].strip())
        else:
            attributes[name] = ExpressionValue(node_text(value_node, source))
    return attributes


def _markup_usage(element, source: bytes, config: WalkerConfig) -> Optional[ComponentUsage]:
    tag = _tag_name(element, source)
    if not tag or config.is_ignored(tag):
        return None
    return ComponentUsage(
        tag_name=tag,
        attributes=_markup_attributes(element, source, config),
        source_span=node_text(element, source),
    )


# ======================================================================
# Factory-call rule
# ======================================================================

def _factory_attributes(node, source: bytes) -> Dict[str, Any]:
    attributes: Dict[str, Any] = {}
    for child in node.named_children:
        if child.type == "pair":
            key = _object_key(child.child_by_field_name("key"), source)
            if key is not None:
                attributes[key] = _decode_value(child.child_by_field_name("value"), source)
        elif child.type == "shorthand_property_identifier":
            name = node_text(child, source)
            attributes[name] = ExpressionValue(name)
        elif child.type == "method_definition":
            name_node = child.child_by_field_name("name")
            if name_node is not None:
                attributes[node_text(name_node, source)] = ExpressionValue(node_text(child, source))
    return attributes


def _factory_usage(call, source: bytes, config: WalkerConfig) -> Optional[ComponentUsage]:
    function = call.child_by_field_name("function")
    if function is None or function.type != "member_expression":
        return None
    prop = function.child_by_field_name("property")
    if prop is None or node_text(prop, source) not in config.factory_callees:
        return None

    arguments = call.child_by_field_name("arguments")
    args = [a for a in arguments.named_children if a.type != "comment"] if arguments is not None else []
    if not args or len(args) > 2:
        return None

    first = args[0]
    if first.type == "identifier":
        tag = node_text(first, source)
    elif first.type == "string":
        tag = _string_content(first, source)
    else:
        return None
    if not tag or config.is_ignored(tag):
        return None

    attributes: Dict[str, Any] = {}
    if len(args) == 2:
        if args[1].type == "object":
            attributes = _factory_attributes(args[1], source)
        else:
            logger.debug("%s factory call passes non-literal attributes; treating as empty", tag)

    return ComponentUsage(tag_name=tag, attributes=attributes, source_span=node_text(call, source))


# ======================================================================
# Public API
# ======================================================================

def _as_parseable(code: str) -> str:
    """Bare markup with several roots is only valid TSX inside a fragment."""
    if code.lstrip().startswith("<"):
        return f"<>\n{code}\n</>"
    return code


def walk_component_usages(root, source: bytes, config: WalkerConfig) -> List[ComponentUsage]:
    """Apply both visitor rules to every node under *root*, in document order."""
    usages: List[ComponentUsage] = []
    stack = [root]
    while stack:
        node = stack.pop()
        usage = None
        if node.type in MARKUP_ELEMENT_TYPES:
            usage = _markup_usage(node, source, config)
        elif node.type == "call_expression" and config.factory_callees:
            usage = _factory_usage(node, source, config)
        if usage is not None:
            usages.append(usage)
        stack.extend(reversed(node.children))
    return usages


def find_component_usages(code: str, config: WalkerConfig) -> Tuple[List[ComponentUsage], bool]:
    """
    Parse *code* as TSX and list its component usages.

    Returns:
        ``(usages, had_errors)`` where *had_errors* tells whether the parser
        had to recover from malformed regions.
    """
    text = _as_parseable(code)
    source = text.encode("utf-8")
    tree = parse_source(text, "tsx")
    usages = walk_component_usages(tree.root_node, source, config)
    return usages, tree.root_node.has_error
