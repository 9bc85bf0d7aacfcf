"""
Constants used across the validators.
Versioned and pinned for determinism.
"""
from typing import Dict, FrozenSet, Tuple

# =============================================================================
# Generic markup elements (denylist), never resolved to a component schema
# =============================================================================
GENERIC_HTML_ELEMENTS: FrozenSet[str] = frozenset({
    "div", "span", "p", "a", "img",
    "h1", "h2", "h3", "h4", "h5", "h6",
    "ul", "ol", "li",
    "table", "tr", "td", "th", "thead", "tbody",
    "form", "input", "button", "select", "option", "textarea",
    "nav", "header", "footer", "main", "section", "article", "aside",
    "br", "hr", "strong", "em", "code", "pre",
})

# =============================================================================
# Factory-call convention: ``root.createComponent(Button, {title: "x"})``
# =============================================================================
FACTORY_CALLEE_NAMES: Tuple[str, ...] = ("createComponent",)

# =============================================================================
# Markup attributes whose string literals are numeric by contract
# =============================================================================
NUMERIC_ATTRIBUTE_NAMES: FrozenSet[str] = frozenset({
    "badgeValue", "columns", "flex", "lineClamp", "max", "maxLength", "min", "minLength",
    "rows", "step", "tabIndex",
})

# =============================================================================
# Fence language tags per code kind (lower-case)
# =============================================================================
JAVASCRIPT_FENCE_TAGS: FrozenSet[str] = frozenset({"javascript", "js", "jsx", "mjs", "cjs"})
TYPESCRIPT_FENCE_TAGS: FrozenSet[str] = frozenset({"typescript", "ts"})
RUST_FENCE_TAGS: FrozenSet[str] = frozenset({"rust", "rs"})
GRAPHQL_FENCE_TAGS: FrozenSet[str] = frozenset({"graphql", "gql"})
COMPONENT_FENCE_TAGS: FrozenSet[str] = frozenset({"tsx", "jsx", "html", "typescript", "ts", "javascript", "js"})

# Leading keywords of an executable GraphQL definition
GRAPHQL_OPERATION_KEYWORDS: Tuple[str, ...] = ("query", "mutation", "subscription", "fragment")

# =============================================================================
# Report rendering
# =============================================================================
STATUS_GLYPHS: Dict[str, str] = {
    "success": "✅",
    "failed": "❌",
    "skipped": "⏭️",
}
