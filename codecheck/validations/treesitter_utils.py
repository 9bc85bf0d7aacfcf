"""
Utility functions for tree-sitter grammar loading and parsing.

Grammars are loaded from the per-language wheels (``tree-sitter-javascript``,
``tree-sitter-typescript``, ``tree-sitter-rust``). A fresh ``Parser`` is built
for every parse so concurrent validations never share parser state.
"""
from typing import Any

from tree_sitter import Language, Parser, Tree

SUPPORTED_GRAMMARS = ("javascript", "typescript", "tsx", "rust")


def get_language(language_name: str) -> Language:
    """
    Gets a tree-sitter language using the capsule API.

    Args:
        language_name: One of ``SUPPORTED_GRAMMARS``.

    Returns:
        The tree-sitter Language object
    """
    if language_name == "javascript":
        import tree_sitter_javascript
        return Language(tree_sitter_javascript.language())
    elif language_name == "typescript":
        import tree_sitter_typescript
        return Language(tree_sitter_typescript.language_typescript())
    elif language_name == "tsx":
        import tree_sitter_typescript
        return Language(tree_sitter_typescript.language_tsx())
    elif language_name == "rust":
        import tree_sitter_rust
        return Language(tree_sitter_rust.language())
    raise ValueError(
        f"Language '{language_name}' is not supported. "
        f"Supported grammars: {', '.join(SUPPORTED_GRAMMARS)}."
    )


def parse_source(code: str, language_name: str) -> Tree:
    """Parse *code* with the named grammar. Never raises on malformed input."""
    parser = Parser(get_language(language_name))
    return parser.parse(code.encode("utf-8"))


def node_text(node: Any, source: bytes) -> str:
    """Source text covered by *node*."""
    return source[node.start_byte:node.end_byte].decode("utf-8", errors="replace")
