"""
ExtractionOptions: frozen record of cleanup passes, plus the named presets.

Presets are pinned: each name maps to one fixed options record.
"""
from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class ExtractionOptions:
    """Which cleanup passes to apply to a code block, in pipeline order."""

    trim_whitespace: bool = False
    remove_markdown_fences: bool = False
    remove_html_comments: bool = False
    remove_c_comments: bool = False
    remove_graphql_comments: bool = False
    remove_graphql_directives: bool = False
    remove_graphql_fragments: bool = False
    remove_graphql_variables: bool = False


EXTRACTION_PRESETS: Dict[str, ExtractionOptions] = {
    # No extraction at all
    "none": ExtractionOptions(),
    # Query-language, minimal: just trim
    "graphql": ExtractionOptions(trim_whitespace=True),
    "graphql_clean": ExtractionOptions(
        trim_whitespace=True,
        remove_markdown_fences=True,
        remove_graphql_comments=True,
    ),
    # Deep normalization, only for structural comparison of operations
    "graphql_strict": ExtractionOptions(
        trim_whitespace=True,
        remove_markdown_fences=True,
        remove_graphql_comments=True,
        remove_graphql_directives=True,
        remove_graphql_fragments=True,
        remove_graphql_variables=True,
    ),
    # Markup / component snippets
    "typescript": ExtractionOptions(
        trim_whitespace=True,
        remove_markdown_fences=True,
        remove_html_comments=True,
    ),
    "javascript": ExtractionOptions(
        trim_whitespace=True,
        remove_markdown_fences=True,
        remove_c_comments=True,
    ),
    # Syntax checkers: the grammar handles comments itself
    "fenced": ExtractionOptions(
        trim_whitespace=True,
        remove_markdown_fences=True,
    ),
}


def get_preset(name: str) -> ExtractionOptions:
    """Return the options record for a preset name, or raise ``KeyError``."""
    try:
        return EXTRACTION_PRESETS[name]
    except KeyError:
        raise KeyError(
            f"Unknown extraction preset '{name}'. "
            f"Available presets: {', '.join(sorted(EXTRACTION_PRESETS))}"
        ) from None
