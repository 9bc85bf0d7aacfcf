"""
Code extraction — isolate a code payload from its markdown wrapper.

Implements:
- Named extraction presets (fence removal, per-grammar comment removal,
  GraphQL directive/fragment/variable normalization, trimming)
- Fenced block discovery inside free-form markdown
- Two-tier GraphQL operation discovery (tagged fences, then any fence that
  looks like an operation)

No parsing happens here: every function is a pure text transformation.
"""
import logging
import re
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Union

from codecheck.config.constants import GRAPHQL_FENCE_TAGS, GRAPHQL_OPERATION_KEYWORDS
from codecheck.models.extraction import ExtractionOptions, get_preset

logger = logging.getLogger(__name__)


# ======================================================================
# Patterns
# ======================================================================

# A language tag is only consumed when the rest of the fence line is empty,
# so "```query { shop }```" keeps its leading keyword.
_OPENING_FENCE_RE = re.compile(r"\A```(?:[\w+#.-]+[ \t]*(?:\n|\Z)|[ \t]*\n?)")
_CLOSING_FENCE_RE = re.compile(r"\n?```[ \t]*\Z")

_HTML_COMMENT_RE = re.compile(r"<!--[\s\S]*?-->")
_C_BLOCK_COMMENT_RE = re.compile(r"/\*[\s\S]*?\*/")
_C_LINE_COMMENT_RE = re.compile(r"(^|\s)//.*$", re.MULTILINE)
_GRAPHQL_COMMENT_RE = re.compile(r"^[ \t]*#.*$", re.MULTILINE)
_GRAPHQL_DIRECTIVE_RE = re.compile(r"\s+@\w+(?:\([^)]*\))?")
_GRAPHQL_FRAGMENT_HEAD_RE = re.compile(r"\bfragment\s+\w+\s+on\s+\w+[^{]*\{")
_GRAPHQL_SPREAD_RE = re.compile(r"\.\.\.(?!\s*on\b)\s*\w+")
_GRAPHQL_VARIABLE_DEFS_RE = re.compile(r"\(\s*\$[^)]*\)")
_GRAPHQL_VARIABLE_ARG_RE = re.compile(r"\w+\s*:\s*\$\w+\s*,?")
_GRAPHQL_VARIABLE_RE = re.compile(r"\$\w+")
_EMPTY_ARGS_RE = re.compile(r"\(\s*\)")

_WHITESPACE_ONLY_LINE_RE = re.compile(r"^[ \t]+$", re.MULTILINE)

_FENCED_BLOCK_RE = re.compile(
    r"^[ \t]*```[ \t]*(?P<lang>[\w+#.-]*)[^\n]*\n(?P<body>.*?)^[ \t]*```[ \t]*$",
    re.MULTILINE | re.DOTALL,
)

_OPERATION_START_RE = re.compile(
    r"\A(?:(?:%s)\b|\{)" % "|".join(GRAPHQL_OPERATION_KEYWORDS)
)


# ======================================================================
# Internal helpers
# ======================================================================

def _collapse_blank_lines(text: str, max_blank: int) -> str:
    """
    Clear whitespace-only lines left behind by a removal, cap runs of empty
    lines, and drop a single leading/trailing newline.
    """
    text = _WHITESPACE_ONLY_LINE_RE.sub("", text)
    if max_blank == 0:
        text = re.sub(r"\n\n+", "\n", text)
    else:
        text = re.sub(r"\n{%d,}" % (max_blank + 2), "\n" * (max_blank + 1), text)
    text = re.sub(r"\A\n", "", text)
    return re.sub(r"\n\Z", "", text)


def _remove_then_collapse(text: str, patterns: Iterable[re.Pattern], max_blank: int, repl: str = "") -> str:
    """Apply removals; collapse blank lines only when something was removed."""
    before = text
    for pattern in patterns:
        text = pattern.sub(repl, text)
    if text == before:
        return text
    return _collapse_blank_lines(text, max_blank)


def strip_markdown_fences(text: str) -> str:
    """Remove one opening ```lang line and one closing ``` if present."""
    text = _OPENING_FENCE_RE.sub("", text, count=1)
    return _CLOSING_FENCE_RE.sub("", text, count=1)


def strip_html_comments(text: str) -> str:
    return _remove_then_collapse(text, [_HTML_COMMENT_RE], max_blank=1)


def strip_c_comments(text: str) -> str:
    before = text
    text = _C_BLOCK_COMMENT_RE.sub("", text)
    text = _C_LINE_COMMENT_RE.sub(r"\1", text)
    if text == before:
        return text
    return _collapse_blank_lines(text, max_blank=1)


def strip_graphql_comments(text: str) -> str:
    return _remove_then_collapse(text, [_GRAPHQL_COMMENT_RE], max_blank=0)


def strip_graphql_directives(text: str) -> str:
    return _remove_then_collapse(text, [_GRAPHQL_DIRECTIVE_RE], max_blank=0)


def strip_graphql_fragments(text: str) -> str:
    """
    Remove ``fragment X on T { ... }`` definitions (balanced braces) and
    named ``...X`` spreads. Inline fragments (``... on T``) are kept.
    """
    before = text
    while True:
        match = _GRAPHQL_FRAGMENT_HEAD_RE.search(text)
        if match is None:
            break
        depth = 1
        end = match.end()
        while end < len(text) and depth > 0:
            if text[end] == "{":
                depth += 1
            elif text[end] == "}":
                depth -= 1
            end += 1
        text = text[: match.start()] + text[end:]
    text = _GRAPHQL_SPREAD_RE.sub("", text)
    if text == before:
        return text
    return _collapse_blank_lines(text, max_blank=0)


def strip_graphql_variables(text: str) -> str:
    """
    Remove variable definitions, arguments bound to variables, and any
    leftover variable references; argument lists emptied this way go too.
    """
    before = text
    text = _GRAPHQL_VARIABLE_DEFS_RE.sub("", text)
    text = _GRAPHQL_VARIABLE_ARG_RE.sub("", text)
    text = _GRAPHQL_VARIABLE_RE.sub("", text)
    text = _EMPTY_ARGS_RE.sub("", text)
    if text == before:
        return text
    return _collapse_blank_lines(text, max_blank=0)


def _passes_for(options: ExtractionOptions) -> List[Callable[[str], str]]:
    passes: List[Callable[[str], str]] = []
    if options.trim_whitespace:
        passes.append(str.strip)
    if options.remove_markdown_fences:
        passes.append(strip_markdown_fences)
    if options.remove_html_comments:
        passes.append(strip_html_comments)
    if options.remove_c_comments:
        passes.append(strip_c_comments)
    if options.remove_graphql_comments:
        passes.append(strip_graphql_comments)
    if options.remove_graphql_directives:
        passes.append(strip_graphql_directives)
    if options.remove_graphql_fragments:
        passes.append(strip_graphql_fragments)
    if options.remove_graphql_variables:
        passes.append(strip_graphql_variables)
    if options.trim_whitespace:
        passes.append(str.strip)
    return passes


# ======================================================================
# Public API
# ======================================================================

def extract_code(raw_text: str, options: Union[str, ExtractionOptions] = "none") -> str:
    """
    Clean a code block according to a preset name or an options record.

    The enabled passes run left-to-right and the whole sequence repeats until
    the text stops changing, so ``extract_code(extract_code(x, p), p)`` always
    equals ``extract_code(x, p)``. Every pass only deletes text, which bounds
    the number of rounds.
    """
    if isinstance(options, str):
        options = get_preset(options)

    passes = _passes_for(options)
    text = raw_text.replace("\r\n", "\n")
    while True:
        previous = text
        for apply_pass in passes:
            text = apply_pass(text)
        if text == previous:
            return text


@dataclass(frozen=True)
class FencedBlock:
    """A fenced code block found in markdown, with its (lower-cased) tag."""

    language: str
    body: str


def find_fenced_blocks(
    markdown: str,
    languages: Optional[Iterable[str]] = None,
    include_untagged: bool = False,
) -> List[FencedBlock]:
    """
    Return every multi-line fenced block in *markdown*, in document order.

    Args:
        markdown: Free-form text that may contain fenced blocks.
        languages: Keep only blocks tagged with one of these (case-insensitive).
            ``None`` keeps every block.
        include_untagged: With *languages* set, also keep blocks with no tag.
    """
    wanted = {lang.lower() for lang in languages} if languages is not None else None
    blocks: List[FencedBlock] = []
    for match in _FENCED_BLOCK_RE.finditer(markdown.replace("\r\n", "\n")):
        language = match.group("lang").lower()
        body = match.group("body").rstrip("\n")
        if wanted is not None and language not in wanted:
            if not (include_untagged and language == ""):
                continue
        blocks.append(FencedBlock(language=language, body=body))
    logger.debug("Found %d fenced block(s) (filter=%s)", len(blocks), sorted(wanted) if wanted else None)
    return blocks


def looks_like_graphql_operation(code: str) -> bool:
    """True when *code* starts with an operation keyword or a bare ``{``."""
    stripped = strip_graphql_comments(code.strip()).strip()
    return bool(_OPERATION_START_RE.match(stripped))


def find_graphql_operations(markdown: str) -> List[str]:
    """
    Locate candidate GraphQL operations inside arbitrary markdown.

    Strategy:
        1. Strict: fenced blocks explicitly tagged ``graphql``/``gql``.
        2. Fallback (only if 1. found nothing): any fenced block whose
           content looks like an operation.
        3. No fences at all: the whole text, whatever its shape, so a
           malformed raw operation still reaches the parser.

    Returns:
        Cleaned operation sources (fences and ``#`` comments removed), never
        empty strings.
    """
    blocks = find_fenced_blocks(markdown)

    candidates = [b.body for b in blocks if b.language in GRAPHQL_FENCE_TAGS]
    if not candidates:
        candidates = [b.body for b in blocks if looks_like_graphql_operation(b.body)]
        if candidates:
            logger.debug("No tagged GraphQL fences; %d untagged block(s) look like operations", len(candidates))
    if not candidates and not blocks:
        candidates = [markdown]

    cleaned = [extract_code(c, "graphql_clean") for c in candidates]
    return [c for c in cleaned if c]
