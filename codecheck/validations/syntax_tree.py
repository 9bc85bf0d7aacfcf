"""
Error-tolerant syntax checking over a tree-sitter parse tree.

tree-sitter never aborts on malformed input: it marks the damage as ERROR
nodes and inserts zero-width MISSING nodes where expected syntax is absent.
This module walks the tree and turns that damage into positioned problems.
"""
import logging
from dataclasses import dataclass
from typing import Any, List

from codecheck.config.settings import MAX_DETAIL_SNIPPET_CHARS
from codecheck.models.validation import ValidationOutcome, failed, success
from codecheck.validations.treesitter_utils import node_text, parse_source

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SyntaxProblem:
    """One reported problem, 1-based line and column."""

    message: str
    line: int
    column: int

    def __str__(self) -> str:
        return f"Line {self.line}, Column {self.column}: {self.message}"


def _position(node: Any, source: bytes) -> tuple:
    """Convert a (row, byte column) point to 1-based (line, character column)."""
    row, byte_column = node.start_point
    line_start = node.start_byte - byte_column
    prefix = source[line_start:node.start_byte].decode("utf-8", errors="replace")
    return row + 1, len(prefix) + 1


def _snippet(text: str) -> str:
    text = " ".join(text.split())
    if len(text) > MAX_DETAIL_SNIPPET_CHARS:
        return text[: MAX_DETAIL_SNIPPET_CHARS - 3] + "..."
    return text


def find_syntax_errors(root: Any, source: bytes) -> List[SyntaxProblem]:
    """
    Collect every problem in the tree, in document order.

    - ERROR node → ``Syntax error: unexpected token '<text>'``
    - MISSING node → ``Missing expected syntax: <type>``
    - any other node whose subtree holds an error → ``Parse error in <type>``,
      unless a problem was already reported at the same start position
    """
    problems: List[SyntaxProblem] = []
    reported = set()

    stack = [root]
    while stack:
        node = stack.pop()
        position = _position(node, source)

        if node.type == "ERROR":
            problems.append(SyntaxProblem(
                f"Syntax error: unexpected token '{_snippet(node_text(node, source))}'",
                *position,
            ))
            reported.add(position)

        if node.is_missing:
            problems.append(SyntaxProblem(f"Missing expected syntax: {node.type}", *position))
            reported.add(position)

        if node.has_error and node.type != "ERROR" and position not in reported:
            problems.append(SyntaxProblem(f"Parse error in {node.type}", *position))
            reported.add(position)

        # Reverse so children pop in source order
        stack.extend(reversed(node.children))

    return problems


def validate_syntax(code: str, grammar: str, language_label: str) -> ValidationOutcome:
    """
    Parse *code* with *grammar* and report every syntax problem.

    Returns:
        SUCCESS "<label> code has valid syntax", or FAILED
        "<label> syntax errors: Line L, Column C: ...; ...".
    """
    try:
        source = code.encode("utf-8")
        tree = parse_source(code, grammar)
        problems = find_syntax_errors(tree.root_node, source)
    except Exception as e:
        logger.warning("%s parse failed: %s", language_label, e)
        return failed(f"Failed to parse {language_label}: {e}")

    if not problems:
        return success(f"{language_label} code has valid syntax")

    logger.debug("%s: %d syntax problem(s)", language_label, len(problems))
    return failed(f"{language_label} syntax errors: {'; '.join(str(p) for p in problems)}")
