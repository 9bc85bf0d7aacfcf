"""
General-script syntax validation (JavaScript / TypeScript).
"""
import logging
from typing import Any

from pydantic import ValidationError

from codecheck.extraction.codeblocks import extract_code
from codecheck.models.requests import CodeblockRequest, describe_validation_error
from codecheck.models.validation import ValidationOutcome, failed
from codecheck.validations.syntax_tree import validate_syntax

logger = logging.getLogger(__name__)

# grammar name → label used in outcome details
SCRIPT_GRAMMARS = {
    "javascript": "JavaScript",
    "typescript": "TypeScript",
    "tsx": "TSX",
}


def validate_script_codeblock(code: Any, grammar: str = "javascript") -> ValidationOutcome:
    """
    Validate the syntax of one general-script code block.

    Args:
        code: Markdown-fenced or raw source.
        grammar: ``javascript``, ``typescript`` or ``tsx``.

    Returns:
        SUCCESS when the tree has no error or missing nodes, FAILED otherwise
        (each problem with its line/column).
    """
    label = SCRIPT_GRAMMARS.get(grammar)
    if label is None:
        return failed(
            f"Unsupported script grammar: {grammar}. "
            f"Supported grammars: {', '.join(SCRIPT_GRAMMARS)}."
        )

    try:
        request = CodeblockRequest(code=code)
    except ValidationError as e:
        return failed(describe_validation_error(e))

    try:
        cleaned = extract_code(request.code, "fenced")
        if not cleaned:
            return failed(f"Invalid input: code: no {label} code found after extraction")
        return validate_syntax(cleaned, grammar, label)
    except Exception as e:
        logger.exception("%s validation failed", label)
        return failed(f"Validation failed: {e}")


def validate_javascript_codeblock(code: Any) -> ValidationOutcome:
    return validate_script_codeblock(code, "javascript")


def validate_typescript_codeblock(code: Any) -> ValidationOutcome:
    return validate_script_codeblock(code, "typescript")
