"""
Systems-language syntax validation (Rust).
"""
import logging
from typing import Any

from pydantic import ValidationError

from codecheck.extraction.codeblocks import extract_code
from codecheck.models.requests import CodeblockRequest, describe_validation_error
from codecheck.models.validation import ValidationOutcome, failed
from codecheck.validations.syntax_tree import validate_syntax

logger = logging.getLogger(__name__)


def validate_rust_codeblock(code: Any) -> ValidationOutcome:
    """Validate the syntax of one Rust code block (fenced or raw)."""
    try:
        request = CodeblockRequest(code=code)
    except ValidationError as e:
        return failed(describe_validation_error(e))

    try:
        cleaned = extract_code(request.code, "fenced")
        if not cleaned:
            return failed("Invalid input: code: no Rust code found after extraction")
        return validate_syntax(cleaned, "rust", "Rust")
    except Exception as e:
        logger.exception("Rust validation failed")
        return failed(f"Validation failed: {e}")
