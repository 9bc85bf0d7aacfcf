"""
Component schema validation — markup usages checked against structural schemas.

Implements:
- Resolver construction from an explicit mapping or a built-in package
- Usage discovery over both markup elements and factory calls
- Strict per-usage attribute validation with unknown-component reporting

Expression-valued attributes can only be checked for declaration; value
constraints on them become notes, never failures.
"""
import logging
from typing import Any, List, Mapping, Optional, Tuple

from pydantic import ValidationError

from codecheck.extraction.codeblocks import extract_code
from codecheck.models.component import ComponentUsage
from codecheck.models.requests import ComponentRequest, describe_validation_error
from codecheck.models.validation import ValidationOutcome, failed, success
from codecheck.validations.component_walker import find_component_usages
from codecheck.validations.metrics import record_unknown_component
from codecheck.validations.schema_resolver import SchemaResolver, UnsupportedPackageError, build_resolver
from codecheck.validations.structural_schema import SupportsValidate

logger = logging.getLogger(__name__)

# Violation messages that stay failures even for expression-valued attributes
_DECLARATION_MESSAGES = ("attribute is not declared by the schema", "required attribute is missing")


# ======================================================================
# Per-usage checks
# ======================================================================

def _is_value_constraint_on_expression(violation: Any, usage: ComponentUsage) -> bool:
    attribute = getattr(violation, "attribute", None)
    if attribute is None or attribute not in usage.expression_attributes():
        return False
    return getattr(violation, "message", None) not in _DECLARATION_MESSAGES


def check_usage(usage: ComponentUsage, schema: SupportsValidate) -> Tuple[Optional[str], List[str]]:
    """
    Apply *schema* to one usage.

    Returns:
        ``(problem, notes)``: a single problem line covering every violation
        (``None`` when there is none) and the unverifiable-value notes.
    """
    violations = schema.validate(usage.attributes) or []
    messages: List[str] = []
    notes: List[str] = []
    noted = set()
    for violation in violations:
        if _is_value_constraint_on_expression(violation, usage):
            name = violation.attribute
            if name not in noted:
                noted.add(name)
                notes.append(
                    f"{usage.tag_name}: attribute '{name}' is present but unverifiable "
                    f"(expression {usage.attributes[name]})"
                )
            continue
        messages.append(str(violation))

    if not messages:
        return None, notes
    return f"{usage.tag_name} validation failed: {'; '.join(messages)}", notes


def _unique_tags(usages: List[ComponentUsage]) -> List[str]:
    seen = []
    for usage in usages:
        if usage.tag_name not in seen:
            seen.append(usage.tag_name)
    return seen


# ======================================================================
# Public API
# ======================================================================

def validate_components_with_resolver(code: str, resolver: SchemaResolver) -> ValidationOutcome:
    """Validate every component usage in *code* with an already-built resolver."""
    try:
        cleaned = extract_code(code, "typescript")
        if not cleaned:
            return success("No components found to validate.")

        usages, had_errors = find_component_usages(cleaned, resolver.walker_config)
        if had_errors:
            logger.warning("Component markup has syntax errors; validating the recoverable usages")
        if not usages:
            return success("No components found to validate.")

        problems: List[str] = []
        notes: List[str] = []
        for usage in usages:
            schema = resolver(usage.tag_name)
            if schema is None:
                logger.warning("Unknown component: %s", usage.tag_name)
                record_unknown_component(resolver.package_name or "explicit")
                problems.append(f"Unknown component: {usage.tag_name}")
                continue
            problem, usage_notes = check_usage(usage, schema)
            notes.extend(usage_notes)
            if problem is not None:
                problems.append(problem)
    except Exception as e:
        logger.exception("Component validation failed")
        return failed(f"Failed to parse code block: {e}")

    suffix = f" Notes: {'; '.join(notes)}" if notes else ""
    if problems:
        return failed(f"Validation errors: {'; '.join(problems)}{suffix}")
    return success(
        "All components validated successfully. "
        f"Found components: {', '.join(_unique_tags(usages))}.{suffix}"
    )


def validate_component_codeblock(
    code: Any,
    schemas: Optional[Mapping[str, Any]] = None,
    package_name: Optional[str] = None,
) -> ValidationOutcome:
    """
    Validate the component usages of one markup code block.

    Args:
        code: Markdown-fenced or raw markup/TSX source.
        schemas: Explicit tag name → structural schema mapping.
        package_name: Built-in schema package identifier.

    Exactly one of *schemas* / *package_name* must be given.
    """
    try:
        request = ComponentRequest(code=code, schemas=schemas, package_name=package_name)
    except ValidationError as e:
        return failed(describe_validation_error(e))

    try:
        resolver = build_resolver(schemas=request.schemas, package_name=request.package_name)
    except UnsupportedPackageError as e:
        return failed(str(e))
    except Exception as e:
        return failed(f"Invalid input: schemas: {getattr(e, 'message', e)}")

    return validate_components_with_resolver(request.code, resolver)
