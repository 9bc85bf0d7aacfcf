"""
Batch dispatcher — validate N independent code blocks of one declared kind.

Orchestrates:
    1. Resolver / schema-provider setup (once per call)
    2. Per-block validation on a thread pool (order preserved)
    3. Outcome metrics
    4. Aggregation into a BatchResult

Every per-block exception is converted to a FAILED outcome; one malformed
block never affects the verdicts of its siblings.
"""
import logging
from concurrent.futures import ThreadPoolExecutor
from enum import Enum
from typing import Any, Callable, List, Mapping, Optional, Sequence

from codecheck.config.constants import (
    COMPONENT_FENCE_TAGS,
    JAVASCRIPT_FENCE_TAGS,
    RUST_FENCE_TAGS,
    TYPESCRIPT_FENCE_TAGS,
)
from codecheck.config.settings import DEFAULT_GRAPHQL_SCHEMA, GRAPHQL_SCHEMA_DIR, MAX_VALIDATION_WORKERS
from codecheck.extraction.codeblocks import find_fenced_blocks, find_graphql_operations
from codecheck.models.validation import BatchResult, ValidationOutcome, failed, skipped
from codecheck.validations.aggregate import aggregate
from codecheck.validations.components import validate_components_with_resolver
from codecheck.validations.graphql_schema import validate_graphql_codeblock, validate_graphql_operation
from codecheck.validations.javascript import validate_javascript_codeblock, validate_typescript_codeblock
from codecheck.validations.metrics import record_outcome, timed_validation
from codecheck.validations.rust import validate_rust_codeblock
from codecheck.validations.schema_provider import IntrospectionFileProvider, SchemaProvider
from codecheck.validations.schema_resolver import UnsupportedPackageError, build_resolver

logger = logging.getLogger(__name__)


class CodeKind(str, Enum):
    """Declared domain of the submitted code blocks."""

    JAVASCRIPT = "javascript"
    TYPESCRIPT = "typescript"
    RUST = "rust"
    GRAPHQL = "graphql"
    COMPONENTS = "components"


_FENCE_TAGS = {
    CodeKind.JAVASCRIPT: JAVASCRIPT_FENCE_TAGS,
    CodeKind.TYPESCRIPT: TYPESCRIPT_FENCE_TAGS,
    CodeKind.RUST: RUST_FENCE_TAGS,
    CodeKind.COMPONENTS: COMPONENT_FENCE_TAGS,
}


# ======================================================================
# Per-kind validator selection
# ======================================================================

def _validator_for(
    kind: CodeKind,
    schema_name: str,
    schema_provider: Optional[SchemaProvider],
    schemas: Optional[Mapping[str, Any]],
    package_name: Optional[str],
    extracted: bool = False,
) -> Callable[[str], ValidationOutcome]:
    """
    Build the single-block validator for *kind*. Raises
    UnsupportedPackageError for an unknown component package.

    With *extracted* set, GraphQL blocks are operations already pulled out of
    markdown and are parsed as they are.
    """
    if kind is CodeKind.JAVASCRIPT:
        return validate_javascript_codeblock
    if kind is CodeKind.TYPESCRIPT:
        return validate_typescript_codeblock
    if kind is CodeKind.RUST:
        return validate_rust_codeblock
    if kind is CodeKind.GRAPHQL:
        provider = schema_provider or IntrospectionFileProvider(GRAPHQL_SCHEMA_DIR)
        if extracted:
            return lambda block: validate_graphql_operation(block, provider, schema_name)
        return lambda block: validate_graphql_codeblock(block, provider, schema_name)

    resolver = build_resolver(schemas=schemas, package_name=package_name)
    return lambda block: validate_components_with_resolver(block, resolver)


def _guarded(kind: CodeKind, validator: Callable[[str], ValidationOutcome]) -> Callable[[str], ValidationOutcome]:
    def run(block: str) -> ValidationOutcome:
        try:
            with timed_validation(kind.value):
                outcome = validator(block)
        except Exception as e:
            logger.warning("Validation of a %s block raised: %s", kind.value, e)
            outcome = failed(f"Validation failed: {e}")
        record_outcome(kind.value, outcome.verdict.value)
        return outcome

    return run


# ======================================================================
# Public API
# ======================================================================

def validate_codeblocks(
    blocks: Sequence[str],
    kind: CodeKind,
    *,
    schema_name: str = DEFAULT_GRAPHQL_SCHEMA,
    schema_provider: Optional[SchemaProvider] = None,
    schemas: Optional[Mapping[str, Any]] = None,
    package_name: Optional[str] = None,
    max_workers: int = MAX_VALIDATION_WORKERS,
    extracted: bool = False,
) -> BatchResult:
    """
    Validate every block of *kind* and aggregate the outcomes.

    Args:
        blocks: Code blocks, markdown-fenced or raw.
        kind: Declared code kind; selects the validator.
        schema_name: Query-language schema identifier (``graphql`` only).
        schema_provider: Supplies introspection documents (``graphql`` only);
            defaults to reading ``GRAPHQL_SCHEMA_DIR``.
        schemas: Explicit tag → schema mapping (``components`` only).
        package_name: Built-in schema package (``components`` only).
        max_workers: Thread pool size.
        extracted: Blocks came from ``find_blocks``; GraphQL operations skip
            a second round of markdown discovery.

    Returns:
        BatchResult with one outcome per block, in submission order, or a
        single SKIPPED outcome when *blocks* is empty.
    """
    kind = CodeKind(kind)
    if not blocks:
        outcome = skipped(f"No {kind.value} code blocks found to validate.")
        record_outcome(kind.value, outcome.verdict.value)
        return aggregate([outcome])

    try:
        validator = _validator_for(kind, schema_name, schema_provider, schemas, package_name, extracted)
    except UnsupportedPackageError as e:
        logger.warning("%s", e)
        return aggregate([failed(str(e)) for _ in blocks])
    except Exception as e:
        logger.warning("Could not set up %s validation: %s", kind.value, e)
        return aggregate([failed(f"Validation failed: {e}") for _ in blocks])

    run = _guarded(kind, validator)
    workers = max(1, min(max_workers, len(blocks)))
    with ThreadPoolExecutor(max_workers=workers) as pool:
        outcomes: List[ValidationOutcome] = list(pool.map(run, blocks))

    batch = aggregate(outcomes)
    logger.info(
        "Validated %d %s block(s): valid=%s",
        len(outcomes), kind.value, batch.overall_valid,
    )
    return batch


def find_blocks(text: str, kind: CodeKind) -> List[str]:
    """Code blocks of *kind* inside a markdown payload, in document order."""
    kind = CodeKind(kind)
    if kind is CodeKind.GRAPHQL:
        return find_graphql_operations(text)
    include_untagged = kind is CodeKind.COMPONENTS
    return [
        block.body
        for block in find_fenced_blocks(text, _FENCE_TAGS[kind], include_untagged=include_untagged)
        if block.body.strip()
    ]


def validate_markdown(text: str, kind: CodeKind, **options: Any) -> BatchResult:
    """Discover the blocks of *kind* in *text*, then validate them as a batch."""
    blocks = find_blocks(text, kind)
    logger.debug("Found %d %s block(s) in markdown", len(blocks), CodeKind(kind).value)
    return validate_codeblocks(blocks, kind, extracted=True, **options)
