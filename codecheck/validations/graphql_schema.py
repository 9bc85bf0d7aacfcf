"""
Query-language validation — GraphQL operations against an introspection schema.

Two phases per operation:
    1. Parse (syntax)
    2. Structural validation against the schema (field existence, arguments,
       fragment and variable consistency) with graphql-core's standard rules

References: graphql-core ``parse`` / ``validate`` / ``build_client_schema``.
"""
import logging
from typing import Any, List, Optional

from graphql import (
    DocumentNode,
    GraphQLError,
    GraphQLSchema,
    GraphQLSyntaxError,
    OperationDefinitionNode,
    build_client_schema,
    parse,
    validate,
)
from pydantic import ValidationError

from codecheck.config.settings import DEFAULT_GRAPHQL_SCHEMA
from codecheck.extraction.codeblocks import extract_code, find_graphql_operations
from codecheck.models.requests import GraphQLRequest, describe_validation_error
from codecheck.models.validation import ValidationOutcome, Verdict, failed, skipped, success
from codecheck.validations.aggregate import merge_outcomes
from codecheck.validations.schema_provider import SchemaProvider

logger = logging.getLogger(__name__)


# ======================================================================
# Internal helpers
# ======================================================================

def _format_error(error: GraphQLError) -> str:
    message = error.message
    if error.locations:
        location = error.locations[0]
        message += f" (Line {location.line}, Column {location.column})"
    return message


def get_operation_type(document: DocumentNode) -> str:
    """Kind of the first operation in the document (query/mutation/subscription)."""
    for definition in document.definitions:
        if isinstance(definition, OperationDefinitionNode):
            return definition.operation.value
    return "operation"


def build_schema_from_provider(schema_name: str, provider: SchemaProvider) -> GraphQLSchema:
    return build_client_schema(provider.load(schema_name))


def _unsupported_schema(schema_name: str, provider: SchemaProvider) -> Optional[ValidationOutcome]:
    supported = provider.supported_schemas()
    if schema_name in supported:
        return None
    return failed(
        f"Unsupported schema name: {schema_name}. "
        f"Supported schemas: {', '.join(supported) or 'none'}."
    )


def validate_operation_against_schema(
    operation: str,
    schema: GraphQLSchema,
    schema_name: str,
) -> ValidationOutcome:
    """Parse one operation, then apply every structural rule to it."""
    try:
        document = parse(operation)
    except GraphQLSyntaxError as e:
        return failed(f"GraphQL syntax error: {_format_error(e)}")

    errors = validate(schema, document)
    if errors:
        return failed(f"GraphQL validation errors: {'; '.join(e.message for e in errors)}")

    operation_type = get_operation_type(document)
    return success(
        f"Successfully validated GraphQL {operation_type} against the {schema_name} schema."
    )


# ======================================================================
# Public API
# ======================================================================

def validate_graphql_codeblock(
    code: Any,
    provider: SchemaProvider,
    schema_name: str = DEFAULT_GRAPHQL_SCHEMA,
    preset: Optional[str] = None,
) -> ValidationOutcome:
    """
    Validate the GraphQL operation(s) in a markdown payload.

    Args:
        code: Markdown text or a raw operation.
        provider: Supplies the introspection document for *schema_name*.
        schema_name: Identifier of the schema to validate against.
        preset: Optional extra extraction preset applied to every operation
            (e.g. ``graphql_strict``) before parsing.

    Returns:
        FAILED for an unsupported schema (before any parse), SKIPPED when
        nothing is left once fences and comments are removed, otherwise one
        outcome for the operation, or the merge of one outcome per operation
        when the payload holds several.
    """
    try:
        request = GraphQLRequest(code=code, schema_name=schema_name)
    except ValidationError as e:
        return failed(describe_validation_error(e))

    try:
        unsupported = _unsupported_schema(request.schema_name, provider)
        if unsupported is not None:
            return unsupported

        operations = find_graphql_operations(request.code)
        if preset is not None:
            operations = [op for op in (extract_code(o, preset) for o in operations) if op]
        if not operations:
            return skipped("No GraphQL operation found in the provided markdown code block.")

        schema = build_schema_from_provider(request.schema_name, provider)
        outcomes: List[ValidationOutcome] = [
            validate_operation_against_schema(op, schema, request.schema_name)
            for op in operations
        ]
    except Exception as e:
        logger.exception("GraphQL validation failed")
        return failed(f"Validation error: {e}")

    if len(outcomes) == 1:
        return outcomes[0]
    logger.debug(
        "Validated %d GraphQL operations, %d failed",
        len(outcomes),
        sum(1 for o in outcomes if o.verdict is Verdict.FAILED),
    )
    return merge_outcomes(outcomes, label="Operation")


def validate_graphql_operation(
    operation: Any,
    provider: SchemaProvider,
    schema_name: str = DEFAULT_GRAPHQL_SCHEMA,
) -> ValidationOutcome:
    """
    Validate one operation that has already been extracted from markdown.

    No fence or shape detection runs here: the text goes straight to the
    parser, so a misspelled keyword is a syntax error rather than a skip.
    """
    try:
        request = GraphQLRequest(code=operation, schema_name=schema_name)
    except ValidationError as e:
        return failed(describe_validation_error(e))

    try:
        unsupported = _unsupported_schema(request.schema_name, provider)
        if unsupported is not None:
            return unsupported
        schema = build_schema_from_provider(request.schema_name, provider)
        return validate_operation_against_schema(request.code, schema, request.schema_name)
    except Exception as e:
        logger.exception("GraphQL validation failed")
        return failed(f"Validation error: {e}")
