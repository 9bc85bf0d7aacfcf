"""
Typed Pydantic models for the validation boundary inputs.

Each validator entry point accepts loosely-typed caller data and checks its
shape here first; shape failures become ``Invalid input:`` outcomes before
any extraction or parsing happens.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, ValidationError, model_validator


class CodeblockRequest(BaseModel):
    """A single markdown-wrapped or raw code block."""

    code: str = Field(..., min_length=1, description="Code block to validate (fenced or raw).")


class GraphQLRequest(CodeblockRequest):
    """A query-language block plus the schema identifier it targets."""

    schema_name: str = Field(..., min_length=1, description="Identifier of a pre-fetched introspection document.")


class ComponentRequest(CodeblockRequest):
    """
    A markup block plus exactly one resolver specification: an explicit
    tag → schema mapping, or a named package identifier.
    """

    schemas: Optional[Dict[str, Any]] = Field(None, description="Explicit tag name → structural schema mapping.")
    package_name: Optional[str] = Field(None, min_length=1, description="Built-in schema package identifier.")

    @model_validator(mode="after")
    def exactly_one_resolver_spec(self) -> "ComponentRequest":
        if (self.schemas is None) == (self.package_name is None):
            raise ValueError("exactly one of 'schemas' or 'package_name' must be provided")
        return self


def describe_validation_error(error: ValidationError) -> str:
    """Render a pydantic error as ``Invalid input: loc: msg, loc: msg``."""
    issues = []
    for issue in error.errors():
        loc = ".".join(str(part) for part in issue.get("loc", ()))
        issues.append(f"{loc}: {issue['msg']}" if loc else issue["msg"])
    return f"Invalid input: {', '.join(issues)}"
