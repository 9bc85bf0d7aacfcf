"""
StructuralSchema, a component's attribute contract as a JSON Schema document.

The component validator only relies on ``validate(attributes)`` returning a
list of violations (empty means ok); anything exposing that method can stand
in for a StructuralSchema.
"""
import copy
import re
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Protocol

from jsonschema import Draft202012Validator


@dataclass(frozen=True)
class SchemaViolation:
    """One violation; *attribute* is the top-level attribute it concerns."""

    path: str
    message: str
    attribute: Optional[str] = None

    def __str__(self) -> str:
        return f"Property '{self.path}': {self.message}"


class SupportsValidate(Protocol):
    def validate(self, attributes: Mapping[str, Any]) -> List[Any]:
        ...


class StructuralSchema:
    """
    JSON Schema (Draft 2020-12) wrapper applied in strict mode by default.

    Strict mode closes the top-level object: every attribute the schema does
    not declare is a violation, reported once per attribute.
    """

    def __init__(self, document: Mapping[str, Any], strict: bool = True):
        Draft202012Validator.check_schema(document)
        self.document = dict(document)
        self.strict = strict
        effective = copy.deepcopy(self.document)
        if strict and not isinstance(effective.get("additionalProperties"), Mapping):
            effective["additionalProperties"] = False
        self._validator = Draft202012Validator(effective)

    @property
    def declared_attributes(self) -> List[str]:
        return sorted(self.document.get("properties", {}))

    def _is_declared(self, name: str) -> bool:
        if name in self.document.get("properties", {}):
            return True
        return any(re.search(p, name) for p in self.document.get("patternProperties", {}))

    def validate(self, attributes: Mapping[str, Any]) -> List[SchemaViolation]:
        violations: List[SchemaViolation] = []
        reported = set()
        errors = sorted(
            self._validator.iter_errors(dict(attributes)),
            key=lambda e: [str(p) for p in e.absolute_path],
        )
        for error in errors:
            path = list(error.absolute_path)

            if error.validator == "additionalProperties" and not path:
                for name in sorted(k for k in attributes if not self._is_declared(k)):
                    if name in reported:
                        continue
                    reported.add(name)
                    violations.append(SchemaViolation(name, "attribute is not declared by the schema", name))
                continue

            if error.validator == "required" and not path:
                for name in error.validator_value:
                    if name not in attributes and name not in reported:
                        reported.add(name)
                        violations.append(SchemaViolation(name, "required attribute is missing", name))
                continue

            dotted = ".".join(str(p) for p in path) or "root"
            attribute = str(path[0]) if path else None
            violations.append(SchemaViolation(dotted, error.message, attribute))
        return violations

    def __repr__(self) -> str:
        return f"StructuralSchema(attributes={self.declared_attributes}, strict={self.strict})"


def as_structural_schema(value: Any) -> SupportsValidate:
    """Wrap a JSON Schema mapping; pass through anything already validating."""
    if callable(getattr(value, "validate", None)) and not isinstance(value, Mapping):
        return value
    if isinstance(value, Mapping):
        return StructuralSchema(value)
    raise TypeError(
        f"Expected a JSON Schema mapping or an object with validate(), got {type(value).__name__}"
    )
