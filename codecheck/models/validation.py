"""
Validation result types: one outcome per validated unit, one batch per call.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List


class Verdict(str, Enum):
    """Three-valued verdict of a single validation unit."""

    SUCCESS = "success"
    FAILED = "failed"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class ValidationOutcome:
    """Verdict plus human-readable explanation for one code block or sub-check."""

    verdict: Verdict
    detail: str

    def __post_init__(self) -> None:
        if not self.detail:
            raise ValueError("ValidationOutcome.detail must not be empty")

    def to_dict(self) -> dict:
        return {"result": self.verdict.value, "resultDetail": self.detail}


@dataclass(frozen=True)
class BatchResult:
    """Aggregated result of validating N independent code blocks."""

    overall_valid: bool
    outcomes: List[ValidationOutcome] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "valid": self.overall_valid,
            "detailedChecks": [o.to_dict() for o in self.outcomes],
        }


def success(detail: str) -> ValidationOutcome:
    return ValidationOutcome(Verdict.SUCCESS, detail)


def failed(detail: str) -> ValidationOutcome:
    return ValidationOutcome(Verdict.FAILED, detail)


def skipped(detail: str) -> ValidationOutcome:
    return ValidationOutcome(Verdict.SKIPPED, detail)
