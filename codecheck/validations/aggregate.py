"""
Result aggregation — reduce per-block outcomes to one verdict and render the
human-readable report.

Formatting never alters the underlying outcomes.
"""
from typing import Iterable, List, Sequence

from codecheck.config.constants import STATUS_GLYPHS
from codecheck.models.validation import BatchResult, ValidationOutcome, Verdict


def aggregate(outcomes: Iterable[ValidationOutcome]) -> BatchResult:
    """
    Combine outcomes into a BatchResult.

    ``overall_valid`` is True only for a non-empty batch where every outcome
    is SUCCESS; skipped blocks mean "nothing to judge", not "pass".
    """
    outcomes = list(outcomes)
    overall_valid = len(outcomes) > 0 and all(o.verdict is Verdict.SUCCESS for o in outcomes)
    return BatchResult(overall_valid=overall_valid, outcomes=outcomes)


def overall_verdict(outcomes: Sequence[ValidationOutcome]) -> Verdict:
    """FAILED if any failed, else SUCCESS if any succeeded, else SKIPPED."""
    if any(o.verdict is Verdict.FAILED for o in outcomes):
        return Verdict.FAILED
    if any(o.verdict is Verdict.SUCCESS for o in outcomes):
        return Verdict.SUCCESS
    return Verdict.SKIPPED


def merge_outcomes(outcomes: Sequence[ValidationOutcome], label: str = "Check") -> ValidationOutcome:
    """Fold several sub-check outcomes into one, keeping every detail numbered."""
    details = [
        f"{label} {i}: [{o.verdict.value.upper()}] {o.detail}"
        for i, o in enumerate(outcomes, start=1)
    ]
    return ValidationOutcome(overall_verdict(outcomes), "; ".join(details))


def format_report(batch: BatchResult) -> str:
    """Markdown report: one numbered section per outcome, in original order."""
    sections: List[str] = ["## Detailed Results\n"]
    for index, outcome in enumerate(batch.outcomes, start=1):
        glyph = STATUS_GLYPHS[outcome.verdict.value]
        sections.append(
            f"### Validation {index}\n"
            f"**Status:** {glyph} {outcome.verdict.value.upper()}\n"
            f"**Details:** {outcome.detail}\n"
        )
    return "\n".join(sections)
