"""
Prometheus Metrics — validation observability.

Exposes counters and a histogram for:
- Outcome distribution per code kind and verdict
- Component tags that no schema resolved, per package
- Per-kind validation latency

Usage
-----
    from codecheck.validations.metrics import record_outcome, timed_validation

    with timed_validation("graphql"):
        outcome = validate_graphql_codeblock(...)

    record_outcome("graphql", outcome.verdict.value)
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Metric definitions
# ---------------------------------------------------------------------------

# Outcomes produced, labelled by code kind and verdict.
VALIDATION_OUTCOMES: Counter = Counter(
    "codecheck_validation_outcomes_total",
    "Validation outcomes by code kind and verdict",
    ["kind", "verdict"],
)

# Component usages whose tag had no resolvable schema.
UNKNOWN_COMPONENTS: Counter = Counter(
    "codecheck_unknown_components_total",
    "Component usages with no resolvable schema, by schema package",
    ["package"],
)

# Per-block validation latency (seconds).
VALIDATION_LATENCY: Histogram = Histogram(
    "codecheck_validation_seconds",
    "Time spent validating one code block, by code kind",
    ["kind"],
    buckets=(0.001, 0.005, 0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5),
)


# ---------------------------------------------------------------------------
# Convenience helpers
# ---------------------------------------------------------------------------

def record_outcome(kind: str, verdict: str) -> None:
    """Increment the outcome counter for *kind* / *verdict*."""
    VALIDATION_OUTCOMES.labels(kind=kind, verdict=verdict).inc()


def record_unknown_component(package: str) -> None:
    """Increment the unknown component counter for *package*."""
    UNKNOWN_COMPONENTS.labels(package=package).inc()


@contextmanager
def timed_validation(kind: str) -> Generator[None, None, None]:
    """
    Context manager that records validation latency.

    Usage::

        with timed_validation("rust"):
            outcome = validate_rust_codeblock(block)
    """
    with VALIDATION_LATENCY.labels(kind=kind).time():
        yield
