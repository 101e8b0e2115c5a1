"""Coverage threshold evaluation against a :class:`Summary`."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from lcovsum.core.model import Summary


@dataclass(frozen=True, slots=True)
class Threshold:
    """Minimum coverage percentages; ``None`` leaves a metric unchecked."""

    lines: float | None = None
    functions: float | None = None
    branches: float | None = None

    def is_empty(self) -> bool:
        """Return ``True`` if the threshold does not constrain any metric."""
        return self.lines is None and self.functions is None and self.branches is None


@dataclass(frozen=True, slots=True)
class ThresholdFailure:
    """Details of a failed threshold evaluation."""

    metric: str
    required: float
    actual: float
    comparison: str = ">="


@dataclass(frozen=True, slots=True)
class ThresholdsResult:
    """Outcome of evaluating a collection of thresholds."""

    passed: bool
    failures: list[ThresholdFailure]


def evaluate_thresholds(summary: Summary, thresholds: Sequence[Threshold]) -> ThresholdsResult:
    """Check *summary* against every threshold.

    A metric without data (total of zero) always passes.
    """
    metrics = {
        "lines": (summary.total_lines, summary.line_coverage_rate),
        "functions": (summary.total_functions, summary.function_coverage_rate),
        "branches": (summary.total_branches, summary.branch_coverage_rate),
    }
    failures: list[ThresholdFailure] = []
    for threshold in thresholds:
        for metric, (total, rate) in metrics.items():
            required = getattr(threshold, metric)
            if required is None or total == 0:
                continue
            if rate < required:
                failures.append(ThresholdFailure(metric=metric, required=required, actual=round(rate, 2)))
    return ThresholdsResult(passed=not failures, failures=failures)


__all__ = ["Threshold", "ThresholdFailure", "ThresholdsResult", "evaluate_thresholds"]
