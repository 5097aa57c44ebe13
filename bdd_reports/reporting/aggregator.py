"""
Summary statistics derived from an ExecutionReport.
"""

from dataclasses import dataclass
from typing import Any, Dict

from bdd_reports.reporting.models import ExecutionReport


@dataclass(frozen=True)
class ReportSummary:
    """Derived statistics for one report."""
    total_tests: int
    passed_tests: int
    failed_tests: int
    total_duration_ms: int
    pass_rate: float
    avg_duration_ms: float
    
    @property
    def avg_duration_sec(self) -> float:
        return self.avg_duration_ms / 1000.0
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_tests": self.total_tests,
            "passed_tests": self.passed_tests,
            "failed_tests": self.failed_tests,
            "total_duration_ms": self.total_duration_ms,
            "pass_rate": self.pass_rate,
            "avg_duration_ms": self.avg_duration_ms,
        }


def summarize(report: ExecutionReport) -> ReportSummary:
    """Compute pass rate and average duration from the report totals."""
    total = report.total_tests
    pass_rate = (report.passed_tests / total * 100) if total > 0 else 0.0
    avg_duration_ms = (report.total_duration_ms / total) if total > 0 else 0.0
    return ReportSummary(
        total_tests=total,
        passed_tests=report.passed_tests,
        failed_tests=report.failed_tests,
        total_duration_ms=report.total_duration_ms,
        pass_rate=pass_rate,
        avg_duration_ms=avg_duration_ms,
    )


def timeline_share(duration_ms: int, total_duration_ms: int) -> float:
    """Percentage of the whole run taken by one scenario."""
    return duration_ms / max(total_duration_ms, 1) * 100
