"""
Execution report module for BDD Reports.

This module provides:
- Execution report data structures
- Parsing of Cucumber-style JSON execution logs
- Summary statistics
- Dashboard, detailed, timeline and index HTML documents
"""

from bdd_reports.reporting.models import ExecutionReport, Scenario, ScenarioStatus, Step
from bdd_reports.reporting.parser import ExecutionLogParser
from bdd_reports.reporting.aggregator import ReportSummary, summarize, timeline_share
from bdd_reports.reporting.formatting import escape_html, format_duration
from bdd_reports.reporting.generator import (
    ReportGenerator,
    render_all,
    render_dashboard,
    render_detailed,
    render_index,
    render_timeline,
)
from bdd_reports.reporting.storage import ReportWriter

__all__ = [
    "ExecutionReport",
    "Scenario",
    "ScenarioStatus",
    "Step",
    "ExecutionLogParser",
    "ReportSummary",
    "summarize",
    "timeline_share",
    "escape_html",
    "format_duration",
    "ReportGenerator",
    "render_all",
    "render_dashboard",
    "render_detailed",
    "render_index",
    "render_timeline",
    "ReportWriter",
]
