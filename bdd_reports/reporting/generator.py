"""
Report generator for the dashboard, detailed, timeline and index documents.

Each ``render_*`` function is a pure function of the ExecutionReport; the
ReportGenerator renders all of them before anything is written.
"""

import json
from pathlib import Path
from typing import Dict, List

from bdd_reports.core.logging import get_logger
from bdd_reports.reporting.aggregator import summarize, timeline_share
from bdd_reports.reporting.models import ExecutionReport
from bdd_reports.reporting.storage import ReportWriter
from bdd_reports.reporting.templating import render_template

INDEX_FILE = "index.html"
DASHBOARD_FILE = "dashboard.html"
DETAILED_FILE = "detailed.html"
TIMELINE_FILE = "timeline.html"
JSON_FILE = "report.json"

HTML_DOCUMENTS = (INDEX_FILE, DASHBOARD_FILE, DETAILED_FILE, TIMELINE_FILE)

NAV_LINKS = [
    {"href": INDEX_FILE, "label": "🏠 Home"},
    {"href": DASHBOARD_FILE, "label": "📈 Dashboard"},
    {"href": DETAILED_FILE, "label": "📋 Detailed"},
    {"href": TIMELINE_FILE, "label": "⏱️ Timeline"},
]

INDEX_CARDS = [
    {
        "href": DASHBOARD_FILE,
        "kind": "dashboard",
        "icon": "📈",
        "title": "Dashboard View",
        "description": "High-level overview with summary statistics, pass/fail rates, and key metrics at a glance.",
        "badge": "Summary & Stats",
    },
    {
        "href": DETAILED_FILE,
        "kind": "detailed",
        "icon": "📋",
        "title": "Detailed View",
        "description": "Every scenario step by step, with tags, durations and error messages.",
        "badge": "Full Details",
    },
    {
        "href": TIMELINE_FILE,
        "kind": "timeline",
        "icon": "⏱️",
        "title": "Timeline View",
        "description": "Scenarios in execution order, each bar sized by its share of the total run time.",
        "badge": "Time Analysis",
    },
]


def _page(current_page: str, **context) -> Dict:
    context.update(nav_links=NAV_LINKS, current_page=current_page)
    return context


def render_dashboard(report: ExecutionReport) -> str:
    """Summary cards, pass-rate bar and a flat scenario list."""
    return render_template(
        "dashboard.html.j2",
        _page(DASHBOARD_FILE, report=report, summary=summarize(report)),
    )


def render_detailed(report: ExecutionReport) -> str:
    """Every scenario with its tags and full step breakdown."""
    return render_template("detailed.html.j2", _page(DETAILED_FILE, report=report))


def render_timeline(report: ExecutionReport) -> str:
    """Scenarios in log order, each bar proportioned by its duration share."""
    entries = [
        {
            "scenario": scenario,
            "share": timeline_share(scenario.duration_ms, report.total_duration_ms),
        }
        for scenario in report.scenarios
    ]
    return render_template(
        "timeline.html.j2",
        _page(TIMELINE_FILE, report=report, entries=entries),
    )


def render_index() -> str:
    """Static navigation page linking the three reports."""
    return render_template("index.html.j2", _page(INDEX_FILE, cards=INDEX_CARDS))


def render_all(report: ExecutionReport) -> Dict[str, str]:
    """Render every HTML document, keyed by file name."""
    return {
        DASHBOARD_FILE: render_dashboard(report),
        DETAILED_FILE: render_detailed(report),
        TIMELINE_FILE: render_timeline(report),
        INDEX_FILE: render_index(),
    }


class ReportGenerator:
    """Generate the report set for one execution report."""
    
    def __init__(self, output_dir: Path = Path("target/html-reports")):
        self.output_dir = Path(output_dir)
        self.writer = ReportWriter(self.output_dir)
        self.logger = get_logger(__name__)
    
    def render_documents(self, report: ExecutionReport, export_json: bool = False) -> Dict[str, str]:
        """
        Render all documents in memory.
        
        Args:
            report: ExecutionReport to render
            export_json: Also serialise the report model as report.json
            
        Returns:
            Mapping of file name to document text
        """
        documents = render_all(report)
        if export_json:
            documents[JSON_FILE] = json.dumps(report.to_dict(), indent=2)
        return documents
    
    def generate_reports(self, report: ExecutionReport, export_json: bool = False) -> Dict[str, Path]:
        """
        Render and write the report set.
        
        Returns:
            Dictionary mapping file name to output path
        """
        documents = self.render_documents(report, export_json=export_json)
        written = self.writer.write_documents(documents)
        self.logger.info(f"Wrote {len(written)} report file(s) to {self.output_dir}")
        return written
    
    def planned_files(self, export_json: bool = False) -> List[Path]:
        """Paths generate_reports() would write."""
        names = list(HTML_DOCUMENTS)
        if export_json:
            names.append(JSON_FILE)
        return [self.output_dir / name for name in names]
