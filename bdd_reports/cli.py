"""
Command-line interface for BDD Reports.

This module provides a subcommand-based CLI using Typer.
"""

import os
import sys
from pathlib import Path
from typing import Optional

import typer

from bdd_reports.core.config import Config
from bdd_reports.core.errors import BddReportsError, LogReadError, MalformedLogError
from bdd_reports.core.latch import GenerationLatch
from bdd_reports.core.logging import setup_logger
from bdd_reports.core.pipeline import ReportPipeline
from bdd_reports.core.steps import CleanStep
from bdd_reports.reporting.aggregator import summarize
from bdd_reports.reporting.formatting import format_duration
from bdd_reports.reporting.parser import ExecutionLogParser

app = typer.Typer(
    name="bdd_reports",
    help="Generate dashboard, detailed and timeline HTML reports from a Cucumber JSON execution log",
    add_completion=False,
)


def get_config(
    verbosity: Optional[int] = None,
    dry_run: bool = False,
    project_root: Optional[Path] = None,
    **kwargs
) -> Config:
    """Create and configure Config object."""
    init_kwargs = {"dry_run": dry_run}
    if project_root:
        init_kwargs["project_root"] = project_root
    for key, value in kwargs.items():
        if key in Config.__dataclass_fields__ and value is not None:
            init_kwargs[key] = value
    try:
        config = Config(**init_kwargs)
    except BddReportsError as e:
        typer.echo(f"✗ {e}", err=True)
        sys.exit(1)
    if verbosity is not None:
        if not 0 <= verbosity <= 3:
            raise typer.BadParameter(f"verbosity must be between 0 and 3, got {verbosity}")
        config.verbosity = verbosity
    return config


@app.command()
def generate(
    input_path: Optional[Path] = typer.Option(None, "--input", "-i", help="Cucumber JSON execution log"),
    report_dir: Optional[Path] = typer.Option(None, "--report-dir", "-o", help="Directory to write reports into"),
    export_json: bool = typer.Option(False, "--json", help="Also write report.json"),
    force: bool = typer.Option(False, "--force", help="Regenerate even if reports were already generated"),
    warn_unknown_elements: bool = typer.Option(
        False, "--warn-unknown-elements", help="Warn about skipped non-scenario elements"
    ),
    verbosity: Optional[int] = typer.Option(None, "--verbosity", "-v", help="Verbosity level (0-3)"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Show what would be done"),
    project_root: Optional[Path] = typer.Option(None, "--repo-root", help="Project root directory"),
):
    """Generate the HTML report set from an execution log."""
    config = get_config(
        verbosity=verbosity, dry_run=dry_run, project_root=project_root,
        input_path=input_path, report_dir=report_dir,
        export_json=export_json or None, force=force or None,
        warn_unknown_elements=warn_unknown_elements or None,
    )
    setup_logger(verbosity=config.verbosity, log_file=config.log_file)
    
    result = ReportPipeline(config, GenerationLatch()).run()
    if result.success:
        typer.echo(f"✓ Reports generated in {config.report_dir}")
        typer.echo(f"  View reports at: {result.outputs['index']}")
        sys.exit(0)
    if result.skipped:
        typer.echo(f"⊘ {result.message}")
        sys.exit(0)
    typer.echo(f"✗ {result.message}", err=True)
    sys.exit(1)


@app.command()
def summary(
    input_path: Optional[Path] = typer.Option(None, "--input", "-i", help="Cucumber JSON execution log"),
    verbosity: Optional[int] = typer.Option(None, "--verbosity", "-v", help="Verbosity level (0-3)"),
    project_root: Optional[Path] = typer.Option(None, "--repo-root", help="Project root directory"),
):
    """Print summary statistics for an execution log without writing reports."""
    config = get_config(verbosity=verbosity, project_root=project_root, input_path=input_path)
    setup_logger(verbosity=config.verbosity, log_file=config.log_file)
    
    if not config.input_path.exists():
        typer.echo(f"⊘ Execution log not yet available: {config.input_path}")
        sys.exit(0)
    
    try:
        report = ExecutionLogParser(config.warn_unknown_elements).parse_file(config.input_path)
    except (LogReadError, MalformedLogError) as e:
        typer.echo(f"✗ {e}", err=True)
        sys.exit(1)
    
    stats = summarize(report)
    typer.echo(f"Total:     {stats.total_tests}")
    typer.echo(f"Passed:    {stats.passed_tests}")
    typer.echo(f"Failed:    {stats.failed_tests}")
    typer.echo(f"Pass rate: {stats.pass_rate:.2f}%")
    typer.echo(f"Duration:  {format_duration(stats.total_duration_ms)}")
    typer.echo(f"Average:   {stats.avg_duration_sec:.2f}s")
    for scenario in report.get_failed_scenarios():
        typer.echo(f"  ✗ {scenario.feature_name} :: {scenario.name}")
    sys.exit(0)


@app.command()
def clean(
    report_dir: Optional[Path] = typer.Option(None, "--report-dir", "-o", help="Report directory to remove"),
    verbosity: Optional[int] = typer.Option(None, "--verbosity", "-v", help="Verbosity level (0-3)"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Show what would be done"),
    project_root: Optional[Path] = typer.Option(None, "--repo-root", help="Project root directory"),
):
    """Remove the generated report directory."""
    config = get_config(verbosity=verbosity, dry_run=dry_run, project_root=project_root, report_dir=report_dir)
    setup_logger(verbosity=config.verbosity, log_file=config.log_file)
    
    result = CleanStep(config).execute()
    if result.failed:
        typer.echo(f"✗ Clean failed: {result.message}", err=True)
        sys.exit(1)
    typer.echo(result.message if result.skipped else f"✓ {result.message}")
    sys.exit(0)


@app.command()
def doctor(
    project_root: Optional[Path] = typer.Option(None, "--repo-root", help="Project root directory"),
):
    """Run preflight checks (project root, execution log, report directory)."""
    typer.echo("Running preflight checks...")
    config = get_config(project_root=project_root)
    typer.echo(f"✓ Project root: {config.project_root}")
    
    all_ok = True
    if config.config_file and config.config_file.exists():
        typer.echo(f"✓ Config file: {config.config_file}")
    
    if config.input_path.is_file():
        typer.echo(f"✓ Execution log found: {config.input_path}")
    else:
        typer.echo(f"⚠ Execution log not yet available: {config.input_path}", err=True)
    
    # Nearest existing ancestor decides whether the report dir can be created
    target = config.report_dir
    while not target.exists() and target != target.parent:
        target = target.parent
    if os.access(target, os.W_OK):
        typer.echo(f"✓ Report directory writable: {config.report_dir}")
    else:
        typer.echo(f"✗ Report directory not writable: {config.report_dir}", err=True)
        all_ok = False
    
    if all_ok:
        typer.echo("\n✓ All preflight checks passed")
        sys.exit(0)
    else:
        typer.echo("\n✗ Some preflight checks failed", err=True)
        sys.exit(1)


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
