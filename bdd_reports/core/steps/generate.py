"""
Report generation step: execution log -> ExecutionReport -> report files.
"""

from bdd_reports.core.steps.base import StepBase, StepResult, StepStatus
from bdd_reports.core.errors import LogReadError, MalformedLogError, ReportWriteError
from bdd_reports.core.logging import get_logger
from bdd_reports.reporting.aggregator import summarize
from bdd_reports.reporting.generator import INDEX_FILE, ReportGenerator
from bdd_reports.reporting.parser import ExecutionLogParser


class GenerateStep(StepBase):
    """Step for generating the HTML report set from an execution log."""
    
    def __init__(self, config):
        super().__init__(config)
        self.logger = get_logger(__name__)
    
    @property
    def name(self) -> str:
        return "generate"
    
    def should_skip(self) -> bool:
        """Skip while the execution log has not been written yet."""
        return not self.config.input_path.exists()
    
    def skip_message(self) -> str:
        return f"Execution log not yet available: {self.config.input_path}"
    
    def validate(self) -> str | None:
        if not self.config.input_path.is_file():
            return f"Execution log is not a file: {self.config.input_path}"
        return None
    
    def _outputs(self) -> dict:
        return {
            "input_path": str(self.config.input_path),
            "report_dir": str(self.config.report_dir),
            "index": str(self.config.report_dir / INDEX_FILE),
        }
    
    def _do_execute(self) -> StepResult:
        """Parse, render everything, then write."""
        if self.config.verbosity >= 1:
            self.logger.info(f"Generating reports from {self.config.input_path}")
        
        parser = ExecutionLogParser(warn_unknown_elements=self.config.warn_unknown_elements)
        generator = ReportGenerator(self.config.report_dir)
        try:
            report = parser.parse_file(self.config.input_path)
            written = generator.generate_reports(report, export_json=self.config.export_json)
        except (LogReadError, MalformedLogError, ReportWriteError) as e:
            error_msg = f"Failed to generate reports: {e}"
            self.logger.error(error_msg)
            return StepResult(
                name=self.name,
                status=StepStatus.FAILED,
                message=error_msg,
                error=e,
                outputs=self._outputs(),
                details={"path": str(e.path) if e.path else None},
            )
        
        summary = summarize(report)
        if self.config.verbosity >= 1:
            self.logger.info(
                f"{summary.total_tests} scenario(s): {summary.passed_tests} passed, "
                f"{summary.failed_tests} failed ({summary.pass_rate:.1f}% pass rate)"
            )
        return StepResult(
            name=self.name,
            status=StepStatus.SUCCESS,
            message=f"Reports generated in {self.config.report_dir}",
            outputs=self._outputs(),
            details={
                "summary": summary.to_dict(),
                "files": [str(path) for path in written.values()],
            },
        )
    
    def dry_run(self) -> StepResult:
        """Dry run of generation step."""
        files = ReportGenerator(self.config.report_dir).planned_files(export_json=self.config.export_json)
        return StepResult(
            name=self.name,
            status=StepStatus.SKIPPED,
            message=f"DRY RUN: Would write {len(files)} report file(s) to {self.config.report_dir}",
            outputs=self._outputs(),
            details={"files": [str(path) for path in files]},
        )
