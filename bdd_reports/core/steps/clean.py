"""
Cleanup step for removing generated reports.
"""

import shutil

from bdd_reports.core.steps.base import StepBase, StepResult, StepStatus
from bdd_reports.core.errors import StepExecutionError
from bdd_reports.core.logging import get_logger


class CleanStep(StepBase):
    """Step for removing the report directory."""
    
    def __init__(self, config):
        super().__init__(config)
        self.logger = get_logger(__name__)
    
    @property
    def name(self) -> str:
        return "clean"
    
    def _do_execute(self) -> StepResult:
        """Remove the report directory if it exists."""
        report_dir = self.config.report_dir
        if not report_dir.exists():
            return StepResult(
                name=self.name,
                status=StepStatus.SUCCESS,
                message="No reports to clean",
                outputs={"report_dir": str(report_dir)},
            )
        
        if self.config.verbosity >= 1:
            self.logger.info(f"Removing reports directory: {report_dir}")
        try:
            shutil.rmtree(report_dir)
        except OSError as e:
            error_msg = f"Failed to clean reports: {e}"
            self.logger.error(error_msg)
            exec_error = StepExecutionError(error_msg)
            exec_error.__cause__ = e
            return StepResult(
                name=self.name,
                status=StepStatus.FAILED,
                message=error_msg,
                error=exec_error,
                outputs={"report_dir": str(report_dir)},
            )
        
        return StepResult(
            name=self.name,
            status=StepStatus.SUCCESS,
            message=f"Removed {report_dir}",
            outputs={"report_dir": str(report_dir)},
        )
    
    def dry_run(self) -> StepResult:
        """Dry run of clean step."""
        report_dir = self.config.report_dir
        if report_dir.exists():
            message = f"DRY RUN: Would remove {report_dir}"
        else:
            message = "DRY RUN: No reports to clean"
        return StepResult(
            name=self.name,
            status=StepStatus.SKIPPED,
            message=message,
            outputs={"report_dir": str(report_dir)},
        )
