"""
Report pipeline orchestration.

Runs the generate step at most once per GenerationLatch unless forced.
"""

import time
from typing import Optional

from bdd_reports.core.config import Config
from bdd_reports.core.latch import GenerationLatch
from bdd_reports.core.logging import get_logger
from bdd_reports.core.steps import GenerateStep, StepResult, StepStatus


class ReportPipeline:
    """Main pipeline class: execution log -> report directory."""
    
    def __init__(self, config: Config, latch: Optional[GenerationLatch] = None):
        """
        Initialize the pipeline.
        
        Args:
            config: Configuration object
            latch: Run-scoped generation latch (a fresh one when omitted)
        """
        self.config = config
        self.latch = latch if latch is not None else GenerationLatch()
        self.logger = get_logger(__name__)
    
    def run(self, force: Optional[bool] = None) -> StepResult:
        """
        Generate reports unless this run already produced them.
        
        Args:
            force: Regenerate even if the latch is set (default: config.force)
            
        Returns:
            StepResult of the generate step, or a SKIPPED result when latched
        """
        if force is None:
            force = self.config.force
        if force:
            self.latch.reset()
        
        if self.latch.is_set:
            if self.config.verbosity >= 1:
                self.logger.info("Reports already generated for this run; skipping")
            return StepResult(
                name="generate",
                status=StepStatus.SKIPPED,
                message="Reports already generated",
                outputs={"report_dir": str(self.config.report_dir)},
            )
        
        start_time = time.time()
        result = GenerateStep(self.config).execute()
        duration = time.time() - start_time
        
        if result.success:
            self.latch.set()
            if self.config.verbosity >= 1:
                self.logger.info(f"Pipeline completed successfully in {duration:.1f} seconds")
                self.logger.info(f"View reports at: {result.outputs['index']}")
        elif result.skipped:
            if self.config.input_path.exists():
                self.logger.info(result.message)
            else:
                self.logger.warning(f"{result.message}; reports will be generated once it exists")
        else:
            self.logger.error(f"Pipeline failed after {duration:.1f} seconds")
        return result
    
    def force_run(self) -> StepResult:
        """Regenerate regardless of the latch."""
        return self.run(force=True)
