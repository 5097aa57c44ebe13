"""
Base classes for pipeline steps.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional
import time


class StepStatus(Enum):
    """Status of a pipeline step execution."""
    SUCCESS = "success"
    FAILED = "failed"
    SKIPPED = "skipped"


@dataclass
class StepResult:
    """Result of executing a pipeline step."""
    name: str
    status: StepStatus
    message: str
    duration_sec: Optional[float] = None
    outputs: Dict[str, str] = field(default_factory=dict)
    details: Dict[str, Any] = field(default_factory=dict)
    error: Optional[Exception] = None
    
    @property
    def success(self) -> bool:
        """Check if step succeeded."""
        return self.status == StepStatus.SUCCESS
    
    @property
    def skipped(self) -> bool:
        """Check if step was skipped."""
        return self.status == StepStatus.SKIPPED
    
    @property
    def failed(self) -> bool:
        """Check if step failed."""
        return self.status == StepStatus.FAILED


class StepBase(ABC):
    """
    Base class for all pipeline steps.
    
    Each step represents a single operation on the report directory:
    - generate: parse the execution log and write the report set
    - clean: remove the report directory
    """
    
    def __init__(self, config):
        """
        Initialize step with configuration.
        
        Args:
            config: Configuration object
        """
        self.config = config
        self.logger = None  # Will be set by subclasses
    
    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this step."""
        pass
    
    def execute(self) -> StepResult:
        """Execute this step (skip/dry_run/validate then _do_execute)."""
        if self.should_skip():
            return StepResult(
                name=self.name,
                status=StepStatus.SKIPPED,
                message=self.skip_message()
            )
        if self.config.dry_run:
            return self.dry_run()
        error = self.validate()
        if error:
            return StepResult(
                name=self.name,
                status=StepStatus.FAILED,
                message=error
            )
        start = time.perf_counter()
        result = self._do_execute()
        result.duration_sec = time.perf_counter() - start
        return result
    
    @abstractmethod
    def _do_execute(self) -> StepResult:
        """
        Perform the step work. Called by execute() after skip/dry_run/validate.
        
        Returns:
            StepResult indicating success or failure
        """
        pass
    
    def should_skip(self) -> bool:
        """
        Check if this step should be skipped.
        
        Returns:
            True if step should be skipped
        """
        return False
    
    def skip_message(self) -> str:
        """Message reported when should_skip() is true."""
        return f"{self.name} step skipped by config"
    
    def validate(self) -> Optional[str]:
        """
        Validate prerequisites for this step.
        
        Returns:
            None if valid, error message string if invalid
        """
        return None
    
    def dry_run(self) -> StepResult:
        """
        Perform a dry run of this step (show what would be done).
        
        Returns:
            StepResult with status SKIPPED and message describing what would be done
        """
        return StepResult(
            name=self.name,
            status=StepStatus.SKIPPED,
            message=f"DRY RUN: Would execute {self.name} step"
        )
