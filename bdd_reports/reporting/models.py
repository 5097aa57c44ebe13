"""
Data models for execution reports.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional


STATUS_PASSED = "passed"
STATUS_FAILED = "failed"


class ScenarioStatus(Enum):
    """Scenario outcome, derived from its steps."""
    PASSED = STATUS_PASSED
    FAILED = STATUS_FAILED


@dataclass
class Step:
    """Single step of a scenario.
    
    ``status`` is whatever the execution log reported (passed, failed,
    skipped, pending, undefined, ...) and is echoed verbatim.
    """
    name: str
    keyword: str = ""
    status: str = STATUS_PASSED
    duration_ms: int = 0
    error_message: Optional[str] = None
    
    @property
    def failed(self) -> bool:
        return self.status == STATUS_FAILED
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization, excluding null fields."""
        result = {
            "keyword": self.keyword,
            "name": self.name,
            "status": self.status,
            "duration_ms": self.duration_ms,
        }
        if self.error_message is not None:
            result["error_message"] = self.error_message
        return result


@dataclass
class Scenario:
    """Executable scenario and its ordered steps."""
    feature_name: str
    name: str
    status: ScenarioStatus = ScenarioStatus.PASSED
    duration_ms: int = 0
    tags: List[str] = field(default_factory=list)
    steps: List[Step] = field(default_factory=list)
    
    def add_tag(self, tag: str) -> None:
        if tag not in self.tags:
            self.tags.append(tag)
    
    def add_step(self, step: Step) -> None:
        """Append a step, accumulating its duration.
        
        The first failed step marks the scenario failed; later steps are kept
        but never flip it back.
        """
        self.steps.append(step)
        self.duration_ms += step.duration_ms
        if step.failed:
            self.status = ScenarioStatus.FAILED
    
    @property
    def passed(self) -> bool:
        return self.status == ScenarioStatus.PASSED
    
    @property
    def tag_line(self) -> str:
        """Tags joined for display; empty string when untagged."""
        return ", ".join(self.tags)
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "feature_name": self.feature_name,
            "name": self.name,
            "status": self.status.value,
            "duration_ms": self.duration_ms,
            "tags": list(self.tags),
            "steps": [step.to_dict() for step in self.steps],
        }


@dataclass
class ExecutionReport:
    """Aggregate of one execution log, consumed by every renderer."""
    generated_at: datetime = field(default_factory=datetime.now)
    scenarios: List[Scenario] = field(default_factory=list)
    total_tests: int = 0
    passed_tests: int = 0
    failed_tests: int = 0
    total_duration_ms: int = 0
    
    def add_scenario(self, scenario: Scenario) -> None:
        """Append a fully built scenario and update the running totals."""
        self.scenarios.append(scenario)
        self.total_tests += 1
        if scenario.passed:
            self.passed_tests += 1
        else:
            self.failed_tests += 1
        self.total_duration_ms += scenario.duration_ms
    
    @property
    def generated_at_display(self) -> str:
        return self.generated_at.strftime("%Y-%m-%d %H:%M:%S")
    
    def get_failed_scenarios(self) -> List[Scenario]:
        """Get list of failed scenarios."""
        return [s for s in self.scenarios if not s.passed]
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "generated_at": self.generated_at.isoformat(),
            "total_tests": self.total_tests,
            "passed_tests": self.passed_tests,
            "failed_tests": self.failed_tests,
            "total_duration_ms": self.total_duration_ms,
            "scenarios": [scenario.to_dict() for scenario in self.scenarios],
        }
