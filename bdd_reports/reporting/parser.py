"""
Parser for Cucumber-style JSON execution logs.

The log is an array of features; each feature holds ``elements`` (scenarios,
backgrounds, ...) and each scenario holds ``steps`` whose ``result`` block
carries the status, a duration in nanoseconds and an optional error message.
"""

import json
import math
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, NoReturn, Optional

from bdd_reports.core.errors import LogReadError, MalformedLogError
from bdd_reports.core.logging import get_logger
from bdd_reports.reporting.models import (
    STATUS_FAILED,
    ExecutionReport,
    Scenario,
    Step,
)

SCENARIO_TYPE = "scenario"
NANOS_PER_MILLI = 1_000_000


def _nanos_to_millis(duration) -> int:
    # Truncates toward zero
    nanos = int(duration)
    millis = abs(nanos) // NANOS_PER_MILLI
    return millis if nanos >= 0 else -millis


class ExecutionLogParser:
    """Build an ExecutionReport from a parsed execution log."""
    
    def __init__(self, warn_unknown_elements: bool = False):
        self.warn_unknown_elements = warn_unknown_elements
        self.logger = get_logger(__name__)
        self._path: Optional[Path] = None
    
    def parse_file(self, path: Path) -> ExecutionReport:
        """
        Read and parse an execution log file.
        
        Args:
            path: Path to the JSON execution log
            
        Returns:
            ExecutionReport built from the log
            
        Raises:
            LogReadError: If the file cannot be read
            MalformedLogError: If the file is not valid JSON or not an array of features
        """
        path = Path(path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise MalformedLogError(f"Execution log is not valid JSON: {e}", path) from e
        except UnicodeDecodeError as e:
            raise MalformedLogError(f"Execution log is not UTF-8 text: {e}", path) from e
        except OSError as e:
            raise LogReadError(f"Cannot read execution log ({e.strerror or e})", path) from e
        
        self._path = path
        try:
            return self.parse(data)
        finally:
            self._path = None
    
    def parse(self, features: Any, generated_at: Optional[datetime] = None) -> ExecutionReport:
        """
        Parse an already-decoded log (a list of feature objects).
        
        Args:
            features: Decoded JSON root
            generated_at: Report timestamp (default: now)
            
        Returns:
            ExecutionReport with scenarios in log order
        """
        if not isinstance(features, list):
            self._malformed(f"expected an array of features, got {type(features).__name__}")
        
        report = ExecutionReport(generated_at=generated_at or datetime.now())
        
        for index, feature in enumerate(features):
            if not isinstance(feature, dict):
                self._malformed(f"feature #{index} is not an object")
            feature_name = self._get_str(feature, "name", f"feature #{index}")
            
            for element in self._get_list(feature, "elements", f"feature '{feature_name}'"):
                if not isinstance(element, dict):
                    self._malformed(f"feature '{feature_name}' has a non-object element")
                element_type = element.get("type")
                if element_type != SCENARIO_TYPE:
                    self._log_skipped_element(feature_name, element)
                    continue
                report.add_scenario(self._parse_scenario(feature_name, element))
        
        self.logger.debug(
            f"Parsed {report.total_tests} scenario(s): "
            f"{report.passed_tests} passed, {report.failed_tests} failed"
        )
        return report
    
    def _parse_scenario(self, feature_name: str, element: Dict[str, Any]) -> Scenario:
        name = self._get_str(element, "name", f"scenario in feature '{feature_name}'")
        scenario = Scenario(feature_name=feature_name, name=name)
        context = f"scenario '{name}'"
        
        for tag in self._get_list(element, "tags", context):
            if not isinstance(tag, dict):
                self._malformed(f"{context} has a non-object tag")
            scenario.add_tag(self._get_str(tag, "name", f"tag of {context}"))
        
        for step in self._get_list(element, "steps", context):
            if not isinstance(step, dict):
                self._malformed(f"{context} has a non-object step")
            scenario.add_step(self._parse_step(step, context))
        
        return scenario
    
    def _parse_step(self, raw: Dict[str, Any], context: str) -> Step:
        name = self._get_str(raw, "name", f"step of {context}")
        step = Step(name=name, keyword=self._get_str(raw, "keyword", f"step '{name}'"))
        
        result = raw.get("result")
        if result is None:
            return step
        if not isinstance(result, dict):
            self._malformed(f"step '{name}' of {context} has a non-object result")
        
        duration = result.get("duration")
        if duration is not None:
            if isinstance(duration, bool) or not isinstance(duration, (int, float)):
                self._malformed(f"step '{name}' of {context} has a non-numeric duration")
            if isinstance(duration, float) and not math.isfinite(duration):
                self._malformed(f"step '{name}' of {context} has a non-finite duration")
            step.duration_ms = _nanos_to_millis(duration)
        
        status = result.get("status")
        if status is not None:
            if not isinstance(status, str):
                self._malformed(f"step '{name}' of {context} has a non-string status")
            step.status = status
        
        if step.status == STATUS_FAILED:
            error_message = result.get("error_message")
            if error_message is not None:
                step.error_message = str(error_message)
        
        return step
    
    def _log_skipped_element(self, feature_name: str, element: Dict[str, Any]) -> None:
        element_type = element.get("type")
        message = (
            f"Skipping element '{element.get('name', '')}' of type "
            f"'{element_type}' in feature '{feature_name}'"
        )
        if self.warn_unknown_elements and element_type != "background":
            self.logger.warning(message)
        else:
            self.logger.debug(message)
    
    def _get_str(self, obj: Dict[str, Any], key: str, context: str) -> str:
        value = obj.get(key)
        if value is None:
            return ""
        if not isinstance(value, str):
            self._malformed(f"{context} has a non-string '{key}'")
        return value
    
    def _get_list(self, obj: Dict[str, Any], key: str, context: str) -> List[Any]:
        value = obj.get(key)
        if value is None:
            return []
        if not isinstance(value, list):
            self._malformed(f"{context} has a non-array '{key}'")
        return value
    
    def _malformed(self, reason: str) -> NoReturn:
        raise MalformedLogError(f"Malformed execution log: {reason}", self._path)
