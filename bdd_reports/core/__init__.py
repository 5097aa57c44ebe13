"""
Core modules for BDD Reports.
"""

from bdd_reports.core.config import Config
from bdd_reports.core.discovery import (
    find_repo_root,
    find_repo_root_or_cwd,
    default_input_path,
    default_report_dir,
)
from bdd_reports.core.errors import (
    BddReportsError,
    RepoRootNotFoundError,
    ConfigurationError,
    PathNotFoundError,
    StepExecutionError,
    MalformedLogError,
    LogReadError,
    ReportWriteError,
)
from bdd_reports.core.latch import GenerationLatch

__all__ = [
    "Config",
    "find_repo_root",
    "find_repo_root_or_cwd",
    "default_input_path",
    "default_report_dir",
    "BddReportsError",
    "RepoRootNotFoundError",
    "ConfigurationError",
    "PathNotFoundError",
    "StepExecutionError",
    "MalformedLogError",
    "LogReadError",
    "ReportWriteError",
    "GenerationLatch",
]
