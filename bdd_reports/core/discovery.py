"""
Project root discovery utilities.

The execution log and the report directory live under the project that ran
the scenarios (``target/cucumber-reports`` and ``target/html-reports`` by
default), so paths are resolved relative to that project's root.
"""

import os
from pathlib import Path
from typing import Optional

from bdd_reports.core.errors import RepoRootNotFoundError


# Marker files/directories that indicate a project root
REPO_MARKERS = [
    "bdd_reports.toml",
    "pom.xml",
    "build.gradle",
    "pyproject.toml",
    ".git",
]

DEFAULT_INPUT_RELPATH = Path("target") / "cucumber-reports" / "cucumber.json"
DEFAULT_REPORT_RELPATH = Path("target") / "html-reports"


def find_repo_root(start_path: Optional[Path] = None) -> Path:
    """
    Find the project root by walking up from start_path looking for markers.
    
    Args:
        start_path: Starting directory (default: current working directory)
        
    Returns:
        Path to the project root
        
    Raises:
        RepoRootNotFoundError: If no project root can be found
    """
    if start_path is None:
        start_path = Path.cwd()
    else:
        start_path = Path(start_path).resolve()
    
    env_root = os.environ.get("BDD_REPORTS_ROOT")
    if env_root:
        env_path = Path(env_root).resolve()
        if env_path.is_dir():
            return env_path
        raise RepoRootNotFoundError(
            f"Environment variable BDD_REPORTS_ROOT points to invalid location: {env_root}"
        )
    
    current = start_path.resolve()
    while True:
        if _is_repo_root(current):
            return current
        if current == current.parent:
            break
        current = current.parent
    
    raise RepoRootNotFoundError(
        f"Could not find project root starting from {start_path}. "
        f"Looking for one of: {', '.join(REPO_MARKERS)}. "
        f"Set BDD_REPORTS_ROOT environment variable to override."
    )


def _is_repo_root(path: Path) -> bool:
    """Check if a path carries any of the project root markers."""
    if not path.is_dir():
        return False
    return any((path / marker).exists() for marker in REPO_MARKERS)


def find_repo_root_or_cwd() -> Path:
    """
    Find project root, or return current working directory if not found.
    
    Returns:
        Project root if found, otherwise current working directory
    """
    try:
        return find_repo_root()
    except RepoRootNotFoundError:
        return Path.cwd()


def default_input_path(repo_root: Path) -> Path:
    """Return where the scenario runner writes its JSON execution log."""
    return repo_root / DEFAULT_INPUT_RELPATH


def default_report_dir(repo_root: Path) -> Path:
    """Return the directory HTML reports are written into."""
    return repo_root / DEFAULT_REPORT_RELPATH
