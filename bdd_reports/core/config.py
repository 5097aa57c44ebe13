"""
Configuration management for BDD Reports.
"""

import os
from pathlib import Path
from typing import Optional, Dict, Any
from dataclasses import dataclass

from bdd_reports.core.discovery import (
    default_input_path,
    default_report_dir,
    find_repo_root_or_cwd,
)
from bdd_reports.core.errors import ConfigurationError, PathNotFoundError

PATH_KEYS = frozenset({
    "project_root", "input_path", "report_dir", "log_file",
})


@dataclass
class Config:
    """Configuration class for BDD Reports."""
    
    # Paths - derived in __post_init__ from the project root when not given
    project_root: Optional[Path] = None
    config_file: Optional[Path] = None
    input_path: Optional[Path] = None
    report_dir: Optional[Path] = None
    log_file: Optional[Path] = None
    
    # Output configuration
    export_json: bool = False  # also write report.json next to the HTML reports
    
    # Run configuration
    verbosity: int = 0  # 0=warnings, 1=progress, 2=details, 3=debug
    dry_run: bool = False
    force: bool = False
    warn_unknown_elements: bool = False
    
    def __post_init__(self):
        """Post-initialization processing."""
        if self.project_root is None:
            self.project_root = find_repo_root_or_cwd()
        else:
            self.project_root = Path(self.project_root).resolve()
        
        if not self.project_root.exists():
            raise PathNotFoundError(f"Project root does not exist: {self.project_root}")
        
        # Load defaults from config file (if present)
        self._load_config_file()
        
        if self.input_path is None:
            self.input_path = default_input_path(self.project_root)
        else:
            self.input_path = self._resolve(self.input_path)
        
        if self.report_dir is None:
            self.report_dir = default_report_dir(self.project_root)
        else:
            self.report_dir = self._resolve(self.report_dir)
        
        if self.log_file is not None:
            self.log_file = self._resolve(self.log_file)
        
        if isinstance(self.verbosity, bool) or not isinstance(self.verbosity, int) or not 0 <= self.verbosity <= 3:
            raise ConfigurationError(f"verbosity must be between 0 and 3, got {self.verbosity}")
    
    def _resolve(self, path) -> Path:
        """Resolve relative paths against the project root."""
        path = Path(path)
        if not path.is_absolute():
            path = self.project_root / path
        return path.resolve()
    
    def _load_config_file(self) -> None:
        """Load defaults from bdd_reports.toml if present."""
        env_path = os.environ.get("BDD_REPORTS_CONFIG")
        if env_path:
            self.config_file = Path(env_path).resolve()
        elif self.config_file is None:
            self.config_file = self.project_root / "bdd_reports.toml"
        
        if not self.config_file or not self.config_file.exists():
            return
        
        try:
            try:
                import tomllib  # Python 3.11+
            except ModuleNotFoundError:  # Python 3.8-3.10
                import tomli as tomllib
            
            data = tomllib.loads(self.config_file.read_text())
            table = data.get("bdd_reports") or data.get("tool", {}).get("bdd_reports", {})
            if not isinstance(table, dict):
                return
        except Exception as e:
            raise ConfigurationError(f"Failed to read config file: {self.config_file}: {e}") from e
        
        # Explicit constructor arguments win over file defaults
        defaults = Config.__dataclass_fields__
        for key, value in table.items():
            if key not in defaults or key in ("project_root", "config_file"):
                continue
            if value is None:
                continue
            current = getattr(self, key)
            if key in PATH_KEYS:
                if current is None:
                    setattr(self, key, value)
                continue
            if current == _field_default(key):
                setattr(self, key, value)
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "project_root": str(self.project_root),
            "input_path": str(self.input_path),
            "report_dir": str(self.report_dir),
            "log_file": str(self.log_file) if self.log_file else None,
            "export_json": self.export_json,
            "verbosity": self.verbosity,
            "dry_run": self.dry_run,
            "force": self.force,
            "warn_unknown_elements": self.warn_unknown_elements,
        }
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        """Create configuration from dictionary."""
        data = dict(data)
        for key in PATH_KEYS:
            if key in data and isinstance(data[key], str):
                data[key] = Path(data[key])
        return cls(**data)


def _field_default(key: str) -> Any:
    return Config.__dataclass_fields__[key].default
