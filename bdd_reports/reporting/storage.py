"""
Persist rendered report documents.
"""

from pathlib import Path
from typing import Dict, Mapping

from bdd_reports.core.errors import ReportWriteError
from bdd_reports.core.logging import get_logger


class ReportWriter:
    """Write named documents into a report directory."""
    
    def __init__(self, report_dir: Path):
        self.report_dir = Path(report_dir)
        self.logger = get_logger(__name__)
    
    def ensure_dir(self) -> Path:
        """Create the report directory (and parents) if needed."""
        try:
            self.report_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ReportWriteError(f"Cannot create report directory ({e.strerror or e})", self.report_dir) from e
        return self.report_dir
    
    def write_documents(self, documents: Mapping[str, str]) -> Dict[str, Path]:
        """
        Write each document, overwriting existing files of the same name.
        
        Args:
            documents: Mapping of file name to document text
            
        Returns:
            Mapping of file name to written path
            
        Raises:
            ReportWriteError: If the directory or a file cannot be written
        """
        self.ensure_dir()
        
        written = {}
        for filename, content in documents.items():
            file_path = self.report_dir / filename
            try:
                with open(file_path, 'w', encoding='utf-8') as f:
                    f.write(content)
            except OSError as e:
                raise ReportWriteError(f"Cannot write report ({e.strerror or e})", file_path) from e
            self.logger.debug(f"Wrote {file_path}")
            written[filename] = file_path
        
        return written
