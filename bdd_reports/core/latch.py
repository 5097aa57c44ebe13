"""
One-shot "reports already generated" state for a single run.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class GenerationLatch:
    """Set once a generation has completed; owned by whoever drives the run.
    
    Construct a fresh latch per run and pass it to ReportPipeline. While set,
    further generation requests are no-ops unless forced.
    """
    generated_at: Optional[datetime] = None
    
    @property
    def is_set(self) -> bool:
        return self.generated_at is not None
    
    def set(self) -> None:
        self.generated_at = datetime.now()
    
    def reset(self) -> None:
        self.generated_at = None
