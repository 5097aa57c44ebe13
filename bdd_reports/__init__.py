"""
BDD Reports Package

Turn a Cucumber-style JSON execution log into dashboard, detailed and
timeline HTML reports.
"""

__version__ = "0.1.0"

from bdd_reports.core.config import Config
from bdd_reports.core.latch import GenerationLatch
from bdd_reports.core.pipeline import ReportPipeline

__all__ = [
    "Config",
    "GenerationLatch",
    "ReportPipeline",
]
