"""
Pipeline step implementations.
"""

from bdd_reports.core.steps.base import StepBase, StepResult, StepStatus
from bdd_reports.core.steps.generate import GenerateStep
from bdd_reports.core.steps.clean import CleanStep

__all__ = [
    "StepBase",
    "StepResult",
    "StepStatus",
    "GenerateStep",
    "CleanStep",
]
