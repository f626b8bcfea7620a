"""Common reusable Textual widgets."""

from .step_indicator import StepIndicator
from .wizard_nav import WizardNav

__all__ = ["StepIndicator", "WizardNav"]
