"""Application logic layer."""

from .auth import authenticate, mock_user_for
from .provisioning import ProvisioningRunner, build_completion_data, initial_steps
from .review import validate_onboarding
from .templates import filter_templates, toggle_template, total_estimated_minutes
from .wizard import STEP_TITLES, TOTAL_STEPS, WizardStore, can_proceed_from

__all__ = [
    "ProvisioningRunner",
    "STEP_TITLES",
    "TOTAL_STEPS",
    "WizardStore",
    "authenticate",
    "build_completion_data",
    "can_proceed_from",
    "filter_templates",
    "initial_steps",
    "mock_user_for",
    "toggle_template",
    "total_estimated_minutes",
    "validate_onboarding",
]
