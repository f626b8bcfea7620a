"""Onboarding wizard screens, one per step."""

from launchpad.tui.common.base_screen import StepScreen

from .auth import AuthScreen
from .completion import CompletionScreen
from .configuration import ConfigurationScreen
from .project_details import ProjectDetailsScreen
from .provisioning import ProvisioningScreen
from .review import ReviewScreen
from .templates import TemplateSelectionScreen

# Indexed by step number
STEP_SCREENS: list[type[StepScreen]] = [
    AuthScreen,
    ProjectDetailsScreen,
    TemplateSelectionScreen,
    ConfigurationScreen,
    ReviewScreen,
    ProvisioningScreen,
    CompletionScreen,
]

__all__ = [
    "STEP_SCREENS",
    "AuthScreen",
    "CompletionScreen",
    "ConfigurationScreen",
    "ProjectDetailsScreen",
    "ProvisioningScreen",
    "ReviewScreen",
    "TemplateSelectionScreen",
]
