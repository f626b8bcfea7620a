"""Domain models."""

from .onboarding import (
    CompletionData,
    OnboardingState,
    ProjectConfig,
    ProvisioningStep,
    Template,
    User,
    ValidationResult,
)

__all__ = [
    "CompletionData",
    "OnboardingState",
    "ProjectConfig",
    "ProvisioningStep",
    "Template",
    "User",
    "ValidationResult",
]
