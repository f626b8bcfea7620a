"""Review step: whole-config validation and read-only summaries."""

from __future__ import annotations

from typing import Sequence

from launchpad.core.templates import total_estimated_minutes
from launchpad.models import ProjectConfig, Template, ValidationResult

# Budgets above this (USD/month) need explicit approval
HIGH_BUDGET_THRESHOLD = 1000


def validate_onboarding(
    config: ProjectConfig, templates: Sequence[Template]
) -> list[ValidationResult]:
    """Recompute every review finding from scratch.

    The returned list replaces any previous results; it is never merged.
    """
    results: list[ValidationResult] = []

    if not config.name:
        results.append(
            ValidationResult(
                field="projectName", message="Project name is required", type="error"
            )
        )
    elif len(config.name) < 3:
        results.append(
            ValidationResult(
                field="projectName",
                message="Project name should be at least 3 characters",
                type="error",
            )
        )

    if not config.environment:
        results.append(
            ValidationResult(
                field="environment",
                message="Environment selection is required",
                type="error",
            )
        )

    if not templates:
        results.append(
            ValidationResult(
                field="templates",
                message="At least one template must be selected",
                type="error",
            )
        )

    if config.budget and config.budget > HIGH_BUDGET_THRESHOLD:
        results.append(
            ValidationResult(
                field="budget",
                message="High budget detected - ensure approval is obtained",
                type="warning",
            )
        )

    if config.environment == "production" and not config.compliance:
        results.append(
            ValidationResult(
                field="compliance",
                message="Production environments should have compliance requirements",
                type="warning",
            )
        )

    return results


def errors(results: Sequence[ValidationResult]) -> list[ValidationResult]:
    return [r for r in results if r.type == "error"]


def warnings(results: Sequence[ValidationResult]) -> list[ValidationResult]:
    return [r for r in results if r.type == "warning"]


def resources_by_type(templates: Sequence[Template]) -> dict[str, list[str]]:
    """Resources that will be created, flattened per template type."""
    grouped: dict[str, list[str]] = {"infrastructure": [], "repository": []}
    for template in templates:
        grouped[template.type].extend(template.resources)
    return grouped


def total_time_caption(templates: Sequence[Template]) -> str:
    return f"Total estimated setup time: {total_estimated_minutes(templates)} minutes"
