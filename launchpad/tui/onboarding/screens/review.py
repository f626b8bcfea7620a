"""Step 5: Review everything and surface validation findings."""

from __future__ import annotations

from typing import Optional

from textual.app import ComposeResult
from textual.containers import Grid, Vertical
from textual.widgets import Static

from launchpad.core.configuration import format_budget
from launchpad.core.review import (
    errors,
    resources_by_type,
    total_time_caption,
    validate_onboarding,
    warnings,
)
from launchpad.core.wizard import REVIEW_STEP
from launchpad.models import OnboardingState, ProjectConfig, Template
from launchpad.tui.common.base_screen import StepScreen


def _bullets(items: list[str], empty: str = "None") -> str:
    if not items:
        return empty
    return "\n".join(f"• {item}" for item in items)


class ReviewScreen(StepScreen):
    """Read-only summary; validation is recomputed whenever its inputs change."""

    CSS_PATH = "review.tcss"

    STEP_INDEX = REVIEW_STEP
    TITLE_TEXT = "Review Configuration"
    SUBTITLE_TEXT = "Review your project configuration before provisioning"

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._validated_inputs: Optional[tuple[ProjectConfig, list[Template]]] = None

    def compose_step(self) -> ComposeResult:
        with Vertical(id="review-errors", classes="review-findings"):
            yield Static("Errors Found", classes="review-findings-title")
            yield Static("", id="review-errors-body")
        with Vertical(id="review-warnings", classes="review-findings"):
            yield Static("Warnings", classes="review-findings-title")
            yield Static("", id="review-warnings-body")
        with Grid(id="review-grid"):
            with Vertical(classes="review-card"):
                yield Static("User Information", classes="review-card-title")
                yield Static("", id="review-user", markup=False)
            with Vertical(classes="review-card"):
                yield Static("Project Details", classes="review-card-title")
                yield Static("", id="review-project", markup=False)
            with Vertical(classes="review-card"):
                yield Static("Selected Templates", classes="review-card-title")
                yield Static("", id="review-templates", markup=False)
            with Vertical(classes="review-card"):
                yield Static("Configuration", classes="review-card-title")
                yield Static("", id="review-config", markup=False)
        with Vertical(id="review-ready"):
            yield Static("Ready to Provision", id="review-ready-title")
            yield Static("", id="review-resources", markup=False)

    def on_step_mount(self) -> None:
        self.revalidate()
        self._refresh_view()

    def on_state_changed(self, state: OnboardingState) -> None:
        self.revalidate()
        self._refresh_view()

    def revalidate(self) -> None:
        """Recompute findings if config or templates changed since the last run."""
        state = self.state
        inputs = (state.project_config, list(state.selected_templates))
        if inputs == self._validated_inputs:
            return
        self._validated_inputs = inputs
        self._store.update_validation_results(
            validate_onboarding(state.project_config, state.selected_templates)
        )

    def _refresh_view(self) -> None:
        state = self.state
        found_errors = errors(state.validation_results)
        found_warnings = warnings(state.validation_results)

        self.query_one("#review-errors", Vertical).display = bool(found_errors)
        self.query_one("#review-errors-body", Static).update(
            "\n".join(r.message for r in found_errors)
        )
        self.query_one("#review-warnings", Vertical).display = bool(found_warnings)
        self.query_one("#review-warnings-body", Static).update(
            "\n".join(r.message for r in found_warnings)
        )

        self.query_one("#review-user", Static).update(self._user_summary(state))
        self.query_one("#review-project", Static).update(self._project_summary(state))
        self.query_one("#review-templates", Static).update(self._templates_summary(state))
        self.query_one("#review-config", Static).update(self._config_summary(state))
        self.query_one("#review-resources", Static).update(self._resources_summary(state))

    @staticmethod
    def _user_summary(state: OnboardingState) -> str:
        user = state.user
        if user is None:
            return "Not signed in"
        return f"{user.name}\n{user.email}\n{user.role} • {user.team}"

    @staticmethod
    def _project_summary(state: OnboardingState) -> str:
        config = state.project_config
        lines = [
            f"Name: {config.name or ''}",
            f"Display Name: {config.display_name or ''}",
            f"Type: {config.project_type or ''}",
            f"Language: {config.language or ''}",
        ]
        if config.framework:
            lines.append(f"Framework: {config.framework}")
        return "\n".join(lines)

    @staticmethod
    def _templates_summary(state: OnboardingState) -> str:
        templates = state.selected_templates
        if not templates:
            return "No templates selected"
        lines = [
            f"{t.name} ({t.type})\n  {t.complexity} • {t.estimated_time}" for t in templates
        ]
        lines.append(total_time_caption(templates))
        return "\n".join(lines)

    @staticmethod
    def _config_summary(state: OnboardingState) -> str:
        config = state.project_config
        lines = [
            f"Environment: {config.environment or ''}",
            f"Data Store: {config.data_store or ''}",
            f"Budget: {format_budget(config.budget)}",
        ]
        if config.compliance:
            lines.append(f"Compliance: {', '.join(config.compliance)}")
        if config.tags:
            lines.append("Tags: " + ", ".join(f"{k}: {v}" for k, v in config.tags.items()))
        return "\n".join(lines)

    @staticmethod
    def _resources_summary(state: OnboardingState) -> str:
        grouped = resources_by_type(state.selected_templates)
        return (
            "The following resources will be created:\n\n"
            f"Infrastructure\n{_bullets(grouped['infrastructure'])}\n\n"
            f"Repository\n{_bullets(grouped['repository'])}"
        )
