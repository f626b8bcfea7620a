"""Step 4: Environment, data store, budget, compliance and tags."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Grid, Horizontal, Vertical
from textual.widgets import Checkbox, Input, RadioButton, RadioSet, Static

from launchpad.core.configuration import (
    format_budget,
    format_compliance,
    parse_budget,
    tag_display_value,
    toggle_compliance,
    update_tag,
)
from launchpad.core.constants import COMPLIANCE_OPTIONS, DATA_STORES, ENVIRONMENTS, TAG_KEYS
from launchpad.core.wizard import CONFIGURATION_STEP
from launchpad.models import OnboardingState
from launchpad.tui.common.base_screen import StepScreen


class ConfigurationScreen(StepScreen):
    """Every change round-trips into the shared config immediately."""

    CSS_PATH = "configuration.tcss"

    STEP_INDEX = CONFIGURATION_STEP
    TITLE_TEXT = "Configuration"
    SUBTITLE_TEXT = "Configure environment settings, data storage, and compliance requirements"

    def compose_step(self) -> ComposeResult:
        config = self.state.project_config
        with Horizontal(id="config-choices"):
            with Vertical():
                yield Static("Environment *", classes="field-label")
                with RadioSet(id="environment-radio"):
                    for option in ENVIRONMENTS:
                        yield RadioButton(
                            f"{option.display_name}: {option.description}",
                            id=f"env-{option.id}",
                            value=option.id == config.environment,
                        )
            with Vertical():
                yield Static("Data Store *", classes="field-label")
                with RadioSet(id="data-store-radio"):
                    for option in DATA_STORES:
                        yield RadioButton(
                            f"{option.display_name}: {option.description}",
                            id=f"store-{option.id}",
                            value=option.id == config.data_store,
                        )

        yield Static("Monthly Budget (USD)", classes="field-label")
        yield Input(
            value=str(config.budget or 0),
            placeholder="0",
            type="integer",
            id="budget-input",
        )
        yield Static(
            "Set to 0 for no budget limit. This helps with cost monitoring and alerts.",
            classes="field-hint",
        )

        yield Static("Compliance Requirements", classes="field-label")
        with Grid(id="compliance-grid"):
            for option in COMPLIANCE_OPTIONS:
                yield Checkbox(
                    f"{option.display_name} ({option.description})",
                    value=option.id in config.compliance,
                    id=f"compliance-{option.id}",
                )

        yield Static("Resource Tags", classes="field-label")
        with Grid(id="tags-grid"):
            for key in TAG_KEYS:
                yield Input(
                    value=config.tags.get(key, ""),
                    placeholder=tag_display_value(config.tags, key, config.environment) or key,
                    id=f"tag-{key}",
                )
        yield Static(
            "These tags will be applied to all provisioned resources for better "
            "organization and cost tracking.",
            classes="field-hint",
        )

        with Vertical(id="config-summary"):
            yield Static("Configuration Summary", id="config-summary-title")
            yield Static("", id="config-summary-body")

    def on_step_mount(self) -> None:
        self._render_summary()

    def on_state_changed(self, state: OnboardingState) -> None:
        self._render_summary()

    def _render_summary(self) -> None:
        config = self.state.project_config
        lines = [
            f"Environment: {config.environment or 'Not selected'}",
            f"Data Store: {config.data_store or 'Not selected'}",
            f"Budget: {format_budget(config.budget)}",
            f"Compliance: {format_compliance(config.compliance)}",
        ]
        self.query_one("#config-summary-body", Static).update("\n".join(lines))

    def select_environment(self, environment: str) -> None:
        self._store.update_project_config({"environment": environment})
        env_tag = self.query_one("#tag-Environment", Input)
        env_tag.placeholder = tag_display_value(
            self.state.project_config.tags, "Environment", environment
        ) or "Environment"

    def select_data_store(self, data_store: str) -> None:
        self._store.update_project_config({"data_store": data_store})

    def set_budget(self, raw: str) -> None:
        budget = parse_budget(raw)
        if budget != (self.state.project_config.budget or 0):
            self._store.update_project_config({"budget": budget})

    def toggle_compliance(self, option_id: str) -> None:
        compliance = toggle_compliance(self.state.project_config.compliance, option_id)
        self._store.update_project_config({"compliance": compliance})

    def set_tag(self, key: str, value: str) -> None:
        tags = self.state.project_config.tags
        updated = update_tag(tags, key, value)
        if updated != tags:
            self._store.update_project_config({"tags": updated})

    def on_radio_set_changed(self, event: RadioSet.Changed) -> None:
        pressed_id = event.pressed.id or ""
        config = self.state.project_config
        if event.radio_set.id == "environment-radio":
            environment = pressed_id.removeprefix("env-")
            if environment != config.environment:
                self.select_environment(environment)
        elif event.radio_set.id == "data-store-radio":
            data_store = pressed_id.removeprefix("store-")
            if data_store != config.data_store:
                self.select_data_store(data_store)

    def on_input_changed(self, event: Input.Changed) -> None:
        input_id = event.input.id or ""
        if input_id == "budget-input":
            self.set_budget(event.value)
        elif input_id.startswith("tag-"):
            self.set_tag(input_id.removeprefix("tag-"), event.value.strip())

    def on_checkbox_changed(self, event: Checkbox.Changed) -> None:
        option_id = (event.checkbox.id or "").removeprefix("compliance-")
        if event.value != (option_id in self.state.project_config.compliance):
            self.toggle_compliance(option_id)
