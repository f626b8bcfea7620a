"""Step 2: Project name, description, type and language."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Input, RadioButton, RadioSet, Select, Static

from launchpad.core.constants import LANGUAGES, PROJECT_TYPES
from launchpad.core.project_details import frameworks_for, is_details_valid, validate_field
from launchpad.core.wizard import DETAILS_STEP
from launchpad.tui.common.base_screen import StepScreen

# Input widget ID -> config field
_TEXT_FIELDS: dict[str, str] = {
    "input-name": "name",
    "input-display-name": "display_name",
    "input-description": "description",
}


class ProjectDetailsScreen(StepScreen):
    """Collect the basic project identity with per-keystroke validation."""

    CSS_PATH = "project_details.tcss"

    STEP_INDEX = DETAILS_STEP
    TITLE_TEXT = "Project Details"
    SUBTITLE_TEXT = "Tell us about your project to customize the setup process"

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        config = self.state.project_config
        # Screen-local draft; merged upward on every change
        self._draft: dict[str, str] = {
            "name": config.name or "",
            "display_name": config.display_name or "",
            "description": config.description or "",
            "project_type": config.project_type or "",
            "language": config.language or "",
            "framework": config.framework or "",
        }
        self._errors: dict[str, str] = {}

    def compose_step(self) -> ComposeResult:
        with Vertical(id="details-form"):
            yield Static("Project Name *", classes="field-label")
            yield Input(
                value=self._draft["name"],
                placeholder="my-awesome-project",
                id="input-name",
            )
            yield Static("", id="error-name", classes="field-error")
            yield Static("Display Name *", classes="field-label")
            yield Input(
                value=self._draft["display_name"],
                placeholder="My Awesome Project",
                id="input-display-name",
            )
            yield Static("", id="error-display_name", classes="field-error")
            yield Static("Description *", classes="field-label")
            yield Input(
                value=self._draft["description"],
                placeholder="Brief description of your project's purpose and functionality",
                id="input-description",
            )
            yield Static("", id="error-description", classes="field-error")

            with Horizontal(id="details-choices"):
                with Vertical():
                    yield Static("Project Type *", classes="field-label")
                    with RadioSet(id="project-type-radio"):
                        for option in PROJECT_TYPES:
                            yield RadioButton(
                                f"{option.display_name}: {option.description}",
                                id=f"type-{option.id}",
                                value=option.id == self._draft["project_type"],
                            )
                with Vertical():
                    yield Static("Programming Language *", classes="field-label")
                    with RadioSet(id="language-radio"):
                        for option in LANGUAGES:
                            yield RadioButton(
                                option.display_name,
                                id=f"language-{option.id}",
                                value=option.id == self._draft["language"],
                            )
            with Vertical(id="framework-section"):
                yield Static("Framework (Optional)", classes="field-label")
                yield Select(
                    self._framework_options(),
                    prompt="Select a framework",
                    id="framework-select",
                    value=self._draft["framework"] or Select.NULL,
                )
            yield Static("", id="details-status")

    def _framework_options(self) -> list[tuple[str, str]]:
        return [(name, name) for name in frameworks_for(self._draft["language"])]

    def on_step_mount(self) -> None:
        self.query_one("#framework-section", Vertical).display = bool(self._draft["language"])
        self._render_status()
        self.query_one("#input-name", Input).focus()

    def _render_errors(self) -> None:
        for field in ("name", "display_name", "description"):
            self.query_one(f"#error-{field}", Static).update(self._errors.get(field, ""))

    def _render_status(self) -> None:
        status = self.query_one("#details-status", Static)
        if self.is_locally_valid:
            status.update("✓ Project details look good")
        else:
            status.update("Fill in all required fields (*) to continue")

    @property
    def is_locally_valid(self) -> bool:
        return is_details_valid(self._draft, self._errors)

    def set_field(self, field: str, value: str) -> None:
        """Update one draft field, validate it and merge it into the shared config."""
        self._draft[field] = value
        self._errors = validate_field(field, value, self._errors)
        self._render_errors()
        self._render_status()
        self._store.update_project_config({field: value})

    def select_language(self, language: str) -> None:
        """Choosing a language clears the framework, whose choices depend on it."""
        self._draft["language"] = language
        self._draft["framework"] = ""
        select = self.query_one("#framework-select", Select)
        select.set_options(self._framework_options())
        self.query_one("#framework-section", Vertical).display = True
        self._render_status()
        self._store.update_project_config({"language": language, "framework": ""})

    def on_input_changed(self, event: Input.Changed) -> None:
        field = _TEXT_FIELDS.get(event.input.id or "")
        if field is None or self._draft[field] == event.value:
            return
        self.set_field(field, event.value)

    def on_radio_set_changed(self, event: RadioSet.Changed) -> None:
        pressed_id = event.pressed.id or ""
        if event.radio_set.id == "project-type-radio":
            project_type = pressed_id.removeprefix("type-")
            if project_type != self._draft["project_type"]:
                self.set_field("project_type", project_type)
        elif event.radio_set.id == "language-radio":
            language = pressed_id.removeprefix("language-")
            if language != self._draft["language"]:
                self.select_language(language)

    def on_select_changed(self, event: Select.Changed) -> None:
        value = event.value if isinstance(event.value, str) else ""
        if value != self._draft["framework"]:
            self.set_field("framework", value)
