"""Step 3: Template selection."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, OptionList, Static
from textual.widgets.option_list import Option

from launchpad.core.constants import TEMPLATE_CATALOG
from launchpad.core.templates import (
    TEMPLATE_FILTERS,
    TemplateFilter,
    filter_templates,
    is_selected,
    resource_preview,
    selection_caption,
    toggle_template,
    total_estimated_minutes,
)
from launchpad.core.wizard import TEMPLATES_STEP
from launchpad.models import OnboardingState, Template
from launchpad.tui.common.base_screen import StepScreen
from launchpad.tui.common.keybindings import (
    FILTER_F_BINDING,
    NAV_DOWN_J_BINDING,
    NAV_UP_K_BINDING,
    with_step_bindings,
)

_COMPLEXITY_STYLES = {
    "simple": "green",
    "intermediate": "yellow",
    "advanced": "red",
}


def template_prompt(template: Template, selected: bool) -> Text:
    """Multi-line option text for one template card."""
    text = Text()
    text.append("[x] " if selected else "[ ] ", style="bold cyan" if selected else "dim")
    text.append(template.name, style="bold")
    text.append(f"  ({template.type})\n", style="dim")
    text.append(f"    {template.description}\n")
    text.append("    ")
    text.append(template.complexity, style=_COMPLEXITY_STYLES.get(template.complexity, ""))
    text.append(f"  ·  {template.estimated_time}  ·  {template.category}\n")
    text.append(f"    {', '.join(template.technologies)}\n", style="italic")
    text.append(f"    Includes: {resource_preview(template)}", style="dim")
    return text


class TemplateSelectionScreen(StepScreen):
    """Browse the template catalog and toggle selections."""

    CSS_PATH = "templates.tcss"

    STEP_INDEX = TEMPLATES_STEP
    TITLE_TEXT = "Template Selection"
    SUBTITLE_TEXT = "Choose from our curated templates to accelerate your project setup"

    BINDINGS = with_step_bindings(
        NAV_DOWN_J_BINDING,
        NAV_UP_K_BINDING,
        FILTER_F_BINDING,
    )

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._filter: TemplateFilter = "all"
        self._available: list[Template] = []

    def compose_step(self) -> ComposeResult:
        with Horizontal(id="template-filters"):
            for type_filter in TEMPLATE_FILTERS:
                yield Button(
                    type_filter.capitalize(),
                    id=f"filter-{type_filter}",
                    classes="filter-button",
                )
            yield Static("", id="template-count")
        yield OptionList(id="template-list")
        with Vertical(id="template-summary"):
            yield Static("Selected Templates", id="template-summary-title")
            yield Static("", id="template-summary-body")

    def on_step_mount(self) -> None:
        self._apply_filter()
        self.query_one("#template-list", OptionList).focus()

    def on_state_changed(self, state: OnboardingState) -> None:
        self._render_summary()

    def _apply_filter(self) -> None:
        config = self.state.project_config
        self._available = filter_templates(
            TEMPLATE_CATALOG,
            self._filter,
            project_type=config.project_type or "",
            language=config.language or "",
        )
        for type_filter in TEMPLATE_FILTERS:
            button = self.query_one(f"#filter-{type_filter}", Button)
            button.variant = "primary" if type_filter == self._filter else "default"
        self._render_list()
        self._render_summary()

    def _render_list(self) -> None:
        opt_list = self.query_one("#template-list", OptionList)
        highlighted = opt_list.highlighted
        opt_list.clear_options()
        selected = self.state.selected_templates
        for template in self._available:
            opt_list.add_option(
                Option(template_prompt(template, is_selected(selected, template.id)), id=template.id)
            )
        if self._available:
            if highlighted is None or highlighted >= len(self._available):
                highlighted = 0
            opt_list.highlighted = highlighted

    def _render_summary(self) -> None:
        selected = self.state.selected_templates
        self.query_one("#template-count", Static).update(selection_caption(len(selected)))
        summary = self.query_one("#template-summary", Vertical)
        if not selected:
            summary.display = False
            return
        summary.display = True
        lines = [f"{t.name}  ·  {t.estimated_time}" for t in selected]
        lines.append("")
        lines.append(f"Total estimated setup time: {total_estimated_minutes(selected)} minutes")
        self.query_one("#template-summary-body", Static).update("\n".join(lines))

    def toggle(self, template_id: str) -> None:
        """Toggle a template by ID and push the full selection upward."""
        template = next((t for t in TEMPLATE_CATALOG if t.id == template_id), None)
        if template is None:
            return
        self._store.update_selected_templates(
            toggle_template(self.state.selected_templates, template)
        )
        self._render_list()

    def set_filter(self, type_filter: TemplateFilter) -> None:
        self._filter = type_filter
        self._apply_filter()

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        if event.option.id:
            self.toggle(event.option.id)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id or ""
        if button_id.startswith("filter-"):
            self.set_filter(button_id.removeprefix("filter-"))  # type: ignore[arg-type]

    def action_cycle_filter(self) -> None:
        index = TEMPLATE_FILTERS.index(self._filter)
        self.set_filter(TEMPLATE_FILTERS[(index + 1) % len(TEMPLATE_FILTERS)])

    def action_cursor_down(self) -> None:
        self.query_one("#template-list", OptionList).action_cursor_down()

    def action_cursor_up(self) -> None:
        self.query_one("#template-list", OptionList).action_cursor_up()
