"""Step 6: Simulated provisioning run."""

import logging
from typing import Optional

from rich.text import Text
from textual.app import ComposeResult
from textual.widgets import ProgressBar, Static

from launchpad.core.provisioning import ProvisioningRunner, initial_steps, progress
from launchpad.core.wizard import PROVISIONING_STEP
from launchpad.models import OnboardingState, ProvisioningStep
from launchpad.tui.common.base_screen import StepScreen

logger = logging.getLogger(__name__)

_STATUS_ICONS = {
    "pending": ("○", "dim"),
    "running": ("◌", "bold blue"),
    "completed": ("✓", "bold green"),
    "failed": ("✗", "bold red"),
}


def render_steps(steps: list[ProvisioningStep], current_index: Optional[int] = None) -> Text:
    """One block per step: icon, name, message, details and timestamps."""
    text = Text()
    for index, step in enumerate(steps):
        icon, style = _STATUS_ICONS.get(step.status, ("?", ""))
        marker = "▶ " if index == current_index else "  "
        text.append(marker)
        text.append(f"{icon} ", style=style)
        text.append(step.name, style="bold")
        if step.start_time:
            text.append(f"  started {step.start_time:%H:%M:%S}", style="dim")
        if step.end_time:
            text.append(f"  done {step.end_time:%H:%M:%S}", style="dim")
        text.append("\n")
        if step.message:
            text.append(f"     {step.message}\n")
        if step.details:
            text.append(f"     {step.details}\n", style="dim italic")
        text.append("\n")
    return text


class ProvisioningScreen(StepScreen):
    """Seeds the step list and runs it once while this screen is showing.

    The run lives in a worker owned by the screen, so leaving the step
    cancels it; coming back starts a fresh run rather than resuming.
    """

    CSS_PATH = "provisioning.tcss"

    STEP_INDEX = PROVISIONING_STEP
    TITLE_TEXT = "Provisioning Project"
    SUBTITLE_TEXT = "Setting up your project infrastructure and repository"

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._runner: Optional[ProvisioningRunner] = None

    def compose_step(self) -> ComposeResult:
        yield Static("", id="provisioning-progress-text")
        yield ProgressBar(total=100, show_eta=False, id="provisioning-progress")
        yield Static("", id="provisioning-steps")

    def on_step_mount(self) -> None:
        if not self.state.provisioning:
            self._store.update_provisioning_steps(initial_steps())
        self._refresh_view()
        if not self.state.is_complete:
            self.start_provisioning()

    def on_state_changed(self, state: OnboardingState) -> None:
        self._refresh_view()

    def start_provisioning(self) -> None:
        self._runner = ProvisioningRunner.from_settings(
            self._settings,
            on_update=self._store.update_provisioning_steps,
            on_complete=self._store.complete,
        )
        self.run_worker(self._runner.run(initial_steps()), exclusive=True)

    def _refresh_view(self) -> None:
        steps = self.state.provisioning
        completed, total, percent = progress(steps)
        self.query_one("#provisioning-progress-text", Static).update(
            f"Progress: {completed} of {total} steps completed ({percent}%)"
        )
        self.query_one("#provisioning-progress", ProgressBar).update(progress=percent)
        current = self._runner.current_index if self._runner and not self.state.is_complete else None
        self.query_one("#provisioning-steps", Static).update(render_steps(steps, current))
