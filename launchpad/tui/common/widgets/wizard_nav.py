"""Previous / Next navigation bar shown under every step."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.message import Message
from textual.widgets import Button, Static

from launchpad.core.navigation import next_enabled, show_next, show_previous
from launchpad.core.wizard import TOTAL_STEPS
from launchpad.models import OnboardingState


class WizardNav(Horizontal):
    """Navigation controls. Visibility and enablement follow the wizard rules."""

    class Next(Message):
        """User asked to move forward."""

    class Previous(Message):
        """User asked to move back."""

    def compose(self) -> ComposeResult:
        yield Button("◀ Previous", id="nav-prev")
        yield Static("", id="nav-caption")
        yield Button("Next ▶", id="nav-next", variant="primary")

    def update_for(self, state: OnboardingState) -> None:
        """Show/hide and enable/disable controls for the given state."""
        step = state.current_step
        prev_btn = self.query_one("#nav-prev", Button)
        next_btn = self.query_one("#nav-next", Button)

        prev_btn.display = show_previous(step)
        next_btn.display = show_next(step)
        next_btn.disabled = not next_enabled(state)
        self.query_one("#nav-caption", Static).update(f"Step {step + 1} of {TOTAL_STEPS}")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "nav-next":
            event.stop()
            self.post_message(self.Next())
        elif event.button.id == "nav-prev":
            event.stop()
            self.post_message(self.Previous())
