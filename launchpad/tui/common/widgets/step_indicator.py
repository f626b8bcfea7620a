"""Step indicator: where the user is in the wizard."""

from rich.text import Text
from textual.widgets import Static

from launchpad.core.wizard import STEP_TITLES


def render_steps(current_step: int, titles: list[str] = STEP_TITLES) -> Text:
    """Completed steps get a check, the current step is highlighted."""
    text = Text()
    for index, title in enumerate(titles):
        if index < current_step:
            text.append(f"✓ {title}", style="green")
        elif index == current_step:
            text.append(f"{index + 1} {title}", style="bold reverse")
        else:
            text.append(f"{index + 1} {title}", style="dim")
        if index < len(titles) - 1:
            text.append("  ›  ", style="green" if index < current_step else "dim")
    return text


class StepIndicator(Static):
    """Single-line breadcrumb of all wizard steps."""

    def show_step(self, current_step: int) -> None:
        self.update(render_steps(current_step))
