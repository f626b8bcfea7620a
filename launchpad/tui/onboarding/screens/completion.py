"""Step 7: Results of the provisioning run."""

import logging
import webbrowser
from typing import Optional
from urllib.parse import urlparse

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.timer import Timer
from textual.widgets import Button, Static

from launchpad.core.wizard import COMPLETION_STEP
from launchpad.models import CompletionData
from launchpad.tui.common.base_screen import StepScreen
from launchpad.tui.common.keybindings import FINISH_ENTER_BINDING, with_step_bindings

logger = logging.getLogger(__name__)


def url_label(url: str) -> str:
    """Last path segment of a URL, or the URL itself."""
    return url.rstrip("/").split("/")[-1] or url


def copy_targets(data: CompletionData) -> dict[str, str]:
    """Copyable URLs keyed by a stable item identifier."""
    targets = {"repo": data.repository_url}
    for index, url in enumerate(data.infrastructure_urls):
        targets[f"infra-{index}"] = url
    return targets


class CompletionScreen(StepScreen):
    """Shows the completion payload with copy/open actions per URL."""

    CSS_PATH = "completion.tcss"

    STEP_INDEX = COMPLETION_STEP
    TITLE_TEXT = "Project Successfully Created!"
    SUBTITLE_TEXT = "Your project has been provisioned and is ready for development"

    BINDINGS = with_step_bindings(FINISH_ENTER_BINDING)

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._copied_key: Optional[str] = None
        self._copied_timer: Optional[Timer] = None

    @property
    def completion_data(self) -> Optional[CompletionData]:
        return self.state.completion_data

    def compose_step(self) -> ComposeResult:
        data = self.completion_data
        if data is None:
            yield Static("Loading...", id="completion-loading")
            return

        targets = copy_targets(data)
        with Vertical(id="completion-repo", classes="completion-card"):
            yield Static("Repository", classes="completion-card-title")
            yield Static(
                "Your project repository has been created with starter code and CI/CD pipeline."
            )
            yield from self._compose_url_row("repo", targets["repo"], data.repository_url)
        with Vertical(id="completion-infra", classes="completion-card"):
            yield Static("Infrastructure", classes="completion-card-title")
            yield Static("Your infrastructure has been provisioned and is ready to use.")
            for index, url in enumerate(data.infrastructure_urls):
                yield from self._compose_url_row(f"infra-{index}", url, url_label(url))
        with Vertical(id="completion-access", classes="completion-card"):
            yield Static("Access Details", classes="completion-card-title")
            yield Static(
                "\n".join(f"✓ {detail}" for detail in data.access_details), markup=False
            )
        with Vertical(id="completion-next", classes="completion-card"):
            yield Static("Next Steps", classes="completion-card-title")
            yield Static(
                "\n".join(f"{i}. {step}" for i, step in enumerate(data.next_steps, start=1)),
                markup=False,
            )
        yield Button("Finish", id="finish-btn", variant="success")

    def _compose_url_row(self, key: str, url: str, label: str) -> ComposeResult:
        with Horizontal(classes="url-row"):
            yield Static(label, classes="url-label", markup=False)
            yield Button("Copy", id=f"copy-{key}", classes="url-action")
            yield Button("Open", id=f"open-{key}", classes="url-action")
        yield Static("", id=f"copied-{key}", classes="copied-indicator")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id or ""
        if button_id == "finish-btn":
            self.action_finish()
        elif button_id.startswith("copy-"):
            self.copy_url(button_id.removeprefix("copy-"))
        elif button_id.startswith("open-"):
            self.open_url(button_id.removeprefix("open-"))

    def _target_url(self, key: str) -> Optional[str]:
        data = self.completion_data
        if data is None:
            return None
        return copy_targets(data).get(key)

    def copy_url(self, key: str) -> None:
        """Copy a URL to the terminal clipboard and flash the indicator."""
        url = self._target_url(key)
        if url is None:
            return
        try:
            self.app.copy_to_clipboard(url)
        except (OSError, RuntimeError, ValueError) as e:
            # Terminal write failed; no user-visible effect
            logger.error("Failed to copy %s: %s: %s", url, type(e).__name__, e)
            return
        self._show_copied(key)

    def _show_copied(self, key: str) -> None:
        if self._copied_timer is not None:
            self._copied_timer.stop()
        self._clear_copied()
        self._copied_key = key
        message = "✓ Repository URL copied to clipboard" if key == "repo" else "✓ Copied"
        self.query_one(f"#copied-{key}", Static).update(message)
        self._copied_timer = self.set_timer(
            self._settings.copy_feedback_delay, self._clear_copied
        )

    def _clear_copied(self) -> None:
        if self._copied_key is not None:
            self.query_one(f"#copied-{self._copied_key}", Static).update("")
        self._copied_key = None
        self._copied_timer = None

    def open_url(self, key: str) -> None:
        """Open a URL in the system browser after validating its scheme."""
        url = self._target_url(key)
        if url is None:
            return
        parsed = urlparse(url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            logger.warning("Invalid URL rejected: %s", url)
            self.notify("Invalid URL", severity="error")
            return
        try:
            webbrowser.open(url)
            self.notify(f"Opening {url} in browser...", timeout=3)
        except (OSError, webbrowser.Error) as e:
            # Browser unavailable (headless, SSH session, etc.)
            logger.debug("Could not open browser: %s", e)
            self.notify(f"Could not open browser. Visit: {url}", severity="warning", timeout=5)

    def action_finish(self) -> None:
        """Exit the wizard, handing the completion payload back to the caller."""
        self.app.exit(result=self.completion_data)
