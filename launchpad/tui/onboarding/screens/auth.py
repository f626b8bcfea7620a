"""Step 1: Identity provider sign-in."""

import logging
from typing import Optional

from textual.app import ComposeResult
from textual.containers import Grid, Vertical
from textual.widgets import Button, LoadingIndicator, Static

from launchpad.core.auth import authenticate, provider_name
from launchpad.core.constants import PROVIDERS
from launchpad.core.wizard import AUTH_STEP
from launchpad.tui.common.base_screen import StepScreen

logger = logging.getLogger(__name__)


def _provider_categories() -> str:
    groups: dict[str, list[str]] = {}
    for provider in PROVIDERS:
        groups.setdefault(provider.category, []).append(provider.display_name)
    return "   ".join(f"{category}: {', '.join(names)}" for category, names in groups.items())


class AuthScreen(StepScreen):
    """Pick an identity provider and sign in (simulated)."""

    CSS_PATH = "auth.tcss"

    STEP_INDEX = AUTH_STEP
    TITLE_TEXT = "Secure Authentication"
    SUBTITLE_TEXT = (
        "Sign in with your organization's identity provider to begin project onboarding"
    )

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._pending_provider: Optional[str] = None
        self._authenticated_provider: Optional[str] = None

    def compose_step(self) -> ComposeResult:
        with Vertical(id="provider-section"):
            with Grid(id="provider-grid"):
                for provider in PROVIDERS:
                    yield Button(
                        f"{provider.display_name}\n{provider.description}",
                        id=f"provider-{provider.id}",
                        classes="provider-button",
                    )
            yield Static(_provider_categories(), id="provider-categories")
        with Vertical(id="auth-pending"):
            yield LoadingIndicator(id="auth-loader")
            yield Static("", id="auth-pending-text")
        with Vertical(id="auth-success"):
            yield Static("✓", id="auth-success-icon")
            yield Static("Authentication Successful!", id="auth-success-title")
            yield Static("", id="auth-success-detail")
        yield Static(
            "Secure & Compliant: all authentication is handled through your "
            "organization's approved identity providers with full audit logging.",
            id="auth-footnote",
        )

    def on_step_mount(self) -> None:
        user = self.state.user
        if user is not None:
            # Returning to this step after signing in
            self._authenticated_provider = user.provider
            self._show_success(user.provider or "Provider")
        else:
            self._show_providers()

    def _set_buttons_disabled(self, disabled: bool) -> None:
        for button in self.query(".provider-button").results(Button):
            button.disabled = disabled

    def _show_providers(self) -> None:
        self.query_one("#provider-section", Vertical).display = True
        self.query_one("#auth-pending", Vertical).display = False
        self.query_one("#auth-success", Vertical).display = False
        self._set_buttons_disabled(False)

    def _show_pending(self, provider_id: str) -> None:
        self._set_buttons_disabled(True)
        self.query_one("#auth-pending", Vertical).display = True
        self.query_one("#auth-pending-text", Static).update(
            f"Redirecting to {provider_name(provider_id)} for authentication..."
        )

    def _show_success(self, display_name: str) -> None:
        self.query_one("#provider-section", Vertical).display = False
        self.query_one("#auth-pending", Vertical).display = False
        self.query_one("#auth-success", Vertical).display = True
        self.query_one("#auth-success-detail", Static).update(
            f"Successfully authenticated via {display_name}. "
            "Proceeding to project setup..."
        )

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Start sign-in for the pressed provider."""
        button_id = event.button.id or ""
        if not button_id.startswith("provider-"):
            return
        self.start_authentication(button_id.removeprefix("provider-"))

    def start_authentication(self, provider_id: str) -> bool:
        """Begin sign-in. Returns False if another sign-in is already in flight."""
        if self._pending_provider is not None or self._authenticated_provider is not None:
            return False
        self._pending_provider = provider_id
        self._show_pending(provider_id)
        self.run_worker(self._authenticate(provider_id), exclusive=True)
        return True

    async def _authenticate(self, provider_id: str) -> None:
        user = await authenticate(provider_id, self._settings.auth_delay)
        self._pending_provider = None
        self._authenticated_provider = provider_id
        self._show_success(provider_name(provider_id))
        self._store.set_user(user)
