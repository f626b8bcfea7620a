"""Global fixtures: fresh wizard store, zero-delay settings, catalog shortcuts."""

import pytest

from launchpad.config import Settings
from launchpad.core.constants import MOCK_USERS, TEMPLATE_CATALOG
from launchpad.core.wizard import WizardStore
from launchpad.models import Template, User


@pytest.fixture
def store() -> WizardStore:
    """Empty wizard store at step 0."""
    return WizardStore()


@pytest.fixture
def settings() -> Settings:
    """Settings with every simulated delay turned off."""
    return Settings(
        auth_delay=0,
        auto_advance_delay=0,
        provisioning_step_min_delay=0,
        provisioning_step_jitter=0,
        provisioning_step_pause=0,
        copy_feedback_delay=0,
    )


@pytest.fixture
def github_user() -> User:
    return MOCK_USERS["github"].model_copy()


@pytest.fixture
def catalog() -> dict[str, Template]:
    """Template catalog keyed by ID."""
    return {t.id: t for t in TEMPLATE_CATALOG}
