"""Unit tests for simulated sign-in."""

from __future__ import annotations

import pytest

from launchpad.core.auth import authenticate, mock_user_for, provider_name
from launchpad.core.constants import MOCK_USERS, PROVIDERS


def test_every_provider_has_a_canonical_user() -> None:
    for provider in PROVIDERS:
        user = mock_user_for(provider.id)
        assert user.provider == provider.display_name


def test_unknown_provider_falls_back_to_github_identity() -> None:
    assert mock_user_for("okta") == MOCK_USERS["github"]
    assert provider_name("okta") == "Provider"


def test_mock_user_is_a_copy() -> None:
    user = mock_user_for("github")
    assert user == MOCK_USERS["github"]
    assert user is not MOCK_USERS["github"]


@pytest.mark.asyncio
async def test_authenticate_waits_then_returns_user() -> None:
    sleeps: list[float] = []

    async def fake_sleep(seconds: float) -> None:
        sleeps.append(seconds)

    user = await authenticate("azure-ad", 2.0, sleep=fake_sleep)

    assert sleeps == [2.0]
    assert user.provider == "Azure AD"
