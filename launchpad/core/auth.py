"""Simulated identity provider sign-in."""

import asyncio
import logging
from typing import Awaitable, Callable

from launchpad.core.constants import DEFAULT_PROVIDER_ID, MOCK_USERS, PROVIDER_MAP
from launchpad.models import User

logger = logging.getLogger(__name__)

Sleep = Callable[[float], Awaitable[None]]


def provider_name(provider_id: str) -> str:
    """Display name for a provider ID ("Provider" if unknown)."""
    meta = PROVIDER_MAP.get(provider_id)
    return meta.display_name if meta else "Provider"


def mock_user_for(provider_id: str) -> User:
    """Canonical identity for a provider; unknown IDs get the GitHub identity."""
    user = MOCK_USERS.get(provider_id)
    if user is None:
        logger.debug("Unknown provider %r, using %s identity", provider_id, DEFAULT_PROVIDER_ID)
        user = MOCK_USERS[DEFAULT_PROVIDER_ID]
    return user.model_copy()


async def authenticate(
    provider_id: str,
    delay: float,
    sleep: Sleep = asyncio.sleep,
) -> User:
    """Pretend to round-trip to the identity provider and return the user.

    Never fails; the only observable effect is the delay.
    """
    logger.info("Authenticating via %s", provider_name(provider_id))
    await sleep(delay)
    return mock_user_for(provider_id)
