"""Environment and settings (Pydantic Settings)."""

from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

# Default data directory: ~/.launchpad/
_data_dir = Path.home() / ".launchpad"

# Multiplier applied to every simulated delay by `--fast`
FAST_MODE_FACTOR = 0.1


class Settings(BaseSettings):
    """Launchpad settings loaded from environment and .env.

    All simulated backend work is driven by the delays below (seconds).
    """

    model_config = SettingsConfigDict(
        env_prefix="LAUNCHPAD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Simulated identity provider round trip
    auth_delay: float = 2.0
    # Pause on the auth success message before moving to project details
    auto_advance_delay: float = 2.0

    # Provisioning: each step takes min_delay + random() * jitter, then pauses
    provisioning_step_min_delay: float = 2.0
    provisioning_step_jitter: float = 3.0
    provisioning_step_pause: float = 0.5

    # How long the "copied" indicator stays visible on the completion screen
    copy_feedback_delay: float = 2.0

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_file: Path = _data_dir / "launchpad.log"

    def scaled(self, factor: float) -> "Settings":
        """Return a copy with every simulated delay multiplied by ``factor``."""
        return self.model_copy(
            update={
                "auth_delay": self.auth_delay * factor,
                "auto_advance_delay": self.auto_advance_delay * factor,
                "provisioning_step_min_delay": self.provisioning_step_min_delay * factor,
                "provisioning_step_jitter": self.provisioning_step_jitter * factor,
                "provisioning_step_pause": self.provisioning_step_pause * factor,
                "copy_feedback_delay": self.copy_feedback_delay * factor,
            }
        )


def get_settings() -> Settings:
    """Return application settings (singleton-like)."""
    return Settings()
