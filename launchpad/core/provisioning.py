"""Simulated provisioning sequence.

The run walks a fixed list of steps strictly in order. Each step goes
pending -> running -> completed; "failed" exists in the schema but the
simulation never produces it. A run cannot be paused or resumed: if the
task running it is cancelled, the partial progress is simply abandoned.
"""

from __future__ import annotations

import asyncio
import logging
import random
from datetime import datetime
from typing import TYPE_CHECKING, Awaitable, Callable, Optional, Sequence

from launchpad.models import CompletionData, ProvisioningStep

if TYPE_CHECKING:
    from launchpad.config import Settings

logger = logging.getLogger(__name__)

Sleep = Callable[[float], Awaitable[None]]
StepsCallback = Callable[[list[ProvisioningStep]], None]
CompletionCallback = Callable[[CompletionData], None]

_STEP_SEEDS: list[tuple[str, str, str]] = [
    ("validate-config", "Validate Configuration", "Validating project configuration and templates"),
    ("create-repo", "Create Repository", "Creating GitHub repository from template"),
    ("provision-infra", "Provision Infrastructure", "Deploying CloudFormation stacks"),
    ("configure-ci-cd", "Configure CI/CD", "Setting up deployment pipeline"),
    ("apply-security", "Apply Security Policies", "Configuring security settings and permissions"),
    ("finalize-setup", "Finalize Setup", "Completing project setup and generating documentation"),
]

_STEP_DETAILS: dict[str, str] = {
    "validate-config": "Configuration validated successfully. All requirements met.",
    "create-repo": "Repository created at https://github.com/company/my-awesome-project",
    "provision-infra": "Infrastructure provisioned: VPC, Lambda functions, API Gateway",
    "configure-ci-cd": "CI/CD pipeline configured with GitHub Actions",
    "apply-security": "Security policies applied: IAM roles, VPC security groups",
    "finalize-setup": "Project setup completed. Documentation generated.",
}

DEFAULT_STEP_DETAILS = "Step completed successfully."


def initial_steps() -> list[ProvisioningStep]:
    """Canonical six pending steps, in execution order."""
    return [
        ProvisioningStep(id=step_id, name=name, status="pending", message=message)
        for step_id, name, message in _STEP_SEEDS
    ]


def step_details(step_id: str) -> str:
    return _STEP_DETAILS.get(step_id, DEFAULT_STEP_DETAILS)


def build_completion_data() -> CompletionData:
    """Fixed payload describing what the simulated run produced."""
    return CompletionData(
        repository_url="https://github.com/company/my-awesome-project",
        infrastructure_urls=[
            "https://console.aws.amazon.com/cloudformation/home#/stacks/stackinfo?stackId=my-awesome-project-vpc",
            "https://console.aws.amazon.com/lambda/home#/functions/my-awesome-project-api",
        ],
        access_details=[
            "Repository: https://github.com/company/my-awesome-project",
            "API Gateway: https://api.myawesomeproject.com",
            "CloudWatch Logs: https://console.aws.amazon.com/cloudwatch/home#logGroups",
        ],
        next_steps=[
            "Clone the repository to your local machine",
            "Review the generated documentation in the README",
            "Configure your local development environment",
            "Run the initial tests to verify setup",
            "Begin development on your first feature",
        ],
    )


def progress(steps: Sequence[ProvisioningStep]) -> tuple[int, int, int]:
    """Return (completed, total, percent) for a step list."""
    total = len(steps)
    completed = sum(1 for s in steps if s.status == "completed")
    percent = round(completed / total * 100) if total else 0
    return completed, total, percent


class ProvisioningRunner:
    """Drives one provisioning run and reports progress through callbacks.

    Args:
        on_update: Receives a fresh copy of the full step list after every
            status change.
        on_complete: Called exactly once with the completion payload after
            the last step completes.
        step_min_delay: Minimum simulated work per step (seconds).
        step_jitter: Random extra work per step, in [0, step_jitter).
        step_pause: Pause between steps (seconds).
        sleep: Awaitable sleep, injectable for tests.
        rng: Random source for the per-step jitter.
        clock: Returns the timestamp recorded on start/end.
    """

    def __init__(
        self,
        on_update: StepsCallback,
        on_complete: CompletionCallback,
        step_min_delay: float = 2.0,
        step_jitter: float = 3.0,
        step_pause: float = 0.5,
        sleep: Sleep = asyncio.sleep,
        rng: Optional[random.Random] = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._on_update = on_update
        self._on_complete = on_complete
        self._step_min_delay = step_min_delay
        self._step_jitter = step_jitter
        self._step_pause = step_pause
        self._sleep = sleep
        self._rng = rng or random.Random()
        self._clock = clock
        self._started = False
        self.current_index = 0

    @classmethod
    def from_settings(
        cls,
        settings: "Settings",
        on_update: StepsCallback,
        on_complete: CompletionCallback,
        **kwargs,
    ) -> "ProvisioningRunner":
        return cls(
            on_update,
            on_complete,
            step_min_delay=settings.provisioning_step_min_delay,
            step_jitter=settings.provisioning_step_jitter,
            step_pause=settings.provisioning_step_pause,
            **kwargs,
        )

    def _step_delay(self) -> float:
        return self._step_min_delay + self._rng.random() * self._step_jitter

    async def run(self, steps: Optional[Sequence[ProvisioningStep]] = None) -> CompletionData:
        """Execute every step in order and return the completion payload.

        Raises:
            RuntimeError: If this runner has already been started.
        """
        if self._started:
            raise RuntimeError("Provisioning run already started")
        self._started = True

        working = [s.model_copy() for s in (steps or initial_steps())]
        try:
            for i, step in enumerate(working):
                self.current_index = i
                working[i] = step.model_copy(
                    update={"status": "running", "start_time": self._clock()}
                )
                self._on_update(list(working))
                logger.debug("Provisioning step %s started", step.id)

                await self._sleep(self._step_delay())

                working[i] = working[i].model_copy(
                    update={
                        "status": "completed",
                        "end_time": self._clock(),
                        "details": step_details(step.id),
                    }
                )
                self._on_update(list(working))
                logger.info("Provisioning step %s completed", step.id)

                await self._sleep(self._step_pause)
        except asyncio.CancelledError:
            logger.info(
                "Provisioning abandoned at step %s", working[self.current_index].id
            )
            raise

        completion = build_completion_data()
        self._on_complete(completion)
        return completion
