"""[Layer: Presentation] Typer CLI Commands."""

from importlib.metadata import PackageNotFoundError, version as get_package_version
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from launchpad.config import FAST_MODE_FACTOR, get_settings
from launchpad.core.constants import PROVIDERS, TEMPLATE_CATALOG
from launchpad.core.templates import TEMPLATE_FILTERS, filter_templates
from launchpad.models import CompletionData


def _get_version() -> str:
    """Get version from package metadata (single source of truth: pyproject.toml)."""
    try:
        return get_package_version("launchpad-onboarding")
    except PackageNotFoundError:
        return "0.0.0-dev"


def _version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"launchpad {_get_version()}")
        raise typer.Exit()


app = typer.Typer(
    name="launchpad",
    help="Self-service onboarding wizard for new projects.",
)


def _print_completion(data: CompletionData) -> None:
    typer.echo("Project successfully created!")
    typer.echo(f"Repository: {data.repository_url}")
    for url in data.infrastructure_urls:
        typer.echo(f"Infrastructure: {url}")
    typer.echo("Next steps:")
    for index, step in enumerate(data.next_steps, start=1):
        typer.echo(f"  {index}. {step}")


def _launch_wizard(fast: bool = False) -> None:
    """Run the onboarding wizard and print its outcome.

    Raises:
        typer.Exit: If the user quits before finishing.
    """
    settings = get_settings()
    if fast:
        settings = settings.scaled(FAST_MODE_FACTOR)

    # Lazy import: OnboardingApp has heavy TUI dependencies
    from launchpad.tui.onboarding.app import OnboardingApp

    result = OnboardingApp(settings=settings).run()
    if result is None:
        raise typer.Exit(0)
    _print_completion(result)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Launch the onboarding wizard by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        _launch_wizard()


@app.command()
def run(
    fast: bool = typer.Option(
        False, "--fast", help="Shorten every simulated delay (demos and smoke tests)."
    ),
) -> None:
    """Launch the onboarding wizard."""
    _launch_wizard(fast=fast)


@app.command()
def templates(
    type_filter: Optional[str] = typer.Option(
        None,
        "--type",
        "-t",
        help="Only show templates of this type (infrastructure or repository).",
    ),
) -> None:
    """List the template catalog."""
    if type_filter is not None and type_filter not in TEMPLATE_FILTERS:
        raise typer.BadParameter(
            f"must be one of: {', '.join(TEMPLATE_FILTERS)}", param_hint="--type"
        )

    table = Table(title="Templates")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="bold")
    table.add_column("Type")
    table.add_column("Complexity")
    table.add_column("Time", justify="right")
    table.add_column("Technologies")
    for template in filter_templates(TEMPLATE_CATALOG, type_filter or "all"):
        table.add_row(
            template.id,
            template.name,
            template.type,
            template.complexity,
            template.estimated_time,
            ", ".join(template.technologies),
        )
    Console().print(table)


@app.command()
def providers() -> None:
    """List the identity providers available for sign-in."""
    for provider in PROVIDERS:
        typer.echo(f"{provider.id:<18} {provider.display_name} - {provider.description}")


@app.command()
def version() -> None:
    """Show Launchpad version."""
    typer.echo(f"launchpad {_get_version()}")
