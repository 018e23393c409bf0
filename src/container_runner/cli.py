"""CLI for the container runner.

Provides a command-line interface using Typer for:
- Validating a runner configuration file
- Running a container for a fixed time (or until interrupted)
"""

from __future__ import annotations

import time
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from container_runner.core.config import load_config
from container_runner.core.errors import ContainerRunnerError
from container_runner.core.schemas import RunnerConfig, RunnerOptions
from container_runner.runners.container_runner import ContainerRunner
from container_runner.utils.logging import get_logger, setup_logging

app = typer.Typer(
    name="container-runner",
    help="Start and stop a single container on the local Docker engine",
    add_completion=False,
)

console = Console()
logger = get_logger(__name__)


def _load_or_exit(config: Path) -> RunnerConfig:
    try:
        return load_config(config)
    except Exception as e:
        console.print(f"[bold red]Error loading config: {e}[/]")
        raise typer.Exit(1) from e


@app.command()
def validate(
    config: Path = typer.Option(
        ..., "--config", "-c", help="Path to runner configuration file (YAML/JSON)"
    ),
) -> None:
    """Validate a configuration file and show the resolved settings."""
    runner_config = _load_or_exit(config)
    _show_config_summary(runner_config)
    console.print("[bold green]Configuration is valid![/]")


@app.command()
def run(
    config: Path = typer.Option(
        ..., "--config", "-c", help="Path to runner configuration file (YAML/JSON)"
    ),
    duration: float | None = typer.Option(
        None, "--duration", "-d", help="Seconds to keep the container running (default: until Ctrl-C)"
    ),
    keep: bool = typer.Option(False, "--keep", help="Do not remove the container after stopping"),
    client_timeout: int | None = typer.Option(
        None, "--timeout", help="Timeout in seconds for Docker API calls"
    ),
    log_level: str = typer.Option("INFO", "--log-level", "-l", help="Logging level"),
    log_file: Path | None = typer.Option(
        None, "--log-file", help="Write logs to file in addition to console"
    ),
    json_logs: bool = typer.Option(
        False, "--json-logs", help="Output logs in JSON format (for programmatic parsing)"
    ),
) -> None:
    """Start a container from a configuration file, then stop it."""
    setup_logging(
        level=log_level, log_file=log_file, json_format=json_logs, rich_console=not json_logs
    )

    runner_config = _load_or_exit(config)
    if not runner_config.image:
        console.print("[bold red]Configuration has no image[/]")
        raise typer.Exit(1)
    if keep:
        runner_config = runner_config.with_options(RunnerOptions(remove_on_finalization=False))
    _show_config_summary(runner_config)

    runner = ContainerRunner(config=runner_config, client_timeout=client_timeout)
    try:
        runner.start()
        console.print(f"[bold green]Container {runner.container_id} running[/]")
        _wait(duration)
    except ContainerRunnerError as e:
        console.print(f"[bold red]{e}[/]")
        raise typer.Exit(1) from e
    except KeyboardInterrupt:
        logger.info("Interrupted, stopping container")
        console.print("[bold yellow]Interrupted[/]")
    finally:
        _stop_quietly(runner)


def _wait(duration: float | None) -> None:
    if duration is not None:
        time.sleep(duration)
        return
    while True:
        time.sleep(1)


def _stop_quietly(runner: ContainerRunner) -> None:
    """Stop the runner's container if one was created; report failures."""
    try:
        if runner.container_id is not None:
            runner.stop()
            console.print(f"[bold blue]Container stopped ({runner.state.value})[/]")
    except ContainerRunnerError as e:
        console.print(f"[bold red]{e}[/]")
        raise typer.Exit(1) from e
    finally:
        runner.close()


def _show_config_summary(config: RunnerConfig) -> None:
    """Display a summary of the runner configuration."""
    table = Table(title="Runner Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("Name", config.name)
    table.add_row("Image", config.image or "N/A")
    table.add_row("Ports", ", ".join(config.exposed_ports) or "none")
    table.add_row("Environment", str(len(config.env)))
    table.add_row("Remove on stop", str(config.options.remove_on_finalization))

    console.print(table)


if __name__ == "__main__":
    app()
