"""Main CLI interface for IssueClassifier using Click."""

import sys
from pathlib import Path

import click

from .. import __version__
from ..config import ConfigManager, IssueClassifierConfig, ProviderCredentials
from ..utils.logging import get_console, get_logger
from .classify import classify_command, examples_command, load_env

console = get_console()
logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="IssueClassifier")
@click.option(
    "--config",
    type=click.Path(exists=True, path_type=Path),
    help="Path to configuration file",
)
@click.pass_context
def cli(ctx, config: Path | None):
    """
    IssueClassifier - Rate GitHub issues as easy, medium or difficult.

    Credentials are read from MOSAIA_API_KEY, MOSAIA_AGENT_ID and
    OPENROUTER_API_KEY. A .env file in or above the working directory is
    honored.
    """
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config


cli.add_command(classify_command)
cli.add_command(examples_command)


@cli.group(name="config")
def config_group():
    """Inspect and create IssueClassifier configuration."""
    pass


@config_group.command(name="init")
@click.option(
    "--path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=ConfigManager.SEARCH_PATHS[0],
    show_default=True,
    help="Where to write the configuration file",
)
@click.option("--force", is_flag=True, help="Overwrite an existing file")
def config_init(path: Path, force: bool):
    """Write a configuration file with the default settings."""
    if path.exists() and not force:
        console.print(f"[error]✗ {path} already exists.[/error] Use --force to overwrite.")
        sys.exit(1)

    try:
        written = ConfigManager().save(IssueClassifierConfig(), path)
    except OSError as e:
        console.print(f"[error]✗ Could not write configuration:[/error] {e}")
        logger.exception("Config init error")
        sys.exit(1)

    console.print(f"[success]✓ Created configuration:[/success] {written}")


@config_group.command(name="show")
@click.pass_context
def config_show(ctx):
    """Display current configuration and credential status."""
    console.print("\n[bold cyan]IssueClassifier Configuration[/bold cyan]\n")

    try:
        config_manager = ConfigManager(ctx.obj.get("config_path"))
        config = config_manager.load(create_if_missing=True)
        settings = config.classifier

        console.print(f"[bold]Config File:[/bold] {config_manager.find() or '(defaults)'}")

        console.print("\n[bold]Providers:[/bold]")
        console.print(
            f"  Primary:  {settings.primary.name} at {settings.primary.base_url} "
            f"(model: {settings.primary.model or 'agent id'})"
        )
        console.print(
            f"  Fallback: {settings.fallback.name} at {settings.fallback.base_url} "
            f"(model: {settings.fallback.model or 'default'})"
        )

        console.print("\n[bold]Requests:[/bold]")
        console.print(f"  Max Tokens: {settings.max_tokens}")
        console.print(f"  Timeout: {settings.request_timeout}s (connect {settings.connect_timeout}s)")
        console.print(f"  Validate Difficulty: {settings.validate_difficulty}")

        console.print("\n[bold]Logging:[/bold]")
        console.print(f"  Level: {config.logging.level}")
        console.print(f"  File Logging: {config.logging.file_enabled} ({config.logging.log_dir})")

        dotenv_path = load_env()
        console.print("\n[bold]Credentials:[/bold]")
        console.print(f"  .env: {dotenv_path or '(none found)'}")
        for env_name, present in ProviderCredentials.from_env().loaded().items():
            state = "[success]loaded[/success]" if present else "[error]missing[/error]"
            console.print(f"  {env_name}: {state}")

    except Exception as e:
        console.print(f"[error]✗ Error:[/error] {e}")
        logger.exception("Config show error")
        sys.exit(1)


if __name__ == "__main__":
    cli()
