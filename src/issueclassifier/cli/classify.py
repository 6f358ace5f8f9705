"""CLI commands that classify issues."""

import asyncio
import json
import sys
from pathlib import Path

import click
from dotenv import find_dotenv, load_dotenv
from rich.markup import escape
from rich.table import Table

from ..classifier import DIFFICULTY_TIERS, ClassificationRequest, IssueClassifier, RecordingSink
from ..config import ConfigManager, ProviderCredentials
from ..errors import ConfigurationError
from ..utils.logging import get_console, get_logger, setup_logging

console = get_console()
logger = get_logger(__name__)

# One sample issue per difficulty tier
SAMPLE_ISSUES: dict[str, ClassificationRequest] = {
    "easy": ClassificationRequest(
        title="Login button not working on Android",
        description="After UI update, login button doesn't respond on Android devices.",
        language="JavaScript",
        labels=("bug",),
    ),
    "medium": ClassificationRequest(
        title="Optimize login flow to reduce race conditions on Android devices",
        description=(
            "Users occasionally experience login failures due to asynchronous API call "
            "race conditions in the login process on Android. Requires debugging async "
            "logic and refactoring state management."
        ),
        language="JavaScript",
        labels=("bug", "performance", "mobile"),
    ),
    "difficult": ClassificationRequest(
        title="Implement secure biometric authentication for mobile login",
        description=(
            "Add fingerprint and face ID authentication support to mobile apps, "
            "integrating native SDKs for both Android and iOS platforms, including "
            "fallback and error handling mechanisms."
        ),
        language="JavaScript / Java / Swift",
        labels=("feature", "security", "mobile"),
    ),
}


def load_env() -> str:
    """
    Load the nearest ``.env`` file, searching upward from the working directory.

    Variables already set in the environment win. Returns the file path, or
    an empty string when none was found.
    """
    dotenv_path = find_dotenv(usecwd=True)
    if dotenv_path:
        load_dotenv(dotenv_path)
    return dotenv_path


def describe_result(result) -> str:
    """Render a classification result as Rich markup using the tier styles."""
    if result is None:
        return "[error]unavailable[/error]"
    if isinstance(result, dict) and result.get("difficulty") in DIFFICULTY_TIERS:
        difficulty = result["difficulty"]
        return f"[{difficulty}]{difficulty}[/{difficulty}]"
    return f"[unknown]{escape(json.dumps(result))}[/unknown]"


def build_classifier(
    config_path: Path | None,
    strict: bool = False,
    sink=None,
) -> IssueClassifier:
    """
    Create a classifier from the config file and environment.

    A ``.env`` file in or above the working directory is loaded first.
    """
    load_env()

    config = ConfigManager(config_path).load(create_if_missing=True)
    setup_logging(config.logging)

    settings = config.classifier
    if strict:
        settings = settings.model_copy(update={"validate_difficulty": True})

    return IssueClassifier(ProviderCredentials.from_env(), settings=settings, sink=sink)


@click.command(name="classify")
@click.argument("title")
@click.option("--description", "-d", default="", help="Issue description")
@click.option("--language", "-l", default="Unknown", show_default=True, help="Language or stack")
@click.option("--label", "labels", multiple=True, help="Issue label (repeatable)")
@click.option("--strict", is_flag=True, help="Reject answers that are not a known difficulty")
@click.option("--json", "output_json", is_flag=True, help="Output result as JSON")
@click.pass_context
def classify_command(
    ctx,
    title: str,
    description: str,
    language: str,
    labels: tuple,
    strict: bool,
    output_json: bool,
):
    """
    Classify a single issue by difficulty.

    TITLE is the issue title.

    Examples:

        issueclassifier classify "Fix typo in README" --label docs

        issueclassifier classify "Add OAuth login" -d "Support GitHub OAuth" -l Python --json
    """
    config_path = (ctx.obj or {}).get("config_path")

    try:
        classifier = build_classifier(config_path, strict=strict)
    except ConfigurationError as e:
        console.print(f"[error]✗ Configuration error:[/error] {e}")
        sys.exit(1)

    request = ClassificationRequest(title, description, language, labels)
    result = asyncio.run(classifier.classify(request))

    if output_json:
        print(json.dumps(result))
    else:
        console.print(f"[bold]{escape(title)}[/bold]: {describe_result(result)}")

    if result is None:
        sys.exit(1)


@click.command(name="examples")
@click.option("--verbose", "-v", is_flag=True, help="Show which provider answered each issue")
@click.pass_context
def examples_command(ctx, verbose: bool):
    """Classify one sample issue per difficulty tier and compare."""
    config_path = (ctx.obj or {}).get("config_path")
    sink = RecordingSink() if verbose else None

    try:
        classifier = build_classifier(config_path, sink=sink)
    except ConfigurationError as e:
        console.print(f"[error]✗ Configuration error:[/error] {e}")
        sys.exit(1)

    table = Table(title="Sample Issues", show_header=True, header_style="bold cyan")
    table.add_column("Expected", style="dim")
    table.add_column("Title", style="bold")
    table.add_column("Result")
    if verbose:
        table.add_column("Providers", style="dim")

    for expected, request in SAMPLE_ISSUES.items():
        result = asyncio.run(classifier.classify(request))
        row = [expected, escape(request.title), describe_result(result)]
        if verbose:
            row.append(" → ".join(sink.providers_called))
            sink.clear()
        table.add_row(*row)

    console.print(table)
