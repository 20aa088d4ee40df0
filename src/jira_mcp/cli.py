"""One-shot command line invocation of a single tool.

    jira-mcp-call get_issue_summary issueKey=PROJ-123
    jira-mcp-call search_issues '{"jql": "project = PROJ", "maxResults": 5}'
"""

import json
import sys
from collections.abc import Sequence
from typing import Any

import click

from . import configure_logging, load_environment, logger
from .jira import JiraConfig, JiraFetcher
from .tools import ToolDispatcher
from .utils import is_env_truthy


def _parse_value(value: str) -> Any:
    """Decode JSON arrays and objects; everything else stays a string."""
    if value[:1] in ("[", "{"):
        try:
            return json.loads(value)
        except json.JSONDecodeError:
            pass
    return value


def parse_cli_arguments(tokens: Sequence[str]) -> dict[str, Any]:
    """Parse tool arguments given on the command line.

    The tokens, joined by spaces, are read as a JSON object when possible;
    otherwise each token must be a ``key=value`` pair.

    Args:
        tokens: Command line tokens following the tool name

    Returns:
        The raw argument mapping

    Raises:
        ValueError: If the tokens are neither a JSON object nor key=value pairs
    """
    if not tokens:
        return {}

    try:
        parsed = json.loads(" ".join(tokens))
    except json.JSONDecodeError:
        parsed = None

    if isinstance(parsed, dict):
        return parsed

    arguments: dict[str, Any] = {}
    for token in tokens:
        key, separator, value = token.partition("=")
        if not separator or not key:
            raise ValueError(f"Expected key=value argument, got '{token}'")
        arguments[key] = _parse_value(value)
    return arguments


@click.command(context_settings={"ignore_unknown_options": True})
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be used multiple times)",
)
@click.option(
    "--env-file", type=click.Path(exists=True, dir_okay=False), help="Path to .env file"
)
@click.argument("tool_name")
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
def call(verbose: int, env_file: str | None, tool_name: str, args: tuple[str, ...]) -> None:
    """Run a single Jira tool and print its result.

    ARGS is either a JSON object or a list of key=value pairs.
    """
    configure_logging(verbose, log_to_file=False, log_dir=None)
    load_environment(env_file)

    try:
        arguments = parse_cli_arguments(args)
        config = JiraConfig.from_env()
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    dispatcher = ToolDispatcher(
        JiraFetcher(config=config), read_only=is_env_truthy("READ_ONLY_MODE")
    )
    result = dispatcher.dispatch(tool_name, arguments)

    if result.is_error:
        logger.debug(f"Tool {tool_name} failed: {result.text}")
        click.echo(result.text, err=True)
        sys.exit(1)

    click.echo(result.text)


if __name__ == "__main__":
    call()
