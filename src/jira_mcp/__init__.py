import asyncio
import os

import click
from dotenv import load_dotenv

__version__ = "0.3.0"

from .logging_config import log_operation, setup_logger

logger = setup_logger()


def configure_logging(verbose: int, log_to_file: bool, log_dir: str | None) -> None:
    """Apply the -v count and file logging options to the package loggers."""
    logging_level = "DEBUG" if verbose >= 2 else "INFO"
    setup_logger(
        name="jira-mcp",
        level=logging_level,
        log_to_file=log_to_file,
        log_dir=log_dir,
    )


def load_environment(env_file: str | None) -> None:
    """Load variables from the given .env file, or from ./.env if present."""
    if env_file:
        logger.info(f"Loading environment from file: {env_file}")
        load_dotenv(env_file)
    else:
        logger.debug("Attempting to load environment from default .env file")
        load_dotenv()


@click.command()
@click.version_option(__version__, prog_name="jira-mcp")
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be used multiple times)",
)
@click.option(
    "--env-file", type=click.Path(exists=True, dir_okay=False), help="Path to .env file"
)
@click.option(
    "--transport",
    type=click.Choice(["stdio", "sse"]),
    default="stdio",
    help="Transport type (stdio or sse)",
)
@click.option(
    "--port",
    default=8000,
    help="Port to listen on for SSE transport",
)
@click.option(
    "--log-dir",
    help="Directory to store log files",
)
@click.option(
    "--log-to-file/--no-log-to-file",
    default=False,
    help="Enable/disable file logging",
)
@click.option(
    "--read-only",
    is_flag=True,
    default=False,
    help="Only expose tools that do not modify Jira",
)
@click.option(
    "--jira-url",
    help="Jira URL (e.g., https://your-domain.atlassian.net or https://jira.your-company.com)",
)
@click.option("--jira-username", help="Jira username/email")
@click.option("--jira-token", help="Jira API token or password")
@click.option(
    "--jira-personal-token",
    help="Jira Personal Access Token (for Jira Server/Data Center)",
)
@click.option(
    "--jira-ssl-verify/--no-jira-ssl-verify",
    default=None,
    help="Verify SSL certificates for Jira Server/Data Center (default: verify)",
)
def main(
    verbose: int,
    env_file: str | None,
    transport: str,
    port: int,
    log_dir: str | None,
    log_to_file: bool,
    read_only: bool,
    jira_url: str | None,
    jira_username: str | None,
    jira_token: str | None,
    jira_personal_token: str | None,
    jira_ssl_verify: bool | None,
) -> None:
    """Jira MCP Server - Jira issue tools for MCP

    Supports both Atlassian Cloud and Jira Server/Data Center deployments.
    """
    configure_logging(verbose, log_to_file, log_dir)

    with log_operation(logger, "application_startup", app_version=__version__):
        load_environment(env_file)

        # Command line values take precedence over the environment
        if jira_url:
            os.environ["JIRA_URL"] = jira_url
        if jira_username:
            os.environ["JIRA_USERNAME"] = jira_username
        if jira_token:
            os.environ["JIRA_API_TOKEN"] = jira_token
        if jira_personal_token:
            os.environ["JIRA_PERSONAL_TOKEN"] = jira_personal_token
        if jira_ssl_verify is not None:
            os.environ["JIRA_SSL_VERIFY"] = str(jira_ssl_verify).lower()
        if read_only:
            os.environ["READ_ONLY_MODE"] = "true"
        if log_dir:
            os.environ["LOG_DIR"] = log_dir

        from .jira.config import JiraConfig

        try:
            JiraConfig.from_env()
        except ValueError as e:
            logger.error(f"Invalid Jira configuration: {e}")
            raise click.ClickException(str(e)) from e

    from . import server

    logger.info(f"Starting jira-mcp v{__version__} with {transport} transport")
    asyncio.run(server.run_server(transport=transport, port=port))


__all__ = ["main", "__version__", "setup_logger", "log_operation"]

if __name__ == "__main__":
    main()
