import logging
import os

import click
from dotenv import load_dotenv

from jiractl.utils.logging import setup_logging

__version__ = "0.4.0"

# Initialize logging with appropriate level
logging_level = logging.WARNING
if os.getenv("JIRACTL_VERBOSE", "").lower() in ("true", "1", "yes"):
    logging_level = logging.DEBUG

logger = setup_logging(logging_level)


@click.group(invoke_without_command=True)
@click.version_option(__version__, "--version", prog_name="jiractl")
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be used multiple times)",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    envvar="JIRACTL_CONFIG",
    help="Path to the TOML config file (default: ~/.jiractl.toml)",
)
@click.option(
    "--env-file", type=click.Path(exists=True, dir_okay=False), help="Path to .env file"
)
@click.pass_context
def main(
    ctx: click.Context, verbose: int, config_path: str | None, env_file: str | None
) -> None:
    """jiractl - create Jira issues and run saved JQL queries.

    Credentials live in the system keyring (see 'jiractl auth create');
    server, project, issue defaults and saved queries in ~/.jiractl.toml.
    Without a command an interactive menu is shown.
    """
    from .commands import CliContext, run_interactive_menu

    if verbose == 1:
        current_logging_level = logging.INFO
    elif verbose >= 2:  # -vv or more
        current_logging_level = logging.DEBUG
    else:
        current_logging_level = logging_level

    global logger
    logger = setup_logging(current_logging_level)
    logger.debug(f"Logging level set to: {logging.getLevelName(current_logging_level)}")

    if env_file:
        logger.debug(f"Loading environment from file: {env_file}")
        load_dotenv(env_file, override=True)
    else:
        logger.debug("Attempting to load environment from default .env file if it exists")
        load_dotenv()

    ctx.obj = CliContext(config_path=config_path)

    if ctx.invoked_subcommand is None:
        run_interactive_menu(ctx)


def _register_commands() -> None:
    from .commands import auth, configure, create, epics, query, types

    for command in (configure, create, query, epics, types, auth):
        main.add_command(command)


_register_commands()

__all__ = ["main", "__version__"]

if __name__ == "__main__":
    main()
