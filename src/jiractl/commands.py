"""Command-line commands for jiractl.

These are thin wrappers: prompting and printing happen here, everything
else is delegated to the workflows and the Jira client.
"""

import logging
from dataclasses import dataclass, field, replace

import click
from thefuzz import process

from .config import Settings
from .credentials import Credentials, CredentialStore
from .exceptions import ConfigurationError, JiractlError, ValidationError
from .formatting import format_creation_summary, format_issue_details, format_issue_row
from .jira import JiraFetcher
from .utils.decorators import handle_jiractl_errors
from .utils.logging import mask_sensitive
from .utils.urls import normalize_server_url
from .workflows import CreateIssueWorkflow, build_fetcher, find_query, run_saved_query

logger = logging.getLogger("jiractl")


@dataclass
class CliContext:
    """Per-invocation state shared by the commands."""

    config_path: str | None = None
    credential_store: CredentialStore = field(default_factory=CredentialStore)

    def settings(self) -> Settings:
        return Settings.load(self.config_path)

    def fetcher(self, settings: Settings) -> JiraFetcher:
        return build_fetcher(settings, self.credential_store.get_credentials())


pass_cli = click.make_pass_decorator(CliContext, ensure=True)


def match_choice(answer: str, items: list[str]) -> str:
    """
    Map a typed answer to one of ``items``.

    Accepts a 1-based index, an exact (case-insensitive) name, or a close
    fuzzy match.

    Raises:
        click.BadParameter: If nothing matches
    """
    answer = answer.strip()
    if answer.isdigit() and 1 <= int(answer) <= len(items):
        return items[int(answer) - 1]

    for item in items:
        if item.lower() == answer.lower():
            return item

    match = process.extractOne(answer, items, score_cutoff=70)
    if match:
        return match[0]
    raise click.BadParameter(f"'{answer}' is not one of: {', '.join(items)}")


def select_item(items: list[str], label: str, default: str | None = None) -> str:
    """Print a numbered list and prompt until a valid item is chosen."""
    for index, item in enumerate(items, start=1):
        click.echo(f"  {index:>2}) {item}")

    while True:
        answer = click.prompt(label, default=default, show_default=bool(default))
        try:
            return match_choice(answer, items)
        except click.BadParameter as e:
            click.echo(e.format_message(), err=True)


def prompt_multiline(label: str) -> str:
    """Read lines until an empty one."""
    click.echo(f"{label} (empty line to finish):")
    lines = []
    while True:
        line = click.prompt("", default="", show_default=False, prompt_suffix="> ")
        if not line:
            break
        lines.append(line)
    return "\n".join(lines)


@click.command()
@click.option("--type", "issue_type", help="Issue type (default: configured or prompted)")
@click.option("--summary", help="Issue summary")
@click.option("--description", help="Issue description")
@click.option("--epic", "epic_link", help="Epic key to link as parent")
@click.option("--assignee", help="Assignee username")
@click.option("--label", "labels", multiple=True, help="Label (repeatable)")
@click.option("-y", "--yes", is_flag=True, help="Create without confirmation")
@pass_cli
@handle_jiractl_errors
def create(
    cli: CliContext,
    issue_type: str | None,
    summary: str | None,
    description: str | None,
    epic_link: str | None,
    assignee: str | None,
    labels: tuple[str, ...],
    yes: bool,
) -> None:
    """Create a new Jira issue."""
    settings = cli.settings()
    settings.require_project()
    workflow = CreateIssueWorkflow(settings, cli.fetcher(settings))

    resolved_type = workflow.resolve_issue_type(
        issue_type, choose=lambda names: select_item(names, "Issue Type")
    )

    if summary is None:
        summary = click.prompt("Summary")
    summary = summary.strip()
    if not summary:
        raise ValidationError("Summary is required")

    if description is None:
        description = prompt_multiline("Description (optional)")

    epic = workflow.resolve_epic(epic_link)

    click.echo()
    click.echo(
        format_creation_summary(
            settings.project,
            resolved_type,
            summary,
            description,
            epic=epic.label() if epic else None,
        )
    )

    if not yes and not click.confirm("Create this issue?", default=False):
        click.echo("Issue creation cancelled.")
        return

    created = workflow.submit(
        resolved_type,
        summary,
        description,
        epic=epic,
        assignee=assignee,
        labels=labels,
    )
    click.echo(f"\nCreated issue: {created.key}")
    click.echo(f"URL: {created.url}")


@click.command()
@click.argument("name", required=False)
@click.option("--pick", is_flag=True, help="Choose an issue from the results to show")
@pass_cli
@handle_jiractl_errors
def query(cli: CliContext, name: str | None, pick: bool) -> None:
    """Run a saved query from the config file."""
    settings = cli.settings()
    settings.require_project()

    if name is None:
        names = settings.query_names()
        if not names:
            click.echo("No queries configured. Add [[queries]] to ~/.jiractl.toml")
            return
        name = select_item(names, "Query")

    find_query(settings, name)
    fetcher = cli.fetcher(settings)
    result = run_saved_query(settings, name, fetcher)

    click.echo(f"Running query: {result.name}")
    click.echo(f"JQL: {result.jql}\n")

    if not result.issues:
        click.echo("No issues found.")
        return

    click.echo(f"Found {len(result.issues)} issues")
    rows = [format_issue_row(issue) for issue in result.issues]
    if not pick:
        for row in rows:
            click.echo(row)
        return

    chosen = select_item(rows, "Show issue")
    selected = result.issues[rows.index(chosen)]
    click.echo()
    click.echo(format_issue_details(fetcher.get_issue(selected.key)))


@click.command()
@pass_cli
@handle_jiractl_errors
def epics(cli: CliContext) -> None:
    """List unresolved epics of the configured project."""
    settings = cli.settings()
    settings.require_project()
    found = cli.fetcher(settings).get_epics(settings.project)
    if not found:
        click.echo(f"No open epics in {settings.project}.")
        return
    for epic in found:
        click.echo(format_issue_row(epic))


@click.command()
@pass_cli
@handle_jiractl_errors
def types(cli: CliContext) -> None:
    """List issue types of the configured project."""
    settings = cli.settings()
    settings.require_project()
    default = settings.issue_defaults.issue_type
    for issue_type in cli.fetcher(settings).get_issue_types(settings.project):
        marker = " (default)" if issue_type.name == default else ""
        click.echo(f"{issue_type.name}{marker}")


@click.group()
def auth() -> None:
    """Manage credentials stored in the system keyring."""


@auth.command("list")
@pass_cli
@handle_jiractl_errors
def auth_list(cli: CliContext) -> None:
    """Show stored credentials."""
    stored = cli.credential_store.get_stored_credentials()
    if stored.is_empty:
        click.echo("No credentials stored.")
        return

    click.echo("Stored credentials:")
    click.echo(f"  Username: {stored.username or '(not set)'}")
    click.echo(f"  Token:    {mask_sensitive(stored.token) if stored.token else '(not set)'}")


@auth.command("create")
@pass_cli
@handle_jiractl_errors
def auth_create(cli: CliContext) -> None:
    """Create or update stored credentials."""
    current = cli.credential_store.get_stored_credentials()
    username = click.prompt("Username (email)", default=current.username or None)
    token = click.prompt("API Token", hide_input=True)
    cli.credential_store.set_credentials(Credentials(username=username, token=token))
    click.echo("Credentials saved to system keyring.")


@auth.command("delete")
@pass_cli
@handle_jiractl_errors
def auth_delete(cli: CliContext) -> None:
    """Delete stored credentials."""
    if cli.credential_store.get_stored_credentials().is_empty:
        click.echo("No credentials stored.")
        return
    if not click.confirm("Delete stored credentials?", default=False):
        click.echo("Cancelled.")
        return
    cli.credential_store.clear()
    click.echo("Credentials deleted.")


@auth.command("test")
@pass_cli
@handle_jiractl_errors
def auth_test(cli: CliContext) -> None:
    """Test the connection with the stored credentials."""
    settings = cli.settings()
    if not cli.credential_store.has_credentials():
        raise ConfigurationError(
            "No credentials configured; run 'jiractl auth create' or 'jiractl configure'"
        )
    click.echo(f"Testing connection to {settings.server or '(no server configured)'}...")
    cli.fetcher(settings).test_connection()
    click.echo("Connection successful!")


def _server_url(value: str) -> str:
    value = normalize_server_url(value)
    if not value:
        raise click.UsageError("Server URL is required")
    if not value.startswith(("http://", "https://")):
        raise click.UsageError("Server URL must start with http:// or https://")
    return value


def _required(label: str):
    def convert(value: str) -> str:
        value = value.strip()
        if not value:
            raise click.UsageError(f"{label} is required")
        return value

    return convert


@click.command()
@pass_cli
@handle_jiractl_errors
def configure(cli: CliContext) -> None:
    """Set server, project and credentials interactively."""
    current = Settings.read_file(cli.config_path)
    stored = cli.credential_store.get_stored_credentials()

    server = click.prompt(
        "Jira Server URL", default=current.server or None, value_proc=_server_url
    )
    project = click.prompt(
        "Default Project Key",
        default=current.project or None,
        value_proc=lambda value: _required("Project key")(value).upper(),
    )
    username = click.prompt(
        "Username (email)",
        default=stored.username or None,
        value_proc=_required("Username"),
    )
    token = click.prompt("API Token", hide_input=True, value_proc=_required("API token"))

    cli.credential_store.set_credentials(Credentials(username=username, token=token))
    settings = replace(current, server=server, project=project)
    config_path = settings.save(cli.config_path)

    click.echo("\nConfiguration saved!")
    click.echo(f"  Config file: {config_path}")
    click.echo("  Credentials: stored in system keyring")

    click.echo("\nTesting connection... ", nl=False)
    try:
        cli.fetcher(settings.with_env_overrides()).test_connection()
    except JiractlError as e:
        click.echo(f"failed: {e}")
        return
    click.echo("success!")


MENU_ITEMS = ["Create new issue", "Run query", "Configure", "Exit"]


def run_interactive_menu(ctx: click.Context) -> None:
    choice = select_item(MENU_ITEMS, "Select action")
    if choice == "Create new issue":
        ctx.invoke(create)
    elif choice == "Run query":
        ctx.invoke(query, pick=True)
    elif choice == "Configure":
        ctx.invoke(configure)
