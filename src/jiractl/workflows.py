"""Use-case flows: creating an issue and running a saved query.

The flows sequence calls to the Jira client and return display-ready data;
all prompting stays in the command layer.
"""

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from thefuzz import process

from .config import SavedQuery, Settings
from .credentials import Credentials
from .defaults import resolve_epic_link, resolve_issue_type
from .exceptions import JiractlError, NotFoundError, ValidationError
from .jira import JiraConfig, JiraFetcher
from .jira.constants import DEFAULT_SEARCH_LIMIT
from .models.jira import JiraIssue
from .query import effective_limit, expand_jql
from .utils.urls import browse_url

logger = logging.getLogger("jiractl")

IssueTypeChooser = Callable[[list[str]], str | None]


@dataclass(frozen=True)
class EpicReference:
    """An epic key with its summary, when it could be fetched."""

    key: str
    summary: str | None = None

    def label(self) -> str:
        return f"{self.key} ({self.summary})" if self.summary else self.key


@dataclass(frozen=True)
class CreatedIssue:
    key: str
    url: str
    epic: EpicReference | None = None


@dataclass(frozen=True)
class QueryResult:
    name: str
    jql: str
    limit: int
    issues: list[JiraIssue] = field(default_factory=list)


def build_fetcher(settings: Settings, credentials: Credentials) -> JiraFetcher:
    """Create a Jira client for the configured server.

    Raises:
        ConfigurationError: If the server or either credential is missing
    """
    config = JiraConfig.from_settings(settings, credentials)
    return JiraFetcher(config, issue_defaults=settings.issue_defaults)


class CreateIssueWorkflow:
    """Creates one issue in the configured project.

    The steps are exposed separately so an interactive caller can prompt
    between them; ``run`` performs them all in order.
    """

    def __init__(self, settings: Settings, fetcher: JiraFetcher) -> None:
        settings.require_project()
        self.settings = settings
        self.fetcher = fetcher

    @property
    def project(self) -> str:
        return self.settings.project

    def issue_type_names(self) -> list[str]:
        return [
            issue_type.name for issue_type in self.fetcher.get_issue_types(self.project)
        ]

    def resolve_issue_type(
        self,
        selected: str | None = None,
        choose: IssueTypeChooser | None = None,
    ) -> str:
        """
        Pick the issue type: the selected one, else the configured default,
        else whatever ``choose`` returns from the project's issue types.

        Raises:
            ValidationError: If no issue type can be determined
        """
        issue_type = resolve_issue_type(
            selected, self.settings.issue_defaults.issue_type
        )
        if issue_type:
            return issue_type

        if choose is None:
            raise ValidationError("Issue type is required")

        names = self.issue_type_names()
        if not names:
            raise ValidationError(f"Project {self.project} has no issue types")

        chosen = (choose(names) or "").strip()
        if not chosen:
            raise ValidationError("Issue type is required")
        return chosen

    def resolve_epic(self, epic_link: str | None = None) -> EpicReference | None:
        """
        Resolve the epic link and look up its summary for display.

        A failed lookup only drops the summary.
        """
        key = resolve_epic_link(epic_link, self.settings.issue_defaults.epic_link)
        if not key:
            return None

        try:
            summary = self.fetcher.get_issue(key).summary or None
        except JiractlError as e:
            logger.warning(f"Could not fetch epic {key}: {e}")
            summary = None
        return EpicReference(key=key, summary=summary)

    def submit(
        self,
        issue_type: str,
        summary: str,
        description: str = "",
        *,
        epic: EpicReference | None = None,
        assignee: str | None = None,
        labels: Iterable[str] | None = None,
    ) -> CreatedIssue:
        """
        Create the issue.

        Raises:
            ValidationError: If the summary is empty
            RemoteError: If Jira rejects the request
        """
        if not (summary or "").strip():
            raise ValidationError("Summary is required")

        issue = self.fetcher.create_issue(
            self.project,
            issue_type,
            summary,
            description,
            assignee=assignee,
            labels=labels,
            epic_link=epic.key if epic else None,
        )
        return CreatedIssue(
            key=issue.key,
            url=browse_url(self.settings.server, issue.key),
            epic=epic,
        )

    def run(
        self,
        summary: str,
        description: str = "",
        *,
        issue_type: str | None = None,
        epic_link: str | None = None,
        assignee: str | None = None,
        labels: Iterable[str] | None = None,
        choose_issue_type: IssueTypeChooser | None = None,
    ) -> CreatedIssue:
        resolved_type = self.resolve_issue_type(issue_type, choose_issue_type)
        if not (summary or "").strip():
            raise ValidationError("Summary is required")
        epic = self.resolve_epic(epic_link)
        return self.submit(
            resolved_type,
            summary,
            description,
            epic=epic,
            assignee=assignee,
            labels=labels,
        )


def find_query(settings: Settings, name: str) -> SavedQuery:
    """
    Look up a saved query by name.

    Raises:
        NotFoundError: If there is no query with that name
    """
    query = settings.get_query(name)
    if query is not None:
        return query

    error_msg = f"Query not found: {name}"
    names = settings.query_names()
    if names:
        match = process.extractOne(name, names, score_cutoff=60)
        if match:
            error_msg += f" (did you mean '{match[0]}'?)"
    raise NotFoundError(error_msg)


def run_saved_query(
    settings: Settings,
    name: str,
    fetcher: JiraFetcher,
    default_limit: int = DEFAULT_SEARCH_LIMIT,
) -> QueryResult:
    """
    Run a saved query against the configured project.

    Returns:
        The expanded JQL, the effective limit and the matching issues;
        an empty issue list is a normal result

    Raises:
        ConfigurationError: If server or project is not configured
        NotFoundError: If the query does not exist
        RemoteError, DecodeError: From the search call
    """
    settings.require_project()
    query = find_query(settings, name)

    jql = expand_jql(query.jql, settings.project)
    limit = effective_limit(query.limit, default_limit)
    logger.info(f"Running query '{name}': {jql} (limit {limit})")

    issues = fetcher.search_issues(jql, limit)
    return QueryResult(name=name, jql=jql, limit=limit, issues=issues)
