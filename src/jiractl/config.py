"""Settings for jiractl: server, project, issue defaults and saved queries.

Settings are read from a TOML file (``~/.jiractl.toml`` by default)::

    server = "https://example.atlassian.net"
    project = "ABC"

    [issue_defaults]
    assignee = "jdoe"
    epic_link = "ABC-1"
    issue_type = "Task"
    labels = ["backend"]

    [[queries]]
    name = "mine"
    jql = "project = ${project} AND assignee = currentUser()"
    limit = 20

Environment variables override the file where set. ``jiractl configure``
writes the server and project back with ``Settings.save``.
"""

import logging
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import tomli_w

from .exceptions import ConfigurationError
from .utils.urls import normalize_server_url

logger = logging.getLogger("jiractl")

CONFIG_FILE_NAME = ".jiractl.toml"

NOT_CONFIGURED_HINT = (
    "run 'jiractl configure' or set 'server' and 'project' in "
    f"~/{CONFIG_FILE_NAME} (or JIRA_URL and JIRA_PROJECT)"
)

FALSE_VALUES = ("false", "0", "no")


def default_config_path() -> Path:
    """Return the config file path, honouring JIRACTL_CONFIG."""
    if env_path := os.getenv("JIRACTL_CONFIG"):
        return Path(env_path).expanduser()
    return Path.home() / CONFIG_FILE_NAME


def _resolve_path(path: Path | str | None) -> Path:
    return Path(path).expanduser() if path else default_config_path()


def _as_str(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _as_bool(value: Any, default: bool = True) -> bool:
    if value is None:
        return default
    if isinstance(value, str):
        return value.strip().lower() not in FALSE_VALUES
    return bool(value)


@dataclass(frozen=True)
class IssueDefaults:
    """Values applied to new issues when the caller does not set them.

    Empty strings and an empty label list mean "unset".
    """

    assignee: str = ""
    component: str = ""
    epic_link: str = ""
    issue_type: str = ""
    labels: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "IssueDefaults":
        if not isinstance(data, dict):
            return cls()

        raw_labels = data.get("labels") or []
        if isinstance(raw_labels, str):
            raw_labels = raw_labels.split(",")
        labels = tuple(
            dict.fromkeys(
                label.strip()
                for label in raw_labels
                if isinstance(label, str) and label.strip()
            )
        )

        return cls(
            assignee=_as_str(data.get("assignee")),
            component=_as_str(data.get("component")),
            epic_link=_as_str(data.get("epic_link")),
            issue_type=_as_str(data.get("issue_type")),
            labels=labels,
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            name: value
            for name, value in (
                ("assignee", self.assignee),
                ("component", self.component),
                ("epic_link", self.epic_link),
                ("issue_type", self.issue_type),
            )
            if value
        }
        if self.labels:
            data["labels"] = list(self.labels)
        return data


@dataclass(frozen=True)
class SavedQuery:
    """A named JQL template. A limit of 0 means the default page size."""

    name: str
    jql: str
    limit: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SavedQuery | None":
        name = _as_str(data.get("name"))
        if not name:
            logger.warning(f"Ignoring saved query without a name: {data}")
            return None

        try:
            limit = int(data.get("limit") or 0)
        except (TypeError, ValueError):
            logger.warning(f"Ignoring invalid limit for query '{name}'")
            limit = 0

        return cls(name=name, jql=_as_str(data.get("jql")), limit=max(limit, 0))

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"name": self.name, "jql": self.jql}
        if self.limit > 0:
            data["limit"] = self.limit
        return data


@dataclass(frozen=True)
class Settings:
    """Immutable snapshot of the user's jiractl configuration."""

    server: str = ""
    project: str = ""
    issue_defaults: IssueDefaults = field(default_factory=IssueDefaults)
    queries: tuple[SavedQuery, ...] = ()
    ssl_verify: bool = True

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Settings":
        """Build settings from parsed TOML, tolerating missing or odd fields."""
        queries: list[SavedQuery] = []
        seen: set[str] = set()
        raw_queries = data.get("queries") or []
        if isinstance(raw_queries, list):
            for raw in raw_queries:
                if not isinstance(raw, dict):
                    continue
                query = SavedQuery.from_dict(raw)
                if query is None:
                    continue
                if query.name in seen:
                    logger.warning(f"Duplicate saved query '{query.name}', keeping the first")
                    continue
                seen.add(query.name)
                queries.append(query)

        return cls(
            server=normalize_server_url(_as_str(data.get("server"))),
            project=_as_str(data.get("project")).upper(),
            issue_defaults=IssueDefaults.from_dict(data.get("issue_defaults")),
            queries=tuple(queries),
            ssl_verify=_as_bool(data.get("ssl_verify")),
        )

    @classmethod
    def read_file(cls, path: Path | str | None = None) -> "Settings":
        """Load settings from a TOML file only, without environment overrides.

        A missing file yields empty settings.

        Raises:
            ConfigurationError: If the file exists but cannot be parsed
        """
        config_path = _resolve_path(path)
        data: dict[str, Any] = {}

        if config_path.exists():
            logger.debug(f"Loading settings from {config_path}")
            try:
                with config_path.open("rb") as f:
                    data = tomllib.load(f)
            except (tomllib.TOMLDecodeError, OSError) as e:
                error_msg = f"Failed to parse config file {config_path}: {e}"
                raise ConfigurationError(error_msg) from e
        else:
            logger.debug(f"No config file at {config_path}, using empty settings")

        return cls.from_dict(data)

    @classmethod
    def load(cls, path: Path | str | None = None) -> "Settings":
        """Load settings from a TOML file, then apply environment overrides."""
        return cls.read_file(path).with_env_overrides()

    def to_dict(self) -> dict[str, Any]:
        """The TOML document for these settings; unset sections are omitted."""
        data: dict[str, Any] = {"server": self.server, "project": self.project}
        if not self.ssl_verify:
            data["ssl_verify"] = False

        defaults = self.issue_defaults.to_dict()
        if defaults:
            data["issue_defaults"] = defaults
        if self.queries:
            data["queries"] = [query.to_dict() for query in self.queries]
        return data

    def save(self, path: Path | str | None = None) -> Path:
        """
        Write the settings to a TOML file, replacing its contents.

        Returns:
            The path written to

        Raises:
            ConfigurationError: If the file cannot be written
        """
        config_path = _resolve_path(path)
        try:
            config_path.parent.mkdir(parents=True, exist_ok=True)
            with config_path.open("wb") as f:
                tomli_w.dump(self.to_dict(), f)
        except OSError as e:
            error_msg = f"Failed to write config file {config_path}: {e}"
            raise ConfigurationError(error_msg) from e

        logger.info(f"Saved settings to {config_path}")
        return config_path

    def with_env_overrides(self) -> "Settings":
        """Return a copy with JIRA_URL, JIRA_PROJECT and JIRA_SSL_VERIFY applied."""
        server = self.server
        project = self.project
        ssl_verify = self.ssl_verify

        if url := os.getenv("JIRA_URL"):
            server = normalize_server_url(url)
        if env_project := os.getenv("JIRA_PROJECT"):
            project = env_project.strip().upper()
        if (ssl_env := os.getenv("JIRA_SSL_VERIFY")) is not None:
            ssl_verify = _as_bool(ssl_env)

        return Settings(
            server=server,
            project=project,
            issue_defaults=self.issue_defaults,
            queries=self.queries,
            ssl_verify=ssl_verify,
        )

    def require_project(self) -> None:
        """Ensure the fields every workflow needs are set.

        Raises:
            ConfigurationError: If server or project is missing
        """
        missing = [
            name for name, value in (("server", self.server), ("project", self.project))
            if not value
        ]
        if missing:
            raise ConfigurationError(
                f"Not configured: missing {' and '.join(missing)}; {NOT_CONFIGURED_HINT}"
            )

    def get_query(self, name: str) -> SavedQuery | None:
        for query in self.queries:
            if query.name == name:
                return query
        return None

    def query_names(self) -> list[str]:
        return [query.name for query in self.queries]
