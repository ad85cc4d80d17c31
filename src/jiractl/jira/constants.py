"""Constants specific to Jira operations."""

DEFAULT_SEARCH_LIMIT = 50

EPIC_SEARCH_LIMIT = 100

# Fields requested for every search result row
SEARCH_FIELDS: tuple[str, ...] = (
    "key",
    "summary",
    "status",
    "assignee",
    "priority",
    "created",
    "updated",
)

# Fields requested when a single issue is fetched
ISSUE_FIELDS: tuple[str, ...] = (
    "summary",
    "description",
    "issuetype",
    "status",
    "priority",
    "assignee",
    "reporter",
    "labels",
    "parent",
    "created",
    "updated",
)

EPIC_JQL_TEMPLATE = (
    "project = {project_key} AND issuetype = Epic "
    "AND resolution = Unresolved ORDER BY created DESC"
)

CLOUD_SEARCH_PATH = "rest/api/3/search/jql"
SERVER_SEARCH_PATH = "rest/api/2/search"
