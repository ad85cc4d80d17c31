"""Tests for JQL template expansion and limit normalization."""

import pytest

from jiractl.query import effective_limit, expand_jql


class TestExpandJql:
    def test_replaces_project(self):
        assert expand_jql("project = ${project} AND x", "ABC") == "project = ABC AND x"

    def test_without_placeholder_unchanged(self):
        jql = "assignee = currentUser() ORDER BY updated DESC"
        assert expand_jql(jql, "ABC") == jql

    def test_replaces_every_occurrence(self):
        result = expand_jql("project = ${project} OR parent in (${project}-1)", "ABC")
        assert result == "project = ABC OR parent in (ABC-1)"

    def test_other_placeholders_pass_through(self):
        assert expand_jql("labels = ${team} AND project = ${project}", "ABC") == (
            "labels = ${team} AND project = ABC"
        )

    def test_idempotent(self):
        once = expand_jql("project = ${project}", "ABC")
        assert expand_jql(once, "ABC") == once

    def test_empty_template(self):
        assert expand_jql("", "ABC") == ""


@pytest.mark.parametrize(
    "limit,expected", [(None, 50), (0, 50), (-1, 50), (1, 1), (20, 20), (500, 500)]
)
def test_effective_limit(limit, expected):
    assert effective_limit(limit) == expected


def test_effective_limit_custom_default():
    assert effective_limit(0, default_limit=10) == 10
