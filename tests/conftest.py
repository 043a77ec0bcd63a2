"""Shared fixtures for filter engine and store tests"""

import pytest

from filterdesk.domain.filters import Filter, FilterCondition, FilterLogic
from filterdesk.services.filter_store import FilterStore


@pytest.fixture
def db_path(tmp_path):
    """Fresh SQLite file per test"""
    return str(tmp_path / "filters.db")


@pytest.fixture
def store(db_path):
    """Opened (schema created, state loaded) store on an empty database"""
    return FilterStore.open(db_path)


@pytest.fixture
def sample_issues():
    """Issue records shaped like the tracker API response items"""
    return [
        {
            "id": "1",
            "key": "PROJ-1",
            "title": "Login page crashes",
            "status": "todo",
            "priority": "high",
            "type": "bug",
            "assignee": {"id": "u1", "name": "Alice"},
            "reporter": {"id": "u2", "name": "Bob"},
            "labels": ["frontend", "urgent"],
            "sprint": {"id": "s1"},
            "project": {"id": "p1"},
            "created": "2024-01-05",
            "dueDate": None,
        },
        {
            "id": "2",
            "key": "PROJ-2",
            "title": "Add CSV export",
            "status": "in-progress",
            "priority": "medium",
            "type": "story",
            "assignee": None,
            "reporter": {"id": "u1", "name": "Alice"},
            "labels": [],
            "sprint": None,
            "project": {"id": "p1"},
            "created": "2024-02-10",
            "dueDate": "2024-03-01",
        },
        {
            "id": "3",
            "key": "PROJ-3",
            "title": "Upgrade dependencies",
            "status": "done",
            "priority": "low",
            "type": "task",
            "assignee": {"id": "u2", "name": "Bob"},
            "reporter": {"id": "u2", "name": "Bob"},
            "labels": ["backend"],
            "sprint": {"id": "s1"},
            "project": {"id": "p2"},
            "created": "2024-03-15",
            "dueDate": "2024-04-01",
        },
    ]


@pytest.fixture
def todo_filter():
    """Savable single-condition filter"""
    return Filter(
        id="f-todo",
        name="Open work",
        description="Everything still to do",
        logic=FilterLogic.AND,
        conditions=[FilterCondition(id="c1", field="status", operator="equals", value="todo")],
    )
