"""Tests for the consumer façade"""

import pytest

from filterdesk import api
from filterdesk.domain.filters import Filter, FilterCondition, FilterLogic
from filterdesk.services.issue_fields import issue_field


@pytest.fixture(autouse=True)
def reset_store():
    """Each test starts without an initialised store"""
    api._store = None
    yield
    api._store = None


def test_calls_before_init_raise():
    with pytest.raises(RuntimeError, match="init_store"):
        api.get_saved_filters()


def test_stateless_helpers_work_without_store():
    flt = Filter(
        name="x",
        logic=FilterLogic.AND,
        conditions=[FilterCondition(field="status", operator="equals", value="todo")],
    )
    assert api.apply_filter([{"status": "todo"}, {"status": "done"}], flt) == [{"status": "todo"}]
    assert api.to_query_string(flt) == 'status = "todo"'


def test_set_active_then_delete_clears_active(db_path, todo_filter):
    api.init_store(db_path)
    api.save_filter(todo_filter)
    api.set_active_filter(todo_filter)
    assert api.get_active_filter() == todo_filter

    api.delete_filter(todo_filter.id)

    assert api.get_active_filter() is None
    assert api.get_saved_filters() == []


def test_state_survives_reinitialisation(db_path, todo_filter):
    api.init_store(db_path)
    api.save_filter(todo_filter)
    api.set_active_filter(todo_filter)

    api.init_store(db_path)

    assert api.get_filter(todo_filter.id) == todo_filter
    assert api.get_active_filter() == todo_filter


def test_apply_active_filter_with_accessor(db_path, todo_filter, sample_issues):
    api.init_store(db_path)
    api.save_filter(todo_filter)
    api.set_active_filter(todo_filter)

    result = api.apply_filter(sample_issues, api.get_active_filter(), issue_field)

    assert [i["key"] for i in result] == ["PROJ-1"]
