"""Tests for UI formatting helpers"""

from filterdesk.domain.filters import Filter, FilterCondition, FilterLogic
from filterdesk.ui.helpers import condition_count_text, issue_summary, logic_label, parse_list_value


def test_parse_list_value_dedupes_and_trims():
    assert parse_list_value(" todo, done\ntodo ,, blocked ") == ["todo", "done", "blocked"]
    assert parse_list_value("") == []
    assert parse_list_value(None) == []


def test_issue_summary():
    assert issue_summary({"key": "PROJ-1", "title": "Crash"}) == "PROJ-1  Crash"
    assert issue_summary({"id": 7}) == "7"


def test_condition_count_text():
    flt = Filter(name="x", logic=FilterLogic.OR, conditions=[FilterCondition(), FilterCondition()])
    assert condition_count_text(flt) == f"条件 2 件・{logic_label(FilterLogic.OR)}"
