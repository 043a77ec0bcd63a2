"""Tests for the issue field accessor and the local issue source"""

import json
from types import SimpleNamespace

from filterdesk.domain.filters import Filter, FilterCondition, FilterLogic
from filterdesk.engine.evaluator import apply_filter
from filterdesk.services.issue_fields import issue_field
from filterdesk.services.issue_source import load_issues


class TestIssueField:
    def test_nested_objects_resolve_to_id(self, sample_issues):
        issue = sample_issues[0]
        assert issue_field(issue, "assignee") == "u1"
        assert issue_field(issue, "reporter") == "u2"
        assert issue_field(issue, "sprint") == "s1"
        assert issue_field(issue, "project") == "p1"

    def test_unset_nested_object_is_none(self, sample_issues):
        assert issue_field(sample_issues[1], "assignee") is None
        assert issue_field(sample_issues[1], "sprint") is None

    def test_other_fields_are_read_directly(self, sample_issues):
        assert issue_field(sample_issues[0], "status") == "todo"
        assert issue_field(sample_issues[0], "labels") == ["frontend", "urgent"]
        assert issue_field(sample_issues[0], "missing") is None

    def test_attribute_objects(self):
        issue = SimpleNamespace(status="done", assignee=SimpleNamespace(id="u9"))
        assert issue_field(issue, "assignee") == "u9"
        assert issue_field(issue, "status") == "done"

    def test_scalar_in_nested_field_resolves_to_none(self):
        issue = {"assignee": "u1", "sprint": 7}
        assert issue_field(issue, "assignee") is None
        assert issue_field(issue, "sprint") is None

    def test_unassigned_bugs_or_due_soon(self, sample_issues):
        flt = Filter(
            name="triage",
            logic=FilterLogic.OR,
            conditions=[
                FilterCondition(field="assignee", operator="isEmpty", value=""),
                FilterCondition(field="dueDate", operator="lessThan", value="2024-03-15"),
            ],
        )
        assert [i["key"] for i in apply_filter(sample_issues, flt, issue_field)] == ["PROJ-2"]

    def test_sprint_and_project(self, sample_issues):
        flt = Filter(
            name="sprint 1 in p1",
            logic=FilterLogic.AND,
            conditions=[
                FilterCondition(field="sprint", operator="equals", value="s1"),
                FilterCondition(field="project", operator="notEquals", value="p2"),
            ],
        )
        assert [i["key"] for i in apply_filter(sample_issues, flt, issue_field)] == ["PROJ-1"]


class TestLoadIssues:
    def test_plain_list(self, tmp_path, sample_issues):
        path = tmp_path / "issues.json"
        path.write_text(json.dumps(sample_issues), encoding="utf-8")
        assert load_issues(str(path)) == sample_issues

    def test_paged_response(self, tmp_path, sample_issues):
        path = tmp_path / "issues.json"
        path.write_text(json.dumps({"items": sample_issues, "total": 3}), encoding="utf-8")
        assert load_issues(str(path)) == sample_issues

    def test_missing_file(self, tmp_path):
        assert load_issues(str(tmp_path / "nope.json")) == []

    def test_broken_file(self, tmp_path):
        path = tmp_path / "issues.json"
        path.write_text("[{", encoding="utf-8")
        assert load_issues(str(path)) == []

    def test_non_object_items_are_dropped(self, tmp_path):
        path = tmp_path / "issues.json"
        path.write_text(json.dumps([{"id": "1"}, 2, "x"]), encoding="utf-8")
        assert load_issues(str(path)) == [{"id": "1"}]
