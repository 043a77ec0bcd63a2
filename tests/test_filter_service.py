"""Tests for builder actions and the save/activate policy"""

import pytest

from filterdesk.domain.filters import Filter, FilterCondition, FilterField, FilterLogic, FilterOperator
from filterdesk.services import filter_service


@pytest.fixture
def draft():
    flt = filter_service.new_filter(name="Draft")
    filter_service.add_condition(flt)
    return flt


class TestBuilderActions:
    def test_new_filter_defaults(self):
        flt = filter_service.new_filter()
        assert flt.name == ""
        assert flt.logic == FilterLogic.AND
        assert flt.conditions == []
        assert flt.id

    def test_new_filters_get_distinct_ids(self):
        assert filter_service.new_filter().id != filter_service.new_filter().id

    def test_add_condition_defaults(self, draft):
        condition = draft.conditions[0]
        assert condition.field == FilterField.STATUS
        assert condition.operator == FilterOperator.EQUALS
        assert condition.value == ""
        assert condition.id

    def test_remove_condition(self, draft):
        filter_service.add_condition(draft)
        first_id = draft.conditions[0].id

        filter_service.remove_condition(draft, 1)
        filter_service.remove_condition(draft, 5)

        assert [c.id for c in draft.conditions] == [first_id]

    def test_change_field_resets_operator_and_value(self, draft):
        condition = draft.conditions[0]
        condition.value = "todo"

        filter_service.change_field(condition, "label")

        assert condition.field == FilterField.LABEL
        assert condition.operator == FilterOperator.CONTAINS
        assert condition.value == ""

    def test_change_field_to_date_picks_first_date_operator(self, draft):
        filter_service.change_field(draft.conditions[0], FilterField.DUE_DATE)
        assert draft.conditions[0].operator == FilterOperator.GREATER_THAN

    def test_edit_copy_is_independent(self, todo_filter):
        working = filter_service.edit_copy(todo_filter)
        working.name = "Edited"
        working.conditions[0].value = "done"

        assert todo_filter.name == "Open work"
        assert todo_filter.conditions[0].value == "todo"
        assert working.id == todo_filter.id


class TestValidation:
    def test_valid_filter(self, todo_filter):
        assert filter_service.validate_filter(todo_filter) == []
        assert filter_service.is_valid(todo_filter) is True

    def test_name_is_required(self, todo_filter):
        todo_filter.name = "   "
        assert filter_service.validate_filter(todo_filter) == ["Filter name is required"]

    def test_at_least_one_condition(self):
        flt = Filter(name="Nothing")
        assert filter_service.validate_filter(flt) == ["At least one condition is required"]

    def test_value_required_for_value_operators(self, draft):
        assert filter_service.validate_filter(draft) == ["Condition 1 needs a value"]

    @pytest.mark.parametrize("value", [None, "", "  ", []])
    def test_blank_values_are_rejected(self, value):
        flt = Filter(name="x", conditions=[FilterCondition(operator="in", value=value)])
        assert filter_service.is_valid(flt) is False

    def test_list_value_is_accepted(self):
        flt = Filter(name="x", conditions=[FilterCondition(operator="in", value=["todo"])])
        assert filter_service.is_valid(flt) is True

    @pytest.mark.parametrize("operator", ["isEmpty", "isNotEmpty"])
    def test_valueless_operators_need_no_value(self, operator):
        flt = Filter(name="x", conditions=[FilterCondition(field="assignee", operator=operator, value=None)])
        assert filter_service.is_valid(flt) is True


class TestSavePolicy:
    def test_valid_filter_is_saved(self, store, todo_filter):
        filter_service.save_filter(store, todo_filter)
        assert store.get(todo_filter.id) == todo_filter

    def test_invalid_filter_never_reaches_store(self, store, draft):
        with pytest.raises(ValueError, match="Condition 1 needs a value"):
            filter_service.save_filter(store, draft)
        assert store.get_saved() == []

    def test_activate_saved_filter(self, store, todo_filter):
        store.save(todo_filter)
        activated = filter_service.activate_filter(store, todo_filter.id)
        assert activated == todo_filter
        assert store.get_active() == todo_filter

    def test_activate_unknown_filter(self, store):
        with pytest.raises(ValueError, match="Filter not found"):
            filter_service.activate_filter(store, "missing")

    def test_filter_without_conditions_cannot_be_activated(self, store):
        store.save(Filter(id="f-empty", name="Empty"))
        with pytest.raises(ValueError):
            filter_service.activate_filter(store, "f-empty")
        assert store.get_active() is None

    def test_clear_active_filter(self, store, todo_filter):
        store.save(todo_filter)
        store.set_active(todo_filter)
        filter_service.clear_active_filter(store)
        assert store.get_active() is None
