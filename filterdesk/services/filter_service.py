"""
filter_service.py - Filter builder actions and save policy
Single responsibility: edit filters the way the builder does and refuse
invalid ones before they reach the store.
"""
import copy

from filterdesk.domain.fields import operators_for_field
from filterdesk.domain.filters import (
    Filter,
    FilterCondition,
    FilterField,
    FilterLogic,
    FilterOperator,
    coerce_field,
    is_valueless,
)
from filterdesk.services.filter_store import FilterStore


def new_filter(name: str = "", description: str = "", logic: FilterLogic = FilterLogic.AND) -> Filter:
    return Filter(name=name, description=description, logic=logic)


def edit_copy(filter: Filter) -> Filter:
    """Working copy for the builder; the saved version stays untouched until save."""
    return copy.deepcopy(filter)


def add_condition(filter: Filter) -> FilterCondition:
    condition = FilterCondition(field=FilterField.STATUS, operator=FilterOperator.EQUALS, value="")
    filter.conditions.append(condition)
    return condition


def remove_condition(filter: Filter, index: int) -> None:
    if 0 <= index < len(filter.conditions):
        del filter.conditions[index]


def change_field(condition: FilterCondition, field: FilterField | str) -> None:
    """Switch field, reset operator to the field's first operator and clear the value."""
    condition.field = coerce_field(field)
    operators = operators_for_field(field)
    if operators:
        condition.operator = operators[0]
    condition.value = ""


def _has_value(value) -> bool:
    if value is None:
        return False
    if isinstance(value, (list, tuple)):
        return any(str(v).strip() for v in value)
    return bool(str(value).strip())


def validate_filter(filter: Filter) -> list[str]:
    """Return the problems that block saving; empty when the filter is savable."""
    errors: list[str] = []
    if not (filter.name or "").strip():
        errors.append("Filter name is required")
    if not filter.conditions:
        errors.append("At least one condition is required")
    for i, c in enumerate(filter.conditions, start=1):
        if is_valueless(c.operator):
            continue
        if not _has_value(c.value):
            errors.append(f"Condition {i} needs a value")
    return errors


def is_valid(filter: Filter) -> bool:
    return not validate_filter(filter)


def _ensure_valid(filter: Filter) -> None:
    errors = validate_filter(filter)
    if errors:
        raise ValueError("Invalid filter: " + "; ".join(errors))


def save_filter(store: FilterStore, filter: Filter) -> None:
    _ensure_valid(filter)
    store.save(filter)


def activate_filter(store: FilterStore, filter_id: str) -> Filter:
    """Make a saved filter the active one."""
    saved = store.get(filter_id)
    if saved is None:
        raise ValueError(f"Filter not found: {filter_id}")
    _ensure_valid(saved)
    store.set_active(saved)
    return saved


def clear_active_filter(store: FilterStore) -> None:
    store.set_active(None)
