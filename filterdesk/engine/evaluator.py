"""
evaluator.py - Filter evaluator
Single responsibility: apply a saved filter to an in-memory record collection.
"""
from collections.abc import Callable, Mapping, Sequence
from typing import Any, TypeVar

from filterdesk.domain.filters import Filter, FilterCondition, FilterLogic
from filterdesk.engine.conditions import matches

T = TypeVar("T")

FieldAccessor = Callable[[Any, str], Any]


def field_name(condition: FilterCondition) -> str:
    raw = condition.field
    return str.__str__(raw) if isinstance(raw, str) else str(raw)


def default_accessor(record, field: str):
    """Direct lookup: mapping key, else attribute; ``None`` when missing."""
    if isinstance(record, Mapping):
        return record.get(field)
    return getattr(record, field, None)


def matches_record(record, filter: Filter, field_accessor: FieldAccessor | None = None) -> bool:
    accessor = field_accessor or default_accessor
    results = (
        matches(accessor(record, field_name(c)), c.operator, c.value)
        for c in filter.conditions
    )
    if filter.logic == FilterLogic.OR:
        return any(results)
    return all(results)


def apply_filter(
    records: Sequence[T],
    filter: Filter | None,
    field_accessor: FieldAccessor | None = None,
) -> Sequence[T]:
    """
    Return the records that satisfy ``filter``.

    A missing filter or one without conditions is the identity: ``records`` is
    returned as-is. Otherwise a new list is built in the original order;
    neither the records nor the filter are modified.

    ``field_accessor(record, field)`` maps a logical field name ("assignee")
    to the value to compare (``record["assignee"]["id"]``). Without one the
    field name is looked up directly on the record.
    """
    if filter is None or not filter.conditions:
        return records
    return [r for r in records if matches_record(r, filter, field_accessor)]
