"""
api.py - Consumer façade for widgets and reports.
Single responsibility: expose the saved filter API over one explicitly
initialised store, delegating to the service and engine modules.
"""
from collections.abc import Sequence
from typing import TypeVar

from filterdesk.domain.filters import Filter
from filterdesk.engine import evaluator, query
from filterdesk.engine.evaluator import FieldAccessor
from filterdesk.services.filter_store import FilterStore

T = TypeVar("T")

_store: FilterStore | None = None


# ---------------------------------------------------------------------------
# 初期化
# ---------------------------------------------------------------------------

def init_store(db_path: str | None = None) -> FilterStore:
    """Create the schema if needed and load persisted filters."""
    global _store
    _store = FilterStore.open(db_path)
    return _store


def get_store() -> FilterStore:
    if _store is None:
        raise RuntimeError("Filter store is not initialised; call init_store() first")
    return _store


# ---------------------------------------------------------------------------
# Saved filters
# ---------------------------------------------------------------------------

def get_saved_filters() -> list[Filter]:
    return get_store().get_saved()


def get_filter(filter_id: str) -> Filter | None:
    return get_store().get(filter_id)


def save_filter(filter: Filter) -> None:
    get_store().save(filter)


def delete_filter(filter_id: str) -> None:
    get_store().delete(filter_id)


# ---------------------------------------------------------------------------
# Active filter
# ---------------------------------------------------------------------------

def get_active_filter() -> Filter | None:
    return get_store().get_active()


def set_active_filter(filter: Filter | None) -> None:
    get_store().set_active(filter)


# ---------------------------------------------------------------------------
# Evaluation / display (stateless)
# ---------------------------------------------------------------------------

def apply_filter(
    records: Sequence[T],
    filter: Filter | None,
    field_accessor: FieldAccessor | None = None,
) -> Sequence[T]:
    return evaluator.apply_filter(records, filter, field_accessor)


def to_query_string(filter: Filter) -> str:
    return query.to_query_string(filter)
