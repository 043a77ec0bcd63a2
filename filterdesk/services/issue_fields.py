"""
issue_fields.py - Issue field accessor
Single responsibility: map logical filter fields onto issue records.
"""
from collections.abc import Mapping

from filterdesk.engine.evaluator import default_accessor

# Fields whose issue value is a nested object compared by its id
_NESTED_ID_FIELDS = frozenset({"assignee", "reporter", "sprint", "project"})


def issue_field(issue, field: str):
    """
    Value of ``field`` on an issue, as the evaluator should compare it.

    ``assignee``/``reporter``/``sprint``/``project`` resolve to the nested
    object's ``id`` (``None`` when unset); every other field is read directly.
    """
    value = default_accessor(issue, field)
    if field in _NESTED_ID_FIELDS and value is not None:
        if isinstance(value, Mapping):
            return value.get("id")
        return getattr(value, "id", None)
    return value
