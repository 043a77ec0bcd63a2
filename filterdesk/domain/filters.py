"""
filters.py - Filter DTOs
Single responsibility: typed containers for saved filters and their conditions.
"""
import logging
import random
import string
import time
import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

logger = logging.getLogger(__name__)


class FilterField(str, Enum):
    STATUS = "status"
    PRIORITY = "priority"
    ASSIGNEE = "assignee"
    REPORTER = "reporter"
    TYPE = "type"
    LABEL = "label"
    SPRINT = "sprint"
    PROJECT = "project"
    CREATED = "created"
    UPDATED = "updated"
    DUE_DATE = "dueDate"


class FilterOperator(str, Enum):
    EQUALS = "equals"
    NOT_EQUALS = "notEquals"
    CONTAINS = "contains"
    NOT_CONTAINS = "notContains"
    IN = "in"
    NOT_IN = "notIn"
    GREATER_THAN = "greaterThan"
    LESS_THAN = "lessThan"
    IS_EMPTY = "isEmpty"
    IS_NOT_EMPTY = "isNotEmpty"


class FilterLogic(str, Enum):
    AND = "AND"
    OR = "OR"


# Operators that ignore the condition value entirely
VALUELESS_OPERATORS = (FilterOperator.IS_EMPTY, FilterOperator.IS_NOT_EMPTY)


def is_valueless(operator) -> bool:
    try:
        return FilterOperator(operator) in VALUELESS_OPERATORS
    except ValueError:
        return False


ConditionValue = Optional[str | list[str]]

_ID_ALPHABET = string.digits + string.ascii_lowercase


def generate_id() -> str:
    """Opaque id: "<epoch millis>-<9 base36 chars>"."""
    suffix = "".join(random.choices(_ID_ALPHABET, k=9))
    return f"{int(time.time() * 1000)}-{suffix}"


def _enum_or_raw(enum_cls, raw):
    # Unknown values are kept verbatim so stored data from newer builds still loads
    try:
        return enum_cls(raw)
    except ValueError:
        return raw


def coerce_field(raw) -> FilterField | str:
    return _enum_or_raw(FilterField, raw)


def coerce_operator(raw) -> FilterOperator | str:
    return _enum_or_raw(FilterOperator, raw)


def _wire(value) -> str:
    return value.value if isinstance(value, Enum) else value


@dataclass
class FilterCondition:
    field: FilterField | str = FilterField.STATUS
    operator: FilterOperator | str = FilterOperator.EQUALS
    value: ConditionValue = ""
    id: str = dataclasses.field(default_factory=generate_id)

    def to_dict(self) -> dict[str, Any]:
        value = list(self.value) if isinstance(self.value, list) else self.value
        return {
            "id": self.id,
            "field": _wire(self.field),
            "operator": _wire(self.operator),
            "value": value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "FilterCondition":
        if not isinstance(data, dict):
            raise ValueError(f"Condition must be an object, got {type(data).__name__}")
        value = data.get("value", "")
        if isinstance(value, list):
            value = list(value)
        return cls(
            id=str(data.get("id") or generate_id()),
            field=coerce_field(data.get("field")),
            operator=coerce_operator(data.get("operator")),
            value=value,
        )


@dataclass
class Filter:
    name: str
    description: str = ""
    logic: FilterLogic = FilterLogic.AND
    conditions: list[FilterCondition] = dataclasses.field(default_factory=list)
    id: str = dataclasses.field(default_factory=generate_id)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "logic": _wire(self.logic),
            "conditions": [c.to_dict() for c in self.conditions],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Filter":
        if not isinstance(data, dict):
            raise ValueError(f"Filter must be an object, got {type(data).__name__}")
        if not data.get("id"):
            raise ValueError("Filter is missing an id")
        if "name" not in data:
            raise ValueError(f"Filter {data['id']} is missing a name")

        raw_logic = data.get("logic", FilterLogic.AND.value)
        try:
            logic = FilterLogic(raw_logic)
        except ValueError:
            logger.warning("Unknown logic %r on filter %s; using AND", raw_logic, data["id"])
            logic = FilterLogic.AND

        conditions = data.get("conditions") or []
        if not isinstance(conditions, list):
            raise ValueError(f"Filter {data['id']} has non-list conditions")

        return cls(
            id=str(data["id"]),
            name=str(data["name"] or ""),
            description=data.get("description") or "",
            logic=logic,
            conditions=[FilterCondition.from_dict(c) for c in conditions],
        )
