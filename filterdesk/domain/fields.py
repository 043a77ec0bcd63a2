"""
fields.py - Field definitions for the filter builder.
Single responsibility: which operators and value shapes each field offers.

The operator lists are advisory; they populate pickers only. The evaluator
never rejects an operator/field mismatch.
"""
from dataclasses import dataclass

from filterdesk.domain.filters import FilterField, FilterOperator

Op = FilterOperator


@dataclass(frozen=True)
class FieldOption:
    value: str
    label: str


@dataclass(frozen=True)
class FieldDefinition:
    field: FilterField
    label: str
    type: str  # "text" | "select" | "multiselect" | "date" | "user"
    operators: tuple[FilterOperator, ...]
    options: tuple[FieldOption, ...] = ()


_EQUALITY_OPS = (Op.EQUALS, Op.NOT_EQUALS, Op.IN, Op.NOT_IN)
_USER_OPS = (Op.EQUALS, Op.NOT_EQUALS, Op.IS_EMPTY, Op.IS_NOT_EMPTY)
_DATE_OPS = (Op.GREATER_THAN, Op.LESS_THAN, Op.EQUALS)


FIELD_DEFINITIONS: tuple[FieldDefinition, ...] = (
    FieldDefinition(
        FilterField.STATUS,
        "Status",
        "select",
        _EQUALITY_OPS,
        (
            FieldOption("todo", "To Do"),
            FieldOption("in-progress", "In Progress"),
            FieldOption("review", "In Review"),
            FieldOption("done", "Done"),
            FieldOption("blocked", "Blocked"),
        ),
    ),
    FieldDefinition(
        FilterField.PRIORITY,
        "Priority",
        "select",
        _EQUALITY_OPS,
        (
            FieldOption("highest", "Highest"),
            FieldOption("high", "High"),
            FieldOption("medium", "Medium"),
            FieldOption("low", "Low"),
            FieldOption("lowest", "Lowest"),
        ),
    ),
    FieldDefinition(
        FilterField.TYPE,
        "Type",
        "select",
        _EQUALITY_OPS,
        (
            FieldOption("story", "Story"),
            FieldOption("task", "Task"),
            FieldOption("bug", "Bug"),
            FieldOption("epic", "Epic"),
            FieldOption("subtask", "Sub-task"),
        ),
    ),
    FieldDefinition(FilterField.ASSIGNEE, "Assignee", "user", _USER_OPS),
    FieldDefinition(FilterField.REPORTER, "Reporter", "user", _USER_OPS),
    FieldDefinition(
        FilterField.LABEL,
        "Labels",
        "text",
        (Op.CONTAINS, Op.NOT_CONTAINS, Op.IS_EMPTY, Op.IS_NOT_EMPTY),
    ),
    FieldDefinition(FilterField.SPRINT, "Sprint", "text", _USER_OPS),
    FieldDefinition(FilterField.PROJECT, "Project", "text", (Op.EQUALS, Op.NOT_EQUALS)),
    FieldDefinition(FilterField.CREATED, "Created", "date", _DATE_OPS),
    FieldDefinition(FilterField.UPDATED, "Updated", "date", _DATE_OPS),
    FieldDefinition(
        FilterField.DUE_DATE,
        "Due Date",
        "date",
        _DATE_OPS + (Op.IS_EMPTY, Op.IS_NOT_EMPTY),
    ),
)

_BY_FIELD = {d.field: d for d in FIELD_DEFINITIONS}

OPERATOR_LABELS: dict[FilterOperator, str] = {
    Op.EQUALS: "equals",
    Op.NOT_EQUALS: "not equals",
    Op.CONTAINS: "contains",
    Op.NOT_CONTAINS: "does not contain",
    Op.IN: "in",
    Op.NOT_IN: "not in",
    Op.GREATER_THAN: "after",
    Op.LESS_THAN: "before",
    Op.IS_EMPTY: "is empty",
    Op.IS_NOT_EMPTY: "is not empty",
}


def get_definition(field_name) -> FieldDefinition | None:
    try:
        return _BY_FIELD.get(FilterField(field_name))
    except ValueError:
        return None


def operators_for_field(field_name) -> list[FilterOperator]:
    definition = get_definition(field_name)
    return list(definition.operators) if definition else []


def operator_label(operator) -> str:
    try:
        return OPERATOR_LABELS[FilterOperator(operator)]
    except ValueError:
        return str(operator)


def field_type(field_name) -> str:
    definition = get_definition(field_name)
    return definition.type if definition else "text"


def field_options(field_name) -> list[FieldOption]:
    definition = get_definition(field_name)
    return list(definition.options) if definition else []


def value_placeholder(field_name) -> str:
    kind = field_type(field_name)
    if kind == "date":
        return "YYYY-MM-DD"
    if kind == "user":
        return "Username or email"
    return "Enter value..."
