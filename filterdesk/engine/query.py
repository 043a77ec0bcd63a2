"""
query.py - Query string rendering
Single responsibility: render a Filter as a read-only JQL-like string.

Output is for display only; nothing parses it back into a Filter.
"""
from filterdesk.domain.filters import Filter, FilterCondition, FilterLogic, FilterOperator, is_valueless
from filterdesk.engine.evaluator import field_name

Op = FilterOperator

OPERATOR_SYMBOLS: dict[FilterOperator, str] = {
    Op.EQUALS: "=",
    Op.NOT_EQUALS: "!=",
    Op.CONTAINS: "~",
    Op.NOT_CONTAINS: "!~",
    Op.IN: "IN",
    Op.NOT_IN: "NOT IN",
    Op.GREATER_THAN: ">",
    Op.LESS_THAN: "<",
    Op.IS_EMPTY: "IS EMPTY",
    Op.IS_NOT_EMPTY: "IS NOT EMPTY",
}


def operator_symbol(operator) -> str:
    try:
        return OPERATOR_SYMBOLS[FilterOperator(operator)]
    except ValueError:
        return "="


def _quote(value) -> str:
    if value is None:
        text = ""
    elif isinstance(value, str):
        text = str.__str__(value)
    else:
        text = str(value)
    text = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{text}"'


def format_value(condition: FilterCondition) -> str:
    if is_valueless(condition.operator):
        return ""
    if isinstance(condition.value, (list, tuple)):
        return "(" + ", ".join(_quote(v) for v in condition.value) + ")"
    return _quote(condition.value)


def format_condition(condition: FilterCondition) -> str:
    parts = [field_name(condition), operator_symbol(condition.operator)]
    value = format_value(condition)
    if value:
        parts.append(value)
    return " ".join(parts)


def _logic_token(logic) -> str:
    try:
        return FilterLogic(logic).value
    except ValueError:
        return FilterLogic.AND.value


def to_query_string(filter: Filter) -> str:
    joiner = f" {_logic_token(filter.logic)} "
    return joiner.join(format_condition(c) for c in filter.conditions)
