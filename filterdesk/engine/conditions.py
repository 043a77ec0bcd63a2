"""
conditions.py - Condition evaluator
Single responsibility: decide whether one extracted field value satisfies one
operator/operand pair.

``matches`` never raises. Malformed operands, incomparable types and unknown
operators evaluate to ``False``.
"""
import math
from numbers import Number

from filterdesk.domain.filters import FilterOperator

Op = FilterOperator


def _is_number(value) -> bool:
    return isinstance(value, Number) and not isinstance(value, bool)


def strict_equals(left, right) -> bool:
    """Equality without cross-type coercion ("1" != 1, True != 1, 1 == 1.0)."""
    if _is_number(left) and _is_number(right):
        return left == right
    if type(left) is not type(right):
        # str-based enums compare as their wire value
        if isinstance(left, str) and isinstance(right, str):
            return str.__eq__(left, right)
        return False
    return left == right


def _to_text(value) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(_to_text(v) for v in value)
    if isinstance(value, str):
        return str.__str__(value)
    return str(value)


def _contains(value, operand) -> bool:
    # empty values ("", 0, None, []) never contain anything
    if is_empty(value):
        return False
    return _to_text(operand).lower() in _to_text(value).lower()


def _member(value, operand) -> bool:
    return any(strict_equals(value, item) for item in operand)


def _compare(value, operand, greater: bool) -> bool:
    try:
        return bool(value > operand) if greater else bool(value < operand)
    except (TypeError, ValueError):
        return False


def is_empty(value) -> bool:
    if isinstance(value, float) and math.isnan(value):
        return True
    try:
        return not value
    except (TypeError, ValueError):
        # objects with an ambiguous truth value (e.g. arrays) count as present
        return False


def matches(value, operator, operand) -> bool:
    try:
        op = FilterOperator(operator)
    except ValueError:
        return False

    if op is Op.EQUALS:
        return strict_equals(value, operand)
    if op is Op.NOT_EQUALS:
        return not strict_equals(value, operand)
    if op is Op.CONTAINS:
        return _contains(value, operand)
    if op is Op.NOT_CONTAINS:
        return not _contains(value, operand)
    if op is Op.IN:
        return isinstance(operand, (list, tuple)) and _member(value, operand)
    if op is Op.NOT_IN:
        return isinstance(operand, (list, tuple)) and not _member(value, operand)
    if op is Op.GREATER_THAN:
        return _compare(value, operand, greater=True)
    if op is Op.LESS_THAN:
        return _compare(value, operand, greater=False)
    if op is Op.IS_EMPTY:
        return is_empty(value)
    if op is Op.IS_NOT_EMPTY:
        return not is_empty(value)
    return False
