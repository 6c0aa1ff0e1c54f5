# domain/operators.py
from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Dict, List, Optional, Tuple

from domain.exceptions import InvalidOperandError, UnknownOperatorError

BASE_OPERATORS: List[str] = [
    "be",
    "not be",
    "contain",
    "not contain",
    "be greater than",
    "be less than",
    "be set",
    "not be set",
    "be one of",
    "not be one of",
    "match",
    "not match",
]

# expectation が不要なオペレータ
PRESENCE_OPERATORS = ("be set", "not be set")

_NUMERIC_RE = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")

# (success, failure) message templates: field, expectation, actual
_MESSAGES: Dict[str, Tuple[str, str]] = {
    "be": (
        "The {field} field was {expected}, as expected.",
        "Expected {field} field to be {expected}, but it was actually {actual}.",
    ),
    "not be": (
        "The {field} field was not {expected}, as expected.",
        "Expected {field} field not to be {expected}, but it was.",
    ),
    "contain": (
        "The {field} field contained {expected}, as expected.",
        "Expected {field} field to contain {expected}, but it was actually {actual}.",
    ),
    "not contain": (
        "The {field} field did not contain {expected}, as expected.",
        "Expected {field} field not to contain {expected}, but it was actually {actual}.",
    ),
    "be greater than": (
        "The {field} field was greater than {expected}, as expected. It was {actual}.",
        "Expected {field} field to be greater than {expected}, but it was actually {actual}.",
    ),
    "be less than": (
        "The {field} field was less than {expected}, as expected. It was {actual}.",
        "Expected {field} field to be less than {expected}, but it was actually {actual}.",
    ),
    "be set": (
        "The {field} field was set, as expected. It was {actual}.",
        "Expected {field} field to be set, but it was not.",
    ),
    "not be set": (
        "The {field} field was not set, as expected.",
        "Expected {field} field not to be set, but it was actually {actual}.",
    ),
    "be one of": (
        "The {field} field was one of {expected}, as expected. It was {actual}.",
        "Expected {field} field to be one of {expected}, but it was actually {actual}.",
    ),
    "not be one of": (
        "The {field} field was not one of {expected}, as expected. It was {actual}.",
        "Expected {field} field not to be one of {expected}, but it was actually {actual}.",
    ),
    "match": (
        "The {field} field matched {expected}, as expected. It was {actual}.",
        "Expected {field} field to match {expected}, but it was actually {actual}.",
    ),
    "not match": (
        "The {field} field did not match {expected}, as expected. It was {actual}.",
        "Expected {field} field not to match {expected}, but it was actually {actual}.",
    ),
}


@dataclass(frozen=True)
class Verdict:
    valid: bool
    message: str


def requires_expectation(operator: str) -> bool:
    return _normalize(operator) not in PRESENCE_OPERATORS


def _normalize(operator: Optional[str]) -> str:
    return " ".join((operator or "").strip().lower().split())


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _as_number(value: Any) -> Optional[Decimal]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float, Decimal)):
        try:
            number = Decimal(str(value))
        except InvalidOperation:
            return None
        return None if number.is_nan() else number
    text = str(value).strip()
    if not _NUMERIC_RE.match(text):
        return None
    return Decimal(text)


def _equals(actual: Any, expected: Any) -> bool:
    a_num, e_num = _as_number(actual), _as_number(expected)
    if a_num is not None and e_num is not None:
        return a_num == e_num
    return _as_text(actual) == _as_text(expected)


def _contains(actual: Any, expected: Any) -> bool:
    if actual is None:
        return False
    if isinstance(actual, (list, tuple, set)):
        return any(_equals(item, expected) for item in actual)
    return _as_text(expected) in _as_text(actual)


def _is_set(actual: Any) -> bool:
    if actual is None:
        return False
    if isinstance(actual, str):
        return actual != ""
    if isinstance(actual, (list, tuple, dict, set)):
        return len(actual) > 0
    return True


def _options(expected: Any) -> List[Any]:
    if isinstance(expected, (list, tuple, set)):
        return list(expected)
    return [part.strip() for part in _as_text(expected).split(",")]


def _is_one_of(actual: Any, expected: Any) -> bool:
    return any(_equals(actual, option) for option in _options(expected))


def _matches(actual: Any, expected: Any, field: str) -> bool:
    try:
        pattern = re.compile(_as_text(expected))
    except re.error as e:
        raise InvalidOperandError(
            f"Cannot check the {field} field: '{expected}' is not a valid regular expression ({e}).",
            field=field,
        ) from e
    return pattern.search(_as_text(actual)) is not None


def _numeric_pair(operator: str, actual: Any, expected: Any, field: str) -> Tuple[Decimal, Decimal]:
    a_num, e_num = _as_number(actual), _as_number(expected)
    if a_num is None or e_num is None:
        raise InvalidOperandError(
            f"The operator '{operator}' requires numeric values, "
            f"but the {field} field was '{_as_text(actual)}' and the expectation was '{_as_text(expected)}'.",
            field=field,
        )
    return a_num, e_num


class OperatorEvaluator:
    """
    フィールド値と期待値をオペレータで比較して Verdict を返す

    数値に見える値同士は Decimal で比較する（巨大な ID でも桁落ちしない）。
    """

    def __init__(self) -> None:
        self._checks: Dict[str, Callable[[Any, Any, str], bool]] = {
            "be": lambda a, e, f: _equals(a, e),
            "not be": lambda a, e, f: not _equals(a, e),
            "contain": lambda a, e, f: _contains(a, e),
            "not contain": lambda a, e, f: not _contains(a, e),
            "be greater than": self._greater_than,
            "be less than": self._less_than,
            "be set": lambda a, e, f: _is_set(a),
            "not be set": lambda a, e, f: not _is_set(a),
            "be one of": lambda a, e, f: _is_one_of(a, e),
            "not be one of": lambda a, e, f: not _is_one_of(a, e),
            "match": _matches,
            "not match": lambda a, e, f: not _matches(a, e, f),
        }

    def evaluate(self, operator: str, actual: Any, expected: Any, field: str) -> Verdict:
        op = _normalize(operator)
        check = self._checks.get(op)
        if check is None:
            raise UnknownOperatorError(operator, BASE_OPERATORS)

        valid = check(actual, expected, field)
        success, failure = _MESSAGES[op]
        message = (success if valid else failure).format(
            field=field,
            expected=_as_text(expected),
            actual=_as_text(actual),
        )
        return Verdict(valid=valid, message=message)

    @staticmethod
    def _greater_than(actual: Any, expected: Any, field: str) -> bool:
        a_num, e_num = _numeric_pair("be greater than", actual, expected, field)
        return a_num > e_num

    @staticmethod
    def _less_than(actual: Any, expected: Any, field: str) -> bool:
        a_num, e_num = _numeric_pair("be less than", actual, expected, field)
        return a_num < e_num


def evaluate(operator: str, actual: Any, expected: Any, field: str) -> Verdict:
    return OperatorEvaluator().evaluate(operator, actual, expected, field)
