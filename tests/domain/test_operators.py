# tests/domain/test_operators.py
import pytest

from domain.exceptions import InvalidOperandError, UnknownOperatorError
from domain.operators import BASE_OPERATORS, OperatorEvaluator, evaluate, requires_expectation


class TestBe:
    @pytest.mark.parametrize("value", ["abc", 42, 3.5, True, None, "", "123456789012345678901"])
    def test_be_same_value_is_valid(self, value):
        assert evaluate("be", value, value, "anyField").valid is True

    def test_be_coerces_numeric_strings(self):
        assert evaluate("be", "42", 42, "age").valid is True
        assert evaluate("be", "42.0", "42", "age").valid is True

    def test_be_keeps_big_integer_precision(self):
        assert evaluate("be", "1234567890123456789", "1234567890123456788", "registrantKey").valid is False

    def test_be_boolean_matches_lowercase_text(self):
        assert evaluate("be", True, "true", "flag").valid is True

    def test_be_failure_message_names_field_and_values(self):
        verdict = evaluate("be", "notAnyValue", "anyValue", "anyField")
        assert verdict.valid is False
        assert verdict.message == "Expected anyField field to be anyValue, but it was actually notAnyValue."

    def test_not_be(self):
        assert evaluate("not be", "x", "y", "f").valid is True
        assert evaluate("not be", "x", "x", "f").valid is False

    def test_operator_is_case_insensitive(self):
        assert evaluate("  Not   BE ", "x", "y", "f").valid is True


class TestContain:
    def test_substring(self):
        assert evaluate("contain", "hello world", "world", "f").valid is True
        assert evaluate("contain", "hello world", "foo", "f").valid is False

    def test_list_membership(self):
        assert evaluate("contain", ["a", "b"], "b", "f").valid is True
        assert evaluate("contain", ["a", "b"], "c", "f").valid is False

    def test_none_never_contains(self):
        assert evaluate("contain", None, "x", "f").valid is False
        assert evaluate("not contain", None, "x", "f").valid is True


class TestNumeric:
    def test_greater_than(self):
        assert evaluate("be greater than", "10", 5, "count").valid is True
        assert evaluate("be greater than", 1, "5", "count").valid is False

    def test_less_than(self):
        assert evaluate("be less than", 1.5, "2", "count").valid is True

    def test_non_numeric_operand_raises(self):
        with pytest.raises(InvalidOperandError) as excinfo:
            evaluate("be greater than", "abc", 5, "count")
        assert excinfo.value.field == "count"
        assert "count" in str(excinfo.value)

    def test_boolean_is_not_numeric(self):
        with pytest.raises(InvalidOperandError):
            evaluate("be less than", True, 5, "flag")


class TestOneOf:
    def test_be_one_of_passes(self):
        assert evaluate("be one of", "b", "a,b,c", "letter").valid is True

    def test_be_one_of_fails_with_message(self):
        verdict = evaluate("be one of", "d", "a,b,c", "letter")
        assert verdict.valid is False
        assert verdict.message == "Expected letter field to be one of a,b,c, but it was actually d."

    def test_be_one_of_trims_whitespace(self):
        assert evaluate("be one of", "b", "a, b , c", "letter").valid is True

    def test_be_one_of_accepts_list(self):
        assert evaluate("be one of", 2, ["1", "2"], "n").valid is True

    def test_not_be_one_of(self):
        assert evaluate("not be one of", "d", "a,b,c", "letter").valid is True


class TestSet:
    def test_be_set(self):
        assert evaluate("be set", None, None, "f").valid is False
        assert evaluate("be set", "", None, "f").valid is False
        assert evaluate("be set", [], None, "f").valid is False
        assert evaluate("be set", "x", None, "f").valid is True
        assert evaluate("be set", 0, None, "f").valid is True

    def test_not_be_set(self):
        assert evaluate("not be set", None, None, "f").valid is True
        assert evaluate("not be set", "x", None, "f").valid is False


class TestMatch:
    def test_match(self):
        assert evaluate("match", "test123", r"test\d+", "f").valid is True
        assert evaluate("match", "test", r"^\d+$", "f").valid is False

    def test_match_searches_anywhere(self):
        assert evaluate("match", "a@example.com", r"@example\.com$", "email").valid is True

    def test_not_match(self):
        assert evaluate("not match", "abc", r"\d", "f").valid is True

    def test_invalid_pattern_raises_invalid_operand(self):
        with pytest.raises(InvalidOperandError):
            evaluate("match", "abc", "(", "f")


class TestUnknownOperator:
    def test_unknown_operator_names_valid_set(self):
        with pytest.raises(UnknownOperatorError) as excinfo:
            evaluate("unknown", 1, 1, "f")
        assert excinfo.value.operator == "unknown"
        assert excinfo.value.valid_operators == BASE_OPERATORS

    def test_errors_are_distinguishable(self):
        assert not issubclass(UnknownOperatorError, InvalidOperandError)
        assert not issubclass(InvalidOperandError, UnknownOperatorError)


def test_requires_expectation():
    assert requires_expectation("be") is True
    assert requires_expectation("be set") is False
    assert requires_expectation("Not Be Set") is False


def test_evaluator_instance_is_reusable():
    evaluator = OperatorEvaluator()
    assert evaluator.evaluate("be", "a", "a", "f").valid is True
    assert evaluator.evaluate("be", "a", "b", "f").valid is False
