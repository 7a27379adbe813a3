import logging
import math

import numpy as np
import pytest

from neldermead import (
    EvaluationZeroDivisionError,
    ExpressionSyntaxError,
    ExpressionTree,
    MissingPointError,
    Point,
    VariableCountError,
)


def evaluate(expression, values):
    return ExpressionTree(expression).evaluate(Point(values) if values else [])


class TestArithmetic:
    @pytest.mark.parametrize(
        ("expression", "values", "expected"),
        [
            ("x1+x2", [1, 2], 3.0),
            ("x1 - x2", [5.0, 8.0], -3.0),
            ("x1 * x2*x3", [5.0, 2.0, 3.0], 30.0),
            ("x1/x2", [10.0, 5.0], 2.0),
            ("x1^x2", [2.0, 3.0], 8.0),
            ("x1+3", [1], 4.0),
            ("10 + x1", [12], 22.0),
            ("3*x1 + 13*x2 - 10", [5.0, 2.0], 31.0),
            ("2 + 3*5", [], 17.0),
            ("x1 + x2 -x3", [5.0, 10.0, 8.0], 7.0),
        ],
    )
    def test_basic_operations(self, expression, values, expected):
        assert evaluate(expression, values) == expected

    @pytest.mark.parametrize(
        ("expression", "values", "expected"),
        [
            ("x1 + x2 * x3", [2, 3, 4], 14.0),
            ("x1 - x2 / x3", [8, 4, 2], 6.0),
            ("x1 * x2 ^ x3", [2, 3, 2], 18.0),
            ("x1 + x2 ^ x3", [4, 2, 2], 8.0),
            ("(x1 + x2) * x3", [5, 3, 4], 32.0),
            ("(x1 * (x2 + x3))/x4", [3, 2, 4, 6], 3.0),
            ("(x1 + x2) * (x3 - x4)", [9, 5, 2, 4], -28.0),
        ],
    )
    def test_precedence_and_brackets(self, expression, values, expected):
        assert evaluate(expression, values) == expected

    @pytest.mark.parametrize(
        ("expression", "values", "expected"),
        [
            ("x1^x2^x3", [2, 2, 2], 16.0),
            ("x1 - x2 - x3", [1, 2, 3], -4.0),
            ("x1 / x2 / x3", [8, 4, 2], 1.0),
        ],
    )
    def test_associativity(self, expression, values, expected):
        assert evaluate(expression, values) == expected

    @pytest.mark.parametrize(
        ("expression", "values", "expected"),
        [
            ("(-x1)^2", [3.0], 9.0),
            ("-x1^2", [3.0], -9.0),
            ("-x1", [5.0], -5.0),
            ("-(x1 + x2)", [5.0, 3.0], -8.0),
            ("--x1", [2.0], 2.0),
            ("2^-x1", [1.0], 0.5),
            ("x1 * -x2", [2.0, 3.0], -6.0),
        ],
    )
    def test_unary_minus(self, expression, values, expected):
        assert evaluate(expression, values) == expected

    @pytest.mark.parametrize(
        ("expression", "values", "expected"),
        [
            ("sin(x1)", [0], 0.0),
            ("cos(x1)", [0], 1.0),
            ("abs(x1)", [-4], 4.0),
            ("sqrt(x1)", [9.0], 3.0),
            ("sqrt(x1)+1", [9.0], 4.0),
            ("2*sin(x1)^2", [math.pi / 2], 2.0),
        ],
    )
    def test_functions(self, expression, values, expected):
        assert evaluate(expression, values) == pytest.approx(expected)

    @pytest.mark.parametrize(
        ("expression", "values", "expected"),
        [
            ("x1+x2", [1.2, 4.35], 5.55),
            ("(x1+x2)/x3", [3, 5, 32], 0.25),
            ("x1/x2", [1, 2], 0.5),
            ("0.5*x1 + 2.2*x2 + 10.5", [1.5, 3.4], 18.73),
            ("x1 + x2/x3", [1.5, 3, 4], 2.25),
            (".5 + x1", [1.0], 1.5),
        ],
    )
    def test_floating_numbers(self, expression, values, expected):
        assert evaluate(expression, values) == pytest.approx(expected)

    def test_result_is_python_float(self):
        assert type(evaluate("x1 * 2", [1.5])) is float


class TestPointArguments:
    def test_accepts_plain_sequences_and_arrays(self):
        tree = ExpressionTree("x1 - x2")
        assert tree.evaluate([5.0, 2.0]) == 3.0
        assert tree.evaluate((5.0, 2.0)) == 3.0
        assert tree.evaluate(np.array([5.0, 2.0])) == 3.0
        assert tree([5.0, 2.0]) == 3.0

    def test_constant_tree_accepts_any_point(self):
        tree = ExpressionTree("2 + 3*5")
        assert tree.evaluate(None) == 17.0
        assert tree.evaluate([]) == 17.0
        assert tree.evaluate(Point([1.0, 2.0, 3.0])) == 17.0

    def test_missing_point(self):
        with pytest.raises(MissingPointError):
            ExpressionTree("x1+x2").evaluate(None)

    def test_missing_point_is_type_error(self):
        with pytest.raises(TypeError):
            ExpressionTree("x1").evaluate(None)

    def test_evaluation_is_repeatable(self):
        tree = ExpressionTree("x1^2 + sin(x2)")
        point = Point([1.5, 0.25])
        first = tree.evaluate(point)
        assert tree.evaluate(Point([9.0, 9.0])) != first
        assert tree.evaluate(point) == first
        assert point.to_list() == [1.5, 0.25]


class TestEvaluationErrors:
    @pytest.mark.parametrize(
        ("expression", "values"),
        [
            ("x1/x2", [10.0, 0.0]),
            ("x1/(x2-x3)", [10.0, 5.0, 5.0]),
            ("1/0", []),
            ("x1/-0", [1.0]),
        ],
    )
    def test_division_by_zero(self, expression, values):
        tree = ExpressionTree(expression)
        with pytest.raises(EvaluationZeroDivisionError) as excinfo:
            tree.evaluate(values)
        assert str(excinfo.value) == "division by zero."

    def test_division_by_zero_is_zero_division_error(self):
        with pytest.raises(ZeroDivisionError):
            ExpressionTree("1/0").evaluate(None)

    @pytest.mark.parametrize(
        ("expression", "values"),
        [
            ("x1+6", [50.0, 2.0]),
            ("x1+x2", [50.0, 2.0, 3.5]),
            ("x1-x2", [50.0]),
            ("x1+x2-x3", []),
        ],
    )
    def test_wrong_variable_count(self, expression, values):
        tree = ExpressionTree(expression)
        with pytest.raises(VariableCountError) as excinfo:
            tree.evaluate(values)
        assert str(excinfo.value) == "The number of variables is incorrect"

    def test_wrong_variable_count_with_point(self):
        with pytest.raises(VariableCountError):
            ExpressionTree("x1+6").evaluate(Point([50.0, 2.0]))


class TestIeeeSemantics:
    """Floating-point edge cases propagate instead of raising."""

    def test_sqrt_of_negative_is_nan(self):
        assert math.isnan(ExpressionTree("sqrt(x1)").evaluate([-1.0]))

    def test_fractional_power_of_negative_is_nan(self):
        assert math.isnan(ExpressionTree("x1^0.5").evaluate([-8.0]))

    def test_zero_to_negative_power_is_inf(self):
        assert ExpressionTree("x1^-1").evaluate([0.0]) == math.inf

    def test_overflow_is_inf(self):
        assert ExpressionTree("x1^x1").evaluate([1000.0]) == math.inf

    def test_nan_divisor_is_not_an_error(self):
        assert math.isnan(ExpressionTree("1/x1").evaluate([math.nan]))

    def test_no_runtime_warnings(self, recwarn):
        ExpressionTree("sqrt(x1) + x1^0.5").evaluate([-4.0])
        assert not [w for w in recwarn if issubclass(w.category, RuntimeWarning)]


def test_rejected_expression_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="neldermead.expressions.tree"):
        with pytest.raises(ExpressionSyntaxError):
            ExpressionTree("x1 +")
    assert any("Rejected expression" in rec.message for rec in caplog.records)
