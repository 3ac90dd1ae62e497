from tddbook.calculator.formatting import CalculationError, format_error, format_result


def test_error_contains_cause_and_expression():
    initial = ValueError("error msg")
    expr = "2%3"

    wrapped = format_error(expr, initial)

    assert isinstance(wrapped, CalculationError)
    assert "error msg" in str(wrapped)
    assert expr in str(wrapped)
    assert wrapped.expression == expr
    assert wrapped.cause is initial


def test_error_prefix():
    wrapped = format_error("1 + 1", "boom")
    assert str(wrapped).startswith("CALCULATION ERROR: expression 1 + 1 is invalid:")


def test_result_contains_expression_and_value():
    result = 5.55
    expr = "2+3"

    wrapped = format_result(expr, result)

    assert expr in wrapped
    assert str(result) in wrapped
    assert wrapped.startswith("CALCULATION SUCCESS:")