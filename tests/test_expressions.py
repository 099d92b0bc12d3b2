import pytest

from drillbox.expressions import ExpressionError, is_balanced, precedence, to_postfix


@pytest.mark.parametrize("expression", ["()", "{[()]}", "a(b)[c]{d}", ""])
def test_balanced_expressions(expression):
    assert is_balanced(expression) is True


@pytest.mark.parametrize("expression", ["(]", ")", "([)]", "{)", "a]"])
def test_unbalanced_expressions(expression):
    assert is_balanced(expression) is False


def test_unclosed_openers_are_not_reported():
    assert is_balanced("((") is True


def test_precedence_values():
    assert precedence("*") == 1
    assert precedence("/") == 1
    assert precedence("%") == 1
    assert precedence("+") == 0
    assert precedence("-") == 0


def test_postfix_worked_examples():
    assert to_postfix("a+b*c") == "abc*+"
    assert to_postfix("(a+b)*c") == "ab+c*"
    assert to_postfix("a*b+c") == "ab*c+"


@pytest.mark.parametrize("expression", ["a+b-c*d", "(1+2)%3", "x/(y-z)", "a"])
def test_postfix_keeps_operands_in_order(expression):
    result = to_postfix(expression)
    operands = [c for c in expression if c.isalnum()]
    assert [c for c in result if c.isalnum()] == operands
    assert sorted(c for c in result if not c.isalnum()) == sorted(
        c for c in expression if c in "+-*/%"
    )
    assert "(" not in result and ")" not in result


def test_unclosed_parenthesis_is_dropped():
    assert to_postfix("(a") == "a"


@pytest.mark.parametrize("expression", [")a", "a)", "a$b", "a b"])
def test_invalid_expressions_raise(expression):
    with pytest.raises(ExpressionError):
        to_postfix(expression)