# tests/test_arithmetic.py
#   expr   = term (('+' | '-') term)*
#   term   = factor (('*' | '/') factor)*
#   factor = '(' expr ')' | number
#   number = [0-9]+
import pytest

from pegkit.Combinators import action, choice, seq, zero_or_more
from pegkit.Prim import lazy, literal, regex, run_parser

ws = regex(r"\s*")


def token(parser):
    return action(seq(ws, parser, ws), lambda parts: parts[1])


num = token(action(regex(r"[0-9]+"), lambda v: int(v, 10)))


def apply_ops(parts):
    result = parts[0]
    for op, right in parts[1]:
        if op == "+":
            result = result + right
        elif op == "-":
            result = result - right
        elif op == "*":
            result = result * right
        else:
            result = result / right
    return result


factor = lazy(
    lambda: choice(
        action(seq(token(literal("(")), math_expr, token(literal(")"))), lambda parts: parts[1]),
        num,
    )
)

term = action(
    seq(factor, zero_or_more(seq(token(choice(literal("*"), literal("/"))), factor))),
    apply_ops,
)

math_expr = action(
    seq(term, zero_or_more(seq(token(choice(literal("+"), literal("-"))), term))),
    apply_ops,
)


@pytest.mark.parametrize(
    "source, expected",
    [
        ("3 + 4", 7),
        ("10 - 3", 7),
        ("2 * 6", 12),
        ("3 + 4 * 2", 11),
        ("(3 + 4) * 2", 14),
        ("3 + 4 * (2 - 1)", 7),
        ("100", 100),
        ("8 / 2 / 2", 2),
        (" ( ( 5 ) ) ", 5),
    ],
)
def test_evaluates(source, expected):
    value, err = run_parser(math_expr, source, consume_all=True)
    assert err is None
    assert value == expected


@pytest.mark.parametrize("source", ["3 + ", "(3 + 4", "* 2", "", "3 4"])
def test_malformed_input_is_not_fully_consumed(source):
    res = math_expr(source, 0)
    assert not res.success or res.pos < len(source)

    value, err = run_parser(math_expr, source, consume_all=True)
    assert value is None
    assert err is not None


def test_dangling_operator_stops_before_it():
    res = math_expr("3 + ", 0)
    assert res.success
    assert res.value == 3
    # The trailing whitespace after 3 is consumed; the '+' is not
    assert res.pos == 2
