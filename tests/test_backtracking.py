# tests/test_backtracking.py
from pegkit.Char import char, digit
from pegkit.Parser import Success
from pegkit.Prim import literal, regex, run_parser


def test_choice_retries_after_consumption():
    """
    (char('a') >> char('b')) | char('a')
    Input: 'ac'

    1. First parser matches 'a', then fails on 'c' (expected 'b').
    2. The failed branch gives back the 'a' it consumed.
    3. The second branch is tried from the start and matches 'a'.
    """
    parser = (char("a") >> char("b")) | char("a")

    result = parser("ac", 0)

    assert result == Success("a", 1)


def test_failed_sequence_reports_start():
    parser = char("a") >> char("b")

    result = parser("xac", 1)

    assert not result.success
    assert result.pos == 1
    # The deepest cause is where 'b' was expected
    assert result.deepest().pos == 2
    assert result.deepest().expected == "'b'"


def test_keep_left_and_keep_right():
    word = literal("let")
    eq = literal("=")
    assert (word < eq)("let=", 0) == Success("let", 4)
    assert (word > eq)("let=", 0) == Success("=", 4)
    assert not (word < eq)("let!", 0).success


def test_and_pairs_values():
    assert (char("a") & char("b"))("ab", 0) == Success(["a", "b"], 2)


def test_bind_chooses_next_parser():
    # A length-prefixed field: '3abc'
    field = digit().bind(lambda n: regex(r"[a-z]{%d}" % int(n)))
    assert field("3abc", 0) == Success("abc", 4)
    assert field("3ab", 0).pos == 0


def test_label_replaces_expectation():
    p = (char("a") >> char("b")).label("ab pair")
    result = p("ax", 0)
    assert result.expected == "ab pair"
    assert result.pos == 0


def test_label_keeps_deepest_position():
    p = (literal("let ") >> literal("=")).label("assignment")
    result = p("let x", 0)
    assert result.expected == "assignment"
    assert result.pos == 0
    assert result.deepest().pos == 4

    value, err = run_parser(p, "let x")
    assert value is None
    assert err.pos.column == 5


def test_keep_right_chains_need_parentheses():
    a, b, c = literal("a"), literal("b"), literal("c")
    assert ((a > b) > c)("abc", 0) == Success("c", 3)
    assert not ((a > b) > c)("bc", 0).success
    assert ((a < b) < c)("abc", 0) == Success("a", 3)
