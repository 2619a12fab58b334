# tests/test_laws.py
# Algebraic properties of the PEG combinators, checked on random inputs.
from hypothesis import given, strategies as st

from pegkit.Combinators import choice, optional, seq, zero_or_more
from pegkit.Prim import fail, literal, pure

texts = st.text(alphabet="abc", max_size=8)
words = st.text(alphabet="abc", min_size=1, max_size=3)


@given(texts, words, words, words)
def test_choice_is_associative(text, a, b, c):
    pa, pb, pc = literal(a), literal(b), literal(c)
    lhs = choice(choice(pa, pb), pc)
    rhs = choice(pa, choice(pb, pc))
    assert lhs(text, 0) == rhs(text, 0)


@given(texts, words)
def test_fail_is_identity_for_choice(text, a):
    p = literal(a)
    assert choice(fail("x"), p)(text, 0) == p(text, 0)
    assert choice(p, fail("x"))(text, 0).success == p(text, 0).success


@given(texts, words)
def test_pure_is_left_zero_for_choice(text, a):
    assert choice(pure(1), literal(a))(text, 0) == pure(1)(text, 0)


@given(texts, words, words)
def test_seq_position_is_sum_of_parts(text, a, b):
    res = seq(literal(a), literal(b))(text, 0)
    if res.success:
        assert res.pos == len(a) + len(b)
        assert text.startswith(a + b)
    else:
        assert res.pos == 0
        assert not text.startswith(a + b)


@given(texts, words)
def test_optional_equals_choice_with_pure_none(text, a):
    p = literal(a)
    assert optional(p)(text, 0) == choice(p, pure(None))(text, 0)


@given(texts, words)
def test_zero_or_more_is_greedy(text, a):
    res = zero_or_more(literal(a))(text, 0)
    # nothing more can be matched where repetition stopped
    assert not literal(a)(text, res.pos).success
    assert text[:res.pos] == a * len(res.value)


@given(st.integers(), texts)
def test_bind_left_identity(v, text):
    f = lambda x: pure(x * 2)
    assert pure(v).bind(f)(text, 0) == f(v)(text, 0)


@given(texts, words)
def test_map_identity(text, a):
    p = literal(a)
    assert p.map(lambda x: x)(text, 0) == p(text, 0)
