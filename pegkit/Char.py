from typing import Callable, Iterable

from .Parser import Parser, ParseResult, Success, Failure, T
from .Prim import literal, regex
from .Combinators import seq

# Core function: Succeeds if the character satisfies a predicate
def satisfy(f: Callable[[str], bool]) -> Parser[str]:
    """Succeeds for any character where f returns True. Returns the parsed character."""
    def parse(text: str, pos: int) -> ParseResult[str]:
        if pos < len(text) and f(text[pos]):
            return Success(text[pos], pos + 1)
        return Failure(pos)
    return Parser(parse)

# Helper function: Parses a single character
def char(c: str) -> Parser[str]:
    """Parses a single character c and returns it."""
    return satisfy(lambda x: x == c).label(f"'{c}'")

# string is an alias of literal
string = literal

def one_of(cs: Iterable[str]) -> Parser[str]:
    """Succeeds if the current character is in cs. Returns the parsed character."""
    allowed = set(cs)
    return satisfy(lambda c: c in allowed).label(f"one of {''.join(sorted(allowed))}")

def none_of(cs: Iterable[str]) -> Parser[str]:
    """Succeeds if the current character is not in cs. Returns the parsed character."""
    forbidden = set(cs)
    return satisfy(lambda c: c not in forbidden).label(f"none of {''.join(sorted(forbidden))}")

def any_char() -> Parser[str]:
    return satisfy(lambda _: True).label("any character")

def digit() -> Parser[str]:
    return satisfy(str.isdigit).label("digit")

def letter() -> Parser[str]:
    return satisfy(str.isalpha).label("letter")

def space() -> Parser[str]:
    return satisfy(str.isspace).label("space")

def spaces() -> Parser[str]:
    """Zero or more whitespace characters; never fails."""
    return regex(r"\s*")

def lexeme(p: Parser[T]) -> Parser[T]:
    """Wrap p so that whitespace on either side is skipped."""
    ws = spaces()
    return seq(ws, p, ws).map(lambda parts: parts[1])

def symbol(s: str) -> Parser[str]:
    return lexeme(literal(s))

def integer() -> Parser[int]:
    """An unsigned decimal integer, surrounding whitespace skipped."""
    return lexeme(regex(r"[0-9]+").map(int).label("integer"))
