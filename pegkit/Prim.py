import re
import threading
from typing import Any, Callable, List, Optional, Tuple, Union

from .Parser import Parser, ParseResult, Success, Failure, ParseError, T


def pure(value: T) -> Parser[T]:
    """Return a parser that succeeds with a value without consuming input."""
    def parse(text: str, pos: int) -> ParseResult[T]:
        return Success(value, pos)
    return Parser(parse)

def fail(msg: str) -> Parser[Any]:
    """A parser that always fails with a message."""
    def parse(text: str, pos: int) -> ParseResult[Any]:
        return Failure(pos, msg)
    return Parser(parse)

def literal(s: str) -> Parser[str]:
    """Match `s` exactly, character for character, at the current position."""
    expected = f"'{s}'"
    def parse(text: str, pos: int) -> ParseResult[str]:
        if text.startswith(s, pos):
            return Success(s, pos + len(s))
        return Failure(pos, expected)
    return Parser(parse)

def regex(pattern: Union[str, re.Pattern], flags: int = 0) -> Parser[str]:
    """
    Match a regular expression anchored at the current position.

    The value is the matched substring. A pattern that legitimately matches
    zero characters (e.g. ``\\s*``) succeeds without consuming input.
    """
    compiled = re.compile(pattern, flags)
    expected = f"/{compiled.pattern}/"
    def parse(text: str, pos: int) -> ParseResult[str]:
        m = compiled.match(text, pos)
        if m is None:
            return Failure(pos, expected)
        return Success(m.group(0), m.end())
    return Parser(parse)

def lazy(thunk: Callable[[], Parser[T]]) -> Parser[T]:
    """
    Defer building a parser until it is first used.

    Lets a rule refer to itself, or to a rule defined later, while the
    grammar is still being constructed. The built parser is cached; parse
    results are not.
    """
    resolved: List[Parser[T]] = []
    lock = threading.Lock()

    def force() -> Parser[T]:
        if not resolved:
            with lock:
                if not resolved:
                    p = thunk()
                    if not isinstance(p, Parser):
                        raise TypeError(f"lazy: thunk returned {type(p).__name__}, not a Parser")
                    resolved.append(p)
        return resolved[0]

    def parse(text: str, pos: int) -> ParseResult[T]:
        return force()(text, pos)
    return Parser(parse)

def look_ahead(parser: Parser[T]) -> Parser[T]:
    """Parse without consuming input."""
    def parse(text: str, pos: int) -> ParseResult[T]:
        res = parser(text, pos)
        if not res.success:
            return res
        return Success(res.value, pos)
    return Parser(parse)

def not_followed_by(parser: Parser[Any]) -> Parser[None]:
    """Succeed, consuming nothing, only where `parser` fails."""
    def parse(text: str, pos: int) -> ParseResult[None]:
        res = parser(text, pos)
        if res.success:
            return Failure(pos, f"not {text[pos:res.pos]!r}")
        return Success(None, pos)
    return Parser(parse)

def eof() -> Parser[None]:
    """Succeeds only if no input remains."""
    def parse(text: str, pos: int) -> ParseResult[None]:
        if pos >= len(text):
            return Success(None, pos)
        return Failure(pos, "end of input")
    return Parser(parse)

def parse(parser: Parser[T], text: str, pos: int = 0) -> ParseResult[T]:
    """Apply `parser` to `text` at `pos` and return the raw result."""
    return parser(text, pos)

def run_parser(parser: Parser[T],
               text: str,
               source_name: str = "",
               consume_all: bool = False) -> Tuple[Optional[T], Optional[ParseError]]:
    """
    Run `parser` from the start of `text`.

    Returns ``(value, None)`` on success and ``(None, error)`` on failure.
    With `consume_all`, input left over after a successful parse is an error.
    """
    res = parser(text, 0)
    if not res.success:
        return None, ParseError.from_failure(res, text, source_name)
    if consume_all and res.pos < len(text):
        return None, ParseError.from_failure(Failure(res.pos, "end of input"), text, source_name)
    return res.value, None
