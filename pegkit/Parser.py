from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Generic, List, Optional, TypeVar, Union

T = TypeVar('T')  # Generic type for parser results
U = TypeVar('U')

TAB_WIDTH = 8

@dataclass(frozen=True)
class SourcePos:
    """Line/column view of an input offset, for error reporting only."""
    line: int = 1
    column: int = 1
    name: str = ""

    def update(self, token: str) -> 'SourcePos':
        """Advance past a single character."""
        if token == '\n':
            return SourcePos(self.line + 1, 1, self.name)
        if token == '\t':
            return SourcePos(self.line, self.column + TAB_WIDTH - ((self.column - 1) % TAB_WIDTH), self.name)
        return SourcePos(self.line, self.column + 1, self.name)

    @classmethod
    def from_offset(cls, text: str, offset: int, name: str = "") -> 'SourcePos':
        """Translate an integer offset into `text` to a line and column."""
        pos = cls(name=name)
        for ch in text[:offset]:
            pos = pos.update(ch)
        return pos

    def __str__(self) -> str:
        prefix = f"{self.name} " if self.name else ""
        return f"{prefix}line {self.line}, column {self.column}"


@dataclass(frozen=True)
class Success(Generic[T]):
    """A parser matched: `value` is its result, `pos` the offset just past the match."""
    value: T
    pos: int

    success: ClassVar[bool] = True


@dataclass(frozen=True)
class Failure:
    """
    A parser refused to match at `pos`.

    Composite parsers always report failure at their own starting offset; the
    failure that caused it is kept in `cause` so a runner can point at the
    place where matching actually stopped.
    """
    pos: int
    expected: Optional[str] = None
    cause: Optional['Failure'] = None

    success: ClassVar[bool] = False
    value: ClassVar[None] = None

    def at(self, pos: int) -> 'Failure':
        """Re-anchor this failure at `pos`, keeping it as the cause."""
        if pos == self.pos:
            return self
        return Failure(pos, self.expected, cause=self)

    def deepest(self) -> 'Failure':
        failure = self
        while failure.cause is not None:
            failure = failure.cause
        return failure


ParseResult = Union[Success[T], Failure]


@dataclass
class ParseError:
    """Represents a parsing error with a message and position."""
    pos: SourcePos
    message: str

    @classmethod
    def from_failure(cls, failure: Failure, text: str, source_name: str = "") -> 'ParseError':
        where = failure.deepest()
        message = f"expecting {where.expected}" if where.expected else "no match"
        found = text[where.pos:where.pos + 10]
        message += f", found {found!r}" if found else ", found end of input"
        return cls(SourcePos.from_offset(text, where.pos, source_name), message)

    def __str__(self) -> str:
        return f"Parse error at {self.pos}: {self.message}"


class Parser(Generic[T]):
    """
    A parser: a pure function from (input, position) to a ParseResult.

    `>` and `<` are comparison operators to Python, so `a > b > c` is read
    as `(a > b) and (b > c)`. Parenthesise chains: `(a > b) > c`.
    """
    def __init__(self, parse_fn: Callable[[str, int], ParseResult[T]]):
        self.parse_fn = parse_fn

    def __call__(self, text: str, pos: int = 0) -> ParseResult[T]:
        return self.parse_fn(text, pos)

    # Monadic bind (>>=)
    def bind(self, f: Callable[[T], 'Parser[U]']) -> 'Parser[U]':
        # f takes the value of self and returns the parser to run next
        def parse(text: str, pos: int) -> ParseResult[U]:
            res = self(text, pos)
            if not res.success:
                return res.at(pos)
            res2 = f(res.value)(text, res.pos)
            if not res2.success:
                # Anything consumed by self is given back
                return res2.at(pos)
            return res2
        return Parser(parse)

    # Transformation (fmap); the `action` combinator
    def map(self, fn: Callable[[T], U]) -> 'Parser[U]':
        def parse(text: str, pos: int) -> ParseResult[U]:
            res = self(text, pos)
            if not res.success:
                return res
            return Success(fn(res.value), res.pos)
        return Parser(parse)

    # Ordered choice (/)
    def __or__(self, other: 'Parser[U]') -> 'Parser[Union[T, U]]':
        def parse(text: str, pos: int) -> ParseResult[Union[T, U]]:
            res = self(text, pos)
            if res.success:
                return res
            res2 = other(text, pos)
            return res2 if res2.success else res2.at(pos)
        return Parser(parse)

    # Sequence, both values kept as [a, b]
    def __and__(self, other: 'Parser[U]') -> 'Parser[List[Any]]':
        return self.bind(lambda a: other.map(lambda b: [a, b]))

    # Sequence (*>)
    # self: Parser[T], other: Parser[U] -> result: Parser[U]
    def __gt__(self, other: 'Parser[U]') -> 'Parser[U]':
        return self.bind(lambda _: other)

    # Sequence (<*)
    # self: Parser[T], other: Parser[U] -> result: Parser[T]
    def __lt__(self, other: 'Parser[U]') -> 'Parser[T]':
        return self.bind(lambda a: other.map(lambda _: a))

    # `p >> q` sequences two parsers, `p >> f` binds
    def __rshift__(self, f: Union['Parser[U]', Callable[[T], 'Parser[U]']]) -> 'Parser[U]':
        if isinstance(f, Parser):
            return self > f
        return self.bind(f)

    # Label (<?>)
    def label(self, msg: str) -> 'Parser[T]':
        def parse(text: str, pos: int) -> ParseResult[T]:
            res = self(text, pos)
            if not res.success:
                return Failure(res.pos, msg, res.cause)
            return res
        return Parser(parse)
