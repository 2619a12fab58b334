from typing import Any, Callable, List, Optional

from .Parser import Parser, ParseResult, Success, Failure, T, U
from .Prim import pure, fail


# 1. seq: Applies parsers one after another
def seq(*parsers: Parser[Any]) -> Parser[List[Any]]:
    """
    Applies each parser at the position the previous one stopped at.
    Returns the list of their values, or fails at the starting position
    if any of them fails.
    """
    def parse(text: str, start: int) -> ParseResult[List[Any]]:
        values: List[Any] = []
        pos = start
        for p in parsers:
            res = p(text, pos)
            if not res.success:
                return res.at(start)
            values.append(res.value)
            pos = res.pos
        return Success(values, pos)
    return Parser(parse)

# 2. choice: Tries parsers in order until one succeeds
def choice(*parsers: Parser[Any]) -> Parser[Any]:
    """
    Ordered choice: the first alternative that succeeds wins, even when a
    later one would match more input. If none succeed, the last
    alternative's failure is reported at the starting position.
    """
    if len(parsers) == 1 and isinstance(parsers[0], (list, tuple)):
        parsers = tuple(parsers[0])
    if not parsers:
        return fail("no alternatives")
    def parse(text: str, pos: int) -> ParseResult[Any]:
        res: ParseResult[Any] = Failure(pos)
        for p in parsers:
            res = p(text, pos)
            if res.success:
                return res
        return res.at(pos)
    return Parser(parse)

# 3. zero_or_more: Applies a parser as many times as it matches
def zero_or_more(p: Parser[T]) -> Parser[List[T]]:
    """
    Applies p repeatedly, collecting values, until it fails. Never fails.

    Repetition also stops when p succeeds without consuming input; that
    zero-width match is not collected, so the loop always terminates.
    """
    def parse(text: str, start: int) -> ParseResult[List[T]]:
        values: List[T] = []
        pos = start
        while True:
            res = p(text, pos)
            if not res.success or res.pos == pos:
                return Success(values, pos)
            values.append(res.value)
            pos = res.pos
    return Parser(parse)

# 4. one_or_more: As zero_or_more, but p must match at least once
def one_or_more(p: Parser[T]) -> Parser[List[T]]:
    """
    Applies parser p one or more times, returning a list of results.

    Fails only if the first application of p fails. A first match that
    consumes nothing ends repetition straight away, giving an empty list.
    """
    rest = zero_or_more(p)
    def parse(text: str, start: int) -> ParseResult[List[T]]:
        first = p(text, start)
        if not first.success:
            return first.at(start)
        if first.pos == start:
            return Success([], start)
        tail = rest(text, first.pos)
        return Success([first.value] + tail.value, tail.pos)
    return Parser(parse)

# 5. optional: Tries a parser, yielding None when it does not match
def optional(p: Parser[T]) -> Parser[Optional[T]]:
    """
    Tries parser p; returns its result if successful, else None without
    consuming input.
    """
    return p | pure(None)

# 6. action: Transforms the value of a successful parse
def action(p: Parser[T], transform: Callable[[T], U]) -> Parser[U]:
    """
    Replaces p's value with transform(value). Failures pass through and
    transform is not called.
    """
    return p.map(transform)

# 7. option: Tries a parser, returning a default value on failure
def option(x: T, p: Parser[T]) -> Parser[T]:
    """
    Tries parser p; returns its result if successful, else x.
    """
    return p | pure(x)

# 8. skip: Runs a parser, discarding its value
def skip(p: Parser[Any]) -> Parser[None]:
    return p.map(lambda _: None)

# 9. between: Parses an opening parser, a main parser, and a closing parser
def between(open: Parser[Any], close: Parser[Any], p: Parser[T]) -> Parser[T]:
    """
    Parses 'open', then 'p', then 'close', returning the result of 'p'.
    """
    return seq(open, p, close).map(lambda parts: parts[1])

# 10. count: Parses exactly n occurrences of a parser
def count(n: int, p: Parser[T]) -> Parser[List[T]]:
    if n < 0:
        raise ValueError(f"count: n must be non-negative, got {n}")
    return seq(*([p] * n))

# 11. sep_by1: Parses one or more occurrences separated by a separator
def sep_by1(p: Parser[T], sep: Parser[Any]) -> Parser[List[T]]:
    """
    Parses one or more occurrences of p separated by sep, returning a list of p's results.
    A trailing separator is left unconsumed.
    """
    return seq(p, zero_or_more(sep > p)).map(lambda parts: [parts[0]] + parts[1])

# 12. sep_by: Parses zero or more occurrences separated by a separator
def sep_by(p: Parser[T], sep: Parser[Any]) -> Parser[List[T]]:
    """
    Parses zero or more occurrences of p separated by sep, returning a list of p's results.
    """
    return sep_by1(p, sep) | pure([])

# 13. chainl1: Left-associative operator chain
def chainl1(p: Parser[T], op: Parser[Callable[[T, T], T]]) -> Parser[T]:
    """
    Parses one or more p separated by op, applying op left-associatively.
    """
    def fold(parts: List[Any]) -> T:
        acc = parts[0]
        for f, rhs in parts[1]:
            acc = f(acc, rhs)
        return acc
    return seq(p, zero_or_more(op & p)).map(fold)

# 14. chainr1: Right-associative operator chain
def chainr1(p: Parser[T], op: Parser[Callable[[T, T], T]]) -> Parser[T]:
    """
    Parses one or more p separated by op, applying op right-associatively.
    """
    def fold(parts: List[Any]) -> T:
        first, rest = parts
        if not rest:
            return first
        operands = [first] + [rhs for _, rhs in rest]
        acc = operands[-1]
        for i in range(len(rest) - 1, -1, -1):
            acc = rest[i][0](operands[i], acc)
        return acc
    return seq(p, zero_or_more(op & p)).map(fold)

# 15. parser_trace: Debugging parser that prints the remaining input
def parser_trace(label_str: str) -> Parser[None]:
    def parse(text: str, pos: int) -> ParseResult[None]:
        rest = text[pos:]
        print(f"{label_str}: \"{rest[:30]}{'...' if len(rest) > 30 else ''}\" at offset {pos}")
        return Success(None, pos)
    return Parser(parse)

# 16. parser_traced: Debugging parser that traces execution and backtracking
def parser_traced(label_str: str, p: Parser[T]) -> Parser[T]:
    backtracked = parser_trace(f"{label_str} backtracked") > fail(f"{label_str} failed")
    return parser_trace(label_str) > (p | backtracked)
