from collections import defaultdict
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, TypeVar

from .Parser import Parser
from .Combinators import choice, chainl1, chainr1, optional, seq

T = TypeVar('T')

class Assoc(Enum):
    """How a chain of same-level infix operators groups."""
    LEFT = "left"
    RIGHT = "right"
    NONE = "none"   # at most one operator per level: `a = b`, never `a = b = c`

@dataclass(frozen=True)
class Operator:
    """One row entry. `parser` matches the operator and yields its function."""
    parser: Parser[Callable[..., Any]]

@dataclass(frozen=True)
class Infix(Operator):
    assoc: Assoc = Assoc.LEFT

@dataclass(frozen=True)
class Prefix(Operator):
    pass

@dataclass(frozen=True)
class Postfix(Operator):
    pass

def build_expression_parser(table: List[List[Operator]], simple_term: Parser[T]) -> Parser[T]:
    """
    Build an expression parser from an operator table.

    Rows are ordered from the tightest-binding level to the loosest; each
    row parses operands with the parser built for the row before it. Within
    a row the operators are tried as an ordered choice, in the order listed.
    """
    term = simple_term
    for row in table:
        term = _level(row, term)
    return term

def _group(row: List[Operator]) -> Dict[Any, List[Parser[Any]]]:
    groups: Dict[Any, List[Parser[Any]]] = defaultdict(list)
    for op in row:
        key = op.assoc if isinstance(op, Infix) else type(op)
        groups[key].append(op.parser)
    return groups

def _affix(parsers: List[Parser[Any]]) -> Parser[Optional[Callable[[Any], Any]]]:
    return optional(choice(parsers))

def _apply_affixes(parts: List[Any]) -> Any:
    pre, value, post = parts
    if pre is not None:
        value = pre(value)
    if post is not None:
        value = post(value)
    return value

def _level(row: List[Operator], operand: Parser[T]) -> Parser[T]:
    groups = _group(row)

    if Prefix in groups or Postfix in groups:
        # prefix binds before postfix: -x! is (-x)!
        operand = seq(_affix(groups.get(Prefix, [])), operand,
                      _affix(groups.get(Postfix, []))).map(_apply_affixes)

    if Assoc.LEFT in groups:
        operand = chainl1(operand, choice(groups[Assoc.LEFT]))
    if Assoc.RIGHT in groups:
        operand = chainr1(operand, choice(groups[Assoc.RIGHT]))
    if Assoc.NONE in groups:
        lhs = operand
        def apply_once(parts: List[Any]) -> Any:
            x, tail = parts
            return x if tail is None else tail[0](x, tail[1])
        operand = seq(lhs, optional(choice(groups[Assoc.NONE]) & lhs)).map(apply_once)

    return operand
