# Core
from .Parser import Parser, Success, Failure, ParseResult, ParseError, SourcePos
from .Prim import (
    run_parser, parse, pure, fail, literal, regex, lazy,
    look_ahead, not_followed_by, eof
)

# Combinators
from .Combinators import (
    seq, choice, zero_or_more, one_or_more, optional, action,
    option, skip, between, count, sep_by, sep_by1, chainl1, chainr1,
    parser_trace, parser_traced
)

# Characters and lexemes
from .Char import (
    satisfy, char, string, one_of, none_of, any_char,
    digit, letter, space, spaces, lexeme, symbol, integer
)

# Expression Parsing
from .Expr import build_expression_parser, Operator, Infix, Prefix, Postfix, Assoc
