from pegkit.Char import integer, symbol
from pegkit.Combinators import between
from pegkit.Expr import build_expression_parser, Infix, Prefix, Assoc
from pegkit.Prim import lazy, run_parser

# 1. Helper Functions for Calculation
def add(x, y): return x + y
def sub(x, y): return x - y
def mul(x, y): return x * y
def div(x, y):
    if y == 0: raise ValueError("Division by zero")
    return x / y  # float division
def neg(x): return -x

# 2. Operator Table (Precedence and Associativity)
# Ordered from Highest Precedence to Lowest
table = [
    [Prefix(symbol("-").map(lambda _: neg))],
    [Infix(symbol("*").map(lambda _: mul), Assoc.LEFT),
     Infix(symbol("/").map(lambda _: div), Assoc.LEFT)],
    [Infix(symbol("+").map(lambda _: add), Assoc.LEFT),
     Infix(symbol("-").map(lambda _: sub), Assoc.LEFT)]
]

# 3. The Expression Parser
def expression():
    # A term is either an integer OR an expression inside parentheses.
    # 'lazy' lets the term refer back to the whole expression.
    term = between(symbol("("), symbol(")"), lazy(expression)) | integer()
    return build_expression_parser(table, term)

parser = expression()

if __name__ == "__main__":
    test_cases = [
        "2 + 3",            # 5
        "2 * 3",            # 6
        "2 + 3 * 4",        # 14 (Precedence check)
        "(2 + 3) * 4",      # 20 (Parens check)
        "-2 + 3",           # 1 (Prefix check)
        "10 / 2 + 3",       # 8.0
        "10 / (2 - 2)"      # Error check
    ]

    print(f"{'Expression':<20} | {'Result':<10}")
    print("-" * 35)

    for expr_str in test_cases:
        try:
            result, err = run_parser(parser, expr_str, consume_all=True)
            if err:
                print(f"{expr_str:<20} | Error: {err}")
            else:
                print(f"{expr_str:<20} | {result}")
        except ValueError as e:
            print(f"{expr_str:<20} | Runtime Error: {e}")
