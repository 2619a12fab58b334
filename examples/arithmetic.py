from pegkit.Prim import literal, regex, lazy, run_parser
from pegkit.Combinators import seq, choice, zero_or_more, action

# Grammar:
#   expr   = term (('+' | '-') term)*
#   term   = factor (('*' | '/') factor)*
#   factor = '(' expr ')' | number
#   number = [0-9]+

ws = regex(r"\s*")

def token(parser):
    return action(seq(ws, parser, ws), lambda parts: parts[1])

number = token(action(regex(r"[0-9]+"), int))

def fold(parts):
    result = parts[0]
    for op, right in parts[1]:
        if op == '+': result = result + right
        elif op == '-': result = result - right
        elif op == '*': result = result * right
        else: result = result / right
    return result

factor = lazy(lambda: choice(
    action(seq(token(literal('(')), expr, token(literal(')'))), lambda parts: parts[1]),
    number,
))

term = action(
    seq(factor, zero_or_more(seq(token(choice(literal('*'), literal('/'))), factor))),
    fold,
)

expr = action(
    seq(term, zero_or_more(seq(token(choice(literal('+'), literal('-'))), term))),
    fold,
)

if __name__ == "__main__":
    test_cases = [
        "3 + 4",
        "10 - 3",
        "3 + 4 * 2",         # 11 (Precedence check)
        "(3 + 4) * 2",       # 14 (Parens check)
        "3 + 4 * (2 - 1)",
        "100",
        "3 + ",              # Error check
    ]

    print(f"{'Expression':<20} | {'Result':<10}")
    print("-" * 35)

    for expr_str in test_cases:
        result, err = run_parser(expr, expr_str, consume_all=True)
        if err:
            print(f"{expr_str:<20} | Error: {err}")
        else:
            print(f"{expr_str:<20} | {result}")
