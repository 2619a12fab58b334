from pegkit.Char import char
from pegkit.Combinators import zero_or_more, sep_by
from pegkit.Prim import literal, run_parser


class TimeMany:
    def setup(self):
        self.parser = zero_or_more(char("a"))
        self.small = "a" * 1000
        self.medium = "a" * 10000
        self.large = "a" * 100000

    def time_many_small(self):
        run_parser(self.parser, self.small)

    def time_many_medium(self):
        run_parser(self.parser, self.medium)

    def time_many_large(self):
        run_parser(self.parser, self.large)


class TimeSepBy:
    def setup(self):
        self.parser = sep_by(literal("ab"), char(","))
        self.data = ",".join(["ab"] * 10000)

    def time_sep_by(self):
        run_parser(self.parser, self.data)
