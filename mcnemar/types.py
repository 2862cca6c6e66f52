from dataclasses import dataclass, field
from typing import NamedTuple

import numpy as np

from .errors import Advisory


class DiscordantPair(NamedTuple):
    b: int
    c: int


@dataclass(frozen=True)
class ContingencyTable:
    """
    A 2x2 table of matched pairs with a dichotomous outcome under two conditions:

                        condition 2
                        +       -
        condition 1 +   a       b
                    -   c       d

    `b` and `c` are the discordant cells, `a` and `d` the concordant ones.
    """

    a: int
    b: int
    c: int
    d: int

    def __post_init__(self):
        from .validation import validate_table

        validate_table([[self.a, self.b], [self.c, self.d]])

    @classmethod
    def from_array(cls, x) -> "ContingencyTable":
        from .validation import validate_table

        table = validate_table(x)
        return cls(
            a=int(table[0, 0]),
            b=int(table[0, 1]),
            c=int(table[1, 0]),
            d=int(table[1, 1]),
        )

    def as_array(self) -> np.ndarray:
        return np.array([[self.a, self.b], [self.c, self.d]], dtype=np.int64)

    @property
    def n(self) -> int:
        return self.a + self.b + self.c + self.d

    @property
    def discordant(self) -> DiscordantPair:
        return DiscordantPair(b=self.b, c=self.c)


@dataclass(frozen=True)
class Diagnostic:
    code: Advisory
    message: str


@dataclass(frozen=True)
class StatsTestOutput:
    chisq: float
    df: int
    crit: float
    pvalue: float
    diagnostics: tuple[Diagnostic, ...] = ()


@dataclass(frozen=True)
class PowerOutput:
    z_beta: float
    power: float
    diagnostics: tuple[Diagnostic, ...] = ()


@dataclass(frozen=True)
class TestResult:
    """
    Outcome of a McNemar test on a single table.

    Attributes:
        chisq (float): McNemar chi-square with Yates' correction, nan if b + c = 0.
        df (int): degrees of freedom, always 1.
        crit (float): critical chi-square value at `alpha`.
        pvalue (float): two-sided p-value, nan if `chisq` is nan.
        alpha (float): significance level.
        z_beta (float): Z_beta used for the power approximation, nan if undefined.
        power (float): approximate two-sided power, nan if undefined.
        n (int): total number of pairs.
        table (ContingencyTable): the input table.
        discordant (DiscordantPair): the discordant counts (b, c).
        diagnostics (tuple[Diagnostic, ...]): advisories raised while computing.
    """

    chisq: float
    df: int
    crit: float
    pvalue: float
    alpha: float
    z_beta: float
    power: float
    n: int
    table: ContingencyTable
    discordant: DiscordantPair
    diagnostics: tuple[Diagnostic, ...] = field(default=())

    @property
    def advisories(self) -> tuple[Advisory, ...]:
        return tuple(d.code for d in self.diagnostics)

    def to_dict(self) -> dict:
        return {
            "a": self.table.a,
            "b": self.table.b,
            "c": self.table.c,
            "d": self.table.d,
            "n": self.n,
            "chisq": self.chisq,
            "df": self.df,
            "crit": self.crit,
            "pvalue": self.pvalue,
            "alpha": self.alpha,
            "z_beta": self.z_beta,
            "power": self.power,
            "diagnostics": [d.code.value for d in self.diagnostics],
        }
