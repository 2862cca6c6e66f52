"""
Errors and advisory codes.

Fatal input problems are raised as `InvalidArgument`. Degenerate numerics
are not errors: they are reported as `Advisory` codes attached to the
result, and the affected fields are set to nan.
"""

from enum import Enum


class McNemarError(Exception):
    """Base exception for all mcnemar errors."""


class InvalidArgument(McNemarError, ValueError):
    """
    Input validation failed.

    Attributes:
        argument (str): name of the offending argument, e.g. "x" or "alpha".
        constraint (str): the check that failed, one of "type", "shape",
            "finite", "integer", "nonnegative" or "range".
    """

    def __init__(self, message: str, argument: str, constraint: str):
        super().__init__(message)
        self.argument = argument
        self.constraint = constraint

    def __reduce__(self):
        # keep the extra attributes when sent across joblib workers
        return (self.__class__, (str(self), self.argument, self.constraint))


class Advisory(str, Enum):
    NO_DISCORDANT_PAIRS = "NoDiscordantPairs"
    DEGENERATE_STATISTIC = "DegenerateStatistic"
    POWER_UNDEFINED = "PowerUndefined"
