import numpy as np

from .errors import InvalidArgument
from .types import ContingencyTable

DEFAULT_ALPHA = 0.05

# integer, unsigned and floating point dtypes; bool and complex are rejected
_REAL_KINDS = ("i", "u", "f")

# largest count that survives the cast to int64, per dtype kind
_INT64_MAX = {
    "i": np.int64(np.iinfo(np.int64).max),
    "u": np.uint64(np.iinfo(np.int64).max),
    # floats must stay below 2**63, which is the first value outside int64
    "f": np.nextafter(2.0**63, 0),
}


def validate_table(x) -> np.ndarray:
    """
    Checks that `x` is a real, finite, integer valued, non-negative 2x2 table.

    Args:
        x: a `ContingencyTable` or anything `np.asarray` turns into a 2x2 array
           (nested lists, numpy arrays, pandas DataFrames).

    Returns:
        np.ndarray: the table as a 2x2 int64 array.

    Raises:
        InvalidArgument: if any of the checks fails.
    """
    if isinstance(x, ContingencyTable):
        x = [[x.a, x.b], [x.c, x.d]]

    try:
        table = np.asarray(x)
    except (ValueError, TypeError) as e:
        raise InvalidArgument(
            f"x must be a 2x2 numeric table, got {x!r}.",
            argument="x",
            constraint="shape",
        ) from e

    if table.dtype.kind not in _REAL_KINDS:
        raise InvalidArgument(
            f"x must hold real numbers, got dtype {table.dtype}.",
            argument="x",
            constraint="type",
        )
    if table.shape != (2, 2):
        raise InvalidArgument(
            f"x must be a 2x2 table, got shape {table.shape}.",
            argument="x",
            constraint="shape",
        )
    if not np.all(np.isfinite(table)):
        raise InvalidArgument(
            "x must only contain finite values.",
            argument="x",
            constraint="finite",
        )
    if not np.all(table == np.floor(table)):
        raise InvalidArgument(
            "x must only contain integer counts.",
            argument="x",
            constraint="integer",
        )
    if np.any(table < 0):
        raise InvalidArgument(
            "x must only contain non-negative counts.",
            argument="x",
            constraint="nonnegative",
        )
    if np.any(table > _INT64_MAX[table.dtype.kind]):
        raise InvalidArgument(
            f"x counts must not exceed {np.iinfo(np.int64).max}.",
            argument="x",
            constraint="range",
        )

    return table.astype(np.int64)


def validate_alpha(alpha) -> float:
    """
    Checks that `alpha` is a real, finite scalar in the open interval (0, 1).
    `None` means the default significance level (0.05).
    """
    if alpha is None:
        return DEFAULT_ALPHA

    if isinstance(alpha, (bool, np.bool_)):
        raise InvalidArgument(
            f"alpha must be a real number, got {alpha!r}.",
            argument="alpha",
            constraint="type",
        )

    value = np.asarray(alpha)
    if value.dtype.kind not in _REAL_KINDS:
        raise InvalidArgument(
            f"alpha must be a real number, got {alpha!r}.",
            argument="alpha",
            constraint="type",
        )
    if value.ndim != 0:
        raise InvalidArgument(
            f"alpha must be a scalar, got shape {value.shape}.",
            argument="alpha",
            constraint="shape",
        )

    value = float(value)
    if not np.isfinite(value):
        raise InvalidArgument(
            f"alpha must be finite, got {value}.",
            argument="alpha",
            constraint="finite",
        )
    if not 0.0 < value < 1.0:
        raise InvalidArgument(
            f"alpha must be in the open interval (0, 1), got {value}.",
            argument="alpha",
            constraint="range",
        )

    return value
