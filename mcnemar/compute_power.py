import math

import catalogue

from .distributions import erfc, erfcinv
from .errors import Advisory
from .types import Diagnostic, DiscordantPair, PowerOutput

power_approximations = catalogue.create("mcnemar", "power_approximations")


def z_alpha(alpha: float) -> float:
    """Two-sided critical z-value for a significance level `alpha`."""
    return abs(-math.sqrt(2) * erfcinv(alpha))


@power_approximations.register("power::normal_approximation")
def normal_approximation(
    discordant: DiscordantPair, n: int, alpha: float
) -> PowerOutput:
    """
    Approximate two-sided power of McNemar's test via a normal approximation.

    With p the smaller discordant proportion and pp the ratio of the larger to
    the smaller discordant count:

        Zb = |sqrt(N p (pp - 1)^2) - sqrt(Za^2 (pp + 1))| / sqrt(pp + 1 - p (pp - 1)^2)
        power = (1 - 0.5 erfc(-Zb / sqrt(2))) * 2

    The power is returned as computed, without clipping to [0, 1].

    Args:
        discordant (DiscordantPair): discordant counts (b, c).
        n (int): total number of pairs.
        alpha (float): significance level.

    Returns:
        PowerOutput: Zb and power, both nan (with a `PowerUndefined` advisory)
                     when a discordant cell is zero or `n` is zero.
    """
    b, c = discordant
    za = z_alpha(alpha)

    p = min(b, c) / n if n > 0 else math.nan
    pp = max(b / c, c / b) if b != 0 and c != 0 else math.inf

    if not math.isfinite(pp) or math.isnan(p):
        return PowerOutput(
            z_beta=math.nan,
            power=math.nan,
            diagnostics=(
                Diagnostic(
                    code=Advisory.POWER_UNDEFINED,
                    message="Power calculation is undefined when one discordant cell is zero or N = 0.",
                ),
            ),
        )

    num = abs(math.sqrt(n * p * (pp - 1) ** 2) - math.sqrt(za**2 * (pp + 1)))
    # n >= b + c keeps the radicand positive
    denom = math.sqrt(pp + 1 - p * (pp - 1) ** 2)
    z_beta = num / denom
    power = (1 - 0.5 * erfc(-z_beta / math.sqrt(2))) * 2

    return PowerOutput(z_beta=z_beta, power=power)
