# Usage example

import numpy as np

from mcnemar import Advisory, compute_mcnemar, format_report


if __name__ == "__main__":
    # Drug vs placebo, matched pairs:
    #                  Drug
    #             +         -
    #       +   101        59
    # Placebo
    #       -   121        33
    table = [[101, 59], [121, 33]]

    # Significance level
    alpha = 0.05

    result = compute_mcnemar(table, alpha=alpha)

    print(format_report(result))

    # Only the discordant pairs matter
    assert result.discordant == (59, 121)
    assert result.n == 314

    # Yates corrected statistic: (|59 - 121| - 1)^2 / (59 + 121)
    np.testing.assert_almost_equal(result.chisq, 20.672222, decimal=5)

    # Critical value of a chi-square with 1 df at 95%
    np.testing.assert_almost_equal(result.crit, 3.8415, decimal=4)

    # Approximate power
    np.testing.assert_almost_equal(result.z_beta, 2.7566, decimal=3)
    np.testing.assert_almost_equal(result.power, 0.0058, decimal=3)

    # A table without discordant pairs does not raise, it reports advisories
    degenerate = compute_mcnemar([[10, 0], [0, 10]])
    assert Advisory.NO_DISCORDANT_PAIRS in degenerate.advisories
    assert np.isnan(degenerate.chisq)
