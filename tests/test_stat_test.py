"""
The statistic is checked against statsmodels' McNemar test with the same
(asymptotic, continuity corrected) settings, which serves as an independent
reference implementation.
"""

import math

import numpy as np
import pytest
from statsmodels.stats.contingency_tables import mcnemar

from mcnemar.errors import Advisory
from mcnemar.stats_tests import discordant_pair, stats_tests, yates_chisq


@pytest.fixture
def mcnemar_test_fn():
    return stats_tests.get("stats_test::mcnemar")


@pytest.fixture
def drug_vs_placebo():
    return np.array([[101, 59], [121, 33]])


def test_discordant_pair_takes_off_diagonal(drug_vs_placebo):
    assert discordant_pair(drug_vs_placebo) == (59, 121)


def test_drug_vs_placebo(mcnemar_test_fn, drug_vs_placebo):
    output = mcnemar_test_fn(table=drug_vs_placebo, alpha=0.05)

    np.testing.assert_allclose(output.chisq, 20.672222, atol=1e-5)
    np.testing.assert_allclose(output.pvalue, 0.000005, atol=1e-5)
    np.testing.assert_allclose(output.crit, 3.8415, atol=1e-4)
    assert output.df == 1
    assert output.diagnostics == ()


@pytest.mark.parametrize(
    "table",
    [
        [[101, 59], [121, 33]],
        [[10, 3], [7, 10]],
        [[0, 5], [5, 0]],
        [[20, 1], [0, 3]],
        [[5, 12], [30, 2]],
        [[0, 400], [350, 0]],
    ],
)
def test_matches_statsmodels(mcnemar_test_fn, table):
    table = np.array(table)
    output = mcnemar_test_fn(table=table, alpha=0.05)
    expected = mcnemar(table=table, exact=False, correction=True)

    np.testing.assert_allclose(output.chisq, expected.statistic, rtol=1e-12)
    np.testing.assert_allclose(output.pvalue, expected.pvalue, atol=1e-12)


@pytest.mark.parametrize("b", [1, 2, 7, 50])
def test_equal_discordant_counts(b):
    # the correction is subtracted before squaring: (|0| - 1)^2 / 2b
    assert yates_chisq(b, b) == pytest.approx(1 / (2 * b))


def test_equal_discordant_counts_pvalue_close_to_one(mcnemar_test_fn):
    output = mcnemar_test_fn(table=np.array([[10, 50], [50, 10]]), alpha=0.05)
    assert output.chisq == pytest.approx(0.01)
    assert output.pvalue > 0.9


def test_no_discordant_pairs(mcnemar_test_fn):
    output = mcnemar_test_fn(table=np.array([[12, 0], [0, 8]]), alpha=0.05)

    assert math.isnan(output.chisq)
    assert math.isnan(output.pvalue)
    # the critical value does not depend on the data
    np.testing.assert_allclose(output.crit, 3.8415, atol=1e-4)
    assert [d.code for d in output.diagnostics] == [
        Advisory.NO_DISCORDANT_PAIRS,
        Advisory.DEGENERATE_STATISTIC,
    ]


def test_one_discordant_cell_is_zero(mcnemar_test_fn):
    output = mcnemar_test_fn(table=np.array([[12, 9], [0, 8]]), alpha=0.05)

    assert output.chisq == pytest.approx(64 / 9)
    assert output.diagnostics == ()


def test_empty_table(mcnemar_test_fn):
    output = mcnemar_test_fn(table=np.zeros((2, 2), dtype=int), alpha=0.05)

    assert math.isnan(output.chisq)
    assert math.isnan(output.pvalue)


@pytest.mark.parametrize(
    ["alpha", "expected_crit"],
    [(0.05, 3.841459), (0.01, 6.634897), (0.1, 2.705543)],
)
def test_critical_value(mcnemar_test_fn, drug_vs_placebo, alpha, expected_crit):
    output = mcnemar_test_fn(table=drug_vs_placebo, alpha=alpha)
    np.testing.assert_allclose(output.crit, expected_crit, atol=1e-5)


def test_critical_value_increases_as_alpha_decreases(
    mcnemar_test_fn, drug_vs_placebo
):
    alphas = [0.5, 0.2, 0.1, 0.05, 0.01, 0.001, 1e-6]
    crits = [
        mcnemar_test_fn(table=drug_vs_placebo, alpha=alpha).crit for alpha in alphas
    ]
    assert all(np.diff(crits) > 0)
