import numpy as np
import plotnine as pn

from mcnemar.plot import plot_power_curve, power_curve


def test_power_curve():
    alphas = [0.01, 0.05, 0.1]
    df = power_curve([[101, 59], [121, 33]], alphas)

    assert list(df.columns) == ["alpha", "metric", "value"]
    assert len(df) == 2 * len(alphas)

    crits = df[df["metric"] == "crit"]["value"].to_numpy()
    assert np.all(np.diff(crits) < 0)
    np.testing.assert_allclose(crits[1], 3.8415, atol=1e-4)


def test_power_curve_default_alphas():
    df = power_curve([[101, 59], [121, 33]])
    assert df["alpha"].nunique() == 20


def test_plot_power_curve():
    assert isinstance(plot_power_curve([[101, 59], [121, 33]]), pn.ggplot)
