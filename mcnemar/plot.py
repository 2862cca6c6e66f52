import numpy as np
import pandas as pd
import plotnine as pn

from .metrics import compute_mcnemar


def power_curve(x, alphas=None) -> pd.DataFrame:
    """
    Critical value and approximate power of the test on `x` for several alphas,
    in long format (columns: alpha, metric, value).
    """
    if alphas is None:
        alphas = np.linspace(0.01, 0.2, 20)

    rows = []
    for alpha in np.atleast_1d(alphas):
        result = compute_mcnemar(x, alpha=float(alpha))
        rows.append({"alpha": result.alpha, "metric": "crit", "value": result.crit})
        rows.append({"alpha": result.alpha, "metric": "power", "value": result.power})
    return pd.DataFrame(rows)


def plot_power_curve(x, alphas=None) -> pn.ggplot:
    df = power_curve(x, alphas)
    return (
        pn.ggplot(df, pn.aes(x="alpha", y="value", color="metric"))
        + pn.geom_line(size=1)
        + pn.geom_point(size=2)
        + pn.facet_wrap("~metric", scales="free_y")
        + pn.scale_color_manual(values=["#1f77b4", "#ff7f0e"])
        + pn.labs(x="Significance level (alpha)", y="Value")
        + pn.theme_minimal()
        + pn.theme(
            axis_title=pn.element_text(size=12, face="bold"),
            axis_text=pn.element_text(size=10),
            legend_title=pn.element_blank(),
            legend_position="top",
            figure_size=(10, 6),
        )
    )
