from itertools import product

import numpy as np

from mcnemar import McNemarEstimator


def make_tables(
    n_pairs: list[int], discordant_rates: list[float], imbalances: list[float]
) -> list[dict]:
    """
    Grid of 2x2 tables with `n` pairs, a fraction `rate` of discordant pairs,
    and a fraction `imbalance` of those falling in cell b.
    """
    tables = []
    for n, rate, imbalance in product(n_pairs, discordant_rates, imbalances):
        n_discordant = int(round(n * rate))
        b = int(round(n_discordant * imbalance))
        c = n_discordant - b
        n_concordant = n - n_discordant
        a = n_concordant // 2
        d = n_concordant - a
        tables.append(
            {
                "n_pairs": n,
                "discordant_rate": rate,
                "imbalance": imbalance,
                "table": [[a, b], [c, d]],
            }
        )
    return tables


if __name__ == "__main__":
    tables = make_tables(
        n_pairs=[50, 100, 500, 1000],
        discordant_rates=list(np.linspace(0.05, 0.5, 10)),
        imbalances=list(np.linspace(0.05, 0.5, 10)),
    )

    estimator = McNemarEstimator(alpha=0.05, n_jobs=-1, verbose=True).fit(tables)

    df = estimator.summary_
    df["significant"] = df.pvalue <= df.alpha

    print(
        df.pivot_table(
            index="imbalance", columns="n_pairs", values="significant", aggfunc="mean"
        )
    )

    df.drop(columns=["diagnostics"]).to_csv("mcnemar-landscape.csv")
