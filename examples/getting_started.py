import numpy as np

from mcnemar import compute_mcnemar_from_outcomes, format_report

rng = np.random.default_rng(42)

# per-item correctness of two classifiers evaluated on the same 500 references
references = rng.integers(0, 2, size=500)
preds_a = np.where(rng.random(500) < 0.80, references, 1 - references)
preds_b = np.where(rng.random(500) < 0.85, references, 1 - references)

result = compute_mcnemar_from_outcomes(
    preds_a == references, preds_b == references, alpha=0.05
)

print(result.table)
print(format_report(result))
