from typing import Iterable

import pandas as pd
from joblib import Parallel, delayed
from sklearn.base import BaseEstimator
from tqdm.auto import tqdm

from .errors import InvalidArgument
from .logging import get_logger, log
from .metrics import compute_mcnemar
from .types import ContingencyTable
from .validation import DEFAULT_ALPHA, validate_alpha

_logger = get_logger(__name__)


class McNemarEstimator(BaseEstimator):
    """
    Runs McNemar's test over a batch of independent 2x2 tables.

    After `fit`, `results_` holds one `TestResult` per table and `summary_`
    holds the same results as a DataFrame, one row per table.
    """

    def __init__(
        self,
        alpha: float = DEFAULT_ALPHA,
        n_jobs: int = 1,
        verbose: bool = False,
    ):
        self.alpha = alpha
        self.n_jobs = n_jobs
        self.verbose = verbose

    def fit(self, X: Iterable, y=None):
        """
        Fit the estimator on a batch of tables.

        Args:
            X (Iterable): tables, or dicts with a "table" key. The remaining keys
                          of a dict are kept as metadata columns in `summary_`.

        Returns:
            McNemarEstimator: the fitted estimator.
        """
        alpha = validate_alpha(self.alpha)
        samples = [self._split_sample(sample) for sample in X]

        if not samples:
            raise InvalidArgument(
                "X must contain at least one table.",
                argument="X",
                constraint="shape",
            )

        # validate everything before dispatching, so no partial batch is computed
        tables = [ContingencyTable.from_array(table) for _, table in samples]

        tasks = (delayed(compute_mcnemar)(table, alpha) for table in tables)
        if self.verbose:
            tasks = tqdm(
                tasks,
                total=len(tables),
                desc=f"Running McNemar's test at alpha={alpha}",
            )

        self.results_ = Parallel(n_jobs=self.n_jobs)(tasks)
        self.summary_ = pd.DataFrame(
            [
                {**metadata, **result.to_dict()}
                for (metadata, _), result in zip(samples, self.results_)
            ]
        )

        n_flagged = sum(1 for result in self.results_ if result.diagnostics)
        log(
            _logger.info,
            f"Computed McNemar's test for {len(self.results_)} tables "
            f"({n_flagged} with advisories)",
            "green",
        )

        return self

    @staticmethod
    def _split_sample(sample) -> tuple[dict, object]:
        if isinstance(sample, dict):
            if "table" not in sample:
                raise InvalidArgument(
                    "Dict samples must have a 'table' key.",
                    argument="X",
                    constraint="type",
                )
            metadata = {k: v for k, v in sample.items() if k != "table"}
            return metadata, sample["table"]
        return {}, sample
