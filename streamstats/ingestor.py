"""
Incremental (push-based) statistics.

Each ingestor owns its accumulator state and returns a fresh record per
sample. Mean and variance use Welford's algorithm; covariance applies the
same pre/post error product across the two streams.
"""

from typing import Optional

from .config import StatsConfig, get_default_config
from .schemes import CovarianceStats, Stats, null_covariance_stats, null_stats
from .utils.stats_utils import RunningStats, safe_div


def _to_stats(acc: RunningStats, ddof: int) -> Stats:
    if acc.n == 0:
        return null_stats()
    return Stats(
        mean=acc.mean,
        variance=acc.variance(ddof),
        min=acc.min_val,
        max=acc.max_val,
        count=acc.n,
    )


class Ingestor:
    """Progressively calculate min, max, mean and variance of one stream."""

    def __init__(self, config: Optional[StatsConfig] = None) -> None:
        self.config = config or get_default_config()
        self._acc = RunningStats()

    @property
    def count(self) -> int:
        return self._acc.n

    @property
    def stats(self) -> Stats:
        """Statistics of all samples so far; the null record before the first."""
        return _to_stats(self._acc, self.config.ddof)

    def push(self, sample: float) -> None:
        self._acc.update(sample)

    def ingest(self, sample: float) -> Stats:
        self._acc.update(sample)
        return self.stats

    def reset(self) -> None:
        """Drop all samples; the next record describes fresh input only."""
        self._acc.reset()

    __call__ = ingest


class CovarianceIngestor:
    """Progressively calculate Stats of two aligned streams and their covariance."""

    def __init__(self, config: Optional[StatsConfig] = None) -> None:
        self.config = config or get_default_config()
        self._x = RunningStats()
        self._y = RunningStats()
        self._cross_error = 0.0

    @property
    def count(self) -> int:
        return self._x.n

    @property
    def stats(self) -> CovarianceStats:
        if self._x.n == 0:
            return null_covariance_stats()
        ddof = self.config.ddof
        return CovarianceStats(
            x=_to_stats(self._x, ddof),
            y=_to_stats(self._y, ddof),
            covariance=safe_div(self._cross_error, self._x.n - ddof),
        )

    def push(self, x: float, y: float) -> None:
        error_pre_x, _ = self._x.update(x)
        _, error_post_y = self._y.update(y)
        # Old-mean error of x times new-mean error of y.
        self._cross_error += error_pre_x * error_post_y

    def ingest(self, x: float, y: float) -> CovarianceStats:
        self.push(x, y)
        return self.stats

    def reset(self) -> None:
        self._x.reset()
        self._y.reset()
        self._cross_error = 0.0

    __call__ = ingest


def get_ingestor(config: Optional[StatsConfig] = None) -> Ingestor:
    return Ingestor(config)


def get_covariance_ingestor(config: Optional[StatsConfig] = None) -> CovarianceIngestor:
    return CovarianceIngestor(config)
