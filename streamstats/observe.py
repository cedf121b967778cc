"""
Batch (pull-based) observation: call a generator a fixed number of times and
keep only the final statistics.
"""

from typing import Callable, Mapping, Optional, Tuple, Union

from .config import StatsConfig, get_default_config
from .ingestor import CovarianceIngestor, Ingestor
from .report import print_stats
from .schemes import CovarianceStats, Stats

Pair = Union[Tuple[float, float], Mapping[str, float]]


def _check_count(sample_count: int) -> None:
    if sample_count < 0:
        raise ValueError(f"sample_count must be >= 0, got {sample_count}")


def _unpack(pair: Pair) -> Tuple[float, float]:
    if isinstance(pair, Mapping):
        return pair["x"], pair["y"]
    x, y = pair
    return x, y


def observe(
    generator: Callable[[], float],
    sample_count: int,
    config: Optional[StatsConfig] = None,
) -> Stats:
    """
    Calculate min, max, mean, variance of the values returned by successive
    calls to generator().

    Args:
        generator: Zero-argument number source, called exactly sample_count times.
        sample_count: Number of samples to draw. Zero yields the null record.
        config: Divisor convention and verbosity; defaults to sample variance.

    Returns:
        Stats of all drawn samples.
    """
    _check_count(sample_count)
    config = config or get_default_config()
    ingestor = Ingestor(config)
    for _ in range(sample_count):
        ingestor.push(generator())
    stats = ingestor.stats
    if config.verbose:
        print_stats(stats, title=f"Observed {sample_count} samples")
    return stats


def observe_covariance(
    generator: Callable[[], Pair],
    sample_count: int,
    config: Optional[StatsConfig] = None,
) -> CovarianceStats:
    """
    Joint observation of two sample sets.

    generator() returns an (x, y) pair, or a mapping with "x" and "y" keys.
    """
    _check_count(sample_count)
    config = config or get_default_config()
    ingestor = CovarianceIngestor(config)
    for _ in range(sample_count):
        ingestor.push(*_unpack(generator()))
    stats = ingestor.stats
    if config.verbose:
        print_stats(stats, title=f"Observed {sample_count} sample pairs")
    return stats
