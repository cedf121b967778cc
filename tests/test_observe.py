import math
import random

import pytest

from streamstats.config import StatsConfig, get_population_config
from streamstats.ingestor import Ingestor
from streamstats.observe import observe, observe_covariance
from streamstats.validate import validate


def test_uniform_random_source():
    rng = random.Random(1234)
    stats = observe(rng.random, 10000)
    expected = {
        "tolerance": 0.1,
        "min": 0,
        "max": 1,
        "mean": 0.5,
        "variance": 1 / 12,
    }
    assert validate(stats, expected)
    assert stats.count == 10000


def test_fixed_sequences(sequences, supply):
    zero = observe(supply(sequences["zeros"]), 10)
    assert (zero.min, zero.max, zero.mean, zero.variance) == (0.0, 0.0, 0.0, 0.0)

    one = observe(supply(sequences["ones"]), 10)
    assert one.mean == pytest.approx(1.0)
    assert one.variance == pytest.approx(0.0)

    half = observe(supply(sequences["half"]), 10)
    assert half.mean == pytest.approx(0.5)
    assert half.variance == pytest.approx(0.27777, abs=1e-4)

    numbers = observe(supply(sequences["numbers"]), 10)
    assert numbers.min == 0.0
    assert numbers.max == 9.0
    assert numbers.mean == pytest.approx(4.5)
    assert numbers.variance == pytest.approx(9.1666, abs=1e-4)


def test_generator_called_exactly_sample_count_times():
    calls = []

    def gen():
        calls.append(len(calls))
        return float(len(calls))

    observe(gen, 25)
    assert len(calls) == 25


def test_zero_samples_returns_null_without_calling():
    def gen():
        raise AssertionError("generator must not be called")

    stats = observe(gen, 0)
    assert stats.is_null
    assert math.isnan(stats.mean)

    cov = observe_covariance(gen, 0)
    assert cov.is_null
    assert math.isnan(cov.covariance)


def test_negative_sample_count():
    with pytest.raises(ValueError):
        observe(lambda: 0.0, -1)
    with pytest.raises(ValueError):
        observe_covariance(lambda: (0.0, 0.0), -1)


@pytest.mark.parametrize("config", [None, get_population_config()])
def test_batch_matches_incremental(supply, config):
    rng = random.Random(99)
    values = [rng.gauss(50.0, 3.0) for _ in range(300)]

    batch = observe(supply(values), len(values), config)

    ingestor = Ingestor(config)
    for v in values:
        last = ingestor.ingest(v)

    assert batch.mean == pytest.approx(last.mean, rel=1e-12)
    assert batch.variance == pytest.approx(last.variance, rel=1e-12)
    assert batch.min == last.min
    assert batch.max == last.max
    assert batch.count == last.count


def test_batch_order_invariance(supply):
    rng = random.Random(5)
    values = [rng.expovariate(0.2) for _ in range(400)]
    shuffled = list(values)
    rng.shuffle(shuffled)

    a = observe(supply(values), 400)
    b = observe(supply(shuffled), 400)
    assert a.mean == pytest.approx(b.mean, rel=1e-9)
    assert a.variance == pytest.approx(b.variance, rel=1e-9)


def test_verbose_prints_result(capsys, supply):
    observe(supply([1.0, 2.0, 3.0]), 3, StatsConfig(verbose=True))
    out = capsys.readouterr().out
    assert "Observed 3 samples" in out
    assert "variance" in out


def test_quiet_by_default(capsys, supply):
    observe(supply([1.0, 2.0, 3.0]), 3)
    assert capsys.readouterr().out == ""
