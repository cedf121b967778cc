import pytest


@pytest.fixture
def sequences():
    return {
        "zeros": [0.0] * 10,
        "ones": [1.0] * 10,
        "half": [0.0] * 5 + [1.0] * 5,
        "numbers": [float(i) for i in range(10)],
    }


@pytest.fixture
def supply():
    """Build a zero-argument generator serving a list in order."""

    def _supply(values):
        it = iter(values)
        return lambda: next(it)

    return _supply
