import math


class RunningStats:
    """Welford online mean/variance with extrema."""

    def __init__(self) -> None:
        self.n = 0
        self.mean = 0.0
        self.M2 = 0.0  # sum of squared error against the running mean
        self.min_val = math.inf
        self.max_val = -math.inf

    def update(self, x: float) -> tuple[float, float]:
        """
        Fold one sample into the running state.

        Returns (error_pre, error_post): the sample's error against the mean
        before and after the update. Their product is the M2 increment.
        """
        self.n += 1
        if x < self.min_val:
            self.min_val = x
        if x > self.max_val:
            self.max_val = x
        delta = x - self.mean
        self.mean += delta / self.n
        delta2 = x - self.mean
        self.M2 += delta * delta2
        return delta, delta2

    def variance(self, ddof: int = 1) -> float:
        """M2 / (n - ddof); NaN when the divisor is not positive."""
        return safe_div(self.M2, self.n - ddof)

    def reset(self) -> None:
        self.n = 0
        self.mean = 0.0
        self.M2 = 0.0
        self.min_val = math.inf
        self.max_val = -math.inf


def safe_div(total: float, divisor: int) -> float:
    """Divide, mapping a non-positive divisor to NaN instead of raising."""
    if divisor <= 0:
        return math.nan
    return total / divisor
