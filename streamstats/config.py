import json
import sys
from enum import Enum
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict

MACHINE_EPSILON = sys.float_info.epsilon


class VarianceDivisor(str, Enum):
    """Divisor convention for variance and covariance, stable in JSON."""

    sample = "sample"  # n - 1, Bessel's correction
    population = "population"  # n

    @property
    def ddof(self) -> int:
        return 1 if self is VarianceDivisor.sample else 0


class StatsConfig(BaseModel):
    """Statistics configuration shared by ingestors and batch observers"""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    variance_divisor: VarianceDivisor = VarianceDivisor.sample

    # Print batch observation results to the console.
    verbose: bool = False

    @property
    def ddof(self) -> int:
        return self.variance_divisor.ddof

    def to_dict(self) -> Dict[str, Any]:
        """
        Export config to a JSON-serializable dict.
        """
        return self.model_dump(mode="json")

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StatsConfig":
        return cls.model_validate(data)

    @classmethod
    def from_json(cls, s: str) -> "StatsConfig":
        return cls.from_dict(json.loads(s))


def get_default_config() -> StatsConfig:
    """Get default configuration (sample variance)"""
    return StatsConfig()


def get_population_config() -> StatsConfig:
    """Get configuration dividing by the sample count"""
    return StatsConfig(variance_divisor=VarianceDivisor.population)
