from .config import (
    MACHINE_EPSILON,
    StatsConfig,
    VarianceDivisor,
    get_default_config,
    get_population_config,
)
from .ingestor import (
    CovarianceIngestor,
    Ingestor,
    get_covariance_ingestor,
    get_ingestor,
)
from .observe import observe, observe_covariance
from .report import covariance_table, print_stats, stats_table
from .schemes import (
    CovarianceStats,
    CovarianceValidation,
    Stats,
    Validation,
    null_covariance_stats,
    null_stats,
)
from .validate import validate, validate_covariance

__version__ = "0.1.0"

__all__ = [
    "MACHINE_EPSILON",
    "StatsConfig",
    "VarianceDivisor",
    "get_default_config",
    "get_population_config",
    "CovarianceIngestor",
    "Ingestor",
    "get_covariance_ingestor",
    "get_ingestor",
    "observe",
    "observe_covariance",
    "covariance_table",
    "print_stats",
    "stats_table",
    "CovarianceStats",
    "CovarianceValidation",
    "Stats",
    "Validation",
    "null_covariance_stats",
    "null_stats",
    "validate",
    "validate_covariance",
]
