"""Generic unsupervised training engine for RBM-like models."""

from .config import ExperimentConfig, load_config
from .errors import InvalidArgumentError, RbmEngineError
from .training import (
    Capabilities,
    EpochStatistics,
    HistoryWatcher,
    LoggingWatcher,
    MomentumState,
    RbmTrainer,
    TrainingRunner,
)
from .utils import set_seed, setup_logger

__all__ = [
    "Capabilities",
    "EpochStatistics",
    "ExperimentConfig",
    "HistoryWatcher",
    "InvalidArgumentError",
    "LoggingWatcher",
    "MomentumState",
    "RbmEngineError",
    "RbmTrainer",
    "TrainingRunner",
    "load_config",
    "set_seed",
    "setup_logger",
]
