"""Training engine for RBM-like models."""

from .batch import Batch, iter_batches, prepare_sequences
from .capabilities import Capabilities, resolve_capabilities
from .context import EpochStatistics
from .momentum import MomentumState
from .shuffle import PairedShuffle, PlainShuffle, NoShuffle, get_generator, seed_generator
from .trainer import RbmTrainer
from .watcher import BaseWatcher, EpochRecord, HistoryWatcher, LoggingWatcher, Watcher
from .runner import TrainingArtifacts, TrainingRunner

__all__ = [
    "Batch",
    "BaseWatcher",
    "Capabilities",
    "EpochRecord",
    "EpochStatistics",
    "HistoryWatcher",
    "LoggingWatcher",
    "MomentumState",
    "NoShuffle",
    "PairedShuffle",
    "PlainShuffle",
    "RbmTrainer",
    "TrainingArtifacts",
    "TrainingRunner",
    "Watcher",
    "get_generator",
    "iter_batches",
    "prepare_sequences",
    "resolve_capabilities",
    "seed_generator",
]
