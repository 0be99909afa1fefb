"""Observers notified at the lifecycle points of a training run."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, List, Optional, Protocol

from torch import nn

from .capabilities import resolve_capabilities
from .context import EpochStatistics

logger = logging.getLogger(__name__)


class Watcher(Protocol):
    def training_begin(self, model: Any) -> None: ...
    def epoch_end(self, epoch: int, stats: EpochStatistics, model: Any) -> None: ...
    def training_end(self, model: Any) -> None: ...


class BaseWatcher:
    """Watcher that ignores every notification."""

    def training_begin(self, model: Any) -> None:
        pass

    def epoch_end(self, epoch: int, stats: EpochStatistics, model: Any) -> None:
        pass

    def training_end(self, model: Any) -> None:
        pass


def count_parameters(model: nn.Module) -> int:
    return sum(p.numel() for p in model.parameters() if p.requires_grad)


def current_momentum(model: Any) -> Optional[float]:
    """Momentum of models that declare the capability, ``None`` for the others."""
    if not resolve_capabilities(model).momentum:
        return None
    return model.momentum.current


class LoggingWatcher(BaseWatcher):
    """Log one line per epoch plus the overall training time."""

    def __init__(self, log: Optional[logging.Logger] = None) -> None:
        self.log = log or logger
        self._start = 0.0
        self._epoch_start = 0.0

    def training_begin(self, model: Any) -> None:
        self.log.info("Train %s", type(model).__name__)
        if isinstance(model, nn.Module):
            self.log.info("Number of parameters: %d", count_parameters(model))
        self._start = self._epoch_start = time.time()

    def epoch_end(self, epoch: int, stats: EpochStatistics, model: Any) -> None:
        now = time.time()
        message = f"Epoch: {epoch:03d}, Reconstruction error: {stats.reconstruction_error:.5f}, Sparsity: {stats.sparsity:.5f}"
        if resolve_capabilities(model).free_energy:
            message += f", Free energy: {stats.free_energy:.5f}"
        momentum = current_momentum(model)
        if momentum is not None:
            message += f", Momentum: {momentum:.3f}"
        message += f" Seconds: {now - self._epoch_start:.4f}"
        self.log.info(message)
        self._epoch_start = now

    def training_end(self, model: Any) -> None:
        self.log.info("Training took %.4f s", time.time() - self._start)


@dataclass
class EpochRecord:
    epoch: int
    stats: EpochStatistics
    momentum: Optional[float]


class HistoryWatcher(BaseWatcher):
    """Keep a copy of every epoch's statistics."""

    def __init__(self) -> None:
        self.records: List[EpochRecord] = []
        self.began = 0
        self.ended = 0

    def training_begin(self, model: Any) -> None:
        self.began += 1
        self.records = []

    def epoch_end(self, epoch: int, stats: EpochStatistics, model: Any) -> None:
        self.records.append(EpochRecord(epoch, stats.snapshot(), current_momentum(model)))

    def training_end(self, model: Any) -> None:
        self.ended += 1

    @property
    def reconstruction_errors(self) -> List[float]:
        return [r.stats.reconstruction_error for r in self.records]
