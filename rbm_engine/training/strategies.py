"""Resolution of model capabilities into the strategies used by one ``train`` call."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Sequence

from .batch import Batch
from .capabilities import Capabilities
from .context import EpochStatistics
from .shuffle import select_shuffle


class _Noop:
    def initialize(self, inputs: Sequence[Any]) -> None:
        return None

    def reset(self) -> None:
        return None

    def epoch_end(self, epoch: int) -> None:
        return None

    def accumulate(self, batch: Batch, stats: EpochStatistics) -> None:
        return None


class DataWeightInit:
    def __init__(self, model: Any) -> None:
        self.model = model

    def initialize(self, inputs: Sequence[Any]) -> None:
        self.model.init_weights(inputs)


class ScheduledMomentum:
    def __init__(self, model: Any) -> None:
        self.state = model.momentum

    def reset(self) -> None:
        self.state.reset()

    def epoch_end(self, epoch: int) -> None:
        self.state.maybe_switch(epoch)


class FreeEnergyTracker:
    def __init__(self, model: Any) -> None:
        self.free_energy = model.free_energy

    def accumulate(self, batch: Batch, stats: EpochStatistics) -> None:
        for sample in batch:
            stats.free_energy += float(self.free_energy(sample))


@dataclass(frozen=True)
class TrainingPlan:
    shuffle: Callable[[Any, Any], None]
    weight_init: Any
    momentum: Any
    free_energy: Any


def build_plan(model: Any, capabilities: Capabilities, *, paired: bool, watch: bool) -> TrainingPlan:
    """Pick one strategy per optional behaviour.

    Free energy is only computed when someone watches the training, since
    nothing else reads it.
    """
    noop = _Noop()
    return TrainingPlan(
        shuffle=select_shuffle(capabilities, paired),
        weight_init=DataWeightInit(model) if capabilities.init_weights else noop,
        momentum=ScheduledMomentum(model) if capabilities.momentum else noop,
        free_energy=FreeEnergyTracker(model) if capabilities.free_energy and watch else noop,
    )
