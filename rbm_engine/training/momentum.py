"""Momentum schedule state owned by a model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class MomentumState:
    """Two-stage momentum: ``initial`` until ``switch_epoch``, ``final`` afterwards."""

    initial: float = 0.5
    final: float = 0.9
    switch_epoch: int = 6
    current: float = 0.5

    def reset(self) -> None:
        self.current = self.initial

    def maybe_switch(self, epoch: int) -> bool:
        """Move to the final momentum once ``epoch`` reaches the switch epoch."""
        if epoch != self.switch_epoch:
            return False
        self.current = self.final
        return True
