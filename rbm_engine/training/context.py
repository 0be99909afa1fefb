"""Per-epoch statistics shared with the per-batch trainer."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass
class EpochStatistics:
    """Accumulator for one pass over the training set.

    The per-batch trainer adds its batch-level ``reconstruction_error`` and
    ``sparsity`` to the live instance; the engine adds per-sample free energy
    when it is tracked. ``finalize`` turns the sums into averages.
    """

    reconstruction_error: float = 0.0
    sparsity: float = 0.0
    free_energy: float = 0.0
    batches_seen: int = 0
    samples_seen: int = 0

    def record_batch(self, size: int) -> None:
        self.batches_seen += 1
        self.samples_seen += size

    def finalize(self) -> "EpochStatistics":
        # error and sparsity are batch-level sums, free energy is per sample
        if self.batches_seen:
            self.reconstruction_error /= self.batches_seen
            self.sparsity /= self.batches_seen
        if self.samples_seen:
            self.free_energy /= self.samples_seen
        return self

    def snapshot(self) -> "EpochStatistics":
        return replace(self)
