"""Generic unsupervised training loop for RBM-like models."""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from ..errors import InvalidArgumentError
from .batch import iter_batches, prepare_sequences
from .capabilities import check_model, resolve_capabilities
from .context import EpochStatistics
from .strategies import build_plan
from .watcher import LoggingWatcher, Watcher

logger = logging.getLogger(__name__)


class RbmTrainer:
    """Train a model by presenting mini-batches to its per-batch trainer.

    The model provides ``batch_size`` and ``trainer_factory(model)``; the
    object built by the factory receives every ``(input_batch, target_batch,
    stats)`` triple of an epoch, in order. Optional behaviours (shuffling,
    momentum, weight initialisation from data, free energy) follow the
    model's ``capabilities``.

    Args:
        watcher: Observer notified at training start, after every epoch and at
            the end. When ``None`` each call builds one from the model's
            ``watcher_factory``, or a :class:`LoggingWatcher`.
        enable_watcher: When ``False`` no observer is notified at all and free
            energy is not computed.
    """

    def __init__(self, watcher: Optional[Watcher] = None, enable_watcher: bool = True) -> None:
        self.watcher = watcher
        self.enable_watcher = enable_watcher

    def _resolve_watcher(self, model: Any) -> Optional[Watcher]:
        if not self.enable_watcher:
            return None
        if self.watcher is not None:
            return self.watcher
        factory = getattr(model, "watcher_factory", None)
        return factory() if factory is not None else LoggingWatcher()

    def train(
        self,
        model: Any,
        inputs: Sequence[Any],
        targets: Optional[Sequence[Any]] = None,
        max_epochs: int = 1,
    ) -> float:
        """Train ``model`` for ``max_epochs`` epochs and return the last epoch's reconstruction error.

        Without ``targets`` (or with ``targets is inputs``) every sample is its
        own target. Distinct targets select denoising training, where the two
        sequences are shuffled with the same permutation.
        """
        paired = targets is not None and targets is not inputs
        return self._train(model, inputs, inputs if targets is None else targets, max_epochs, paired)

    def train_denoising(
        self,
        model: Any,
        inputs: Sequence[Any],
        targets: Sequence[Any],
        max_epochs: int = 1,
    ) -> float:
        if targets is None:
            raise InvalidArgumentError("Denoising training requires a target sequence")
        return self._train(model, inputs, targets, max_epochs, True)

    def _train(
        self,
        model: Any,
        inputs: Sequence[Any],
        targets: Sequence[Any],
        max_epochs: int,
        paired: bool,
    ) -> float:
        if len(inputs) != len(targets):
            raise InvalidArgumentError(
                f"Inputs and targets must have the same length ({len(inputs)} != {len(targets)})"
            )
        if len(inputs) == 0:
            raise InvalidArgumentError("Cannot train on an empty training set")
        if max_epochs < 1:
            raise InvalidArgumentError(f"max_epochs must be positive, got {max_epochs}")

        capabilities = resolve_capabilities(model)
        check_model(model, capabilities)
        batch_size = int(model.batch_size)
        if batch_size <= 0:
            raise InvalidArgumentError(f"batch_size must be positive, got {batch_size}")

        watcher = self._resolve_watcher(model)
        plan = build_plan(model, capabilities, paired=paired, watch=watcher is not None)

        plan.momentum.reset()
        if watcher is not None:
            watcher.training_begin(model)

        # shuffled training works on copies, the caller's data is never reordered
        input_seq, target_seq = prepare_sequences(
            inputs, targets, owned=capabilities.shuffle, paired=paired
        )

        plan.weight_init.initialize(input_seq)

        trainer = model.trainer_factory(model)

        if len(input_seq) % batch_size != 0:
            logger.warning(
                "The number of samples (%d) is not divisible by the batch size (%d); "
                "the last batch of every epoch is shorter, which may bias the statistics",
                len(input_seq),
                batch_size,
            )

        last_error = 0.0
        for epoch in range(max_epochs):
            plan.shuffle(input_seq, target_seq)

            stats = EpochStatistics()
            for input_batch, target_batch in iter_batches(input_seq, target_seq, batch_size):
                stats.record_batch(input_batch.size)
                trainer.train_batch(input_batch, target_batch, stats)
                plan.free_energy.accumulate(input_batch, stats)

            stats.finalize()

            plan.momentum.epoch_end(epoch)

            if watcher is not None:
                watcher.epoch_end(epoch, stats, model)

            last_error = stats.reconstruction_error

        if watcher is not None:
            watcher.training_end(model)

        return float(last_error)
