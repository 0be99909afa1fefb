"""Fake models used across the engine tests."""

from __future__ import annotations

import pytest

from rbm_engine.training import Capabilities, MomentumState


class RecordingBatchTrainer:
    """Per-batch trainer that records what it sees instead of updating weights.

    Adds the batch size to the reconstruction error and 1.0 to the sparsity so
    averages are easy to predict.
    """

    def __init__(self, model):
        self.model = model
        model.trainers_built += 1

    def train_batch(self, input_batch, target_batch, stats):
        model = self.model
        model.batches.append((tuple(input_batch), tuple(target_batch)))
        capabilities = getattr(model, "capabilities", None)
        if capabilities is not None and capabilities.momentum:
            model.momentum_per_batch.append(model.momentum.current)
        stats.reconstruction_error += float(input_batch.size)
        stats.sparsity += 1.0


class FakeRbm:
    trainer_factory = RecordingBatchTrainer

    def __init__(self, batch_size=10, capabilities=None, momentum=None):
        self.batch_size = batch_size
        self.capabilities = capabilities or Capabilities()
        self.momentum = momentum
        self.batches = []
        self.momentum_per_batch = []
        self.init_calls = []
        self.free_energy_calls = 0
        self.trainers_built = 0

    def init_weights(self, inputs):
        self.init_calls.append((inputs, len(self.batches)))

    def free_energy(self, sample):
        self.free_energy_calls += 1
        return 1.0

    def epochs(self, batches_per_epoch):
        """Split the recorded batches into per-epoch lists of input samples."""
        flat = [b[0] for b in self.batches]
        return [
            [s for batch in flat[i:i + batches_per_epoch] for s in batch]
            for i in range(0, len(flat), batches_per_epoch)
        ]


class BareModel:
    """Model declaring no optional capability at all."""

    trainer_factory = RecordingBatchTrainer

    def __init__(self, batch_size=10):
        self.batch_size = batch_size
        self.capabilities = Capabilities()
        self.batches = []
        self.trainers_built = 0


@pytest.fixture
def samples():
    return list(range(100))


@pytest.fixture
def make_model():
    def _make(batch_size=10, momentum_state=None, **flags):
        return FakeRbm(batch_size=batch_size, capabilities=Capabilities(**flags), momentum=momentum_state)

    return _make


@pytest.fixture
def momentum_state():
    return MomentumState(initial=0.5, final=0.9, switch_epoch=3, current=0.0)


@pytest.fixture
def bare_model():
    return BareModel()
