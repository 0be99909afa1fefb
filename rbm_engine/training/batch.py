"""Batches and the sample sequences they are cut from."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Sequence, Tuple

import numpy as np
import torch


@dataclass(frozen=True)
class Batch:
    """Immutable view over a contiguous run of samples for one training step."""

    samples: Tuple[Any, ...]

    @property
    def size(self) -> int:
        return len(self.samples)

    def __len__(self) -> int:
        return len(self.samples)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.samples)

    def __getitem__(self, index: int) -> Any:
        return self.samples[index]

    def as_tensor(self, dtype: torch.dtype = torch.float32, device: Any = None) -> torch.Tensor:
        """Stack the samples into a ``(size, n_features)`` tensor."""
        return torch.stack([torch.as_tensor(s, dtype=dtype, device=device) for s in self.samples])

    def as_array(self, dtype: Any = np.float64) -> np.ndarray:
        return np.stack([np.asarray(s, dtype=dtype) for s in self.samples])


def make_batch(sequence: Sequence[Any], start: int, stop: int) -> Batch:
    return Batch(tuple(sequence[i] for i in range(start, stop)))


def prepare_sequences(
    inputs: Sequence[Any],
    targets: Sequence[Any],
    *,
    owned: bool,
    paired: bool,
) -> Tuple[Sequence[Any], Sequence[Any]]:
    """Return the sequences the epoch loop walks over.

    With ``owned`` the samples are copied into fresh lists that may be
    shuffled without touching the caller's data; otherwise the caller's
    sequences are used as they are. Outside paired mode the target sequence
    is the input sequence itself, so any permutation keeps them aligned.
    """
    if not owned:
        return inputs, (targets if paired else inputs)

    input_copy = list(inputs)
    if not paired:
        return input_copy, input_copy
    return input_copy, list(targets)


def iter_batches(
    inputs: Sequence[Any],
    targets: Sequence[Any],
    batch_size: int,
) -> Iterator[Tuple[Batch, Batch]]:
    """Yield aligned input/target batches of ``batch_size`` samples.

    The final pair is shorter when the sample count is not a multiple of the
    batch size.
    """
    total = len(inputs)
    for start in range(0, total, batch_size):
        stop = min(start + batch_size, total)
        yield make_batch(inputs, start, stop), make_batch(targets, start, stop)
