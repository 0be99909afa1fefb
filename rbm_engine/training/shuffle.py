"""Shuffle disciplines applied to the training sequences before each epoch."""

from __future__ import annotations

from typing import Any, MutableSequence, Optional

import numpy as np

from .capabilities import Capabilities

_generator: Optional[np.random.Generator] = None


def get_generator() -> np.random.Generator:
    """Return the process-wide generator, seeding it from OS entropy on first use."""
    global _generator
    if _generator is None:
        _generator = np.random.default_rng()
    return _generator


def seed_generator(seed: Optional[int]) -> None:
    """Replace the process-wide generator; ``None`` reseeds from OS entropy."""
    global _generator
    _generator = np.random.default_rng(seed)


def _permute(sequence: MutableSequence[Any], permutation: np.ndarray) -> None:
    sequence[:] = [sequence[i] for i in permutation]


class NoShuffle:
    """Keep the original sample order for every epoch."""

    def __call__(self, inputs: MutableSequence[Any], targets: MutableSequence[Any]) -> None:
        return None


class PlainShuffle:
    """Permute the input sequence in place.

    The target sequence is the same object in plain mode and is not touched
    separately.
    """

    def __call__(self, inputs: MutableSequence[Any], targets: MutableSequence[Any]) -> None:
        _permute(inputs, get_generator().permutation(len(inputs)))


class PairedShuffle:
    """Apply one permutation to both sequences so ``inputs[i]`` stays paired with ``targets[i]``."""

    def __call__(self, inputs: MutableSequence[Any], targets: MutableSequence[Any]) -> None:
        if len(inputs) != len(targets):
            raise ValueError(
                f"Cannot shuffle sequences of different lengths ({len(inputs)} != {len(targets)})"
            )
        permutation = get_generator().permutation(len(inputs))
        _permute(inputs, permutation)
        _permute(targets, permutation)


def select_shuffle(capabilities: Capabilities, paired: bool):
    if not capabilities.shuffle:
        return NoShuffle()
    return PairedShuffle() if paired else PlainShuffle()
