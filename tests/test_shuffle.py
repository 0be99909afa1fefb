"""
Test the shuffle disciplines
"""
import pytest

from rbm_engine.training import shuffle
from rbm_engine.training.capabilities import Capabilities
from rbm_engine.training.shuffle import (
    NoShuffle,
    PairedShuffle,
    PlainShuffle,
    get_generator,
    seed_generator,
    select_shuffle,
)


def test_paired_shuffle_keeps_correspondence():
    inputs = list(range(500))
    targets = [f"t{i}" for i in inputs]
    paired = PairedShuffle()
    for _ in range(10):
        paired(inputs, targets)
        assert all(t == f"t{i}" for i, t in zip(inputs, targets))
    assert sorted(inputs) == list(range(500))


def test_paired_shuffle_rejects_length_mismatch():
    with pytest.raises(ValueError):
        PairedShuffle()([1, 2, 3], [1, 2])


def test_plain_shuffle_is_a_permutation():
    data = list(range(200))
    PlainShuffle()(data, data)
    assert sorted(data) == list(range(200))
    assert data != list(range(200))


def test_no_shuffle_keeps_order():
    data = list(range(50))
    NoShuffle()(data, data)
    assert data == list(range(50))


def test_generator_is_reused():
    assert get_generator() is get_generator()


def test_seeded_generator_is_reproducible():
    first, second = list(range(100)), list(range(100))
    seed_generator(7)
    PlainShuffle()(first, first)
    seed_generator(7)
    PlainShuffle()(second, second)
    assert first == second
    seed_generator(None)


def test_generator_created_lazily(monkeypatch):
    monkeypatch.setattr(shuffle, "_generator", None)
    generator = get_generator()
    assert generator is not None
    assert shuffle._generator is generator


@pytest.mark.parametrize(
    "capabilities, paired, expected",
    [
        (Capabilities(), False, NoShuffle),
        (Capabilities(), True, NoShuffle),
        (Capabilities(shuffle=True), False, PlainShuffle),
        (Capabilities(shuffle=True), True, PairedShuffle),
    ],
)
def test_select_shuffle(capabilities, paired, expected):
    assert isinstance(select_shuffle(capabilities, paired), expected)
