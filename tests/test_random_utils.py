"""Tests for shared NumPy RNG helpers."""

from __future__ import annotations

from collections.abc import Iterator

import numpy as np
import pytest

import album_thumbnail.random_utils as at_random_utils


@pytest.fixture(autouse=True)
def restore_state() -> Iterator[None]:
    """Restore RNG state after each test."""
    prev_seed = at_random_utils._STATE.seed  # type: ignore[attr-defined]
    prev_gen = at_random_utils._STATE.generator  # type: ignore[attr-defined]
    yield
    at_random_utils._STATE.seed = prev_seed  # type: ignore[attr-defined]
    at_random_utils._STATE.generator = prev_gen  # type: ignore[attr-defined]


def test_seed_numpy_rng_tracks_state() -> None:
    """Seeding should cache the generator and remember the seed."""
    gen = at_random_utils.seed_numpy_rng(321)
    assert at_random_utils._STATE.seed == 321  # type: ignore[attr-defined]  # noqa: PLR2004
    assert at_random_utils.get_numpy_rng() is gen

    expected = np.random.default_rng(321).integers(0, 10, size=4)
    np.testing.assert_array_equal(gen.integers(0, 10, size=4), expected)


def test_get_numpy_rng_lazy_initialization() -> None:
    """get_numpy_rng should lazily create a generator when unseeded."""
    at_random_utils._STATE.seed = None  # type: ignore[attr-defined]
    at_random_utils._STATE.generator = None  # type: ignore[attr-defined]

    gen = at_random_utils.get_numpy_rng()

    assert isinstance(gen, np.random.Generator)
    assert at_random_utils.get_numpy_rng() is gen


def test_coin_flip_is_reproducible_with_seed() -> None:
    at_random_utils.seed_numpy_rng(5)
    first = [at_random_utils.coin_flip() for _ in range(16)]
    at_random_utils.seed_numpy_rng(5)
    second = [at_random_utils.coin_flip() for _ in range(16)]
    assert first == second
    assert all(isinstance(v, bool) for v in first)


def test_coin_flip_produces_both_outcomes() -> None:
    at_random_utils.seed_numpy_rng(0)
    outcomes = {at_random_utils.coin_flip() for _ in range(64)}
    assert outcomes == {True, False}
