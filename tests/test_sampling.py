# python -m pytest -q tests/test_sampling.py
"""
Unit tests for the random source and level-size sampling.
"""
import numpy as np
import pytest
from levelgraphs.core.rng import make_rng, bernoulli, draw_categorical, UNSPECIFIED_SEED
from levelgraphs.core.sampling import (LEVEL_SIZE_DISTRIBUTION, sample_level_sizes,
                                       example_weight_table, level_schedule)

# 1) Same seed, same stream
def test_make_rng_reproducible():
    a, b = make_rng(7), make_rng(7)
    assert [a.random() for _ in range(5)] == [b.random() for _ in range(5)]

def test_make_rng_unspecified_seed():
    rng = make_rng(UNSPECIFIED_SEED)
    assert isinstance(rng, np.random.Generator)
    assert 0.0 <= rng.random() < 1.0

# 2) Bernoulli extremes
def test_bernoulli_extremes():
    rng = make_rng(1)
    assert all(bernoulli(rng, 1.0) for _ in range(200))
    assert not any(bernoulli(rng, 0.0) for _ in range(200))

# 3) Categorical draws skip zero weights
def test_draw_categorical_zero_weight_never_drawn():
    rng = make_rng(3)
    draws = {draw_categorical(rng, ["a", "b", "c"], [0.0, 1.0, 0.0]) for _ in range(500)}
    assert draws == {"b"}

def test_draw_categorical_needs_positive_weight():
    with pytest.raises(ValueError):
        draw_categorical(make_rng(0), ["a"], [0.0])

# 4) Level sizes
def test_sample_level_sizes_range_and_length():
    sizes = sample_level_sizes(make_rng(11), 50)
    assert len(sizes) == 50
    assert all(1 <= s <= 6 for s in sizes)

def test_sample_level_sizes_zero_levels():
    assert sample_level_sizes(make_rng(11), 0) == []

def test_sample_level_sizes_follow_distribution():
    sizes = sample_level_sizes(make_rng(2024), 20000)
    for size, weight in LEVEL_SIZE_DISTRIBUTION:
        observed = sizes.count(size) / len(sizes)
        assert abs(observed - weight) < 0.02, (size, observed, weight)

# 5) Weight table
def test_example_weight_table():
    table = example_weight_table(4)
    assert len(table) == 6
    assert table[(1, 2)] == 0.5
    assert table[(1, 4)] == 0.125
    assert (2, 1) not in table
    assert example_weight_table(1) == {}

# 6) Level schedule cycles 1..levels
def test_level_schedule():
    assert level_schedule(3, 7) == [1, 2, 3, 1, 2, 3, 1]
    assert level_schedule(5, 2) == [1, 2]
    assert level_schedule(0, 4) == []
    assert level_schedule(4, 0) == []
