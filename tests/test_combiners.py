"""Tests for n-ary combiners and their folded bounds."""

import pytest

from terranoise import Add, Builder, Constant, Max, Min, Multiply, NoiseConfigError


def test_add_constants():
    total = Add(Constant(1.0), Constant(2.0), Constant(3.5))
    assert total.evaluate(0.0, 0.0) == 6.5
    assert (total.min_value(), total.max_value()) == (6.5, 6.5)


def test_min_max_constants():
    values = [Constant(4.0), Constant(-1.0), Constant(2.0)]
    assert Min(*values).evaluate(7.0, 7.0) == -1.0
    assert Max(*values).evaluate(7.0, 7.0) == 4.0


def test_min_max_fold_bounds():
    """Min folds mins and maxes with min, Max with max."""
    a = Constant(0.0).map(0.0, 1.0)
    b = Constant(0.0).map(2.0, 5.0)
    assert (Min(a, b).min_value(), Min(a, b).max_value()) == (0.0, 1.0)
    assert (Max(a, b).min_value(), Max(a, b).max_value()) == (2.0, 5.0)

    c = Constant(0.0).map(-3.0, 4.0)
    assert (Min(a, b, c).min_value(), Min(a, b, c).max_value()) == (-3.0, 1.0)
    assert (Max(a, b, c).min_value(), Max(a, b, c).max_value()) == (2.0, 5.0)


def test_add_bounds_sum_children():
    total = Add(Constant(0.0).map(-1.0, 2.0), Constant(0.0).map(0.5, 3.0))
    assert (total.min_value(), total.max_value()) == (-0.5, 5.0)


def test_multiply_bounds_with_negative_ranges():
    """Interval multiplication: [-2, 3] * [-4, 1] spans [-12, 8]."""
    a = Constant(0.0).map(-2.0, 3.0)
    b = Constant(0.0).map(-4.0, 1.0)
    product = Multiply(a, b)
    assert product.min_value() == -12.0
    assert product.max_value() == 8.0


def test_multiply_negative_constants():
    product = Multiply(Constant(-2.0), Constant(-3.0))
    assert product.evaluate(0.0, 0.0) == 6.0
    assert (product.min_value(), product.max_value()) == (6.0, 6.0)


def test_single_module_combiner_is_identity():
    perlin = Builder(seed=4).perlin()
    wrapped = Add(perlin)
    assert wrapped.evaluate(10.0, 20.0) == perlin.evaluate(10.0, 20.0)
    assert (wrapped.min_value(), wrapped.max_value()) == (0.0, 1.0)


@pytest.mark.parametrize("combiner", [Add, Multiply, Min, Max])
def test_empty_combiner_raises(combiner):
    with pytest.raises(NoiseConfigError):
        combiner()


@pytest.mark.parametrize("combiner", [Add, Multiply, Min, Max])
def test_combined_noise_within_bounds(combiner):
    builder = Builder(frequency=0.07)
    children = [builder.perlin().scale(2.0).bias(-1.0), builder.copy(seed=9).ridge(), builder.cell()]
    module = combiner(*children)
    for x in range(-50, 50, 7):
        for y in range(-50, 50, 11):
            assert module.min_value() <= module.evaluate(x, y) <= module.max_value()


def test_fluent_combiners():
    a, b = Constant(2.0), Constant(5.0)
    assert a.add(b).evaluate(0, 0) == 7.0
    assert a.mult(b).evaluate(0, 0) == 10.0
    assert a.min(b).evaluate(0, 0) == 2.0
    assert a.max(b).evaluate(0, 0) == 5.0
