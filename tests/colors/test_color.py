import warnings

import numpy as np
import pytest
from boundednumbers import BoundType

from chromaformat import Color


def test_rgb_input_gets_opaque_alpha():
    color = Color((0.5, 0.25, 0.75))
    assert color.value == (0.5, 0.25, 0.75, 1.0)
    assert color.rgb == (0.5, 0.25, 0.75)
    assert color.is_opaque


def test_channel_properties():
    color = Color((0.1, 0.2, 0.3, 0.4))
    assert color.red == 0.1
    assert color.green == 0.2
    assert color.blue == 0.3
    assert color.alpha == 0.4
    assert not color.is_opaque


def test_accepts_lists_arrays_and_ints():
    assert Color([1, 0, 0]) == Color((1.0, 0.0, 0.0, 1.0))
    assert Color(np.array([0.5, 0.5, 0.5, 0.5], dtype=np.float32)).value == (0.5, 0.5, 0.5, 0.5)
    assert all(isinstance(c, float) for c in Color([1, 0, 0]).value)


def test_copy_from_color():
    source = Color((0.2, 0.4, 0.6, 0.8))
    assert Color(source) == source


def test_immutable():
    color = Color((0.5, 0.5, 0.5))
    with pytest.raises(AttributeError):
        color._value = (0.0, 0.0, 0.0, 0.0)
    with pytest.raises(AttributeError):
        color.red = 1.0
    with pytest.raises(AttributeError):
        color.extra = 1


def test_equality_and_hash():
    a = Color((0.1, 0.2, 0.3))
    b = Color.from_channels(0.1, 0.2, 0.3)
    assert a == b
    assert len({a, b}) == 1
    assert a != Color((0.1, 0.2, 0.3, 0.5))
    assert a != (0.1, 0.2, 0.3, 1.0)


def test_from_bytes():
    assert Color.from_bytes(255, 0, 0) == Color((1.0, 0.0, 0.0, 1.0))
    half = Color.from_bytes(0, 0, 0, 128)
    assert abs(half.alpha - 128 / 255) < 1e-12


def test_random_is_reproducible_with_seed():
    first = Color.random(np.random.default_rng(3))
    second = Color.random(np.random.default_rng(3))
    assert first == second
    assert all(0.0 <= c < 1.0 for c in first.value)


def test_random_without_rng():
    color = Color.random()
    assert all(0.0 <= c < 1.0 for c in color.value)


def test_with_alpha_returns_new_instance():
    color = Color((0.5, 0.25, 0.75, 0.8))
    result = color.with_alpha(0.2)
    assert result.value == (0.5, 0.25, 0.75, 0.2)
    assert color.alpha == 0.8


def test_out_of_range_is_clamped_by_default():
    color = Color((1.5, -0.2, 0.5, 2.0))
    assert color.value == (1.0, 0.0, 0.5, 1.0)


def test_ignore_keeps_values_and_warns():
    with pytest.warns(UserWarning):
        color = Color((1.2, 0.5, -0.2), bound_type=BoundType.IGNORE)
    assert color.value == (1.2, 0.5, -0.2, 1.0)


def test_ignore_in_range_does_not_warn():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        color = Color((0.2, 0.4, 0.6), bound_type=BoundType.IGNORE)
    assert color.rgb == (0.2, 0.4, 0.6)


@pytest.mark.parametrize("value", [(0.1, 0.2), (0.1, 0.2, 0.3, 0.4, 0.5), np.zeros((2, 3)), ()])
def test_wrong_channel_count(value):
    with pytest.raises(ValueError):
        Color(value)


@pytest.mark.parametrize("value", [(float("nan"), 0.0, 0.0), (0.0, float("inf"), 0.0)])
def test_non_finite_channels(value):
    with pytest.raises(ValueError):
        Color(value)


def test_non_numeric_input():
    with pytest.raises(TypeError):
        Color(("a", "b", "c"))
    with pytest.raises(TypeError):
        Color(0.5)
    with pytest.raises(TypeError):
        Color(None)


def test_repr():
    assert repr(Color((1.0, 0.0, 0.0))) == "Color(red=1.0, green=0.0, blue=0.0, alpha=1.0)"


def test_with_alpha_keeps_bound_type():
    with pytest.warns(UserWarning):
        color = Color((1.2, 0.5, -0.2), bound_type=BoundType.IGNORE)
    with pytest.warns(UserWarning):
        result = color.with_alpha(0.5)
    assert result.value == (1.2, 0.5, -0.2, 0.5)
    assert result.bound_type is BoundType.IGNORE


def test_copy_keeps_bound_type():
    with pytest.warns(UserWarning):
        color = Color((1.2, 0.5, -0.2), bound_type=BoundType.IGNORE)
    with pytest.warns(UserWarning):
        copied = Color(color)
    assert copied.value == color.value
    assert copied.bound_type is BoundType.IGNORE

    # an explicit bound type still wins
    clamped = Color(color, bound_type=BoundType.CLAMP)
    assert clamped.value == (1.0, 0.5, 0.0, 1.0)
    assert clamped.bound_type is BoundType.CLAMP


def test_default_bound_type_is_clamp():
    assert Color((0.1, 0.2, 0.3)).bound_type is BoundType.CLAMP


def test_random_uses_given_rng(monkeypatch):
    def fail():
        raise AssertionError("default_rng should not be created when rng is given")

    monkeypatch.setattr(np.random, "default_rng", fail)
    rng = np.random.Generator(np.random.PCG64(5))
    expected = np.random.Generator(np.random.PCG64(5)).random(4).tolist()
    assert list(Color.random(rng).value) == expected
