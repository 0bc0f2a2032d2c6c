import numpy as np
from chromaformat.conversions import unit_rgb_to_hue, np_unit_rgb_to_hue, format_hue, np_format_hue
from samples import samples_rgb_hsv


def test_unit_rgb_to_hue():
    for (r, g, b), (h_exp, _, _) in samples_rgb_hsv.items():
        assert abs(unit_rgb_to_hue(r, g, b) - h_exp) < 1e-9


def test_achromatic_hue_is_zero():
    assert unit_rgb_to_hue(0.3, 0.3, 0.3) == 0.0
    assert unit_rgb_to_hue(0.0, 0.0, 0.0) == 0.0


def test_negative_red_branch_wraps():
    # (g - b) / delta is negative: -0.005 * 60 = -0.3 -> 359.7
    hue = unit_rgb_to_hue(1.0, 0.0, 0.005)
    assert abs(hue - 359.7) < 1e-9


def test_red_branch_wins_ties():
    # yellow: red and green are both the maximum
    assert unit_rgb_to_hue(1.0, 1.0, 0.0) == 60.0
    assert np_unit_rgb_to_hue(1.0, 1.0, 0.0) == 60.0


def test_hue_range_sweep():
    rng = np.random.default_rng(42)
    rgb = rng.random((1000, 3))
    for r, g, b in rgb.tolist():
        hue = unit_rgb_to_hue(r, g, b)
        assert 0.0 <= hue < 360.0


def test_np_unit_rgb_to_hue_matches_scalar():
    rng = np.random.default_rng(0)
    rgb = rng.random((200, 3))
    expected = [unit_rgb_to_hue(r, g, b) for r, g, b in rgb.tolist()]
    result = np_unit_rgb_to_hue(rgb[..., 0], rgb[..., 1], rgb[..., 2])
    assert np.allclose(result, expected, atol=1e-12)


def test_format_hue_never_prints_360():
    assert format_hue(359.7) == 0
    assert format_hue(359.4) == 359
    assert format_hue(0.0) == 0
    assert np_format_hue(np.array([359.7, 359.4, 180.5])).tolist() == [0, 359, 181]
