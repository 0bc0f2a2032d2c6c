import numpy as np
from chromaformat.conversions import unit_rgb_to_hsl, np_unit_rgb_to_hsl
from samples import samples_rgb_hsl


def test_unit_rgb_to_hsl():
    for (r, g, b), (h_exp, s_exp, l_exp) in samples_rgb_hsl.items():
        h_out, s_out, l_out = unit_rgb_to_hsl(r, g, b)

        assert abs(h_out - h_exp) < 1e-9
        assert abs(s_out - s_exp) < 1e-9
        assert abs(l_out - l_exp) < 1e-9


def test_unit_rgb_to_hsl_numpy():
    the_matrix = np.array(list(samples_rgb_hsl.keys()))
    expected = np.array(list(samples_rgb_hsl.values()))
    hsl = np_unit_rgb_to_hsl(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])
    assert hsl.shape == expected.shape
    assert np.allclose(hsl, expected, atol=1e-9)


def test_gray_has_no_saturation():
    _, s, l = unit_rgb_to_hsl(0.5, 0.5, 0.5)
    assert s == 0.0
    assert l == 0.5


def test_extrapolated_lightness_does_not_divide_by_zero():
    # L == 1 with delta != 0 only happens outside [0, 1]
    h, s, l = unit_rgb_to_hsl(1.5, 0.5, 0.5)
    assert s == 0.0
    assert l == 1.0
    hsl = np_unit_rgb_to_hsl(1.5, 0.5, 0.5)
    assert hsl[1] == 0.0
