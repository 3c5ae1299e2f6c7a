import math

import pytest

from rendermath.spectrum import Spectrum
from rendermath.vec3 import Vec3


def test_default_is_black():
    assert Spectrum() == Spectrum(0.0, 0.0, 0.0)


def test_single_value_fills():
    s = Spectrum(0.5)
    assert (s.r, s.g, s.b) == (0.5, 0.5, 0.5)


def test_three_channels_required_together():
    with pytest.raises(TypeError):
        Spectrum(1.0, 2.0)


def test_add_sub_round_trip():
    a = Spectrum(1.0, 2.0, 3.0)
    b = Spectrum(0.25, -4.0, 8.0)
    assert (a + b) - b == a


def test_scalar_ops_commute():
    s = Spectrum(1.0, 2.0, 3.0)
    assert 2.0 * s == s * 2.0
    assert 2.0 + s == s + 2.0
    assert (s / 4.0) * 4.0 == s


def test_inplace_add_mutates():
    s = Spectrum(1.0, 2.0, 3.0)
    alias = s
    s += Spectrum(1.0)
    assert alias is s
    assert s == Spectrum(1.0, 2.0, 3.0) + Spectrum(1.0)


def test_inplace_mul():
    s = Spectrum(1.0, 2.0, 3.0)
    s *= Spectrum(2.0, 0.5, 1.0)
    assert s == Spectrum(1.0, 2.0, 3.0) * Spectrum(2.0, 0.5, 1.0)


def test_gamma_round_trip():
    s = Spectrum(0.2, 0.5, 0.9)
    s.make_srgb()
    s.make_linear()
    assert list(s) == pytest.approx([0.2, 0.5, 0.9])


def test_make_linear_of_negative_is_invalid():
    s = Spectrum(-0.5, 0.5, 0.5)
    s.make_linear()
    assert math.isnan(s.r)
    assert not s.valid()


def test_luma_of_white():
    assert Spectrum(1.0).luma() == pytest.approx(1.0)


@pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan])
def test_valid_rejects_non_finite(value):
    assert not Spectrum(0.0, value, 0.0).valid()
    assert Spectrum(0.0, 1.0, 0.0).valid()


def test_direction():
    assert Spectrum.direction(Vec3(0.0, 0.0, -5.0)) == Spectrum(0.0, 0.0, 1.0)


def test_to_vec():
    assert Spectrum(1.0, 2.0, 3.0).to_vec() == Vec3(1.0, 2.0, 3.0)


def test_str():
    assert str(Spectrum(1.0, 2.0, 3.0)) == "Spectrum{1,2,3}"