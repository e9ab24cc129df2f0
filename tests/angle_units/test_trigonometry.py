import logging
import math
import warnings

import numpy
import pytest

from angle_units.angle import Degrees, Radians
from angle_units.trigonometry import sin, cos, tan, asin, acos, atan, atan2


def test_sin():
    assert sin(Degrees(90)) == pytest.approx(1.0)
    assert sin(Radians(math.pi / 2)) == pytest.approx(1.0)
    assert sin(Degrees(30)) == pytest.approx(0.5)
    assert sin(Degrees(0)) == 0


def test_cos():
    assert cos(Degrees(180)) == pytest.approx(-1.0)
    assert cos(Radians(0)) == 1
    assert cos(Degrees(60)) == pytest.approx(0.5)


def test_tan():
    assert tan(Degrees(45)) == pytest.approx(1.0)
    assert tan(Radians(-math.pi / 4)) == pytest.approx(-1.0)


@pytest.mark.parametrize('function', [sin, cos, tan])
@pytest.mark.parametrize('value', [-270, -45, 0, 30, 90, 123.4, 720])
def test_bare_numbers_are_degrees(function, value):
    assert function(value) == function(Degrees(value))


def test_forward_functions_return_plain_numbers():
    assert not isinstance(sin(Degrees(30)), (Degrees, Radians))
    assert isinstance(float(cos(Radians(1))), float)


def test_forward_functions_with_arrays():
    ratios = sin(Degrees(numpy.array([0, 90, 270])))
    assert ratios == pytest.approx([0, 1, -1])


def test_asin():
    assert asin(1.0) == Radians(math.pi / 2)
    assert asin(1.0).to_degrees().approx_eq(Degrees(90))
    assert asin(-0.5).to_degrees().approx_eq(Degrees(-30))


def test_acos():
    assert acos(-1.0) == Radians(math.pi)
    assert acos(0.5).to_degrees().approx_eq(Degrees(60))


def test_atan():
    assert atan(1.0).approx_eq(Degrees(45))
    assert atan(math.inf) == Radians(math.pi / 2)


def test_atan2():
    assert atan2(1.0, 0.0) == Radians(math.pi / 2)
    assert atan2(0.0, -1.0) == Radians(math.pi)
    assert atan2(-1.0, -1.0).approx_eq(Degrees(-135))


@pytest.mark.parametrize('function', [asin, acos])
def test_out_of_domain_is_nan(function):
    angle = function(2.0)
    assert isinstance(angle, Radians)
    assert math.isnan(angle.value)


def test_out_of_domain_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger='angle_units.trigonometry'):
        asin(1.5)
    assert 'arcsin(1.5) is not a number' in caplog.text


def test_out_of_domain_log_lists_all_arguments(caplog):
    with caplog.at_level(logging.DEBUG, logger='angle_units.trigonometry'):
        atan2(math.nan, 1.0)
    assert 'arctan2(nan, 1.0) is not a number' in caplog.text


def test_in_domain_is_not_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger='angle_units.trigonometry'):
        asin(0.5)
    assert caplog.text == ''


def test_nan_propagates():
    with warnings.catch_warnings():
        warnings.simplefilter('error')
        assert math.isnan(sin(Degrees(math.nan)))
        assert math.isnan(sin(Radians(math.inf)))
        assert math.isnan(cos(Degrees(-math.inf)))
        assert math.isnan(tan(Radians(math.inf)))
        assert math.isnan(atan(math.nan).value)


def test_out_of_domain_does_not_warn():
    with warnings.catch_warnings():
        warnings.simplefilter('error')
        assert math.isnan(asin(-3.0).value)
        assert math.isnan(acos(1.5).value)


def test_inverse_of_forward_function():
    for degrees in [-80, -10, 0, 25, 89]:
        assert asin(sin(degrees)).approx_eq(Degrees(degrees))
