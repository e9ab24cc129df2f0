import logging
from logging import Logger

import numpy

from angle_units.angle import AngleLike, Radians, as_radians

logger: Logger = logging.getLogger(__name__)


def _forward(function: numpy.ufunc, angle: AngleLike):
    # infinite angles result in nan instead of a floating point warning
    with numpy.errstate(invalid='ignore'):
        return function(as_radians(angle).value)


def sin(angle: AngleLike):
    return _forward(numpy.sin, angle)


def cos(angle: AngleLike):
    return _forward(numpy.cos, angle)


def tan(angle: AngleLike):
    return _forward(numpy.tan, angle)


def _inverse(function: numpy.ufunc, *ratios) -> Radians:
    # out of domain results are nan instead of a floating point warning
    with numpy.errstate(invalid='ignore'):
        value = function(*ratios)
    if numpy.any(numpy.isnan(value)):
        logger.debug('%s(%s) is not a number', function.__name__,
                     ', '.join(map(repr, ratios)))
    return Radians(value)


def asin(ratio) -> Radians:
    return _inverse(numpy.arcsin, ratio)


def acos(ratio) -> Radians:
    return _inverse(numpy.arccos, ratio)


def atan(ratio) -> Radians:
    return _inverse(numpy.arctan, ratio)


def atan2(y, x) -> Radians:
    """Angle between the positive x-axis and the point (x, y)."""
    return _inverse(numpy.arctan2, y, x)
