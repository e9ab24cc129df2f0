import numpy

from angle_units.angle import AngleLike
from angle_units.trigonometry import cos, sin


def rotate(vector, angle: AngleLike) -> numpy.ndarray:
    """Rotate a vector counterclockwise by the given angle.

    :param vector: Point ``[x, y]`` or an array of points of shape ``(n, 2)``.
    :param angle: Single angle. Bare numbers are interpreted as degrees.
    :return: Rotated vector(s) in the same shape as ``vector``.
    """
    c = cos(angle)
    s = sin(angle)
    rotation = numpy.array([[c, -s],
                            [s, c]])
    return numpy.asarray(vector, dtype=float) @ rotation.T
