import math
import sys
from typing import TypeVar

from typing_extensions import Protocol

# The following factors are used to convert between degrees and radians.
# They are applied by a single multiplication (like math.radians and
# math.degrees), so that e.g. 180 degrees convert to exactly math.pi.
radian_per_degree = math.pi / 180
degree_per_radian = 180 / math.pi

# Default tolerances of approximate angle comparisons.
default_relative_tolerance = 1e-9
default_absolute_tolerance = 1e-12


class SupportsAngleArithmetic(Protocol):
    """Numeric value that can be stored in an angle.

    Python numbers, numpy floating point scalars and numpy arrays
    support all of these operations (also in combination with a
    Python float like the conversion factors above).
    """

    def __add__(self, other): ...

    def __sub__(self, other): ...

    def __mul__(self, other): ...

    def __truediv__(self, other): ...

    def __neg__(self): ...


N = TypeVar('N', bound=SupportsAngleArithmetic)


def degrees_to_radians(degrees: N) -> N:
    return degrees * radian_per_degree


def radians_to_degrees(radians: N) -> N:
    return radians * degree_per_radian


def inexact_eq(lhs: float, rhs: float) -> bool:
    """Approximate equality comparison for floating point numbers."""
    return abs(float(lhs) - float(rhs)) < sys.float_info.epsilon
