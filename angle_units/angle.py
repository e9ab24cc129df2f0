from __future__ import annotations

import numbers
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import ClassVar, Generic, Union

import numpy

from angle_units.units import N, default_absolute_tolerance, \
    default_relative_tolerance, degrees_to_radians, radians_to_degrees


class UnitMismatchError(TypeError):
    def __init__(self, left: Angle, right: Angle) -> None:
        self.message = (f"Can not combine {left.unit_name} with"
                        f" {right.unit_name}. Convert one of the angles"
                        " with to_degrees() or to_radians() first.")
        super().__init__(self.message)


@dataclass(frozen=True, eq=False)
class Angle(ABC, Generic[N]):
    """Angle value tagged with its unit.

    Angles of the same unit can be added, subtracted and compared.
    Mixing units raises a :class:`UnitMismatchError`, i.e. the caller
    has to convert explicitly with :meth:`to_degrees` or
    :meth:`to_radians` first. Angles have no ``__float__``, so an angle
    can not be passed by accident to functions like
    :func:`math.sin` that expect radians.
    """

    value: N

    unit_name: ClassVar[str] = 'angle'
    unit_symbol: ClassVar[str] = ''

    # let numpy defer to the reflected operators, e.g. numpy.float32 * angle
    __array_ufunc__ = None

    @abstractmethod
    def to_degrees(self) -> Degrees[N]:
        raise NotImplementedError

    @abstractmethod
    def to_radians(self) -> Radians[N]:
        raise NotImplementedError

    @abstractmethod
    def _in_own_unit(self, other: Angle) -> Angle[N]:
        raise NotImplementedError

    def _is_same_unit(self, other: object) -> bool:
        return isinstance(other, Angle) and other.unit_name == self.unit_name

    def _same_unit_value(self, other: object):
        if self._is_same_unit(other):
            return other.value
        if isinstance(other, Angle):
            raise UnitMismatchError(self, other)
        return NotImplemented

    def approx_eq(self, other: AngleLike,
                  rel_tol: float = default_relative_tolerance,
                  abs_tol: float = default_absolute_tolerance) -> bool:
        """Compare with another angle (of either unit) or a bare number
        in the unit of this angle.
        """
        if isinstance(other, Angle):
            other_value = self._in_own_unit(other).value
        else:
            other_value = _bare_number(other)
        return bool(numpy.all(numpy.isclose(
            self.value, other_value, rtol=rel_tol, atol=abs_tol)))

    def __add__(self, other):
        value = self._same_unit_value(other)
        if value is NotImplemented:
            return NotImplemented
        return replace(self, value=self.value + value)

    def __sub__(self, other):
        value = self._same_unit_value(other)
        if value is NotImplemented:
            return NotImplemented
        return replace(self, value=self.value - value)

    def __mul__(self, factor):
        if not isinstance(factor, (numbers.Real, numpy.ndarray)):
            return NotImplemented
        return replace(self, value=self.value * factor)

    def __rmul__(self, factor):
        return self.__mul__(factor)

    def __truediv__(self, other):
        if isinstance(other, Angle):
            # ratio of two angles of the same unit
            return self.value / self._same_unit_value(other)
        if not isinstance(other, (numbers.Real, numpy.ndarray)):
            return NotImplemented
        return replace(self, value=self.value / other)

    def __neg__(self):
        return replace(self, value=-self.value)

    def __pos__(self):
        return self

    def __abs__(self):
        return replace(self, value=abs(self.value))

    def __eq__(self, other):
        if self._is_same_unit(other):
            return self.value == other.value
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.unit_name, self.value))

    def __lt__(self, other):
        value = self._same_unit_value(other)
        if value is NotImplemented:
            return NotImplemented
        return self.value < value

    def __le__(self, other):
        value = self._same_unit_value(other)
        if value is NotImplemented:
            return NotImplemented
        return self.value <= value

    def __gt__(self, other):
        value = self._same_unit_value(other)
        if value is NotImplemented:
            return NotImplemented
        return self.value > value

    def __ge__(self, other):
        value = self._same_unit_value(other)
        if value is NotImplemented:
            return NotImplemented
        return self.value >= value

    def __str__(self) -> str:
        return f'{self.value}{self.unit_symbol}'

    def __format__(self, format_spec: str) -> str:
        return f'{format(self.value, format_spec)}{self.unit_symbol}'


@dataclass(frozen=True, eq=False)
class Degrees(Angle[N]):
    unit_name: ClassVar[str] = 'degrees'
    unit_symbol: ClassVar[str] = '°'

    def to_degrees(self) -> Degrees[N]:
        return self

    def to_radians(self) -> Radians[N]:
        return Radians(degrees_to_radians(self.value))

    def _in_own_unit(self, other: Angle) -> Degrees[N]:
        return other.to_degrees()


@dataclass(frozen=True, eq=False)
class Radians(Angle[N]):
    unit_name: ClassVar[str] = 'radians'
    unit_symbol: ClassVar[str] = ' rad'

    def to_degrees(self) -> Degrees[N]:
        return Degrees(radians_to_degrees(self.value))

    def to_radians(self) -> Radians[N]:
        return self

    def _in_own_unit(self, other: Angle) -> Radians[N]:
        return other.to_radians()


AngleLike = Union[Degrees, Radians, numbers.Real, numpy.ndarray]
"""Bare numbers are interpreted as degrees."""


def _bare_number(value):
    if isinstance(value, (numbers.Real, numpy.ndarray)):
        return value
    raise TypeError(
        f'Expected an angle or a real number, got {type(value).__name__}')


def as_degrees(angle: AngleLike) -> Degrees:
    if isinstance(angle, Angle):
        return angle.to_degrees()
    return Degrees(_bare_number(angle))


def as_radians(angle: AngleLike) -> Radians:
    """Convert an angle-like value to radians.

    Bare numbers are interpreted as degrees. Use ``Radians(value)`` to
    pass a bare number that already is in radians.
    """
    if isinstance(angle, Angle):
        return angle.to_radians()
    return Degrees(_bare_number(angle)).to_radians()
