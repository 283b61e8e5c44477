"""
bmlayout.basetypes - base data types and converters

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

from collections import namedtuple
from numbers import Real


class InvalidArgument(TypeError):
    """Required argument missing."""

    def __init__(self, func, arg):
        super().__init__(f'{func}: argument `{arg}` must not be None')


def require(func, **kwargs):
    """Raise InvalidArgument if any of the keyword arguments is None."""
    for arg, value in kwargs.items():
        if value is None:
            raise InvalidArgument(func, arg)


def to_number(value=0):
    """Convert to int or float."""
    if isinstance(value, str):
        value = float(value)
    if not isinstance(value, Real):
        raise ValueError("Can't convert `{}` to number.".format(value))
    if value == int(value):
        value = int(value)
    return value


class Coord(namedtuple('Coord', 'x y')):
    """Coordinate tuple."""

    def __str__(self):
        return 'x'.join(str(_x) for _x in self)

    @classmethod
    def create(cls, coord=0):
        coord = to_tuple(coord, length=2)
        return cls(*coord)


class Rect(namedtuple('Rect', 'x y width height')):
    """Rectangle given by top-left corner and size."""

    @property
    def box(self):
        """Left, top, right, bottom box as used by PIL."""
        return (self.x, self.y, self.x + self.width, self.y + self.height)


class RGB(namedtuple('RGB', 'r g b')):
    """Colour tuple."""

    @classmethod
    def create(cls, coord=0):
        coord = to_tuple(coord, length=3)
        return cls(*coord)


def _str_to_tuple(value):
    """Convert various string representations to tuple."""
    value = value.strip().replace(',', ' ').replace('x', ' ')
    return tuple(to_number(_s) for _s in value.split())

def to_tuple(value=0, *, length=2):
    if isinstance(value, tuple):
        return tuple(to_number(_i) for _i in value)
    if isinstance(value, Real):
        return (value,) * length
    if isinstance(value, str):
        value = _str_to_tuple(value)
        if len(value) == 1:
            return value * length
        return value
    if not value:
        return (0,) * length
    try:
        return tuple(value)
    except TypeError:
        pass
    raise ValueError(f"Can't convert {value!r} to tuple.")
