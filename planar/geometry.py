from __future__ import annotations

import math
from collections.abc import (
    Callable,
    Mapping
)
from dataclasses import dataclass
from typing import (
    Any,
    Protocol,
    Union
)

from planar.records import (
    load_bounds,
    load_point
)


class PointLike(Protocol):
    @property
    def x(self) -> float:
        ...

    @property
    def y(self) -> float:
        ...


class BoundsLike(PointLike, Protocol):
    @property
    def width(self) -> float:
        ...

    @property
    def height(self) -> float:
        ...


VectorLike = Union["Vector", float, tuple[float, float], list[float], Mapping[str, Any], PointLike]
RectangleLike = Union["Rectangle", Mapping[str, Any], BoundsLike]

DEFAULT_FIELDS = ("left", "top", "width", "height")


def _divide(a: float, b: float) -> float:
    # float division without ZeroDivisionError: a / 0.0 follows IEEE-754
    if b != 0:
        return a / b
    if a == 0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


@dataclass(frozen=True, slots=True)
class Vector:
    x: float
    y: float

    @staticmethod
    def uniform(value: float) -> Vector:
        return Vector(value, value)

    @staticmethod
    def from_pair(pair: tuple[float, float] | list[float]) -> Vector:
        x, y = pair
        return Vector(x, y)

    @staticmethod
    def from_point(point: PointLike) -> Vector:
        return Vector(point.x, point.y)

    @staticmethod
    def from_angle(radians: float) -> Vector:
        """Unit vector pointing at `radians`, counterclockwise from the x-axis."""
        return Vector(math.cos(radians), math.sin(radians))

    def set_x(self, x: float) -> Vector:
        return Vector(x, self.y)

    def set_y(self, y: float) -> Vector:
        return Vector(self.x, y)

    def map(self, fn: Callable[[float, float], VectorLike]) -> Vector:
        return vec(fn(self.x, self.y))

    def add(self, other: VectorLike, y: float | None = None) -> Vector:
        other = vec(other, y)
        return Vector(self.x + other.x, self.y + other.y)

    def subtract(self, other: VectorLike, y: float | None = None) -> Vector:
        other = vec(other, y)
        return Vector(self.x - other.x, self.y - other.y)

    def divide(self, other: VectorLike, y: float | None = None) -> Vector:
        """
        Element-wise division. A single number divides both components.

        Dividing by zero does not raise: the affected components become
        infinite (or NaN for 0 / 0).
        """
        other = vec(other, y)
        return Vector(_divide(self.x, other.x), _divide(self.y, other.y))

    def multiply(self, other: VectorLike, y: float | None = None) -> Vector:
        """
        Element-wise (Hadamard) product. A single number scales both components.
        """
        other = vec(other, y)
        return Vector(self.x * other.x, self.y * other.y)

    def dot(self, other: VectorLike, y: float | None = None) -> float:
        other = vec(other, y)
        return self.x * other.x + self.y * other.y

    def cross(self, other: VectorLike, y: float | None = None) -> float:
        """
        Scalar 2D cross product, `a.x * b.y - a.y * b.x`.

        Positive when `other` lies counterclockwise from this vector.
        """
        other = vec(other, y)
        return self.x * other.y - self.y * other.x

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def normalize(self) -> Vector:
        # a zero vector comes out as (nan, nan)
        length = self.length()
        return Vector(_divide(self.x, length), _divide(self.y, length))

    def rotate_radians(self, radians: float) -> Vector:
        cos = math.cos(radians)
        sin = math.sin(radians)
        return Vector(self.x * cos - self.y * sin, self.x * sin + self.y * cos)

    def rotate_degrees(self, degrees: float) -> Vector:
        return self.rotate_radians(degrees * math.pi / 180)

    def is_in_rectangle(self, rectangle: RectangleLike) -> bool:
        """Whether the point lies inside `rectangle`, edges included."""
        r = rect(rectangle)
        return (
            r.x <= self.x <= r.x + r.width
            and r.y <= self.y <= r.y + r.height
        )

    def equals(self, other: VectorLike, y: float | None = None) -> bool:
        other = vec(other, y)
        return self.x == other.x and self.y == other.y

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.equals(other)

    def __add__(self, other: VectorLike) -> Vector:
        return self.add(other)

    def __sub__(self, other: VectorLike) -> Vector:
        return self.subtract(other)

    def __mul__(self, other: VectorLike) -> Vector:
        return self.multiply(other)

    __rmul__ = __mul__

    def __truediv__(self, other: VectorLike) -> Vector:
        return self.divide(other)

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y)

    def __str__(self) -> str:
        return f"<{self.x:.2f}; {self.y:.2f}>"


def vec(value: VectorLike, y: float | None = None, /) -> Vector:
    """
    Build a Vector from any of the accepted shapes:

    - ``vec(1, 2)`` two components
    - ``vec(3)`` uniform vector ``(3, 3)``
    - ``vec((1, 2))`` or ``vec([1, 2])`` a pair
    - ``vec({"x": 1, "y": 2})`` a mapping, extra keys are ignored
    - ``vec(obj)`` anything with ``x`` and ``y`` attributes

    A Vector is returned unchanged.
    """
    if y is not None and not isinstance(value, (int, float)):
        raise TypeError(f"A second component only goes with a number, got {value!r}")

    match value:
        case Vector():
            return value
        case int() | float():
            return Vector(value, value) if y is None else Vector(value, y)
        case (_, _):
            return Vector.from_pair(value)
        case Mapping():
            return Vector.from_point(load_point(value))
        case object(x=_, y=_):
            return Vector.from_point(value)
    raise TypeError(f"Cannot build a vector from {value!r}")


class Rectangle:
    __slots__ = ("_origin", "_dimension")
    __match_args__ = ("origin", "dimension")

    def __init__(self, origin: VectorLike, dimension: VectorLike, /) -> None:
        self._origin = vec(origin)
        self._dimension = vec(dimension)

    @staticmethod
    def from_bounds(bounds: BoundsLike) -> Rectangle:
        return Rectangle(Vector(bounds.x, bounds.y), Vector(bounds.width, bounds.height))

    @property
    def origin(self) -> Vector:
        return self._origin

    @property
    def dimension(self) -> Vector:
        """Width and height. Components may be negative."""
        return self._dimension

    @property
    def x(self) -> float:
        return self._origin.x

    @property
    def y(self) -> float:
        return self._origin.y

    @property
    def width(self) -> float:
        return self._dimension.x

    @property
    def height(self) -> float:
        return self._dimension.y

    def set_origin(self, origin: VectorLike) -> Rectangle:
        return Rectangle(origin, self._dimension)

    def set_dimension(self, dimension: VectorLike) -> Rectangle:
        return Rectangle(self._origin, dimension)

    def map(self, fn: Callable[[Vector, Vector], tuple[VectorLike, VectorLike]]) -> Rectangle:
        origin, dimension = fn(self._origin, self._dimension)
        return Rectangle(origin, dimension)

    def as_dict(self, *names: str) -> dict[str, float]:
        """
        Project the rectangle onto a plain mapping.

        With no arguments the keys are ``left``, ``top``, ``width`` and ``height``,
        ready to be used as positioning attributes. Otherwise exactly four key
        names must be given, in x, y, width, height order.
        """
        if not names:
            names = DEFAULT_FIELDS
        if len(names) != 4:
            raise TypeError(f"Expected 4 field names, got {len(names)}")
        x, y, width, height = names
        return {
            x: self._origin.x,
            y: self._origin.y,
            width: self._dimension.x,
            height: self._dimension.y,
        }

    def css(self, unit: str | None = "px") -> dict[str, Any]:
        """
        Same as `as_dict()`, with every value rendered as a CSS length in `unit`.
        Pass ``unit=None`` to keep the raw numbers.
        """
        mapping = self.as_dict()
        if unit is None:
            return mapping
        return {key: css_length(value, unit) for key, value in mapping.items()}

    def equals(self, other: RectangleLike) -> bool:
        other = rect(other)
        return self._origin.equals(other.origin) and self._dimension.equals(other.dimension)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rectangle):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((self._origin, self._dimension))

    def __repr__(self) -> str:
        return f"Rectangle({self._origin!r}, {self._dimension!r})"

    def __str__(self) -> str:
        return f"Rectangle({self._origin}, {self._dimension})"


def rect(value: VectorLike | RectangleLike, dimension: VectorLike | None = None, /) -> Rectangle:
    """
    Build a Rectangle either from an origin and a dimension, or from a single
    record with ``x``, ``y``, ``width`` and ``height`` (a mapping or an object
    with those attributes). A Rectangle is returned unchanged.
    """
    if dimension is not None:
        return Rectangle(value, dimension)

    match value:
        case Rectangle():
            return value
        case Mapping():
            return load_bounds(value).to_rectangle()
        case object(x=_, y=_, width=_, height=_):
            return Rectangle.from_bounds(value)
    raise TypeError(f"Cannot build a rectangle from {value!r}")


def css_length(value: float, unit: str = "px") -> str:
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e16:
        value = int(value)
    return f"{value}{unit}"
