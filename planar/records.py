"""
Plain records exchanged with the outside world.

A host UI usually hands out bounding boxes as loose mappings (a serialized
``DOMRect`` for example). They are validated here before any geometry is
built from them.
"""
from __future__ import annotations

from typing import (
    TYPE_CHECKING,
    Any
)

from adaptix import Retort
from attr import frozen


if TYPE_CHECKING:
    from planar.geometry import (
        BoundsLike,
        Rectangle
    )


@frozen
class Point:
    x: float
    y: float


@frozen
class Bounds:
    x: float
    y: float
    width: float
    height: float

    @staticmethod
    def from_rectangle(rectangle: BoundsLike) -> Bounds:
        return Bounds(
            x=rectangle.x,
            y=rectangle.y,
            width=rectangle.width,
            height=rectangle.height,
        )

    def to_rectangle(self) -> Rectangle:
        from planar.geometry import Rectangle

        return Rectangle.from_bounds(self)


###


retort = Retort()


def load_point(data: object) -> Point:
    """Raises `adaptix.load_error.LoadError` if `data` lacks numeric ``x``/``y``."""
    return retort.load(data, Point)


def load_bounds(data: object) -> Bounds:
    return retort.load(data, Bounds)


def dump_bounds(rectangle: BoundsLike) -> dict[str, Any]:
    return retort.dump(Bounds.from_rectangle(rectangle), Bounds)
