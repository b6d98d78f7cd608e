from planar.geometry import (
    Rectangle,
    RectangleLike,
    VectorLike,
    rect,
    vec
)


def centered(dimension: VectorLike) -> Rectangle:
    dimension = vec(dimension)
    return rect(dimension.divide(-2), dimension)


def beside(anchor: RectangleLike, dimension: VectorLike, padding: float) -> Rectangle:
    """
    A rectangle of `dimension` to the right of `anchor`, `padding` away from
    its right edge and vertically centered on it.
    """
    anchor = rect(anchor)
    dimension = vec(dimension)
    offset_y = anchor.dimension.subtract(dimension).divide(2).y
    origin = anchor.origin.add(anchor.width, 0).add(padding, offset_y)
    return rect(origin, dimension)


def inflate(rectangle: RectangleLike, amount: VectorLike, *, keep_x: bool = False) -> Rectangle:
    """
    Grow `rectangle` by `amount` on every side.

    With `keep_x` the left edge stays put and all horizontal growth goes right.
    """
    rectangle = rect(rectangle)
    amount = vec(amount)
    shift = amount.multiply(0 if keep_x else 1, 1)
    return rect(rectangle.origin.subtract(shift), rectangle.dimension.add(amount.multiply(2)))
