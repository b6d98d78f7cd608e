"""
Console version of the alignment demo: a box centered on the origin, a
second box aligned to its right, and how that second box looks on hover.

    planar-demo '{"padding": 24, "keep_aligned_on_hover": true}'
"""
from __future__ import annotations

import json
import sys
from collections.abc import Sequence

from adaptix.load_error import LoadError
from attr import frozen

from planar.geometry import vec
from planar.layout import (
    beside,
    centered,
    inflate
)
from planar.records import retort


@frozen
class LayoutSettings:
    padding: float = 16
    center_size: tuple[float, float] = (200, 200)
    other_size: tuple[float, float] = (150, 150)
    hover_expand: tuple[float, float] = (8, 8)
    keep_aligned_on_hover: bool = False


def load_settings(raw: str | None) -> LayoutSettings:
    if not raw:
        return LayoutSettings()
    return retort.load(json.loads(raw), LayoutSettings)


def render(settings: LayoutSettings) -> dict[str, dict[str, str]]:
    center = centered(settings.center_size)
    aligned = beside(center, settings.other_size, settings.padding)
    hovered = inflate(
        aligned,
        vec(settings.hover_expand),
        keep_x=settings.keep_aligned_on_hover,
    )
    return {
        "center": center.css(),
        "aligned": aligned.css(),
        "hovered": hovered.css(),
    }


def main(argv: Sequence[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    try:
        settings = load_settings(args[0] if args else None)
    except (LoadError, json.JSONDecodeError) as exc:
        print(f"Bad settings: {exc}")
        return 1

    print(f"Settings: {settings}")
    for name, style in render(settings).items():
        print(f"{name}: {style}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
