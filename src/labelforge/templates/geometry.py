"""Label geometry derived from a template frame.

All values are in points. The functions here only read the frame: they
dispatch on its ``shape`` tag, so they work on any of the frame variants
defined in :mod:`labelforge.templates.model`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from labelforge.templates.model import Frame


@dataclass(frozen=True)
class Origin:
    """Top-left corner of one label on the page."""

    x: float
    y: float


def frame_size(frame: Frame) -> tuple[float, float]:
    """Return the (width, height) bounding box of one label.

    Waste (overprint allowance) is not part of the nominal size. A CD frame
    is clipped independently per axis: a zero clip width or height means the
    full outer diameter is used for that axis.
    """
    shape = getattr(frame, "shape", None)
    if shape == "rect":
        return frame.w, frame.h
    if shape == "round":
        return 2.0 * frame.r, 2.0 * frame.r
    if shape == "cd":
        w = frame.w if frame.w != 0.0 else 2.0 * frame.r1
        h = frame.h if frame.h != 0.0 else 2.0 * frame.r1
        return w, h
    return 0.0, 0.0


def label_count(frame: Frame) -> int:
    """Total number of labels per sheet, summed over all layouts."""
    return sum(layout.nx * layout.ny for layout in frame.layouts)


def origins(frame: Frame) -> list[Origin]:
    """Return the origin of every label, top-to-bottom then left-to-right.

    Each layout is expanded row by row; the combined list is then sorted on
    (y, x) so that label numbering does not depend on how many layouts the
    frame has or the order they were added in.
    """
    result = [
        Origin(x=layout.x0 + ix * layout.dx, y=layout.y0 + iy * layout.dy)
        for layout in frame.layouts
        for iy in range(layout.ny)
        for ix in range(layout.nx)
    ]
    result.sort(key=lambda o: (o.y, o.x))
    return result
