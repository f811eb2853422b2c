from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from math import isfinite

from zoom_fit.core.errors import InvalidViewportError
from zoom_fit.core.vec import ORIGIN, Vec3

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class BoundingBox:
    min: Vec3
    max: Vec3

    @classmethod
    def of(cls, points: Sequence[Vec3]) -> BoundingBox:
        xs = [p[0] for p in points]
        ys = [p[1] for p in points]
        zs = [p[2] for p in points]
        return cls(min=(min(xs), min(ys), min(zs)), max=(max(xs), max(ys), max(zs)))

    @property
    def center(self) -> Vec3:
        return (
            (self.min[0] + self.max[0]) * 0.5,
            (self.min[1] + self.max[1]) * 0.5,
            (self.min[2] + self.max[2]) * 0.5,
        )

    @property
    def width(self) -> float:
        return self.max[0] - self.min[0]

    @property
    def height(self) -> float:
        return self.max[1] - self.min[1]

    @property
    def depth(self) -> float:
        return self.max[2] - self.min[2]


def validate_aspect(aspect: float) -> None:
    if not (isfinite(aspect) and aspect > 0.0):
        raise InvalidViewportError(aspect)


def solve_parallel_eye(
    points: Sequence[Vec3], aspect: float, margin: float = 0.1
) -> tuple[Vec3, float | None]:
    """Eye position and view height for a parallel camera, in camera space.

    ``aspect`` is viewport width / height. The view height comes back as None
    when it should stay as it is: for an empty point set, or a box with no
    width and no height.
    """
    validate_aspect(aspect)

    if not points:
        return ORIGIN, None

    bb = BoundingBox.of(points)
    cx, cy, _ = bb.center
    eye = (cx, cy, bb.min[2] - bb.height * margin)

    view_height = max(bb.height, bb.width / aspect)
    if view_height <= 0.0:
        view_height = None

    log.debug("parallel eye %r, box %r, view height %r", eye, bb, view_height)
    return eye, view_height
