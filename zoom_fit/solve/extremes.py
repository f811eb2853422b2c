from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from math import tan

from zoom_fit.core.vec import Vec3

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Extremes:
    """Points that pin each side of the frustum, all in camera space.

    Naming follows the scoring rule: ``left`` maximises ``x - z*k`` and
    ``right`` minimises ``x + z*k`` (likewise top/bottom on y). All four are
    None when there was nothing to frame.
    """

    left: Vec3 | None = None
    right: Vec3 | None = None
    top: Vec3 | None = None
    bottom: Vec3 | None = None
    # Smallest depth over every input point, not just the four above.
    nearest: float | None = None

    @property
    def empty(self) -> bool:
        return self.left is None


def find_extremes(
    points: Sequence[Vec3], horizontal_fov: float, vertical_fov: float
) -> Extremes:
    if not points:
        return Extremes()

    kh = tan(horizontal_fov / 2)
    kv = tan(vertical_fov / 2)

    # max()/min() return the first of equal keys, so ties follow input order.
    ext = Extremes(
        left=max(points, key=lambda p: p[0] - p[2] * kh),
        right=min(points, key=lambda p: p[0] + p[2] * kh),
        top=max(points, key=lambda p: p[1] - p[2] * kv),
        bottom=min(points, key=lambda p: p[1] + p[2] * kv),
        nearest=min(p[2] for p in points),
    )
    log.debug("frustum extremes from %d points: %s", len(points), ext)
    return ext
