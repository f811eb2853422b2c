from __future__ import annotations

import logging
from math import isfinite, pi, tan

from zoom_fit.core.errors import InvalidFovError
from zoom_fit.core.vec import ORIGIN, Vec3
from zoom_fit.solve.extremes import Extremes

log = logging.getLogger(__name__)

# Relative slack when deciding that the eye sits on a point.
_APEX_EPS = 1e-9


def validate_fov(angle: float, name: str = "horizontal") -> None:
    if not (isfinite(angle) and 0.0 < angle < pi):
        raise InvalidFovError(name, angle)


def solve_axis(
    low: Vec3, high: Vec3, fov: float, axis: int
) -> tuple[float, float]:
    """Eye coordinate on one axis plus depth for a frustum touching both points.

    ``low`` is the point maximising ``p[axis] - k*z`` and ``high`` the one
    minimising ``p[axis] + k*z``, with ``k = tan(fov/2)``. The two frustum
    edges through the eye are ``x - e = k*(z - ez)`` and ``e - x = k*(z - ez)``;
    intersecting them gives the returned ``(e, ez)``.
    """
    k = tan(fov / 2)
    m0 = low[axis] - k * low[2]
    m1 = high[axis] + k * high[2]
    z = (m1 - m0) / (2 * k)
    return (k * z + m0, z)


def solve_perspective_eye(
    extremes: Extremes,
    horizontal_fov: float,
    vertical_fov: float,
    standoff: float = 1.0,
) -> Vec3:
    """Camera-space eye position whose frustum just contains the extremes.

    Returns the origin (the current eye) when there are no extremes.
    """
    validate_fov(horizontal_fov, "horizontal")
    validate_fov(vertical_fov, "vertical")

    if extremes.empty:
        return ORIGIN

    ex, ez_h = solve_axis(extremes.left, extremes.right, horizontal_fov, 0)
    ey, ez_v = solve_axis(extremes.top, extremes.bottom, vertical_fov, 1)

    # Farther back of the two, so neither axis clips.
    z = min(ez_h, ez_v)

    nearest = extremes.nearest
    if nearest is None:
        nearest = min(
            extremes.left[2], extremes.right[2], extremes.top[2], extremes.bottom[2]
        )
    if z >= nearest - _APEX_EPS * max(1.0, abs(nearest)):
        log.debug("eye at depth %r touches a point, backing off by %r", z, standoff)
        z = nearest - standoff

    log.debug(
        "perspective eye x=%r y=%r z=%r (depth h=%r v=%r)", ex, ey, z, ez_h, ez_v
    )
    return (ex, ey, z)
