from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from math import isfinite

from zoom_fit.core.errors import NonFiniteInputError, NonFiniteResultError, ZoomError
from zoom_fit.core.params import DEFAULT_PARAMS, FitParams
from zoom_fit.core.types import FovPair, ProjectionMode
from zoom_fit.core.vec import Vec3, is_finite
from zoom_fit.render.camera import LookAtCamera
from zoom_fit.render.frame import CameraFrame, check_frame, to_camera_space
from zoom_fit.scene.scene import collect_points
from zoom_fit.solve.apply import apply_eye
from zoom_fit.solve.extremes import find_extremes
from zoom_fit.solve.parallel import solve_parallel_eye, validate_aspect
from zoom_fit.solve.perspective import solve_perspective_eye, validate_fov

log = logging.getLogger(__name__)


class FitStatus:
    APPLIED = "applied"
    EMPTY = "empty"
    REJECTED = "rejected"


@dataclass(frozen=True)
class Placement:
    # Camera space of the frame the placement was solved in.
    eye: Vec3
    view_height: float | None = None


@dataclass(frozen=True)
class FitResult:
    status: str
    eye: Vec3 | None = None
    target: Vec3 | None = None
    view_height: float | None = None
    error: ZoomError | None = None

    @property
    def ok(self) -> bool:
        return self.status != FitStatus.REJECTED


def plan_fit(
    points: Sequence[Vec3],
    frame: CameraFrame,
    mode: str,
    fov: FovPair | None,
    aspect: float,
    params: FitParams = DEFAULT_PARAMS,
) -> Placement | None:
    """Solve a placement for world-space points without touching any camera.

    Returns None for an empty point set. Raises ZoomError subclasses for bad
    input.
    """
    check_frame(frame, params.frame_tolerance)

    if mode == ProjectionMode.PERSPECTIVE:
        if fov is None:
            raise ValueError("perspective fit needs a FovPair")
        validate_fov(fov.horizontal, "horizontal")
        validate_fov(fov.vertical, "vertical")
    elif mode == ProjectionMode.PARALLEL:
        validate_aspect(aspect)
    else:
        raise ValueError(f"unknown projection mode {mode!r}")

    local = to_camera_space(points, frame)
    if not local:
        return None
    # min/max never pick a NaN key after the first element, so check up front.
    for i, p in enumerate(local):
        if not is_finite(p):
            raise NonFiniteInputError(f"point {i} ({points[i]!r}) is not finite")

    if mode == ProjectionMode.PERSPECTIVE:
        extremes = find_extremes(local, fov.horizontal, fov.vertical)
        eye = solve_perspective_eye(
            extremes, fov.horizontal, fov.vertical, standoff=params.apex_standoff
        )
        placement = Placement(eye=eye)
    else:
        eye, height = solve_parallel_eye(local, aspect, margin=params.parallel_margin)
        placement = Placement(eye=eye, view_height=height)

    if not is_finite(placement.eye):
        raise NonFiniteResultError(f"solved eye {placement.eye!r} is not finite")
    if placement.view_height is not None and not isfinite(placement.view_height):
        raise NonFiniteResultError(
            f"solved view height {placement.view_height!r} is not finite"
        )
    return placement


def zoom_points(
    camera: LookAtCamera,
    points: Iterable[Vec3],
    aspect: float,
    fov: FovPair | None = None,
    params: FitParams = DEFAULT_PARAMS,
) -> FitResult:
    """Place ``camera`` so its view contains every world-space point.

    Camera state is read once up front. Nothing is written unless the whole
    placement solved cleanly.
    """
    points = list(points)
    frame = camera.frame()
    mode = camera.projection_mode()
    try:
        if mode == ProjectionMode.PERSPECTIVE and fov is None:
            validate_aspect(aspect)
            fov = camera.fov_pair(aspect)
        placement = plan_fit(points, frame, mode, fov, aspect, params)
    except ZoomError as e:
        log.warning("fit rejected: %s", e)
        return FitResult(status=FitStatus.REJECTED, error=e)

    if placement is None:
        log.debug("nothing to fit, camera left as is")
        return FitResult(status=FitStatus.EMPTY, eye=camera.eye, target=camera.target)

    apply_eye(camera, placement.eye, frame, placement.view_height)
    log.debug("fitted %d points in %s mode, eye %r", len(points), mode, camera.eye)
    return FitResult(
        status=FitStatus.APPLIED,
        eye=camera.eye,
        target=camera.target,
        view_height=placement.view_height,
    )


def zoom_entities(
    camera: LookAtCamera,
    entities: Iterable[object],
    aspect: float,
    fov: FovPair | None = None,
    params: FitParams = DEFAULT_PARAMS,
) -> FitResult:
    return zoom_points(camera, collect_points(entities), aspect, fov, params)
