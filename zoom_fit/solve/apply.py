from __future__ import annotations

import logging
from typing import Protocol

from zoom_fit.core.vec import Vec3, add, sub
from zoom_fit.render.frame import CameraFrame

log = logging.getLogger(__name__)


class CameraLike(Protocol):
    eye: Vec3
    target: Vec3
    up: Vec3
    height: float

    def set(self, eye: Vec3, target: Vec3, up: Vec3) -> None: ...


def apply_eye(
    camera: CameraLike,
    eye: Vec3,
    frame: CameraFrame,
    view_height: float | None = None,
) -> Vec3:
    """Move the camera to a camera-space eye position without rotating it.

    Eye and target shift by the same offset and up is kept, so direction and
    roll are unchanged. Returns the new world-space eye.
    """
    world_eye = frame.to_world(eye)
    offset = sub(world_eye, camera.eye)
    camera.set(world_eye, add(camera.target, offset), camera.up)
    if view_height is not None:
        camera.height = view_height
    log.debug("camera moved by %r, view height %r", offset, view_height)
    return world_eye
