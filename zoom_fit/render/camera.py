from __future__ import annotations

from dataclasses import dataclass
from math import atan, radians, tan

from zoom_fit.core.types import FovPair, ProjectionMode
from zoom_fit.core.vec import Vec3, cross, normalize, sub
from zoom_fit.render.frame import CameraFrame


@dataclass
class LookAtCamera:
    eye: Vec3 = (0.0, 0.0, -10.0)
    target: Vec3 = (0.0, 0.0, 0.0)
    up: Vec3 = (0.0, 1.0, 0.0)
    fov_deg: float = 35.0
    # True: fov_deg is the vertical angle, horizontal is derived (and vice versa).
    fov_is_height: bool = True
    perspective: bool = True
    # Visible height in model units, used by parallel projection only.
    height: float = 10.0
    near: float = 0.05

    def set(self, eye: Vec3, target: Vec3, up: Vec3) -> None:
        self.eye = eye
        self.target = target
        self.up = up

    def frame(self) -> CameraFrame:
        forward = normalize(sub(self.target, self.eye))
        right = normalize(cross(forward, self.up))
        up = cross(right, forward)
        return CameraFrame(eye=self.eye, right=right, up=up, forward=forward)

    def projection_mode(self) -> str:
        if self.perspective:
            return ProjectionMode.PERSPECTIVE
        return ProjectionMode.PARALLEL

    def vertical_fov(self, aspect: float) -> float:
        if not self.perspective:
            return 0.0
        if self.fov_is_height:
            return radians(self.fov_deg)
        return atan(tan(radians(self.fov_deg) / 2) / aspect) * 2

    def horizontal_fov(self, aspect: float) -> float:
        if not self.perspective:
            return 0.0
        if not self.fov_is_height:
            return radians(self.fov_deg)
        return atan(tan(radians(self.fov_deg) / 2) * aspect) * 2

    def fov_pair(self, aspect: float) -> FovPair:
        return FovPair(
            horizontal=self.horizontal_fov(aspect), vertical=self.vertical_fov(aspect)
        )

    def project(
        self,
        p: Vec3,
        viewport: tuple[int, int],
        frame: CameraFrame | None = None,
    ) -> tuple[float, float, float] | None:
        w, h = viewport
        cx, cy, cz = (frame or self.frame()).to_camera(p)
        if self.perspective:
            if cz <= self.near:
                return None
            f = (h * 0.5) / tan(self.vertical_fov(w / h) * 0.5)
            sx = (w * 0.5) + (cx * f) / cz
            sy = (h * 0.5) - (cy * f) / cz
            return (sx, sy, cz)

        s = h / self.height
        return ((w * 0.5) + cx * s, (h * 0.5) - cy * s, cz)
