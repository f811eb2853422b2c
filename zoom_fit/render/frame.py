from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from zoom_fit.core.errors import DegenerateFrameError
from zoom_fit.core.vec import Vec3, as_vec3, dot, sub


@dataclass(frozen=True)
class CameraFrame:
    """Camera placement as an eye point plus three orthonormal unit axes.

    Camera space has the eye at the origin, x along ``right``, y along ``up``
    and z along ``forward`` (depth grows away from the camera). With a
    right-handed world and a camera built by ``LookAtCamera.frame`` this basis
    is left-handed (``right x up == -forward``); the mapping only uses dot
    products, so either handedness round-trips exactly.
    """

    eye: Vec3
    right: Vec3
    up: Vec3
    forward: Vec3

    def to_camera(self, p: Vec3) -> Vec3:
        d = sub(as_vec3(p), self.eye)
        return (dot(d, self.right), dot(d, self.up), dot(d, self.forward))

    def to_world(self, p: Vec3) -> Vec3:
        x, y, z = as_vec3(p)
        e, r, u, f = self.eye, self.right, self.up, self.forward
        return (
            e[0] + r[0] * x + u[0] * y + f[0] * z,
            e[1] + r[1] * x + u[1] * y + f[1] * z,
            e[2] + r[2] * x + u[2] * y + f[2] * z,
        )


def to_camera_space(points: Iterable[Vec3], frame: CameraFrame) -> list[Vec3]:
    return [frame.to_camera(p) for p in points]


def to_world_space(points: Iterable[Vec3], frame: CameraFrame) -> list[Vec3]:
    return [frame.to_world(p) for p in points]


def check_frame(frame: CameraFrame, tolerance: float = 1e-6) -> None:
    """Raise DegenerateFrameError unless the three axes are orthonormal."""
    axes = (("right", frame.right), ("up", frame.up), ("forward", frame.forward))
    for name, a in axes:
        length_sq = dot(a, a)
        # NaN fails this comparison too.
        if not abs(length_sq - 1.0) <= tolerance:
            raise DegenerateFrameError(f"{name} axis is not unit length ({length_sq!r})")
    for i in range(3):
        for j in range(i + 1, 3):
            d = dot(axes[i][1], axes[j][1])
            if not abs(d) <= tolerance:
                raise DegenerateFrameError(
                    f"{axes[i][0]} and {axes[j][0]} axes are not orthogonal ({d!r})"
                )
