from __future__ import annotations

from math import atan, radians, tan

import pytest

from zoom_fit.core.types import ProjectionMode
from zoom_fit.core.vec import cross, dot
from zoom_fit.render.camera import LookAtCamera
from zoom_fit.render.frame import check_frame


def test_vertical_fov_is_authoritative_when_fov_is_height() -> None:
    cam = LookAtCamera(fov_deg=60.0, fov_is_height=True)
    assert cam.vertical_fov(2.0) == pytest.approx(radians(60.0))
    assert cam.horizontal_fov(2.0) == pytest.approx(2 * atan(tan(radians(30.0)) * 2.0))


def test_horizontal_fov_is_authoritative_otherwise() -> None:
    cam = LookAtCamera(fov_deg=60.0, fov_is_height=False)
    assert cam.horizontal_fov(2.0) == pytest.approx(radians(60.0))
    assert cam.vertical_fov(2.0) == pytest.approx(2 * atan(tan(radians(30.0)) / 2.0))


def test_derived_angles_agree_with_the_aspect_ratio() -> None:
    for fov_is_height in (True, False):
        pair = LookAtCamera(fov_deg=45.0, fov_is_height=fov_is_height).fov_pair(1.6)
        assert tan(pair.horizontal / 2) / tan(pair.vertical / 2) == pytest.approx(1.6)


def test_parallel_camera_has_no_fov() -> None:
    cam = LookAtCamera(perspective=False)
    assert cam.horizontal_fov(1.0) == 0.0
    assert cam.vertical_fov(1.0) == 0.0
    assert cam.projection_mode() == ProjectionMode.PARALLEL
    assert LookAtCamera().projection_mode() == ProjectionMode.PERSPECTIVE


def test_frame_is_orthonormal_and_looks_at_target() -> None:
    cam = LookAtCamera(eye=(4.0, 3.0, -7.0), target=(-1.0, 0.5, 2.0))
    f = cam.frame()
    check_frame(f)
    assert cross(f.right, f.up) == pytest.approx(tuple(-c for c in f.forward))
    x, y, z = f.to_camera(cam.target)
    assert x == pytest.approx(0.0, abs=1e-9)
    assert y == pytest.approx(0.0, abs=1e-9)
    assert z > 0.0
    assert dot(f.up, (0.0, 1.0, 0.0)) > 0.0


def test_target_projects_to_screen_centre() -> None:
    for perspective in (True, False):
        cam = LookAtCamera(eye=(0.0, 5.0, -10.0), perspective=perspective)
        sx, sy, _ = cam.project(cam.target, (800, 600))
        assert sx == pytest.approx(400.0)
        assert sy == pytest.approx(300.0)


def test_points_behind_a_perspective_camera_are_not_projected() -> None:
    cam = LookAtCamera(eye=(0.0, 0.0, -10.0))
    assert cam.project((0.0, 0.0, -20.0), (800, 600)) is None
