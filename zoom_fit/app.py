from __future__ import annotations

import logging
from math import atan2, cos, sin

import pygame

from zoom_fit.core.vec import Vec3, add, norm, scale, sub
from zoom_fit.render.camera import LookAtCamera
from zoom_fit.scene.scene import Edge, Group, Transform, box_edges, walk
from zoom_fit.zoom import FitResult, zoom_entities

log = logging.getLogger(__name__)


def demo_scene() -> list[Group]:
    crate = box_edges((-1.0, 0.0, -1.0), (1.0, 2.0, 1.0))
    tower = box_edges((-0.6, 0.0, -0.6), (0.6, 7.0, 0.6))
    # Three instances of one crate definition, as a host would share them.
    crates = Group(
        (
            Group(crate, Transform.translation(-6.0, 0.0, 2.0), "crate a"),
            Group(crate, Transform.translation(-3.5, 0.0, 4.0) * Transform.rotation_y(0.6)),
            Group(crate, Transform.translation(-4.5, 2.0, 3.0) * Transform.scaling(0.5)),
        ),
        name="crates",
    )
    return [
        crates,
        Group(tower, Transform.translation(5.0, 0.0, -3.0), "tower"),
        Group(box_edges((-12.0, -0.1, -12.0), (12.0, 0.0, 12.0)), name="ground"),
    ]


def _orbit(camera: LookAtCamera, dyaw: float, dpitch: float) -> None:
    # Swing the eye around the target on a Y-up sphere.
    d = sub(camera.eye, camera.target)
    r = norm(d)
    if r == 0.0:
        return
    x, y, z = d
    yaw = atan2(z, x) + dyaw
    pitch = atan2(y, (x * x + z * z) ** 0.5) + dpitch
    pitch = max(-1.35, min(1.35, pitch))
    offset = (cos(yaw) * cos(pitch) * r, sin(pitch) * r, sin(yaw) * cos(pitch) * r)
    camera.set(add(camera.target, offset), camera.target, (0.0, 1.0, 0.0))


def _dolly(camera: LookAtCamera, factor: float) -> None:
    if not camera.perspective:
        camera.height = max(0.5, camera.height * factor)
        return
    d = sub(camera.eye, camera.target)
    camera.set(add(camera.target, scale(d, factor)), camera.target, camera.up)


def run() -> None:
    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    pygame.init()
    pygame.display.set_caption("Zoom to fit (Python + pygame)")

    screen = pygame.display.set_mode((1200, 800), pygame.RESIZABLE)
    clock = pygame.time.Clock()
    font = pygame.font.SysFont(None, 18)

    scene = demo_scene()
    cam = LookAtCamera(eye=(30.0, 18.0, 40.0), target=(0.0, 0.0, 0.0), fov_deg=40.0)
    last: FitResult | None = None
    dragging = False
    last_mouse = (0, 0)

    def fit(entities: list[Group]) -> FitResult:
        w, h = screen.get_size()
        result = zoom_entities(cam, entities, w / h)
        log.info("fit %s: %s", [g.name for g in entities], result.status)
        return result

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.VIDEORESIZE:
                screen = pygame.display.set_mode((event.w, event.h), pygame.RESIZABLE)
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_f:
                    last = fit(scene)
                elif event.key in (pygame.K_1, pygame.K_2, pygame.K_3):
                    last = fit([scene[event.key - pygame.K_1]])
                elif event.key == pygame.K_o:
                    cam.perspective = not cam.perspective
            elif event.type == pygame.MOUSEBUTTONDOWN:
                if event.button == 1:
                    dragging = True
                    last_mouse = event.pos
                elif event.button == 4:
                    _dolly(cam, 0.92)
                elif event.button == 5:
                    _dolly(cam, 1.08)
            elif event.type == pygame.MOUSEBUTTONUP:
                if event.button == 1:
                    dragging = False
            elif event.type == pygame.MOUSEMOTION and dragging:
                mx, my = event.pos
                lx, ly = last_mouse
                last_mouse = event.pos
                _orbit(cam, (mx - lx) * 0.007, -(my - ly) * 0.007)

        keys = pygame.key.get_pressed()
        if keys[pygame.K_LEFT]:
            _orbit(cam, -0.02, 0.0)
        if keys[pygame.K_RIGHT]:
            _orbit(cam, 0.02, 0.0)
        if keys[pygame.K_UP]:
            _orbit(cam, 0.0, 0.02)
        if keys[pygame.K_DOWN]:
            _orbit(cam, 0.0, -0.02)

        w, h = screen.get_size()
        screen.fill((12, 18, 16))
        frame = cam.frame()

        for element, tr in walk(scene):
            if not isinstance(element, Edge):
                continue
            a: Vec3 = tr.apply(element.start)
            b: Vec3 = tr.apply(element.end)
            sa = cam.project(a, (w, h), frame)
            sb = cam.project(b, (w, h), frame)
            if sa is None or sb is None:
                continue
            pygame.draw.aaline(screen, (190, 235, 220), sa[:2], sb[:2])

        hud_lines = [
            f"projection: {'perspective' if cam.perspective else 'parallel'}"
            f" | fov: {cam.fov_deg:0.1f} deg | height: {cam.height:0.2f}",
            f"eye: ({cam.eye[0]:0.2f}, {cam.eye[1]:0.2f}, {cam.eye[2]:0.2f})",
            f"last fit: {last.status if last else '-'}"
            + (f" ({last.error})" if last and last.error else ""),
            "controls: F fit all, 1/2/3 fit group, O toggle projection, drag/arrows orbit, wheel zoom",
            f"fps: {clock.get_fps():0.1f}",
        ]
        y = 10
        for line in hud_lines:
            surf = font.render(line, True, (230, 245, 238))
            screen.blit(surf, (10, y))
            y += 18

        pygame.display.flip()
        clock.tick(60)

    pygame.quit()


if __name__ == "__main__":
    run()
