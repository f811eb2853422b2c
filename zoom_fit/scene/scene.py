from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from math import cos, sin

from zoom_fit.core.vec import Vec3, as_vec3, is_finite


@dataclass(frozen=True)
class Transform:
    """Affine transform: 3x3 linear part (row-major) plus translation."""

    m: tuple[Vec3, Vec3, Vec3] = (
        (1.0, 0.0, 0.0),
        (0.0, 1.0, 0.0),
        (0.0, 0.0, 1.0),
    )
    t: Vec3 = (0.0, 0.0, 0.0)

    @classmethod
    def translation(cls, x: float, y: float, z: float) -> Transform:
        return cls(t=(float(x), float(y), float(z)))

    @classmethod
    def scaling(cls, s: float) -> Transform:
        return cls(m=((s, 0.0, 0.0), (0.0, s, 0.0), (0.0, 0.0, s)))

    @classmethod
    def rotation_y(cls, rad: float) -> Transform:
        c = cos(rad)
        s = sin(rad)
        return cls(m=((c, 0.0, s), (0.0, 1.0, 0.0), (-s, 0.0, c)))

    def apply(self, p: Vec3) -> Vec3:
        m, t = self.m, self.t
        return (
            m[0][0] * p[0] + m[0][1] * p[1] + m[0][2] * p[2] + t[0],
            m[1][0] * p[0] + m[1][1] * p[1] + m[1][2] * p[2] + t[1],
            m[2][0] * p[0] + m[2][1] * p[1] + m[2][2] * p[2] + t[2],
        )

    def __mul__(self, other: Transform) -> Transform:
        # (self * other).apply(p) == self.apply(other.apply(p))
        if not isinstance(other, Transform):
            return NotImplemented
        a, b = self.m, other.m
        m = tuple(
            tuple(sum(a[r][k] * b[k][c] for k in range(3)) for c in range(3))
            for r in range(3)
        )
        return Transform(m=m, t=self.apply(other.t))


IDENTITY = Transform()


@dataclass(frozen=True)
class Edge:
    start: Vec3
    end: Vec3

    @property
    def vertices(self) -> tuple[Vec3, Vec3]:
        return (self.start, self.end)


@dataclass(frozen=True)
class Face:
    vertices: tuple[Vec3, ...]


@dataclass(frozen=True)
class Group:
    """Nested container. Several groups may share one ``entities`` tuple,
    which is how component instances are modelled."""

    entities: tuple[object, ...]
    transform: Transform = IDENTITY
    name: str = ""


def box_edges(lo: Vec3, hi: Vec3) -> tuple[Edge, ...]:
    x0, y0, z0 = lo
    x1, y1, z1 = hi
    c = [
        (x0, y0, z0), (x1, y0, z0), (x1, y1, z0), (x0, y1, z0),
        (x0, y0, z1), (x1, y0, z1), (x1, y1, z1), (x0, y1, z1),
    ]
    pairs = (
        (0, 1), (1, 2), (2, 3), (3, 0),
        (4, 5), (5, 6), (6, 7), (7, 4),
        (0, 4), (1, 5), (2, 6), (3, 7),
    )
    return tuple(Edge(c[a], c[b]) for a, b in pairs)


def walk(
    entities: Iterable[object], transform: Transform = IDENTITY
) -> Iterable[tuple[Edge | Face, Transform]]:
    """Yield every leaf element with its accumulated transform, depth first."""
    # One iterator per open group keeps sibling order without recursion.
    stack = [(iter(entities), transform)]
    done = object()
    while stack:
        it, tr = stack[-1]
        e = next(it, done)
        if e is done:
            stack.pop()
            continue
        if isinstance(e, Group):
            stack.append((iter(e.entities), tr * e.transform))
        elif isinstance(e, (Edge, Face)):
            yield e, tr


def collect_points(
    entities: Iterable[object],
    transform: Transform = IDENTITY,
    tolerance: float = 1e-6,
) -> list[Vec3]:
    """World-space vertices of all edges and faces, duplicates removed.

    Points are bucketed on a grid of ``tolerance`` cells; the first point that
    lands in a cell wins.
    """
    seen: set[tuple[int, int, int]] = set()
    out: list[Vec3] = []
    for element, tr in walk(entities, transform):
        for v in element.vertices:
            p = tr.apply(as_vec3(v))
            if not is_finite(p):
                # Kept so the fit rejects it instead of dropping it here.
                out.append(p)
                continue
            key = (
                round(p[0] / tolerance),
                round(p[1] / tolerance),
                round(p[2] / tolerance),
            )
            if key in seen:
                continue
            seen.add(key)
            out.append(p)
    return out
