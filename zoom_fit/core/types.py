from __future__ import annotations

from dataclasses import dataclass


class ProjectionMode:
    PERSPECTIVE = "perspective"
    PARALLEL = "parallel"


@dataclass(frozen=True)
class FovPair:
    # Full angles in radians, already resolved against the viewport.
    horizontal: float
    vertical: float
