from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FitParams:
    # Parallel mode: eye sits this fraction of the box height behind the
    # nearest point, to keep the host renderer from near-clipping it.
    parallel_margin: float = 0.1

    # Perspective mode: pull-back distance (model units) when the solved eye
    # lands on a point, e.g. a single point or points along the view axis.
    apex_standoff: float = 1.0

    # Max deviation of basis dot products from 0 / 1.
    frame_tolerance: float = 1e-6


DEFAULT_PARAMS = FitParams()
