from __future__ import annotations


class ZoomError(Exception):
    """Base class for every failure a fit can report back to the host."""


class InvalidFovError(ZoomError):
    def __init__(self, name: str, angle: float):
        super().__init__(f"{name} field of view {angle!r} rad is outside (0, pi)")
        self.name = name
        self.angle = angle


class DegenerateFrameError(ZoomError):
    """Camera basis is not orthonormal within tolerance."""


class InvalidViewportError(ZoomError):
    def __init__(self, aspect: float):
        super().__init__(f"viewport aspect ratio {aspect!r} must be positive and finite")
        self.aspect = aspect


class NonFiniteResultError(ZoomError):
    """A solved eye position or view height came out as NaN or infinity."""


class NonFiniteInputError(ZoomError):
    """An input point has a NaN or infinite coordinate."""
