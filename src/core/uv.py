# core/uv.py
from typing import NamedTuple


class UV(NamedTuple):
    """
    2D surface coordinates of a hit point, normally inside [0, 1] x [0, 1].
    """
    u: float
    v: float

    def clamped(self) -> "UV":
        """Returns the coordinates clamped to the unit square."""
        return UV(min(max(self.u, 0.0), 1.0), min(max(self.v, 0.0), 1.0))


ORIGIN_UV = UV(0.0, 0.0)
