"""Deterministic jitter for words that land on the same point."""

import math
from typing import Dict, Optional, Set, Tuple

from .config import Config

Point = Tuple[float, float, float]


class CollisionResolver:
    """
    Occupancy table for a single plot pass.

    The Nth word (N >= 1) arriving at an occupied quantized point is pushed
    around a small circle (N * 60 degrees) and lifted by N * step. Create a
    new resolver for every pass.
    """

    def __init__(
        self,
        decimals: Optional[int] = None,
        magnitude: Optional[float] = None,
        step: Optional[float] = None,
        angle_deg: Optional[float] = None,
    ):
        cfg = Config.layout
        self.decimals = cfg.QUANTIZE_DECIMALS if decimals is None else decimals
        self.magnitude = cfg.JITTER_MAGNITUDE if magnitude is None else magnitude
        self.step = cfg.JITTER_STEP if step is None else step
        self.angle = math.radians(cfg.JITTER_ANGLE_DEG if angle_deg is None else angle_deg)
        self._counts: Dict[Point, int] = {}
        self._claimed: Set[Point] = set()
        self._displaced = 0

    def key(self, point: Point) -> Point:
        # + 0.0 folds -0.0 into 0.0
        return tuple(round(c, self.decimals) + 0.0 for c in point)

    def offset(self, point: Point, n: int) -> Point:
        if n == 0:
            return point
        theta = n * self.angle
        x, y, z = point
        return (
            x + math.cos(theta) * self.magnitude,
            y + n * self.step,
            z + math.sin(theta) * self.magnitude,
        )

    def resolve(self, point: Point) -> Point:
        base = self.key(point)
        n = self._counts.get(base, 0)
        adjusted = self.offset(point, n)
        while self.key(adjusted) in self._claimed:
            n += 1
            adjusted = self.offset(point, n)
        self._counts[base] = n + 1
        if n:
            self._displaced += 1
        self._claimed.add(self.key(adjusted))
        return adjusted

    def collisions(self) -> int:
        """Number of points that had to be displaced so far."""
        return self._displaced

    def __len__(self) -> int:
        return len(self._claimed)
