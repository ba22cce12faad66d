"""
semantic_sphere.positioning
===========================

Turns a Classification into a point in 3D space.

Two strategies share the PositionStrategy interface:

- SphericalStrategy : radius from the abstraction layer, azimuth from the
                      |score|-weighted mean of the dimension slots (default view)
- AxisTripleStrategy: three chosen dimensions read directly as x, y, z
                      (multi-view grid; abstraction level is ignored)
"""

import math
from itertools import combinations
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .classifier import Classification
from .config import Config
from .lexicon import DIMENSIONS, DIMENSION_NAMES, dimension, layer

Point = Tuple[float, float, float]


class PositionStrategy:
    """Maps a Classification to a deterministic (x, y, z)."""

    name = "base"

    def place(self, classification: Classification) -> Point:
        raise NotImplementedError

    def describe(self) -> str:
        return self.name


class SphericalStrategy(PositionStrategy):
    name = "spherical"

    def __init__(self, elevation_amplitude: Optional[float] = None):
        if elevation_amplitude is None:
            elevation_amplitude = Config.layout.ELEVATION_AMPLITUDE
        self.elevation_amplitude = elevation_amplitude
        self._slots = np.deg2rad([d.angle for d in DIMENSIONS])

    def azimuth(self, classification: Classification) -> float:
        """Weighted mean of the dimension slot angles, in radians."""
        weights = np.abs([classification.dimensions.get(name, 0.0) for name in DIMENSION_NAMES])
        total = weights.sum()
        if total <= 0:
            return 0.0
        return float(np.dot(self._slots, weights) / total)

    def elevation(self, azimuth: float) -> float:
        # Decorative wave, bounded by +/- amplitude * pi
        return math.sin(azimuth * 3) * self.elevation_amplitude * math.pi

    def place(self, classification: Classification) -> Point:
        radius = layer(classification.level).radius
        az = self.azimuth(classification)
        el = self.elevation(az)
        return (
            radius * math.cos(el) * math.cos(az),
            radius * math.sin(el),
            radius * math.cos(el) * math.sin(az),
        )


class AxisTripleStrategy(PositionStrategy):
    name = "axes"

    def __init__(self, axes: Sequence[str], view_radius: Optional[float] = None):
        axes = tuple(axes)
        if len(axes) != 3 or len(set(axes)) != 3:
            raise ValueError(f"Expected three distinct dimensions; got {axes!r}")
        for a in axes:
            dimension(a)  # KeyError on unknown names
        self.axes = axes
        self.view_radius = Config.layout.VIEW_RADIUS if view_radius is None else view_radius

    def place(self, classification: Classification) -> Point:
        x, y, z = (classification.dimensions.get(a, 0.0) * self.view_radius for a in self.axes)
        return (x, y, z)

    def describe(self) -> str:
        return " × ".join(self.axes)


def dimension_triples() -> List[Tuple[str, str, str]]:
    """Every combination of three dimensions, in slot order (20 views)."""
    return list(combinations(DIMENSION_NAMES, 3))


def make_strategy(name: Optional[str] = None, axes: Optional[Sequence[str]] = None) -> PositionStrategy:
    name = name or Config.layout.STRATEGY
    if name == SphericalStrategy.name:
        return SphericalStrategy()
    if name == AxisTripleStrategy.name:
        return AxisTripleStrategy(axes or DIMENSION_NAMES[:3])
    raise ValueError(f"Unknown position strategy: {name!r}")
