"""
semantic_sphere.render
======================

Static matplotlib views of a PlotResult.

The sphere uses y as "up" (elevation), so points are drawn as (x, z, y) on
matplotlib's 3D axes where the third axis is vertical.
"""

import logging
import math
from pathlib import Path
from typing import Iterable, Optional, Sequence, Tuple, Union

import matplotlib.pyplot as plt
import numpy as np

from .config import Config
from .lexicon import ABSTRACTION_LAYERS, DIMENSIONS
from .plot import PlotResult, hex_color, plot_sentences
from .positioning import AxisTripleStrategy, Point, dimension_triples

logger = logging.getLogger(__name__)

MARKER_SCALE = 1800.0  # scatter area (pt^2) per unit of word size squared
LABEL_COLOR = "white"


def _swap(point: Point) -> Tuple[float, float, float]:
    x, y, z = point
    return x, z, y


def _style_axes(ax, limit: float, title: str = ""):
    bg = Config.render.BACKGROUND
    ax.set_facecolor(bg)
    ax.set_xlim(-limit, limit)
    ax.set_ylim(-limit, limit)
    ax.set_zlim(-limit, limit)
    ax.set_box_aspect((1, 1, 1))
    ax.tick_params(colors="#888888", labelsize=6)
    for axis in (ax.xaxis, ax.yaxis, ax.zaxis):
        axis.set_pane_color((0.05, 0.05, 0.05, 1.0))
    if title:
        ax.set_title(title, color=LABEL_COLOR, fontsize=9)


def draw_layers(ax, resolution: int = 24):
    """Wireframe shells, one per abstraction layer."""
    u = np.linspace(0, 2 * np.pi, resolution)
    v = np.linspace(0, np.pi, resolution // 2)
    for layer in ABSTRACTION_LAYERS:
        r = layer.radius
        xs = r * np.outer(np.cos(u), np.sin(v))
        ys = r * np.outer(np.sin(u), np.sin(v))
        zs = r * np.outer(np.ones_like(u), np.cos(v))
        ax.plot_wireframe(
            xs, ys, zs,
            color=hex_color(layer.color),
            alpha=Config.render.LAYER_OPACITY,
            linewidth=0.5,
        )


def draw_spokes(ax):
    """One spoke per dimension along the equator, labelled at its tip."""
    length = Config.render.SPOKE_LENGTH
    for dim in DIMENSIONS:
        a = math.radians(dim.angle)
        tip = (length * math.cos(a), 0.0, length * math.sin(a))
        x, y, z = _swap(tip)
        color = hex_color(dim.color)
        ax.plot([0, x], [0, y], [0, z], color=color, alpha=0.4)
        ax.text(x * 1.1, y * 1.1, z * 1.1, f"{dim.name}\n{dim.description}",
                color=color, fontsize=7, ha="center")


def draw_words(ax, result: PlotResult, labels: bool = True):
    for a in result.words.values():
        x, y, z = _swap(a.position)
        ax.scatter([x], [y], [z], s=MARKER_SCALE * a.size ** 2,
                   color=hex_color(a.color), alpha=0.8, depthshade=False)
        if labels:
            ax.text(x, y, z + a.size + 0.3, a.word, color=LABEL_COLOR, fontsize=7, ha="center")


def draw_paths(ax, result: PlotResult):
    for path in result.paths:
        points = result.polyline(path)
        if len(points) < 2:
            continue
        xs, ys, zs = zip(*(_swap(p) for p in points))
        ax.plot(xs, ys, zs, color=hex_color(path.color), linewidth=2, alpha=0.8)


def render_sphere(result: PlotResult, show_layers: bool = True, title: Optional[str] = None):
    """Single spherical view: layer shells, dimension spokes, words and paths."""
    fig = plt.figure(figsize=Config.render.FIGSIZE, facecolor=Config.render.BACKGROUND)
    ax = fig.add_subplot(111, projection="3d")
    limit = Config.render.SPOKE_LENGTH
    _style_axes(ax, limit, title or "Concrete → Abstract Semantic Sphere")

    if show_layers:
        draw_layers(ax)
    draw_spokes(ax)
    draw_words(ax, result)
    draw_paths(ax, result)
    return fig


def render_axis_grid(
    sentences: Sequence[str],
    triples: Optional[Iterable[Tuple[str, str, str]]] = None,
    cols: int = 4,
):
    """Grid of direct 3-axis views, one subplot per dimension triple."""
    triples = list(triples) if triples is not None else dimension_triples()
    rows = max(1, math.ceil(len(triples) / cols))
    w, h = Config.render.FIGSIZE
    fig = plt.figure(figsize=(w / 2 * cols, h / 2 * rows), facecolor=Config.render.BACKGROUND)
    limit = Config.layout.VIEW_RADIUS * 1.2

    for i, axes in enumerate(triples):
        result = plot_sentences(sentences, AxisTripleStrategy(axes))
        ax = fig.add_subplot(rows, cols, i + 1, projection="3d")
        _style_axes(ax, limit, result.strategy)
        # Axis triple is drawn as given: no y/z swap
        for a in result.words.values():
            x, y, z = a.position
            ax.scatter([x], [y], [z], s=MARKER_SCALE * a.size ** 2,
                       color=hex_color(a.color), alpha=0.8, depthshade=False)
            ax.text(x, y, z, a.word, color=LABEL_COLOR, fontsize=5)
        for path in result.paths:
            points = result.polyline(path)
            if len(points) > 1:
                xs, ys, zs = zip(*points)
                ax.plot(xs, ys, zs, color=hex_color(path.color), linewidth=1, alpha=0.8)
        ax.set_xlabel(axes[0], color=LABEL_COLOR, fontsize=6)
        ax.set_ylabel(axes[1], color=LABEL_COLOR, fontsize=6)
        ax.set_zlabel(axes[2], color=LABEL_COLOR, fontsize=6)

    fig.tight_layout()
    return fig


def save_figure(fig, path: Union[str, Path], dpi: Optional[int] = None) -> Path:
    path = Path(path)
    if path.parent and not path.parent.exists():
        path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(path, dpi=dpi or Config.render.DPI, facecolor=fig.get_facecolor())
    plt.close(fig)
    logger.info(f"Visualization saved to {path}")
    return path
