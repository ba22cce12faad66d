"""Plotly figure for the interactive app (mouse rotate / wheel zoom come with plotly)."""

import math
from typing import List

import numpy as np
import plotly.graph_objs as go

from .config import Config
from .lexicon import ABSTRACTION_LAYERS, DIMENSIONS
from .plot import PlotResult, hex_color


def _shell_lines(radius: float, n_meridians: int = 12, n_parallels: int = 6, n_points: int = 48):
    """Wireframe sphere as a single polyline with None breaks."""
    xs: List = []
    ys: List = []
    zs: List = []
    t = np.linspace(0, 2 * np.pi, n_points)
    for k in range(n_meridians):
        phi = k * np.pi / n_meridians
        xs.extend(list(radius * np.cos(t) * np.cos(phi)) + [None])
        ys.extend(list(radius * np.sin(t)) + [None])
        zs.extend(list(radius * np.cos(t) * np.sin(phi)) + [None])
    for k in range(1, n_parallels):
        el = -np.pi / 2 + k * np.pi / n_parallels
        r = radius * np.cos(el)
        xs.extend(list(r * np.cos(t)) + [None])
        ys.extend([radius * np.sin(el)] * n_points + [None])
        zs.extend(list(r * np.sin(t)) + [None])
    return xs, ys, zs


def layer_traces() -> List[go.Scatter3d]:
    traces = []
    for layer in ABSTRACTION_LAYERS:
        xs, ys, zs = _shell_lines(layer.radius)
        traces.append(go.Scatter3d(
            x=xs, y=ys, z=zs,
            mode="lines",
            line=dict(color=hex_color(layer.color), width=1),
            opacity=Config.render.LAYER_OPACITY * 3,
            name=f"{layer.level}. {layer.name}",
            hoverinfo="skip",
        ))
    return traces


def spoke_traces() -> List[go.Scatter3d]:
    length = Config.render.SPOKE_LENGTH
    traces = []
    for dim in DIMENSIONS:
        a = math.radians(dim.angle)
        x, z = length * math.cos(a), length * math.sin(a)
        traces.append(go.Scatter3d(
            x=[0, x, x * 1.1], y=[0, 0, 0], z=[0, z, z * 1.1],
            mode="lines+text",
            text=["", "", dim.name],
            line=dict(color=hex_color(dim.color), width=3),
            textfont=dict(color=hex_color(dim.color), size=11),
            name=f"{dim.name}: {dim.description}",
            hoverinfo="name",
        ))
    return traces


def word_trace(result: PlotResult) -> go.Scatter3d:
    words = list(result.words.values())
    return go.Scatter3d(
        x=[w.position[0] for w in words],
        y=[w.position[1] for w in words],
        z=[w.position[2] for w in words],
        mode="markers+text",
        text=[w.word for w in words],
        textposition="top center",
        textfont=dict(color="white", size=10),
        marker=dict(
            size=[w.size * 60 for w in words],
            color=[hex_color(w.color) for w in words],
            opacity=0.8,
        ),
        hovertext=[
            f"{w.word}<br>level {w.level} · count {w.count}<br>"
            + "<br>".join(f"{k}: {v:+.1f}" for k, v in w.dimensions.items())
            for w in words
        ],
        hoverinfo="text",
        name="words",
    )


def path_traces(result: PlotResult) -> List[go.Scatter3d]:
    traces = []
    for path in result.paths:
        points = result.polyline(path)
        if len(points) < 2:
            continue
        xs, ys, zs = zip(*points)
        traces.append(go.Scatter3d(
            x=xs, y=ys, z=zs,
            mode="lines",
            line=dict(color=hex_color(path.color), width=5),
            opacity=0.8,
            name=path.sentence,
            hoverinfo="name",
        ))
    return traces


def build_figure(result: PlotResult, show_layers: bool = True) -> go.Figure:
    data = []
    if show_layers:
        data.extend(layer_traces())
    data.extend(spoke_traces())
    if result.words:
        data.append(word_trace(result))
        data.extend(path_traces(result))

    limit = Config.render.SPOKE_LENGTH * 1.15
    axis = dict(range=[-limit, limit], showbackground=False, color="#666666")
    fig = go.Figure(data=data)
    fig.update_layout(
        paper_bgcolor=Config.render.BACKGROUND,
        font=dict(color="white"),
        showlegend=False,
        margin=dict(l=0, r=0, t=0, b=0),
        # y is "up" on the sphere
        scene=dict(
            xaxis=axis, yaxis=axis, zaxis=axis,
            aspectmode="cube",
            camera=dict(up=dict(x=0, y=1, z=0), eye=dict(x=1.2, y=0.8, z=1.2)),
        ),
    )
    return fig
