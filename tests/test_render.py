# tests/test_render.py
import matplotlib.pyplot as plt
import plotly.graph_objs as go

from semantic_sphere.interactive import build_figure
from semantic_sphere.lexicon import ABSTRACTION_LAYERS, DIMENSIONS
from semantic_sphere.plot import PlotResult, plot_sentences
from semantic_sphere.render import render_axis_grid, render_sphere, save_figure


def test_render_sphere_and_save(tmp_path, journeys):
    result = plot_sentences(journeys)
    fig = render_sphere(result)
    ax = fig.axes[0]
    # One line per spoke plus one per drawn path
    assert len(ax.lines) == len(DIMENSIONS) + len(result.paths)

    out = save_figure(fig, tmp_path / "figs" / "sphere.png")
    assert out.exists()
    assert out.stat().st_size > 0
    assert not plt.fignum_exists(fig.number)


def test_render_without_layers(journeys):
    result = plot_sentences(journeys)
    with_layers = render_sphere(result)
    without = render_sphere(result, show_layers=False)
    assert len(with_layers.axes[0].collections) == len(without.axes[0].collections) + len(ABSTRACTION_LAYERS)
    plt.close("all")


def test_render_empty_result():
    fig = render_sphere(PlotResult())
    assert len(fig.axes) == 1
    plt.close(fig)


def test_axis_grid(journeys):
    triples = [("Scale", "Temporal", "Agency"), ("Social", "Sensory", "Causality")]
    fig = render_axis_grid(journeys, triples, cols=2)
    assert len(fig.axes) == 2
    assert fig.axes[0].get_title() == "Scale × Temporal × Agency"
    plt.close(fig)


def test_plotly_figure(journeys):
    result = plot_sentences(journeys)
    fig = build_figure(result)
    assert isinstance(fig, go.Figure)
    names = [t.name for t in fig.data]
    assert "words" in names
    assert len(fig.data) == len(ABSTRACTION_LAYERS) + len(DIMENSIONS) + 1 + len(result.paths)

    words = next(t for t in fig.data if t.name == "words")
    assert list(words.text) == list(result.words)


def test_plotly_figure_without_words():
    fig = build_figure(PlotResult(), show_layers=False)
    assert len(fig.data) == len(DIMENSIONS)


def _load_script():
    import importlib.util
    from pathlib import Path

    path = Path(__file__).resolve().parents[1] / "scripts" / "render_sphere.py"
    spec = importlib.util.spec_from_file_location("render_sphere", path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_render_script(tmp_path, monkeypatch):
    script = _load_script()
    out = tmp_path / "cli.png"
    monkeypatch.setattr("sys.argv", ["render_sphere.py", "-s", "The stone became sand", "--out", str(out)])
    assert script.main() == 0
    assert out.exists()


def test_render_script_rejects_unmapped(tmp_path, monkeypatch, capsys):
    script = _load_script()
    monkeypatch.setattr("sys.argv", ["render_sphere.py", "-s", "The stone became a spaceship",
                                     "--out", str(tmp_path / "x.png")])
    assert script.main() == 1
    assert "spaceship" in capsys.readouterr().err
