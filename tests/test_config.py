# tests/test_config.py
from semantic_sphere.config import Config


def test_to_dict_is_flat():
    data = Config.to_dict()
    assert data["layout.QUANTIZE_DECIMALS"] == 3
    assert data["layout.JITTER_MAGNITUDE"] == 0.3
    assert "classifier.MATCH_POLICY" in data
    assert all("." in k for k in data)


def test_from_dict_coerces_types():
    Config.from_dict({
        "core.DEBUG": "yes",
        "layout.VIEW_RADIUS": "2",
        "layout.QUANTIZE_DECIMALS": "2",
        "render.FIGSIZE": [4, 3],
    }, apply_env_overrides=False)
    assert Config.core.DEBUG is True
    assert Config.layout.VIEW_RADIUS == 2.0
    assert Config.layout.QUANTIZE_DECIMALS == 2
    assert Config.render.FIGSIZE == (4, 3)


def test_from_dict_ignores_unknown_keys():
    before = Config.to_dict()
    Config.from_dict({"nope": 1, "layout.NOPE": 1, "other.DEBUG": True})
    assert Config.to_dict() == before


def test_env_override_wins(monkeypatch):
    monkeypatch.setenv("SPHERE_STRATEGY", "spherical")
    Config.from_dict({"layout.STRATEGY": "axes"})
    assert Config.layout.STRATEGY != "axes"


def test_diff():
    other = Config.to_dict()
    other["layout.VIEW_RADIUS"] = 99.0
    diff = Config.diff(other)
    assert list(diff) == ["layout.VIEW_RADIUS"]
    assert diff["layout.VIEW_RADIUS"][1] == 99.0
