# tests/test_classifier.py
import pytest

from semantic_sphere.classifier import (
    abstraction_level,
    classify,
    dimension_score,
    fallback_level,
    matches,
)
from semantic_sphere.config import Config
from semantic_sphere.lexicon import DIMENSION_NAMES, dimension, semantic_vocabulary

ALLOWED_SCORES = {-1.0, -0.5, 0.0, 0.5, 1.0}


def test_atom_is_micro_and_otherwise_neutral():
    c = classify("atom")
    assert c.dimensions["Scale"] == -1.0
    for name in DIMENSION_NAMES:
        if name != "Scale":
            assert c.dimensions[name] == 0.0, name
    # Not in any layer, no abstract suffix
    assert c.level == Config.classifier.DEFAULT_LEVEL


def test_star_is_cosmic():
    assert classify("star").dimensions["Scale"] == 1.0


@pytest.mark.parametrize("word,level", [
    ("stone", 1),
    ("sand", 2),
    ("silicon", 3),
    ("dust", 4),
    ("matter", 5),
    ("truth", 5),
])
def test_layer_markers(word, level):
    assert classify(word).level == level


def test_first_layer_wins():
    # "water" is only concrete; "hard" is level 3 even though it is also physical
    assert abstraction_level("water") == 1
    assert abstraction_level("hard") == 3


@pytest.mark.parametrize("word,level", [
    ("kindness", 5),
    ("curiosity", 5),
    ("realism", 5),
    ("motivation", 5),
    ("walking", 4),
    ("jumped", 4),
    ("quickly", 3),
    ("galaxy", 3),
])
def test_suffix_fallback(word, level):
    assert fallback_level(word) == level


def test_default_level_follows_config():
    Config.classifier.DEFAULT_LEVEL = 2
    assert classify("galaxy").level == 2


def test_input_is_normalized():
    c = classify("  Star ")
    assert c.word == "star"
    assert c.dimensions["Scale"] == 1.0


def test_first_bucket_wins_within_dimension():
    # "create" is active agency and a cause
    c = classify("create")
    assert c.dimensions["Agency"] == 1.0
    assert c.dimensions["Causality"] == 1.0


def test_social_buckets():
    assert dimension_score("i", dimension("Social")) == -1.0
    assert dimension_score("family", dimension("Social")) == -0.5
    assert dimension_score("team", dimension("Social")) == 0.5
    assert dimension_score("humanity", dimension("Social")) == 1.0


def test_unknown_word_is_neutral():
    c = classify("zzyzx")
    assert all(v == 0.0 for v in c.dimensions.values())
    assert c.level in (1, 2, 3, 4, 5)


def test_every_vocabulary_word_respects_invariants():
    for w in semantic_vocabulary():
        c = classify(w)
        assert c.level in (1, 2, 3, 4, 5), w
        assert set(c.dimensions) == set(DIMENSION_NAMES)
        assert set(c.dimensions.values()) <= ALLOWED_SCORES, w


def test_classify_is_deterministic():
    for w in ["stone", "atom", "humanity", "walking"]:
        assert classify(w) == classify(w)


class TestMatchPolicy:
    def test_whole_word_does_not_match_inside(self):
        assert not matches("scare", frozenset(["car"]), "whole")
        assert abstraction_level("rockery", "whole") != 1

    def test_substring_matches_inside(self):
        assert matches("scare", frozenset(["car"]), "substring")
        assert abstraction_level("rockery", "substring") == 1

    def test_policy_from_config(self):
        Config.classifier.MATCH_POLICY = "substring"
        assert classify("rocks").level == 1
        Config.classifier.MATCH_POLICY = "whole"
        assert classify("rocks").level != 1

    def test_unknown_policy(self):
        with pytest.raises(ValueError):
            classify("stone", policy="fuzzy")


class TestDefaultLevelRange:
    def test_out_of_range_default_never_escapes(self, caplog):
        Config.classifier.DEFAULT_LEVEL = 7
        c = classify("galaxy")
        assert c.level in (1, 2, 3, 4, 5)
        assert "DEFAULT_LEVEL 7" in caplog.text

    def test_plot_survives_bad_default(self):
        from semantic_sphere.plot import plot_sentences

        Config.classifier.DEFAULT_LEVEL = 0
        result = plot_sentences(["galaxy star"])
        assert {a.level for a in result.words.values()} <= {1, 2, 3, 4, 5}

    @pytest.mark.parametrize("level", [0, 6, -1, "9"])
    def test_from_dict_rejects_out_of_range(self, level):
        with pytest.raises(ValueError):
            Config.from_dict({"classifier.DEFAULT_LEVEL": level}, apply_env_overrides=False)
        assert Config.classifier.DEFAULT_LEVEL in (1, 2, 3, 4, 5)

    def test_section_rejects_out_of_range(self):
        from semantic_sphere.config import ClassifierConfig

        with pytest.raises(ValueError):
            ClassifierConfig(DEFAULT_LEVEL=8)
        assert ClassifierConfig(DEFAULT_LEVEL=5).DEFAULT_LEVEL == 5
