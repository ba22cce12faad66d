"""
semantic_sphere.classifier
==========================

Assigns a word its abstraction level (1-5) and a score per dimension.

Every lookup follows the same rule: walk an ordered list of buckets, the
first bucket holding a matching marker wins, no match falls back to a default.
The function never fails on a non-empty word.
"""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import FrozenSet, Mapping, Optional

from .config import Config
from .lexicon import ABSTRACTION_LAYERS, DIMENSIONS, LEVELS, Dimension

logger = logging.getLogger(__name__)

MATCH_POLICIES = ("whole", "substring")

# Checked in order; first matching suffix decides the level
SUFFIX_LEVELS = (
    (("ness", "ity", "ism", "tion"), 5),
    (("ing", "ed"), 4),
    (("ly",), 3),
)


@dataclass(frozen=True)
class Classification:
    word: str
    level: int
    dimensions: Mapping[str, float] = field(default_factory=dict)

    def to_dict(self):
        return {
            "word": self.word,
            "level": self.level,
            "dimensions": dict(self.dimensions),
        }


def _resolve_policy(policy: Optional[str]) -> str:
    policy = policy or Config.classifier.MATCH_POLICY
    if policy not in MATCH_POLICIES:
        raise ValueError(f"Unknown match policy {policy!r}; expected one of {MATCH_POLICIES}")
    return policy


def matches(word: str, markers: FrozenSet[str], policy: Optional[str] = None) -> bool:
    """True if `word` hits any marker under the given match policy."""
    if _resolve_policy(policy) == "whole":
        return word in markers
    return any(m in word for m in markers)


def fallback_level(word: str) -> int:
    """Suffix heuristic for words absent from every layer."""
    for suffixes, level in SUFFIX_LEVELS:
        if word.endswith(suffixes):
            return level
    default = Config.classifier.DEFAULT_LEVEL
    if default not in LEVELS:
        logger.warning(f"DEFAULT_LEVEL {default!r} is outside {LEVELS}; using 3")
        return 3
    return default


def abstraction_level(word: str, policy: Optional[str] = None) -> int:
    word = word.strip().lower()
    policy = _resolve_policy(policy)
    for layer in ABSTRACTION_LAYERS:
        if matches(word, layer.markers, policy):
            return layer.level
    return fallback_level(word)


def dimension_score(word: str, dim: Dimension, policy: Optional[str] = None) -> float:
    word = word.strip().lower()
    policy = _resolve_policy(policy)
    for bucket in dim.buckets:
        if matches(word, bucket.markers, policy):
            return bucket.value
    return 0.0


def classify(word: str, policy: Optional[str] = None) -> Classification:
    """
    Classify a single word.

    Parameters
    ----------
    word : str
        Any non-empty token. It is lowercased and stripped first.
    policy : str, optional
        "whole" or "substring". Defaults to ``Config.classifier.MATCH_POLICY``.

    Returns
    -------
    Classification
        Level in 1..5 and one score per dimension, each in [-1, 1].
    """
    w = word.strip().lower()
    policy = _resolve_policy(policy)
    scores = {dim.name: dimension_score(w, dim, policy) for dim in DIMENSIONS}
    return Classification(
        word=w,
        level=abstraction_level(w, policy),
        dimensions=MappingProxyType(scores),
    )
