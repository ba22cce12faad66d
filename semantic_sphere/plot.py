"""
semantic_sphere.plot
====================

One plot pass: a list of sentences in, an immutable PlotResult out.

Each distinct semantic word is classified and placed exactly once, in the
order it is first seen; later occurrences only raise its count. Sentence
paths keep every occurrence in order. Nothing is carried over between passes.
"""

import colorsys
import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from .classifier import classify
from .collisions import CollisionResolver
from .config import Config
from .lexicon import layer
from .positioning import Point, PositionStrategy, make_strategy
from .sentences import extract_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WordAnalysis:
    word: str
    level: int
    dimensions: Mapping[str, float]
    position: Point
    count: int = 1

    @property
    def color(self) -> int:
        return layer(self.level).color

    @property
    def size(self) -> float:
        return 0.1 + self.count * 0.05

    def to_dict(self) -> Dict:
        return {
            "word": self.word,
            "level": self.level,
            "dimensions": dict(self.dimensions),
            "position": [round(c, 4) for c in self.position],
            "count": self.count,
        }


@dataclass(frozen=True)
class SentencePath:
    sentence: str
    words: Tuple[str, ...]
    color: int
    index: int = 0

    def to_dict(self) -> Dict:
        return {
            "sentence": self.sentence,
            "words": list(self.words),
            "color": hex_color(self.color),
            "index": self.index,
        }


@dataclass(frozen=True)
class PlotResult:
    words: Mapping[str, WordAnalysis] = field(default_factory=lambda: MappingProxyType({}))
    paths: Tuple[SentencePath, ...] = ()
    strategy: str = "spherical"

    def polyline(self, path: SentencePath) -> List[Point]:
        """Positions along a path; words missing from this pass are skipped."""
        return [self.words[w].position for w in path.words if w in self.words]

    def __len__(self) -> int:
        return len(self.words)

    def to_dict(self) -> Dict:
        return {
            "strategy": self.strategy,
            "words": [w.to_dict() for w in self.words.values()],
            "paths": [p.to_dict() for p in self.paths],
        }


def sentence_color(index: int) -> int:
    """Golden-ratio hue rotation keyed on the sentence's insertion index."""
    cfg = Config.render
    hue = (index * cfg.GOLDEN_RATIO_STEP) % 1
    r, g, b = colorsys.hls_to_rgb(hue, cfg.SENTENCE_LIGHTNESS, cfg.SENTENCE_SATURATION)
    return (round(r * 255) << 16) | (round(g * 255) << 8) | round(b * 255)


def hex_color(value: int) -> str:
    return f"#{value:06x}"


def plot_sentences(
    sentences: Sequence[str],
    strategy: Optional[PositionStrategy] = None,
) -> PlotResult:
    """
    Classify, place and connect the semantic words of `sentences`.

    Parameters
    ----------
    sentences : Sequence[str]
        Sentences in insertion order. The index of each one drives its color.
    strategy : PositionStrategy, optional
        Defaults to ``make_strategy()`` (``Config.layout.STRATEGY``).
    """
    strategy = strategy or make_strategy()
    resolver = CollisionResolver()

    order: List[str] = []
    counts: Dict[str, int] = {}
    paths: List[SentencePath] = []

    for index, sentence in enumerate(sentences):
        words = extract_path(sentence)
        for w in words:
            if w not in counts:
                order.append(w)
                counts[w] = 0
            counts[w] += 1
        if len(words) > 1:
            paths.append(SentencePath(
                sentence=sentence,
                words=tuple(words),
                color=sentence_color(index),
                index=index,
            ))

    analyses: Dict[str, WordAnalysis] = {}
    for w in order:
        c = classify(w)
        analyses[w] = WordAnalysis(
            word=w,
            level=c.level,
            dimensions=c.dimensions,
            position=resolver.resolve(strategy.place(c)),
            count=counts[w],
        )

    result = PlotResult(
        words=MappingProxyType(analyses),
        paths=tuple(paths),
        strategy=strategy.describe(),
    )
    if Config.core.DEBUG:
        _log_diagnostics(result, resolver)
    return result


def _log_diagnostics(result: PlotResult, resolver: CollisionResolver):
    for a in result.words.values():
        x, y, z = a.position
        logger.debug(
            f"[Plot] '{a.word}' level={a.level} count={a.count} "
            f"pos=({x:.3f}, {y:.3f}, {z:.3f}) dims={dict(a.dimensions)}"
        )
    logger.debug(
        f"[Plot] {len(result.words)} words, {len(result.paths)} paths, "
        f"{resolver.collisions()} displaced ({result.strategy})"
    )
