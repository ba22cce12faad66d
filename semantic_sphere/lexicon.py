"""
semantic_sphere.lexicon
=======================

Hand-authored taxonomy behind the sphere.

- DIMENSIONS        : six semantic axes, each with ordered buckets of marker words
- ABSTRACTION_LAYERS: five concentric shells, checked in priority order 1 -> 5
- CONNECTOR_WORDS   : function words that are accepted in sentences but never plotted

All tables are module-level constants and must not be mutated.
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, FrozenSet, Iterable, List, Tuple


@dataclass(frozen=True)
class Bucket:
    name: str
    value: float           # fixed score in [-1, 1]
    markers: FrozenSet[str]


@dataclass(frozen=True)
class Dimension:
    name: str
    angle: float           # angular slot around the equator, degrees
    color: int
    description: str
    buckets: Tuple[Bucket, ...]

    @property
    def markers(self) -> FrozenSet[str]:
        out = set()
        for b in self.buckets:
            out |= b.markers
        return frozenset(out)


@dataclass(frozen=True)
class AbstractionLayer:
    level: int
    radius: float
    name: str
    color: int
    examples: str
    markers: FrozenSet[str]


def _bucket(name: str, value: float, words: Iterable[str]) -> Bucket:
    return Bucket(name=name, value=value, markers=frozenset(words))


# --- Dimensions ---
DIMENSIONS: Tuple[Dimension, ...] = (
    Dimension(
        name="Scale",
        angle=0.0,
        color=0xFF6B6B,
        description="Microscopic ↔ Cosmic",
        buckets=(
            _bucket("micro", -1.0, ["atom", "cell", "molecule", "bacteria", "electron", "proton"]),
            _bucket("small", -0.5, ["grain", "pebble", "insect", "leaf", "finger"]),
            _bucket("medium", 0.0, ["rock", "tree", "person", "house", "car"]),
            _bucket("large", 0.5, ["mountain", "ocean", "city", "continent", "planet"]),
            _bucket("cosmic", 1.0, ["star", "galaxy", "universe", "cosmos", "infinity"]),
        ),
    ),
    Dimension(
        name="Temporal",
        angle=60.0,
        color=0x4ECDC4,
        description="Instant ↔ Eternal",
        buckets=(
            _bucket("instant", -1.0, ["now", "moment", "flash", "instant", "second"]),
            _bucket("short", -0.5, ["minute", "hour", "day", "quick", "brief"]),
            _bucket("medium", 0.0, ["week", "month", "season", "regular"]),
            _bucket("long", 0.5, ["year", "decade", "century", "lasting", "enduring"]),
            _bucket("eternal", 1.0, ["forever", "eternal", "infinite", "timeless", "always"]),
        ),
    ),
    Dimension(
        name="Agency",
        angle=120.0,
        color=0x45B7D1,
        description="Passive ↔ Active",
        buckets=(
            _bucket("passive", -1.0, ["stone", "water", "sleep", "rest", "still", "calm", "receive"]),
            _bucket("neutral", 0.0, ["exist", "be", "have", "contain", "hold"]),
            _bucket("active", 1.0, ["run", "jump", "create", "build", "move", "action", "do", "make"]),
        ),
    ),
    Dimension(
        name="Social",
        angle=180.0,
        color=0xF9CA24,
        description="Individual ↔ Collective",
        buckets=(
            _bucket("individual", -1.0, ["i", "me", "self", "alone", "personal", "individual", "private"]),
            _bucket("small", -0.5, ["friend", "family", "pair", "couple", "partner"]),
            _bucket("group", 0.5, ["team", "group", "community", "neighborhood", "organization"]),
            _bucket("collective", 1.0, ["society", "humanity", "civilization", "culture", "public", "global"]),
        ),
    ),
    Dimension(
        name="Sensory",
        angle=240.0,
        color=0x6C5CE7,
        description="Physical ↔ Mental",
        buckets=(
            _bucket("physical", -1.0, ["touch", "feel", "hard", "soft", "hot", "cold", "taste", "smell", "see", "hear"]),
            _bucket("neutral", 0.0, ["sense", "experience", "perceive"]),
            _bucket("mental", 1.0, ["think", "believe", "know", "understand", "idea", "concept", "mind", "thought"]),
        ),
    ),
    Dimension(
        name="Causality",
        angle=300.0,
        color=0xA55EEA,
        description="Effect ↔ Cause",
        buckets=(
            _bucket("effect", -1.0, ["result", "outcome", "consequence", "end", "finish", "product"]),
            _bucket("neutral", 0.0, ["process", "change", "transform"]),
            _bucket("cause", 1.0, ["create", "make", "build", "start", "begin", "source", "origin", "reason"]),
        ),
    ),
)

DIMENSION_NAMES: Tuple[str, ...] = tuple(d.name for d in DIMENSIONS)


# --- Abstraction layers (radius from center) ---
ABSTRACTION_LAYERS: Tuple[AbstractionLayer, ...] = (
    AbstractionLayer(
        level=1, radius=1.0, name="Concrete Objects", color=0x2ECC71,
        examples="stone, apple, chair",
        markers=frozenset([
            "stone", "rock", "apple", "tree", "chair", "table", "car", "house",
            "book", "phone", "water", "fire",
        ]),
    ),
    AbstractionLayer(
        level=2, radius=2.5, name="Material States", color=0x3498DB,
        examples="sand, liquid, solid",
        markers=frozenset([
            "sand", "liquid", "solid", "gas", "metal", "wood", "plastic", "glass",
            "fabric", "paper",
        ]),
    ),
    AbstractionLayer(
        level=3, radius=4.0, name="Properties/Elements", color=0x9B59B6,
        examples="silicon, hardness, carbon",
        markers=frozenset([
            "hard", "soft", "hot", "cold", "big", "small", "fast", "slow",
            "silicon", "carbon", "oxygen", "hardness",
        ]),
    ),
    AbstractionLayer(
        level=4, radius=5.5, name="Processes/Particles", color=0xE67E22,
        examples="dust, energy, motion",
        markers=frozenset([
            "energy", "motion", "change", "growth", "dust", "particle", "wave",
            "force", "power",
        ]),
    ),
    AbstractionLayer(
        level=5, radius=7.0, name="Abstract Concepts", color=0xE74C3C,
        examples="matter, existence, reality",
        markers=frozenset([
            "love", "justice", "beauty", "truth", "existence", "reality",
            "consciousness", "infinity", "freedom", "matter",
        ]),
    ),
)

LEVELS: Tuple[int, ...] = tuple(layer.level for layer in ABSTRACTION_LAYERS)


# --- Connector words (accepted, never plotted) ---
CONNECTOR_WORDS: FrozenSet[str] = frozenset("""
    a an the this that these those
    of to in into onto on at by for from with without within through across
    over under above below between among around about after before during
    until upon toward towards against beyond near off out up down via
    and or but nor so yet if then than because while whereas although though
    is are was were been being am become becomes became becoming
    has had having does did doing done will would shall should can could
    may might must get gets got turns turned turn grow grew grown
    he him his she her hers it its they them their theirs we us our ours
    you your yours my mine myself yourself itself ourselves themselves
    who whom whose which what where when why how
    very too also just only even again once ever never not no
    here there thus soon later often sometimes quite rather almost already
    all any each every some many much more most few less least other another
    as like such same
""".split())


@lru_cache(maxsize=1)
def semantic_vocabulary() -> FrozenSet[str]:
    """Union of every layer and bucket marker word."""
    vocab = set()
    for layer in ABSTRACTION_LAYERS:
        vocab |= layer.markers
    for dim in DIMENSIONS:
        vocab |= dim.markers
    return frozenset(vocab)


def dimension(name: str) -> Dimension:
    for dim in DIMENSIONS:
        if dim.name == name:
            return dim
    raise KeyError(f"Unknown dimension: {name!r}")


def layer(level: int) -> AbstractionLayer:
    if level not in LEVELS:
        raise ValueError(f"Abstraction level must be one of {LEVELS}; got {level!r}")
    return ABSTRACTION_LAYERS[level - 1]


def vocabulary_by_layer() -> Dict[int, List[str]]:
    """Layer marker words grouped by level, sorted for display."""
    return {layer.level: sorted(layer.markers) for layer in ABSTRACTION_LAYERS}


def vocabulary_by_dimension() -> Dict[str, List[str]]:
    """Bucket marker words grouped by dimension, in bucket order."""
    out = {}
    for dim in DIMENSIONS:
        words = []
        for b in dim.buckets:
            words.extend(sorted(b.markers))
        out[dim.name] = words
    return out
