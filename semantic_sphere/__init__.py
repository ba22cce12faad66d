"""Public package interface for the semantic sphere."""

from .classifier import Classification, classify
from .plot import PlotResult, SentencePath, WordAnalysis, plot_sentences
from .positioning import AxisTripleStrategy, PositionStrategy, SphericalStrategy, make_strategy
from .sentences import UnmappedWordsError, extract_path, validate_sentence

__all__ = [
    "Classification",
    "classify",
    "PlotResult",
    "SentencePath",
    "WordAnalysis",
    "plot_sentences",
    "PositionStrategy",
    "SphericalStrategy",
    "AxisTripleStrategy",
    "make_strategy",
    "UnmappedWordsError",
    "extract_path",
    "validate_sentence",
]
