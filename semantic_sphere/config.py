import os
from dataclasses import dataclass, fields
from typing import Dict, Any, Tuple

from .lexicon import LEVELS


def check_level(level: int) -> int:
    if level not in LEVELS:
        raise ValueError(f"DEFAULT_LEVEL must be one of {LEVELS}; got {level!r}")
    return level


@dataclass
class CoreConfig:
    # Emits per-word diagnostics after each plot pass
    DEBUG: bool = os.getenv("SPHERE_DEBUG", "0") == "1"


@dataclass
class ClassifierConfig:
    # "whole" compares tokens to markers, "substring" tests marker containment
    MATCH_POLICY: str = os.getenv("SPHERE_MATCH_POLICY", "whole")
    # Level for words that match no layer marker and no suffix rule
    DEFAULT_LEVEL: int = int(os.getenv("SPHERE_DEFAULT_LEVEL", "3"))

    def __post_init__(self):
        check_level(self.DEFAULT_LEVEL)


@dataclass
class LayoutConfig:
    # "spherical" (single view) or "axes" (direct 3-axis view)
    STRATEGY: str = os.getenv("SPHERE_STRATEGY", "spherical")
    VIEW_RADIUS: float = float(os.getenv("SPHERE_VIEW_RADIUS", "5.0"))
    ELEVATION_AMPLITUDE: float = 0.3  # fraction of pi

    # Collision jitter
    QUANTIZE_DECIMALS: int = 3
    JITTER_MAGNITUDE: float = 0.3
    JITTER_STEP: float = 0.1
    JITTER_ANGLE_DEG: float = 60.0


@dataclass
class RenderConfig:
    BACKGROUND: str = "#0a0a0a"
    FIGSIZE: Tuple[float, float] = (9.0, 7.0)
    DPI: int = int(os.getenv("SPHERE_DPI", "120"))
    SPOKE_LENGTH: float = 8.0
    LAYER_OPACITY: float = 0.1
    SENTENCE_SATURATION: float = 0.9
    SENTENCE_LIGHTNESS: float = 0.6
    GOLDEN_RATIO_STEP: float = 0.618


class Config:
    """Centralized configuration."""
    core = CoreConfig()
    classifier = ClassifierConfig()
    layout = LayoutConfig()
    render = RenderConfig()

    _SECTIONS = ("core", "classifier", "layout", "render")

    @classmethod
    def to_dict(cls) -> Dict[str, Any]:
        """Serialize all config sections to a flat dictionary."""
        result = {}
        for section_name in cls._SECTIONS:
            section = getattr(cls, section_name)
            for f in fields(section):
                key = f"{section_name}.{f.name}"
                result[key] = getattr(section, f.name)
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any], apply_env_overrides: bool = True):
        """
        Update config from a flat dictionary.
        If apply_env_overrides is True, environment variables take precedence.
        """
        for key, value in data.items():
            if "." not in key:
                continue
            section_name, field_name = key.split(".", 1)
            if section_name not in cls._SECTIONS:
                continue
            section = getattr(cls, section_name)
            if not hasattr(section, field_name):
                continue

            env_key = f"SPHERE_{field_name}"
            if apply_env_overrides and env_key in os.environ:
                continue

            current_value = getattr(section, field_name)
            if isinstance(current_value, bool):
                value = str(value).lower() in ("1", "true", "yes")
            elif isinstance(current_value, int):
                value = int(value)
            elif isinstance(current_value, float):
                value = float(value)
            elif isinstance(current_value, tuple):
                value = tuple(value)

            if (section_name, field_name) == ("classifier", "DEFAULT_LEVEL"):
                check_level(value)

            setattr(section, field_name, value)

    @classmethod
    def diff(cls, other_dict: Dict[str, Any]) -> Dict[str, tuple]:
        """
        Compare current config with another dict.
        Returns dict of {key: (current_value, other_value)} for differences.
        """
        current = cls.to_dict()
        differences = {}
        for key in set(current.keys()) | set(other_dict.keys()):
            curr_val = current.get(key)
            other_val = other_dict.get(key)
            if curr_val != other_val:
                differences[key] = (curr_val, other_val)
        return differences
