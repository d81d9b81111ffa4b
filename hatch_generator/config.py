"""Settings for the hatch-generator command line."""

import json
import math
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Tuple

from .geometry import Point, Rectangle


class ConfigError(ValueError):
    """Raised for unreadable or invalid settings files."""


@dataclass(frozen=True)
class HatchSettings:
    """Defaults for a hatch run, matching the reference 20x10 example."""
    angle: float = 45.0
    step: float = 1.0
    rect: Tuple[float, float, float, float] = (0.0, 0.0, 20.0, 10.0)
    output: str = "hatch.svg"
    scale: float = 10.0
    width: str = "300"
    height: str = "200"
    stroke: str = "black"
    stroke_width: str = "0.5"
    outline_stroke: str = "red"
    outline_width: str = "1"
    angle_tolerance: float = 0.0
    compact: bool = False

    def rectangle(self) -> Rectangle:
        x0, y0, x1, y1 = self.rect
        return Rectangle.from_corners(Point(x0, y0), Point(x1, y1))

    def with_overrides(self, **overrides: Any) -> "HatchSettings":
        """Return a copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def _number(name: str, value: Any) -> float:
    # bool is an int subclass but never a valid measurement
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"{name} must be a number, got {value!r}")
    try:
        number = float(value)
    except OverflowError:
        number = math.inf
    if not math.isfinite(number):
        raise ConfigError(f"{name} must be finite, got {value!r}")
    return number


def _coerce(name: str, kind: Any, value: Any) -> Any:
    if name == "rect":
        if not isinstance(value, (list, tuple)) or len(value) != 4:
            raise ConfigError("rect must be a list of four numbers: x0, y0, x1, y1")
        return tuple(_number(name, v) for v in value)
    if kind is float:
        return _number(name, value)
    if kind is bool:
        if not isinstance(value, bool):
            raise ConfigError(f"{name} must be true or false, got {value!r}")
        return value
    if not isinstance(value, str):
        raise ConfigError(f"{name} must be a string, got {value!r}")
    return value


def settings_from_dict(data: Dict[str, Any]) -> HatchSettings:
    kinds = {f.name: f.type for f in fields(HatchSettings)}
    unknown = sorted(set(data) - set(kinds))
    if unknown:
        raise ConfigError(f"unknown setting(s): {', '.join(unknown)}")

    values = {name: _coerce(name, kinds[name], value) for name, value in data.items()}
    return HatchSettings().with_overrides(**values)


def load_settings(config_filepath: str) -> HatchSettings:
    """Load settings from a JSON object keyed by HatchSettings field names."""
    try:
        with open(config_filepath) as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"{config_filepath}: invalid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"{config_filepath}: expected a JSON object")

    return settings_from_dict(data)
