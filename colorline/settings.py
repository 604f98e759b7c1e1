from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
import tomllib
from typing import Any, Callable, Mapping

from colorline.colorize import AnsiColorizer, Colorizer, resolve_colorizer


DEFAULT_OFFSET = 10
DEFAULT_DECIMALS = 2

LabelFormat = Callable[[float, "Settings"], str]


def default_label_format(value: float, settings: "Settings") -> str:
    out = f"{value:.{settings.decimals}f}"
    if out.startswith("-") and float(out) == 0.0:
        out = out[1:]
    return out


@dataclass
class Settings:
    """Rendering options shared by a chart and the canvas it produces.

    ``height`` is the target plot height in rows for the full data range. When
    it is left unset the data range itself is used (one row per unit), which
    the renderer publishes through ``set_computed_height`` before scaling.
    """

    height: int | None = None
    offset: int = DEFAULT_OFFSET
    width: int | None = None
    decimals: int = DEFAULT_DECIMALS
    format: LabelFormat = default_label_format
    colorizer: Colorizer = field(default_factory=AnsiColorizer)
    computed_height: float | None = None

    def __post_init__(self) -> None:
        if self.height is not None and int(self.height) <= 0:
            raise ValueError("height must be > 0")
        if int(self.offset) < 2:
            raise ValueError("offset must be >= 2 to fit a label and the axis tick")
        if self.width is not None and int(self.width) <= 0:
            raise ValueError("width must be > 0")
        if not 0 <= int(self.decimals) <= 12:
            raise ValueError("decimals must be within 0..12")

    def get_height(self) -> float:
        if self.height is not None:
            return float(self.height)
        if self.computed_height is None:
            raise ValueError("height is unset and no computed height is available")
        return float(self.computed_height)

    def set_height(self, height: int | None) -> Settings:
        if height is not None and int(height) <= 0:
            raise ValueError("height must be > 0")
        self.height = height
        return self

    def set_computed_height(self, value: float) -> Settings:
        self.computed_height = value
        return self

    def get_offset(self) -> int:
        return int(self.offset)

    def set_offset(self, offset: int) -> Settings:
        if int(offset) < 2:
            raise ValueError("offset must be >= 2 to fit a label and the axis tick")
        self.offset = int(offset)
        return self

    def get_width(self) -> int | None:
        return self.width

    def get_format(self) -> LabelFormat:
        return self.format

    def set_format(self, fmt: LabelFormat) -> Settings:
        self.format = fmt
        return self

    def get_colorizer(self) -> Colorizer:
        return self.colorizer

    def set_colorizer(self, colorizer: Colorizer) -> Settings:
        self.colorizer = colorizer
        return self


_SETTING_KEYS = ("height", "offset", "width", "decimals", "colorizer")


def settings_from_mapping(raw: Mapping[str, Any]) -> Settings:
    for key in raw:
        if key not in _SETTING_KEYS:
            raise ValueError(f"Unknown chart setting: {key}")

    kwargs: dict[str, Any] = {}
    for key in ("height", "offset", "width", "decimals"):
        if key not in raw:
            continue
        value = raw[key]
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"Setting `{key}` must be an integer")
        kwargs[key] = value

    if "colorizer" in raw:
        if not isinstance(raw["colorizer"], str):
            raise ValueError("Setting `colorizer` must be a string")
        kwargs["colorizer"] = resolve_colorizer(raw["colorizer"])
    return Settings(**kwargs)


def load_settings(path: str | Path) -> Settings:
    with Path(path).open("rb") as f:
        document = tomllib.load(f)
    table = document.get("chart", {})
    if not isinstance(table, dict):
        raise ValueError("`chart` must be a TOML table")
    return settings_from_mapping(table)
