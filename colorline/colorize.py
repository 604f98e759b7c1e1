from __future__ import annotations

from collections.abc import Sequence
import html
from typing import Protocol


RESET = 0
BOLD = 1
DIM = 2
ITALIC = 3
UNDERLINE = 4
BLINK = 5
REVERSE = 7

BLACK = 30
RED = 31
GREEN = 32
YELLOW = 33
BLUE = 34
MAGENTA = 35
CYAN = 36
WHITE = 37
DEFAULT = 39

BG_BLACK = 40
BG_RED = 41
BG_GREEN = 42
BG_YELLOW = 43
BG_BLUE = 44
BG_MAGENTA = 45
BG_CYAN = 46
BG_WHITE = 47

LIGHT_GRAY = 90
LIGHT_RED = 91
LIGHT_GREEN = 92
LIGHT_YELLOW = 93
LIGHT_BLUE = 94
LIGHT_MAGENTA = 95
LIGHT_CYAN = 96
LIGHT_WHITE = 97

_SGR_NAMES: dict[str, int] = {
    "reset": RESET,
    "bold": BOLD,
    "dim": DIM,
    "italic": ITALIC,
    "underline": UNDERLINE,
    "blink": BLINK,
    "reverse": REVERSE,
    "black": BLACK,
    "red": RED,
    "green": GREEN,
    "yellow": YELLOW,
    "blue": BLUE,
    "magenta": MAGENTA,
    "cyan": CYAN,
    "white": WHITE,
    "default": DEFAULT,
    "bg_black": BG_BLACK,
    "bg_red": BG_RED,
    "bg_green": BG_GREEN,
    "bg_yellow": BG_YELLOW,
    "bg_blue": BG_BLUE,
    "bg_magenta": BG_MAGENTA,
    "bg_cyan": BG_CYAN,
    "bg_white": BG_WHITE,
    "light_gray": LIGHT_GRAY,
    "light_red": LIGHT_RED,
    "light_green": LIGHT_GREEN,
    "light_yellow": LIGHT_YELLOW,
    "light_blue": LIGHT_BLUE,
    "light_magenta": LIGHT_MAGENTA,
    "light_cyan": LIGHT_CYAN,
    "light_white": LIGHT_WHITE,
}


class Colorizer(Protocol):
    def colorize(self, text: str, colors: Sequence[object] | None) -> str:
        ...


class PlainColorizer:
    def colorize(self, text: str, colors: Sequence[object] | None) -> str:
        return text


class AnsiColorizer:
    """Wrap text in a single SGR escape built from every color token."""

    def colorize(self, text: str, colors: Sequence[object] | None) -> str:
        if not colors:
            return text
        codes = ";".join(str(sgr_code(token)) for token in colors)
        return f"\x1b[{codes}m{text}\x1b[0m"


class HtmlColorizer:
    """Wrap text in a styled ``<span>``.

    The first plain token is the foreground color and the second the
    background color. Tokens containing ``:`` are used as CSS declarations.
    """

    def colorize(self, text: str, colors: Sequence[object] | None) -> str:
        escaped = html.escape(text)
        if not colors:
            return escaped
        declarations: list[str] = []
        plain = 0
        for token in colors:
            raw = str(token).strip().rstrip(";")
            if not raw:
                continue
            if ":" in raw:
                declarations.append(raw)
                continue
            if plain == 0:
                declarations.append(f"color: {raw}")
            elif plain == 1:
                declarations.append(f"background-color: {raw}")
            plain += 1
        if not declarations:
            return escaped
        style = html.escape("; ".join(declarations), quote=True)
        return f'<span style="{style}">{escaped}</span>'


COLORIZERS: dict[str, type] = {
    "ansi": AnsiColorizer,
    "html": HtmlColorizer,
    "plain": PlainColorizer,
}


def resolve_colorizer(name: str) -> Colorizer:
    key = name.strip().lower()
    if key not in COLORIZERS:
        raise ValueError(f"Unknown colorizer: {name} (expected one of {', '.join(sorted(COLORIZERS))})")
    return COLORIZERS[key]()


def sgr_code(token: object) -> int:
    if isinstance(token, bool):
        raise ValueError(f"Invalid color token: {token!r}")
    if isinstance(token, int):
        return token
    raw = str(token).strip().lower()
    if raw.isdigit():
        return int(raw)
    if raw not in _SGR_NAMES:
        raise ValueError(f"Unknown color name: {token!r}")
    return _SGR_NAMES[raw]
