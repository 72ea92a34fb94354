"""ANSI styling for the interactive shell.

Color is on only for a terminal (or FORCE_COLOR=1) and off whenever NO_COLOR
is set. 24-bit escapes are used when COLORTERM advertises them, otherwise
the nearest xterm-256 cube entry. Palette entries can be overridden from the
environment or the project .env file.
"""
from __future__ import annotations
import os, sys
from typing import Mapping, TextIO
from settings import read_env_file

PALETTE_DEFAULTS = {
    'COURSEDB_PRIMARY': '#476EAE',
    'COURSEDB_CRN': '#48B3AF',
    'COURSEDB_WARN': '#F6FF99',
}


def color_enabled(environ: Mapping[str, str], stream: TextIO) -> bool:
    if environ.get("NO_COLOR") is not None:
        return False
    forced = environ.get("FORCE_COLOR", "").lower() in {"1", "true", "yes", "on"}
    return forced or stream.isatty()


def _valid_hex(value: str) -> bool:
    digits = value.lstrip('#')
    return len(digits) == 6 and all(c in '0123456789abcdefABCDEF' for c in digits)


def escape_for(hex_code: str, truecolor: bool) -> str:
    """Foreground escape sequence for a #rrggbb color."""
    digits = hex_code.lstrip('#')
    r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
    if truecolor:
        return f"\033[38;2;{r};{g};{b}m"
    cube = [int(round(x / 255 * 5)) for x in (r, g, b)]
    return f"\033[38;5;{16 + 36 * cube[0] + 6 * cube[1] + cube[2]}m"


_ENABLE = color_enabled(os.environ, sys.stdout)
_TRUECOLOR = _ENABLE and any(tok in os.environ.get("COLORTERM", "").lower()
                             for tok in ("truecolor", "24bit"))
_ENV_OVERRIDES = {k: v for k, v in read_env_file(keys=PALETTE_DEFAULTS).items() if _valid_hex(v)}


def _palette(key: str) -> str:
    """Real env var, then .env, then default; '' when color is off."""
    if not _ENABLE:
        return ''
    value = os.environ.get(key)
    if not (value and _valid_hex(value)):
        value = _ENV_OVERRIDES.get(key, PALETTE_DEFAULTS[key])
    return escape_for(value, _TRUECOLOR)


RESET = "\033[0m" if _ENABLE else ''
BOLD = "\033[1m" if _ENABLE else ''
DIM = "\033[2m" if _ENABLE else ''

HEADER_COLOR = _palette('COURSEDB_PRIMARY') + BOLD
CRN_COLOR = _palette('COURSEDB_CRN') + BOLD
WARN_COLOR = _palette('COURSEDB_WARN')
EMPTY_COLOR = DIM + _palette('COURSEDB_PRIMARY')


def color(text: str, *styles: str) -> str:
    """Wrap text in the given styles (no-op when color is off)."""
    if not _ENABLE:
        return text
    return ''.join(styles) + text + RESET


__all__ = [
    'color', 'color_enabled', 'escape_for', 'RESET', 'BOLD', 'DIM',
    'HEADER_COLOR', 'CRN_COLOR', 'WARN_COLOR', 'EMPTY_COLOR',
]
