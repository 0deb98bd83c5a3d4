"""Colours used to highlight commands."""

from __future__ import annotations

from dataclasses import dataclass

NO_COLOR = 0x00000000

COLOR_PURPLE = 0xFFC586C0
COLOR_ORANGE = 0xFFCE9178
COLOR_LIGHT_BLUE = 0xFF9CDCFE
COLOR_BLUE = 0xFF179FFF
COLOR_LIGHT_GREEN = 0xFFB5CEA8
COLOR_GREEN = 0xFF4EC9B0
COLOR_LIGHT_YELLOW = 0xFFDCDCAA
COLOR_YELLOW = 0xFFFFD700


@dataclass(frozen=True)
class Theme:
    """ARGB colours for each kind of command element."""

    color_boolean: int = COLOR_LIGHT_GREEN
    color_float: int = COLOR_LIGHT_GREEN
    color_integer: int = COLOR_LIGHT_GREEN
    color_symbol: int = COLOR_LIGHT_GREEN
    color_id: int = COLOR_LIGHT_YELLOW
    color_target_selector: int = COLOR_GREEN
    color_command: int = COLOR_PURPLE
    color_brackets1: int = COLOR_YELLOW
    color_brackets2: int = COLOR_PURPLE
    color_brackets3: int = COLOR_BLUE
    color_string: int = COLOR_ORANGE
    color_null: int = COLOR_LIGHT_BLUE
    color_range: int = COLOR_LIGHT_BLUE
    color_literal: int = COLOR_LIGHT_BLUE