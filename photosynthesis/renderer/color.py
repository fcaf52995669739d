"""Terminal colours and the coloured character cell."""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple

from photosynthesis.errors import InvalidColorCode

ANSI_RESET = "\x1b[0m"


class Color(Enum):
    """Foreground colours a terminal can show.

    Each value is the ANSI SGR foreground code.
    """

    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    WHITE = 37
    DEFAULT = 39

    @property
    def ansi(self) -> str:
        return f"\x1b[{self.value}m"


# Letters used in ``.color`` asset files.
COLOR_CODES: Dict[str, Color] = {
    "r": Color.RED,
    "g": Color.GREEN,
    "y": Color.YELLOW,
    "b": Color.BLUE,
    "m": Color.MAGENTA,
    "c": Color.CYAN,
    "w": Color.WHITE,
    "d": Color.DEFAULT,
}

# Approximate RGB values for image export.
COLOR_RGB: Dict[Color, Tuple[int, int, int]] = {
    Color.RED: (205, 49, 49),
    Color.GREEN: (13, 188, 121),
    Color.YELLOW: (229, 229, 16),
    Color.BLUE: (36, 114, 200),
    Color.MAGENTA: (188, 63, 188),
    Color.CYAN: (17, 168, 205),
    Color.WHITE: (229, 229, 229),
    Color.DEFAULT: (204, 204, 204),
}


def color_of_code(code: str) -> Color:
    """Map a one-letter colour code to a :class:`Color`.

    Raises:
        InvalidColorCode: ``code`` is not one of ``r g y b m c w d``.
    """
    try:
        return COLOR_CODES[code]
    except KeyError:
        raise InvalidColorCode(code) from None


@dataclass(frozen=True)
class ColorChar:
    """One drawable cell: a glyph and the colour it is printed in."""

    glyph: str
    color: Color = Color.DEFAULT

    def ansi(self) -> str:
        return f"{self.color.ansi}{self.glyph}{ANSI_RESET}"
