# asciiart/palette.py
"""
Palette rendering for logo templates.

Logo lines may carry two-character colour tokens:
  $1..$9   switch to palette[n-1] (fallback colour when out of range)
  $0       switch to the fallback colour
  $R / $r  reset to the fallback colour
Any other `$` is ordinary text.
"""

from typing import Sequence

from colorama import Fore, Style

TOKEN_TRIGGER = "$"
RESET_MARKERS = ("R", "r")

COLOR_CODES = {
    "black": Fore.BLACK,
    "red": Fore.RED,
    "green": Fore.GREEN,
    "yellow": Fore.YELLOW,
    "blue": Fore.BLUE,
    "magenta": Fore.MAGENTA,
    "cyan": Fore.CYAN,
    "white": Fore.WHITE,
    "bright_black": Fore.LIGHTBLACK_EX,
    "bright_red": Fore.LIGHTRED_EX,
    "bright_green": Fore.LIGHTGREEN_EX,
    "bright_yellow": Fore.LIGHTYELLOW_EX,
    "bright_blue": Fore.LIGHTBLUE_EX,
    "bright_magenta": Fore.LIGHTMAGENTA_EX,
    "bright_cyan": Fore.LIGHTCYAN_EX,
    "bright_white": Fore.LIGHTWHITE_EX,
}

_COLOR_ALIASES = {
    "purple": "magenta",
    "bright_purple": "bright_magenta",
}


def _is_digit(ch: str) -> bool:
    # str.isdigit() accepts superscripts and other unicode digits
    return "0" <= ch <= "9"


def strip_color_tokens(line: str) -> str:
    out = []
    i = 0
    n = len(line)
    while i < n:
        ch = line[i]
        if ch == TOKEN_TRIGGER and i + 1 < n:
            nxt = line[i + 1]
            if _is_digit(nxt) or nxt in RESET_MARKERS:
                i += 2
                continue
        out.append(ch)
        i += 1
    return "".join(out)


def visible_width(line: str) -> int:
    return len(strip_color_tokens(line))


def colorize(text: str, color: str) -> str:
    code = COLOR_CODES.get(color)
    if not code:
        return text
    return f"{code}{text}{Style.RESET_ALL}"


def render_with_palette(line: str, palette: Sequence[str], use_colors: bool, fallback: str) -> str:
    """
    Turn one template line into terminal text.

    With colours off the tokens are simply stripped. With colours on the line is
    split into runs at each token and every non-empty run is wrapped in the
    colour that was current when it started.
    """
    if not use_colors:
        return strip_color_tokens(line)

    out = []
    buffer = []
    current = palette[0] if palette else fallback

    def flush():
        if buffer:
            out.append(colorize("".join(buffer), current))
            buffer.clear()

    i = 0
    n = len(line)
    while i < n:
        ch = line[i]
        if ch == TOKEN_TRIGGER and i + 1 < n:
            nxt = line[i + 1]
            if _is_digit(nxt):
                flush()
                idx = int(nxt)
                if idx == 0 or idx > len(palette):
                    current = fallback
                else:
                    current = palette[idx - 1]
                i += 2
                continue
            if nxt in RESET_MARKERS:
                flush()
                current = fallback
                i += 2
                continue
        buffer.append(ch)
        i += 1

    flush()
    return "".join(out)


def parse_color(name: str, default: str = "cyan") -> str:
    """Normalise a user supplied colour name ("BrightRed", "bright-red", "purple")."""
    if not name:
        return default
    key = name.strip().lower().replace("-", "_").replace(" ", "_")
    if key.startswith("bright") and not key.startswith("bright_"):
        key = "bright_" + key[len("bright"):]
    key = _COLOR_ALIASES.get(key, key)
    return key if key in COLOR_CODES else default


def _pair(a, b):
    return [a, b, a, b, a, b]


_DISTRO_PALETTES = {
    ("gentoo",): _pair("magenta", "white"),
    ("macos", "macosx", "osx", "darwin"): _pair("yellow", "white"),
    ("arch", "archlinux"): _pair("cyan", "blue"),
    ("debian",): _pair("red", "white"),
    ("ubuntu",): _pair("red", "white"),
    ("fedora",): _pair("blue", "white"),
    ("nixos",): _pair("cyan", "blue"),
    ("alpine",): _pair("blue", "white"),
    ("manjaro",): _pair("green", "white"),
    ("endeavouros",): _pair("magenta", "cyan"),
    ("pop", "pop_os", "pop!_os"): _pair("cyan", "white"),
    ("mint", "linuxmint"): _pair("green", "white"),
    ("elementary", "elementaryos"): _pair("white", "cyan"),
    ("zorin", "zorinos"): _pair("blue", "white"),
    ("kali",): _pair("blue", "white"),
    ("parrot", "parrotos"): _pair("green", "cyan"),
    ("slackware",): _pair("blue", "white"),
    ("void", "voidlinux"): _pair("green", "white"),
}

PALETTES = {name: colors for names, colors in _DISTRO_PALETTES.items() for name in names}
DEFAULT_PALETTE = _pair("cyan", "white")


def palette_for_distro(distro_id: str) -> list:
    """Colours for logos loaded from text files, which carry no palette of their own."""
    return list(PALETTES.get(distro_id, DEFAULT_PALETTE))
