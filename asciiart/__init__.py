# asciiart/__init__.py
"""
Logo catalog: resolves a distribution id to an AsciiArt, either from a directory
of text files (HYPERFETCH_ASCII_DIR or the bundled asciiart/logos/) or from the
built-in table in logos.py.
"""
import os
from typing import Mapping, NamedTuple, Optional, Sequence, Tuple

from utils import resource_path
from logger import debug
from . import logos
from .palette import palette_for_distro, render_with_palette, visible_width

ENV_ASCII_DIR = "HYPERFETCH_ASCII_DIR"
DEFAULT_ASCII_DIR = os.path.join("asciiart", "logos")
LOGO_EXT = ".txt"
SMALL_SUFFIX = "_small"

# marker for "look the directory up yourself"; None means built-in logos only
AUTO = object()


class AsciiArt(NamedTuple):
    lines: Tuple[str, ...]
    colors: Tuple[str, ...]
    width: int

    @classmethod
    def from_lines(cls, lines: Sequence[str], colors: Sequence[str]) -> "AsciiArt":
        lines = tuple(lines)
        width = max((visible_width(line) for line in lines), default=0)
        return cls(lines, tuple(colors), width)

    @property
    def primary_color(self) -> str:
        return self.colors[0] if self.colors else "white"

    def render_line(self, index: int, use_colors: bool, fallback: str) -> str:
        if index < 0 or index >= len(self.lines):
            return ""
        return render_with_palette(self.lines[index], self.colors, use_colors, fallback)

    def line_visible_width(self, index: int) -> int:
        if index < 0 or index >= len(self.lines):
            return 0
        return visible_width(self.lines[index])


def ascii_dir(env: Optional[Mapping[str, str]] = None) -> Optional[str]:
    if env is None:
        env = os.environ
    override = env.get(ENV_ASCII_DIR)
    if override and os.path.isdir(override):
        return override
    default = resource_path(DEFAULT_ASCII_DIR)
    if os.path.isdir(default):
        return default
    return None


def _read_logo_file(path: str) -> Optional[list]:
    try:
        with open(path, "r", encoding="utf-8", errors="replace", newline="") as f:
            content = f.read()
    except OSError as e:
        debug(f"cannot read logo file {path}: {e}")
        return None
    lines = [raw.rstrip("\r") for raw in content.split("\n")]
    # a trailing newline does not start another row
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def load_from_ascii_dir(distro_id: str, small: bool, directory: str) -> Optional[AsciiArt]:
    candidates = []
    if small:
        candidates.append(distro_id + SMALL_SUFFIX + LOGO_EXT)
    candidates.append(distro_id + LOGO_EXT)

    for candidate in candidates:
        path = os.path.join(directory, candidate)
        if not os.path.isfile(path):
            continue
        lines = _read_logo_file(path)
        if lines:
            debug(f"logo '{distro_id}' loaded from {path}")
            return AsciiArt.from_lines(lines, palette_for_distro(distro_id))
        debug(f"logo file {path} is empty or unreadable, skipping")
    return None


def for_distro(distro_id: Optional[str], small: bool = False, asset_dir=AUTO) -> AsciiArt:
    """
    Resolve a distribution id (case-insensitive, aliases allowed) to a logo.
    Never fails: unknown ids get the generic linux logo.
    """
    name = (distro_id or logos.FALLBACK).lower()
    directory = ascii_dir() if asset_dir is AUTO else asset_dir

    if directory:
        art = load_from_ascii_dir(name, small, directory)
        if art is not None:
            return art

    lines, colors = logos.get_small_logo(name) if small else logos.get_logo(name)
    return AsciiArt.from_lines(lines, colors)


def list_from_ascii_dir(directory: str) -> Optional[list]:
    try:
        entries = os.listdir(directory)
    except OSError as e:
        debug(f"cannot list {directory}: {e}")
        return None
    names = []
    for entry in entries:
        stem, ext = os.path.splitext(entry)
        if ext != LOGO_EXT or stem.endswith(SMALL_SUFFIX):
            continue
        names.append(stem)
    if not names:
        return None
    return sorted(names)


def list_available(asset_dir=AUTO) -> list:
    directory = ascii_dir() if asset_dir is AUTO else asset_dir
    if directory:
        names = list_from_ascii_dir(directory)
        if names:
            return names
    return list(logos.AVAILABLE_LOGOS)
