# layout.py
from typing import List, Sequence

from asciiart import AsciiArt

# gap between the logo column and the info column
COLUMN_GAP = 2


def compose(art: AsciiArt, info_lines: Sequence[str], use_colors: bool, fallback: str) -> List[str]:
    """Place the rendered logo to the left of the info lines, one output row per line."""
    column_width = art.width + COLUMN_GAP
    rows = []
    for i in range(max(len(art.lines), len(info_lines))):
        if i < len(art.lines):
            padding = max(column_width - art.line_visible_width(i), 0)
            left = art.render_line(i, use_colors, fallback) + " " * padding
        else:
            left = " " * column_width
        right = info_lines[i] if i < len(info_lines) else ""
        rows.append(left + right)
    return rows


def logo_lines(art: AsciiArt, use_colors: bool, fallback: str) -> List[str]:
    return [art.render_line(i, use_colors, fallback) for i in range(len(art.lines))]
