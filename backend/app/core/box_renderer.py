"""
Fixed-width text box rendering.

Widths are counted in code points, so "°C" or accented city names keep the
right border aligned.
"""
from typing import Iterable

ELLIPSIS = "..."
MIN_WIDTH = 5


def fit_line(line: str, interior: int) -> str:
    """Truncate or pad `line` to exactly `interior` code points"""
    if len(line) > interior:
        return line[: interior - len(ELLIPSIS)] + ELLIPSIS
    return line.ljust(interior)


def render(lines: Iterable[str], width: int) -> str:
    """Draw `lines` inside a rounded box `width` columns wide.

    Every row, borders included, is exactly `width` code points and ends
    with a newline.
    """
    if width < MIN_WIDTH:
        raise ValueError(f"box width must be at least {MIN_WIDTH}, got {width}")

    interior = width - 2
    rows = [f"╭{'─' * interior}╮"]
    for line in lines:
        rows.append(f"│{fit_line(line, interior)}│")
    rows.append(f"╰{'─' * interior}╯")
    return "".join(f"{row}\n" for row in rows)
