"""Largest rectangles in histograms and in grids of free cells."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def largest_rectangle(heights: Iterable[int]) -> int:
    """Return the largest rectangle area that fits under the histogram."""
    best = 0
    stack: list[tuple[int, int]] = []
    count = 0
    for index, height in enumerate(heights):
        count = index + 1
        start = index
        while stack and stack[-1][0] > height:
            top, start = stack.pop()
            best = max(best, (index - start) * top)
        stack.append((height, start))
    for height, start in stack:
        best = max(best, (count - start) * height)
    return best


def maximum_building(grid: Sequence[str]) -> int:
    """Return the largest rectangle of free cells; '*' marks a blocked cell."""
    rows = list(grid)
    if not rows:
        return 0
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("all grid rows must have the same length")
    heights = [0] * width
    best = 0
    for row in rows:
        heights = [0 if cell == "*" else h + 1 for h, cell in zip(heights, row)]
        best = max(best, largest_rectangle(heights))
    return best