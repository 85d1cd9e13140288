"""Ripening spread through a stack of tomato boxes."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

_NEIGHBOURS = (
    (-1, 0, 0),
    (1, 0, 0),
    (0, -1, 0),
    (0, 1, 0),
    (0, 0, -1),
    (0, 0, 1),
)
_CELLS = (-1, 0, 1)


def ripening_days(boxes: Sequence[Sequence[Sequence[int]]]) -> int:
    """Return the days until every tomato is ripe, or -1 if some never ripen.

    ``boxes`` is a list of layers of rows; 1 is ripe, 0 unripe, -1 empty.
    Each day ripeness spreads to the six face neighbours.
    """
    state = [[list(row) for row in layer] for layer in boxes]
    if state:
        rows = len(state[0])
        cols = len(state[0][0]) if rows else 0
        for layer in state:
            if len(layer) != rows or any(len(row) != cols for row in layer):
                raise ValueError("all layers must have the same shape")
            for row in layer:
                for cell in row:
                    if cell not in _CELLS:
                        raise ValueError(f"cell must be -1, 0 or 1, got {cell}")
    else:
        rows = cols = 0

    queue = deque(
        (z, y, x, 0)
        for z, layer in enumerate(state)
        for y, row in enumerate(layer)
        for x, cell in enumerate(row)
        if cell == 1
    )
    days = 0
    while queue:
        z, y, x, day = queue.popleft()
        days = max(days, day)
        for dz, dy, dx in _NEIGHBOURS:
            nz, ny, nx = z + dz, y + dy, x + dx
            if 0 <= nz < len(state) and 0 <= ny < rows and 0 <= nx < cols and state[nz][ny][nx] == 0:
                state[nz][ny][nx] = 1
                queue.append((nz, ny, nx, day + 1))

    if any(0 in row for layer in state for row in layer):
        return -1
    return days