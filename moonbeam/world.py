"""The tile map the player walks in. Tiles are indexed as ``[x, y]``."""

from __future__ import annotations

from dataclasses import dataclass

WORLD_WIDTH = 16
WORLD_HEIGHT = 16

_DEFAULT_TILES = (
    (1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
    (1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1),
    (1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1),
    (1, 0, 0, 0, 0, 1, 1, 1, 0, 0, 0, 0, 0, 0, 0, 1),
    (1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1),
    (1, 0, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, 0, 0, 0, 1),
    (1, 0, 1, 1, 1, 0, 0, 0, 0, 2, 0, 0, 0, 0, 0, 1),
    (1, 0, 0, 0, 0, 0, 0, 0, 0, 2, 0, 0, 0, 0, 0, 1),
    (1, 0, 0, 0, 0, 0, 0, 0, 0, 2, 2, 2, 0, 0, 0, 1),
    (1, 0, 0, 0, 0, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1),
    (1, 0, 0, 0, 3, 3, 3, 0, 0, 0, 4, 0, 0, 0, 0, 1),
    (1, 0, 0, 0, 0, 3, 0, 0, 0, 0, 4, 4, 4, 4, 0, 1),
    (1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 4, 0, 0, 0, 1),
    (1, 0, 0, 0, 0, 0, 0, 0, 4, 4, 4, 4, 0, 0, 0, 1),
    (1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1),
    (1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
)


@dataclass(frozen=True)
class WorldMap:
    """A rectangular grid of tiles; 0 is open floor, anything else a wall."""

    tiles: tuple[tuple[int, ...], ...]

    def __post_init__(self) -> None:
        rows = tuple(tuple(int(tile) for tile in row) for row in self.tiles)
        if not rows or not rows[0]:
            raise ValueError("a world map needs at least one tile")
        if any(len(row) != len(rows[0]) for row in rows):
            raise ValueError("all rows of a world map must have the same length")
        object.__setattr__(self, "tiles", rows)

    @property
    def width(self) -> int:
        return len(self.tiles)

    @property
    def height(self) -> int:
        return len(self.tiles[0])

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def __getitem__(self, pos: tuple[int, int]) -> int:
        x, y = pos
        if not self.in_bounds(x, y):
            raise IndexError(f"tile ({x}, {y}) is outside the world")
        return self.tiles[x][y]

    def is_empty(self, x: int, y: int) -> bool:
        """True for an open tile inside the map."""
        return self.in_bounds(x, y) and self.tiles[x][y] == 0


def default_world() -> WorldMap:
    return WorldMap(_DEFAULT_TILES)