"""Board model for the 8-puzzle."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

SIZE = 3
EMPTY = 0


class BoardInvariantError(RuntimeError):
    """The board does not hold exactly one cell with the requested value."""


class Direction(StrEnum):
    LEFT = "L"
    RIGHT = "R"
    UP = "U"
    DOWN = "D"

    @classmethod
    def from_char(cls, char: str) -> Direction:
        """Parse a single-character direction code (case-insensitive)."""
        try:
            return cls(char.upper())
        except ValueError:
            raise ValueError(
                f"Invalid direction character: {char!r} "
                f"(expected one of {', '.join(d.value for d in cls)})"
            ) from None

    @property
    def code(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS: dict[Direction, str] = {
    Direction.LEFT: "Left",
    Direction.RIGHT: "Right",
    Direction.UP: "Up",
    Direction.DOWN: "Down",
}


@dataclass(frozen=True)
class Move:
    """A tile sliding from *source* into the empty cell at *target*.

    Two moves are equal when they share direction and tile; the coordinates
    only matter for applying a move to the board it was enumerated from.
    """

    direction: Direction
    source: tuple[int, int] = field(compare=False)
    target: tuple[int, int] = field(compare=False)
    tile: int

    @property
    def label(self) -> str:
        return f"Move {self.tile} to {self.direction.label}"

    def __str__(self) -> str:
        return f"{self.direction.code}{self.tile}"


@dataclass
class Board:
    """Represents the 3×3 puzzle board.

    Tiles are stored as a 2D list of ints. ``EMPTY`` (0) is the blank cell.
    """

    tiles: list[list[int]]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, flat: list[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat([1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        if len(flat) != SIZE * SIZE:
            raise ValueError(
                f"Expected {SIZE * SIZE} tiles for a {SIZE}×{SIZE} board, "
                f"got {len(flat)}."
            )
        if sorted(flat) != list(range(SIZE * SIZE)):
            raise ValueError(
                f"Tiles must be a permutation of 0-{SIZE * SIZE - 1}, got {flat}."
            )
        return cls(tiles=[list(flat[r * SIZE : (r + 1) * SIZE]) for r in range(SIZE)])

    @classmethod
    def from_rows(cls, rows: list[list[int]]) -> Board:
        if len(rows) != SIZE or any(len(row) != SIZE for row in rows):
            raise ValueError(f"Expected {SIZE} rows of {SIZE} tiles, got {rows}.")
        return cls.from_flat([v for row in rows for v in row])

    # -- queries --------------------------------------------------------------

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row][col]

    def flat(self) -> list[int]:
        return [v for row in self.tiles for v in row]

    def locate(self, value: int = EMPTY) -> tuple[int, int]:
        """Return the ``(row, col)`` of the single cell holding *value*."""
        found = [divmod(i, SIZE) for i, v in enumerate(self.flat()) if v == value]
        if len(found) != 1:
            raise BoardInvariantError(
                f"Expected exactly one cell with value {value}, "
                f"found {len(found)}: {self.tiles}"
            )
        return found[0]

    @property
    def blank_pos(self) -> tuple[int, int]:
        return self.locate(EMPTY)

    def is_solved(self) -> bool:
        """Check if the tiles read 1..8 in row-major order with the blank last."""
        expected = 1
        for r in range(SIZE):
            for c in range(SIZE):
                if r == SIZE - 1 and c == SIZE - 1:
                    return self.tiles[r][c] == EMPTY
                if self.tiles[r][c] != expected:
                    return False
                expected += 1
        return True

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        val = self.tiles[row][col]
        if val == EMPTY:
            return row == SIZE - 1 and col == SIZE - 1
        return row == (val - 1) // SIZE and col == (val - 1) % SIZE

    def format(self, placeholder: str = "_") -> str:
        """Render one line per row, tiles left-aligned in 3-wide columns."""
        lines: list[str] = []
        for row in self.tiles:
            cells = [placeholder if v == EMPTY else str(v) for v in row]
            lines.append("".join(f"{cell:<3}" for cell in cells).rstrip())
        return "\n".join(lines)

    def copy(self) -> Board:
        return Board(tiles=[row[:] for row in self.tiles])

    def __str__(self) -> str:
        return self.format()
