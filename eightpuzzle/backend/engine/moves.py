"""Legal-move enumeration and move application."""

from __future__ import annotations

from loguru import logger

from eightpuzzle.backend.models.board import EMPTY, SIZE, Board, Direction, Move


def enumerate_moves(board: Board) -> list[Move]:
    """Return the 2-4 moves available from *board*.

    Each label is the way the *tile* slides into the blank:
    ``DOWN`` takes the tile above, ``UP`` the tile below, ``LEFT`` the tile
    to the right and ``RIGHT`` the tile to the left.  Results come in that
    order.
    """
    br, bc = board.blank_pos
    blank = (br, bc)

    # (condition, direction, source cell)
    candidates = (
        (br != 0, Direction.DOWN, (br - 1, bc)),
        (br < SIZE - 1, Direction.UP, (br + 1, bc)),
        (bc < SIZE - 1, Direction.LEFT, (br, bc + 1)),
        (bc != 0, Direction.RIGHT, (br, bc - 1)),
    )

    moves: list[Move] = []
    for allowed, direction, (sr, sc) in candidates:
        if allowed:
            moves.append(
                Move(
                    direction=direction,
                    source=(sr, sc),
                    target=blank,
                    tile=board.get_tile(sr, sc),
                )
            )
    return moves


def apply_move(board: Board, move: Move) -> None:
    """Slide ``move.tile`` from its source into the blank, in place.

    *move* must come from ``enumerate_moves`` on the current board.
    """
    sr, sc = move.source
    tr, tc = move.target
    board.tiles[sr][sc] = EMPTY
    board.tiles[tr][tc] = move.tile
    logger.debug("Applied {} ({}): {} -> {}", move, move.label, move.source, move.target)
