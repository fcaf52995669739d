"""Sun rotation."""

from dataclasses import replace

from photosynthesis.board import Board


def move_sun(board: Board) -> Board:
    """Advance the sun one position clockwise (period 6)."""
    return replace(board, sun_dir=board.sun_dir.rotate_cw())


def end_phase(board: Board) -> Board:
    """Close the current phase. The only board effect is moving the sun."""
    return move_sun(board)
