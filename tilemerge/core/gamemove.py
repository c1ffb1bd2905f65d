# -*- coding: utf-8 -*-
"""
Move utilities: coordinates of the lines swept by a move, and vectorised checks of which
directions can change a board.
"""
from numpy import ndarray

from tilemerge.core.types import MoveDirection, Position


def line_coordinates(direction: MoveDirection, line: int, dimension: int) -> list[Position]:
    """
    Build the coordinates of one line, ordered from the edge tiles slide toward.

    Parameters
    ----------
    direction : MoveDirection
        Direction of the move.
    line : int
        Index of the line: a column for up/down, a row for left/right.
    dimension : int
        Size of the square board.

    Returns
    -------
    list[Position]
        ``dimension`` coordinates, slot 0 being the leading edge.
    """
    if direction == MoveDirection.UP:
        return [(k, line) for k in range(dimension)]
    if direction == MoveDirection.DOWN:
        return [(dimension - 1 - k, line) for k in range(dimension)]
    if direction == MoveDirection.LEFT:
        return [(line, k) for k in range(dimension)]
    return [(line, dimension - 1 - k) for k in range(dimension)]


def move_lines(direction: MoveDirection, dimension: int) -> list[list[Position]]:
    """
    Build every line swept by a move, in row-major line order.

    Parameters
    ----------
    direction : MoveDirection
        Direction of the move.
    dimension : int
        Size of the square board.

    Returns
    -------
    list[list[Position]]
        One coordinate list per row (left/right) or per column (up/down).
    """
    return [line_coordinates(direction, line, dimension) for line in range(dimension)]


def legal_directions_mask(state: ndarray) -> tuple[bool, bool, bool, bool]:
    """
    Get a boolean mask for all four directions in a single pass.

    Parameters
    ----------
    state : ndarray
        Tile values of the board, 0 for an empty cell.

    Returns
    -------
    tuple[bool, bool, bool, bool]
        Mask for (left, up, right, down) where True means the move changes the board.

    Notes
    -----
    A direction is legal when a tile has an empty neighbour on the side it slides toward, or when
    two adjacent tiles along that axis share a value.
    """
    # ##>: Compute horizontal adjacency once for left/right.
    left_cols, right_cols = state[:, :-1], state[:, 1:]
    h_can_merge = (left_cols != 0) & (left_cols == right_cols)

    # ##>: Compute vertical adjacency once for up/down.
    top_rows, bottom_rows = state[:-1, :], state[1:, :]
    v_can_merge = (top_rows != 0) & (top_rows == bottom_rows)

    # ##>: Check slide conditions per direction.
    left = (left_cols == 0) & (right_cols != 0)
    right = (right_cols == 0) & (left_cols != 0)
    up = (top_rows == 0) & (bottom_rows != 0)
    down = (bottom_rows == 0) & (top_rows != 0)

    return (
        bool(left.any() or h_can_merge.any()),
        bool(up.any() or v_can_merge.any()),
        bool(right.any() or h_can_merge.any()),
        bool(down.any() or v_can_merge.any()),
    )


def legal_directions(state: ndarray) -> list[MoveDirection]:
    """
    Determine the directions that would change the board.

    Parameters
    ----------
    state : ndarray
        Tile values of the board, 0 for an empty cell.

    Returns
    -------
    list[MoveDirection]
        Legal directions, in enum order.
    """
    mask = legal_directions_mask(state)
    return [direction for direction in MoveDirection if mask[direction]]


def is_done(state: ndarray) -> bool:
    """
    Check whether no move is possible any more.

    Parameters
    ----------
    state : ndarray
        Tile values of the board, 0 for an empty cell.

    Returns
    -------
    bool
        True if the board is full and no two adjacent tiles share a value.
    """
    return bool(state.all() and not (state[:-1] == state[1:]).any() and not (state[:, :-1] == state[:, 1:]).any())
