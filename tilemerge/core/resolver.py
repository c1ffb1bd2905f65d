# -*- coding: utf-8 -*-
"""
Resolution of a single line of cells into move orders.

A line is ordered toward its leading edge: index 0 is the slot tiles slide into. The resolution
takes place in three pure steps:

1. ``condense`` removes the empty gaps between tiles.
2. ``collapse`` merges adjacent tiles of equal value, each tile at most once.
3. ``convert`` turns the remaining tokens into move orders for the board.
"""
from typing import Sequence

from tilemerge.core.types import (
    Cell,
    DoubleMove,
    MergeFromMoving,
    MergeFromStationary,
    MoveOrder,
    SingleMove,
    Slide,
    Stationary,
    Tile,
    Token,
)


def condense(cells: Sequence[Cell]) -> list[Token]:
    """
    Compress a line of cells into tokens, without any empty space in between.

    Parameters
    ----------
    cells : Sequence[Cell]
        The cells of the line, leading edge first.

    Returns
    -------
    list[Token]
        ``Stationary`` for a tile already in its final slot, ``Slide`` otherwise.

    Example
    -------
    >>> condense([Tile(2), EMPTY, EMPTY, Tile(4)])
    [Stationary(source=0, value=2), Slide(source=3, value=4)]
    """
    tokens: list[Token] = []
    for idx, cell in enumerate(cells):
        if not isinstance(cell, Tile):
            continue
        if idx == len(tokens):
            tokens.append(Stationary(source=idx, value=cell.value))
        else:
            tokens.append(Slide(source=idx, value=cell.value))
    return tokens


def _still_quiescent(position: int, output_length: int, source: int) -> bool:
    """Check whether a stationary token still stands for an unmoved tile."""
    return position == output_length and source == position


def collapse(tokens: Sequence[Token]) -> list[Token]:
    """
    Merge adjacent tokens of equal value.

    Parameters
    ----------
    tokens : Sequence[Token]
        Output of ``condense``.

    Returns
    -------
    list[Token]
        Tokens after merging.

    Notes
    -----
    - The scan runs once from left to right and never rescans: a tile takes part in at most
      one merge, so ``[2, 2, 2, 2]`` gives ``[4, 4]`` and ``[2, 2, 2]`` gives ``[4, 2]``.
    - The last token only ever looks at its predecessor, never beyond the line.
    - A stationary tile shifted by an earlier merge is reported as a ``Slide``.
    """
    output: list[Token] = []
    skip_next = False
    for idx, token in enumerate(tokens):
        if skip_next:
            skip_next = False
            continue

        assert isinstance(token, (Stationary, Slide)), f"Cannot collapse merge token {token!r}"

        following = tokens[idx + 1] if idx < len(tokens) - 1 else None
        quiescent = isinstance(token, Stationary) and _still_quiescent(idx, len(output), token.source)

        if following is not None and token.value == following.value:
            # ##: Merge with the successor, which cannot be merged again.
            skip_next = True
            value = token.value + following.value
            if quiescent:
                output.append(MergeFromStationary(source=following.source, value=value))
            else:
                output.append(MergeFromMoving(source=token.source, second=following.source, value=value))
        elif quiescent:
            output.append(token)
        else:
            output.append(Slide(source=token.source, value=token.value))
    return output


def convert(tokens: Sequence[Token]) -> list[MoveOrder]:
    """
    Convert tokens into move orders.

    Parameters
    ----------
    tokens : Sequence[Token]
        Output of ``collapse``.

    Returns
    -------
    list[MoveOrder]
        One order per token that changed, its destination being the token's index.
    """
    orders: list[MoveOrder] = []
    for idx, token in enumerate(tokens):
        if isinstance(token, Slide):
            orders.append(SingleMove(source=token.source, destination=idx, value=token.value, was_merge=False))
        elif isinstance(token, MergeFromStationary):
            orders.append(SingleMove(source=token.source, destination=idx, value=token.value, was_merge=True))
        elif isinstance(token, MergeFromMoving):
            orders.append(
                DoubleMove(first_source=token.source, second_source=token.second, destination=idx, value=token.value)
            )
    return orders


def resolve_line(cells: Sequence[Cell]) -> list[MoveOrder]:
    """
    Compute the move orders of one line of cells.

    Parameters
    ----------
    cells : Sequence[Cell]
        The cells of the line, leading edge first.

    Returns
    -------
    list[MoveOrder]
        Orders to apply, empty when the line does not change.
    """
    return convert(collapse(condense(cells)))
