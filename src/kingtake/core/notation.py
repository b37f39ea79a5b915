"""Text notation for squares and moves.

Two move forms are understood:

* numeric pairs, 1-indexed ``row,col``: ``"2,5 4,5"``
* algebraic squares: ``"e2 to e4"`` or ``"e2,e4"``
"""

from __future__ import annotations

from kingtake.core.position import Position

FILES = "abcdefgh"
RANKS = "12345678"
INVALID_SQUARE = "Invalid"


class NotationError(ValueError):
    """Raised when move or square text cannot be parsed."""


def algebraic_to_position(name: str) -> Position:
    """Parse a square name, e.g. 'e2' → Position(1, 4)."""
    if len(name) != 2:
        raise NotationError(f"Invalid square name: {name!r}")
    col = FILES.find(name[0].lower())
    if col == -1:
        raise NotationError(f"Invalid column in square name: {name!r}")
    if name[1] not in RANKS:
        raise NotationError(f"Invalid row in square name: {name!r}")
    return Position(int(name[1]) - 1, col)


def position_to_algebraic(pos: Position) -> str:
    """Square name for *pos*, or ``INVALID_SQUARE`` when off the board."""
    if not pos.is_on_board:
        return INVALID_SQUARE
    return f"{FILES[pos.col]}{pos.row + 1}"


def _parse_numeric(token: str) -> Position:
    parts = token.split(",")
    if len(parts) != 2:
        raise NotationError(f"Invalid coordinate pair: {token!r}")
    try:
        row, col = int(parts[0]), int(parts[1])
    except ValueError:
        raise NotationError(f"Invalid numbers in coordinate pair: {token!r}") from None
    return Position(row - 1, col - 1)


def _parse_algebraic_pair(halves: list[str]) -> tuple[Position, Position]:
    if len(halves) != 2:
        raise NotationError("Expected exactly two squares")
    return algebraic_to_position(halves[0].strip()), algebraic_to_position(
        halves[1].strip()
    )


def parse_move_input(text: str) -> tuple[Position, Position]:
    """Parse a move typed by a player into ``(start, end)``.

    Raises:
        NotationError: If *text* matches none of the accepted forms.
    """
    text = text.strip()
    tokens = text.split()

    if "," in text and text[:1].isdigit():
        if len(tokens) != 2:
            raise NotationError(f"Invalid input format: {text!r}")
        return _parse_numeric(tokens[0]), _parse_numeric(tokens[1])

    if "to" in text:
        return _parse_algebraic_pair(text.split("to"))

    return _parse_algebraic_pair(text.split(","))
