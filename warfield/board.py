"""The square grid the battle is fought on."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from warfield.units import FieldCharacter

WIDTH = 10
HEIGHT = 15
SQUARE_COUNT = WIDTH * HEIGHT

# Up, down, left, right: the order in which neighbours are explored.
_DIRECTIONS = ((0, 1), (0, -1), (-1, 0), (1, 0))


class BoardError(Exception):
    """Raised for squares off the board or illegal placements."""


def _inside(x: int, y: int) -> bool:
    return 0 <= x < WIDTH and 0 <= y < HEIGHT


def square_id(x: int, y: int) -> int:
    """Square id of the cell at column x, row y."""
    if not _inside(x, y):
        raise BoardError(f"({x}, {y}) is off the board")
    return x + y * WIDTH


def coords(square_id: int) -> tuple[int, int]:
    """Column and row of a square id."""
    if not 0 <= square_id < SQUARE_COUNT:
        raise BoardError(f"square {square_id} is off the board")
    return square_id % WIDTH, square_id // WIDTH


def manhattan(first_id: int, second_id: int) -> int:
    """Grid distance between two squares, counting only straight steps."""
    x1, y1 = coords(first_id)
    x2, y2 = coords(second_id)
    return abs(x1 - x2) + abs(y1 - y2)


@dataclass(eq=False)
class Square:
    """One cell of the board and the character standing on it, if any."""

    square_id: int
    x: int
    y: int
    character: FieldCharacter | None = None

    @property
    def occupied(self) -> bool:
        return self.character is not None


class Board:
    """A fixed-size grid of squares holding characters."""

    width = WIDTH
    height = HEIGHT

    def __init__(self) -> None:
        self._squares = [
            Square(sid, sid % WIDTH, sid // WIDTH) for sid in range(SQUARE_COUNT)
        ]

    def __iter__(self) -> Iterator[Square]:
        return iter(self._squares)

    def __len__(self) -> int:
        return len(self._squares)

    def in_bounds(self, x: int, y: int) -> bool:
        """Whether (x, y) lies on the board."""
        return _inside(x, y)

    def square(self, square_id: int) -> Square:
        """The square with the given id."""
        if not 0 <= square_id < SQUARE_COUNT:
            raise BoardError(f"square {square_id} is off the board")
        return self._squares[square_id]

    def square_at(self, x: int, y: int) -> Square:
        """The square at column x, row y."""
        return self._squares[square_id(x, y)]

    def place(self, character: FieldCharacter, square_id: int) -> Square:
        """Put a character on an empty square."""
        target = self.square(square_id)
        if target.character is not None:
            raise BoardError(f"square {square_id} is already occupied")
        target.character = character
        character.position = square_id
        return target

    def move(self, from_id: int, to_id: int) -> FieldCharacter:
        """Move the character on one square to another, empty, square."""
        source = self.square(from_id)
        target = self.square(to_id)
        character = source.character
        if character is None:
            raise BoardError(f"no character on square {from_id}")
        if from_id == to_id:
            return character
        if target.character is not None:
            raise BoardError(f"square {to_id} is already occupied")
        source.character = None
        target.character = character
        character.position = to_id
        return character

    def remove(self, square_id: int) -> FieldCharacter:
        """Take the character off a square and return it."""
        source = self.square(square_id)
        character = source.character
        if character is None:
            raise BoardError(f"no character on square {square_id}")
        source.character = None
        character.position = -1
        return character

    def neighbours(self, square_id: int) -> list[int]:
        """Ids of the squares one step up, down, left and right that exist."""
        x, y = coords(square_id)
        return [
            (x + dx) + (y + dy) * WIDTH
            for dx, dy in _DIRECTIONS
            if _inside(x + dx, y + dy)
        ]