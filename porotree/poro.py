"""A single poro: a position, a volume and an optional colour."""

from __future__ import annotations


class Poro:
    """A poro located at (x, y) with a volume and an optional lower-case colour.

    A poro whose coordinates and volume are zero and which has no colour
    is considered empty.
    """

    __hash__ = None  # mutable value object

    def __init__(self, x: int = 0, y: int = 0, volume: float = 0.0, color: str | None = None) -> None:
        self.x = x
        self.y = y
        self.volume = float(volume)
        self.color = color

    @property
    def color(self) -> str | None:
        """The colour in lower case, or None when the poro has no colour."""
        return self._color

    @color.setter
    def color(self, value: str | None) -> None:
        self._color = None if value is None else value.lower()

    def is_empty(self) -> bool:
        """Return True when the poro holds only default values."""
        return self.x == 0 and self.y == 0 and self.volume == 0.0 and self.color is None

    def move_to(self, x: int, y: int) -> None:
        """Place the poro at a new position."""
        self.x = x
        self.y = y

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Poro):
            return NotImplemented
        return (
            self.x == other.x
            and self.y == other.y
            and self.volume == other.volume
            and self.color == other.color
        )

    def __str__(self) -> str:
        if self.is_empty():
            return "()"
        color = self.color if self.color is not None else "-"
        return f"({self.x}, {self.y}) {self.volume:.2f} {color}"

    def __repr__(self) -> str:
        return f"Poro(x={self.x!r}, y={self.y!r}, volume={self.volume!r}, color={self.color!r})"