"""A fixed-size, 1-indexed vector of poros."""

from __future__ import annotations

import copy
from collections.abc import Iterable, Iterator

from porotree.poro import Poro


class PoroVector:
    """A vector of poros indexed from 1 to its length.

    Reading outside that range yields an empty poro; writing outside it
    raises IndexError. Stored poros are copies of the ones given.
    """

    __hash__ = None

    def __init__(self, size: int = 0) -> None:
        self._items = [Poro() for _ in range(max(size, 0))]

    @classmethod
    def from_poros(cls, poros: Iterable[Poro]) -> PoroVector:
        """Build a vector holding copies of the given poros in order."""
        vector = cls()
        vector._items = [copy.copy(poro) for poro in poros]
        return vector

    def __len__(self) -> int:
        return len(self._items)

    def _position(self, index: int) -> int | None:
        if 1 <= index <= len(self._items):
            return index - 1
        return None

    def __getitem__(self, index: int) -> Poro:
        position = self._position(index)
        if position is None:
            return Poro()
        return self._items[position]

    def __setitem__(self, index: int, poro: Poro) -> None:
        position = self._position(index)
        if position is None:
            raise IndexError(f"index {index} outside 1..{len(self._items)}")
        self._items[position] = copy.copy(poro)

    def __iter__(self) -> Iterator[Poro]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PoroVector):
            return NotImplemented
        return self._items == other._items

    def count(self) -> int:
        """Return how many stored poros are not empty."""
        return sum(1 for poro in self._items if not poro.is_empty())

    def resize(self, size: int) -> bool:
        """Change the length, keeping existing poros and padding with empty ones.

        Returns False, changing nothing, when size is not positive or equals
        the current length.
        """
        if size <= 0 or size == len(self._items):
            return False
        kept = self._items[:size]
        kept.extend(Poro() for _ in range(size - len(kept)))
        self._items = kept
        return True

    def __str__(self) -> str:
        return "[" + " ".join(f"{i} {poro}" for i, poro in enumerate(self._items, start=1)) + "]"

    def __repr__(self) -> str:
        return f"PoroVector.from_poros({self._items!r})"