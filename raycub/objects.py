"""Animated map objects such as doors and collectibles."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass
class MapObject:
    """An object sitting on a map cell with an animation frame."""

    x: float
    y: float
    frame: float = 0.0

    def __post_init__(self) -> None:
        self.x = float(self.x)
        self.y = float(self.y)
        self.frame = float(self.frame)


class ObjectList:
    """Objects kept newest first, looked up by their grid cell."""

    def __init__(self) -> None:
        self._items: list[MapObject] = []

    def __iter__(self) -> Iterator[MapObject]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def add(self, obj: MapObject) -> None:
        """Insert an object at the front."""
        self._items.insert(0, obj)

    def _index(self, x: float, y: float) -> int | None:
        cell_x, cell_y = int(x), int(y)
        for index, obj in enumerate(self._items):
            if obj.x == cell_x and obj.y == cell_y:
                return index
        return None

    def find(self, x: float, y: float) -> int:
        """Frame (truncated) of the first object on the cell, or 0 if none."""
        index = self._index(x, y)
        if index is None:
            return 0
        return int(self._items[index].frame)

    def remove(self, x: float, y: float) -> None:
        """Remove the first object on the cell, if there is one."""
        index = self._index(x, y)
        if index is not None:
            del self._items[index]

    def clear(self) -> None:
        """Remove every object."""
        self._items.clear()