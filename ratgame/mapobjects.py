"""Objects placed on the level map and their lookup by room."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence

from .config import MAX_NUMBER_OF_ROOMS


@dataclass(frozen=True)
class MapObject:
    """An object placed on the map; x and y are map pixels."""

    room: int
    x: float
    y: float
    direction: int = 0
    speed: int = 0
    type: int = 0


class RoomIndex:
    """Finds the map objects of a room.

    Objects are expected to be grouped by room. For each room the index
    keeps the range of the last run of objects belonging to it.
    """

    def __init__(self, objects: Sequence[MapObject]) -> None:
        self._objects = list(objects)
        self._ranges: dict[int, tuple[int, int]] = {}

        room = None
        first = 0
        for idx, obj in enumerate(self._objects):
            if not 0 <= obj.room < MAX_NUMBER_OF_ROOMS:
                raise ValueError(f"room {obj.room} is out of range")
            if obj.room != room:
                if room is not None:
                    self._ranges[room] = (first, idx - 1)
                room = obj.room
                first = idx
        if room is not None:
            self._ranges[room] = (first, len(self._objects) - 1)

    def objects_in_room(self, room: int) -> Iterator[MapObject]:
        """Yield the objects of a room in map order."""
        first, last = self._ranges.get(room, (1, 0))
        for idx in range(first, min(last + 1, len(self._objects))):
            yield self._objects[idx]