"""A fixed pool of reusable game objects."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from .gameobject import GameObject


class ObjectsPool:
    """Hands out objects from a fixed set and takes them back for reuse.

    Free objects are handed out in the order given; released objects are
    reused first. Iteration yields active objects, most recently acquired
    first, and tolerates releasing objects while iterating.
    """

    def __init__(self, objects: Iterable[GameObject]) -> None:
        objects = list(objects)
        for obj in objects:
            obj.active = False
        self._free: list[GameObject] = objects[::-1]
        self._active: list[GameObject] = []

    def acquire(self) -> Optional[GameObject]:
        """Take a free object and mark it active, or return None if none is left."""
        if not self._free:
            return None
        obj = self._free.pop()
        obj.active = True
        self._active.append(obj)
        return obj

    def release(self, obj: GameObject) -> None:
        """Return an active object to the pool, dropping its sprite."""
        if not any(item is obj for item in self._active):
            raise ValueError("object is not active in this pool")
        self._active.remove(obj)
        self._free.append(obj)
        obj.sprite = None
        obj.active = False

    def clear(self) -> None:
        """Release every active object."""
        for obj in list(self):
            self.release(obj)

    def __iter__(self) -> Iterator[GameObject]:
        return iter(self._active[::-1])

    def __len__(self) -> int:
        return len(self._active)