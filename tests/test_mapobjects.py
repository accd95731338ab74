import pytest

from ratgame.config import MAX_NUMBER_OF_ROOMS
from ratgame.mapobjects import MapObject, RoomIndex


def make(rooms):
    return [MapObject(room=r, x=i * 16, y=32) for i, r in enumerate(rooms)]


def test_groups_by_room():
    objects = make([0, 0, 2, 2, 2])
    index = RoomIndex(objects)
    assert list(index.objects_in_room(0)) == objects[:2]
    assert list(index.objects_in_room(2)) == objects[2:]


def test_room_without_objects_is_empty():
    index = RoomIndex(make([0, 2]))
    assert list(index.objects_in_room(1)) == []
    assert list(index.objects_in_room(MAX_NUMBER_OF_ROOMS - 1)) == []


def test_empty_level():
    index = RoomIndex([])
    assert all(list(index.objects_in_room(r)) == [] for r in range(MAX_NUMBER_OF_ROOMS))


def test_every_object_found_once_when_grouped():
    objects = make([1, 1, 3, 4, 4, 4, 7])
    index = RoomIndex(objects)
    found = [obj for r in range(MAX_NUMBER_OF_ROOMS) for obj in index.objects_in_room(r)]
    assert found == objects


def test_later_run_of_room_wins():
    objects = make([0, 1, 0])
    index = RoomIndex(objects)
    assert list(index.objects_in_room(0)) == [objects[2]]
    assert list(index.objects_in_room(1)) == [objects[1]]


def test_room_out_of_range_raises():
    with pytest.raises(ValueError):
        RoomIndex(make([0, MAX_NUMBER_OF_ROOMS]))


def test_objects_in_room_is_repeatable():
    objects = make([5, 5])
    index = RoomIndex(objects)
    first = list(index.objects_in_room(5))
    second = list(index.objects_in_room(5))
    assert len(first) == 2
    assert first == objects
    assert second == objects