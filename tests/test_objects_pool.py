import pytest

from ratgame.gameobject import GameObject, Sprite, SpriteDefinition
from ratgame.objects_pool import ObjectsPool


@pytest.fixture
def objects():
    return [GameObject(active=True) for _ in range(3)]


def test_init_marks_inactive(objects):
    pool = ObjectsPool(objects)
    assert all(not obj.active for obj in objects)
    assert len(pool) == 0


def test_acquire_in_array_order(objects):
    pool = ObjectsPool(objects)
    got = [pool.acquire() for _ in range(3)]
    assert all(a is b for a, b in zip(got, objects))
    assert all(obj.active for obj in got)
    assert len(pool) == 3
    assert pool.acquire() is None


def test_iteration_newest_first(objects):
    pool = ObjectsPool(objects)
    first = pool.acquire()
    second = pool.acquire()
    assert list(pool) == [second, first]


def test_release_makes_object_reusable(objects):
    pool = ObjectsPool(objects)
    first = pool.acquire()
    first.sprite = Sprite(SpriteDefinition("ball", 16, 16))
    pool.acquire()
    pool.release(first)
    assert not first.active
    assert first.sprite is None
    assert len(pool) == 1
    assert first not in list(pool)
    assert pool.acquire() is first


def test_release_unknown_object_raises(objects):
    pool = ObjectsPool(objects)
    with pytest.raises(ValueError):
        pool.release(objects[0])
    with pytest.raises(ValueError):
        pool.release(GameObject())


def test_release_while_iterating(objects):
    pool = ObjectsPool(objects)
    for _ in range(3):
        pool.acquire()
    for obj in pool:
        pool.release(obj)
    assert len(pool) == 0
    assert all(not obj.active for obj in objects)


def test_clear_then_reacquire(objects):
    pool = ObjectsPool(objects)
    pool.acquire()
    pool.acquire()
    pool.clear()
    assert len(pool) == 0
    assert list(pool) == []
    again = [pool.acquire() for _ in range(3)]
    assert {id(o) for o in again} == {id(o) for o in objects}