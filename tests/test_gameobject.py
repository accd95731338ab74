from ratgame.config import SCREEN_H, SCREEN_W
from ratgame.fixed import fix16
from ratgame.gameobject import (
    GameObject,
    SpriteDefinition,
    check_collision,
    create_game_object,
)

BALL = SpriteDefinition("ball", 16, 16)


def test_create_applies_offsets():
    obj = create_game_object(BALL, 10, 20, -4, -4)
    assert obj.active
    assert obj.x == fix16(10)
    assert obj.y == fix16(20)
    assert obj.next_x == obj.x
    assert obj.w == BALL.w - 4
    assert obj.h == BALL.h - 4
    assert obj.w_offset * 2 == -4
    assert obj.sprite.x == 10 and obj.sprite.y == 20


def test_odd_offset_halves_toward_zero():
    obj = create_game_object(BALL, 0, 0, -3, 3)
    assert obj.w_offset == -1
    assert obj.h_offset == 1


def test_boundbox_from_position():
    obj = create_game_object(BALL, 0, 0, 0, 0)
    obj.update_boundbox(fix16(30), fix16(40))
    assert (obj.box.left, obj.box.top) == (30, 40)
    assert obj.box.right - obj.box.left == obj.w
    assert obj.box.bottom - obj.box.top == obj.h


def test_collision_overlap_and_touch():
    a = create_game_object(BALL, 0, 0, 0, 0)
    b = create_game_object(BALL, 8, 8, 0, 0)
    assert check_collision(a, b)
    touching = create_game_object(BALL, BALL.w, 0, 0, 0)
    assert check_collision(a, touching)
    far = create_game_object(BALL, BALL.w + 1, 0, 0, 0)
    assert not check_collision(a, far)
    assert check_collision(b, a) == check_collision(a, b)


def test_clamp_screen():
    obj = create_game_object(BALL, 0, 0, 0, 0)
    obj.x = fix16(SCREEN_W + 50)
    obj.y = fix16(-20)
    obj.clamp_screen()
    assert obj.x == fix16(SCREEN_W - obj.w)
    assert obj.y == 0


def test_wrap_screen_left_and_bottom():
    obj = create_game_object(BALL, -20, SCREEN_H, 0, 0)
    obj.update_boundbox(obj.x, obj.y)
    obj.wrap_screen()
    assert obj.x == fix16(-20) + fix16(SCREEN_W)
    assert obj.y == fix16(SCREEN_H) - fix16(SCREEN_H)


def test_wrap_screen_inside_is_unchanged():
    obj = create_game_object(BALL, 100, 100, 0, 0)
    obj.update_boundbox(obj.x, obj.y)
    obj.wrap_screen()
    assert (obj.x, obj.y) == (fix16(100), fix16(100))


def test_bounce_off_screen():
    obj = create_game_object(BALL, -1, 100, 0, 0)
    obj.speed_x = fix16(2)
    obj.speed_y = fix16(1)
    obj.update_boundbox(obj.x, obj.y)
    obj.bounce_off_screen()
    assert obj.speed_x == -fix16(2)
    assert obj.speed_y == fix16(1)


def test_sync_sprite_uses_offsets():
    obj = create_game_object(BALL, 0, 0, -4, -4)
    obj.x = fix16(50)
    obj.y = fix16(60)
    obj.sync_sprite()
    assert obj.sprite.x == 50 + obj.w_offset
    assert obj.sprite.y == 60 + obj.h_offset


def test_objects_compare_by_identity():
    a = create_game_object(BALL, 10, 10, 0, 0)
    b = create_game_object(BALL, 10, 10, 0, 0)
    assert a == a
    assert not (a == b)
    assert [a, b].index(b) == 1
    plain = [GameObject(), GameObject()]
    assert plain.count(plain[1]) == 1