from ratgame.background import Background
from ratgame.config import SCREEN_TILES_H
from ratgame.fixed import fix16, fix16_to_int


def test_speeds_are_symmetric():
    bg = Background()
    assert bg.offset_speed == bg.offset_speed[::-1]


def test_center_rows_move_slowest_step():
    bg = Background()
    assert bg.offset_speed[11:17] == [fix16(-0.05)] * 6


def test_outer_rows_get_faster_by_one_step():
    bg = Background()
    steps = {
        bg.offset_speed[row] - bg.offset_speed[row + 1] for row in range(0, 11)
    }
    assert steps == {fix16(-0.05)}


def test_all_rows_scroll_left():
    bg = Background()
    assert all(speed < 0 for speed in bg.offset_speed)
    assert len(bg.offset_speed) == SCREEN_TILES_H


def test_update_accumulates_positions():
    bg = Background()
    for _ in range(5):
        result = bg.update()
    assert bg.offset_pos == [5 * speed for speed in bg.offset_speed]
    assert result == [fix16_to_int(pos) for pos in bg.offset_pos]


def test_edge_rows_scroll_further_than_center():
    bg = Background()
    for _ in range(50):
        result = bg.update()
    assert result[0] < result[13]
    assert result[0] == result[-1]