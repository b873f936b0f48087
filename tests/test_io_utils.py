from broadside.io_utils import clear_screen, grid_rows, header_row, render_grid
from broadside.config import CLEAR_SEQUENCE
from conftest import coord


def test_empty_grid_rendering(field):
    lines = render_grid(field.ships_view()).split("\n")
    assert lines[0] == "  1 2 3 4 5 6 7 8 9 10 "
    assert lines[1] == "A " + "~ " * 10
    assert lines[-1].startswith("J ")
    assert len(lines) == 11


def test_ship_and_shot_views_render_differently(fleet_field):
    fleet_field.shoot(coord("A1"))
    fleet_field.shoot(coord("B1"))
    own = grid_rows(fleet_field.ships_view())
    opp = grid_rows(fleet_field.shots_view())
    assert own[0] == "A X O O O O ~ ~ ~ ~ ~ "
    assert own[1] == "B M ~ ~ ~ ~ ~ ~ ~ ~ ~ "
    assert opp[0] == "A X ~ ~ ~ ~ ~ ~ ~ ~ ~ "
    assert opp[1] == own[1]


def test_header_row():
    assert header_row(3) == "  1 2 3 "


def test_clear_screen_toggle():
    out: list[str] = []
    clear_screen(out.append, enabled=False)
    assert out == []
    clear_screen(out.append)
    assert out == [CLEAR_SEQUENCE]
