import pytest

from booster.component import Canvas, Rect
from booster.menu_graphics import MenuGraphics
from booster.menu_update import MenuUpdate

TEX = Rect(770, 0, 100, 100)


@pytest.fixture
def setup():
    menu = MenuUpdate(close_window=lambda: None, sound=None)
    menu.position.left = 5
    menu.position.top = 7
    menu.position.width = 75
    menu.position.height = 75
    canvas = Canvas()
    graphics = MenuGraphics()
    graphics.assemble(canvas, menu, TEX)
    return menu, canvas, graphics


def lower_panel():
    top = TEX.top + TEX.height
    return [
        (TEX.left, top),
        (TEX.left + TEX.width, top),
        (TEX.left + TEX.width, top + TEX.height),
        (TEX.left, top + TEX.height),
    ]


def upper_panel():
    return [
        (TEX.left, TEX.top),
        (TEX.left + TEX.width, TEX.top),
        (TEX.left + TEX.width, TEX.top + TEX.height),
        (TEX.left, TEX.top + TEX.height),
    ]


def tex(canvas):
    return [v.tex_coords for v in canvas]


def test_draw_before_assemble_raises():
    with pytest.raises(RuntimeError):
        MenuGraphics().draw(Canvas())


def test_assemble_shows_game_over_panel(setup):
    _, canvas, graphics = setup
    assert tex(canvas) == lower_panel()
    assert graphics.current_status is False


def test_panel_switches_with_game_over(setup):
    menu, canvas, graphics = setup
    menu.game_over = True
    graphics.draw(canvas)
    assert graphics.current_status is True
    assert tex(canvas) == lower_panel()
    menu.game_over = False
    graphics.draw(canvas)
    assert graphics.current_status is False
    assert tex(canvas) == upper_panel()


def test_no_change_without_status_switch(setup):
    menu, canvas, graphics = setup
    graphics.draw(canvas)
    assert tex(canvas) == lower_panel()


def test_quad_follows_menu_position(setup):
    menu, canvas, graphics = setup
    menu.position.left = -999
    menu.position.top = -999
    graphics.draw(canvas)
    p = menu.position
    assert canvas[0].position == (p.left, p.top)
    assert canvas[2].position == (p.left + p.width, p.top + p.height)