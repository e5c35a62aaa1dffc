from blocksynth import constants
from blocksynth.constants import grid_width, tab_width


def test_grid_width_value():
    assert grid_width() == 354.0


def test_tab_width_value():
    assert tab_width() == 71


def test_tab_width_is_int():
    width = tab_width()
    assert isinstance(width, int) and width > 0


def test_tabs_fit_grid():
    assert tab_width() * constants.COLUMNS <= grid_width() + 1


def test_grid_wider_than_modules_alone():
    assert grid_width() > constants.COLUMNS * constants.MODULE_WIDTH