import pytest

from boards import DRAW_ROWS, board_from_rows


@pytest.fixture
def draw_board():
    return board_from_rows(DRAW_ROWS)
