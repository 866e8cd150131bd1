"""Shared fixtures."""
import pytest

from maketen.config import Settings
from maketen.models.board import Board
from maketen.models.schemas import DisplayBounds


@pytest.fixture
def settings():
    """Default engine settings."""
    return Settings()


@pytest.fixture
def default_bounds(settings):
    """Board area of the default 390x844 screen."""
    return DisplayBounds.from_screen(390, 844, settings)


@pytest.fixture
def small_board():
    """2x3 board with one clearable pair in the top row."""
    return Board.from_grid([[1, 9, 4], [3, 3, 3]])
