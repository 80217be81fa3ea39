import pytest

from collapsi.engine.systems.geometry import direction_between, is_adjacent, neighbors, step
from collapsi.models.board import Position
from collapsi.models.enums import Direction
from tests.helpers import pos

ALL = [Position(row=r, col=c) for r in range(4) for c in range(4)]


def test_up_from_top_row_wraps_to_bottom():
    assert step(pos(0, 1), Direction.UP) == pos(3, 1)


def test_left_from_first_column_wraps_to_last():
    assert step(pos(1, 0), Direction.LEFT) == pos(1, 3)


def test_down_and_right_wrap():
    assert step(pos(3, 2), Direction.DOWN) == pos(0, 2)
    assert step(pos(2, 3), Direction.RIGHT) == pos(2, 0)


@pytest.mark.parametrize("direction", list(Direction))
def test_opposite_step_returns_home(direction):
    for p in ALL:
        assert step(step(p, direction), direction.opposite()) == p


def test_neighbors_are_four_distinct_adjacent_cells():
    for p in ALL:
        nbs = neighbors(p)
        assert len(set(nbs)) == 4
        assert all(is_adjacent(p, n) for n in nbs)


def test_adjacency_rules():
    assert is_adjacent(pos(0, 0), pos(0, 3))  # wraps
    assert is_adjacent(pos(0, 2), pos(3, 2))
    assert not is_adjacent(pos(0, 0), pos(1, 1))
    assert not is_adjacent(pos(0, 0), pos(0, 2))
    assert not is_adjacent(pos(2, 2), pos(2, 2))


def test_direction_between_reports_wrap():
    assert direction_between(pos(0, 0), pos(0, 3)) == (Direction.LEFT, True)
    assert direction_between(pos(1, 1), pos(2, 1)) == (Direction.DOWN, False)
    assert direction_between(pos(3, 1), pos(0, 1)) == (Direction.DOWN, True)
    assert direction_between(pos(0, 0), pos(2, 2)) is None
