"""Unit tests for the Nautica grid: seeding, bomb drops and accounting."""

from __future__ import annotations

import numpy as np
import pytest

from nautica.board import CellCode, NauticaBoard, display_code


def test_new_board_is_all_water() -> None:
    board = NauticaBoard(3)
    assert board.size == 3
    assert all(code is CellCode.WATER for row in board.rows() for code in row)
    assert (board.ship_count, board.successful_hits, board.bombs_dropped) == (0, 0, 0)


@pytest.mark.parametrize("size", [0, -1])
def test_non_positive_size_rejected(size: int) -> None:
    with pytest.raises(ValueError):
        NauticaBoard(size)


@pytest.mark.parametrize(
    "x, y, valid",
    [
        (0, 0, True),
        (2, 2, True),
        (3, 0, False),
        (0, 3, False),
        (-1, 0, False),
        (0, -1, False),
    ],
)
def test_is_valid_coordinate(x: int, y: int, valid: bool) -> None:
    assert NauticaBoard(3).is_valid_coordinate(x, y) is valid


@pytest.mark.parametrize("x, y", [(0, 0), (1, 2), (2, 1)])
def test_second_drop_on_same_cell_fails(board_factory, x: int, y: int) -> None:
    """A cell can be bombed successfully only once, whatever was below it."""
    board = board_factory(3, ships=[(0, 0), (2, 1)])

    assert board.try_drop_bomb(x, y) is True
    assert board.try_drop_bomb(x, y) is False
    assert board.bombs_dropped == 1


def test_drop_on_ship_becomes_hit(board_factory) -> None:
    board = board_factory(3, ships=[(1, 2)])

    assert board.try_drop_bomb(1, 2)
    assert board.cell(1, 2) is CellCode.HIT
    assert board.successful_hits == 1
    assert board.ship_count == 1


def test_drop_on_water_becomes_miss(board_factory) -> None:
    board = board_factory(3, ships=[(1, 2)])

    assert board.try_drop_bomb(2, 1)
    assert board.cell(2, 1) is CellCode.MISS
    assert board.successful_hits == 0
    assert board.bombs_dropped == 1


@pytest.mark.parametrize("x, y", [(3, 0), (0, 3), (-1, -1), (100, 2)])
def test_drop_out_of_range_is_ignored(board_factory, x: int, y: int) -> None:
    board = board_factory(3, ships=[(0, 0)])
    before = board.cells.copy()

    assert board.try_drop_bomb(x, y) is False
    assert board.bombs_dropped == 0
    assert np.array_equal(board.cells, before)


@pytest.mark.parametrize("size", [2, 3, 5, 8])
@pytest.mark.parametrize("probability", [0.2, 0.5, 0.8, 1.0])
def test_randomize_meets_target_density(rng, size: int, probability: float) -> None:
    board = NauticaBoard(size, rng=rng)
    board.randomize(probability)

    assert board.ship_count >= size * size * probability
    assert board.ship_count == int(np.count_nonzero(board.cells == CellCode.SHIP))
    assert board.successful_hits == 0


def test_randomize_only_writes_water_and_ships(rng) -> None:
    board = NauticaBoard(6, rng=rng)
    board.randomize(0.5)
    assert set(np.unique(board.cells).tolist()) <= {CellCode.WATER, CellCode.SHIP}


def test_randomize_zero_leaves_water(board_factory) -> None:
    board = board_factory(4, ships=[(0, 0), (3, 3)])
    board.randomize(0.0)

    assert board.ship_count == 0
    assert not np.any(board.cells != CellCode.WATER)
    assert not board.has_ships_remaining()


@pytest.mark.parametrize("probability", [-0.1, 1.5])
def test_randomize_rejects_bad_probability(probability: float) -> None:
    with pytest.raises(ValueError):
        NauticaBoard(3).randomize(probability)


def test_randomize_resets_hits_but_keeps_bomb_total(rng) -> None:
    board = NauticaBoard(2, rng=rng)
    board.randomize(1.0)
    board.try_drop_bomb(0, 0)
    board.try_drop_bomb(1, 1)

    board.randomize(1.0)

    assert board.successful_hits == 0
    assert board.ship_count == 4
    assert board.bombs_dropped == 2


def test_same_seed_same_layout() -> None:
    first = NauticaBoard(6, rng=np.random.default_rng(42))
    second = NauticaBoard(6, rng=np.random.default_rng(42))
    first.randomize(0.5)
    second.randomize(0.5)
    assert np.array_equal(first.cells, second.cells)


def test_hard_density_on_tiny_board_retries_until_a_ship(rng) -> None:
    """2x2 at 0.2 needs at least one ship; empty trials are redrawn."""
    for _ in range(50):
        board = NauticaBoard(2, rng=rng)
        board.randomize(0.2)
        assert board.ship_count >= 1


def test_no_ships_means_nothing_remaining() -> None:
    board = NauticaBoard(3)
    assert not board.has_ships_remaining()

    board.successful_hits = 5
    assert not board.has_ships_remaining()


def test_ships_remaining_until_every_ship_cell_hit(board_factory) -> None:
    board = board_factory(3, ships=[(0, 0), (0, 1)])
    assert board.has_ships_remaining()

    board.try_drop_bomb(0, 0)
    assert board.has_ships_remaining()

    board.try_drop_bomb(0, 1)
    assert not board.has_ships_remaining()
    assert board.successful_hits == board.ship_count == 2


def test_cell_equals_and_try_set_cell() -> None:
    board = NauticaBoard(2)

    board.try_set_cell(1, 0, CellCode.HIT)
    assert board.cell_equals(1, 0, CellCode.HIT)
    assert not board.cell_equals(0, 1, CellCode.HIT)

    # off-board writes and reads are silently ignored
    board.try_set_cell(5, 5, CellCode.SHIP)
    assert not board.cell_equals(5, 5, CellCode.SHIP)
    assert board.cell(5, 5) is None


def test_unknown_is_never_stored() -> None:
    with pytest.raises(ValueError):
        NauticaBoard(2).try_set_cell(0, 0, CellCode.UNKNOWN)


def test_place_ships_rejects_off_board_position() -> None:
    with pytest.raises(ValueError):
        NauticaBoard(2).place_ships([(0, 0), (2, 0)])


@pytest.mark.parametrize(
    "code, hide, expected",
    [
        (CellCode.WATER, True, CellCode.UNKNOWN),
        (CellCode.SHIP, True, CellCode.UNKNOWN),
        (CellCode.MISS, True, CellCode.MISS),
        (CellCode.HIT, True, CellCode.HIT),
        (CellCode.WATER, False, CellCode.WATER),
        (CellCode.SHIP, False, CellCode.SHIP),
    ],
)
def test_display_code(code: CellCode, hide: bool, expected: CellCode) -> None:
    assert display_code(code, hide) is expected


def test_rows_are_row_major(board_factory) -> None:
    board = board_factory(2, ships=[(1, 0)])
    board.try_drop_bomb(0, 1)

    assert list(board.rows()) == [
        (CellCode.WATER, CellCode.SHIP),
        (CellCode.MISS, CellCode.WATER),
    ]
    assert list(board.rows(hide=True)) == [
        (CellCode.UNKNOWN, CellCode.UNKNOWN),
        (CellCode.MISS, CellCode.UNKNOWN),
    ]
