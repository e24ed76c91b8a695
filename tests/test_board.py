import pytest

from warfield.board import (
    HEIGHT,
    SQUARE_COUNT,
    WIDTH,
    Board,
    BoardError,
    coords,
    manhattan,
    square_id,
)
from warfield.units import Admin, SoldiersType, make_unit


def _unit(cid=0):
    return make_unit(SoldiersType.INFANTRY, cid, "Inf", Admin.REBEL)


def test_coords_round_trip():
    for y in range(HEIGHT):
        for x in range(WIDTH):
            assert coords(square_id(x, y)) == (x, y)


def test_ids_cover_board_exactly():
    ids = sorted(square_id(x, y) for x in range(WIDTH) for y in range(HEIGHT))
    assert ids == list(range(SQUARE_COUNT))


def test_row_stride():
    assert square_id(0, 1) - square_id(0, 0) == WIDTH


@pytest.mark.parametrize("x,y", [(-1, 0), (WIDTH, 0), (0, -1), (0, HEIGHT)])
def test_square_id_off_board(x, y):
    with pytest.raises(BoardError):
        square_id(x, y)


@pytest.mark.parametrize("sid", [-1, SQUARE_COUNT])
def test_coords_off_board(sid):
    with pytest.raises(BoardError):
        coords(sid)


def test_manhattan_properties():
    samples = [0, 9, 45, 77, 140, 149]
    for a in samples:
        assert manhattan(a, a) == 0
        for b in samples:
            assert manhattan(a, b) == manhattan(b, a)
            for c in samples:
                assert manhattan(a, c) <= manhattan(a, b) + manhattan(b, c)


def test_manhattan_adjacent_is_one():
    board = Board()
    for n in board.neighbours(55):
        assert manhattan(55, n) == 1


def test_neighbours_of_corner_in_search_order():
    board = Board()
    assert board.neighbours(0) == [square_id(0, 1), square_id(1, 0)]


def test_neighbours_of_interior():
    board = Board()
    assert len(board.neighbours(square_id(4, 7))) == 4


def test_board_squares_match_coordinates():
    board = Board()
    assert len(board) == SQUARE_COUNT
    for sq in board:
        assert (sq.x, sq.y) == coords(sq.square_id)
        assert not sq.occupied


def test_square_at_and_in_bounds():
    board = Board()
    assert board.square_at(3, 4) is board.square(square_id(3, 4))
    assert board.in_bounds(WIDTH - 1, HEIGHT - 1)
    assert not board.in_bounds(WIDTH, 0)
    with pytest.raises(BoardError):
        board.square(SQUARE_COUNT)


def test_place_and_move():
    board = Board()
    unit = _unit()
    board.place(unit, 12)
    assert board.square(12).character is unit
    assert unit.position == 12
    board.move(12, 13)
    assert board.square(12).character is None
    assert board.square(13).character is unit
    assert unit.position == 13


def test_place_on_occupied_square_raises():
    board = Board()
    board.place(_unit(0), 5)
    with pytest.raises(BoardError):
        board.place(_unit(1), 5)


def test_move_errors():
    board = Board()
    board.place(_unit(0), 5)
    board.place(_unit(1), 6)
    with pytest.raises(BoardError):
        board.move(5, 6)
    with pytest.raises(BoardError):
        board.move(7, 8)


def test_remove():
    board = Board()
    unit = _unit()
    board.place(unit, 20)
    assert board.remove(20) is unit
    assert not board.square(20).occupied
    with pytest.raises(BoardError):
        board.remove(20)