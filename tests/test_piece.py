import dataclasses

import pytest

from tetris_piece import CATALOGUE, PIECES, SPAWN_COL, SPAWN_ROW, Piece, Tetromino


def test_catalogue_has_seven_kinds():
    assert sorted(PIECES) == ["I", "J", "L", "O", "S", "T", "Z"]


@pytest.mark.parametrize("t", PIECES)
def test_every_rotation_has_four_cells(t):
    kind = CATALOGUE[t]
    assert kind.rotations
    for state in kind.rotations:
        assert len(state) == 4
        assert len(set(state)) == 4


def test_rotation_counts():
    counts = {t: len(k.rotations) for t, k in CATALOGUE.items()}
    assert counts == {"I": 2, "O": 1, "T": 4, "L": 4, "J": 4, "S": 2, "Z": 2}


def test_catalogue_is_read_only():
    with pytest.raises(TypeError):
        CATALOGUE["X"] = CATALOGUE["I"]
    with pytest.raises(dataclasses.FrozenInstanceError):
        CATALOGUE["I"].color = (0, 0, 0)


def test_tetromino_rejects_wrong_cell_count():
    with pytest.raises(ValueError):
        Tetromino("X", (((0, 0), (0, 1), (0, 2)),), (1, 2, 3))
    with pytest.raises(ValueError):
        Tetromino("X", (), (1, 2, 3))


def test_spawn_position():
    p = Piece.spawn("T")
    assert (p.t, p.state, p.row, p.col) == ("T", 0, SPAWN_ROW, SPAWN_COL)
    assert (SPAWN_ROW, SPAWN_COL) == (0, 3)


def test_spawn_unknown_kind():
    with pytest.raises(KeyError):
        Piece.spawn("Q")


def test_cells_are_anchor_plus_offsets():
    p = Piece("O", 0, 5, 2)
    assert sorted(p.cells()) == [(5, 2), (5, 3), (6, 2), (6, 3)]


def test_vertical_i_reaches_above_anchor():
    p = Piece.spawn("I").rotated()
    assert sorted(r for r, _ in p.cells()) == [-1, 0, 1, 2]
    assert {c for _, c in p.cells()} == {4}


def test_rotation_wraps_around():
    p = Piece.spawn("I")
    assert p.rotated().state == 1
    assert p.rotated().rotated().state == 0
    assert Piece.spawn("O").rotated().state == 0
    t = Piece.spawn("T")
    for _ in range(4):
        t = t.rotated()
    assert t.state == 0


def test_moved_returns_new_piece():
    p = Piece.spawn("S")
    q = p.moved(drow=1, dcol=-1)
    assert (q.row, q.col) == (1, 2)
    assert (p.row, p.col) == (0, 3)
