from tetris_config import CONFIG
from tetris_layout import compute_dims


def test_board_area_follows_cell_size(monkeypatch):
    monkeypatch.setitem(CONFIG, "CELL_SIZE", 10)
    d = compute_dims()
    assert (d.board_w, d.board_h) == (100, 200)
    assert d.total_h == d.margin * 2 + 200
    assert d.panel_x == d.board_x + 100 + d.margin
    assert d.total_w == d.panel_x + d.panel_w + d.margin


def test_cell_origin(monkeypatch):
    monkeypatch.setitem(CONFIG, "CELL_SIZE", 10)
    d = compute_dims()
    assert d.cell_origin(0, 0) == (d.board_x, d.board_y)
    assert d.cell_origin(2, 3) == (d.board_x + 30, d.board_y + 20)
