import pytest

from wirefdf.app import Key, Quit, apply_key, main
from wirefdf.render import View


def test_escape_quits():
    with pytest.raises(Quit):
        apply_key(View(), Key.ESCAPE)


def test_escape_by_code_quits():
    with pytest.raises(Quit):
        apply_key(View(), 53)


def test_rotation():
    view = View()
    rotated = apply_key(view, Key.Q)
    assert rotated.deg == pytest.approx(0.55, abs=1e-6)
    assert view.deg == 0.5


def test_size_keys_are_inverse():
    view = View()
    bigger = apply_key(view, Key.W)
    assert bigger.space == view.space + 1
    assert apply_key(bigger, Key.S) == view


def test_arrows_move():
    view = View()
    assert apply_key(view, Key.LEFT).x_move == view.x_move - 10
    assert apply_key(view, Key.RIGHT).x_move == view.x_move + 10
    assert apply_key(view, Key.UP).y_move == view.y_move - 10
    assert apply_key(view, Key.DOWN).y_move == view.y_move + 10


def test_color_change():
    view = View()
    assert apply_key(view, Key.E).color == view.color + 8847592


@pytest.mark.parametrize("key", [Key.A, Key.D, 99])
def test_other_keys_leave_view(key):
    view = View(x_move=3)
    assert apply_key(view, key) == view


def test_int_code_matches_enum():
    view = View()
    assert apply_key(view, 13) == apply_key(view, Key.W)


def test_main_needs_one_argument(capsys):
    assert main([]) == 1
    assert "2 arguments expected" in capsys.readouterr().err


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.fdf")]) == 1
    assert "Error : Can't open file" in capsys.readouterr().err


def test_main_invalid_map(tmp_path, capsys):
    path = tmp_path / "bad.fdf"
    path.write_text("1 x 2\n")
    assert main([str(path)]) == 1
    assert "Error : Invalid map" in capsys.readouterr().err