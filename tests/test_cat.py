from slstatus.components.cat import cat


def test_cat_returns_first_line(tmp_path):
    path = tmp_path / "file"
    path.write_text("hello\nworld\n")
    assert cat(str(path)) == "hello"


def test_cat_without_trailing_newline(tmp_path):
    path = tmp_path / "file"
    path.write_text("single")
    assert cat(str(path)) == "single"


def test_cat_empty_file(tmp_path):
    path = tmp_path / "file"
    path.write_text("")
    assert cat(str(path)) is None


def test_cat_blank_line(tmp_path):
    path = tmp_path / "file"
    path.write_text("\nsecond\n")
    assert cat(str(path)) is None


def test_cat_truncates_long_line(tmp_path):
    path = tmp_path / "file"
    path.write_text("x" * 5000 + "\n")
    result = cat(str(path))
    assert result == "x" * 1022


def test_cat_missing_file(tmp_path, capsys):
    assert cat(str(tmp_path / "missing")) is None
    assert "fopen" in capsys.readouterr().err