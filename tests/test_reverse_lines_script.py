import pytest

from scripts.reverse_lines import drain, main


def test_drain_counts_lines(tmp_path, capsys):
    path = tmp_path / "log.txt"
    path.write_text("a\nb\nc\n")
    assert drain(path, print_reversed=False) == 3
    assert capsys.readouterr().out == ""


def test_main_prints_reversed_lines(tmp_path, capsys):
    path = tmp_path / "log.txt"
    path.write_text("first\nsecond\nthird\n")

    main([str(path), "--print-reversed"])

    out = capsys.readouterr().out.splitlines()
    assert out[0] == f"Reading {path}"
    assert out[1] == "Print each line in reversed order: True"
    assert out[2:5] == ["third", "second", "first"]
    assert out[5].startswith("execution time: ")
    assert out[5].endswith("ms")


def test_main_without_print_flag(tmp_path, capsys):
    path = tmp_path / "log.txt"
    path.write_text("first\nsecond\n")

    main([str(path)])

    out = capsys.readouterr().out.splitlines()
    assert out[1] == "Print each line in reversed order: False"
    assert "first" not in out
    assert len(out) == 3


def test_main_missing_file_exits(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main([str(tmp_path / "missing.txt")])
    assert exc_info.value.code == 1
    assert capsys.readouterr().out.startswith("Error: ")


def test_main_oversized_line_exits(tmp_path):
    path = tmp_path / "huge.txt"
    path.write_bytes(b"x" * (1024 * 1024))
    with pytest.raises(SystemExit) as exc_info:
        main([str(path)])
    assert exc_info.value.code == 1
