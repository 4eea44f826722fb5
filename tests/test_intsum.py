import struct

import pytest

from oslab.intsum import main, read_ints


def _write(path, values):
    path.write_bytes(struct.pack(f"={len(values)}i", *values))


def test_read_ints_round_trip(tmp_path):
    values = [3, -7, 100, 0, 42, -1, 8, 9, 10, 11]
    path = tmp_path / "numbers.bin"
    _write(path, values)
    assert read_ints(path) == values


def test_read_ints_ignores_extra(tmp_path):
    path = tmp_path / "numbers.bin"
    _write(path, list(range(15)))
    assert read_ints(path) == list(range(10))
    assert read_ints(path, 3) == [0, 1, 2]


def test_read_ints_short_file(tmp_path):
    path = tmp_path / "numbers.bin"
    _write(path, [1, 2, 3])
    with pytest.raises(ValueError):
        read_ints(path)


def test_read_ints_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_ints(tmp_path / "none.bin")


def test_main_default_file(tmp_path, monkeypatch, capsys):
    values = list(range(1, 11))
    _write(tmp_path / "numbers.bin", values)
    monkeypatch.chdir(tmp_path)
    assert main([]) == 0
    assert capsys.readouterr().out == f"Sum of numbers: {sum(values)}\n"


def test_main_wraps_like_int32(tmp_path, capsys):
    path = tmp_path / "big.bin"
    _write(path, [2**31 - 1, 1] + [0] * 8)
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == f"Sum of numbers: {-(2**31)}\n"


def test_main_missing(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main([]) == 1
    assert capsys.readouterr().err.startswith("Error opening file")