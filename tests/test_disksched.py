from array import array

import pytest

from oslab.disksched import (
    Direction,
    Schedule,
    clook,
    cscan,
    fcfs,
    format_report,
    look,
    main,
    read_requests,
    scan,
    sstf,
)

TEXTBOOK = [98, 183, 37, 122, 14, 124, 65, 67]


def _write(path, values):
    path.write_bytes(array("i", values).tobytes())


def test_fcfs_textbook_total():
    result = fcfs(TEXTBOOK, 53)
    assert result.tracks == tuple(TEXTBOOK)
    assert result.total == 640


def test_sstf_textbook_total():
    assert sstf(TEXTBOOK, 53).total == 236


def test_clook_textbook_total():
    assert clook(TEXTBOOK, 53, Direction.RIGHT).total == 322


def test_sstf_is_permutation():
    result = sstf(TEXTBOOK, 53)
    assert sorted(result.tracks) == sorted(TEXTBOOK)


def test_sstf_one_sided_ascending():
    requests = [90, 70, 80]
    result = sstf(requests, 50)
    assert result.tracks == tuple(sorted(requests))
    assert result.total == max(requests) - 50


def test_sstf_empty():
    assert sstf([], 10) == Schedule((), 0)


def test_scan_right_reaches_edge():
    requests = [120, 60, 200]
    result = scan(requests, 50, Direction.RIGHT, 300)
    assert result.tracks == (60, 120, 200, 299)
    assert result.total == 299 - 50
    assert result.start is None


def test_scan_left_starts_at_head_and_visits_zero():
    result = scan(TEXTBOOK, 53, "LEFT", 300)
    assert result.start == 53
    assert 0 in result.tracks
    left_part = result.tracks[: result.tracks.index(0) + 1]
    assert list(left_part) == sorted(left_part, reverse=True)


def test_look_never_exceeds_scan():
    for direction in Direction:
        assert look(TEXTBOOK, 53, direction).total <= scan(TEXTBOOK, 53, direction, 300).total


def test_look_is_permutation():
    result = look(TEXTBOOK, 53, Direction.RIGHT)
    assert sorted(result.tracks) == sorted(TEXTBOOK)


def test_cscan_includes_both_edges():
    result = cscan(TEXTBOOK, 53, Direction.RIGHT, 300)
    assert result.start == 53
    assert result.tracks[0] != 0
    assert 299 in result.tracks and 0 in result.tracks
    assert result.total >= scan(TEXTBOOK, 53, Direction.RIGHT, 300).total


def test_cscan_drops_requests_at_head():
    result = cscan([53, 53], 53, Direction.LEFT, 300)
    assert 53 not in result.tracks


def test_clook_skips_head_track_and_orders():
    result = clook([53] + TEXTBOOK, 53, Direction.LEFT)
    assert 53 not in result.tracks
    assert sorted(result.tracks) == sorted(TEXTBOOK)
    assert result.tracks[0] == max(r for r in TEXTBOOK if r < 53)


def test_bad_direction():
    with pytest.raises(ValueError):
        look(TEXTBOOK, 53, "UP")


def test_format_report_headers():
    text = format_report(TEXTBOOK, 53, "RIGHT")
    assert text.startswith("Total requests: 8\nInitial head position: 53\nDirection of Head: RIGHT\n")
    assert "C-LOOK - Total head movements: 322\n" in text
    assert "\nFCFS DISK SCHEDULING ALGORITHM:\n\n98 183 " in text


def test_format_report_empty():
    text = format_report([], 10, Direction.LEFT)
    assert "No requests to process.\n" in text


def test_read_requests_round_trip(tmp_path):
    path = tmp_path / "request.bin"
    _write(path, TEXTBOOK)
    assert read_requests(path) == TEXTBOOK


def test_read_requests_limit_and_partial(tmp_path):
    path = tmp_path / "request.bin"
    path.write_bytes(array("i", range(1200)).tobytes())
    assert read_requests(path) == list(range(1000))
    short = tmp_path / "short.bin"
    short.write_bytes(array("i", [7, 8]).tobytes() + b"\x01")
    assert read_requests(short) == [7, 8]


def test_read_requests_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_requests(tmp_path / "none.bin")


@pytest.mark.parametrize("argv", [[], ["10"], ["300", "LEFT"], ["-1", "LEFT"], ["10", "UP"]])
def test_main_rejects_arguments(argv, capsys):
    assert main(argv) == 1
    assert capsys.readouterr().out


def test_main_missing_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(["10", "LEFT"]) == 1


def test_main_success(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    _write(tmp_path / "request.bin", TEXTBOOK)
    assert main(["53", "RIGHT"]) == 0
    assert capsys.readouterr().out == format_report(TEXTBOOK, 53, Direction.RIGHT)