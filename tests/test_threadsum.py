import pytest

from oslab.threadsum import main, parallel_sum


def test_default_list_sum():
    assert parallel_sum(range(1, 21)) == 210


@pytest.mark.parametrize("workers", [1, 2, 3, 7, 25])
def test_worker_count_does_not_change_result(workers):
    values = [5, -3, 8, 100, 0, 42, -17]
    assert parallel_sum(values, workers) == parallel_sum(values, 1)


def test_empty_input():
    assert parallel_sum([]) == 0


def test_invalid_workers():
    with pytest.raises(ValueError):
        parallel_sum([1, 2], 0)


def test_main_default(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "210\n"


def test_main_given_values(capsys):
    assert main(["4", "6"]) == 0
    assert capsys.readouterr().out == "10\n"


def test_main_bad_value():
    assert main(["x"]) == 1