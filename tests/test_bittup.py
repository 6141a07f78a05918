import pytest

from algobox.bittup import MODULUS, count_bit_tuples, main


@pytest.mark.parametrize("m", [0, 1, 5, 10**12])
def test_single_bit_gives_one(m):
    assert count_bit_tuples(1, m) == 1


@pytest.mark.parametrize("n", [1, 2, 30, 10**9])
def test_zero_length_tuple_counts_once(n):
    assert count_bit_tuples(n, 0) == 1


def test_small_values():
    assert count_bit_tuples(3, 1) == 7
    assert count_bit_tuples(2, 2) == 9


def test_zero_bits_give_nothing():
    assert count_bit_tuples(0, 3) == 0


@pytest.mark.parametrize("n, a, b", [(5, 3, 4), (40, 17, 23), (10**6, 10**5, 7)])
def test_power_law_in_m(n, a, b):
    combined = count_bit_tuples(n, a + b)
    assert combined == count_bit_tuples(n, a) * count_bit_tuples(n, b) % MODULUS


@pytest.mark.parametrize("n, m", [(10**18, 10**18), (123456, 654321)])
def test_result_is_reduced(n, m):
    assert 0 <= count_bit_tuples(n, m) < MODULUS


@pytest.mark.parametrize("n, m", [(-1, 2), (2, -1)])
def test_negative_arguments_are_rejected(n, m):
    with pytest.raises(ValueError):
        count_bit_tuples(n, m)


def test_main_prints_each_count(tmp_path, capsys):
    data = tmp_path / "cases.txt"
    data.write_text("3\n1 5\n3 1\n40 17\n")
    assert main([str(data)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        str(count_bit_tuples(1, 5)),
        str(count_bit_tuples(3, 1)),
        str(count_bit_tuples(40, 17)),
    ]


def test_main_reports_truncated_input(tmp_path, capsys):
    data = tmp_path / "cases.txt"
    data.write_text("2\n1 5\n")
    assert main([str(data)]) == 1
    assert "error" in capsys.readouterr().err