import pytest

from puzzlekit.digitpattern import (
    add_in_range,
    add_invalid_in_ranges,
    check_int,
    check_int_pair,
    check_seq,
    count_digits,
    main,
    make_pattern_num,
    parse_ranges,
)

EXAMPLE = (
    "11-22,95-115,998-1012,1188511880-1188511890,222220-222224,1698522-1698528,"
    "446443-446449,38593856-38593862,565653-565659,824824821-824824827,"
    "2121212118-2121212124"
)


def test_make_pattern():
    assert make_pattern_num(1, 1, 1) == 1
    assert make_pattern_num(1, 1, 2) == 11
    assert make_pattern_num(12, 2, 2) == 1212


@pytest.mark.parametrize("args", [(1, 0, 2), (1, 1, 0)])
def test_make_pattern_rejects_zero(args):
    with pytest.raises(ValueError):
        make_pattern_num(*args)


def test_check_seq():
    assert check_seq(1212, 4, 2)
    assert check_seq(55555, 5, 1)
    assert check_seq(1234512345, 10, 5)


def test_check_seq_neg():
    assert not check_seq(1211, 4, 2)
    assert not check_seq(55255, 5, 1)


def test_check_seq_uneven_length():
    assert not check_seq(1212, 4, 3)


def test_check_int():
    assert check_int(1111)
    assert check_int(1234512345)
    assert not check_int(543)


def test_check_int_zero():
    assert not check_int(0)


def test_count_digits():
    assert count_digits(0) == 0
    assert count_digits(1234512345) == 10
    assert count_digits(543) == 3


def test_check_int_pair():
    assert check_int_pair(1212)
    assert check_int_pair(1234512345)
    assert not check_int_pair(55555)
    assert not check_int_pair(1211)


def test_parse_ranges():
    assert parse_ranges("11-22,95-115") == [(11, 22), (95, 115)]


def test_parse_ranges_bytes_stop_at_newline():
    assert parse_ranges(b"3-5\n7-9") == [(3, 5)]


@pytest.mark.parametrize("text", ["", "11", "11-", "11-22;30-40", "a-b", "11-22,"])
def test_parse_ranges_errors(text):
    with pytest.raises(ValueError):
        parse_ranges(text)


def test_add_in_range():
    assert add_in_range(11, 22) == 33


def test_main_requires_file():
    with pytest.raises(SystemExit, match="Need a file argument!"):
        main([])