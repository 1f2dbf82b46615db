import pytest

from puzzlekit.rotator import Dial, count_zero_crossings, main, parse_line

EXAMPLE = ["L68", "L30", "R48", "L5", "R60", "L55", "L1", "L99", "R14", "L82"]


def test_parse_line_directions():
    assert parse_line("R10") == 10
    assert parse_line("L7") == -7


@pytest.mark.parametrize("line", ["", "X5", "r10", " R10"])
def test_parse_line_ignores_other_lines(line):
    assert parse_line(line) is None


@pytest.mark.parametrize("line", ["Rabc", "L", "R1x"])
def test_parse_line_rejects_bad_numbers(line):
    with pytest.raises(ValueError):
        parse_line(line)


def test_dial_starts_at_fifty():
    dial = Dial()
    assert (dial.state, dial.zero_count) == (50, 0)


def test_spin_zero_changes_nothing():
    dial = Dial()
    dial.spin(0)
    assert (dial.state, dial.zero_count) == (50, 0)


@pytest.mark.parametrize("n", [3, 30, 49, 50, 99, 150, 1234, -7, -50, -777])
def test_spin_back_and_forth_returns_to_start(n):
    dial = Dial()
    dial.spin(n)
    assert 0 <= dial.state < 100
    dial.spin(-n)
    assert dial.state == 50


@pytest.mark.parametrize("k", [1, 2, 3, -1, -2, -5])
def test_full_turns_count_each_pass(k):
    dial = Dial()
    dial.spin(100 * k)
    assert dial.state == 50
    assert dial.zero_count == abs(k)


def test_landing_on_zero_counts():
    dial = Dial()
    dial.spin(-50)
    assert dial.state == 0
    assert dial.zero_count == 1


def test_worked_example():
    assert count_zero_crossings(EXAMPLE) == 6


def test_unparsable_lines_are_skipped():
    assert count_zero_crossings(["", "# note"] + EXAMPLE + [""]) == count_zero_crossings(
        EXAMPLE
    )


def test_main_prints_count(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("\n".join(EXAMPLE) + "\n")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out.strip() == "Zero count: 6"


def test_main_requires_file():
    with pytest.raises(SystemExit, match="Need a file argument!"):
        main([])