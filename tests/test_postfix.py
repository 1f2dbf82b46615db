import pytest

from puzzlekit.postfix import (
    InvalidMathOpError,
    LineType,
    MathOp,
    MathProblems,
    UnknownLineTypeError,
    classify_line,
    get_op,
    main,
    parse_leading_int,
)

EXAMPLE = [
    "123 328  51 64 ",
    " 45 64  387 23 ",
    "  6 98  215 314",
    "*   +   *   +  ",
]


def test_parse_leading_int():
    assert parse_leading_int("123abc") == (123, 3)
    assert parse_leading_int("7") == (7, 1)


def test_parse_leading_int_requires_digits():
    with pytest.raises(ValueError):
        parse_leading_int(" 12")


def test_get_op():
    assert get_op("+") is MathOp.SUM
    assert get_op("*") is MathOp.PRODUCT


def test_get_op_invalid():
    with pytest.raises(InvalidMathOpError) as info:
        get_op("-")
    assert info.value.char == "-"


def test_classify_line():
    assert classify_line("  12 3") is LineType.NUMBERS
    assert classify_line(b" + *") is LineType.OPS
    assert classify_line("   ") is LineType.EMPTY


def test_classify_unknown():
    with pytest.raises(UnknownLineTypeError):
        classify_line("  x 1")


def test_example_shape():
    problems = MathProblems.from_lines(EXAMPLE)
    assert (problems.width, problems.height) == (4, 3)
    assert problems.rows[0] == [123, 328, 51, 64]
    assert problems.operators == [MathOp.PRODUCT, MathOp.SUM, MathOp.PRODUCT, MathOp.SUM]


def test_example_solution():
    problems = MathProblems.from_lines(EXAMPLE)
    assert problems.solve() == [33210, 490, 4243455, 401]


def test_single_row_is_identity():
    assert MathProblems.from_lines(["5 7 9", "+ * +"]).solve() == [5, 7, 9]


def test_product_with_ones_unchanged():
    base = MathProblems.from_lines(["4 6", "3 2", "* *"]).solve()
    padded = MathProblems.from_lines(["4 6", "1 1", "3 2", "* *"]).solve()
    assert base == padded


def test_sum_with_zeros_unchanged():
    base = MathProblems.from_lines(["4 6", "3 2", "+ +"]).solve()
    padded = MathProblems.from_lines(["0 0", "4 6", "3 2", "+ +"]).solve()
    assert base == padded


def test_bytes_lines_match_str_lines():
    from_bytes = MathProblems.from_lines([line.encode() for line in EXAMPLE])
    assert from_bytes == MathProblems.from_lines(EXAMPLE)


def test_trailing_empty_line_allowed():
    problems = MathProblems.from_lines(EXAMPLE + [""])
    assert problems.height == 3


def test_ops_first_line_rejected():
    with pytest.raises(ValueError):
        MathProblems.from_lines(["+ *", "1 2"])


def test_empty_first_line_rejected():
    with pytest.raises(ValueError):
        MathProblems.from_lines(["", "1 2", "+ *"])


def test_mismatched_number_width():
    with pytest.raises(ValueError):
        MathProblems.from_lines(["1 2", "3", "+ *"])


def test_too_many_numbers():
    with pytest.raises(ValueError):
        MathProblems.from_lines(["1 2", "3 4 5", "+ *"])


def test_missing_ops_line():
    with pytest.raises(ValueError):
        MathProblems.from_lines(["1 2", "3 4"])


def test_empty_line_in_middle_rejected():
    with pytest.raises(ValueError):
        MathProblems.from_lines(["1 2", "", "3 4", "+ *"])


def test_unknown_line_rejected():
    with pytest.raises(UnknownLineTypeError):
        MathProblems.from_lines(["1 2", "a b", "+ *"])


def test_no_lines():
    with pytest.raises(ValueError):
        MathProblems.from_lines([])


def test_from_file(tmp_path):
    path = tmp_path / "problems.txt"
    path.write_text("\n".join(EXAMPLE) + "\n")
    assert MathProblems.from_file(path) == MathProblems.from_lines(EXAMPLE)


def test_main_output(tmp_path, capsys):
    path = tmp_path / "problems.txt"
    path.write_text("\n".join(EXAMPLE))
    assert main([str(path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "width: 4 height: 3"
    values = [int(line.split(": ")[1]) for line in lines[1:-1]]
    assert values == MathProblems.from_lines(EXAMPLE).solve()
    assert lines[-1] == f"Sum: {sum(values)}"


def test_main_without_file():
    with pytest.raises(SystemExit):
        main([])