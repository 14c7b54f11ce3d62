import pytest

from sidediff.args import Args, parse_args


def test_defaults():
    args = parse_args(["left.txt", "right.txt"])
    assert args == Args(file_1="left.txt", file_2="right.txt")
    assert args.hex is False
    assert args.suppress_common_lines is False
    assert args.width is None
    assert args.context_lines is None


def test_all_options_long():
    args = parse_args(
        ["a", "b", "--hex", "--suppress-common-lines", "--width", "8", "--context-lines", "3"]
    )
    assert args.hex is True
    assert args.suppress_common_lines is True
    assert args.width == 8
    assert args.context_lines == 3


def test_short_options():
    args = parse_args(["-x", "-w", "2", "-c", "0", "a", "b"])
    assert (args.hex, args.width, args.context_lines) == (True, 2, 0)
    assert (args.file_1, args.file_2) == ("a", "b")


def test_missing_file_is_an_error():
    with pytest.raises(SystemExit):
        parse_args(["only-one"])


@pytest.mark.parametrize("value", ["-1", "abc"])
def test_bad_numbers_rejected(value):
    with pytest.raises(SystemExit):
        parse_args(["a", "b", "--width", value])