import io

import pytest

from llrbtree.prompt import EndOfInput, read_uint


def _read(text, prompt="> "):
    stdin = io.StringIO(text)
    stdout = io.StringIO()
    value = read_uint(prompt, stdin, stdout)
    return value, stdout.getvalue(), stdin


def test_reads_plain_number_and_writes_prompt():
    value, out, _ = _read("42\n")
    assert value == 42
    assert out == "> "


def test_invalid_text_is_reported_and_retried():
    value, out, _ = _read("abc\n7\n")
    assert value == 7
    assert "некорректный ввод" in out


def test_trailing_garbage_is_reported_and_retried():
    value, out, _ = _read("12x\n5\n")
    assert value == 5
    assert "попробуйте еще раз" in out


def test_blank_lines_and_leading_spaces_are_skipped():
    value, out, _ = _read("\n   \n  9\n")
    assert value == 9
    assert out == "> "


def test_negative_number_wraps_like_unsigned():
    value, _, _ = _read("-1\n")
    assert value == 2**32 - 1


def test_empty_stream_raises_end_of_input():
    stdout = io.StringIO()
    with pytest.raises(EndOfInput):
        read_uint("", io.StringIO(""), stdout)
    assert "(EOF)" in stdout.getvalue()


def test_number_without_newline_then_eof():
    stdout = io.StringIO()
    with pytest.raises(EndOfInput):
        read_uint("", io.StringIO("8"), stdout)
    assert "попробуйте еще раз" in stdout.getvalue()


def test_only_one_line_is_consumed():
    value, _, stdin = _read("3\n4\n")
    assert value == 3
    assert stdin.readline() == "4\n"