import io

import pytest

from wirefdf.libft.lines import BUFF_SIZE, LineReader


def test_reads_lines_without_newlines():
    reader = LineReader(io.StringIO("a\nbb\nccc\n"))
    assert list(reader) == ["a", "bb", "ccc"]


def test_last_line_without_newline():
    reader = LineReader(io.StringIO("first\nsecond"))
    assert list(reader) == ["first", "second"]


def test_empty_lines_are_kept():
    reader = LineReader(io.StringIO("a\n\nb\n"))
    assert list(reader) == ["a", "", "b"]


def test_empty_stream():
    reader = LineReader(io.StringIO(""))
    assert reader.next_line() is None


def test_end_is_sticky():
    reader = LineReader(io.StringIO("only"))
    assert reader.next_line() == "only"
    assert reader.next_line() is None
    assert reader.next_line() is None


def test_line_longer_than_buffer():
    text = "x" * (BUFF_SIZE * 3 + 5)
    reader = LineReader(io.StringIO(text + "\nend\n"))
    assert list(reader) == [text, "end"]


@pytest.mark.parametrize("size", [1, 2, 3, 7, 64])
def test_buffer_size_does_not_change_result(size):
    text = "0 1 2\n3 4 5\n\n6 7\n"
    reader = LineReader(io.StringIO(text), buffer_size=size)
    assert list(reader) == text.split("\n")[:-1]


def test_binary_stream_is_decoded():
    reader = LineReader(io.BytesIO("h\u00e9\nworld".encode("utf-8")), buffer_size=1)
    assert list(reader) == ["h\u00e9", "world"]


def test_negative_buffer_size_rejected():
    with pytest.raises(ValueError):
        LineReader(io.StringIO("a"), buffer_size=-1)


def test_zero_buffer_reads_nothing():
    reader = LineReader(io.StringIO("abc\n"), buffer_size=0)
    assert reader.next_line() is None