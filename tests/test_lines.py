import io

import pytest

from pixelkit.lines import LineReader


class ChunkStream:
    def __init__(self, chunks):
        self.chunks = list(chunks)
        self.sizes = []

    def read(self, size):
        self.sizes.append(size)
        return self.chunks.pop(0) if self.chunks else ""


@pytest.mark.parametrize(
    "text",
    ["a\nb\nc", "a\n\nb\n", "single", "x\n", "\n\n", "long line here\nshort\n"],
)
@pytest.mark.parametrize("size", [1, 3, 100])
def test_lines_match_splitlines(text, size):
    reader = LineReader(io.StringIO(text), size)
    assert list(reader) == text.splitlines()


def test_empty_stream_gives_none():
    reader = LineReader(io.StringIO(""))
    assert reader.read_line() is None


def test_line_longer_than_buffer_is_whole():
    reader = LineReader(io.StringIO("abcdefgh\nxy"), 3)
    assert reader.read_line() == "abcdefgh"
    assert reader.read_line() == "xy"
    assert reader.read_line() is None


def test_trailing_newline_gives_no_extra_line():
    reader = LineReader(io.StringIO("x\n"))
    assert reader.read_line() == "x"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_bytes_stream():
    reader = LineReader(io.BytesIO(b"one\ntwo\n"), 2)
    assert list(reader) == [b"one", b"two"]


def test_buffer_size_is_passed_to_read():
    stream = ChunkStream(["ab\n"])
    reader = LineReader(stream, 7)
    assert reader.read_line() == "ab"
    assert stream.sizes == [7]


def test_default_buffer_size():
    stream = ChunkStream(["ab\n"])
    LineReader(stream).read_line()
    assert stream.sizes == [100]


def test_reading_continues_after_end_of_data():
    stream = ChunkStream(["ab", "", "cd\n"])
    reader = LineReader(stream)
    assert reader.read_line() == "ab"
    assert reader.read_line() == "cd"
    assert reader.read_line() is None


def test_blank_lines_kept():
    reader = LineReader(io.StringIO("a\n\n\nb"))
    assert list(reader) == ["a", "", "", "b"]


@pytest.mark.parametrize("size", [0, -5])
def test_invalid_buffer_size(size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("x"), size)


def test_read_error_propagates():
    class Broken:
        def read(self, size):
            raise OSError("boom")

    reader = LineReader(Broken())
    with pytest.raises(OSError):
        reader.read_line()