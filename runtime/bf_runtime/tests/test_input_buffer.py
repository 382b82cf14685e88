"""
Test suite for the line-buffered input
"""

import io

import pytest

from bf_runtime.errors import BFInputError, E_INPUT_EOF
from bf_runtime.input_buffer import InputBuffer


class CountingStream:
    """Text stream that records how many lines were requested"""

    def __init__(self, lines):
        self.lines = list(lines)
        self.reads = 0

    def readline(self):
        self.reads += 1
        return self.lines.pop(0) if self.lines else ''


class TestConsumption:

    def test_bytes_in_read_order(self):
        buffer = InputBuffer(io.StringIO("abc\n"))
        assert [buffer.pop() for _ in range(4)] == [ord('a'), ord('b'), ord('c'), 10]

    def test_newline_is_kept(self):
        buffer = InputBuffer(io.StringIO("\n"))
        assert buffer.pop() == 10

    def test_reads_one_line_at_a_time(self):
        stream = CountingStream(["hi\n", "yo\n"])
        buffer = InputBuffer(stream)
        buffer.pop()
        assert stream.reads == 1
        assert buffer.pending == 2
        buffer.pop()
        buffer.pop()
        assert stream.reads == 1
        assert buffer.pop() == ord('y')
        assert stream.reads == 2

    def test_multibyte_characters_become_utf8_bytes(self):
        buffer = InputBuffer(io.StringIO("é\n"))
        assert [buffer.pop() for _ in range(3)] == [0xC3, 0xA9, 10]

    def test_binary_stream(self):
        buffer = InputBuffer(io.BytesIO(b"\xff\x00\n"))
        assert [buffer.pop() for _ in range(3)] == [255, 0, 10]

    def test_defaults_to_sys_stdin(self, monkeypatch):
        monkeypatch.setattr('sys.stdin', io.StringIO("z\n"))
        assert InputBuffer().pop() == ord('z')


class TestFeed:

    def test_feed_without_stream_read(self):
        stream = CountingStream([])
        buffer = InputBuffer(stream)
        buffer.feed("ok")
        assert [buffer.pop(), buffer.pop()] == [ord('o'), ord('k')]
        assert stream.reads == 0

    def test_feed_queues_after_pending(self):
        buffer = InputBuffer(io.StringIO("ab\n"))
        buffer.pop()
        buffer.feed(b"Z")
        assert [buffer.pop() for _ in range(3)] == [ord('b'), 10, ord('Z')]


class TestEndOfInput:

    def test_closed_stream_raises(self):
        buffer = InputBuffer(io.StringIO(""))
        with pytest.raises(BFInputError) as exc_info:
            buffer.pop()
        assert exc_info.value.code == E_INPUT_EOF

    def test_last_line_without_newline(self):
        buffer = InputBuffer(io.StringIO("x"))
        assert buffer.pop() == ord('x')
        with pytest.raises(BFInputError):
            buffer.pop()
