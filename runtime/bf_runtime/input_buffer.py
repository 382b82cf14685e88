"""
BF Runtime - Input Buffer

Line-buffered queue of pending input bytes. Bytes are stored reversed so the
next byte to consume is always at the tail. When the queue is empty a blocking
readline() refills it with one whole line, newline included.
"""

from typing import IO, List, Optional, Union
import logging
import sys

from .config import DEFAULT_ENCODING
from .errors import BFInputError

logger = logging.getLogger(__name__)


class InputBuffer:
    """Pending input bytes, refilled one line at a time"""

    def __init__(self, stream: Optional[IO] = None, encoding: str = DEFAULT_ENCODING):
        self._stream = stream
        self.encoding = encoding
        self._pending: List[int] = []

    @property
    def stream(self) -> IO:
        # resolved lazily so redirected stdin is honoured
        return self._stream if self._stream is not None else sys.stdin

    @property
    def pending(self) -> int:
        return len(self._pending)

    def feed(self, data: Union[str, bytes]):
        """Queue data to be consumed after anything already pending"""
        if isinstance(data, str):
            data = data.encode(self.encoding)
        self._pending[:0] = reversed(data)

    def pop(self) -> int:
        """
        Next input byte, blocking on the stream while the buffer is empty.

        Raises:
            BFInputError: the stream reached end of file
        """
        while not self._pending:
            self._fill()
        return self._pending.pop()

    def _fill(self):
        line = self.stream.readline()
        if not line:
            raise BFInputError("Input stream closed while waiting for a line")
        if isinstance(line, str):
            line = line.encode(self.encoding)
        logger.debug("read %d input bytes", len(line))
        self._pending = list(reversed(line))


__all__ = ['InputBuffer']
