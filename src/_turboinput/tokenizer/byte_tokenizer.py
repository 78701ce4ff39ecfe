import logging

from _turboinput.tokenizer.common import as_bytes, skip_whitespace, take_word
from _turboinput.tokenizer.errors import StreamError
from _turboinput.tokenizer.token import Token

logger = logging.getLogger(__name__)

DEFAULT_BUFFER_SIZE = 1 << 16


class ByteTokenizer:
    """
    The byte tokenizer is an iterable of whitespace separated tokens
    in a stream. It reads the stream in chunks of at most buffer_size
    and keeps a cursor into the last chunk read, so each byte of the
    stream is looked at once.

    >>> tokenizer = ByteTokenizer(io.BytesIO(b"1 22\\n333"))
    >>> [t.value for t in tokenizer]
    [b'1', b'22', b'333']

    """

    def __init__(self, stream, buffer_size=DEFAULT_BUFFER_SIZE, encoding="utf-8"):
        """
        :param stream: Any object with a read(size) method, returning bytes.
            Text streams are accepted, their chunks are encoded with the
            given encoding.
        :param buffer_size: The number of bytes requested from the stream
            per refill.
        :param encoding: Encoding used for text streams.
        """
        if not isinstance(buffer_size, int) or buffer_size < 1:
            raise ValueError(
                f"buffer_size has to be a positive integer, got {buffer_size!r}"
            )
        self.stream = stream
        self.buffer_size = buffer_size
        self.encoding = encoding

        self._buffer = b""
        self._cursor = 0
        self._filled = 0
        # Stream offset of the first byte in the buffer
        self._offset = 0
        self._exhausted = False

    @property
    def exhausted(self):
        """
        Whether the stream has signaled its end.
        """
        return self._exhausted

    @property
    def position(self):
        """
        Offset in the stream of the next unconsumed byte.
        """
        return self._offset + self._cursor

    def refill(self):
        """
        Replace the buffer with the next chunk of the stream.

        :returns: False if the stream has ended, True otherwise.
        """
        if self._exhausted:
            return False
        try:
            chunk = self.stream.read(self.buffer_size)
        except (OSError, ValueError) as err:
            raise StreamError(
                f"Failed to read from stream at {self.position}: {err}"
            ) from err

        self._offset += self._filled
        self._buffer = as_bytes(chunk, self.encoding) if chunk else b""
        self._cursor = 0
        self._filled = len(self._buffer)

        if not self._filled:
            logger.debug("Reached end of stream at %d", self._offset)
            self._exhausted = True
            return False

        logger.debug("Read %d bytes at %d", self._filled, self._offset)
        return True

    def next_token(self):
        """
        Take the next token from the stream.

        :returns: The next Token, or None if only whitespace is
            left in the stream.
        """
        while True:
            self._cursor = skip_whitespace(self._buffer, self._cursor).end()
            if self._cursor < self._filled:
                break
            if not self.refill():
                return None

        start = self.position
        parts = []
        while True:
            end = take_word(self._buffer, self._cursor).end()
            parts.append(self._buffer[self._cursor : end])
            self._cursor = end
            # A token ending exactly at the end of the buffer may
            # continue in the next chunk.
            if end < self._filled or not self.refill():
                break

        value = parts[0] if len(parts) == 1 else b"".join(parts)
        return Token(value, start, start + len(value))

    def __iter__(self):
        token = self.next_token()
        while token is not None:
            yield token
            token = self.next_token()
