from dataclasses import dataclass


@dataclass
class Token:
    """
    A maximal run of non-whitespace bytes in a stream.

    :param value: The bytes of the token.
    :param start: Offset of the first byte of the token in the stream.
    :param end: Offset one past the last byte of the token in the stream.
    """

    value: bytes
    start: int
    end: int

    def text(self, encoding="utf-8"):
        """
        :returns: The value of the token decoded with the given encoding.
        """
        return self.value.decode(encoding)
