class ScanError(Exception):
    """
    Base class of all errors raised while scanning. Scanning errors are
    not meant to be recovered from, the library never catches them.
    """

    pass


class StreamError(ScanError):
    """
    Thrown when the underlying stream fails while the tokenizer
    is refilling its buffer.
    """

    pass


class FormatError(ScanError):
    """
    Thrown when a token can not be converted to the requested type.
    """

    def __init__(self, message, token=None, typ=None):
        super().__init__(message)
        self.token = token
        self.typ = typ


class EndOfInputError(FormatError):
    """
    Thrown when a token is requested but the stream has ended.
    """

    pass
