"""
The scanner reads typed values from a stream of whitespace separated tokens.

All reads are fail-fast: if the stream ends before the requested number of
tokens are read, EndOfInputError is raised, and if a token is not a valid
value of the requested type, FormatError is raised. Aggregate reads always
consume tokens in order: left to right, row by row and edge by edge.
"""

import numpy as np

from _turboinput.graph import adjacency
from _turboinput.parser import parse_token, type_name
from _turboinput.tokenizer import DEFAULT_BUFFER_SIZE, ByteTokenizer
from _turboinput.tokenizer.errors import EndOfInputError


def check_count(name, value):
    if value < 0:
        raise ValueError(f"{name} has to be non-negative, got {value}")


class Scanner:
    """
    Typed reader of whitespace separated tokens.

    >>> scanner = Scanner(io.BytesIO(b"3\\n1 2 3\\nhello"))
    >>> n = scanner.token(int)
    >>> scanner.vec(n, int)
    [1, 2, 3]
    >>> scanner.chars()
    ['h', 'e', 'l', 'l', 'o']

    A Scanner must not be shared between threads, and no two scanners
    should read from the same stream.
    """

    def __init__(
        self,
        stream,
        buffer_size=DEFAULT_BUFFER_SIZE,
        encoding="utf-8",
        close_stream=False,
    ):
        """
        :param stream: A byte stream, ie. sys.stdin.buffer or io.BytesIO.
        :param buffer_size: Number of bytes read from the stream at a time.
        :param encoding: Encoding of the stream, used for decoding tokens.
        :param close_stream: Whether the scanner owns the stream and should
            close it when closed.
        """
        self.tokenizer = ByteTokenizer(stream, buffer_size, encoding)
        self.encoding = encoding
        self.close_stream = close_stream

    @property
    def stream(self):
        return self.tokenizer.stream

    def close(self):
        if self.close_stream:
            self.stream.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    def expect_token(self, typ=str):
        """
        Take the next raw token, raising EndOfInputError if there is none.
        """
        token = self.tokenizer.next_token()
        if token is None:
            raise EndOfInputError(
                f"Expected {type_name(typ)} at {self.tokenizer.position}"
                " but reached end of input",
                typ=typ,
            )
        return token

    def token(self, typ=str):
        """
        Read the next token as the given type.

        :param typ: str, bytes, bool, a numpy dtype or any callable
            taking a string, eg. int or float.
        """
        return parse_token(self.expect_token(typ), typ, self.encoding)

    def try_token(self, typ=str, default=None):
        """
        Like token, but returns default instead of raising when
        the end of input is reached. Malformed tokens still raise
        FormatError.
        """
        token = self.tokenizer.next_token()
        if token is None:
            return default
        return parse_token(token, typ, self.encoding)

    def string(self):
        return self.token(str)

    def chars(self):
        """
        Read the next token as a list of characters.
        """
        return list(self.string())

    def vec(self, n, typ=str):
        """
        Read n tokens of the given type.

        :param n: The number of tokens to read.
        :param typ: The type of each token, see Scanner.token.
        :returns: List of the values in the order they were read.
        """
        check_count("n", n)
        return [self.token(typ) for _ in range(n)]

    def matrix(self, rows, cols, typ=str):
        """
        Read rows * cols tokens of the given type, in row-major order.

        :returns: List of rows, each a list of cols values.
        """
        check_count("rows", rows)
        check_count("cols", cols)
        return [self.vec(cols, typ) for _ in range(rows)]

    def array(self, n, dtype=np.int64):
        """
        Read n tokens into a numpy array.

        :param dtype: The numpy dtype of the array.
        """
        check_count("n", n)
        dtype = np.dtype(dtype)
        return np.array([self.token(dtype) for _ in range(n)], dtype=dtype)

    def ndarray(self, rows, cols, dtype=np.int64):
        """
        Read rows * cols tokens into a two dimensional numpy array,
        in row-major order.
        """
        check_count("rows", rows)
        check_count("cols", cols)
        return self.array(rows * cols, dtype).reshape(rows, cols)

    def edges(self, m):
        """
        Generator of m edges, each edge being two integer tokens.
        """
        check_count("m", m)
        for _ in range(m):
            u = self.token(int)
            v = self.token(int)
            yield (u, v)

    def graph(self, n, m, directed=False):
        """
        Read a graph given as m edges between vertices numbered
        from 1 to n.

        >>> scanner = Scanner(io.BytesIO(b"1 2\\n2 3"))
        >>> scanner.graph(3, 2)
        {1: [2], 2: [1, 3], 3: [2]}

        :param n: Number of vertices.
        :param m: Number of edges.
        :param directed: If False, each edge u v is added both
            as a neighbour of u and of v.
        :returns: Dictionary from vertex to list of neighbours, in
            the order the edges were read.
        """
        check_count("m", m)
        return adjacency(self.edges(m), n, directed)

    def __iter__(self):
        for token in self.tokenizer:
            yield parse_token(token, str, self.encoding)
