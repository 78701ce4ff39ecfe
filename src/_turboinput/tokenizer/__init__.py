"""
In this module, the tokenizer takes a byte stream and generates whitespace
separated tokens. It knows nothing about types, a token is just the bytes
between two runs of whitespace together with its position in the stream.

Whitespace is exactly space, tab, newline and carriage return, in any mix
and any repetition. There is no quoting, escaping or comments.

The tokenizer never rewinds the stream, so any readable stream can be used,
including pipes such as sys.stdin.buffer. Text streams are also accepted.
"""

from .byte_tokenizer import DEFAULT_BUFFER_SIZE, ByteTokenizer
from .token import Token

__all__ = ["DEFAULT_BUFFER_SIZE", "ByteTokenizer", "Token"]
