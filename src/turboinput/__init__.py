import turboinput.version
from _turboinput.scanner import Scanner
from _turboinput.tokenizer import DEFAULT_BUFFER_SIZE, ByteTokenizer, Token
from _turboinput.tokenizer.errors import (
    EndOfInputError,
    FormatError,
    ScanError,
    StreamError,
)

__author__ = """Equinor"""
__email__ = "fg_sib-scout@equinor.com"

__version__ = turboinput.version.version

__all__ = [
    "DEFAULT_BUFFER_SIZE",
    "ByteTokenizer",
    "EndOfInputError",
    "FormatError",
    "ScanError",
    "Scanner",
    "StreamError",
    "Token",
]
