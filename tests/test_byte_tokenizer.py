import io
from unittest.mock import MagicMock

import hypothesis.strategies as st
import pytest
from hypothesis import given

from _turboinput.tokenizer import ByteTokenizer
from _turboinput.tokenizer.errors import StreamError

from .generators.token_streams import token_streams, whitespace


@pytest.fixture(params=[1, 2, 3, 7, 4096])
def buffer_size(request):
    return request.param


def tokenize(contents, buffer_size=4096):
    return [t.value for t in ByteTokenizer(io.BytesIO(contents), buffer_size)]


@pytest.mark.parametrize("contents", [b"", b" ", b" \t\n\r", b"\r\n\r\n"])
def test_only_whitespace_ends(contents, buffer_size):
    tokenizer = ByteTokenizer(io.BytesIO(contents), buffer_size)
    assert tokenizer.next_token() is None
    assert tokenizer.exhausted
    assert tokenizer.next_token() is None


def test_token_positions():
    tokenizer = ByteTokenizer(io.BytesIO(b"  ab\n\ncde f"))
    tokens = list(tokenizer)

    assert [(t.value, t.start, t.end) for t in tokens] == [
        (b"ab", 2, 4),
        (b"cde", 6, 9),
        (b"f", 10, 11),
    ]
    assert tokenizer.position == 11


def test_tokens_span_refills(buffer_size):
    contents = b"abcdefghij  klm\n" + b"n" * 100 + b" o"
    assert tokenize(contents, buffer_size) == [b"abcdefghij", b"klm", b"n" * 100, b"o"]


def test_vertical_tab_and_form_feed_are_token_bytes():
    assert tokenize(b"a\x0bb \x0c") == [b"a\x0bb", b"\x0c"]


def test_text_stream():
    tokenizer = ByteTokenizer(io.StringIO("σ 1\n"), 1)
    assert [t.value for t in tokenizer] == ["σ".encode("utf-8"), b"1"]


@given(token_streams())
def test_tokenize_separated(tokens_and_contents):
    tokens, contents = tokens_and_contents
    assert tokenize(contents) == tokens


@given(token_streams(), st.integers(min_value=1, max_value=16))
def test_buffer_size_does_not_change_tokens(tokens_and_contents, size):
    _, contents = tokens_and_contents
    assert tokenize(contents, size) == tokenize(contents, len(contents) + 1)


@given(whitespace)
def test_whitespace_mix_is_single_space(separator):
    assert tokenize(b"1" + separator + b"2") == tokenize(b"1 2")


def test_read_called_with_buffer_size():
    stream = MagicMock()
    stream.read.side_effect = [b"ab", b"c ", b""]
    tokenizer = ByteTokenizer(stream, 2)

    assert tokenizer.next_token().value == b"abc"
    assert tokenizer.next_token() is None
    stream.read.assert_called_with(2)
    assert stream.read.call_count == 3


def test_stream_error():
    stream = MagicMock()
    stream.read.side_effect = OSError("device failure")
    tokenizer = ByteTokenizer(stream)

    with pytest.raises(StreamError, match="device failure"):
        tokenizer.next_token()


def test_closed_stream_error():
    stream = io.BytesIO(b"1 2")
    stream.close()

    with pytest.raises(StreamError):
        ByteTokenizer(stream).next_token()


@pytest.mark.parametrize("size", [0, -1, 1.5])
def test_invalid_buffer_size(size):
    with pytest.raises(ValueError, match="buffer_size"):
        ByteTokenizer(io.BytesIO(b""), size)
