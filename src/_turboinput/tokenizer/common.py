import re

# Only space, tab, newline and carriage return separate tokens. Vertical tab
# and form feed are token bytes.
WHITESPACE = b" \t\n\r"

skip_whitespace = re.compile(rb"[ \t\n\r]*").match
take_word = re.compile(rb"[^ \t\n\r]*").match


def as_bytes(chunk, encoding="utf-8"):
    """
    If given a string, encode it with the given encoding, otherwise
    do nothing.
    :param chunk: A string or byte string read from a stream.
    """
    if isinstance(chunk, str):
        chunk = chunk.encode(encoding)
    return chunk
