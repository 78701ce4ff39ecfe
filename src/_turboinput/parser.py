"""
A parser converts raw tokens (see _turboinput.tokenizer) into values of a
requested type. Any callable taking a string can be used as the type, ie.
int, float, decimal.Decimal or numpy.int32, in addition to the special cases
handled by parse_token: str, bytes, bool and numpy dtypes.
"""

import numpy as np

from _turboinput.tokenizer.errors import FormatError


def type_name(typ):
    """
    :returns: The name of the given type, as used in error messages.
    """
    if isinstance(typ, np.dtype):
        return str(typ)
    return getattr(typ, "__name__", repr(typ))


def as_text(token, encoding="utf-8"):
    """
    Decode the value of a token.
    :param token: The token to decode.
    :param encoding: The encoding of the stream.
    """
    try:
        return token.text(encoding)
    except UnicodeDecodeError as err:
        raise FormatError(
            f"Could not decode token {token.value!r} at {token.start} as {encoding}",
            token,
            str,
        ) from err


def parse_bool(text):
    """
    Parses "true" and "1" as True, "false" and "0" as False.
    """
    if text in ("true", "1"):
        return True
    if text in ("false", "0"):
        return False
    raise ValueError(f"invalid literal for bool: {text!r}")


def parse_numpy_bool(text):
    return np.bool_(parse_bool(text))


# Types that can not be constructed directly from the token text
special_parsers = {
    bool: parse_bool,
    np.bool_: parse_numpy_bool,
}


def converter(typ):
    """
    :param typ: A type, or any callable taking a string, or a numpy dtype.
    :returns: The function converting token text to typ.
    """
    if isinstance(typ, np.dtype):
        typ = typ.type
    return special_parsers.get(typ, typ)


def parse_token(token, typ, encoding="utf-8"):
    """
    Convert a token to the given type.

    >>> parse_token(Token(b"42", 0, 2), int)
    42

    :param token: The Token to convert.
    :param typ: bytes, str or any callable taking a string, eg. int, float
        or numpy.int64.
    :param encoding: The encoding used to decode the token.
    :returns: The value of the token as typ.
    """
    if typ is bytes:
        return token.value
    text = as_text(token, encoding)
    if typ is str:
        return text
    try:
        return converter(typ)(text)
    except (ValueError, TypeError, ArithmeticError) as err:
        raise FormatError(
            f"Could not parse token {text!r} at {token.start} as {type_name(typ)}",
            token,
            typ,
        ) from err
