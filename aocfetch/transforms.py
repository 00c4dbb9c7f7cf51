"""
Transforms of raw puzzle input text to something more useful for speed-solving.
Every function here accepts the text as its first positional argument, and the
splitters accept a `type` callable (int, float, str, ...) used to parse each token.
"""

__all__ = ["lines", "split", "split_by"]

import re

from .exceptions import InputParseError

# str.split() would also split on unicode whitespace and \x0b
_ascii_token = re.compile(r"[^ \t\n\f\r]+")


def _parse(tokens, type):
    result = []
    for token in tokens:
        try:
            result.append(type(token))
        except (TypeError, ValueError) as err:
            name = getattr(type, "__name__", repr(type))
            raise InputParseError(f"Unable to parse {token!r} as {name}") from err
    return result


def split(data, type=str):
    """Tokens separated by runs of ASCII whitespace, empty tokens dropped."""
    return _parse(_ascii_token.findall(data), type)


def split_by(data, delim, type=str):
    """Tokens separated by every occurrence of delim, empty tokens kept."""
    if not delim:
        raise ValueError("empty delimiter")
    return _parse(data.split(delim), type)


def lines(data):
    return data.splitlines()
