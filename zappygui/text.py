"""String helpers with the behaviour of the graphics library's text utilities."""

import string
from itertools import takewhile

_MAX_SPLIT_COUNT = 128
_SPLIT_BUFFER_LENGTH = 1024

_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def text_is_equal(text1, text2):
    """Return True if both strings are identical."""
    return text1 == text2


def text_length(text):
    """Return the number of characters before the first NUL."""
    return len(text.partition("\0")[0])


def text_subtext(text, position, length):
    """Return up to ``length`` characters starting at ``position``."""
    position = max(position, 0)
    if position >= len(text) or length <= 0:
        return ""
    return text[position:position + length]


def text_replace(text, replace, by):
    """Replace every occurrence of ``replace`` with ``by``; "" if ``replace`` is empty."""
    if not replace:
        return ""
    return text.replace(replace, by)


def text_insert(text, insert, position):
    """Insert ``insert`` into ``text`` at ``position``."""
    position = min(max(position, 0), len(text))
    return text[:position] + insert + text[position:]


def text_split(text, delimiter):
    """Split ``text`` on a single-character delimiter.

    At most 128 pieces are produced; when that limit is hit the last piece is empty.
    """
    if len(delimiter) != 1:
        raise ValueError("delimiter must be a single character")
    parts = text[:_SPLIT_BUFFER_LENGTH].split(delimiter, _MAX_SPLIT_COUNT - 1)
    if len(parts) == _MAX_SPLIT_COUNT:
        parts[-1] = ""
    return parts


def text_find_index(text, find):
    """Return the index of the first occurrence of ``find``, or -1."""
    return text.find(find)


def text_to_upper(text):
    """Upper-case ASCII letters, leaving other characters untouched."""
    return text.translate(_UPPER)


def text_to_lower(text):
    """Lower-case ASCII letters, leaving other characters untouched."""
    return text.translate(_LOWER)


def text_to_pascal(text):
    """Capitalise the first character and each character following an underscore."""
    chars = iter(text)
    first = next(chars, None)
    if first is None:
        return ""
    out = [text_to_upper(first)]
    for ch in chars:
        if ch == "_":
            following = next(chars, None)
            if following is None:
                break
            out.append(text_to_upper(following))
        else:
            out.append(ch)
    return "".join(out)


def text_to_integer(text):
    """Parse an optional sign followed by leading ASCII digits; 0 if there are none."""
    sign = 1
    if text[:1] in ("+", "-"):
        if text[0] == "-":
            sign = -1
        text = text[1:]
    digits = "".join(takewhile(lambda c: c in string.digits, text))
    return sign * int(digits) if digits else 0