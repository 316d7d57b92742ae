"""
text_ops – Small, stateless string helpers.

Ranged case changes (used by the identifier transformer), random strings,
alphabetic labels, common prefixes, repetition, trimming, quote-aware
searching and truncation.
"""

import random
import string as _string
from typing import Iterable, Iterator, Optional, Tuple

from langstr.constants import MAX_STRING_LENGTH, TRUNCATION_MARKER

_ALPHA = _string.ascii_letters
_ALPHA_NUMERIC = _string.digits + _string.ascii_letters


def _check_range(text: Optional[str], begin: int, end: Optional[int]) -> int:
    if text is None:
        raise ValueError('string is None')
    if end is None:
        end = len(text)
    if begin > end:
        raise ValueError(f'begin ({begin}) > end ({end})')
    if begin < 0:
        raise IndexError(f'begin ({begin}) < 0')
    if end > len(text):
        raise IndexError(f'end ({end}) > length ({len(text)})')
    return end


def to_lower_case(text: str, begin: int, end: Optional[int] = None) -> str:
    """Return *text* with ``text[begin:end]`` lower-cased.

    Raises:
        ValueError: *text* is None or ``begin > end``.
        IndexError: The range falls outside *text*.
    """
    end = _check_range(text, begin, end)
    return text[:begin] + text[begin:end].lower() + text[end:]


def to_upper_case(text: str, begin: int, end: Optional[int] = None) -> str:
    """Return *text* with ``text[begin:end]`` upper-cased."""
    end = _check_range(text, begin, end)
    return text[:begin] + text[begin:end].upper() + text[end:]


def _random_string(alphabet: str, length: int) -> str:
    if length < 0:
        raise ValueError(f'length ({length}) < 0')
    return ''.join(random.choice(alphabet) for _ in range(length))


def get_random_alpha_string(length: int) -> str:
    """Return *length* random ASCII letters."""
    return _random_string(_ALPHA, length)


def get_random_alpha_numeric_string(length: int) -> str:
    """Return *length* random ASCII letters and digits."""
    return _random_string(_ALPHA_NUMERIC, length)


def get_alpha(number: int) -> str:
    """Return the bijective base-26 label of *number*.

    0 -> 'a', 25 -> 'z', 26 -> 'aa', 27 -> 'ab', ... 676 -> 'za'.
    """
    if number < 0:
        raise ValueError(f'number ({number}) < 0')
    chars: list[str] = []
    while number >= 0:
        chars.append(chr(ord('a') + number % 26))
        number = number // 26 - 1
    return ''.join(reversed(chars))


def get_common_prefix(strings: Optional[Iterable[Optional[str]]]) -> Optional[str]:
    """Return the longest prefix shared by every item of *strings*.

    None or an empty iterable yields None, a single item is returned as is.
    A None item among several is a ValueError.
    """
    if strings is None:
        return None
    items = list(strings)
    if not items:
        return None
    if len(items) == 1:
        return items[0]
    if any(s is None for s in items):
        raise ValueError('strings contain None')

    shortest = min(items, key=len)
    for i, ch in enumerate(shortest):
        if any(s[i] != ch for s in items):
            return shortest[:i]
    return shortest


def repeat(text: str, count: int) -> str:
    """Return *text* repeated *count* times.

    Raises:
        ValueError: *text* is None or *count* is negative.
        OverflowError: The result would exceed MAX_STRING_LENGTH.
    """
    if text is None:
        raise ValueError('string is None')
    if count < 0:
        raise ValueError(f'count ({count}) < 0')
    if len(text) * count > MAX_STRING_LENGTH:
        raise OverflowError(f'{len(text)} * {count} exceeds {MAX_STRING_LENGTH}')
    return text * count


def trim(text: Optional[str], ch: str) -> Optional[str]:
    """Strip every leading and trailing *ch* from *text*."""
    if text is None:
        return None
    return text.strip(ch)


def _iter_unquoted(text: str) -> Iterator[Tuple[int, str]]:
    # A quote preceded by a backslash never opens or closes a quoted run.
    quote: Optional[str] = None
    prev = ''
    for i, ch in enumerate(text):
        escaped = prev == '\\'
        prev = ch
        if ch in ('"', "'") and not escaped:
            if quote is None:
                quote = ch
                continue
            if quote == ch:
                quote = None
                continue
        if quote is None:
            yield i, ch


def index_of_unquoted(text: str, ch: str, from_index: int = 0) -> int:
    """Return the first index >= *from_index* of *ch* outside quotes, or -1."""
    if text is None:
        raise ValueError('string is None')
    for i, c in _iter_unquoted(text):
        if i >= from_index and c == ch:
            return i
    return -1


def last_index_of_unquoted(text: str, ch: str, from_index: Optional[int] = None) -> int:
    """Return the last index <= *from_index* of *ch* outside quotes, or -1."""
    if text is None:
        raise ValueError('string is None')
    if from_index is None:
        from_index = len(text) - 1
    found = -1
    for i, c in _iter_unquoted(text):
        if i > from_index:
            break
        if c == ch:
            found = i
    return found


def to_truncated_string(obj: object, length: int) -> str:
    """Return ``str(obj)`` cut to *length* characters, ending in '...'."""
    if length < len(TRUNCATION_MARKER) + 1:
        raise ValueError(f'length ({length}) < {len(TRUNCATION_MARKER) + 1}')
    text = str(obj)
    if len(text) <= length:
        return text
    return text[:length - len(TRUNCATION_MARKER)] + TRUNCATION_MARKER
