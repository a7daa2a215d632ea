"""Tokenising helpers: span scanning, a stateful tokenizer and field splitting."""

from __future__ import annotations

from typing import Iterator, Optional


def _require_char(sep: str) -> str:
    if not isinstance(sep, str) or len(sep) != 1:
        raise ValueError(f"expected a single separator character, got {sep!r}")
    return sep


def strspn(s: str, accept: str) -> int:
    """Return the length of the leading run of s made only of characters in accept."""
    for index, ch in enumerate(s):
        if ch not in accept:
            return index
    return len(s)


def strpbrk(s: str, accept: str) -> Optional[int]:
    """Return the index of the first character of s that is in accept, or None."""
    for index, ch in enumerate(s):
        if ch in accept:
            return index
    return None


class Tokenizer:
    """Hand out the tokens of a text one at a time, each call with its own delimiters."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def next_token(self, delims: str) -> Optional[str]:
        """Return the next token bounded by any of delims, or None when none is left."""
        rest = self._text[self._pos:]
        skip = strspn(rest, delims)
        if skip == len(rest):
            self._pos = len(self._text)
            return None
        start = self._pos + skip
        end = strpbrk(self._text[start:], delims)
        if end is None:
            self._pos = len(self._text)
            return self._text[start:]
        stop = start + end
        self._pos = stop + 1
        return self._text[start:stop]


def tokenize(text: str, delims: str) -> Iterator[str]:
    """Yield the non-empty tokens of text separated by any character in delims."""
    tokenizer = Tokenizer(text)
    while (token := tokenizer.next_token(delims)) is not None:
        yield token


def split(s: Optional[str], sep: str) -> list[str]:
    """Split s on sep, dropping empty fields; None gives an empty list."""
    _require_char(sep)
    if s is None:
        return []
    return [field for field in s.split(sep) if field]


def split_whitespace(text: str) -> list[str]:
    """Split text on space characters, dropping empty fields."""
    return list(tokenize(text, " "))