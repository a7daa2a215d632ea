"""String helpers with C-string semantics: search, copy, compare, trim and map."""

from __future__ import annotations

from typing import Callable, Optional

_NUL = "\0"


def _char(c: int | str) -> str:
    """Return c as a one-character string; an int is taken as a code point."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int) and not isinstance(c, bool):
        return chr(c)
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def _require_str(*values: object) -> None:
    for value in values:
        if not isinstance(value, str):
            raise TypeError(f"expected a string, got {type(value).__name__}")


def strlen(s: Optional[str]) -> int:
    """Return the length of s; None counts as an empty string."""
    return 0 if s is None else len(s)


def strchr(s: str, c: int | str) -> Optional[int]:
    """Return the index of the first occurrence of c in s, or None.

    Searching for the terminating NUL gives len(s).
    """
    ch = _char(c)
    if ch == _NUL:
        index = s.find(_NUL)
        return len(s) if index < 0 else index
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: int | str) -> Optional[int]:
    """Return the index of the last occurrence of c in s, or None.

    Searching for the terminating NUL gives len(s).
    """
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """Return a copy of s."""
    _require_str(s)
    return "".join(s)


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy at most size - 1 characters of src.

    Returns the copied text and len(src), the length that was wanted.
    A size of 0 copies nothing.
    """
    _require_str(src)
    if size < 0:
        raise ValueError("size must not be negative")
    copied = src[: size - 1] if size >= 1 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dst so that the result holds at most size - 1 characters.

    Returns the resulting text and the length that was wanted. When size
    does not exceed len(dst), dst is left as it is and size + len(src) is
    reported.
    """
    _require_str(dst, src)
    if size < 0:
        raise ValueError("size must not be negative")
    if size <= len(dst):
        return dst, size + len(src)
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def strncmp(s1: Optional[str], s2: Optional[str], n: int) -> int:
    """Compare at most n characters of two strings.

    Returns the difference of the first pair that differs, the shorter
    string ending as if by a NUL, or 0. None on either side compares equal.
    """
    if s1 is None or s2 is None:
        return 0
    for pos in range(n):
        a = ord(s1[pos]) if pos < len(s1) else 0
        b = ord(s2[pos]) if pos < len(s2) else 0
        if a == 0 or b == 0 or a != b:
            return a - b
    return 0


def strncpy(src: str, n: int) -> str:
    """Return the first n characters of src, padded with NULs to length n."""
    _require_str(src)
    if n < 0:
        raise ValueError("n must not be negative")
    end = src.find(_NUL)
    text = src if end < 0 else src[:end]
    return text[:n].ljust(n, _NUL)


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Return the index of little in the first length characters of big, or None.

    An empty little is found at index 0.
    """
    _require_str(big, little)
    if length < 0:
        raise ValueError("length must not be negative")
    if not little:
        return 0
    index = big.find(little, 0, length)
    return None if index < 0 else index


def substr(s: str, start: int, length: int) -> str:
    """Return at most length characters of s from start; empty when start is past the end."""
    _require_str(s)
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return s1 followed by s2."""
    _require_str(s1, s2)
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Strip every character found in charset from both ends of s."""
    _require_str(s, charset)
    return s.strip(charset) if charset else s


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Return the string made of f(index, char) for every character of s."""
    _require_str(s)
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(s: str, f: Callable[[int, str], Optional[str]]) -> str:
    """Call f(index, char) for every character of s.

    A string returned by f replaces that character; None keeps it. The
    resulting text is returned.
    """
    _require_str(s)
    chars = []
    for index, ch in enumerate(s):
        replacement = f(index, ch)
        chars.append(ch if replacement is None else replacement)
    return "".join(chars)