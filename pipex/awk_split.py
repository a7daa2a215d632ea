"""Splitting of awk command lines, keeping brace blocks together."""

from __future__ import annotations

from typing import Optional


def awk_split(text: str, sep: str) -> list[str]:
    """Split text on sep, except where sep falls between '{' and '}'.

    Runs of separators produce no empty fields. Braces do not nest: the
    first '}' ends the protected region.
    """
    if not isinstance(sep, str) or len(sep) != 1:
        raise ValueError(f"expected a single separator character, got {sep!r}")
    tokens: list[str] = []
    start: Optional[int] = None
    in_braces = False
    for index, ch in enumerate(text):
        if ch == "{":
            in_braces = True
            if start is None:
                start = index
        elif ch == "}":
            in_braces = False
        elif ch == sep and not in_braces:
            if start is not None:
                tokens.append(text[start:index])
            start = None
        elif start is None:
            start = index
    if start is not None:
        tokens.append(text[start:])
    return tokens