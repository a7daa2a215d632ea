"""Opening pipeline files and reading here-document input."""

from __future__ import annotations

import enum
import os
from typing import BinaryIO, Iterator, Optional, Union

Line = Union[str, bytes]


class FileMode(enum.IntEnum):
    """How open_file opens a path."""

    APPEND = 0
    TRUNCATE = 1
    READ = 2


_FLAGS = {
    FileMode.APPEND: (os.O_WRONLY | os.O_CREAT | os.O_APPEND, "ab"),
    FileMode.TRUNCATE: (os.O_WRONLY | os.O_CREAT | os.O_TRUNC, "wb"),
    FileMode.READ: (os.O_RDONLY, "rb"),
}


def open_file(path: Union[str, os.PathLike], mode: Union[FileMode, int]) -> BinaryIO:
    """Open path for appending, truncating or reading as a binary file.

    Files that are created get permissions 0o777 minus the umask. Failures
    raise OSError; an unknown mode raises ValueError.
    """
    flags, file_mode = _FLAGS[FileMode(mode)]
    fd = os.open(path, flags, 0o777)
    try:
        return os.fdopen(fd, file_mode)
    except BaseException:
        os.close(fd)
        raise


def read_line(stream) -> Optional[Line]:
    """Read one line from stream, one character at a time.

    A line ends at a newline, a NUL character or the end of input; the
    terminator is consumed and not returned. Returns None when nothing
    at all could be read.
    """
    first = stream.read(1)
    if not first:
        return None
    empty = first[:0]
    terminators = ("\n", "\0") if isinstance(first, str) else (b"\n", b"\0")
    parts = []
    ch = first
    while ch and ch not in terminators:
        parts.append(ch)
        ch = stream.read(1)
    return empty.join(parts)


def read_until_limiter(stream, limiter: Line) -> Iterator[Line]:
    """Yield lines from stream until one starts with limiter or input ends.

    The limiter line itself is not yielded; lines come without terminators.
    """
    while (line := read_line(stream)) is not None:
        if line.startswith(limiter):
            return
        yield line