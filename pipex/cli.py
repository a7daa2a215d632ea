"""Command-line entry points: a fixed two-command pipeline and a multi-command one."""

from __future__ import annotations

import os
import sys
from typing import BinaryIO, Optional, Sequence

from pipex.files import FileMode, open_file, read_until_limiter
from pipex.pipeline import run_pipeline

EXIT_FAILURE = 1
HERE_DOC = "here_doc"

_BAD_ARGUMENT = "\033[31mError: Bad argument\n\033[0m"
_EXAMPLE = "Ex: ./pipex <file1> <cmd1> <cmd2> <file2>\n"
_EXAMPLE_BONUS = "Ex: ./pipex <file1> <cmd1> <cmd2> <...> <file2>\n"
_EXAMPLE_HERE_DOC = './pipex "here_doc" <LIMITER> <cmd> <cmd1> ... <file>\n'


def usage(bonus: bool = False) -> None:
    """Print how to call the program and exit with failure."""
    sys.stderr.write(_BAD_ARGUMENT)
    if bonus:
        sys.stdout.write(_EXAMPLE_BONUS)
        sys.stdout.write(_EXAMPLE_HERE_DOC)
    else:
        sys.stdout.write(_EXAMPLE)
    sys.stdout.flush()
    raise SystemExit(EXIT_FAILURE)


def _open(path: str, mode: FileMode) -> Optional[BinaryIO]:
    try:
        return open_file(path, mode)
    except OSError as exc:
        print(f"{path}: {exc.strerror}", file=sys.stderr)
        return None


def _close(*files: Optional[BinaryIO]) -> None:
    for handle in files:
        if handle is not None:
            handle.close()


def _run_with_files(infile: str, commands: Sequence[str], outfile: str) -> int:
    output = _open(outfile, FileMode.TRUNCATE)
    source = _open(infile, FileMode.READ)
    try:
        return run_pipeline(commands, source, output, os.environ)
    finally:
        _close(source, output)


def _read_here_doc(limiter: str) -> bytes:
    stream = getattr(sys.stdin, "buffer", sys.stdin)
    probe = limiter if isinstance(stream.read(0), str) else limiter.encode()
    lines = list(read_until_limiter(stream, probe))
    text = probe[:0].join(lines)
    return text.encode() if isinstance(text, str) else text


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run: <infile> <cmd1> <cmd2> <outfile>. Returns the last command's status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 4:
        usage(bonus=False)
    sys.stdout.flush()
    return _run_with_files(args[0], args[1:-1], args[-1])


def main_bonus(argv: Optional[Sequence[str]] = None) -> int:
    """Run: <infile> <cmd>... <outfile>, or here_doc <LIMITER> <cmd>... <outfile>."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 4:
        usage(bonus=True)
    sys.stdout.flush()
    if args[0].startswith(HERE_DOC):
        output = _open(args[-1], FileMode.TRUNCATE)
        try:
            data = _read_here_doc(args[1])
            return run_pipeline(args[2:-1], data, output, os.environ)
        finally:
            _close(output)
    return _run_with_files(args[0], args[1:-1], args[-1])


if __name__ == "__main__":
    sys.exit(main())