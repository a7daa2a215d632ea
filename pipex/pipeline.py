"""Running a chain of commands, each one's output feeding the next one's input."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import BinaryIO, Mapping, Optional, Sequence, Union

from pipex.command import CommandNotFoundError, prepare_command

Source = Union[bytes, bytearray, BinaryIO, None]

_EXEC_FAILURE = 127


def _report(message: str) -> None:
    print(message, file=sys.stderr)


def _input_kwargs(source: Source) -> dict:
    if source is None:
        return {"input": b""}
    if isinstance(source, (bytes, bytearray)):
        return {"input": bytes(source)}
    return {"stdin": source}


def _resolve(command: str, env: Mapping[str, str]) -> Optional[tuple[str, list[str]]]:
    """Locate the command's program, reporting a missing one; return None if nothing runs."""
    try:
        return prepare_command(command, env)
    except CommandNotFoundError as exc:
        _report(str(exc))
        return None


def _exit_status(returncode: int) -> int:
    return 128 - returncode if returncode < 0 else returncode


def _run_stage(command: str, source: Source, env: Mapping[str, str]) -> bytes:
    """Run one inner command to completion and return what it wrote to its output."""
    if source is None:
        # The input file could not be opened: the stage gives up without running.
        return b""
    prepared = _resolve(command, env)
    if prepared is None:
        return b""
    path, args = prepared
    try:
        result = subprocess.run(
            args, executable=path, env=dict(env), stdout=subprocess.PIPE, **_input_kwargs(source)
        )
    except OSError as exc:
        _report(f"pipex: {exc.strerror}")
        return b""
    return result.stdout


def _run_last(
    command: str, source: Source, stdout: Optional[BinaryIO], env: Mapping[str, str]
) -> int:
    try:
        prepared = prepare_command(command, env)
    except CommandNotFoundError as exc:
        _report(str(exc))
        return exc.exit_status
    if prepared is None:
        return 0
    path, args = prepared
    try:
        result = subprocess.run(
            args, executable=path, env=dict(env), stdout=stdout, **_input_kwargs(source)
        )
    except OSError as exc:
        _report(f"pipex: {exc.strerror}")
        return _EXEC_FAILURE
    return _exit_status(result.returncode)


def run_pipeline(
    commands: Sequence[str],
    stdin: Source,
    stdout: Optional[BinaryIO] = None,
    env: Optional[Mapping[str, str]] = None,
) -> int:
    """Run commands one after another, piping each one's output into the next.

    stdin is the first command's input: bytes, a binary file, or None when
    the input could not be opened, in which case the inner commands do not
    run and the last one reads nothing. The last command writes to stdout
    (inherited when None). Returns the last command's exit status: 127 when
    it cannot be found or started, 0 for an empty command.
    """
    if not commands:
        raise ValueError("at least one command is required")
    environment = dict(os.environ) if env is None else dict(env)
    current: Source = stdin
    for command in commands[:-1]:
        current = _run_stage(command, current, environment)
    return _run_last(commands[-1], current, stdout, environment)