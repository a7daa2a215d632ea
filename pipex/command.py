"""Turning a command string into an argument list and locating its program."""

from __future__ import annotations

import os
from typing import Mapping, Optional

from pipex.awk_split import awk_split
from pipex.libft.tokens import split


class CommandNotFoundError(LookupError):
    """No program for the command was found on the search path."""

    exit_status = 127

    def __init__(self, name: str) -> None:
        super().__init__(f"pipex: command not found: {name}")
        self.name = name


def split_command(command: str) -> list[str]:
    """Split a command string into arguments.

    Commands mentioning awk keep brace blocks together and lose the single
    quotes around each argument; others are split on spaces.
    """
    if "awk" in command:
        return [token.strip("'") for token in awk_split(command, " ")]
    return split(command, " ")


def resolve_path(name: str, env: Mapping[str, str]) -> Optional[str]:
    """Return the first PATH directory entry joined with name that exists, or None."""
    search = env.get("PATH")
    if search is None:
        return None
    for directory in split(search, ":"):
        candidate = f"{directory}/{name}"
        if os.access(candidate, os.F_OK):
            return candidate
    return None


def prepare_command(command: str, env: Mapping[str, str]) -> Optional[tuple[str, list[str]]]:
    """Return the program path and argument list for command.

    An empty command gives None. Raises CommandNotFoundError when the
    program is not found on PATH.
    """
    args = split_command(command)
    if not args or args[0] == "":
        return None
    path = resolve_path(args[0], env)
    if path is None:
        raise CommandNotFoundError(args[0])
    return path, args