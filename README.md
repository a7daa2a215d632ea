# pipex

pipex runs a chain of commands the way a shell runs `cmd1 | cmd2 | ...`. The
first command reads from an input file and the last command writes to an output
file.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

### `pipex`: two commands between two files

```
pipex infile "grep foo" "wc -l" outfile
```

This works like `< infile grep foo | wc -l > outfile`. The command takes exactly
four arguments. With any other number it prints a usage message and exits with
status 1.

### `pipex-bonus`: any number of commands

```
pipex-bonus infile "cat" "sort" "uniq -c" outfile
```

If the first argument starts with `here_doc`, the input is read from standard
input instead of a file:

```
pipex-bonus here_doc EOF "cat" "wc -l" outfile
```

In this form the second argument is the limiter. Input lines are read until a
line that starts with the limiter, or until the end of input. The collected
lines are joined without their newline characters and given to the first
command. `pipex-bonus` needs at least four arguments. With fewer it prints a
usage message and exits with status 1.

### Exit status

Both commands exit with the status of the last command in the chain. If the
last command is killed by a signal, the status is 128 plus the signal number.

## Behaviour

- **Output file.** It is created if it is missing, with mode `0o777` minus the
  umask, and truncated if it already exists. If it cannot be opened, the error
  is reported and the last command writes to standard output.
- **Input file.** If it cannot be opened, the error is reported. The commands
  before the last one are not run, and the last command runs with empty input.
- **Splitting a command.** A command is split on spaces, and empty words are
  dropped. A command whose text contains `awk` is split differently: a `{ ... }`
  block is kept whole, and the single quotes around each word are removed. For
  example, `awk '{print $1}'` runs as intended.
- **Finding the program.** A program is found by trying each directory in
  `PATH` in turn. The first one where `directory/name` exists is used.
- **Command not found.**
  - If an inner command cannot be found, the error is reported on standard
    error and the next command gets empty input.
  - If the last command cannot be found or cannot be started, the exit status
    is 127.
- **Empty last command.** If the last command is empty, nothing is run and the
  exit status is 0.

## Limitations

pipex is not a shell:

- There is no quoting apart from the `awk` case above.
- There are no redirections, globbing or variable expansion.
- The commands do not run at the same time. Each command runs to completion and
  its output is held in memory before the next command starts.

## As a library

```python
from pipex.awk_split import awk_split
from pipex.command import split_command, resolve_path, prepare_command
from pipex.pipeline import run_pipeline

awk_split("awk '{print $1}' file", " ")   # ["awk", "'{print $1}'", "file"]
split_command("ls -la")                   # ["ls", "-la"]

with open("out.txt", "wb") as out:
    status = run_pipeline(["cat", "wc -l"], b"a\nb\n", out)
```

The library exposes the following:

- **`run_pipeline(commands, stdin, stdout=None, env=None)`**
  - `stdin` may be bytes, a binary file, or `None`.
  - `env` defaults to the current environment.
- **`prepare_command(command, env)`** returns the program path and the
  argument list for a command. It raises `CommandNotFoundError` (in
  `pipex.command`) when the program is not found on `PATH`.
- **`pipex.files`**
  - `open_file(path, FileMode.APPEND | TRUNCATE | READ)` opens a file.
  - `read_line(stream)` reads one line.
  - `read_until_limiter(stream, limiter)` reads lines up to the limiter.

The `pipex.libft` sub-package contains helper routines:

- `chars`: character tests, case mapping, `atoi` and `itoa`.
- `memory`: byte-buffer helpers.
- `text`: string helpers with C-string semantics.
- `tokens`: `strspn`, `strpbrk`, `Tokenizer`, `tokenize`, `split` and
  `split_whitespace`.
- `lists`: `Node` and `LinkedList`.
- `output`: `put_char`, `put_str`, `put_endl` and `put_nbr`.