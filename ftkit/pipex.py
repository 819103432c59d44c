"""Run ``< infile cmd1 | cmd2 > outfile`` without a shell.

Commands are split on spaces and looked up in the directories of the
environment's ``PATH``. Failures in the first stage are reported on stderr
and the second stage still runs on empty input. Failures in the second
stage raise :class:`PipexError`.
"""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Mapping, Sequence
from typing import Optional, Union

from ftkit.strings import split

__all__ = ["PipexError", "has_path", "find_command_path", "run_pipeline", "main"]

PathLike = Union[str, os.PathLike]

USAGE = "pipex <file1> <cmd1> <cmd2> <file2>"


class PipexError(Exception):
    """A stage of the pipeline could not be set up or started."""


def _environment(env: Optional[Mapping[str, str]]) -> dict[str, str]:
    return dict(os.environ if env is None else env)


def has_path(env: Optional[Mapping[str, str]] = None) -> bool:
    """True if *env* holds a ``PATH`` whose value is at least two characters."""
    env = os.environ if env is None else env
    return len(env.get("PATH", "")) >= 2


def find_command_path(cmd: str, env: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """Return ``<dir>/<cmd>`` for the first ``PATH`` directory where it exists.

    Returns ``None`` when no directory holds *cmd*.
    """
    env = os.environ if env is None else env
    if "PATH" not in env:
        raise PipexError("Error: PATH is not set")
    for directory in split(env["PATH"], ":"):
        candidate = f"{directory}/{cmd}"
        if os.path.exists(candidate):
            return candidate
    return None


def _resolve(cmd: str, env: Mapping[str, str]) -> tuple[str, list[str]]:
    """Return the executable path and the argument vector for *cmd*."""
    words = split(cmd, " ") if cmd else []
    if not words:
        raise PipexError("Error: Empty command")
    path = find_command_path(words[0], env)
    if path is None:
        raise PipexError(f"command not found: {words[0]}")
    return path, words


def _first_stage(infile: PathLike, cmd: str, env: dict[str, str]) -> bytes:
    try:
        source = open(infile, "rb")
    except OSError as exc:
        raise PipexError(f"Error: {exc.strerror}") from exc
    with source:
        path, words = _resolve(cmd, env)
        try:
            result = subprocess.run(
                words, executable=path, stdin=source, stdout=subprocess.PIPE, env=env
            )
        except OSError as exc:
            raise PipexError(f"Error: {exc.strerror}") from exc
    return result.stdout


def _exit_status(returncode: int) -> int:
    return 128 - returncode if returncode < 0 else returncode


def run_pipeline(
    infile: PathLike,
    cmd1: str,
    cmd2: str,
    outfile: PathLike,
    env: Optional[Mapping[str, str]] = None,
) -> int:
    """Feed *infile* to *cmd1*, its output to *cmd2*, and write to *outfile*.

    *outfile* is created or truncated with mode 0644. Returns the exit
    status of *cmd2*.
    """
    environment = _environment(env)
    if not has_path(environment):
        raise PipexError("Error: no usable PATH in the environment")

    try:
        intermediate = _first_stage(infile, cmd1, environment)
    except PipexError as exc:
        print(exc, file=sys.stderr)
        intermediate = b""

    try:
        out_fd = os.open(os.fspath(outfile), os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o644)
    except OSError as exc:
        raise PipexError(f"Error: {exc.strerror}") from exc
    try:
        path, words = _resolve(cmd2, environment)
        try:
            result = subprocess.run(
                words, executable=path, input=intermediate, stdout=out_fd, env=environment
            )
        except OSError as exc:
            raise PipexError(f"Error: {exc.strerror}") from exc
    finally:
        os.close(out_fd)
    return _exit_status(result.returncode)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry point: ``pipex file1 cmd1 cmd2 file2``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not has_path():
        print("Error: no usable PATH in the environment", file=sys.stderr)
        return 1
    if len(args) != 4:
        print("Error: Wrong number of arguments", file=sys.stderr)
        print(f"Correct Input: {USAGE}", file=sys.stderr)
        return 1
    try:
        return run_pipeline(*args)
    except PipexError as exc:
        print(exc, file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())