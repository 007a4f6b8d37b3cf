from __future__ import annotations

import os
import sys
from typing import Mapping, Optional, TextIO

from wait_for.models import ColorMode

GREEN = "\033[32m"
YELLOW = "\033[33m"
RED = "\033[31m"
RESET = "\033[0m"


class Reporter:
    """Writes progress to stdout and problems to stderr."""

    def __init__(self, stdout: Optional[TextIO] = None, stderr: Optional[TextIO] = None) -> None:
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr

    def _style(self, message: str, color: str | None) -> str:
        return message

    def _write(self, stream: TextIO, message: str, color: str | None) -> None:
        stream.write(self._style(message, color) + "\n")
        # A child command shares these streams, keep our lines ahead of its output.
        stream.flush()

    def info(self, message: str) -> None:
        self._write(self.stdout, message, None)

    def success(self, message: str) -> None:
        self._write(self.stdout, message, GREEN)

    def warning(self, message: str) -> None:
        self._write(self.stderr, message, YELLOW)

    def error(self, message: str) -> None:
        self._write(self.stderr, message, RED)


class PlainReporter(Reporter):
    pass


class AnsiReporter(Reporter):
    def _style(self, message: str, color: str | None) -> str:
        if color is None:
            return message
        return f"{color}{message}{RESET}"


def resolve_color(
    mode: ColorMode,
    stream: Optional[TextIO] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> bool:
    if mode == "never":
        return False
    if mode == "always":
        return True

    env = os.environ if environ is None else environ
    if env.get("NO_COLOR"):
        return False
    force = env.get("FORCE_COLOR")
    if force and force != "0":
        return True

    stream = stream if stream is not None else sys.stdout
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def build_reporter(
    mode: ColorMode,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Reporter:
    out = stdout if stdout is not None else sys.stdout
    if resolve_color(mode, out, environ):
        return AnsiReporter(stdout=stdout, stderr=stderr)
    return PlainReporter(stdout=stdout, stderr=stderr)
