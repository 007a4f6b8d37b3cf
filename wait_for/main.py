from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Sequence

from wait_for.config import APP_NAME, VERSION, settings
from wait_for.errors import TargetParseError, WaitForError
from wait_for.executor import run_command
from wait_for.models import WaitConfig
from wait_for.output import Reporter, build_reporter
from wait_for.runner import wait_until_available
from wait_for.targets import parse_target

logger = logging.getLogger(__name__)

COLOR_MODES = ("auto", "always", "never")


def _non_negative_int(value: str) -> int:
    try:
        seconds = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid timeout: {value!r}")
    if seconds < 0:
        raise argparse.ArgumentTypeError(f"timeout must be >= 0, got {seconds}")
    return seconds


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="A simple CLI to wait for a service to become available",
    )
    parser.add_argument("target", help="Service to wait for (host:port or URL)")
    parser.add_argument(
        "-t",
        "--timeout",
        type=_non_negative_int,
        default=settings.WAIT_FOR_TIMEOUT,
        help="Timeout in seconds (0 for no timeout, default: %(default)s)",
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="Quiet mode - suppress output"
    )
    parser.add_argument(
        "--color",
        choices=COLOR_MODES,
        default=settings.WAIT_FOR_COLOR if settings.WAIT_FOR_COLOR in COLOR_MODES else "auto",
        help="Colorize output (default: %(default)s)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    parser.add_argument(
        "command",
        nargs=argparse.REMAINDER,
        help="Command to execute after successful wait",
    )
    return parser


def _split_separator(argv: List[str]) -> tuple[List[str], Optional[List[str]]]:
    """
    Split argv at the first "--" before argparse sees it.

    argparse handles "--" in front of a REMAINDER argument differently across
    Python versions, so the separator never reaches it.
    """
    if "--" not in argv:
        return argv, None
    idx = argv.index("--")
    return argv[:idx], argv[idx + 1 :]


def log_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    if isinstance(level, int):
        return level
    return logging.WARNING


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else log_level(settings.WAIT_FOR_LOG_LEVEL)
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s: %(message)s",
        level=level,
        stream=sys.stderr,
    )


def parse_config(argv: Optional[Sequence[str]] = None) -> tuple[WaitConfig, bool]:
    argv = list(sys.argv[1:] if argv is None else argv)
    own, trailing = _split_separator(argv)
    args = build_parser().parse_args(own)

    command = list(args.command)
    if trailing is not None:
        # A "--" after the command started belongs to the command itself.
        command = command + ["--"] + trailing if command else trailing

    try:
        target = parse_target(args.target)
    except TargetParseError as exc:
        raise TargetParseError(f"Failed to parse target: {args.target}: {exc}") from exc

    config = WaitConfig(
        target=target,
        timeout_s=args.timeout,
        quiet=args.quiet,
        color=args.color,
        command=command,
    )
    return config, args.verbose


def run(config: WaitConfig, reporter: Reporter) -> int:
    wait_until_available(config, reporter)
    return run_command(config.command)


def main(argv: Optional[Sequence[str]] = None) -> None:
    reporter: Reporter = build_reporter("never")
    try:
        config, verbose = parse_config(argv)
        configure_logging(verbose)
        reporter = build_reporter(config.color)
        code = run(config, reporter)
    except WaitForError as exc:
        logger.debug("wait failed", exc_info=True)
        reporter.error(f"Error: {exc}")
        sys.exit(1)
    except KeyboardInterrupt:
        reporter.error("Interrupted")
        sys.exit(130)
    sys.exit(code)


if __name__ == "__main__":
    main()
