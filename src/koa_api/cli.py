"""Command line interface for the Koa API generator."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import NoReturn, Sequence, TextIO

from . import __version__
from .config import InvocationContext
from .process import OutputFlusher
from .prompt import confirm
from .scaffold import ApplicationGenerator, is_empty_directory

LOGGER = logging.getLogger(__name__)

PROG = "koa-api"
CONFIRM_MESSAGE = "destination is not empty, continue? [y/N] "


class KoaArgumentParser(argparse.ArgumentParser):
    """Argument parser that prints help at most once for unknown options.

    The first unknown option prints the help text and then fails with exit
    status 1. Once help has been shown, unknown options are tolerated so the
    help text is not followed by a confusing trailing error.
    """

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.help_shown = False

    def print_help(self, file: TextIO | None = None) -> None:
        self.help_shown = True
        super().print_help(file)

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")

    def parse(self, argv: Sequence[str] | None = None) -> argparse.Namespace:
        args, extras = self.parse_known_args(argv)
        for extra in extras:
            if extra.startswith("-") and extra != "-":
                self._unknown_option(extra)
            else:
                LOGGER.debug("ignoring surplus argument %s", extra)
        return args

    def _unknown_option(self, option: str) -> None:
        allowed = self.help_shown
        if not self.help_shown:
            self.print_help()
        if not allowed:
            self.error(f"unknown option '{option}'")
        LOGGER.debug("tolerating unknown option %s after help", option)


def build_parser() -> KoaArgumentParser:
    parser = KoaArgumentParser(
        prog=PROG,
        usage="%(prog)s [options] [dir]",
        description="Generate a Koa API service skeleton",
        allow_abbrev=False,
    )
    parser.add_argument("dir", nargs="?", default=".", help="Target directory (default: current directory)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--git", action="store_true", help="add .gitignore")
    parser.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="force on non-empty directory",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="log generator activity to stderr",
    )
    return parser


def _configure_logging(verbose: bool, stream: TextIO) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=stream,
    )


async def _generate(
    context: InvocationContext,
    *,
    stdin: TextIO | None,
    stdout: TextIO,
    stderr: TextIO,
) -> int:
    if not (context.force or is_empty_directory(context.path)):
        if not await confirm(CONFIRM_MESSAGE, stdin=stdin, stdout=stdout):
            stderr.write("aborting\n")
            return 1

    generator = ApplicationGenerator(stdout=stdout)
    await generator.create(context)
    return 0


def main(
    argv: Sequence[str] | None = None,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr

    parser = build_parser()
    args = parser.parse(argv)
    _configure_logging(args.verbose, stderr)

    context = InvocationContext.from_args(args.dir, git=args.git, force=args.force)
    LOGGER.debug("invocation context %s", context)
    return asyncio.run(_generate(context, stdin=stdin, stdout=stdout, stderr=stderr))


def run(argv: Sequence[str] | None = None, *, flusher: OutputFlusher | None = None) -> None:
    """Console script entry point.

    Every way out of :func:`main`, including the exits requested by the
    argument parser, goes through :meth:`OutputFlusher.exit`.
    """

    flusher = flusher or OutputFlusher()
    try:
        code = main(argv)
    except SystemExit as exc:
        code = exc.code
    flusher.exit(code)


if __name__ == "__main__":  # pragma: no cover
    run()
