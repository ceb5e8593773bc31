"""Filesystem helpers that report every path they create."""

from __future__ import annotations

import asyncio
import logging
import os
import sys
from pathlib import Path
from typing import TextIO

__all__ = ["DIRECTORY_MODE", "FILE_MODE", "FileWriter"]


LOGGER = logging.getLogger(__name__)

DIRECTORY_MODE = 0o755
FILE_MODE = 0o666

_CREATE_PREFIX = "   \x1b[36mcreate\x1b[0m : "


class FileWriter:
    """Create directories and files, echoing a ``create`` line for each."""

    def __init__(self, stdout: TextIO | None = None) -> None:
        self._stdout = stdout
        self.created: list[Path] = []

    @property
    def stdout(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    def _report(self, path: str | Path) -> None:
        self.created.append(Path(path))
        self.stdout.write(f"{_CREATE_PREFIX}{path}\n")

    async def ensure_directory(self, path: str | Path) -> Path:
        """Create ``path`` and any missing parents with mode ``0755``.

        An already existing directory is not an error. Every other
        :class:`OSError` propagates to the caller.
        """

        directory = Path(path)
        directory.mkdir(mode=DIRECTORY_MODE, parents=True, exist_ok=True)
        LOGGER.debug("ensured directory %s", directory)
        self._report(path)
        await asyncio.sleep(0)
        return directory

    def write_file(self, path: str | Path, content: str, mode: int = FILE_MODE) -> Path:
        """Write ``content`` to ``path``, creating or truncating it."""

        destination = Path(path)
        descriptor = os.open(destination, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, mode)
        with os.fdopen(descriptor, "w", encoding="utf-8", newline="") as handle:
            handle.write(content)
        LOGGER.debug("wrote %d characters to %s", len(content), destination)
        self._report(path)
        return destination
