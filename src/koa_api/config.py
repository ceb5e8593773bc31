"""Invocation settings shared by the generator and the CLI."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from .naming import derive_app_name


def launched_from_cmd(
    platform: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> bool:
    """Return ``True`` when running under the Windows command shell.

    POSIX-style shells (including those shipped for Windows) export ``_``
    while ``cmd.exe`` does not.
    """

    platform = sys.platform if platform is None else platform
    environ = os.environ if environ is None else environ
    return platform == "win32" and "_" not in environ


@dataclass(frozen=True, slots=True)
class InvocationContext:
    """Everything a single run of the generator needs to know.

    Attributes
    ----------
    path:
        The destination directory exactly as supplied on the command line.
    name:
        npm package name derived from the absolute destination. Symbolic
        links are not followed, so a link is named after itself.
    git:
        Whether a ``.gitignore`` should be written.
    force:
        Whether a non-empty destination is used without asking.
    """

    path: str
    name: str
    git: bool = False
    force: bool = False

    @classmethod
    def from_args(
        cls,
        destination: str | Path = ".",
        *,
        git: bool = False,
        force: bool = False,
    ) -> "InvocationContext":
        """Build a context, deriving the application name from ``destination``."""

        path = os.fspath(destination)
        return cls(
            path=path,
            name=derive_app_name(os.path.abspath(path)),
            git=git,
            force=force,
        )
