"""Project generation for Koa API services."""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path
from typing import Mapping, TextIO

from .config import InvocationContext, launched_from_cmd
from .manifest import build_manifest
from .template import TemplateLoader
from .writer import FileWriter

__all__ = ["ApplicationGenerator", "is_empty_directory"]


LOGGER = logging.getLogger(__name__)

SOURCE_FILES: tuple[tuple[str, str], ...] = (
    ("index.js", "js/index.js"),
    ("app.js", "js/app.js"),
    ("routes.js", "js/routes.js"),
)

TEST_FILES: tuple[tuple[str, str], ...] = (("routes.test.js", "js/routes.test.js"),)

DOTFILES: tuple[tuple[str, str], ...] = (
    (".env.example", "env.example"),
    (".editorconfig", "editorconfig"),
)


def _join(base: str, name: str) -> str:
    """Append ``name`` to ``base`` without normalising what the user typed."""

    if base.endswith(("/", "\\")):
        return f"{base}{name}"
    return f"{base}/{name}"


def is_empty_directory(path: str | Path) -> bool:
    """Return ``True`` when ``path`` is missing or contains no entries."""

    directory = Path(path)
    if not directory.exists():
        return True
    return not any(directory.iterdir())


class ApplicationGenerator:
    """Lay out a Koa service skeleton inside a target directory."""

    def __init__(
        self,
        loader: TemplateLoader | None = None,
        writer: FileWriter | None = None,
        *,
        stdout: TextIO | None = None,
        cmd_shell: bool | None = None,
    ) -> None:
        self._stdout = stdout
        self.loader = loader or TemplateLoader()
        self.writer = writer or FileWriter(stdout)
        self._cmd_shell = cmd_shell

    @property
    def stdout(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    @property
    def cmd_shell(self) -> bool:
        return launched_from_cmd() if self._cmd_shell is None else self._cmd_shell

    async def create(self, context: InvocationContext) -> list[Path]:
        """Generate the project described by ``context``.

        The ``src`` and ``test`` trees are produced concurrently with the
        top-level files. The next steps are printed once both trees are done.
        """

        LOGGER.debug("generating %s into %s", context.name, context.path)
        template_context = {"name": context.name}
        root = context.path
        start = len(self.writer.created)

        self.stdout.write("\n")
        await self.writer.ensure_directory(root)

        branches = [
            asyncio.ensure_future(self._populate(_join(root, "src"), SOURCE_FILES, template_context)),
            asyncio.ensure_future(self._populate(_join(root, "test"), TEST_FILES, template_context)),
        ]

        manifest = build_manifest(context.name)
        self.writer.write_file(_join(root, "package.json"), manifest.to_json())

        if context.git:
            self.writer.write_file(_join(root, ".gitignore"), self.loader.render("gitignore", template_context))

        for filename, template_name in DOTFILES:
            self.writer.write_file(_join(root, filename), self.loader.render(template_name, template_context))

        await asyncio.gather(*branches)
        self._print_next_steps(context)
        return list(self.writer.created[start:])

    async def _populate(
        self,
        directory: str,
        files: tuple[tuple[str, str], ...],
        template_context: Mapping[str, str],
    ) -> None:
        await self.writer.ensure_directory(directory)
        for filename, template_name in files:
            self.writer.write_file(_join(directory, filename), self.loader.render(template_name, template_context))

    def _print_next_steps(self, context: InvocationContext) -> None:
        prompt = ">" if self.cmd_shell else "$"
        if self.cmd_shell:
            run = f"{prompt} SET DEBUG={context.name}:* & npm start"
        else:
            run = f"{prompt} DEBUG={context.name}:* npm start"

        lines = [
            "",
            "   install dependencies:",
            f"     {prompt} cd {context.path} && npm install",
            "",
            "   run the app:",
            f"     {run}",
            "",
        ]
        self.stdout.write("\n".join(lines) + "\n")
