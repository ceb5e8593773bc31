"""Loading and rendering of the bundled project templates."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from .errors import TemplateNotFoundError

__all__ = [
    "TEMPLATE_DIR",
    "TemplateLoader",
    "TemplateRenderer",
]


LOGGER = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"

_PLACEHOLDER_PATTERN = re.compile(r"{{\s*(?P<key>[A-Za-z_][A-Za-z0-9_]*)\s*}}")


@dataclass(slots=True)
class TemplateRenderer:
    """Substitute ``{{ key }}`` placeholders with values from a mapping.

    Placeholders whose key is not in the mapping are left untouched.
    """

    def render_string(self, template: str, context: Mapping[str, Any]) -> str:
        def substitute(match: re.Match[str]) -> str:
            key = match.group("key")
            if key in context:
                return str(context[key])
            return match.group(0)

        return _PLACEHOLDER_PATTERN.sub(substitute, template)


@dataclass(slots=True)
class TemplateLoader:
    """Read template files shipped alongside the package."""

    directory: Path = TEMPLATE_DIR
    renderer: TemplateRenderer = field(default_factory=TemplateRenderer)

    def path_for(self, name: str) -> Path:
        return self.directory.joinpath(*name.split("/"))

    def load(self, name: str) -> str:
        """Return the verbatim text of template ``name``."""

        path = self.path_for(name)
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise TemplateNotFoundError(name) from exc
        LOGGER.debug("loaded template %s from %s", name, path)
        return text

    def render(self, name: str, context: Mapping[str, Any]) -> str:
        """Load template ``name`` and substitute ``context`` into it."""

        return self.renderer.render_string(self.load(name), context)
