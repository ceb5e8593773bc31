"""Name normalisation used when deriving npm package names."""

from __future__ import annotations

import re
from pathlib import PurePath

__all__ = ["DEFAULT_APP_NAME", "derive_app_name", "normalize_package_name"]


DEFAULT_APP_NAME = "koa-api"

_DISALLOWED = re.compile(r"[^A-Za-z0-9.()!~*'-]+")
_EDGES = re.compile(r"^[-_.]+|-+$")


def normalize_package_name(value: str) -> str:
    """Return ``value`` rewritten to satisfy npm naming rules.

    Runs of unsupported characters collapse into a single hyphen, leading
    hyphens, underscores and dots are dropped along with trailing hyphens,
    and the result is lower-cased. The return value may be empty.
    """

    text = _DISALLOWED.sub("-", value)
    text = _EDGES.sub("", text)
    return text.lower()


def derive_app_name(path: str | PurePath, *, default: str = DEFAULT_APP_NAME) -> str:
    """Create an application name from the last segment of ``path``."""

    candidate = normalize_package_name(PurePath(path).name)
    return candidate or default
