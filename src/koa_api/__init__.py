"""Generator for Koa API service skeletons.

The package derives an npm package name from the destination directory,
writes a small Koa application with a routing test, a ``package.json``
manifest and a handful of dotfiles, and can be driven both programmatically
and through the ``koa-api`` command line interface.
"""

from __future__ import annotations

__version__ = "1.0.0"

from .config import InvocationContext
from .errors import ScaffoldError, TemplateNotFoundError
from .manifest import Manifest, build_manifest
from .naming import derive_app_name, normalize_package_name
from .scaffold import ApplicationGenerator, is_empty_directory
from .template import TemplateLoader, TemplateRenderer

__all__ = [
    "ApplicationGenerator",
    "InvocationContext",
    "Manifest",
    "ScaffoldError",
    "TemplateLoader",
    "TemplateNotFoundError",
    "TemplateRenderer",
    "build_manifest",
    "derive_app_name",
    "is_empty_directory",
    "normalize_package_name",
]
