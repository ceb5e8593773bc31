"""Custom exception types raised by the generator."""

from __future__ import annotations


class ScaffoldError(RuntimeError):
    """Raised when a project cannot be generated."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class TemplateNotFoundError(ScaffoldError):
    """Raised when a bundled template is missing or unreadable."""

    def __init__(self, name: str) -> None:
        super().__init__(f"template '{name}' could not be loaded")
        self.template = name
