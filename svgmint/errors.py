"""Exception hierarchy.

Per-file problems derive from FileSkipError and are turned into skips by the
pipeline. Everything else is fatal for the run.
"""

from __future__ import annotations


class SvgMintError(Exception):
    """Base class for all svgmint errors."""


class InputDirectoryMissingError(SvgMintError):
    def __init__(self, path: str) -> None:
        super().__init__(f"Invalid input dir: {path}")
        self.path = path


class UnknownBlueprintError(SvgMintError, KeyError):
    def __init__(self, name: str, available: list[str]) -> None:
        super().__init__(f"Unknown blueprint {name!r} (available: {', '.join(available)})")
        self.name = name

    def __str__(self) -> str:
        return self.args[0]


class FileSkipError(SvgMintError):
    """A single input file cannot be converted; the run continues without it."""

    reason = "skipped"

    def __init__(self, path: str, detail: str = "") -> None:
        message = f"{self.reason}: {path}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
        self.path = path
        self.detail = detail


class NotAnSvgError(FileSkipError):
    reason = "Not a valid SVG document"


class MalformedXmlError(FileSkipError):
    reason = "Malformed XML"


class UnresolvableGeometryError(FileSkipError):
    reason = "Unable to determine dimensions of"


class InvalidStyleError(FileSkipError):
    reason = "Invalid CSS content in"
