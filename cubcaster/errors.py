"""Exception types and error report formatting."""

from __future__ import annotations


class CubError(Exception):
    """Base error for everything the game reports."""

    def __init__(self, message: str, detail: str | None = None) -> None:
        self.message = message
        self.detail = detail
        super().__init__(message if detail is None else f"{message}: {detail}")

    def report(self) -> str:
        """Return the error as a block suitable for standard error."""
        return format_error(self.message, self.detail)


class MapError(CubError):
    """The scene description file is missing, malformed or invalid."""


class AssetError(CubError):
    """A texture or sprite could not be loaded or prepared."""


def format_error(message: str, detail: str | None = None) -> str:
    """Format an error report the way the game prints it to standard error."""
    if detail is None:
        return f"\n[Error]\n{message}\n"
    return f"\n[Error]\n{message}: {detail}\n\n"