"""Error types raised at the Meetnote adapter seams."""

from __future__ import annotations


class MeetnoteError(Exception):
    """Base class for Meetnote errors."""


class ConfigError(MeetnoteError):
    """The meeting configuration file is unreadable, malformed or incomplete."""


class DispatchError(MeetnoteError):
    """An external notifier or URL opener failed to launch or exited non-zero."""

    def __init__(self, message: str, command: list[str] | None = None, returncode: int | None = None):
        super().__init__(message)
        self.command = command
        self.returncode = returncode
