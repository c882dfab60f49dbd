"""Core ports (interfaces) for Meetnote.

These protocols define the boundaries between the monitor loop and the
platform-specific adapters. They are intentionally small and
capability-oriented to keep the core decoupled.
"""

from __future__ import annotations

from typing import Protocol, TYPE_CHECKING, runtime_checkable

if TYPE_CHECKING:
    from .config_model import MeetingConfig


@runtime_checkable
class ForegroundAppSource(Protocol):
    """Reports the application currently holding input focus."""

    def detect_foreground_app(self) -> str | None:
        """Return the foreground app name, or None if it cannot be determined."""


@runtime_checkable
class Notifier(Protocol):
    """User-visible desktop notifications."""

    def notify(self, title: str, message: str) -> None:
        """Display a notification; raise DispatchError on failure."""


@runtime_checkable
class UrlOpener(Protocol):
    """Opens a URI with the desktop's handler."""

    def open(self, url: str) -> None:
        """Open the URI; raise DispatchError on failure."""


@runtime_checkable
class Dispatcher(Protocol):
    """Side effects performed when a meeting app is in focus."""

    def dispatch(self, config: "MeetingConfig") -> None:
        """Notify and open the note-taking app."""
