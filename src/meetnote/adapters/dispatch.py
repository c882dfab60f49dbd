"""Notification and deep-link adapters backed by external commands."""

from __future__ import annotations

import logging
import subprocess

from ..core.config_model import MeetingConfig
from ..core.errors import DispatchError
from ..core.ports import Notifier, UrlOpener

logger = logging.getLogger(__name__)

DEFAULT_DEEP_LINK = "obsidian://new"


class SubprocessNotifier:
    def __init__(self, command: str = "notify-send", timeout: float | None = None):
        self._command = command
        self._timeout = timeout

    def notify(self, title: str, message: str) -> None:
        _run([self._command, title, message], self._timeout)


class SubprocessUrlOpener:
    def __init__(self, command: str = "xdg-open", timeout: float | None = None):
        self._command = command
        self._timeout = timeout

    def open(self, url: str) -> None:
        _run([self._command, url], self._timeout)


class NotificationDispatcher:
    """Shows the notification, then opens the note-taking app."""

    def __init__(self, notifier: Notifier, url_opener: UrlOpener, deep_link: str = DEFAULT_DEEP_LINK):
        self._notifier = notifier
        self._url_opener = url_opener
        self._deep_link = deep_link

    def dispatch(self, config: MeetingConfig) -> None:
        self._notifier.notify(config.notification_title, config.notification_message)
        self._url_opener.open(self._deep_link)


def _run(args: list[str], timeout: float | None) -> None:
    logger.debug("Running %s", args)
    try:
        result = subprocess.run(
            args, capture_output=True, text=True, errors="replace", timeout=timeout
        )
    except FileNotFoundError as e:
        raise DispatchError(f"Command not found: {args[0]}", command=args) from e
    except subprocess.TimeoutExpired as e:
        raise DispatchError(f"{args[0]} timed out after {timeout}s", command=args) from e
    except OSError as e:
        raise DispatchError(f"Failed to launch {args[0]}: {e}", command=args) from e

    if result.returncode != 0:
        stderr = (result.stderr or "").strip()
        raise DispatchError(
            f"{args[0]} exited with status {result.returncode}"
            + (f": {stderr}" if stderr else ""),
            command=args,
            returncode=result.returncode,
        )
