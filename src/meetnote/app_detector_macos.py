"""macOS App Detector for Meetnote

Asks System Events for the frontmost application process via osascript.
The first call may trigger an Automation permission prompt.
"""

import logging
import subprocess

from .app_detector import AppDetector

logger = logging.getLogger(__name__)

_FRONTMOST_SCRIPT = (
    'tell application "System Events" to '
    "name of first application process whose frontmost is true"
)


class MacOSAppDetector(AppDetector):
    def __init__(self, timeout: float = 2.0):
        self._timeout = timeout

    def detect_foreground_app(self) -> str | None:
        try:
            result = subprocess.run(
                ["osascript", "-e", _FRONTMOST_SCRIPT],
                capture_output=True,
                text=True,
                timeout=self._timeout,
            )
        except (OSError, subprocess.TimeoutExpired) as e:
            logger.debug(f"osascript failed: {e}")
            return None

        if result.returncode != 0:
            logger.debug(f"osascript exited {result.returncode}: {result.stderr.strip()}")
            return None
        return result.stdout.strip() or None
