"""Windows App Detector for Meetnote

Provides foreground app detection on Windows using:
- pywin32 for the foreground window (GetForegroundWindow)
- psutil for the owning process name
"""

import logging
from pathlib import PurePath

from .app_detector import AppDetector

logger = logging.getLogger(__name__)


class WindowsAppDetector(AppDetector):
    """App detector for Windows systems.

    Names the application after the executable that owns the foreground
    window, without the extension ("Zoom.exe" -> "Zoom").
    """

    def detect_foreground_app(self) -> str | None:
        try:
            import psutil
            import win32gui
            import win32process

            hwnd = win32gui.GetForegroundWindow()
            if not hwnd:
                return None

            _, pid = win32process.GetWindowThreadProcessId(hwnd)
            if pid:
                try:
                    return PurePath(psutil.Process(pid).name()).stem
                except (psutil.NoSuchProcess, psutil.AccessDenied):
                    pass

            # Fall back to the window title
            return win32gui.GetWindowText(hwnd) or None

        except ImportError:
            logger.warning("pywin32 not installed - Windows app detection unavailable")
            return None
        except Exception as e:
            logger.debug(f"Windows foreground app detection failed: {e}")
            return None
