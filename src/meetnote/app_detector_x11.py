"""X11 App Detector for Meetnote

Provides foreground app detection on X11 display servers using:
- python-xlib for the active window and its WM_CLASS (primary)
- psutil to name the owning process when WM_CLASS is empty
"""

import logging

from Xlib.display import Display

from .app_detector import AppDetector

logger = logging.getLogger(__name__)


class X11AppDetector(AppDetector):
    """App detector for X11 display server.

    Reads _NET_ACTIVE_WINDOW from the root window, then identifies the
    application by its WM_CLASS class name.
    """

    def __init__(self):
        self._display: Display | None = None

    def _get_display(self) -> "Display":
        """Get or create X11 display connection (lazy init)."""
        if self._display is None:
            self._display = Display()
        return self._display

    def detect_foreground_app(self) -> str | None:
        try:
            d = self._get_display()
            root = d.screen().root

            net_active_window = d.intern_atom("_NET_ACTIVE_WINDOW")
            active_window_prop = root.get_full_property(net_active_window, 0)

            if not active_window_prop or not active_window_prop.value:
                return None

            window_id = active_window_prop.value[0]
            if window_id == 0:
                return None

            window = d.create_resource_object("window", window_id)

            wm_class = self._get_wm_class(window)
            if wm_class:
                return wm_class

            pid = self._get_window_pid(window, d)
            if pid is not None:
                return _process_name(pid)
            return None

        except Exception as e:
            logger.warning(f"X11 foreground app detection failed: {e}")
            return None

    def _get_wm_class(self, window) -> str:
        """Extract WM_CLASS class name from window."""
        try:
            wm_class = window.get_wm_class()
            if wm_class:
                # (instance, class); class name is the stable one
                return wm_class[1] if len(wm_class) > 1 else wm_class[0]
        except Exception:
            logger.debug("WM_CLASS unavailable", exc_info=True)
        return ""

    def _get_window_pid(self, window, display: "Display") -> int | None:
        """Get process ID from _NET_WM_PID property."""
        try:
            net_wm_pid = display.intern_atom("_NET_WM_PID")
            prop = window.get_full_property(net_wm_pid, 0)
            if prop and prop.value:
                return int(prop.value[0])
        except Exception:
            logger.debug("_NET_WM_PID unavailable", exc_info=True)
        return None


def _process_name(pid: int) -> str | None:
    import psutil

    try:
        return psutil.Process(pid).name()
    except (psutil.NoSuchProcess, psutil.AccessDenied):
        return None
