"""Foreground application detection for Meetnote

Answers one question per poll: which application currently holds input
focus? Each windowing system gets its own implementation; the monitor loop
only sees the AppDetector interface.

A detector that cannot tell returns None. That is an expected outcome, not
an error.
"""

import logging
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)


class AppDetector(ABC):
    """Abstract base class for platform-specific foreground app detection."""

    @abstractmethod
    def detect_foreground_app(self) -> str | None:
        """Get the name of the focused application.

        Returns:
            Application name as the user would list it in config.json
            (e.g. "Zoom", "Microsoft Teams"), or None if unknown.
        """
        pass


class NullAppDetector(AppDetector):
    """Null implementation that never reports an app.

    Used when detection is unavailable on this platform.
    """

    def detect_foreground_app(self) -> str | None:
        return None


class StaticAppDetector(AppDetector):
    """Always reports the same application name.

    Useful for trying out a configuration without a real meeting running.
    """

    def __init__(self, app_name: str):
        self.app_name = app_name

    def detect_foreground_app(self) -> str | None:
        return self.app_name


# =============================================================================
# Factory Function
# =============================================================================

_cached_detector: AppDetector | None = None


def get_app_detector(force_type: str | None = None) -> AppDetector:
    """Get the appropriate app detector for the current platform.

    Uses lazy initialization and caches the detector instance.

    Args:
        force_type: Force a specific detector type.
                   Options: "x11", "windows", "macos", "null", "static:<Name>"

    Returns:
        AppDetector implementation appropriate for the platform.
    """
    global _cached_detector

    if _cached_detector is not None and force_type is None:
        return _cached_detector

    if force_type == "null":
        return NullAppDetector()

    if force_type and force_type.startswith("static:"):
        return StaticAppDetector(force_type.split(":", 1)[1])

    from .platform_utils import IS_LINUX, IS_MACOS, IS_WAYLAND, IS_WINDOWS, IS_X11

    detector: AppDetector

    if IS_LINUX and IS_WAYLAND and force_type is None:
        logger.warning("Wayland does not expose the focused window; detection disabled")
        detector = NullAppDetector()

    elif force_type == "x11" or (IS_LINUX and IS_X11 and force_type is None):
        try:
            from .app_detector_x11 import X11AppDetector

            detector = X11AppDetector()
        except ImportError as e:
            logger.warning(f"X11 app detector unavailable: {e}")
            detector = NullAppDetector()

    elif force_type == "windows" or (IS_WINDOWS and force_type is None):
        try:
            from .app_detector_windows import WindowsAppDetector

            detector = WindowsAppDetector()
        except ImportError as e:
            logger.warning(f"Windows app detector unavailable: {e}")
            detector = NullAppDetector()

    elif force_type == "macos" or (IS_MACOS and force_type is None):
        from .app_detector_macos import MacOSAppDetector

        detector = MacOSAppDetector()

    else:
        if force_type is not None:
            logger.warning(f"Unknown detector type: {force_type!r}")
        detector = NullAppDetector()

    if force_type is None:
        _cached_detector = detector

    return detector


def clear_detector_cache():
    """Clear the cached detector instance."""
    global _cached_detector
    _cached_detector = None
