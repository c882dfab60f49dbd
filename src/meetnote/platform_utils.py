"""Platform detection and cross-platform utilities for Meetnote"""

import platform
import sys

# Platform detection
IS_WINDOWS = sys.platform == "win32"
IS_LINUX = sys.platform.startswith("linux")
IS_MACOS = sys.platform == "darwin"

# Display system detection (Linux-specific)
IS_X11 = False
IS_WAYLAND = False

if IS_LINUX:
    import os

    session_type = os.environ.get("XDG_SESSION_TYPE", "").lower()
    IS_WAYLAND = session_type == "wayland"
    # XWayland also sets DISPLAY; only trust it outside a Wayland session
    IS_X11 = session_type == "x11" or (os.environ.get("DISPLAY") is not None and not IS_WAYLAND)


def get_platform_info() -> dict:
    """Get detailed platform information."""
    return {
        "system": platform.system(),
        "release": platform.release(),
        "python_version": platform.python_version(),
        "is_windows": IS_WINDOWS,
        "is_linux": IS_LINUX,
        "is_macos": IS_MACOS,
        "is_x11": IS_X11,
        "is_wayland": IS_WAYLAND,
    }


def describe_platform() -> str:
    """One-line platform summary for the startup banner."""
    info = get_platform_info()
    display = ""
    if IS_LINUX:
        if IS_X11:
            display = " (X11)"
        elif IS_WAYLAND:
            display = " (Wayland)"
    return f"{info['system']} {info['release']}{display}"
