"""Meetnote - open a meeting note when a meeting app takes focus"""

__version__ = "1.0.0"
__description__ = "Open a meeting note when a meeting app takes focus"

__all__ = ["main", "Meetnote", "__version__"]


def __getattr__(name: str):
    """Lazy import so importing meetnote.core does not read .env or touch X11."""
    if name == "Meetnote":
        from .main import Meetnote

        return Meetnote
    if name == "main":
        from .main import main

        return main
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
