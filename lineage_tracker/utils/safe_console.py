"""Rich Console wrapper that sanitizes glyphs on non-UTF-8 terminals."""
from typing import Any

from rich.console import Console

from .logger import is_utf8_capable, sanitize_for_terminal


class SafeConsole(Console):
    """Console that swaps Unicode glyphs for ASCII where the terminal needs it."""

    def __init__(self, *args, **kwargs):
        """Initialize SafeConsole; all arguments go through to rich's Console."""
        self._needs_sanitization = not is_utf8_capable()
        super().__init__(*args, **kwargs)

    @property
    def needs_sanitization(self) -> bool:
        return self._needs_sanitization

    def print(self, *objects: Any, **kwargs) -> None:
        """Print, sanitizing string objects first when required."""
        if self._needs_sanitization:
            objects = tuple(
                sanitize_for_terminal(obj) if isinstance(obj, str) else obj
                for obj in objects
            )
        super().print(*objects, **kwargs)
