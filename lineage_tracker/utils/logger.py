"""Terminal-safe output with an ASCII fallback for non-UTF-8 consoles.

Report output uses a few box-drawing and arrow glyphs; on terminals that
cannot encode them they are swapped for ASCII so printing never raises
UnicodeEncodeError.
"""
import locale
import os
import sys


# Glyphs used in reports and their ASCII stand-ins
ICON_MAP = {
    '✓': '[OK]',
    '✗': '[FAIL]',
    '⚠': '[WARN]',
    '→': '->',
    '←': '<-',
    '•': '*',
    '…': '...',
    '│': '|',
    '─': '-',
    '├': '+',
    '└': '+',
    '┌': '+',
    '┐': '+',
    '┘': '+',
}


def detect_terminal_encoding() -> str:
    """Detect the terminal's encoding.

    Returns:
        str: Lower-cased encoding name ('utf-8', 'cp1252', 'ascii', ...)
    """
    if getattr(sys.stdout, 'encoding', None):
        return sys.stdout.encoding.lower()

    try:
        return locale.getpreferredencoding().lower()
    except locale.Error:
        return 'ascii'


def force_ascii_requested() -> bool:
    """Check LINEAGE_FORCE_ASCII (read directly so it works before config loads)."""
    return os.getenv('LINEAGE_FORCE_ASCII', '').strip().lower() in ('1', 'true', 'yes')


def is_utf8_capable() -> bool:
    """Check if Unicode glyphs can be printed as-is."""
    if force_ascii_requested():
        return False
    return detect_terminal_encoding().replace('_', '-') in ('utf-8', 'utf8')


def sanitize_for_terminal(text: str) -> str:
    """Replace known glyphs with ASCII when the terminal is not UTF-8.

    Args:
        text: Text potentially containing glyphs

    Returns:
        str: Text safe for the current terminal
    """
    if is_utf8_capable():
        return text

    for glyph, replacement in ICON_MAP.items():
        text = text.replace(glyph, replacement)
    return text
