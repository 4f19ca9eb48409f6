"""Tests for ASCII fallback of terminal output."""
import io

from lineage_tracker.utils.logger import is_utf8_capable, sanitize_for_terminal
from lineage_tracker.utils.safe_console import SafeConsole


def test_force_ascii_replaces_glyphs(monkeypatch):
    monkeypatch.setenv('LINEAGE_FORCE_ASCII', '1')
    assert not is_utf8_capable()
    assert sanitize_for_terminal("→ Declared in scope: global") == "-> Declared in scope: global"


def test_safe_console_sanitizes_strings(monkeypatch):
    monkeypatch.setenv('LINEAGE_FORCE_ASCII', 'true')
    buffer = io.StringIO()
    console = SafeConsole(file=buffer, width=120, emoji=False)

    console.print("  → Referenced in scope: outer")

    assert console.needs_sanitization
    assert buffer.getvalue() == "  -> Referenced in scope: outer\n"


def test_plain_text_unchanged(monkeypatch):
    monkeypatch.setenv('LINEAGE_FORCE_ASCII', '1')
    assert sanitize_for_terminal("Scope: outer::inner") == "Scope: outer::inner"
