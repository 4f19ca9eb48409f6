"""Shared fixtures for lineage tracker tests."""
from pathlib import Path

import pytest

from lineage_tracker import config as config_module
from lineage_tracker.analyzer.parser import LanguageParser


FIXTURES_DIR = Path(__file__).parent / 'fixtures'


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Isolate tests from LINEAGE_* variables and the cached Config."""
    for var in ('LINEAGE_LANGUAGE', 'LINEAGE_REPORT_ORDER', 'LINEAGE_SCOPE_CACHE', 'LINEAGE_FORCE_ASCII'):
        monkeypatch.delenv(var, raising=False)
    config_module.reset_config()
    yield
    config_module.reset_config()


@pytest.fixture
def js_parser():
    return LanguageParser('javascript')


@pytest.fixture
def nested_source() -> bytes:
    return (FIXTURES_DIR / 'nested_scopes.js').read_bytes()
