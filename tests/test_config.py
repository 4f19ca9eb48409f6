"""Tests for environment-backed configuration."""
import pytest

from lineage_tracker.config import Config, get_config


def test_defaults(tmp_path):
    config = Config(env_path=tmp_path / '.env')
    assert config.language is None
    assert config.report_order == 'declaration'
    assert config.scope_cache_enabled is True


def test_environment_overrides(tmp_path, monkeypatch):
    monkeypatch.setenv('LINEAGE_LANGUAGE', 'typescript')
    monkeypatch.setenv('LINEAGE_REPORT_ORDER', 'Name')
    monkeypatch.setenv('LINEAGE_SCOPE_CACHE', '0')

    config = Config(env_path=tmp_path / '.env')

    assert config.language == 'typescript'
    assert config.report_order == 'name'
    assert config.scope_cache_enabled is False


def test_dotenv_file_is_loaded(tmp_path, monkeypatch):
    # Register the variable with monkeypatch so the value load_dotenv sets is undone
    monkeypatch.setenv('LINEAGE_REPORT_ORDER', '')
    monkeypatch.delenv('LINEAGE_REPORT_ORDER')
    env_file = tmp_path / '.env'
    env_file.write_text("LINEAGE_REPORT_ORDER=name\n", encoding='utf-8')

    assert Config(env_path=env_file).report_order == 'name'


def test_invalid_report_order(tmp_path, monkeypatch):
    monkeypatch.setenv('LINEAGE_REPORT_ORDER', 'alphabetical')
    with pytest.raises(ValueError, match="LINEAGE_REPORT_ORDER"):
        Config(env_path=tmp_path / '.env')


def test_invalid_language(tmp_path, monkeypatch):
    monkeypatch.setenv('LINEAGE_LANGUAGE', 'rust')
    with pytest.raises(ValueError, match="LINEAGE_LANGUAGE"):
        Config(env_path=tmp_path / '.env')


def test_get_config_is_singleton():
    assert get_config() is get_config()
