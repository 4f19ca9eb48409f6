"""Tests for the tree-sitter parsing collaborator."""
import pytest

from lineage_tracker.analyzer.parser import LanguageParser, node_text


@pytest.mark.parametrize("file_name, language", [
    ('app.js', 'javascript'),
    ('module.MJS', 'javascript'),
    ('view.jsx', 'javascript'),
    ('service.ts', 'typescript'),
    ('component.tsx', 'tsx'),
])
def test_from_file_extension(file_name, language):
    parser = LanguageParser.from_file_extension(file_name)
    assert parser is not None
    assert parser.language == language


def test_unsupported_extension_returns_none():
    assert LanguageParser.from_file_extension('main.py') is None


def test_unsupported_language_raises():
    with pytest.raises(ValueError, match="Unsupported language"):
        LanguageParser('python')


def test_parse_source_rejects_syntax_errors(js_parser):
    with pytest.raises(ValueError, match="Failed to parse"):
        js_parser.parse_source(b"let = ;")


def test_parse_file_returns_tree_and_bytes(js_parser, tmp_path):
    path = tmp_path / 'ok.js'
    path.write_text("let ok = true;\n", encoding='utf-8')

    tree, source_code = js_parser.parse_file(path)

    assert tree.root_node.type == 'program'
    assert source_code == b"let ok = true;\n"


def test_parse_file_missing(js_parser, tmp_path):
    with pytest.raises(FileNotFoundError):
        js_parser.parse_file(tmp_path / 'nope.js')


def test_parse_file_directory_is_not_a_file(js_parser, tmp_path):
    with pytest.raises(FileNotFoundError):
        js_parser.parse_file(tmp_path)


def test_node_text_handles_missing_node():
    assert node_text(None, b"abc") is None


def test_tsx_parses_jsx_elements():
    parser = LanguageParser('tsx')
    tree = parser.parse_source(b"const el = <div>{label}</div>;")
    assert not tree.root_node.has_error
