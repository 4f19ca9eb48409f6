"""Tree-sitter parser for JavaScript and TypeScript sources."""
from pathlib import Path
from typing import Optional, Tuple

import tree_sitter_javascript as tsjavascript
import tree_sitter_typescript as tstypescript
from tree_sitter import Language, Node, Parser, Tree


def node_text(node: Optional[Node], source_code: bytes) -> Optional[str]:
    """Return the UTF-8 text spanned by a node.

    Args:
        node: Node to extract (may be None)
        source_code: Bytes the tree was parsed from

    Returns:
        Decoded text, or None if the node is missing or not valid UTF-8
    """
    if node is None:
        return None
    try:
        return source_code[node.start_byte:node.end_byte].decode('utf-8')
    except UnicodeDecodeError:
        return None


class LanguageParser:
    """JavaScript/TypeScript parser using the tree-sitter v0.22+ API."""

    SUPPORTED_LANGUAGES = {
        '.js': 'javascript',
        '.mjs': 'javascript',
        '.cjs': 'javascript',
        '.jsx': 'javascript',
        '.ts': 'typescript',
        '.mts': 'typescript',
        '.cts': 'typescript',
        '.tsx': 'tsx',
    }

    def __init__(self, language: str):
        """Initialize parser for given language.

        Args:
            language: One of 'javascript', 'typescript', 'tsx'

        Raises:
            ValueError: If language is not supported
        """
        self.language = language
        self.parser = self._create_parser()

    def _create_parser(self) -> Parser:
        """Build a Parser with the grammar for self.language.

        Raises:
            ValueError: If language is not supported
        """
        if self.language == 'javascript':
            lang = Language(tsjavascript.language())
        elif self.language == 'typescript':
            lang = Language(tstypescript.language_typescript())
        elif self.language == 'tsx':
            lang = Language(tstypescript.language_tsx())
        else:
            raise ValueError(f"Unsupported language: {self.language}")

        return Parser(lang)

    def parse_source(self, source_code: bytes) -> Tree:
        """Parse in-memory source into a syntax tree.

        Only a clean tree is returned: a tree containing ERROR or MISSING
        nodes is rejected rather than analyzed best-effort.

        Args:
            source_code: UTF-8 encoded source

        Returns:
            Parsed Tree

        Raises:
            ValueError: If the source is not valid syntax for this language
        """
        tree = self.parser.parse(source_code)
        if tree is None or tree.root_node.has_error:
            raise ValueError(f"Failed to parse source code as {self.language}")
        return tree

    def parse_file(self, file_path: str | Path) -> Tuple[Tree, bytes]:
        """Read and parse a source file.

        Args:
            file_path: Path to source file to parse

        Returns:
            Tuple of (parsed Tree, source bytes)

        Raises:
            FileNotFoundError: If the file does not exist
            OSError: If the file cannot be read
            ValueError: If the file is not UTF-8 or fails to parse
        """
        file_path = Path(file_path)

        if not file_path.is_file():
            raise FileNotFoundError(f"File not found: {file_path}")

        source_code = file_path.read_bytes()
        try:
            source_code.decode('utf-8')
        except UnicodeDecodeError as e:
            raise ValueError(f"File is not valid UTF-8: {file_path} ({e.reason})") from e

        try:
            return self.parse_source(source_code), source_code
        except ValueError as e:
            raise ValueError(f"Failed to parse {file_path}: {e}") from e

    @classmethod
    def from_file_extension(cls, file_path: str | Path) -> Optional['LanguageParser']:
        """Create parser based on file extension.

        Args:
            file_path: Path to determine language from

        Returns:
            LanguageParser instance, or None if extension not supported
        """
        extension = Path(file_path).suffix.lower()

        language = cls.SUPPORTED_LANGUAGES.get(extension)
        if language:
            return cls(language)
        return None
