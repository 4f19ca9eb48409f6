"""Data lineage tracker: analysis entry points and the read-only query surface."""
from dataclasses import replace
from pathlib import Path
from typing import List, Optional, Tuple

import networkx as nx

from .graph_builder import LineageGraphBuilder
from .models import Declaration
from .parser import LanguageParser
from .registry import LineageRegistry
from .scope_resolver import ScopeResolver
from .walker import TreeWalker


REPORT_ORDERS = ('declaration', 'name')


def _snapshot(declaration: Declaration) -> Declaration:
    # Callers get their own reference list; the registry stays read-only
    return replace(declaration, references=list(declaration.references))


class DataLineageTracker:
    """Track where each variable of a single file is declared and referenced.

    Every analyze_* call starts from a fresh registry, so a tracker never
    mixes results from two files. Queries are only valid once an analysis
    has returned successfully.
    """

    def __init__(self, use_scope_cache: bool = True):
        """Initialize tracker.

        Args:
            use_scope_cache: Memoize scope paths per parent node during walks
        """
        self.use_scope_cache = use_scope_cache
        self.registry = LineageRegistry()
        self.file_path: Optional[Path] = None
        self.language: Optional[str] = None

    def analyze_file(self, file_path: str | Path, language: Optional[str] = None) -> 'DataLineageTracker':
        """Read, parse and analyze a source file.

        Args:
            file_path: Path to a UTF-8 JavaScript/TypeScript file
            language: Grammar to use; detected from the extension if omitted,
                      falling back to 'javascript'

        Returns:
            self, for chaining queries

        Raises:
            FileNotFoundError: If the file does not exist
            OSError: If the file cannot be read
            ValueError: If the language is unsupported or parsing fails
        """
        file_path = Path(file_path)
        if language:
            parser = LanguageParser(language)
        else:
            parser = LanguageParser.from_file_extension(file_path) or LanguageParser('javascript')

        tree, source_code = parser.parse_file(file_path)
        self._run(tree.root_node, source_code)
        self.file_path = file_path
        self.language = parser.language
        return self

    def analyze_source(self, source_code: str | bytes, language: str = 'javascript') -> 'DataLineageTracker':
        """Analyze in-memory source text.

        Args:
            source_code: Source text (str is encoded as UTF-8)
            language: One of 'javascript', 'typescript', 'tsx'

        Returns:
            self, for chaining queries

        Raises:
            ValueError: If the language is unsupported or parsing fails
        """
        if isinstance(source_code, str):
            source_code = source_code.encode('utf-8')

        parser = LanguageParser(language)
        tree = parser.parse_source(source_code)
        self._run(tree.root_node, source_code)
        self.file_path = None
        self.language = language
        return self

    def _run(self, root, source_code: bytes):
        # Build into a local registry so a failed walk leaves no partial state
        registry = LineageRegistry()
        resolver = ScopeResolver(source_code, use_cache=self.use_scope_cache)
        TreeWalker(registry, source_code, resolver).walk(root)
        self.registry = registry

    def _require_populated(self):
        if not self.registry.is_populated:
            raise RuntimeError("No analysis has completed; call analyze_file() or analyze_source() first")

    # -------------------------------------------------------------------------
    # Query surface
    # -------------------------------------------------------------------------

    def get_declaration(self, variable_name: str) -> Optional[Declaration]:
        """Return a copy of the declaration, or None if the name is unknown."""
        self._require_populated()
        declaration = self.registry.get(variable_name)
        return _snapshot(declaration) if declaration is not None else None

    def get_full_lineage(self, variable_name: str) -> List[str]:
        """Describe where a variable was declared and referenced.

        Args:
            variable_name: Exact declared name

        Returns:
            "Declared in scope: <scope>" followed by one
            "Referenced in scope: <context>" per reference in encounter
            order; empty if the name was never declared
        """
        declaration = self.get_declaration(variable_name)
        if declaration is None:
            return []

        lineage = [f"Declared in scope: {declaration.scope}"]
        for reference in declaration.references:
            lineage.append(f"Referenced in scope: {reference.context}")
        return lineage

    def enumerate_all(self) -> List[Tuple[str, Declaration]]:
        """List copies of every surviving declaration in registry order."""
        self._require_populated()
        return [(name, _snapshot(declaration)) for name, declaration in self.registry.items()]

    def sorted_declarations(self, order: str = 'declaration') -> List[Tuple[str, Declaration]]:
        """List declarations in a deterministic order.

        Args:
            order: 'declaration' (source position) or 'name'

        Returns:
            List of (name, Declaration) pairs

        Raises:
            ValueError: If order is not recognized
        """
        if order not in REPORT_ORDERS:
            raise ValueError(f"Unknown order: {order} (expected one of {', '.join(REPORT_ORDERS)})")

        items = self.enumerate_all()
        if order == 'name':
            return sorted(items, key=lambda item: item[0])
        return sorted(items, key=lambda item: (item[1].location.line, item[1].location.column))

    def build_graph(self) -> nx.DiGraph:
        """Build the scope graph for the analyzed file."""
        self._require_populated()
        return LineageGraphBuilder(self.registry).build()
