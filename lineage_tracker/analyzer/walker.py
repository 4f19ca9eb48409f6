"""Depth-first traversal that fills a LineageRegistry from a syntax tree."""
from typing import Optional

from tree_sitter import Node

from .models import Location
from .parser import node_text
from .registry import LineageRegistry
from .scope_resolver import ScopeResolver


DECLARATOR_NODE_TYPES = frozenset({'variable_declarator'})
IDENTIFIER_NODE_TYPES = frozenset({'identifier'})


class TreeWalker:
    """Visit every node once, pre-order, recording declarations and references.

    There is no lookahead: an identifier visited before the declarator of the
    same name is dropped for good. The declarator's own name identifier is a
    child of the declarator, so it is always recorded as the declaration's
    first reference.
    """

    def __init__(self, registry: LineageRegistry, source_code: bytes,
                 resolver: Optional[ScopeResolver] = None):
        """Initialize walker.

        Args:
            registry: Registry to populate (owned by the caller, one per file)
            source_code: Bytes the tree was parsed from
            resolver: Scope resolver; a caching one is created if omitted
        """
        self.registry = registry
        self.source_code = source_code
        self.resolver = resolver or ScopeResolver(source_code)

    def walk(self, root: Node):
        """Traverse the tree rooted at ``root`` and populate the registry.

        Uses an explicit stack so deeply nested sources cannot exhaust the
        interpreter recursion limit.
        """
        stack = [root]

        while stack:
            node = stack.pop()

            if node.type in DECLARATOR_NODE_TYPES:
                self._visit_declarator(node)
            elif node.type in IDENTIFIER_NODE_TYPES:
                self._visit_identifier(node)

            # Reversed so the leftmost child is popped first (source order)
            stack.extend(reversed(node.children))

        self.registry.mark_populated()

    def _visit_declarator(self, node: Node):
        name_node = node.child_by_field_name('name')
        name = node_text(name_node, self.source_code)
        if not name:
            return

        self.registry.declare(
            name,
            Location.from_node(name_node),
            self.resolver.resolve(node),
        )

    def _visit_identifier(self, node: Node):
        name = node_text(node, self.source_code)
        if not name or name not in self.registry:
            return

        self.registry.add_reference(
            name,
            Location.from_node(node),
            self.resolver.resolve(node),
        )
