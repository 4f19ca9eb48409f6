"""Enclosing-scope resolution by walking a node's ancestors."""
from typing import Dict, List

from tree_sitter import Node

from .models import GLOBAL_SCOPE, SCOPE_SEPARATOR
from .parser import node_text


# Node types that open a named lexical scope
SCOPE_NODE_TYPES = frozenset({
    'function_declaration',
    'generator_function_declaration',
    'method_definition',
    'class_declaration',
    'abstract_class_declaration',
})


def resolve_scope(node: Node, source_code: bytes) -> str:
    """Compute the scope path enclosing a node.

    Walks from the node's parent up to the root, collecting the ``name`` field
    of every scope-introducing ancestor. Anonymous scopes (e.g. function
    expressions, arrow functions) contribute nothing, so two different
    anonymous scopes can produce the same path.

    Args:
        node: Node to resolve
        source_code: Bytes the tree was parsed from

    Returns:
        Outermost-first '::'-joined path, or 'global' with no named ancestor
    """
    scope_parts: List[str] = []
    current = node.parent

    while current is not None:
        if current.type in SCOPE_NODE_TYPES:
            name = node_text(current.child_by_field_name('name'), source_code)
            if name:
                scope_parts.append(name)
        current = current.parent

    if not scope_parts:
        return GLOBAL_SCOPE
    scope_parts.reverse()
    return SCOPE_SEPARATOR.join(scope_parts)


class ScopeResolver:
    """Scope resolution with an optional memo per parent node.

    Every child of the same parent shares a scope path, so caching on the
    parent's id turns repeated O(depth) walks into lookups on large files.
    Cached and uncached results are identical.
    """

    def __init__(self, source_code: bytes, use_cache: bool = True):
        self.source_code = source_code
        self.use_cache = use_cache
        # parent node id -> scope path
        self._cache: Dict[int, str] = {}

    def resolve(self, node: Node) -> str:
        """Return the scope path enclosing ``node``."""
        parent = node.parent
        if not self.use_cache or parent is None:
            return resolve_scope(node, self.source_code)

        scope = self._cache.get(parent.id)
        if scope is None:
            scope = resolve_scope(node, self.source_code)
            self._cache[parent.id] = scope
        return scope
