"""Scope graph builder using NetworkX.

Alternative serialization of a populated LineageRegistry: scopes,
declarations and references become nodes, and edges say "declared in" or
"referenced in" a scope. Edges carry no data-flow or control-flow meaning.
"""
from typing import List

import networkx as nx

from .models import GLOBAL_SCOPE, SCOPE_SEPARATOR, Declaration
from .registry import LineageRegistry


def scope_node_id(scope: str) -> str:
    return f"scope:{scope}"


def declaration_node_id(name: str) -> str:
    return f"decl:{name}"


def reference_node_id(name: str, index: int) -> str:
    return f"ref:{name}:{index}"


class LineageGraphBuilder:
    """Build a directed scope graph from a populated registry."""

    def __init__(self, registry: LineageRegistry):
        """Initialize graph builder.

        Args:
            registry: Registry filled by a completed traversal
        """
        self.registry = registry
        self.graph = nx.DiGraph()

    def build(self) -> nx.DiGraph:
        """Build the graph.

        Edge kinds:
            contains:      parent scope -> nested scope
            declares:      scope -> declaration
            references:    scope -> reference
            referenced_by: declaration -> reference

        Returns:
            NetworkX DiGraph rooted at the 'global' scope node
        """
        self._add_scope(GLOBAL_SCOPE)

        for name, declaration in self.registry.items():
            self._add_declaration(name, declaration)

        return self.graph

    def _add_scope(self, scope: str) -> str:
        """Add a scope node and the chain of 'contains' edges above it."""
        node_id = scope_node_id(scope)
        if node_id in self.graph:
            return node_id

        parts = scope.split(SCOPE_SEPARATOR)
        self.graph.add_node(node_id, kind='scope', label=parts[-1], path=scope)

        if scope != GLOBAL_SCOPE:
            if len(parts) > 1:
                parent = self._add_scope(SCOPE_SEPARATOR.join(parts[:-1]))
            else:
                parent = scope_node_id(GLOBAL_SCOPE)
            self.graph.add_edge(parent, node_id, kind='contains')

        return node_id

    def _add_declaration(self, name: str, declaration: Declaration):
        decl_id = declaration_node_id(name)
        loc = declaration.location
        self.graph.add_node(
            decl_id, kind='declaration', label=name, scope=declaration.scope,
            line=loc.line, column=loc.column, length=loc.length,
        )
        self.graph.add_edge(self._add_scope(declaration.scope), decl_id, kind='declares')

        for index, reference in enumerate(declaration.references):
            ref_id = reference_node_id(name, index)
            loc = reference.location
            self.graph.add_node(
                ref_id, kind='reference', label=name, scope=reference.context,
                index=index, line=loc.line, column=loc.column, length=loc.length,
            )
            self.graph.add_edge(decl_id, ref_id, kind='referenced_by')
            self.graph.add_edge(self._add_scope(reference.context), ref_id, kind='references')


def lineage_from_graph(graph: nx.DiGraph, name: str) -> List[str]:
    """Read a variable's lineage back out of a scope graph.

    Produces the same lines as DataLineageTracker.get_full_lineage().

    Args:
        graph: Graph produced by LineageGraphBuilder
        name: Variable name

    Returns:
        Lineage lines, or an empty list if the name was never declared
    """
    decl_id = declaration_node_id(name)
    if decl_id not in graph:
        return []

    lineage = [f"Declared in scope: {graph.nodes[decl_id]['scope']}"]
    references = sorted(
        (ref_id for ref_id in graph.successors(decl_id)
         if graph.edges[decl_id, ref_id]['kind'] == 'referenced_by'),
        key=lambda ref_id: graph.nodes[ref_id]['index'],
    )
    for ref_id in references:
        lineage.append(f"Referenced in scope: {graph.nodes[ref_id]['scope']}")
    return lineage
