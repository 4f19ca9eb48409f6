"""Tests for the networkx scope graph."""
from pathlib import Path

import pytest

from lineage_tracker.analyzer.graph_builder import lineage_from_graph
from lineage_tracker.analyzer.lineage import DataLineageTracker


FIXTURES_DIR = Path(__file__).parent / 'fixtures'


@pytest.fixture
def tracker():
    return DataLineageTracker().analyze_file(FIXTURES_DIR / 'nested_scopes.js')


@pytest.fixture
def graph(tracker):
    return tracker.build_graph()


def _edge_kind(graph, source, target):
    return graph.edges[source, target]['kind']


def test_scope_hierarchy(graph):
    assert _edge_kind(graph, 'scope:global', 'scope:outer') == 'contains'
    assert _edge_kind(graph, 'scope:outer', 'scope:outer::inner') == 'contains'
    assert _edge_kind(graph, 'scope:global', 'scope:Example') == 'contains'
    assert _edge_kind(graph, 'scope:Example', 'scope:Example::method') == 'contains'
    assert graph.in_degree('scope:global') == 0


def test_declaration_edges(graph):
    assert _edge_kind(graph, 'scope:global', 'decl:globalVar') == 'declares'
    assert _edge_kind(graph, 'scope:outer::inner', 'decl:innerVar') == 'declares'

    node = graph.nodes['decl:globalVar']
    assert node['kind'] == 'declaration'
    assert (node['line'], node['column'], node['length']) == (1, 7, 9)


def test_reference_edges(graph):
    references = [
        target for target in graph.successors('decl:globalVar')
        if _edge_kind(graph, 'decl:globalVar', target) == 'referenced_by'
    ]
    assert len(references) == 4
    assert _edge_kind(graph, 'scope:outer', 'ref:globalVar:1') == 'references'
    assert graph.nodes['ref:globalVar:1']['scope'] == 'outer'


def test_graph_lineage_matches_table(tracker, graph):
    """The graph is another serialization of the same registry."""
    for name, _ in tracker.enumerate_all():
        assert lineage_from_graph(graph, name) == tracker.get_full_lineage(name)
    assert lineage_from_graph(graph, 'doesNotExist') == []


def test_only_scope_and_lineage_edges(graph):
    kinds = {kind for _, _, kind in graph.edges(data='kind')}
    assert kinds == {'contains', 'declares', 'references', 'referenced_by'}


def test_empty_file_has_global_scope_only():
    graph = DataLineageTracker().analyze_source("").build_graph()
    assert list(graph.nodes) == ['scope:global']
