"""Human-readable rendering of lineage results with Rich."""
from pathlib import Path
from typing import List, Optional

import networkx as nx
from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from .analyzer.graph_builder import scope_node_id
from .analyzer.lineage import DataLineageTracker
from .analyzer.models import GLOBAL_SCOPE


def render_report(tracker: DataLineageTracker, console: Console,
                  file_path: Optional[Path] = None, order: str = 'declaration'):
    """Print every declared variable with its declaration site and references.

    Variables without references are listed with "No references found"
    rather than omitted.

    Args:
        tracker: Tracker with a completed analysis
        console: Console to print to
        file_path: Analyzed file, shown in the header
        order: 'declaration' or 'name'
    """
    declarations = tracker.sorted_declarations(order)

    header = "Variable Declarations and References"
    if file_path is not None:
        header += f": {escape(str(file_path))}"
    console.print(f"[bold blue]{header}[/bold blue]")

    if not declarations:
        console.print("[dim]No variable declarations found.[/dim]")
        return

    for name, declaration in declarations:
        loc = declaration.location
        console.print(f"\n[bold cyan]Variable:[/bold cyan] {escape(name)}")
        console.print(f"  Declared at line {loc.line}, column {loc.column}")
        console.print(f"  Scope: [magenta]{escape(declaration.scope)}[/magenta]")

        if not declaration.references:
            console.print("  [yellow]No references found[/yellow]")
            continue

        console.print("  References:")
        for reference in declaration.references:
            ref_loc = reference.location
            console.print(
                f"   - At line {ref_loc.line}, column {ref_loc.column} "
                f"(in scope: [magenta]{escape(reference.context)}[/magenta])"
            )

    total_refs = sum(len(d.references) for _, d in declarations)
    console.print(f"\n[bold yellow]Summary:[/bold yellow] {len(declarations)} variables, {total_refs} references")


def render_lineage(lines: List[str], console: Console, name: str):
    """Print the lineage lines of a single variable."""
    if not lines:
        console.print(f"[yellow]No declaration found for '{escape(name)}'[/yellow]")
        return

    console.print(f"[bold cyan]Lineage of {escape(name)}:[/bold cyan]")
    for line in lines:
        console.print(f"  → {escape(line)}")


def render_graph(graph: nx.DiGraph, console: Console):
    """Print the scope graph as a tree of scopes and their declarations."""
    root_id = scope_node_id(GLOBAL_SCOPE)
    tree = Tree(f"[bold]{GLOBAL_SCOPE}[/bold]")
    _add_scope_branch(graph, root_id, tree)
    console.print("\n[bold blue]Scope Graph[/bold blue]")
    console.print(tree)
    console.print(f"[dim]{graph.number_of_nodes()} nodes, {graph.number_of_edges()} edges[/dim]")


def _branch_sort_key(graph: nx.DiGraph, node_id: str):
    data = graph.nodes[node_id]
    rank = {"scope": 0, "declaration": 1, "reference": 2}[data["kind"]]
    return (rank, data.get("line", 0), data.get("column", 0), data["label"])


def _add_scope_branch(graph: nx.DiGraph, scope_id: str, branch: Tree):
    # Nested scopes, then declarations, then references in source order
    children = sorted(graph.successors(scope_id), key=lambda node_id: _branch_sort_key(graph, node_id))
    for child_id in children:
        kind = graph.edges[scope_id, child_id]['kind']
        data = graph.nodes[child_id]
        if kind == 'contains':
            sub = branch.add(f"[bold]{escape(data['label'])}[/bold]")
            _add_scope_branch(graph, child_id, sub)
        elif kind == 'declares':
            refs = sum(1 for _, _, k in graph.out_edges(child_id, data='kind') if k == 'referenced_by')
            branch.add(
                f"[cyan]{escape(data['label'])}[/cyan] "
                f"[dim](line {data['line']}, {refs} references)[/dim]"
            )
        elif kind == 'references':
            branch.add(f"[dim]ref {escape(data['label'])} at line {data['line']}, column {data['column']}[/dim]")
