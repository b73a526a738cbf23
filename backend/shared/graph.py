"""
Graph utilities over the dependency layout's node ids.
Used for the circular dependency report; the layout itself does not need it.
"""

from typing import List

import networkx as nx

from layout.dependency_layout import DependencyLayout


def build_relation_graph(layout: DependencyLayout) -> nx.MultiDiGraph:
    """One node per node id, one edge per relation (parallel edges kept)."""
    G = nx.MultiDiGraph()
    for rel in layout.relations:
        G.add_node(rel.source_node_id)
        G.add_node(rel.target_node_id)
        G.add_edge(
            rel.source_node_id,
            rel.target_node_id,
            source_anchor=rel.source_anchor,
            target_anchor=rel.target_anchor,
        )
    return G


def find_circular_dependencies(layout: DependencyLayout) -> List[List[str]]:
    """
    Groups of grid cells that depend on each other in a loop: strongly
    connected components with more than one cell, or a single cell with a
    self loop. Each group is sorted by node id; the list is sorted.
    """
    G = nx.DiGraph(build_relation_graph(layout))
    if G.number_of_edges() == 0 or nx.is_directed_acyclic_graph(G):
        return []
    groups = []
    for component in nx.strongly_connected_components(G):
        if len(component) > 1 or any(G.has_edge(n, n) for n in component):
            groups.append(sorted(component))
    return sorted(groups)
