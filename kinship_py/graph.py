"""Adjacency construction for a family graph.

API:
    compute_adjacency(graph) -> Dict[str, List[Tuple[str, str]]]

Each entry maps a person id to ``(neighbor_id, relation)`` pairs where
``relation`` is the edge kind as seen from that person: a parent_child
edge gives the parent a ``child`` neighbor and the child a ``parent``
neighbor; sibling and spouse edges are symmetric.

Ids referenced only by edges are added to the mapping. Parallel edges are
kept as separate entries, in declaration order.
"""
from __future__ import annotations
from typing import Dict, List, Tuple

from kinship_py.models import FamilyGraph, PARENT, CHILD, SIBLING, SPOUSE

Adjacency = Dict[str, List[Tuple[str, str]]]


def compute_adjacency(graph: FamilyGraph) -> Adjacency:
    adj: Adjacency = {pid: [] for pid in graph.nodes}

    def ensure(pid: str) -> List[Tuple[str, str]]:
        # dangling edge endpoints get an entry too
        return adj.setdefault(pid, [])

    for edge in graph.edges:
        if edge.kind == "parent_child":
            ensure(edge.parent).append((edge.child, CHILD))
            ensure(edge.child).append((edge.parent, PARENT))
        elif edge.kind == "sibling":
            ensure(edge.a).append((edge.b, SIBLING))
            ensure(edge.b).append((edge.a, SIBLING))
        elif edge.kind == "spouse":
            ensure(edge.a).append((edge.b, SPOUSE))
            ensure(edge.b).append((edge.a, SPOUSE))
    return adj
