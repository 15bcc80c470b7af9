"""Relationship graph traversal utilities.

Provides one shortest path and all shortest paths between two persons in
a family graph. Edges considered: parent <-> child, sibling <-> sibling
and spouse <-> spouse. Direction never restricts traversal and every
edge has weight 1.

API:
    find_shortest_path(graph, source, target, adjacency=None) -> Optional[GraphPath]
    all_shortest_paths(graph, source, target, max_paths=100, adjacency=None) -> List[GraphPath]

When several shortest paths exist, ``find_shortest_path`` returns the one
discovered first, which depends on the order edges were declared in the
graph. That choice is deterministic but not canonical; use
``all_shortest_paths`` to see the alternatives.

Callers running many queries against one graph can build the adjacency
once with ``compute_adjacency`` and pass it in.
"""
from __future__ import annotations
from collections import deque, defaultdict
from typing import Dict, List, Optional, Tuple
import logging

from kinship_py.graph import Adjacency, compute_adjacency
from kinship_py.models import FamilyGraph, GraphPath

logger = logging.getLogger(__name__)


def find_shortest_path(
    graph: FamilyGraph,
    source: str,
    target: str,
    adjacency: Optional[Adjacency] = None,
) -> Optional[GraphPath]:
    """Return one shortest path from source to target, or None.

    A person to themselves is the trivial path ``[source]`` with no edges.
    """
    if source == target:
        return GraphPath(nodes=[source], edges=[])
    adj = adjacency if adjacency is not None else compute_adjacency(graph)

    # predecessor map: node -> (previous node, relation used to step in)
    prev: Dict[str, Tuple[str, str]] = {}
    visited = {source}
    q = deque([source])

    while q:
        cur = q.popleft()
        for nb, rel in adj.get(cur, []):
            if nb in visited:
                continue
            visited.add(nb)
            prev[nb] = (cur, rel)
            if nb == target:
                return _walk_back(prev, source, target)
            q.append(nb)

    logger.debug("no path from %s to %s (%d nodes visited)", source, target, len(visited))
    return None


def _walk_back(prev: Dict[str, Tuple[str, str]], source: str, target: str) -> GraphPath:
    nodes: List[str] = [target]
    edges: List[str] = []
    node = target
    while node != source:
        p, rel = prev[node]
        edges.append(rel)
        nodes.append(p)
        node = p
    nodes.reverse()
    edges.reverse()
    return GraphPath(nodes=nodes, edges=edges)


def all_shortest_paths(
    graph: FamilyGraph,
    source: str,
    target: str,
    max_paths: int = 100,
    adjacency: Optional[Adjacency] = None,
) -> List[GraphPath]:
    """Return all shortest paths (up to max_paths) between source and target.

    We run a level BFS that records every predecessor reaching a node at
    its shortest distance, stop once the target's level is done, then
    backtrack from the target to enumerate the paths.
    """
    if source == target:
        return [GraphPath(nodes=[source], edges=[])]
    adj = adjacency if adjacency is not None else compute_adjacency(graph)

    levels: Dict[str, int] = {source: 0}
    # node -> ordered, distinct (predecessor, relation) pairs; parallel edges of
    # the same kind collapse into one entry, different kinds stay separate
    preds: Dict[str, List[Tuple[str, str]]] = defaultdict(list)
    q = deque([source])
    found_level: Optional[int] = None

    while q:
        cur = q.popleft()
        cur_level = levels[cur]
        if found_level is not None and cur_level >= found_level:
            continue
        for nb, rel in adj.get(cur, []):
            if nb not in levels:
                levels[nb] = cur_level + 1
                preds[nb].append((cur, rel))
                if nb == target:
                    found_level = cur_level + 1
                else:
                    q.append(nb)
            elif levels[nb] == cur_level + 1 and (cur, rel) not in preds[nb]:
                preds[nb].append((cur, rel))

    if target not in preds:
        return []

    # backtrack from target, first-recorded predecessor first, so the first
    # path produced is the one find_shortest_path returns
    paths: List[GraphPath] = []
    stack: List[Tuple[str, List[str], List[str]]] = [(target, [target], [])]
    while stack and len(paths) < max_paths:
        node, rnodes, redges = stack.pop()
        if node == source:
            paths.append(GraphPath(nodes=reversed(rnodes), edges=reversed(redges)))
            continue
        for p, rel in reversed(preds[node]):
            stack.append((p, rnodes + [p], redges + [rel]))
    return paths
