"""Tier classification and the relationship calculator.

API:
    calculate_tier(steps_away, kind) -> str
    tier_for_label(text) -> str
    calculate_relationship(graph, you_id, other_id) -> Optional[CalculatedRelationship]
    build_tree_nodes(graph, center_id, names=None) -> List[TreeNode]
"""
from __future__ import annotations
from typing import Dict, List, Optional

from kinship_py.graph import Adjacency, compute_adjacency
from kinship_py.kinship import analyze_relationship
from kinship_py.models import (
    CalculatedRelationship,
    FamilyGraph,
    TreeNode,
    CENTER,
    SUPERIOR,
    INTERMEDIATE,
    DISTANT,
)
from kinship_py.relationship import find_shortest_path

SUPERIOR_KINDS = frozenset({"parent", "child", "sibling", "spouse", "grandparent", "grandchild"})
INTERMEDIATE_KINDS = frozenset({"aunt_uncle", "niece_nephew", "cousin"})
INTERMEDIATE_MAX_STEPS = 3

_SUPERIOR_WORDS = (
    "parent", "father", "mother", "child", "son", "daughter", "sibling", "brother",
    "sister", "spouse", "husband", "wife", "grandparent", "grandfather", "grandmother",
    "grandchild",
)
_INTERMEDIATE_WORDS = ("uncle", "aunt", "nephew", "niece", "cousin")


def calculate_tier(steps_away: int, kind: str) -> str:
    # first cousins fold to 4 steps and land in DISTANT
    if kind in SUPERIOR_KINDS:
        return SUPERIOR
    if steps_away <= INTERMEDIATE_MAX_STEPS and kind in INTERMEDIATE_KINDS:
        return INTERMEDIATE
    return DISTANT


def tier_for_label(text: str) -> str:
    """Classify a free-text relationship word ("Mother", "Aunt (M)") by substring."""
    rel = text.lower()
    if any(w in rel for w in _SUPERIOR_WORDS):
        return SUPERIOR
    if any(w in rel for w in _INTERMEDIATE_WORDS):
        return INTERMEDIATE
    return DISTANT


def calculate_relationship(
    graph: FamilyGraph,
    you_id: str,
    other_id: str,
    adjacency: Optional[Adjacency] = None,
) -> Optional[CalculatedRelationship]:
    """Path-find, analyze and classify in one call.

    Returns None when ``other_id`` cannot be reached from ``you_id``.
    """
    path = find_shortest_path(graph, you_id, other_id, adjacency=adjacency)
    if path is None:
        return None
    analyzed = analyze_relationship(path)
    return CalculatedRelationship(
        kind=analyzed.kind,
        label=analyzed.label,
        steps_away=analyzed.steps_away,
        in_law=analyzed.in_law,
        degree=analyzed.degree,
        removed=analyzed.removed,
        tier=calculate_tier(analyzed.steps_away, analyzed.kind),
        path=path,
    )


def build_tree_nodes(
    graph: FamilyGraph,
    center_id: str,
    names: Optional[Dict[str, str]] = None,
) -> List[TreeNode]:
    """Tag every person reachable from center_id with its tier.

    The center itself is tagged CENTER; unreachable persons are left out.
    Display names default to the person id.
    """
    names = names or {}
    adj = compute_adjacency(graph)
    nodes: List[TreeNode] = []
    for pid in adj:
        if pid == center_id:
            nodes.append(TreeNode(id=pid, name=names.get(pid, pid), tier=CENTER))
            continue
        rel = calculate_relationship(graph, center_id, pid, adjacency=adj)
        if rel is None:
            continue
        nodes.append(TreeNode(id=pid, name=names.get(pid, pid), tier=rel.tier))
    return nodes
