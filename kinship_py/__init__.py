"""kinship_py: family relationship inference.

Shortest-path search over a typed family graph, kinship labels for the
resulting path, UI tiers and a radial tree layout.
"""
from kinship_py.models import (
    ParentChild,
    Sibling,
    Spouse,
    FamilyGraph,
    GraphPath,
    AnalyzedRelationship,
    TreeNode,
    TreeLink,
    Position,
)
from kinship_py.graph import compute_adjacency
from kinship_py.relationship import find_shortest_path, all_shortest_paths
from kinship_py.kinship import analyze_relationship
from kinship_py.tiers import calculate_tier, calculate_relationship
from kinship_py.layout import compute_tree_layout

__all__ = [
    "ParentChild",
    "Sibling",
    "Spouse",
    "FamilyGraph",
    "GraphPath",
    "AnalyzedRelationship",
    "TreeNode",
    "TreeLink",
    "Position",
    "compute_adjacency",
    "find_shortest_path",
    "all_shortest_paths",
    "analyze_relationship",
    "calculate_tier",
    "calculate_relationship",
    "compute_tree_layout",
]
