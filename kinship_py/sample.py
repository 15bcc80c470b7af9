"""Sample family used by the demo script, the debug app and the tests.

``me`` has two parents, a spouse, two children and two siblings. The
mother's sister ``aunt_m`` has a child ``cousin2``; the father's brother
``uncle_f`` has a child ``cousin1``; ``g_aunt`` is declared as a sibling
of the mother. ``second_cousin`` is listed as a node but has no edges.
"""
from __future__ import annotations

from kinship_py.models import (
    FamilyGraph,
    ParentChild,
    Sibling,
    Spouse,
    TreeNode,
    CENTER,
    SUPERIOR,
    INTERMEDIATE,
    DISTANT,
)

SAMPLE_EDGES = [
    ParentChild(parent="mother", child="me"),
    ParentChild(parent="father", child="me"),
    Spouse(a="me", b="spouse"),
    ParentChild(parent="me", child="child1"),
    ParentChild(parent="me", child="child2"),
    Sibling(a="me", b="sibling1"),
    Sibling(a="me", b="sibling2"),
    Sibling(a="mother", b="aunt_m"),
    ParentChild(parent="aunt_m", child="cousin2"),
    Sibling(a="father", b="uncle_f"),
    ParentChild(parent="uncle_f", child="cousin1"),
    Sibling(a="g_aunt", b="mother"),
]

SAMPLE_GRAPH = FamilyGraph(
    nodes=[
        "me",
        "mother",
        "father",
        "spouse",
        "child1",
        "child2",
        "sibling1",
        "sibling2",
        "aunt_m",
        "uncle_f",
        "cousin1",
        "cousin2",
        "g_aunt",
        "second_cousin",
    ],
    edges=SAMPLE_EDGES,
)

SAMPLE_NAMES = {
    "me": "You",
    "mother": "Mother",
    "father": "Father",
    "spouse": "Spouse",
    "child1": "Daughter",
    "child2": "Son",
    "sibling1": "Sister",
    "sibling2": "Brother",
    "aunt_m": "Aunt (M)",
    "uncle_f": "Uncle (F)",
    "cousin1": "Cousin",
    "cousin2": "Cousin",
    "g_aunt": "Great Aunt",
    "second_cousin": "2nd Cousin",
}

# hand-tagged tiers as shown in the tree view
SAMPLE_TREE_NODES = [
    TreeNode(id="me", name="You", tier=CENTER),
    TreeNode(id="mother", name="Mother", tier=SUPERIOR),
    TreeNode(id="father", name="Father", tier=SUPERIOR),
    TreeNode(id="spouse", name="Spouse", tier=SUPERIOR),
    TreeNode(id="child1", name="Daughter", tier=SUPERIOR),
    TreeNode(id="child2", name="Son", tier=SUPERIOR),
    TreeNode(id="sibling1", name="Sister", tier=SUPERIOR),
    TreeNode(id="sibling2", name="Brother", tier=SUPERIOR),
    TreeNode(id="aunt_m", name="Aunt (M)", tier=INTERMEDIATE),
    TreeNode(id="uncle_f", name="Uncle (F)", tier=INTERMEDIATE),
    TreeNode(id="cousin1", name="Cousin", tier=INTERMEDIATE),
    TreeNode(id="cousin2", name="Cousin", tier=INTERMEDIATE),
    TreeNode(id="g_aunt", name="Great Aunt", tier=DISTANT),
    TreeNode(id="second_cousin", name="2nd Cousin", tier=DISTANT),
]
