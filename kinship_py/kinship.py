"""Kinship label helpers.

APIs:
    analyze_relationship(path) -> AnalyzedRelationship
    degree_name(d) -> str
    removed_name(r) -> str
    relationship_pair(word) -> (forward, reverse)

The path's relation sequence is folded into ``up`` (parent hops), ``down``
(child hops), ``has_sibling`` and ``in_law`` (any spouse hop). A sibling
hop counts as one step up to the shared parent and one step down, and a
spouse hop adds no distance. ``steps_away`` is ``up + down``.

The decision table below is evaluated in order and the first match wins.
Shapes it does not recognise degrade to "Your Distant Relative"; no path
ever raises.
"""
from __future__ import annotations
from typing import Tuple

from kinship_py.models import AnalyzedRelationship, GraphPath, PARENT, CHILD, SIBLING, SPOUSE

IN_LAW_SUFFIX = " (In-Law)"

_DEGREE_NAMES = {1: "First", 2: "Second", 3: "Third"}
_REMOVED_NAMES = {0: "", 1: " Once Removed", 2: " Twice Removed"}

# reciprocal labels for relationship words picked by users
_PAIRS = {
    "father": ("father", "child"),
    "mother": ("mother", "child"),
    "son": ("son", "parent"),
    "daughter": ("daughter", "parent"),
    "brother": ("brother", "sibling"),
    "sister": ("sister", "sibling"),
    "husband": ("husband", "wife"),
    "wife": ("wife", "husband"),
    "grandfather": ("grandfather", "grandchild"),
    "grandmother": ("grandmother", "grandchild"),
    "uncle": ("uncle", "nephew/niece"),
    "aunt": ("aunt", "nephew/niece"),
    "cousin": ("cousin", "cousin"),
}


def degree_name(d: int) -> str:
    return _DEGREE_NAMES.get(d, f"{d}th")


def removed_name(r: int) -> str:
    return _REMOVED_NAMES.get(r, f" {r} Times Removed")


def _with_suffix(base: str, in_law: bool) -> str:
    return base + IN_LAW_SUFFIX if in_law else base


def _fold(edges) -> Tuple[int, int, bool, bool]:
    up = down = 0
    has_sibling = in_law = False
    for rel in edges:
        if rel == PARENT:
            up += 1
        elif rel == CHILD:
            down += 1
        elif rel == SIBLING:
            has_sibling = True
            up += 1
            down += 1
        elif rel == SPOUSE:
            in_law = True
    return up, down, has_sibling, in_law


def analyze_relationship(path: GraphPath) -> AnalyzedRelationship:
    """Translate a path's relation sequence into a labelled relationship."""
    up, down, has_sibling, in_law = _fold(path.edges)
    steps_away = up + down

    if not path.edges:
        return AnalyzedRelationship(kind="self", label="You", steps_away=0, in_law=False)

    if len(path.edges) == 1:
        rel = path.edges[0]
        if rel == PARENT:
            return AnalyzedRelationship("parent", _with_suffix("Your Parent", in_law), 1, in_law)
        if rel == CHILD:
            return AnalyzedRelationship("child", _with_suffix("Your Child", in_law), 1, in_law)
        if rel == SIBLING:
            return AnalyzedRelationship("sibling", _with_suffix("Your Sibling", in_law), 2, in_law)
        if rel == SPOUSE:
            return AnalyzedRelationship("spouse", "Your Spouse", 0, in_law)

    if up == 2 and down == 0:
        return AnalyzedRelationship("grandparent", "Your Grandparent", 2, in_law)
    if up == 0 and down == 2:
        return AnalyzedRelationship("grandchild", "Your Grandchild", 2, in_law)

    # sibling reached through a shared parent
    if up == 1 and down == 1 and has_sibling:
        return AnalyzedRelationship("sibling", _with_suffix("Your Sibling", in_law), 2, in_law)

    # parent -> sibling
    if has_sibling and up == 2 and down == 1:
        return AnalyzedRelationship("aunt_uncle", _with_suffix("Your Aunt/Uncle", in_law), 3, in_law)
    # sibling -> child
    if has_sibling and up == 1 and down == 2:
        return AnalyzedRelationship("niece_nephew", _with_suffix("Your Niece/Nephew", in_law), 3, in_law)

    # through a spouse
    if in_law and up == 1 and down == 0:
        return AnalyzedRelationship("parent", "Your Parent-in-law", 1, in_law)
    if in_law and up == 0 and down == 1:
        return AnalyzedRelationship("child", "Your Child-in-law", 1, in_law)

    if up >= 1 and down >= 1:
        degree = max(1, min(up, down) - 1)
        removed = abs(up - down)
        label = _with_suffix(f"Your {degree_name(degree)} Cousin{removed_name(removed)}", in_law)
        return AnalyzedRelationship("cousin", label, steps_away, in_law, degree=degree, removed=removed)

    # fallbacks
    if up == 1 and down == 0:
        return AnalyzedRelationship("parent", _with_suffix("Your Parent", in_law), 1, in_law)
    if up == 0 and down == 1:
        return AnalyzedRelationship("child", _with_suffix("Your Child", in_law), 1, in_law)

    return AnalyzedRelationship("cousin", _with_suffix("Your Distant Relative", in_law), steps_away, in_law)


def relationship_pair(word: str) -> Tuple[str, str]:
    """Return (forward, reverse) labels for a relationship word.

    The forward label describes the first person to the second and the
    reverse label the second to the first, so ``"Father"`` gives
    ``("father", "child")``. Unknown words map to ``(word, "relative")``.
    """
    return _PAIRS.get(word.lower(), (word, "relative"))
