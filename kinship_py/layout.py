"""Radial tree layout.

API:
    compute_tree_layout(nodes, center_id, width, height, ring_fractions=None)
        -> Dict[str, Position]

The center person sits at the middle of the viewport. Each other tier gets
its own ring whose radius is a fraction of ``min(width, height)``; members
of a ring are spread at equal angles starting from 12 o'clock and going
clockwise (screen coordinates, y grows downward).

Positions are recomputed from scratch on every call. If the center id is
not among the nodes no center position is emitted; rings are still laid
out.
"""
from __future__ import annotations
import math
from typing import Dict, Iterable, List, Mapping, Optional

from kinship_py.models import Position, TreeNode, SUPERIOR, INTERMEDIATE, DISTANT

RING_FRACTIONS: Dict[str, float] = {
    SUPERIOR: 0.25,
    INTERMEDIATE: 0.40,
    DISTANT: 0.52,
}
RING_ORDER = (SUPERIOR, INTERMEDIATE, DISTANT)
START_ANGLE = -math.pi / 2


def validate_ring_fractions(fractions: Mapping[str, float]) -> Dict[str, float]:
    """Return a complete fraction table, raising ValueError unless it grows by tier."""
    merged = dict(RING_FRACTIONS)
    merged.update(fractions)
    values = [merged[t] for t in RING_ORDER]
    if any(v <= 0 for v in values) or any(b <= a for a, b in zip(values, values[1:])):
        raise ValueError(f"ring fractions must be positive and increase by tier: {values}")
    return merged


def _place_ring(positions: Dict[str, Position], members: List[TreeNode], cx: float, cy: float, radius: float) -> None:
    count = len(members)
    if count == 0:
        return
    step = 2 * math.pi / count
    for i, node in enumerate(members):
        angle = START_ANGLE + i * step
        positions[node.id] = Position(
            x=cx + radius * math.cos(angle),
            y=cy + radius * math.sin(angle),
            ring=radius,
        )


def compute_tree_layout(
    nodes: Iterable[TreeNode],
    center_id: str,
    width: float,
    height: float,
    ring_fractions: Optional[Mapping[str, float]] = None,
) -> Dict[str, Position]:
    nodes = list(nodes)
    fractions = validate_ring_fractions(ring_fractions) if ring_fractions else RING_FRACTIONS
    cx = width / 2
    cy = height / 2
    base = min(width, height)

    positions: Dict[str, Position] = {}
    center = next((n for n in nodes if n.id == center_id), None)
    if center is not None:
        positions[center.id] = Position(x=cx, y=cy, ring=0)

    for tier in RING_ORDER:
        members = [n for n in nodes if n.tier == tier]
        _place_ring(positions, members, cx, cy, base * fractions[tier])
    return positions
