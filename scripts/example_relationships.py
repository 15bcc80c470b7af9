"""Small example script that demonstrates the relationship utilities.

Uses the bundled sample family and prints:
 - the relationship of every person to `me`
 - a shortest path and every alternative geodesic between two persons
 - the radial layout positions for a 600x600 viewport

Run:
    python scripts/example_relationships.py
"""
from pathlib import Path
import sys

# Ensure repo root is on sys.path when running this script directly
repo_root = Path(__file__).resolve().parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from kinship_py.sample import SAMPLE_GRAPH, SAMPLE_NAMES
from kinship_py.relationship import find_shortest_path, all_shortest_paths
from kinship_py.tiers import calculate_relationship, build_tree_nodes
from kinship_py.layout import compute_tree_layout


def main():
    print("Relationships to me:")
    for pid in SAMPLE_GRAPH.nodes:
        rel = calculate_relationship(SAMPLE_GRAPH, "me", pid)
        if rel is None:
            print(f"  {pid:<14} (no known relationship)")
            continue
        print(f"  {pid:<14} {rel.label:<32} {rel.tier:<13} steps={rel.steps_away}")

    print("\nShortest path cousin1 -> cousin2:")
    path = find_shortest_path(SAMPLE_GRAPH, "cousin1", "cousin2")
    print("  " + " -> ".join(path.nodes))
    print("  " + " -> ".join(path.edges))
    print(f"  geodesics: {len(all_shortest_paths(SAMPLE_GRAPH, 'cousin1', 'cousin2'))}")

    print("\nLayout (600x600):")
    nodes = build_tree_nodes(SAMPLE_GRAPH, "me", names=SAMPLE_NAMES)
    for pid, pos in compute_tree_layout(nodes, "me", 600, 600).items():
        print(f"  {pid:<14} ({pos.x:7.2f}, {pos.y:7.2f}) ring={pos.ring:.1f}")


if __name__ == "__main__":
    main()
