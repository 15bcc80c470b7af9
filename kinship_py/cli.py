"""Command line access to the relationship engine.

    kinship-cli relationship OTHER [--you ID]
    kinship-cli path OTHER [--you ID] [--all]
    kinship-cli layout [--center ID] [--width W] [--height H] [--tree FILE]
    kinship-cli members [--you ID]

The graph comes from ``--graph``, else the configured graph file, else the
sample family.
"""
from __future__ import annotations
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from kinship_py.config import load_config
from kinship_py.graph import compute_adjacency
from kinship_py.graph_io import load_graph, load_tree
from kinship_py.layout import compute_tree_layout
from kinship_py.relationship import all_shortest_paths, find_shortest_path
from kinship_py.sample import SAMPLE_GRAPH, SAMPLE_NAMES
from kinship_py.tiers import build_tree_nodes, calculate_relationship

logger = logging.getLogger("kinship_py.cli")


def _print(args, obj, text: str) -> None:
    if args.json:
        print(json.dumps(obj, indent=2))
    else:
        print(text)


def cmd_relationship(graph, cfg, args) -> int:
    you = args.you or cfg.viewer_id
    result = calculate_relationship(graph, you, args.other)
    if result is None:
        print(f"No known relationship between {you} and {args.other}", file=sys.stderr)
        return 1
    lines = [
        f"Label: {result.label}",
        f"Kind: {result.kind}",
        f"Tier: {result.tier}",
        f"Steps Away: {result.steps_away}",
        f"In-Law: {'Yes' if result.in_law else 'No'}",
    ]
    if result.degree is not None:
        lines.append(f"Degree: {result.degree}")
        lines.append(f"Removed: {result.removed}")
    lines.append("Path: " + " -> ".join(result.path.nodes))
    _print(args, result.to_dict(), "\n".join(lines))
    return 0


def cmd_path(graph, cfg, args) -> int:
    you = args.you or cfg.viewer_id
    if args.all:
        paths = all_shortest_paths(graph, you, args.other)
    else:
        path = find_shortest_path(graph, you, args.other)
        paths = [path] if path is not None else []
    if not paths:
        print(f"No path between {you} and {args.other}", file=sys.stderr)
        return 1
    text = "\n".join(
        " -> ".join(p.nodes) + "  [" + ", ".join(p.edges) + "]" for p in paths
    )
    _print(args, [p.to_dict() for p in paths], text)
    return 0


def cmd_layout(graph, cfg, args) -> int:
    center = args.center or cfg.viewer_id
    if args.tree:
        # pre-tagged tiers; links only matter to renderers
        try:
            nodes, _links = load_tree(args.tree)
        except (OSError, ValueError, KeyError) as e:
            logger.error("could not load tree %s: %s", args.tree, e)
            return 2
    else:
        names = SAMPLE_NAMES if graph is SAMPLE_GRAPH else {}
        nodes = build_tree_nodes(graph, center, names=names)
    positions = compute_tree_layout(nodes, center, args.width, args.height, ring_fractions=cfg.ring_fractions)
    text = "\n".join(
        f"{pid:<16} x={pos.x:8.2f} y={pos.y:8.2f} ring={pos.ring:.2f}" for pid, pos in positions.items()
    )
    _print(args, {pid: pos.to_dict() for pid, pos in positions.items()}, text)
    return 0


def cmd_members(graph, cfg, args) -> int:
    you = args.you or cfg.viewer_id
    adj = compute_adjacency(graph)
    rows = []
    for pid in adj:
        if pid == you:
            continue
        rel = calculate_relationship(graph, you, pid, adjacency=adj)
        if rel is not None:
            rows.append({"id": pid, "label": rel.label, "tier": rel.tier})
    text = "\n".join(f"{r['tier']:<13} {r['id']:<16} {r['label']}" for r in rows) or "No relatives found."
    _print(args, rows, text)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="kinship-cli", description="Family relationship calculator")
    parser.add_argument("--graph", type=Path, default=None, help="JSON graph file")
    parser.add_argument("--config", default=None, help="JSON config file")
    parser.add_argument("--json", action="store_true", help="Print JSON output")
    subparsers = parser.add_subparsers(dest="command")

    p_rel = subparsers.add_parser("relationship", help="Label the relationship to another person")
    p_rel.add_argument("other")
    p_rel.add_argument("--you", default=None)
    p_rel.set_defaults(func=cmd_relationship)

    p_path = subparsers.add_parser("path", help="Show the shortest path to another person")
    p_path.add_argument("other")
    p_path.add_argument("--you", default=None)
    p_path.add_argument("--all", action="store_true", help="List every shortest path")
    p_path.set_defaults(func=cmd_path)

    p_layout = subparsers.add_parser("layout", help="Compute radial tree positions")
    p_layout.add_argument("--center", default=None)
    p_layout.add_argument("--width", type=float, default=800.0)
    p_layout.add_argument("--height", type=float, default=800.0)
    p_layout.add_argument("--tree", type=Path, default=None, help="JSON tree file with pre-tagged tiers")
    p_layout.set_defaults(func=cmd_layout)

    p_members = subparsers.add_parser("members", help="List every reachable relative")
    p_members.add_argument("--you", default=None)
    p_members.set_defaults(func=cmd_members)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(level=logging.WARNING)
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return 0
    try:
        cfg = load_config(args.config)
    except ValueError as e:
        print(f"Invalid config: {e}", file=sys.stderr)
        return 2
    graph_file = args.graph or cfg.graph_file
    try:
        graph = load_graph(graph_file) if graph_file else SAMPLE_GRAPH
    except (OSError, ValueError, KeyError) as e:
        logger.error("could not load graph %s: %s", graph_file, e)
        return 2
    return args.func(graph, cfg, args)


if __name__ == "__main__":
    sys.exit(main())
