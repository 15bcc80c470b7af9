"""JSON file helpers for family graphs and layout trees.

Graph files hold ``{"nodes": [...], "edges": [...]}`` in the shape of
``FamilyGraph.to_dict``. Tree files hold ``{"nodes": [...], "links": [...]}``
with TreeNode / TreeLink dicts. Writes go through a temp file in the same
directory and an atomic rename.
"""
from __future__ import annotations
from pathlib import Path
import json
import os
import tempfile
from typing import List, Tuple

from kinship_py.models import FamilyGraph, TreeLink, TreeNode


def atomic_write_text(path: Path, text: str, encoding: str = "utf-8") -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp = tempfile.mkstemp(dir=str(path.parent))
    try:
        with os.fdopen(fd, "w", encoding=encoding) as f:
            f.write(text)
        os.replace(tmp, str(path))
    finally:
        if Path(tmp).exists():
            Path(tmp).unlink()


def load_graph(path: Path) -> FamilyGraph:
    """Read a graph file. Missing files raise FileNotFoundError."""
    with Path(path).open("r", encoding="utf-8") as f:
        return FamilyGraph.from_dict(json.load(f))


def save_graph(path: Path, graph: FamilyGraph) -> None:
    atomic_write_text(path, json.dumps(graph.to_dict(), ensure_ascii=False, indent=2))


def load_tree(path: Path) -> Tuple[List[TreeNode], List[TreeLink]]:
    with Path(path).open("r", encoding="utf-8") as f:
        data = json.load(f)
    nodes = [TreeNode.from_dict(n) for n in data.get("nodes", [])]
    links = [TreeLink.from_dict(link) for link in data.get("links", [])]
    return nodes, links
