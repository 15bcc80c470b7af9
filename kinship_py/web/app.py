from fastapi import FastAPI, Request, HTTPException
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from typing import Dict, Optional
import logging

from ..config import load_config
from ..graph import Adjacency, compute_adjacency
from ..graph_io import load_graph
from ..layout import compute_tree_layout
from ..models import FamilyGraph
from ..relationship import all_shortest_paths, find_shortest_path
from ..sample import SAMPLE_GRAPH, SAMPLE_NAMES
from ..tiers import build_tree_nodes, calculate_relationship

app = FastAPI(title="kinship-py")

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

cfg = load_config()
templates = Jinja2Templates(directory=str(cfg.templates_dir))


def current_graph() -> FamilyGraph:
    """Graph served by the app: the configured graph file, else the sample family.

    Read on every request so edits to the file show up without a restart.
    """
    if cfg.graph_file is not None:
        return load_graph(cfg.graph_file)
    return SAMPLE_GRAPH


def display_names() -> Dict[str, str]:
    return SAMPLE_NAMES if cfg.graph_file is None else {}


def _require_person(adj: Adjacency, pid: str) -> None:
    # ids referenced only by edges count as people too
    if pid not in adj:
        raise HTTPException(status_code=404, detail=f"unknown person {pid}")


@app.get("/", response_class=HTMLResponse)
def rel_debug(request: Request, you: Optional[str] = None, other: Optional[str] = None):
    graph = current_graph()
    you = you or cfg.viewer_id
    adj = compute_adjacency(graph)
    others = [n for n in adj if n != you]
    result = None
    if other:
        result = calculate_relationship(graph, you, other, adjacency=adj)
        logger.info("rel_debug %s -> %s: %s", you, other, result.label if result else "no path")
    return templates.TemplateResponse(
        request,
        "rel_debug.html",
        {"you": you, "others": others, "selected": other, "result": result},
    )


@app.get("/api/relationship")
def api_relationship(other: str, you: Optional[str] = None):
    graph = current_graph()
    you = you or cfg.viewer_id
    adj = compute_adjacency(graph)
    _require_person(adj, you)
    _require_person(adj, other)
    result = calculate_relationship(graph, you, other, adjacency=adj)
    if result is None:
        raise HTTPException(status_code=404, detail=f"no relationship between {you} and {other}")
    return result.to_dict()


@app.get("/api/path")
def api_path(other: str, you: Optional[str] = None, max_paths: int = 20):
    graph = current_graph()
    you = you or cfg.viewer_id
    path = find_shortest_path(graph, you, other)
    if path is None:
        raise HTTPException(status_code=404, detail=f"no path between {you} and {other}")
    alternatives = all_shortest_paths(graph, you, other, max_paths=max_paths)
    return {
        "path": path.to_dict(),
        "all_shortest": [p.to_dict() for p in alternatives],
        # more than one geodesic means the label depends on edge order
        "canonical": len(alternatives) == 1,
    }


@app.get("/api/layout")
def api_layout(width: float = 800, height: float = 800, center: Optional[str] = None):
    if width <= 0 or height <= 0:
        raise HTTPException(status_code=400, detail="width and height must be positive")
    graph = current_graph()
    center = center or cfg.viewer_id
    nodes = build_tree_nodes(graph, center, names=display_names())
    positions = compute_tree_layout(nodes, center, width, height, ring_fractions=cfg.ring_fractions)
    return {
        "nodes": [n.to_dict() for n in nodes],
        "positions": {pid: pos.to_dict() for pid, pos in positions.items()},
    }
