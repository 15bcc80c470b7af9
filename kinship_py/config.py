"""Simple configuration loader for kinship_py.

Behavior:
- Load defaults.
- If environment variable `KINSHIP_CONFIG` is set, load that JSON file and merge.
- Environment variables override file values (variables: KINSHIP_GRAPH_FILE,
  KINSHIP_VIEWER_ID, KINSHIP_TEMPLATES_DIR).

Ring fractions are validated on load; a table that does not grow by tier
raises ValueError.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
import os
import json
import logging
from typing import Dict, Optional

from kinship_py.layout import RING_FRACTIONS, validate_ring_fractions

logger = logging.getLogger(__name__)

PACKAGE_TEMPLATES = Path(__file__).resolve().parent / "web" / "templates"


@dataclass
class Config:
    graph_file: Optional[Path] = None
    viewer_id: str = "me"
    templates_dir: Path = PACKAGE_TEMPLATES
    ring_fractions: Dict[str, float] = field(default_factory=lambda: dict(RING_FRACTIONS))


def _load_json_file(path: Path) -> Optional[dict]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError):
        logger.warning("could not read config file %s", path)
        return None


def load_config(config_path: Optional[str] = None) -> Config:
    """Load configuration from (1) defaults, (2) JSON file, (3) env vars.

    :param config_path: optional path to a JSON config file. If not provided
                        will use environment variable `KINSHIP_CONFIG` if set.
    """
    cfg = Config()

    cp = config_path or os.environ.get("KINSHIP_CONFIG")
    if cp:
        data = _load_json_file(Path(cp))
        if isinstance(data, dict):
            if data.get("graph_file"):
                cfg.graph_file = Path(data["graph_file"])
            if data.get("viewer_id"):
                cfg.viewer_id = str(data["viewer_id"])
            if data.get("templates_dir"):
                cfg.templates_dir = Path(data["templates_dir"])
            if isinstance(data.get("ring_fractions"), dict):
                cfg.ring_fractions = validate_ring_fractions(
                    {k.upper(): float(v) for k, v in data["ring_fractions"].items()}
                )

    # an explicit config_path is authoritative; env vars only apply otherwise
    if config_path is None:
        if os.environ.get("KINSHIP_GRAPH_FILE"):
            cfg.graph_file = Path(os.environ["KINSHIP_GRAPH_FILE"])
        if os.environ.get("KINSHIP_VIEWER_ID"):
            cfg.viewer_id = os.environ["KINSHIP_VIEWER_ID"]
        if os.environ.get("KINSHIP_TEMPLATES_DIR"):
            cfg.templates_dir = Path(os.environ["KINSHIP_TEMPLATES_DIR"])

    return cfg
