import json
from pathlib import Path

import pytest
from kinship_py.config import load_config, PACKAGE_TEMPLATES


def test_defaults():
    cfg = load_config(None)
    assert cfg.graph_file is None
    assert cfg.viewer_id == "me"
    assert cfg.templates_dir == PACKAGE_TEMPLATES
    assert cfg.ring_fractions["DISTANT"] == 0.52


def test_load_config_from_file(tmp_path):
    cfgfile = tmp_path / "cfg.json"
    data = {
        "graph_file": "family.json",
        "viewer_id": "alice",
        "templates_dir": "tpl",
        "ring_fractions": {"superior": 0.2, "intermediate": 0.3, "distant": 0.45},
    }
    cfgfile.write_text(json.dumps(data))
    cfg = load_config(str(cfgfile))
    assert cfg.graph_file == Path("family.json")
    assert cfg.viewer_id == "alice"
    assert cfg.templates_dir == Path("tpl")
    assert cfg.ring_fractions == {"SUPERIOR": 0.2, "INTERMEDIATE": 0.3, "DISTANT": 0.45}


def test_explicit_file_wins_over_env(tmp_path, monkeypatch):
    cfgfile = tmp_path / "cfg.json"
    cfgfile.write_text(json.dumps({"viewer_id": "alice"}))
    monkeypatch.setenv("KINSHIP_VIEWER_ID", "bob")
    assert load_config(str(cfgfile)).viewer_id == "alice"


def test_env_overrides(tmp_path, monkeypatch):
    cfgfile = tmp_path / "cfg.json"
    cfgfile.write_text(json.dumps({"viewer_id": "alice"}))
    monkeypatch.setenv("KINSHIP_CONFIG", str(cfgfile))
    monkeypatch.setenv("KINSHIP_GRAPH_FILE", "envgraph.json")
    monkeypatch.setenv("KINSHIP_VIEWER_ID", "bob")
    monkeypatch.setenv("KINSHIP_TEMPLATES_DIR", "envtpl")
    cfg = load_config(None)
    assert cfg.graph_file == Path("envgraph.json")
    assert cfg.viewer_id == "bob"
    assert cfg.templates_dir == Path("envtpl")


def test_unreadable_file_keeps_defaults(tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text("{not json")
    cfg = load_config(str(bad))
    assert cfg.viewer_id == "me"
    assert load_config(str(tmp_path / "missing.json")).graph_file is None


def test_bad_ring_fractions_rejected(tmp_path):
    cfgfile = tmp_path / "cfg.json"
    cfgfile.write_text(json.dumps({"ring_fractions": {"SUPERIOR": 0.6}}))
    with pytest.raises(ValueError):
        load_config(str(cfgfile))
