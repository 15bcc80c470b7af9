import os
import sys
from pathlib import Path

_KINSHIP_ENV = ("KINSHIP_CONFIG", "KINSHIP_GRAPH_FILE", "KINSHIP_VIEWER_ID", "KINSHIP_TEMPLATES_DIR")
_saved_env = {}


def pytest_configure(config):
    """Clear KINSHIP_* variables for the test session so the app, the CLI and
    any subprocess fall back to the bundled sample family.
    """
    for name in _KINSHIP_ENV:
        if name in os.environ:
            _saved_env[name] = os.environ.pop(name)


def pytest_unconfigure(config):
    os.environ.update(_saved_env)
    _saved_env.clear()


# Ensure repo root is on sys.path so tests can import the package directly
root = Path(__file__).resolve().parent.parent
if str(root) not in sys.path:
    sys.path.insert(0, str(root))
