import sys
from pathlib import Path

import pytest

# Make the src layout importable without installing the package
SRC_DIR = Path(__file__).resolve().parent / "src"
if SRC_DIR.exists() and str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))


@pytest.fixture(autouse=True)
def _default_listener_errors(monkeypatch):
    """Run every test with listener failures isolated, whatever the environment says."""
    import pysetting.config

    monkeypatch.setattr(pysetting.config, "listener_errors", "isolate")
