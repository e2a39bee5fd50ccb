import contextlib
import sys
from pathlib import Path


def pytest_configure(config):
    # Ensure repository root is importable (so 'chatfmt' and 'main' work)
    with contextlib.suppress(Exception):
        root = Path(__file__).resolve().parents[1]
        sys.path.insert(0, str(root))
