"""Pytest configuration.

Sources live in a flat `src/` namespace. When the project is not installed (`pip install -e .`),
put the repository root on `sys.path` so `import src...` resolves.
"""

from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))
