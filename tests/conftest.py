import os
import sys
from pathlib import Path

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'strata' and tests/ importable for 'helpers'
for p in (SRC_ROOT, TESTS_ROOT):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))

from strata.core.context.env import ENV_PREFIX
from strata.core.utils.paths import PROJECT_ROOT_ENV


@pytest.fixture(autouse=True)
def _isolate_strata_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Tests must be deterministic regardless of developer environment.

    Context overrides and the project root override both change what a stack
    resolves, so clear them for every test.
    """
    monkeypatch.delenv(PROJECT_ROOT_ENV, raising=False)
    for key in list(os.environ):
        if key.startswith(ENV_PREFIX):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def project_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolated project root; the working directory is moved into it."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
