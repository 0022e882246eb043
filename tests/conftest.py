import os
import sys
from pathlib import Path

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'hostbridge'
for p in (SRC_ROOT, TESTS_ROOT):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))


from hostbridge.core.runtime import RuntimeContext
from hostbridge.script import init_utils
from helpers.cache_utils import reset_hostbridge_caches
from helpers.recording import RecordingPublisher
from helpers.sandbox import build_sandbox


@pytest.fixture(autouse=True)
def _reset_caches_and_env(monkeypatch):
    """Ensure config caches are fresh and no HOSTBRIDGE_* override leaks in."""
    for key in list(os.environ):
        if key.startswith("HOSTBRIDGE_"):
            monkeypatch.delenv(key, raising=False)
    reset_hostbridge_caches()
    yield
    reset_hostbridge_caches()


@pytest.fixture
def sandbox(tmp_path) -> Path:
    """Workspace laid out like the reference sandbox (see helpers.sandbox)."""
    return build_sandbox(tmp_path / "sandbox-01")


@pytest.fixture
def publisher() -> RecordingPublisher:
    return RecordingPublisher()


@pytest.fixture
def runtime_ctx(sandbox, publisher) -> RuntimeContext:
    return RuntimeContext.for_workspace(sandbox, publisher=publisher)


@pytest.fixture
def utils(runtime_ctx):
    """The script-facing ``utils`` namespace bound to the sandbox workspace."""
    return init_utils(runtime_ctx)
