"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- Paths to the example documents under ``tests/examples``.
- Container registry isolation so tests registering custom adapters do not leak.
"""

import sys
import pytest
from pathlib import Path

# Add src to path so we can import 'strip_ts' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

import strip_ts.containers  # noqa: E402
from strip_ts.containers.base import _CONTAINER_REGISTRY  # noqa: E402

EXAMPLES_DIR = Path(__file__).parent / "examples"


@pytest.fixture
def examples_dir() -> Path:
  """Directory holding typed inputs and their expected untyped outputs."""
  return EXAMPLES_DIR


@pytest.fixture
def read_example():
  """Returns a reader for files under ``tests/examples``."""

  def _read(name: str) -> str:
    return (EXAMPLES_DIR / name).read_text(encoding="utf-8")

  return _read


@pytest.fixture(autouse=True)
def isolate_container_registry():
  """
  Ensures that modifications to the container adapter registry
  (adding custom containers for tests) do not leak between tests.
  """
  original_registry = _CONTAINER_REGISTRY.copy()
  yield
  _CONTAINER_REGISTRY.clear()
  _CONTAINER_REGISTRY.update(original_registry)
