"""
Container Adapters Package.

Automatically discovers and registers container adapters by scanning this
directory for modules. Each adapter module registers itself with
``@register_container`` on import.

This module exposes the registry helpers (`get_container_adapter`,
`available_containers`).
"""

import importlib
import logging
import pkgutil
from pathlib import Path
from typing import List

from strip_ts.containers.base import (
  _CONTAINER_REGISTRY,
  ContainerAdapter,
  ScriptSection,
  get_container_adapter,
  register_container,
  strip_dialect_marker,
)

# Infrastructure modules, not adapters.
_EXCLUDED_MODULES = {"base", "__init__"}


def _auto_register_adapters() -> None:
  """
  Imports every adapter module in this package, triggering registration.
  """
  pkg_path = str(Path(__file__).parent)

  for _, module_name, _ in pkgutil.iter_modules([pkg_path]):
    if module_name in _EXCLUDED_MODULES:
      continue
    try:
      importlib.import_module(f".{module_name}", package=__name__)
    except ImportError as e:
      logging.warning(f"⚠️  Failed to load container module '{module_name}': {e}. This container will not be available.")


_auto_register_adapters()


def available_containers() -> List[str]:
  """
  Returns the names of all registered container adapters.

  Returns:
      List[str]: Sorted adapter names (e.g. ['svelte', 'vue']).
  """
  return sorted(_CONTAINER_REGISTRY.keys())


__all__ = [
  "ContainerAdapter",
  "ScriptSection",
  "available_containers",
  "get_container_adapter",
  "register_container",
  "strip_dialect_marker",
]
