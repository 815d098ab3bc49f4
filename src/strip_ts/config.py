"""
Runtime Configuration Store.

Settings can come from ``[tool.strip_ts]`` in the nearest ``pyproject.toml`` and
from explicit arguments (CLI flags), which take precedence.

.. code-block:: toml

    [tool.strip_ts]
    out_dir = "dist-js"
    force_strip = false
    prune_imports = true
    implicit_markup_bindings = ["React"]
"""

import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

if sys.version_info >= (3, 11):
  import tomllib
else:
  try:
    import tomli as tomllib
  except ImportError:
    tomllib = None  # type: ignore


class RuntimeConfig(BaseModel):
  """
  Global configuration container for the stripping pipeline.
  """

  out_dir: Path = Field(Path("output"), description="Directory that receives generated files.")
  force_strip: bool = Field(False, description="Process container scripts even without a lang=\"ts\" marker.")
  prune_imports: bool = Field(True, description="Remove import bindings that are unused after erasure.")
  implicit_markup_bindings: Optional[List[str]] = Field(
    None,
    description="Overrides the default-import names that markup syntax uses implicitly (TSX default: React).",
  )

  @field_validator("implicit_markup_bindings")
  @classmethod
  def validate_bindings(cls, v: Optional[List[str]]) -> Optional[List[str]]:
    """
    Ensures every implicit binding is a plain identifier.

    Args:
        v: The configured names.

    Returns:
        Optional[List[str]]: The stripped names.

    Raises:
        ValueError: If a name is not a valid identifier.
    """
    if v is None:
      return v
    cleaned = [name.strip() for name in v]
    for name in cleaned:
      if not name.replace("$", "_").isidentifier():
        raise ValueError(f"Invalid implicit markup binding: '{name}'")
    return cleaned

  @classmethod
  def load(
    cls,
    out_dir: Optional[Path] = None,
    force_strip: Optional[bool] = None,
    prune_imports: Optional[bool] = None,
    implicit_markup_bindings: Optional[List[str]] = None,
    search_path: Optional[Path] = None,
  ) -> "RuntimeConfig":
    """
    Loads configuration from pyproject.toml and overrides with explicit arguments.

    Args:
        out_dir: Override for the output directory.
        force_strip: Override for forced container processing.
        prune_imports: Override for import pruning.
        implicit_markup_bindings: Override for implicit markup bindings.
        search_path: Directory to start searching for TOML config.

    Returns:
        RuntimeConfig: The fully resolved configuration object.
    """
    start_dir = search_path or Path.cwd()
    toml_config, toml_dir = _load_toml_settings(start_dir)

    final_out = out_dir
    if final_out is None and "out_dir" in toml_config:
      final_out = Path(toml_config["out_dir"])
      if toml_dir and not final_out.is_absolute():
        final_out = toml_dir / final_out

    settings: Dict[str, Any] = {
      "force_strip": force_strip if force_strip is not None else toml_config.get("force_strip", False),
      "prune_imports": prune_imports if prune_imports is not None else toml_config.get("prune_imports", True),
      "implicit_markup_bindings": implicit_markup_bindings or toml_config.get("implicit_markup_bindings"),
    }
    if final_out is not None:
      settings["out_dir"] = final_out

    return cls(**settings)


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Recursively searches parents for 'pyproject.toml' and extracts config.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The config dict and the directory definition was found in.
  """
  if not tomllib:
    return {}, None

  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.exists() and toml_path.is_file():
      try:
        with open(toml_path, "rb") as f:
          data = tomllib.load(f)
      except (OSError, tomllib.TOMLDecodeError) as e:
        logging.warning(f"⚠️  Ignoring unreadable {toml_path}: {e}")
        return {}, None

      tool_section = data.get("tool", {})
      return tool_section.get("strip_ts", {}), parent

  return {}, None
