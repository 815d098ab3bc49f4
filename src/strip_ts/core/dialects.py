"""
Dialect Profiles.

A dialect profile bundles everything the pipeline needs to know about a source
flavour: which tree-sitter grammar parses it, whether the JSX markup extension is
active, whether the text is a multi-section container, and which default import
bindings exist only to make markup syntax valid.

The implicit markup binding rule is data, not code: the ``React``
convention is attached to the TSX profile only, and callers may build their own
profile (see :meth:`DialectProfile.with_implicit_bindings`) for other markup ecosystems.
"""

from pathlib import Path
from typing import Dict, FrozenSet, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from strip_ts.core.errors import UnsupportedDialectError, UnsupportedFileTypeError
from strip_ts.enums import Dialect


class DialectProfile(BaseModel):
  """
  Static description of a source dialect.
  """

  model_config = ConfigDict(frozen=True)

  name: str = Field(description="Dialect key (e.g. 'ts', 'tsx', 'vue').")
  grammar: str = Field("typescript", description="Tree-sitter grammar used for script text ('typescript' or 'tsx').")
  markup: bool = Field(False, description="True if inline markup (JSX) tags are enabled.")
  container: bool = Field(False, description="True for multi-section documents handled by a container adapter.")
  implicit_markup_bindings: FrozenSet[str] = Field(
    default_factory=frozenset,
    description="Default-import names that are only live through plain identifier usage.",
  )
  output_suffix: Optional[str] = Field(None, description="File suffix of the emitted file. None keeps the input name.")

  def with_implicit_bindings(self, names: FrozenSet[str]) -> "DialectProfile":
    """
    Returns a copy of this profile with a different implicit markup binding set.

    Args:
        names: Default-import names to treat as implicit.

    Returns:
        DialectProfile: The adjusted profile.
    """
    return self.model_copy(update={"implicit_markup_bindings": frozenset(names)})


_PROFILES: Dict[str, DialectProfile] = {
  Dialect.TS.value: DialectProfile(name="ts", grammar="typescript", output_suffix=".js"),
  Dialect.TSX.value: DialectProfile(
    name="tsx",
    grammar="tsx",
    markup=True,
    implicit_markup_bindings=frozenset({"React"}),
    output_suffix=".jsx",
  ),
  Dialect.VUE.value: DialectProfile(name="vue", grammar="typescript", container=True),
  Dialect.SVELTE.value: DialectProfile(name="svelte", grammar="typescript", container=True),
}

# Module flavours of plain TypeScript keep their module kind in the output name.
_ALIASES: Dict[str, DialectProfile] = {
  "mts": _PROFILES["ts"].model_copy(update={"output_suffix": ".mjs"}),
  "cts": _PROFILES["ts"].model_copy(update={"output_suffix": ".cjs"}),
}


def available_dialects() -> List[str]:
  """
  Lists every dialect key accepted by :func:`resolve_dialect`.

  Returns:
      List[str]: Sorted dialect keys.
  """
  return sorted([*_PROFILES, *_ALIASES])


def resolve_dialect(dialect: Union[str, Dialect, DialectProfile]) -> DialectProfile:
  """
  Resolves a dialect key (or enum member, or ready-made profile) to its profile.

  Args:
      dialect: The requested dialect.

  Returns:
      DialectProfile: The matching profile.

  Raises:
      UnsupportedDialectError: If the dialect is unknown. Unknown dialects are never
          downgraded to a default.
  """
  if isinstance(dialect, DialectProfile):
    return dialect

  key = dialect.value if isinstance(dialect, Dialect) else str(dialect).lower().strip().lstrip(".")
  if key in _PROFILES:
    return _PROFILES[key]
  if key in _ALIASES:
    return _ALIASES[key]
  raise UnsupportedDialectError(str(dialect), available_dialects())


def dialect_for_path(path: Union[str, Path]) -> DialectProfile:
  """
  Picks the dialect profile for a file based on its extension.

  Args:
      path: The file path.

  Returns:
      DialectProfile: The matching profile.

  Raises:
      UnsupportedFileTypeError: If the extension is not a known dialect.
  """
  suffix = Path(path).suffix.lower().lstrip(".")
  if suffix in _PROFILES or suffix in _ALIASES:
    return resolve_dialect(suffix)
  raise UnsupportedFileTypeError(str(path), available_dialects())
