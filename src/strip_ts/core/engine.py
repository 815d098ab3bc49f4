"""
Orchestration Engine for Type Stripping.

This module provides the `StripEngine`, the driver that turns one typed document
into untyped output. It owns no transform logic itself; it dispatches on the
dialect and calls the passes in order:

1.  **Erasure**: :class:`~strip_ts.core.eraser.TypeEraser` removes annotations,
    type declarations, generics and assertions.
2.  **Import Pruning** (optional): :class:`~strip_ts.core.import_fixer.ImportFixer`
    re-parses the erased text and drops import bindings that are now dead.
3.  **Normalisation**: blank-line runs are collapsed and leading blank lines removed.
4.  **Container Splicing**: for ``.vue`` / ``.svelte`` documents, each typed
    script section goes through steps 1-3 (pruning only for sections whose
    bindings are not visible to the markup) and is spliced back in place.

Each call parses fresh trees; nothing is shared between documents.
"""

import logging
import re
from typing import List, Optional, Tuple, Union

from strip_ts.config import RuntimeConfig
from strip_ts.containers import get_container_adapter
from strip_ts.core.conversion_result import StripResult
from strip_ts.core.dialects import DialectProfile, resolve_dialect
from strip_ts.core.eraser import TypeEraser, erase
from strip_ts.core.errors import UnsupportedDialectError
from strip_ts.core.import_fixer import ImportFixer, prune_unused_imports
from strip_ts.core.import_fixer.utils import normalize_blank_lines
from strip_ts.enums import Dialect

logger = logging.getLogger(__name__)

DialectLike = Union[str, Dialect, DialectProfile]

_PADDING = re.compile(r"\A(\s*)(.*?)(\s*)\Z", re.DOTALL)


class StripEngine:
  """
  The main stripping unit.

  Holds configuration only; :meth:`run` may be called for any number of
  documents, sequentially or from several threads.
  """

  def __init__(
    self,
    config: Optional[RuntimeConfig] = None,
    force: Optional[bool] = None,
    prune_imports: Optional[bool] = None,
  ) -> None:
    """
    Initializes the Engine.

    Args:
        config: Runtime configuration. Defaults are used if None.
        force: Overrides ``config.force_strip``.
        prune_imports: Overrides ``config.prune_imports``.
    """
    self.config = config or RuntimeConfig()
    self.force = self.config.force_strip if force is None else force
    self.prune_imports = self.config.prune_imports if prune_imports is None else prune_imports

  def run(self, code: str, dialect: DialectLike) -> StripResult:
    """
    Executes the full pipeline on one document.

    Args:
        code: The document text.
        dialect: 'ts', 'tsx', 'vue', 'svelte' (or a profile).

    Returns:
        StripResult: The output. ``processed`` is False when a container had no
        typed script section and was returned unchanged.

    Raises:
        ParseError: If a script cannot be parsed.
        UnsupportedDialectError: If the dialect is unknown.
    """
    profile = resolve_dialect(dialect)
    logger.debug("Stripping %s document (%d chars)", profile.name, len(code))

    if profile.container:
      return self._run_container(code, profile)

    output, removed = self._strip_script(code, profile, prune=self.prune_imports)
    return StripResult(code=output, dialect=profile.name, removed_imports=removed)

  def _strip_script(self, code: str, profile: DialectProfile, prune: bool) -> Tuple[str, List[str]]:
    """
    Erases, optionally prunes, and normalises one script.

    Returns:
        Tuple[str, List[str]]: The output text and the pruned binding names.
    """
    erased = TypeEraser(profile).erase(code)
    if not prune:
      return normalize_blank_lines(erased), []

    fixer = ImportFixer(profile, self._implicit_bindings(profile))
    return fixer.fix(erased), list(fixer.removed)

  def _implicit_bindings(self, profile: DialectProfile) -> Optional[frozenset]:
    if self.config.implicit_markup_bindings is None or not profile.markup:
      return None
    return frozenset(self.config.implicit_markup_bindings)

  def _run_container(self, doc: str, profile: DialectProfile) -> StripResult:
    adapter = get_container_adapter(profile.name)
    if adapter is None:
      raise UnsupportedDialectError(profile.name)

    sections = [s for s in adapter.extract_sections(doc) if s.declares_typed_dialect or self.force]
    if not sections:
      logger.debug("No typed script section in %s document; leaving it untouched", profile.name)
      return StripResult(code=doc, dialect=profile.name, processed=False)

    output = doc
    removed: List[str] = []
    # Last section first, so earlier offsets stay valid.
    for section in reversed(sections):
      lead, body, trail = _PADDING.match(section.content(doc)).groups()
      prune = self.prune_imports and not section.template_scoped
      if body:
        body, dropped = self._strip_script(body, adapter.script_dialect(section), prune=prune)
        body = body.rstrip("\n")
        removed[:0] = dropped
      output = adapter.splice(output, section, lead + body + trail)

    return StripResult(code=output, dialect=profile.name, removed_imports=removed)


def erase_and_prune(code: str, dialect: DialectLike = Dialect.TS, prune_imports: bool = True) -> str:
  """
  Erases types and (optionally) prunes dead imports from a script.

  Args:
      code: TypeScript or TSX source text.
      dialect: 'ts' or 'tsx' (or a profile).
      prune_imports: Whether to run the import liveness pass.

  Returns:
      str: The untyped, normalised text.

  Raises:
      ParseError: If the text cannot be parsed.
      UnsupportedDialectError: If the dialect is unknown or a container dialect.
  """
  profile = resolve_dialect(dialect)
  if profile.container:
    raise UnsupportedDialectError(profile.name, ["ts", "tsx", "mts", "cts"])
  return StripEngine(prune_imports=prune_imports).run(code, profile).code


__all__ = ["StripEngine", "erase", "erase_and_prune", "prune_unused_imports"]
