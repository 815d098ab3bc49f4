"""
Import Fixer Package.

This package provides the ``ImportFixer`` class, responsible for removing import
bindings that are dead after type erasure. It is composed of:

1.  :class:`BaseImportFixer`: dialect configuration and the liveness rule.
2.  :class:`ImportMixin`: rewriting of individual import declarations.

Liveness is always computed on the erased text (a second parse), because erasure
itself can kill names that were only referenced from type positions.
"""

import logging
from typing import List, Union

from strip_ts.core.dialects import DialectProfile, resolve_dialect
from strip_ts.core.edits import EditPlan
from strip_ts.core.errors import ParseError
from strip_ts.core.import_fixer.base import BaseImportFixer
from strip_ts.core.import_fixer.imports_mixin import ImportMixin
from strip_ts.core.import_fixer.utils import normalize_blank_lines
from strip_ts.core.parsing import parse
from strip_ts.core.scanners import UsageScanner
from strip_ts.enums import Dialect

logger = logging.getLogger(__name__)


class ImportFixer(ImportMixin, BaseImportFixer):
  """
  Composite pruner for unused import bindings.

  Inherits functionality from:
  - :class:`ImportMixin`: rewriting import statements.
  - :class:`BaseImportFixer`: configuration and liveness.

  Attributes:
      removed (List[str]): Local names dropped by the most recent :meth:`fix` call.
  """

  removed: List[str]

  def fix(self, code: str) -> str:
    """
    Prunes dead import bindings and normalises blank lines.

    Args:
        code: Untyped script text.

    Returns:
        str: The pruned text.

    Raises:
        ParseError: If ``code`` does not parse.
    """
    self.removed = []
    source = code.encode("utf-8")
    tree = parse(source, self.profile)
    root = tree.root_node

    usage = UsageScanner(source, markup=self.profile.markup).scan(root)

    plan = EditPlan(source)
    for statement in root.named_children:
      if statement.type == "import_statement":
        self._plan_import(statement, usage, plan)

    if self.removed:
      logger.debug("Pruned unused import bindings: %s", ", ".join(self.removed))
    return normalize_blank_lines(plan.apply().decode("utf-8"))


def prune_unused_imports(code: str, dialect: Union[str, Dialect, DialectProfile] = Dialect.TS) -> str:
  """
  Removes import bindings whose local names are never used.

  Text that cannot be parsed is returned unchanged (with a warning): pruning is
  an optimisation and never turns valid input into an error.

  Args:
      code: Untyped script text.
      dialect: 'ts' or 'tsx' (or a profile); 'tsx' enables markup-aware usage.

  Returns:
      str: The pruned, blank-line normalised text.

  Raises:
      UnsupportedDialectError: If the dialect is unknown.
  """
  fixer = ImportFixer(resolve_dialect(dialect))
  try:
    return fixer.fix(code)
  except ParseError as e:
    logger.warning("Could not remove unused imports: %s", e)
    return code


__all__ = ["ImportFixer", "prune_unused_imports"]
