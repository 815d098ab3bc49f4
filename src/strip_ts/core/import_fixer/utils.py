"""
Utilities for the Import Fixer.

Contains static helpers for reading import specifiers out of an
``import_statement`` node and the final cosmetic blank-line normalisation.
"""

import re
from dataclasses import dataclass
from typing import List, Optional

from tree_sitter import Node

from strip_ts.enums import BindingKind

_BLANK_RUN = re.compile(r"\n{3,}")
_LEADING_BLANK = re.compile(r"^\s*\n")


@dataclass(frozen=True)
class ImportBinding:
  """
  One specifier of an import declaration.

  Attributes:
      kind: Default, named or namespace binding.
      local_name: The name the binding introduces into the module scope.
      node: The clause-level node (default identifier, ``namespace_import``
          or ``import_specifier``) carrying the binding.
  """

  kind: BindingKind
  local_name: str
  node: Node


def get_import_clause(statement: Node) -> Optional[Node]:
  """
  Returns the ``import_clause`` of an import statement.

  Side-effect imports (``import "x"``) and ``import x = require()`` forms have none.
  """
  for child in statement.named_children:
    if child.type == "import_clause":
      return child
  return None


def get_local_name(specifier: Node, source: bytes) -> str:
  """
  Resolves the local name of a named ``import_specifier``.

  Args:
      specifier: The ``import_specifier`` node.
      source: Source bytes.

  Returns:
      str: The alias if present (``A as B`` -> ``B``), else the imported name.
  """
  target = specifier.child_by_field_name("alias") or specifier.child_by_field_name("name")
  if target is None:
    return ""
  return source[target.start_byte : target.end_byte].decode("utf-8")


def collect_bindings(clause: Node, source: bytes) -> List[ImportBinding]:
  """
  Lists every binding introduced by an import clause, in source order.

  Args:
      clause: The ``import_clause`` node.
      source: Source bytes.

  Returns:
      List[ImportBinding]: Default, namespace and named bindings.
  """
  bindings: List[ImportBinding] = []
  for child in clause.named_children:
    if child.type == "identifier":
      name = source[child.start_byte : child.end_byte].decode("utf-8")
      bindings.append(ImportBinding(BindingKind.DEFAULT, name, child))
    elif child.type == "namespace_import":
      ident = next((c for c in child.named_children if c.type == "identifier"), None)
      if ident is not None:
        name = source[ident.start_byte : ident.end_byte].decode("utf-8")
        bindings.append(ImportBinding(BindingKind.NAMESPACE, name, child))
    elif child.type == "named_imports":
      for spec in child.named_children:
        if spec.type == "import_specifier":
          bindings.append(ImportBinding(BindingKind.NAMED, get_local_name(spec, source), spec))
  return bindings


def normalize_blank_lines(code: str) -> str:
  """
  Collapses runs of blank lines to one and strips blank lines at file start.

  Args:
      code: Generated source text.

  Returns:
      str: The normalised text.
  """
  code = _BLANK_RUN.sub("\n\n", code)
  return _LEADING_BLANK.sub("", code, count=1)
