"""
Identifier Usage Scanning.

This module provides the tree walker that decides which names are referenced in a
module body. Its output feeds the :class:`~strip_ts.core.import_fixer.ImportFixer`,
which keeps an import binding only if its local name shows up here.

Two namespaces are tracked:

1.  ``plain_uses``: ordinary identifier occurrences anywhere outside import
    declarations (references, declarations, property names).
2.  ``markup_uses``: identifiers in JSX tag-name position and JSX attribute names,
    collected only when the markup extension is enabled.

The object of a dotted tag (``<Foo.Bar />``) is a plain use: it is a real
reference to the ``Foo`` binding.
"""

from dataclasses import dataclass, field
from typing import List, Set

from tree_sitter import Node

IDENTIFIER_KINDS = frozenset(
  {
    "identifier",
    "property_identifier",
    "shorthand_property_identifier",
    "shorthand_property_identifier_pattern",
    "type_identifier",
    "statement_identifier",
  }
)

JSX_ELEMENT_KINDS = frozenset({"jsx_opening_element", "jsx_closing_element", "jsx_self_closing_element"})


@dataclass
class IdentifierUsage:
  """
  The two identifier-usage sets of one module.
  """

  plain_uses: Set[str] = field(default_factory=set)
  markup_uses: Set[str] = field(default_factory=set)

  def is_used(self, name: str) -> bool:
    """True if ``name`` occurs in either namespace."""
    return name in self.plain_uses or name in self.markup_uses


class UsageScanner:
  """
  Collects identifier usages from a syntax tree.

  Attributes:
      markup (bool): Whether JSX tag identifiers go to ``markup_uses``.
  """

  def __init__(self, source: bytes, markup: bool = False) -> None:
    """
    Initializes the scanner.

    Args:
        source: The bytes the scanned tree was parsed from.
        markup: True if the tree was parsed with the JSX extension.
    """
    self.source = source
    self.markup = markup

  def scan(self, root: Node) -> IdentifierUsage:
    """
    Walks the tree, skipping import declarations entirely.

    Args:
        root: The module root.

    Returns:
        IdentifierUsage: The populated usage sets.
    """
    usage = IdentifierUsage()
    work: List[Node] = [root]

    while work:
      node = work.pop()
      if node.type == "import_statement":
        continue

      if node.type in IDENTIFIER_KINDS:
        name = self.source[node.start_byte : node.end_byte].decode("utf-8")
        if self.markup and self._is_markup_position(node):
          usage.markup_uses.add(name)
        else:
          usage.plain_uses.add(name)
        continue

      work.extend(node.children)

    return usage

  def _is_markup_position(self, node: Node) -> bool:
    parent = node.parent
    if parent is None:
      return False
    if parent.type in JSX_ELEMENT_KINDS:
      return parent.child_by_field_name("name") == node
    return parent.type in ("jsx_attribute", "jsx_namespace_name")
