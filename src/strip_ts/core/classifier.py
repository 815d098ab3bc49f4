"""
Node Classifier.

Decides, for a single tree-sitter node, whether it is an erasure-relevant construct
and which :class:`~strip_ts.enums.ErasureAction` applies. The verdict depends only
on the node itself (its kind, plus a look at its own children for ``export`` and
``import`` wrappers, specifiers and parameters), never on traversal state.

Anything not listed here is ``NOOP``: unknown node kinds are preserved.
"""

from typing import Optional

from tree_sitter import Node

from strip_ts.enums import ErasureAction

# Type positions: `x: T`, `(): T`, `asserts x`, `x is T`.
ANNOTATION_KINDS = frozenset(
  {
    "type_annotation",
    "opting_type_annotation",
    "omitting_type_annotation",
    "asserts_annotation",
    "type_predicate_annotation",
  }
)

GENERIC_KINDS = frozenset({"type_arguments", "type_parameters"})

# Declarations that exist only at the type level. Removed together with their line.
TYPE_DECLARATION_KINDS = frozenset(
  {
    "interface_declaration",
    "type_alias_declaration",
    "ambient_declaration",
    "function_signature",
    "method_signature",
    "abstract_method_signature",
    "index_signature",
  }
)

ASSERTION_KINDS = frozenset({"as_expression", "satisfies_expression", "non_null_expression", "type_assertion"})

# Nodes whose `?` / `!` child is an optionality or definite-assignment marker.
_MARKER_PARENTS = frozenset({"optional_parameter", "public_field_definition", "variable_declarator", "method_definition"})

_TYPE_ONLY_KEYWORDS = frozenset({"type", "typeof"})

# Class members and declarations whose modifiers have no runtime meaning.
# Parameter properties (`constructor(private x)`) assign fields at runtime and are not listed.
_MODIFIER_PARENTS = frozenset({"public_field_definition", "method_definition", "abstract_class_declaration"})
_MODIFIER_KINDS = frozenset({"accessibility_modifier", "override_modifier"})
_MODIFIER_KEYWORDS = frozenset({"readonly", "abstract"})

# Comma separated lists whose members may be type-only: `this` parameters and
# `type` import/export specifiers. Members are removed with their separators.
LIST_KINDS = frozenset({"formal_parameters", "named_imports", "export_clause"})


def classify(node: Node) -> ErasureAction:
  """
  Classifies a syntax node.

  Args:
      node: Any node of a TypeScript/TSX tree.

  Returns:
      ErasureAction: DELETE, REPLACE_WITH_INNER or NOOP.
  """
  kind = node.type

  if kind in ANNOTATION_KINDS or kind in GENERIC_KINDS or kind in TYPE_DECLARATION_KINDS:
    return ErasureAction.DELETE

  if kind in ASSERTION_KINDS:
    return ErasureAction.REPLACE_WITH_INNER

  if kind == "implements_clause":
    return ErasureAction.DELETE

  if kind in ("?", "!") and not node.is_named:
    parent = node.parent
    if parent is not None and parent.type in _MARKER_PARENTS:
      return ErasureAction.DELETE
    return ErasureAction.NOOP

  if is_modifier(node):
    return ErasureAction.DELETE

  # `declare x: T;` and `abstract x: T;` emit no field.
  if kind == "public_field_definition" and (_has_keyword(node, "declare") or _has_keyword(node, "abstract")):
    return ErasureAction.DELETE

  # `function f(this: Window, ...)`
  if kind == "required_parameter":
    pattern = node.child_by_field_name("pattern")
    if pattern is not None and pattern.type == "this":
      return ErasureAction.DELETE
    return ErasureAction.NOOP

  if kind in ("import_specifier", "export_specifier") and _has_keyword(node, "type"):
    return ErasureAction.DELETE

  if kind == "export_statement":
    declaration = node.child_by_field_name("declaration")
    if declaration is not None and declaration.type in TYPE_DECLARATION_KINDS:
      return ErasureAction.DELETE
    if _has_type_only_keyword(node):
      return ErasureAction.DELETE
    if _all_specifiers_type_only(_child_of_kind(node, "export_clause")):
      return ErasureAction.DELETE
    return ErasureAction.NOOP

  if kind == "import_statement":
    if _has_type_only_keyword(node):
      return ErasureAction.DELETE
    clause = _child_of_kind(node, "import_clause")
    if clause is not None:
      groups = [child for child in clause.named_children if child.type != "comment"]
      if len(groups) == 1 and _all_specifiers_type_only(groups[0]):
        return ErasureAction.DELETE

  return ErasureAction.NOOP


def is_statement_level(node: Node) -> bool:
  """
  True if a deleted node occupies a statement or class-member slot.

  Such deletions take their whole line with them when nothing else shares it.
  """
  return node.type in TYPE_DECLARATION_KINDS or node.type in (
    "export_statement",
    "import_statement",
    "public_field_definition",
  )


def is_modifier(node: Node) -> bool:
  """True for ``private``/``readonly``/``abstract``/``override`` on a class or class member."""
  parent = node.parent
  if parent is None or parent.type not in _MODIFIER_PARENTS:
    return False
  if node.type in _MODIFIER_KINDS:
    return True
  return not node.is_named and node.type in _MODIFIER_KEYWORDS


def is_inline_annotation(node: Node) -> bool:
  """True for deletions that also absorb the horizontal whitespace before them."""
  return node.type in ANNOTATION_KINDS or node.type == "implements_clause" or not node.is_named


def inner_expression(node: Node) -> Optional[Node]:
  """
  Returns the expression wrapped by an assertion node.

  ``x as T``, ``x satisfies T`` and ``x!`` keep their first named child;
  ``<T>x`` keeps the child after its type arguments.

  Args:
      node: A node classified as REPLACE_WITH_INNER.

  Returns:
      Optional[Node]: The surviving expression, or None if the node has none.
  """
  for child in node.named_children:
    if child.type == "comment" or child.type == "type_arguments":
      continue
    return child
  return None


def _has_type_only_keyword(node: Node) -> bool:
  # `import type { A } from "m"` / `export type { A }`: the keyword is a direct,
  # anonymous child right after `import` / `export`.
  children = node.children
  return len(children) > 1 and not children[1].is_named and children[1].type in _TYPE_ONLY_KEYWORDS


def _has_keyword(node: Node, keyword: str) -> bool:
  return any(not child.is_named and child.type == keyword for child in node.children)


def _child_of_kind(node: Node, kind: str) -> Optional[Node]:
  for child in node.named_children:
    if child.type == kind:
      return child
  return None


def _all_specifiers_type_only(specifier_list: Optional[Node]) -> bool:
  # `{ type A, type B }`; an empty `{}` is not type-only.
  if specifier_list is None or specifier_list.type not in LIST_KINDS:
    return False
  specifiers = [child for child in specifier_list.named_children if child.type != "comment"]
  return bool(specifiers) and all(_has_keyword(spec, "type") for spec in specifiers)
