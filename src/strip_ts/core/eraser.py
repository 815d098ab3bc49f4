"""
Type-Erasure Transformer.

Removes static typing constructs from TypeScript/TSX source while leaving every
other byte untouched.

Algorithm:

1.  **Parse** the script once with the grammar of the requested dialect.
2.  **Plan**: walk the tree depth-first with an explicit work list, asking the
    :mod:`~strip_ts.core.classifier` for a verdict at every node.

    - ``DELETE`` records the removal of the node's span (plus trivia) and skips
      its subtree.
    - ``REPLACE_WITH_INNER`` records the removal of the wrapper text on both
      sides of the inner expression and continues into the inner expression only.
    - ``NOOP`` continues into all children.

3.  **Apply** the recorded edits back-to-front against the original bytes.

Runtime code (calls, hooks, reactive statements, control flow) is never classified,
so it passes through unchanged without any special casing.
"""

import logging
from typing import List, Optional, Union

from tree_sitter import Node

from strip_ts.core import classifier
from strip_ts.core.dialects import DialectProfile, resolve_dialect
from strip_ts.core.edits import EditPlan, drop_list_items
from strip_ts.core.parsing import parse
from strip_ts.enums import Dialect, ErasureAction

logger = logging.getLogger(__name__)

# Expressions that may lose their parentheses once an assertion around them is gone.
_PRIMARY_KINDS = frozenset(
  {
    "identifier",
    "this",
    "super",
    "string",
    "template_string",
    "number",
    "true",
    "false",
    "null",
    "undefined",
    "array",
    "parenthesized_expression",
    "member_expression",
    "subscript_expression",
    "call_expression",
  }
)


class TypeEraser:
  """
  Plans and applies type erasure for one dialect.

  An instance holds configuration only; every call to :meth:`erase` parses a fresh
  tree and builds a fresh :class:`EditPlan`, so one eraser may serve many files.
  """

  def __init__(self, dialect: Union[str, Dialect, DialectProfile] = Dialect.TS) -> None:
    """
    Initializes the eraser.

    Args:
        dialect: Dialect key or profile. Container dialects erase their script
            sections with the plain TypeScript grammar.

    Raises:
        UnsupportedDialectError: If the dialect is unknown.
    """
    self.profile = resolve_dialect(dialect)

  def erase(self, code: str) -> str:
    """
    Erases all type-level constructs from ``code``.

    Args:
        code: TypeScript or TSX source text.

    Returns:
        str: The untyped source text.

    Raises:
        ParseError: If ``code`` does not parse under the dialect.
    """
    source = code.encode("utf-8")
    tree = parse(source, self.profile)
    plan = self.plan(tree.root_node, source)
    logger.debug("Erasure planned %d edit(s) for %s source", len(plan), self.profile.name)
    return plan.apply().decode("utf-8")

  def plan(self, root: Node, source: bytes) -> EditPlan:
    """
    Walks the tree and records the edits erasure requires.

    Args:
        root: Root of the parsed tree.
        source: The bytes ``root`` was parsed from.

    Returns:
        EditPlan: The planned edits (not yet applied).
    """
    plan = EditPlan(source)
    work: List[Node] = [root]

    while work:
      node = work.pop()
      action = classifier.classify(node)

      if action == ErasureAction.DELETE:
        self._delete(node, plan)
        continue

      if action == ErasureAction.REPLACE_WITH_INNER:
        inner = self._replace_with_inner(node, plan)
        if inner is not None:
          work.append(inner)
        continue

      if node.type == "parenthesized_expression":
        inner = self._unwrap_parentheses(node, plan)
        if inner is not None:
          work.append(inner)
          continue

      if node.type in classifier.LIST_KINDS:
        work.extend(reversed(self._prune_list(node, plan)))
        continue

      work.extend(reversed(node.children))

    return plan

  def _delete(self, node: Node, plan: EditPlan) -> None:
    if classifier.is_statement_level(node):
      plan.delete_statement(node)
    elif classifier.is_modifier(node):
      plan.delete_leading(node)
    elif classifier.is_inline_annotation(node):
      plan.delete_inline(node)
    else:
      plan.delete_node(node)

  def _prune_list(self, node: Node, plan: EditPlan) -> List[Node]:
    """
    Removes type-only members of a parameter or specifier list together with
    their commas, and returns the children still to be visited.
    """
    items = [child for child in node.named_children if child.type != "comment"]
    keep = [classifier.classify(item) != ErasureAction.DELETE for item in items]
    if all(keep):
      return node.children

    if any(keep):
      drop_list_items(items, keep, plan)
    elif node.type == "named_imports" and node.parent is not None and len(node.parent.named_children) > 1:
      # `Default, { type A }` loses the braces and the comma before them.
      groups = [child for child in node.parent.named_children if child.type != "comment"]
      drop_list_items(groups, [group.id != node.id for group in groups], plan)
    else:
      # `f(this: Window)` becomes `f()`.
      plan.delete(items[0].start_byte, node.children[-1].start_byte)
    return [item for item, flag in zip(items, keep) if flag]

  def _replace_with_inner(self, node: Node, plan: EditPlan) -> Optional[Node]:
    """
    Splices the asserted expression up one level by deleting the wrapper text
    around it. Returns the surviving node so traversal can continue into it.
    """
    inner = classifier.inner_expression(node)
    if inner is None:
      return None
    plan.delete(node.start_byte, inner.start_byte)
    plan.delete(inner.end_byte, node.end_byte)
    return inner

  def _unwrap_parentheses(self, node: Node, plan: EditPlan) -> Optional[Node]:
    """
    Drops parentheses that only existed to delimit an assertion.

    ``(y as string).length`` becomes ``y.length``. Parentheses stay when the
    surviving expression is not primary, spans lines, contains optional chaining,
    or sits under ``new`` where removing them would change the callee.
    """
    content = [child for child in node.named_children if child.type != "comment"]
    if len(content) != 1 or len(content) != len(node.named_children):
      return None

    wrapper = content[0]
    if classifier.classify(wrapper) != ErasureAction.REPLACE_WITH_INNER:
      return None

    innermost = wrapper
    while classifier.classify(innermost) == ErasureAction.REPLACE_WITH_INNER:
      nested = classifier.inner_expression(innermost)
      if nested is None:
        return None
      innermost = nested

    if innermost.type not in _PRIMARY_KINDS:
      return None
    if node.start_point[0] != node.end_point[0]:
      return None
    if node.parent is not None and node.parent.type == "new_expression":
      return None
    if b"?." in plan.source[innermost.start_byte : innermost.end_byte]:
      return None

    plan.delete(node.start_byte, innermost.start_byte)
    plan.delete(innermost.end_byte, node.end_byte)
    return innermost


def erase(code: str, dialect: Union[str, Dialect, DialectProfile] = Dialect.TS) -> str:
  """
  Erases type annotations, type declarations, generics and assertions.

  Args:
      code: TypeScript or TSX source text.
      dialect: 'ts' or 'tsx' (or a profile). Selects whether JSX is parsed.

  Returns:
      str: Untyped source text; untouched regions are byte-identical.

  Raises:
      ParseError: If the text cannot be parsed.
      UnsupportedDialectError: If the dialect is unknown.
  """
  return TypeEraser(dialect).erase(code)
