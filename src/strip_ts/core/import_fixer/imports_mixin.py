"""
Import Logic Mixin.

Handles rewriting ``import_statement`` nodes: bindings are partitioned into kept
and dropped sets, fully dead declarations are removed with their line, and partly
dead ones lose only the dropped specifiers and their separators.
"""

import logging
from typing import Dict, List

from tree_sitter import Node

from strip_ts.core.edits import EditPlan, drop_list_items
from strip_ts.core.import_fixer.utils import (
  ImportBinding,
  collect_bindings,
  get_import_clause,
)
from strip_ts.core.scanners import IdentifierUsage
from strip_ts.enums import BindingKind

logger = logging.getLogger(__name__)


class ImportMixin:
  """
  Mixin for processing import declarations.

  Assumed attributes on self:
      is_live (Callable): Liveness rule from :class:`BaseImportFixer`.
      removed (List[str]): Names dropped so far.
  """

  def _plan_import(self, statement: Node, usage: IdentifierUsage, plan: EditPlan) -> None:
    """
    Records the edits that prune one import declaration.

    Args:
        statement: The ``import_statement`` node.
        usage: Usage sets of the module.
        plan: Plan receiving the edits.
    """
    clause = get_import_clause(statement)
    if clause is None:
      return  # side-effect import

    bindings = collect_bindings(clause, plan.source)
    if not bindings:
      return  # `import {} from "m"` behaves like a side-effect import

    live = [self.is_live(binding, usage) for binding in bindings]
    if all(live):
      return

    self.removed.extend(b.local_name for b, flag in zip(bindings, live) if not flag)

    if not any(live):
      logger.debug("Removing unused import: %s", plan.source[statement.start_byte : statement.end_byte])
      plan.delete_statement(statement)
      return

    self._drop_bindings(clause, bindings, live, plan)

  def _drop_bindings(self, clause: Node, bindings: List[ImportBinding], live: List[bool], plan: EditPlan) -> None:
    # Clause level: `Default, * as NS` or `Default, { ... }`.
    groups = [child for child in clause.named_children if child.type != "comment"]
    group_live: Dict[int, bool] = {group.id: False for group in groups}
    named_items: List[Node] = []
    named_keep: List[bool] = []

    for binding, flag in zip(bindings, live):
      if binding.kind == BindingKind.NAMED:
        named_items.append(binding.node)
        named_keep.append(flag)
        group_live[binding.node.parent.id] = group_live[binding.node.parent.id] or flag
      else:
        group_live[binding.node.id] = flag

    drop_list_items(groups, [group_live[group.id] for group in groups], plan)

    # Inside `{ ... }`, only when the braces survive.
    if named_items and any(named_keep) and not all(named_keep):
      drop_list_items(named_items, named_keep, plan)
