"""
Planned Text Edits.

Rather than mutating a syntax tree while walking it, the eraser and the import
fixer record :class:`Edit` objects (byte spans to replace) in an :class:`EditPlan`
and apply them in one go once traversal is finished. Everything outside the
recorded spans is copied verbatim, so untouched regions stay byte-identical.
"""

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from tree_sitter import Node

_HORIZONTAL_WS = b" \t"


@dataclass(frozen=True)
class Edit:
  """
  Replacement of the half-open byte span ``[start, end)``.
  """

  start: int
  end: int
  replacement: bytes = b""


class EditPlan:
  """
  Ordered collection of non-overlapping edits against one source buffer.

  Attributes:
      source (bytes): The buffer the edits refer to.
      edits (List[Edit]): Recorded edits, in insertion order.
  """

  def __init__(self, source: bytes) -> None:
    self.source = source
    self.edits: List[Edit] = []

  def __len__(self) -> int:
    return len(self.edits)

  def replace(self, start: int, end: int, replacement: bytes = b"") -> None:
    """Records a raw span replacement. Empty spans with no replacement are ignored."""
    if end <= start and not replacement:
      return
    self.edits.append(Edit(start, end, replacement))

  def delete(self, start: int, end: int) -> None:
    self.replace(start, end)

  def delete_node(self, node: Node) -> None:
    """Deletes exactly the bytes covered by ``node``."""
    self.delete(node.start_byte, node.end_byte)

  def delete_inline(self, node: Node) -> None:
    """
    Deletes ``node`` together with the spaces and tabs directly before it.

    Turns ``(u : U)`` into ``(u)`` instead of ``(u )``.
    """
    start = node.start_byte
    while start > 0 and self.source[start - 1] in _HORIZONTAL_WS:
      start -= 1
    self.delete(start, node.end_byte)

  def delete_leading(self, node: Node) -> None:
    """Deletes a leading keyword such as ``private`` and the spaces after it."""
    end = node.end_byte
    while end < len(self.source) and self.source[end] in _HORIZONTAL_WS:
      end += 1
    self.delete(node.start_byte, end)

  def delete_statement(self, node: Node) -> None:
    """
    Deletes a statement-level node.

    If the node (plus an optional trailing ``;``) is alone on its lines, the
    full lines including the final newline are removed. Otherwise only the node
    and the horizontal whitespace following it are removed.
    """
    self.delete(*statement_span(self.source, node.start_byte, node.end_byte))

  def apply(self) -> bytes:
    """
    Applies all edits and returns the new buffer.

    Edits are processed in source order; an edit starting inside an earlier one
    is clipped to the uncovered remainder.

    Returns:
        bytes: The edited buffer.
    """
    if not self.edits:
      return self.source

    out: List[bytes] = []
    cursor = 0
    for edit in sorted(self.edits, key=lambda e: (e.start, e.end)):
      start = edit.start
      if start < cursor:
        if edit.end <= cursor:
          continue
        start = cursor
      out.append(self.source[cursor:start])
      out.append(edit.replacement)
      cursor = edit.end
    out.append(self.source[cursor:])
    return b"".join(out)


def statement_span(source: bytes, start: int, end: int) -> Tuple[int, int]:
  """
  Widens ``[start, end)`` to cover the surrounding trivia of a statement.

  Args:
      source: The source buffer.
      start: Statement start offset.
      end: Statement end offset.

  Returns:
      Tuple[int, int]: The widened ``(start, end)`` span.
  """
  tail = end
  while tail < len(source) and source[tail] in _HORIZONTAL_WS:
    tail += 1
  if tail < len(source) and source[tail : tail + 1] == b";":
    tail += 1
    while tail < len(source) and source[tail] in _HORIZONTAL_WS:
      tail += 1

  line_start = source.rfind(b"\n", 0, start) + 1
  owns_line_start = source[line_start:start].strip(_HORIZONTAL_WS) == b""
  at_line_end = tail >= len(source) or source[tail : tail + 1] in (b"\n", b"\r")

  if owns_line_start and at_line_end:
    if source[tail : tail + 2] == b"\r\n":
      tail += 2
    elif tail < len(source):
      tail += 1
    return line_start, tail
  if at_line_end:
    while start > line_start and source[start - 1] in _HORIZONTAL_WS:
      start -= 1
  return start, tail


def drop_list_items(items: Sequence[Node], keep: Sequence[bool], plan: EditPlan) -> None:
  """
  Removes the unkept items of a comma separated list in place.

  A dropped item followed by a kept item is removed together with everything up
  to that successor (its comma and spacing). Items after the last kept one are
  removed together with the separator that precedes them. At least one item must
  be kept; removing a whole list is the caller's job.

  Args:
      items: The list items in source order.
      keep: Parallel flags, True for survivors.
      plan: Plan receiving the deletions.
  """
  last_kept = max(i for i, flag in enumerate(keep) if flag)
  for i, (item, flag) in enumerate(zip(items, keep)):
    if flag:
      continue
    if i < last_kept:
      plan.delete(item.start_byte, items[i + 1].start_byte)
    else:
      plan.delete(items[i - 1].end_byte, item.end_byte)
