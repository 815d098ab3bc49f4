"""
Tree-sitter Front-end.

Parses script text into a concrete syntax tree using the TypeScript or TSX grammar
from ``tree-sitter-typescript``. Tree-sitter is error tolerant, so a parse that
contains ``ERROR`` or ``MISSING`` nodes is converted into a :class:`ParseError`
pointing at the first problem; callers never see a partially valid tree.

A fresh :class:`tree_sitter.Parser` is created per call. Only the immutable
``Language`` objects are cached.

Syntax newer than the installed grammar is reported as a :class:`ParseError`;
``export type * from "m"``, for example, is rejected.
"""

import functools
import logging
from typing import Callable, Dict, Optional

import tree_sitter_typescript as tsts
from tree_sitter import Language, Node, Parser, Tree

from strip_ts.core.dialects import DialectProfile
from strip_ts.core.errors import ParseError, UnsupportedDialectError

logger = logging.getLogger(__name__)

_GRAMMARS: Dict[str, Callable[[], object]] = {
  "typescript": tsts.language_typescript,
  "tsx": tsts.language_tsx,
}


@functools.lru_cache(maxsize=None)
def get_language(grammar: str) -> Language:
  """
  Loads a tree-sitter language by grammar name.

  Args:
      grammar: 'typescript' or 'tsx'.

  Returns:
      Language: The compiled grammar.

  Raises:
      UnsupportedDialectError: If no grammar of that name is bundled.
  """
  loader = _GRAMMARS.get(grammar)
  if loader is None:
    raise UnsupportedDialectError(grammar, _GRAMMARS.keys())
  return Language(loader())


def parse(source: bytes, profile: DialectProfile) -> Tree:
  """
  Parses UTF-8 encoded script text.

  Args:
      source: The script text.
      profile: Dialect profile selecting the grammar.

  Returns:
      Tree: The syntax tree (error free).

  Raises:
      ParseError: If the text is not valid under the grammar.
  """
  parser = Parser(get_language(profile.grammar))
  tree = parser.parse(source)
  if tree.root_node.has_error:
    error_node = find_first_error(tree.root_node)
    raise _to_parse_error(error_node or tree.root_node, source)
  return tree


def find_first_error(node: Node) -> Optional[Node]:
  """
  Locates the first ``ERROR`` or ``MISSING`` node in document order.

  Args:
      node: Subtree root.

  Returns:
      Optional[Node]: The offending node, or None if the subtree is clean.
  """
  if node.is_error or node.is_missing:
    return node
  for child in node.children:
    if child.has_error or child.is_missing:
      found = find_first_error(child)
      if found is not None:
        return found
  return None


def node_text(node: Node, source: bytes) -> str:
  """Decodes the source slice covered by a node."""
  return source[node.start_byte : node.end_byte].decode("utf-8")


def _to_parse_error(node: Node, source: bytes) -> ParseError:
  row, col = node.start_point
  # start_point columns are byte offsets; report characters instead.
  line_start = source.rfind(b"\n", 0, node.start_byte) + 1
  column = len(source[line_start : node.start_byte].decode("utf-8", errors="replace")) + 1
  if node.is_missing:
    message = f"Missing '{node.type}'"
    snippet = ""
  else:
    snippet = source[node.start_byte : node.end_byte].decode("utf-8", errors="replace")[:40]
    message = f"Unexpected {snippet!r}" if snippet else "Syntax error"
  logger.debug("Parse failure at %s:%s (byte column %s): %s", row + 1, column, col, message)
  return ParseError(message, line=row + 1, column=column, snippet=snippet)
