"""
Base Protocol and Registry for Container Adapters.

A container is a multi-section document (a Vue single-file component, a Svelte
component) that interleaves a script section with markup and style sections.
The pipeline needs exactly three things from a container adapter:

- locate the script sections and whether they declare the typed dialect,
- splice processed script text back between the original tag boundaries,
- drop the dialect marker (``lang="ts"``) from the opening tag while doing so.

Every byte outside the spliced section is preserved. Script tags are located with
the standard library :class:`html.parser.HTMLParser`, which treats ``<script>``
content as raw text and reports exact tag positions.
"""

import re
from abc import ABC, abstractmethod
from html.parser import HTMLParser
from typing import Dict, List, Optional, Tuple, Type

from pydantic import BaseModel, Field

from strip_ts.core.dialects import DialectProfile, resolve_dialect
from strip_ts.enums import Dialect

TYPED_LANGS = frozenset({"ts", "tsx", "typescript"})

_DIALECT_MARKER = re.compile(
  r"""\s+lang\s*=\s*(?:"(?:ts|tsx|typescript)"|'(?:ts|tsx|typescript)'|(?:ts|tsx|typescript)(?=[\s/>]))""",
  re.IGNORECASE,
)


class ScriptSection(BaseModel):
  """
  Location of one script section inside a container document.

  Offsets are string indices; ``[start, end)`` is the section content, excluding
  the opening and closing tags.
  """

  tag_start: int = Field(description="Offset of the '<' of the opening tag.")
  start: int = Field(description="Offset of the first content character.")
  end: int = Field(description="Offset one past the last content character.")
  open_tag: str = Field(description="Literal text of the opening tag.")
  attrs: Dict[str, Optional[str]] = Field(default_factory=dict, description="Lower-cased tag attributes.")
  template_scoped: bool = Field(
    False,
    description="True if the surrounding markup may reference the section's top-level bindings.",
  )

  @property
  def lang(self) -> Optional[str]:
    value = self.attrs.get("lang")
    return value.lower() if value else None

  @property
  def declares_typed_dialect(self) -> bool:
    """True if the opening tag carries a typed dialect marker."""
    return self.lang in TYPED_LANGS

  def content(self, doc: str) -> str:
    """Returns the section's inner text from ``doc``."""
    return doc[self.start : self.end]


class ScriptTagScanner(HTMLParser):
  """
  HTML Parser callback handler.
  Records the span and opening tag of every top-level ``<script>`` element.
  """

  def __init__(self, doc: str) -> None:
    super().__init__(convert_charrefs=False)
    self.doc = doc
    self.found: List[Tuple[int, int, int, str, Dict[str, Optional[str]]]] = []
    self._line_offsets = [0] + [m.end() for m in re.finditer("\n", doc)]
    self._open: Optional[Tuple[int, int, str, Dict[str, Optional[str]]]] = None

  def scan(self) -> List[Tuple[int, int, int, str, Dict[str, Optional[str]]]]:
    """
    Feeds the whole document.

    Returns:
        List of ``(tag_start, start, end, open_tag, attrs)`` tuples in document order.
    """
    self.feed(self.doc)
    self.close()
    return self.found

  def _offset(self) -> int:
    line, column = self.getpos()
    return self._line_offsets[line - 1] + column

  def handle_starttag(self, tag: str, attrs: List[Tuple[str, Optional[str]]]) -> None:
    if tag != "script" or self._open is not None:
      return
    tag_start = self._offset()
    open_tag = self.get_starttag_text() or ""
    self._open = (tag_start, tag_start + len(open_tag), open_tag, dict(attrs))

  def handle_startendtag(self, tag: str, attrs: List[Tuple[str, Optional[str]]]) -> None:
    # `<script src="x" />` has no content to process.
    return

  def handle_endtag(self, tag: str) -> None:
    if tag != "script" or self._open is None:
      return
    tag_start, start, open_tag, attrs = self._open
    self.found.append((tag_start, start, self._offset(), open_tag, attrs))
    self._open = None


class ContainerAdapter(ABC):
  """
  Base class for container adapters.

  Subclasses decide which script sections are template scoped; everything else
  (locating, splicing, marker removal) is shared.
  """

  name: str = ""

  @abstractmethod
  def is_template_scoped(self, attrs: Dict[str, Optional[str]]) -> bool:
    """
    Whether markup in the document can reference the section's bindings.

    Template scoped sections are erased but never import-pruned, since a
    binding used only from the template looks dead to the script alone.
    """

  def extract_sections(self, doc: str) -> List[ScriptSection]:
    """
    Locates every script section of the document.

    Args:
        doc: Full document text.

    Returns:
        List[ScriptSection]: Sections in document order.
    """
    return [
      ScriptSection(
        tag_start=tag_start,
        start=start,
        end=end,
        open_tag=open_tag,
        attrs=attrs,
        template_scoped=self.is_template_scoped(attrs),
      )
      for tag_start, start, end, open_tag, attrs in ScriptTagScanner(doc).scan()
    ]

  def extract_section(self, doc: str) -> Tuple[Optional[ScriptSection], bool]:
    """
    Returns the primary script section and whether it declares the typed dialect.

    The first typed section wins; without one, the first section (if any) is
    returned with ``False``.

    Args:
        doc: Full document text.

    Returns:
        Tuple[Optional[ScriptSection], bool]: The section and its dialect flag.
    """
    sections = self.extract_sections(doc)
    for section in sections:
      if section.declares_typed_dialect:
        return section, True
    return (sections[0] if sections else None), False

  def script_dialect(self, section: ScriptSection) -> DialectProfile:
    """
    Profile used to erase the section's content (TSX for ``lang="tsx"``).
    """
    if section.lang == "tsx":
      return resolve_dialect(Dialect.TSX)
    return resolve_dialect(Dialect.TS)

  def splice(self, doc: str, section: ScriptSection, new_text: str) -> str:
    """
    Replaces the section content and drops the dialect marker from its tag.

    Args:
        doc: Full document text the section was extracted from.
        section: The section to replace.
        new_text: Processed script text.

    Returns:
        str: The new document; all other bytes are unchanged.
    """
    open_tag = strip_dialect_marker(section.open_tag)
    return doc[: section.tag_start] + open_tag + new_text + doc[section.end :]


def strip_dialect_marker(open_tag: str) -> str:
  """
  Removes a ``lang="ts"`` style attribute from an opening tag.

  >>> strip_dialect_marker('<script setup lang="ts">')
  '<script setup>'
  """
  return _DIALECT_MARKER.sub("", open_tag, count=1)


_CONTAINER_REGISTRY: Dict[str, Type[ContainerAdapter]] = {}


def register_container(name: str):
  def wrapper(cls):
    cls.name = name
    _CONTAINER_REGISTRY[name] = cls
    return cls

  return wrapper


def get_container_adapter(name: str) -> Optional[ContainerAdapter]:
  cls = _CONTAINER_REGISTRY.get(name)
  if cls:
    return cls()
  return None
