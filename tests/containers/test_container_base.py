"""
Tests for script section location, splicing and the adapter registry.
"""

from typing import Dict, Optional

import pytest

from strip_ts.containers import (
  ContainerAdapter,
  available_containers,
  get_container_adapter,
  register_container,
  strip_dialect_marker,
)
from strip_ts.containers.vue import VueAdapter

DOC = '<template><p>hi</p></template>\n<script lang="ts">\nlet a: number = 1;\n</script>\n<style>p{}</style>\n'


def test_registry_contains_builtin_adapters():
  assert available_containers() == ["svelte", "vue"]
  assert isinstance(get_container_adapter("vue"), VueAdapter)
  assert get_container_adapter("jsp") is None


def test_custom_adapter_registration():
  @register_container("astro")
  class AstroAdapter(ContainerAdapter):
    def is_template_scoped(self, attrs: Dict[str, Optional[str]]) -> bool:
      return False

  assert AstroAdapter.name == "astro"
  assert "astro" in available_containers()
  assert isinstance(get_container_adapter("astro"), AstroAdapter)


def test_registry_isolated_between_tests():
  assert "astro" not in available_containers()


def test_section_offsets():
  section, declared = VueAdapter().extract_section(DOC)
  assert declared
  assert section.content(DOC) == "\nlet a: number = 1;\n"
  assert DOC[section.tag_start : section.start] == '<script lang="ts">'
  assert section.open_tag == '<script lang="ts">'
  assert section.lang == "ts"
  assert not section.template_scoped


def test_section_offsets_after_multibyte_text():
  doc = '<p>héllo wörld ✓</p>\n<script lang="ts">\nx;\n</script>'
  section, _ = VueAdapter().extract_section(doc)
  assert section.content(doc) == "\nx;\n"


def test_no_script_section():
  section, declared = VueAdapter().extract_section("<template><div/></template>\n")
  assert section is None
  assert not declared


def test_undeclared_section_reported():
  doc = "<script>\nexport default {}\n</script>\n"
  section, declared = VueAdapter().extract_section(doc)
  assert section is not None
  assert not declared


def test_typed_section_preferred():
  doc = '<script>\nexport default {}\n</script>\n<script setup lang="ts">\nlet a: A;\n</script>\n'
  sections = VueAdapter().extract_sections(doc)
  assert [s.template_scoped for s in sections] == [False, True]
  section, declared = VueAdapter().extract_section(doc)
  assert declared
  assert section.template_scoped


def test_splice_preserves_other_bytes():
  adapter = VueAdapter()
  section, _ = adapter.extract_section(DOC)
  out = adapter.splice(DOC, section, "\nlet a = 1;\n")
  assert out == "<template><p>hi</p></template>\n<script>\nlet a = 1;\n</script>\n<style>p{}</style>\n"


@pytest.mark.parametrize(
  "tag, expected",
  [
    ('<script lang="ts">', "<script>"),
    ("<script lang='tsx'>", "<script>"),
    ("<script setup lang=ts>", "<script setup>"),
    ('<script lang="TypeScript" context="module">', '<script context="module">'),
    ('<script lang="js">', '<script lang="js">'),
    ('<script setup lang="ts" generic="T">', '<script setup generic="T">'),
  ],
)
def test_strip_dialect_marker(tag, expected):
  assert strip_dialect_marker(tag) == expected


def test_tsx_section_uses_markup_grammar():
  doc = '<script lang="tsx">\nconst e = <div />;\n</script>'
  adapter = VueAdapter()
  section, _ = adapter.extract_section(doc)
  assert adapter.script_dialect(section).name == "tsx"
