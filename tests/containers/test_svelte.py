"""
Tests for Svelte components through the engine.
"""

import pytest

from strip_ts.core.engine import StripEngine
from strip_ts.core.errors import ParseError


def test_component_erased_imports_kept(read_example):
  result = StripEngine().run(read_example("Greeting.svelte"), "svelte")
  assert result.processed
  assert result.code == read_example("Greeting.expected.svelte")


def test_markup_only_import_survives():
  doc = '<script lang="ts">\n  import Child from "./Child.svelte";\n  let n: number = 0;\n</script>\n\n<Child {n} />\n'
  expected = '<script>\n  import Child from "./Child.svelte";\n  let n = 0;\n</script>\n\n<Child {n} />\n'
  assert StripEngine().run(doc, "svelte").code == expected


def test_module_context_script():
  doc = '<script context="module" lang="ts">\n  export const prerender: boolean = true;\n</script>\n<p>x</p>\n'
  expected = '<script context="module">\n  export const prerender = true;\n</script>\n<p>x</p>\n'
  assert StripEngine().run(doc, "svelte").code == expected


def test_untyped_component_unchanged():
  doc = "<script>\n  let n = 0;\n</script>\n<button on:click={() => n++}>{n}</button>\n"
  result = StripEngine().run(doc, "svelte")
  assert result.processed is False
  assert result.code == doc


def test_empty_typed_script():
  doc = '<script lang="ts"></script>\n<p/>\n'
  result = StripEngine().run(doc, "svelte")
  assert result.processed
  assert result.code == "<script></script>\n<p/>\n"


def test_script_parse_error_propagates():
  doc = '<script lang="ts">\n  let = ;\n</script>\n'
  with pytest.raises(ParseError):
    StripEngine().run(doc, "svelte")
