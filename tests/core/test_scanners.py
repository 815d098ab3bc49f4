"""
Tests for identifier usage scanning.
"""

from strip_ts.core.dialects import resolve_dialect
from strip_ts.core.parsing import parse
from strip_ts.core.scanners import IdentifierUsage, UsageScanner


def _scan(code: str, dialect: str = "ts") -> IdentifierUsage:
  profile = resolve_dialect(dialect)
  source = code.encode("utf-8")
  tree = parse(source, profile)
  return UsageScanner(source, markup=profile.markup).scan(tree.root_node)


def test_import_declarations_are_skipped():
  usage = _scan('import { a, b } from "m";\nfoo(a.c);\n')
  assert "a" in usage.plain_uses
  assert "foo" in usage.plain_uses
  assert "c" in usage.plain_uses
  assert "b" not in usage.plain_uses
  assert not usage.markup_uses


def test_shorthand_and_patterns():
  usage = _scan("const { x } = obj;\nconst y = { z };\n")
  assert {"x", "obj", "y", "z"} <= usage.plain_uses


def test_type_identifiers_count():
  usage = _scan("let v: Model;")
  assert "Model" in usage.plain_uses


def test_markup_namespace():
  usage = _scan("const el = <Panel title={heading}><Foo.Bar /></Panel>;", "tsx")
  assert "Panel" in usage.markup_uses
  assert "title" in usage.markup_uses
  assert "heading" in usage.plain_uses
  # The object of a dotted tag is a real reference.
  assert "Foo" in usage.plain_uses
  assert "Panel" not in usage.plain_uses


def test_is_used_checks_both_namespaces():
  usage = IdentifierUsage(plain_uses={"a"}, markup_uses={"B"})
  assert usage.is_used("a")
  assert usage.is_used("B")
  assert not usage.is_used("c")


def test_markup_disabled_routes_everything_to_plain():
  code = "const el = <Panel />;"
  source = code.encode("utf-8")
  tree = parse(source, resolve_dialect("tsx"))
  usage = UsageScanner(source, markup=False).scan(tree.root_node)
  assert "Panel" in usage.plain_uses
  assert not usage.markup_uses
