"""
Property tests for erasure and pruning.

Programs are generated as lists of statements, each paired with its expected
untyped form, so the expected output of a whole program is known exactly.
"""

from hypothesis import given, settings, strategies as st

from strip_ts.core.engine import erase_and_prune
from strip_ts.core.eraser import erase
from strip_ts.core.import_fixer import prune_unused_imports

NAMES = st.sampled_from(["alpha", "beta", "count", "items", "value_1", "$el"])
TYPE_NAMES = st.sampled_from(["Foo", "Shape", "Props"])
TYPES = st.sampled_from(
  ["number", "string", "boolean", "Foo", "Array<string>", "Record<string, number>", "string[]", "Foo | null"]
)
VALUES = st.one_of(st.integers(min_value=0, max_value=999).map(str), st.sampled_from(['"x"', "'y'", "null", "[]"]))


@st.composite
def statements(draw):
  """Draws a ``(typed, untyped)`` statement pair; removed statements map to None."""
  form = draw(st.integers(min_value=0, max_value=5))
  n, t, v = draw(NAMES), draw(TYPES), draw(VALUES)
  if form == 0:
    return f"let {n}: {t} = {v};", f"let {n} = {v};"
  if form == 1:
    return f"const {n} = {v} as {t};", f"const {n} = {v};"
  if form == 2:
    return (
      f"function f_{n.strip('$')}(p: {t}): {t} {{ return p; }}",
      f"function f_{n.strip('$')}(p) {{ return p; }}",
    )
  if form == 3:
    return f"type {draw(TYPE_NAMES)} = {t};", None
  if form == 4:
    return f"interface {draw(TYPE_NAMES)} {{ {n.strip('$')}: {t}; }}", None
  return f"call({n}, {v});", f"call({n}, {v});"


def _program(lines):
  return "".join(f"{line}\n" for line in lines if line is not None)


@given(st.lists(statements(), min_size=1, max_size=8))
@settings(max_examples=50, deadline=None)
def test_erasure_matches_expected(pairs):
  typed = _program(p[0] for p in pairs)
  untyped = _program(p[1] for p in pairs)
  assert erase(typed) == untyped


@given(st.lists(statements(), min_size=1, max_size=8))
@settings(max_examples=50, deadline=None)
def test_untyped_input_is_unchanged(pairs):
  untyped = _program(p[1] for p in pairs)
  assert erase(untyped) == untyped


@given(st.lists(NAMES, min_size=1, max_size=5, unique=True), st.sampled_from(["ts", "tsx"]))
@settings(max_examples=30, deadline=None)
def test_pruning_keeps_used_bindings(names, dialect):
  code = f'import {{ {", ".join(names)} }} from "mod";\nimport "./side-effect";\nuse({", ".join(names)});\n'
  assert prune_unused_imports(code, dialect) == code


@given(st.lists(NAMES, min_size=1, max_size=6, unique=True), st.data(), st.sampled_from(["ts", "tsx"]))
@settings(max_examples=50, deadline=None)
def test_type_only_bindings_are_pruned(names, data, dialect):
  used = data.draw(st.lists(st.sampled_from(names), unique=True))
  dropped = [n for n in names if n not in used]
  # Dropped names are only mentioned in annotations, which erasure removes first.
  typed = "".join(f"let t_{i}: {n};\n" for i, n in enumerate(dropped))
  code = f'import {{ {", ".join(names)} }} from "mod";\n{typed}use({", ".join(used)});\n'

  result = erase_and_prune(code, dialect)

  for name in dropped:
    assert name not in result
  body = result.split("\n", 1)[1] if used else result
  assert body == "".join(f"let t_{i};\n" for i in range(len(dropped))) + f'use({", ".join(used)});\n'
  if used:
    assert result.startswith(f'import {{ {", ".join(n for n in names if n in used)} }} from "mod";\n')
