"""
Tests for planned text edits and statement span widening.
"""

from types import SimpleNamespace

from strip_ts.core.edits import Edit, EditPlan, statement_span


def _node(start: int, end: int) -> SimpleNamespace:
  return SimpleNamespace(start_byte=start, end_byte=end)


def test_apply_without_edits_returns_source():
  plan = EditPlan(b"const a = 1;")
  assert plan.apply() == b"const a = 1;"
  assert len(plan) == 0


def test_edits_applied_in_source_order():
  plan = EditPlan(b"abcdef")
  plan.delete(4, 5)
  plan.replace(0, 1, b"X")
  assert plan.apply() == b"Xbcdf"


def test_empty_span_ignored():
  plan = EditPlan(b"abc")
  plan.delete(2, 2)
  assert len(plan) == 0


def test_overlapping_edits_are_clipped():
  plan = EditPlan(b"0123456789")
  plan.delete(2, 6)
  plan.delete(4, 8)  # overlaps the tail of the first
  plan.delete(3, 5)  # fully covered
  assert plan.apply() == b"0189"


def test_delete_inline_absorbs_leading_spaces():
  source = b"(u : U)"
  plan = EditPlan(source)
  plan.delete_inline(_node(3, 6))
  assert plan.apply() == b"(u)"


def test_delete_leading_absorbs_trailing_spaces():
  source = b"  private  x = 1;"
  plan = EditPlan(source)
  plan.delete_leading(_node(2, 9))
  assert plan.apply() == b"  x = 1;"


def test_statement_span_owns_line():
  source = b"type A = 1;\nlet x = 1;\n"
  assert statement_span(source, 0, 10) == (0, 12)


def test_statement_span_indented_line():
  source = b"{\n  type A = 1;\n}\n"
  start = source.index(b"type")
  assert statement_span(source, start, start + 10) == (2, 16)


def test_statement_span_mid_line():
  source = b"let a = 1; type A = 1; let b = 2;"
  start = source.index(b"type")
  span = statement_span(source, start, start + 10)
  assert source[: span[0]] + source[span[1] :] == b"let a = 1; let b = 2;"


def test_statement_span_shared_line_end():
  source = b"let a = 1; type A = 1;\n"
  start = source.index(b"type")
  span = statement_span(source, start, start + 10)
  assert source[: span[0]] + source[span[1] :] == b"let a = 1;\n"


def test_statement_span_crlf():
  source = b"type A = 1\r\nx\r\n"
  assert statement_span(source, 0, 10) == (0, 12)


def test_statement_span_last_line_without_newline():
  source = b"x;\ntype A = 1"
  assert statement_span(source, 3, 13) == (3, 13)


def test_delete_statement_records_widened_span():
  source = b"a;\ninterface I {}\nb;\n"
  plan = EditPlan(source)
  start = source.index(b"interface")
  plan.delete_statement(_node(start, start + len(b"interface I {}")))
  assert plan.edits == [Edit(3, 18)]
  assert plan.apply() == b"a;\nb;\n"
