"""
Tests for the logging and console utilities.

Verifies:
1. Proxy delegation and backend injection.
2. Logging wrappers and their prefixes.
3. Debug output from pipeline modules behind the verbose switch.
"""

import logging

import pytest
from rich.console import Console

from strip_ts.utils.console import (
  SUCCESS_LEVEL_NUM,
  console,
  get_console,
  log_error,
  log_info,
  log_success,
  log_warning,
  reset_console,
  set_console,
  set_verbose,
)


@pytest.fixture(autouse=True)
def cleanup_console():
  """Ensures console and log level are reset after every test."""
  reset_console()
  yield
  set_verbose(False)
  reset_console()


def test_proxy_forwards_to_backend():
  assert callable(console.print)
  assert isinstance(get_console(), Console)
  assert isinstance(console.width, int)


def test_injected_console_captures_logs():
  capture = Console(record=True, width=120)
  set_console(capture)
  assert get_console() is capture

  log_info("scanning src")
  log_success("stripped 3 files")
  log_warning("nothing matched")
  log_error("broken.ts")

  output = capture.export_text()
  for text in ("scanning src", "stripped 3 files", "nothing matched", "broken.ts"):
    assert text in output
  assert "✅" in output
  assert "❌" in output


def test_single_rich_handler_after_swaps():
  set_console(Console(record=True))
  set_console(Console(record=True))
  from rich.logging import RichHandler

  handlers = [h for h in logging.getLogger().handlers if isinstance(h, RichHandler)]
  assert len(handlers) == 1


def test_reset_creates_fresh_backend():
  temp = Console()
  set_console(temp)
  reset_console()
  assert get_console() is not temp


def test_success_level_registered():
  assert logging.getLevelName(SUCCESS_LEVEL_NUM) == "SUCCESS"


def test_verbose_switch_shows_debug_output():
  capture = Console(record=True, width=200)
  set_console(capture)

  logging.getLogger("strip_ts.core.eraser").debug("hidden detail")
  assert "hidden detail" not in capture.export_text()

  set_verbose(True)
  logging.getLogger("strip_ts.core.eraser").debug("visible detail")
  assert "visible detail" in capture.export_text()
