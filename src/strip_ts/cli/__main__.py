"""
Main Entry Point for the strip-ts CLI.

This module handles argument parsing and dispatches to the strip handler
defined in `strip_ts.cli.handlers`.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from strip_ts import __version__
from strip_ts.cli.handlers import handle_strip
from strip_ts.utils.console import log_error, set_verbose


def main(argv: Optional[List[str]] = None) -> int:
  """
  Main CLI entry point.

  Args:
      argv: Optional list of command line arguments (defaults to sys.argv).

  Returns:
      int: Exit code (0 for success, non-zero for failure).
  """
  parser = argparse.ArgumentParser(
    prog="strip-ts",
    description="strip-ts: Remove TypeScript types from .ts, .tsx, .vue and .svelte files",
  )
  parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
  parser.add_argument("patterns", nargs="*", metavar="GLOB", help="Input files or glob patterns (e.g. 'src/**/*.ts')")
  parser.add_argument("--out-dir", type=Path, default=None, help="Output directory (default: from toml, else 'output')")
  parser.add_argument(
    "--force-strip",
    action="store_true",
    default=None,
    help="Strip .vue/.svelte scripts even without a lang=\"ts\" marker (Overrides config)",
  )
  parser.add_argument(
    "--no-prune",
    dest="prune_imports",
    action="store_false",
    default=None,
    help="Keep imports that become unused after erasure (Overrides config)",
  )
  parser.add_argument("--stdout", action="store_true", help="Print results instead of writing files")
  parser.add_argument("-v", "--verbose", action="store_true", help="Show debug output")

  args = parser.parse_args(argv)

  if not args.patterns:
    log_error("No input files given. Usage: strip-ts [options] GLOB [GLOB ...]")
    return 1

  if args.verbose:
    set_verbose(True)

  return handle_strip(
    patterns=args.patterns,
    out_dir=args.out_dir,
    force_strip=args.force_strip,
    prune_imports=args.prune_imports,
    to_stdout=args.stdout,
  )


if __name__ == "__main__":
  sys.exit(main())
