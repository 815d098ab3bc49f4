"""
Strip Command Handler.

This module implements the logic for the `strip-ts` command.
It orchestrates:
1. Configuration loading (pyproject.toml + CLI overrides).
2. Input discovery from glob patterns.
3. Per-file stripping via the Engine.
4. Output writing and the batch summary.

A failure in one file is recorded and reported; the remaining files are still processed.
"""

from pathlib import Path
from typing import Dict, List, Optional

from rich.table import Table

from strip_ts.config import RuntimeConfig
from strip_ts.core.conversion_result import StripResult
from strip_ts.core.dialects import dialect_for_path
from strip_ts.core.engine import StripEngine
from strip_ts.core.errors import StripError
from strip_ts.utils.console import (
  console,
  log_error,
  log_info,
  log_success,
  log_warning,
)
from strip_ts.utils.files import expand_globs, output_path_for


def handle_strip(
  patterns: List[str],
  out_dir: Optional[Path],
  force_strip: Optional[bool],
  prune_imports: Optional[bool],
  to_stdout: bool = False,
) -> int:
  """
  Handles the 'strip' command execution.

  Args:
      patterns: Glob patterns selecting the input files.
      out_dir: Override for the output directory.
      force_strip: Process container scripts without a typed marker (overrides config).
      prune_imports: Whether to remove unused imports (overrides config).
      to_stdout: Print results instead of writing files.

  Returns:
      int: Exit code (0 if every file succeeded, 1 otherwise).
  """
  files = expand_globs(patterns)
  if not files:
    log_warning(f"No files matched: {' '.join(patterns)}")
    return 1

  config = RuntimeConfig.load(
    out_dir=out_dir,
    force_strip=force_strip,
    prune_imports=prune_imports,
  )
  engine = StripEngine(config=config)

  if not to_stdout:
    log_info(f"Processing {len(files)} files into [path]{config.out_dir}[/path]...")

  batch_results: Dict[str, StripResult] = {}
  for src_file in files:
    dest_file = None if to_stdout else config.out_dir
    batch_results[str(src_file)] = _strip_single_file(src_file, dest_file, engine)

  if not to_stdout:
    _print_batch_summary(batch_results)
  return 0 if all(r.success for r in batch_results.values()) else 1


def _strip_single_file(input_path: Path, out_dir: Optional[Path], engine: StripEngine) -> StripResult:
  """
  Helper to execute the pipeline on a single file.

  Args:
      input_path: Source file path.
      out_dir: Output directory. If None, the result is printed to stdout.
      engine: Configured engine.

  Returns:
      StripResult: Result object containing status and code.
  """
  try:
    profile = dialect_for_path(input_path)
    with open(input_path, "rt", encoding="utf-8") as f:
      code = f.read()
    result = engine.run(code, profile)

    if not result.processed:
      log_info(f"Skipped (no typed script): [path]{input_path}[/path]")
      return result

    if out_dir is None:
      print(result.code)
      return result

    output_path = output_path_for(input_path, profile, out_dir)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "wt", encoding="utf-8") as f:
      f.write(result.code)
    log_success(f"Stripped: [path]{input_path}[/path] -> [path]{output_path}[/path]")
    return result
  except (StripError, OSError, UnicodeDecodeError) as e:
    log_error(f"Failed to strip {input_path}: {e}")
    return StripResult(success=False, errors=[str(e)])


def _print_batch_summary(results: Dict[str, StripResult]) -> None:
  """
  Renders a summary table of stripping results to the console.

  Args:
      results: Dictionary mapping filenames to results.
  """
  total = len(results)
  failures = sum(1 for r in results.values() if not r.success)
  skipped = sum(1 for r in results.values() if r.success and not r.processed)
  successes = total - failures - skipped

  if failures == 0:
    log_success(f"Batch Complete: {successes}/{total} files stripped, {skipped} skipped.")
    return

  table = Table(title="Strip Report")
  table.add_column("File", style="cyan")
  table.add_column("Status", justify="center")
  table.add_column("Issues", style="red")

  for filename, res in results.items():
    if res.success:
      continue
    issues = "; ".join(res.errors) if res.errors else "Unknown Error"
    table.add_row(filename, "❌ Failed", issues)

  console.print(table)
  console.print(f"\n[bold]Summary:[/bold] {successes} Stripped, {skipped} Skipped, {failures} Failed.")
