"""
Input discovery and output naming for batch runs.
"""

import glob
from pathlib import Path
from typing import Iterable, List, Optional

from strip_ts.core.dialects import DialectProfile


def expand_globs(patterns: Iterable[str]) -> List[Path]:
  """
  Expands shell-style patterns into a de-duplicated list of files.

  ``**`` matches across directories. A pattern naming an existing file literally
  is kept even if it contains glob metacharacters.

  Args:
      patterns: Glob patterns or plain paths, in command-line order.

  Returns:
      List[Path]: Matching regular files in first-seen order.
  """
  seen = set()
  files: List[Path] = []
  for pattern in patterns:
    matches = sorted(glob.glob(pattern, recursive=True))
    if not matches and Path(pattern).is_file():
      matches = [pattern]
    for match in matches:
      path = Path(match)
      if not path.is_file():
        continue
      key = path.resolve()
      if key in seen:
        continue
      seen.add(key)
      files.append(path)
  return files


def output_path_for(path: Path, profile: DialectProfile, out_dir: Optional[Path]) -> Path:
  """
  Computes the destination of a stripped file.

  Scripts get the untyped extension of their dialect (``a.ts`` -> ``a.js``,
  ``b.tsx`` -> ``b.jsx``); container documents keep theirs.

  Args:
      path: The input file.
      profile: The dialect profile resolved for ``path``.
      out_dir: Target directory. If None, output is written next to the input.

  Returns:
      Path: The output file path.
  """
  name = path.name if profile.output_suffix is None else path.with_suffix(profile.output_suffix).name
  parent = path.parent if out_dir is None else out_dir
  return parent / name
