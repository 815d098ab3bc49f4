"""
Error taxonomy for the stripping pipeline.

The core never decides to skip a file. It either returns valid output or raises one
of the exceptions below; batch callers catch :class:`StripError` per file and move on.
"""

from typing import Iterable, Optional


class StripError(Exception):
  """Base class for all errors raised by strip-ts."""


class ParseError(StripError):
  """
  Raised when source text cannot be parsed under the requested dialect.

  Attributes:
      line (int): 1-based line of the first syntax error.
      column (int): 1-based column of the first syntax error.
      snippet (str): The offending source fragment (may be empty for missing tokens).
  """

  def __init__(self, message: str, line: int, column: int, snippet: str = "") -> None:
    self.line = line
    self.column = column
    self.snippet = snippet
    super().__init__(f"{message} at line {line}, column {column}")


class UnsupportedDialectError(StripError, ValueError):
  """
  Raised when a caller requests a dialect the pipeline does not recognise.
  """

  def __init__(self, dialect: str, supported: Optional[Iterable[str]] = None) -> None:
    self.dialect = dialect
    self.supported = sorted(supported or [])
    message = f"Unsupported dialect: '{dialect}'"
    if self.supported:
      message += f". Supported dialects: {', '.join(self.supported)}"
    super().__init__(message)


class UnsupportedFileTypeError(UnsupportedDialectError):
  """
  Raised when a file extension does not map to any dialect.
  """

  def __init__(self, path: str, supported: Optional[Iterable[str]] = None) -> None:
    super().__init__(path, supported)
    self.args = (f"Unsupported file type: {path}",)
