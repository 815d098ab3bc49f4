"""
Data structures representing the output of the stripping pipeline.

This module defines the `StripResult` Pydantic model, which encapsulates the
generated code, whether anything was processed at all, and any errors recorded
by the batch layer.
"""

from typing import List

from pydantic import BaseModel, Field


class StripResult(BaseModel):
  """
  Container for the result of stripping one document.
  """

  code: str = Field(default="", description="The generated source code.")
  dialect: str = Field(default="", description="Dialect key the input was processed as.")
  processed: bool = Field(
    default=True,
    description="False if the document was returned untouched because no section declared the typed dialect.",
  )
  removed_imports: List[str] = Field(default_factory=list, description="Import bindings pruned as unused.")
  errors: List[str] = Field(default_factory=list, description="List of error messages encountered.")
  success: bool = Field(default=True, description="True if the document was processed without a fatal error.")

  @property
  def has_errors(self) -> bool:
    """
    Check if the result contains any error messages.

    Returns:
        True if one or more errors are present.
    """
    return len(self.errors) > 0
