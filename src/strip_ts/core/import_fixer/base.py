"""
Base Import Fixer Logic.

Defines the base class for the ImportFixer, holding the dialect configuration and
the liveness rule applied to each import binding.
"""

from typing import FrozenSet, Optional

from strip_ts.core.dialects import DialectProfile
from strip_ts.core.import_fixer.utils import ImportBinding
from strip_ts.core.scanners import IdentifierUsage
from strip_ts.enums import BindingKind


class BaseImportFixer:
  """
  Base class for import pruning.

  Manages the dialect profile and decides whether a single binding is live
  against a module's :class:`IdentifierUsage`.
  """

  def __init__(self, profile: DialectProfile, implicit_bindings: Optional[FrozenSet[str]] = None) -> None:
    """
    Initializes the fixer state.

    Args:
        profile: Dialect of the module being fixed.
        implicit_bindings: Overrides the profile's implicit markup bindings
            (default imports that are live only through plain identifier use).
    """
    self.profile = profile
    if implicit_bindings is None:
      implicit_bindings = profile.implicit_markup_bindings
    self.implicit_bindings = frozenset(implicit_bindings)

  def is_live(self, binding: ImportBinding, usage: IdentifierUsage) -> bool:
    """
    Decides whether a binding survives.

    A binding is live if its local name is used as a plain identifier or as a
    markup tag. The exception is an implicit markup binding (``React`` under TSX)
    imported as a default binding: the markup extension references it
    structurally, never by name, so only plain uses keep it.

    Args:
        binding: The import specifier.
        usage: Usage sets of the module.

    Returns:
        bool: True if the binding must be kept.
    """
    if binding.kind == BindingKind.DEFAULT and binding.local_name in self.implicit_bindings:
      return binding.local_name in usage.plain_uses
    return usage.is_used(binding.local_name)
