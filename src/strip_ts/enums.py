"""
Enumerations for strip-ts.

This module defines the standard enumerations used across the codebase for
dialect selection, erasure decisions and import binding categorisation.
"""

from enum import Enum


class Dialect(str, Enum):
  """
  Source dialects understood by the pipeline.

  ``TS`` and ``TSX`` are plain script sources; ``VUE`` and ``SVELTE`` are
  multi-section documents whose script sections are routed through a container adapter.
  """

  TS = "ts"
  TSX = "tsx"
  VUE = "vue"
  SVELTE = "svelte"


class ErasureAction(str, Enum):
  """
  Verdict of the node classifier for a single syntax node.
  """

  DELETE = "delete"  # drop the node and its subtree
  REPLACE_WITH_INNER = "replace_with_inner"  # keep only the wrapped expression
  NOOP = "noop"


class BindingKind(str, Enum):
  """
  Shape of a single import specifier.
  """

  DEFAULT = "default"  # import A from "m"
  NAMED = "named"  # import { A } from "m"
  NAMESPACE = "namespace"  # import * as A from "m"
