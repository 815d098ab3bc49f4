"""
strip-ts Package.

Removes TypeScript type syntax from ``.ts``/``.tsx`` scripts and from the typed
script sections of ``.vue``/``.svelte`` components, producing plain JavaScript
that keeps the original formatting and comments. Imports that only served the
type system are pruned afterwards.

Usage
-----

Simple String Conversion
^^^^^^^^^^^^^^^^^^^^^^^^

.. code-block:: python

    import strip_ts
    code = 'import { A, B } from "m"\\nconst x: B = A()'
    print(strip_ts.strip(code, dialect="ts"))
    # import { A } from "m"
    # const x = A()

Advanced Usage (Engine)
^^^^^^^^^^^^^^^^^^^^^^^

.. code-block:: python

    from strip_ts import StripEngine, RuntimeConfig

    engine = StripEngine(config=RuntimeConfig(force_strip=True))
    res = engine.run(open("Comp.vue").read(), "vue")

    if res.processed:
        print(res.code)
"""

from typing import Union

from strip_ts.config import RuntimeConfig
from strip_ts.core.conversion_result import StripResult
from strip_ts.core.dialects import DialectProfile
from strip_ts.core.engine import StripEngine, erase, erase_and_prune, prune_unused_imports
from strip_ts.core.errors import ParseError, StripError, UnsupportedDialectError, UnsupportedFileTypeError
from strip_ts.enums import Dialect

__version__ = "0.1.0"


def strip(
  code: str,
  dialect: Union[str, Dialect, DialectProfile] = Dialect.TS,
  force: bool = False,
  prune_imports: bool = True,
) -> str:
  """
  Strips types from a string of source code.

  This is a high-level convenience wrapper around the `StripEngine` that also
  accepts container dialects. For batch processing, consider using
  `strip_ts.cli` or `StripEngine` directly.

  Args:
      code (str): The source text.
      dialect (str): 'ts', 'tsx', 'mts', 'cts', 'vue' or 'svelte'.
      force (bool): Process container scripts even without a typed marker.
      prune_imports (bool): Remove imports that are unused after erasure.

  Returns:
      str: The untyped text. Containers without a typed script come back unchanged.

  Raises:
      ParseError: If a script cannot be parsed.
      UnsupportedDialectError: If the dialect is unknown.
  """
  engine = StripEngine(force=force, prune_imports=prune_imports)
  return engine.run(code, dialect).code


__all__ = [
  "Dialect",
  "ParseError",
  "RuntimeConfig",
  "StripEngine",
  "StripError",
  "StripResult",
  "UnsupportedDialectError",
  "UnsupportedFileTypeError",
  "__version__",
  "erase",
  "erase_and_prune",
  "prune_unused_imports",
  "strip",
]
