"""
Svelte component adapter.

Svelte markup can reference any top-level binding of the component's script
(including components used only as tags), so every script section is template
scoped: erasure runs, import pruning does not.
"""

from typing import Dict, Optional

from strip_ts.containers.base import ContainerAdapter, register_container


@register_container("svelte")
class SvelteAdapter(ContainerAdapter):
  """
  Adapter for Svelte component documents.
  """

  def is_template_scoped(self, attrs: Dict[str, Optional[str]]) -> bool:
    return True
