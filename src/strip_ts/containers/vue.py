"""
Vue Single-File Component adapter.

A ``.vue`` file may hold a classic ``<script>`` block and a ``<script setup>``
block. Top-level bindings of ``<script setup>`` are exposed to the template, so
that block is template scoped; the classic block registers what it uses
explicitly (``components: { ... }``) and can be import-pruned.

Type arguments are erased like any other generics, so the type-based macro
forms ``defineProps<{ a: string }>()`` and ``defineEmits<...>()`` come out as
bare ``defineProps()`` / ``defineEmits()`` and the component loses the props and
events the Vue compiler would have derived from the type. Components that must
survive erasure declare them with the runtime argument forms
(``defineProps({ a: String })``).
"""

from typing import Dict, Optional

from strip_ts.containers.base import ContainerAdapter, register_container


@register_container("vue")
class VueAdapter(ContainerAdapter):
  """
  Adapter for Vue SFC documents.
  """

  def is_template_scoped(self, attrs: Dict[str, Optional[str]]) -> bool:
    return "setup" in attrs
