from .strip import handle_strip, _strip_single_file, _print_batch_summary

__all__ = [
  "_print_batch_summary",
  "_strip_single_file",
  "handle_strip",
]
