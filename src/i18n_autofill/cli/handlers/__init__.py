from .inspect_component import handle_inspect

__all__ = [
  "handle_inspect",
]
