"""
Import Binding Tracking.

Records which local identifiers are bound to the recognized localization
exports, per file. A file that never imports them gets no entry at all, which
downstream code reads as "nothing to do".

The tracker is one half of a two-phase per-file contract: all import
specifiers of a file are observed before any of its call expressions are
matched. `ImportBindingMap.seal` marks the switch, after which further import
events for that file are rejected.
"""

import logging
from typing import Collection, Dict, Iterable, Optional, Set

from i18n_autofill.core.nodes import ImportSpecifier
from i18n_autofill.core.tracer import TraceLogger
from i18n_autofill.enums import I18nExport

logger = logging.getLogger(__name__)


class BindingPhaseError(RuntimeError):
  """Raised when an import event arrives after a file's call phase began."""


class ImportBindingMap:
  """
  file path -> export name -> local identifier, scoped to one build.
  """

  def __init__(self) -> None:
    self._bindings: Dict[str, Dict[str, str]] = {}
    self._sealed: Set[str] = set()

  def bind(self, file_path: str, export_name: str, local_name: str) -> None:
    """
    Records a binding, overwriting any earlier alias of the same export.

    Raises:
        BindingPhaseError: If the file's call phase already started.
    """
    if file_path in self._sealed:
      raise BindingPhaseError(f"Import of '{export_name}' observed after call matching began for {file_path}")
    self._bindings.setdefault(file_path, {})[export_name] = local_name

  def local_names(self, file_path: str) -> Set[str]:
    """Local identifiers bound to recognized exports in a file."""
    return set(self._bindings.get(file_path, {}).values())

  def seal(self, file_path: str) -> None:
    """Ends the import phase of a file."""
    self._sealed.add(file_path)

  def is_sealed(self, file_path: str) -> bool:
    return file_path in self._sealed

  def forget(self, file_path: str) -> None:
    """Drops all state for a file so it can be traversed again (watch rebuilds)."""
    self._bindings.pop(file_path, None)
    self._sealed.discard(file_path)

  def __contains__(self, file_path: object) -> bool:
    return file_path in self._bindings

class ImportBindingTracker:
  """
  Filters import-specifier events down to the recognized exports.
  """

  def __init__(
    self,
    bindings: ImportBindingMap,
    import_sources: Collection[str] = (),
    tracer: Optional[TraceLogger] = None,
  ):
    """
    Args:
        bindings: The build's binding map.
        import_sources: Accepted module specifiers. Empty accepts any source.
        tracer: Optional trace log for recorded bindings.
    """
    self.bindings = bindings
    self.import_sources = frozenset(import_sources)
    self.tracer = tracer
    self._export_names = I18nExport.names()

  def observe(self, file_path: str, specifier: ImportSpecifier) -> bool:
    """
    Processes one import specifier of a file.

    Args:
        file_path: Absolute path of the importing file.
        specifier: The import specifier event.

    Returns:
        bool: True if a binding was recorded.
    """
    if specifier.export_name not in self._export_names:
      return False
    if self.import_sources and specifier.source not in self.import_sources:
      return False

    self.bindings.bind(file_path, specifier.export_name, specifier.local_name)
    logger.debug("%s: %s bound to %s", file_path, specifier.export_name, specifier.local_name)
    if self.tracer:
      self.tracer.log_binding(file_path, specifier.export_name, specifier.local_name)
    return True

  def observe_all(self, file_path: str, specifiers: Iterable[ImportSpecifier]) -> int:
    """
    Processes every import specifier of a file.

    Returns:
        int: Number of bindings recorded.
    """
    return sum(1 for s in specifiers if self.observe(file_path, s))
