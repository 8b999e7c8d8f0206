"""
Virtual Module Registry.

Generated loader modules are never written to disk. They are stored in an
in-memory registry keyed by the path they would have on disk, which the host
consults when resolving imports.
"""

import logging
import os
import posixpath
from dataclasses import dataclass
from typing import Dict, Iterator, Optional

from i18n_autofill.core.manifest import translations_directory
from i18n_autofill.core.synthesizer import TRANSLATION_FACTORY_FILE
from i18n_autofill.core.tracer import TraceLogger

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InjectedModule:
  path: str
  source: str


def factory_module_path(component_dir: str) -> str:
  """
  Deterministic virtual path of a component's loader module.

  Args:
      component_dir: Directory containing the component.

  Returns:
      str: ``<component_dir>/translations/translationFactory.js``.
  """
  return os.path.join(translations_directory(component_dir), TRANSLATION_FACTORY_FILE)


class VirtualModules:
  """
  Path -> source registry for synthesized modules.
  """

  def __init__(self, tracer: Optional[TraceLogger] = None):
    self._modules: Dict[str, str] = {}
    self.tracer = tracer

  def write_module(self, path: str, source: str) -> bool:
    """
    Registers (or replaces) a module.

    Args:
        path: Absolute virtual path.
        source: Module source text.

    Returns:
        bool: True if the registry changed, False for an identical rewrite.
    """
    key = posixpath.normpath(path)
    if self._modules.get(key) == source:
      return False

    self._modules[key] = source
    logger.debug("Registered virtual module %s", key)
    if self.tracer:
      self.tracer.log_module(key, source)
    return True

  def register(self, module: InjectedModule) -> bool:
    return self.write_module(module.path, module.source)

  def exists(self, path: str) -> bool:
    return posixpath.normpath(path) in self._modules

  def read(self, path: str) -> str:
    """
    Raises:
        FileNotFoundError: If nothing was registered at the path.
    """
    try:
      return self._modules[posixpath.normpath(path)]
    except KeyError:
      raise FileNotFoundError(path) from None

  def __iter__(self) -> Iterator[InjectedModule]:
    for path in sorted(self._modules):
      yield InjectedModule(path=path, source=self._modules[path])

  def __len__(self) -> int:
    return len(self._modules)
