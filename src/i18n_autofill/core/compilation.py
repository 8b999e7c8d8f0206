"""
Build Context.

A `Compilation` is the explicit per-build context the pass runs against. It
owns everything that must not leak between builds: the import binding map, the
virtual module registry, the diagnostics list and the trace log.

A `ModuleState` is the per-file view handed to the pass for each module the
host traverses. It records the edits the pass requests (argument list
replacements and module-level variable bindings); `render` applies them to the
original source text.
"""

import os
import re
from typing import Dict, List, Optional, Set, Tuple

from i18n_autofill.core.bindings import ImportBindingMap
from i18n_autofill.core.filesystem import InputFileSystem, OSFileSystem
from i18n_autofill.core.manifest import LocaleManifest
from i18n_autofill.core.nodes import SourceRange
from i18n_autofill.core.tracer import TraceLogger
from i18n_autofill.core.virtual_modules import VirtualModules

# Optional shebang, then "use strict" / "use client" style directives with any
# comments between them. Module variables go after this prefix.
_PROLOGUE = re.compile(
  r"""\A(?:#![^\n]*(?:\n|\Z))?"""
  r"""(?:(?:\s|//[^\n]*|/\*.*?\*/)*(?:'[^'\\\n]*'|"[^"\\\n]*")[ \t]*;?[ \t]*(?:\n|\Z))*""",
  re.DOTALL,
)


def prologue_end(source: str) -> int:
  """Offset just past a module's shebang line and directive prologue."""
  return _PROLOGUE.match(source).end()


class Compilation:
  """
  State of one build run.
  """

  def __init__(self, fs: Optional[InputFileSystem] = None):
    """
    Args:
        fs: Host file system used to list translation directories. Defaults to the real disk.
    """
    self.fs: InputFileSystem = fs or OSFileSystem()
    self.tracer = TraceLogger()
    self.bindings = ImportBindingMap()
    self.virtual_modules = VirtualModules(tracer=self.tracer)
    self.errors: List[str] = []
    self._modules: Dict[str, "ModuleState"] = {}

  def module(self, resource: str, context: Optional[str] = None) -> "ModuleState":
    """
    Starts (or restarts) traversal of a file.

    A file traversed again within the same build (e.g. a watch rebuild) starts
    from a clean slate: its previous bindings and edits are discarded.

    Args:
        resource: Absolute path of the module file.
        context: Directory used to resolve relative requests. Defaults to the file's directory.

    Returns:
        ModuleState: Fresh per-file state.
    """
    self.bindings.forget(resource)
    state = ModuleState(self, resource, context)
    self._modules[resource] = state
    return state

  def get_module(self, resource: str) -> Optional["ModuleState"]:
    return self._modules.get(resource)

  def report_error(self, message: str) -> None:
    """Adds a build diagnostic. The build continues."""
    self.errors.append(message)
    self.tracer.log_diagnostic(message)

  @property
  def has_errors(self) -> bool:
    return len(self.errors) > 0


class ModuleState:
  """
  Per-file traversal state and requested edits.
  """

  def __init__(self, compilation: Compilation, resource: str, context: Optional[str] = None):
    self.compilation = compilation
    self.resource = resource
    self.context = context if context is not None else os.path.dirname(resource)
    self.replacements: Dict[SourceRange, str] = {}
    self.variables: Dict[str, str] = {}
    self.manifest: Optional[LocaleManifest] = None
    self.reported: Set[SourceRange] = set()
    self.skipped = False

  @property
  def basename(self) -> str:
    return os.path.basename(self.resource)

  @property
  def is_modified(self) -> bool:
    return bool(self.replacements or self.variables)

  def replace(self, source_range: SourceRange, text: str) -> None:
    """Requests that ``source[start:end]`` be replaced by ``text``."""
    self.replacements[tuple(source_range)] = text

  def add_variable(self, name: str, expression: str) -> bool:
    """
    Declares a module-level variable ahead of the module body.

    Returns:
        bool: False if the name was already declared with the same expression.

    Raises:
        ValueError: If the name is already bound to a different expression.
    """
    existing = self.variables.get(name)
    if existing == expression:
      return False
    if existing is not None:
      raise ValueError(f"Module variable '{name}' already bound to {existing} in {self.resource}")
    self.variables[name] = expression
    return True

  def render(self, source: str) -> str:
    """
    Applies the recorded edits to the original module source.

    Args:
        source: Text the host parsed.

    Returns:
        str: Edited text with module variables declared after any shebang
        or directive prologue.

    Raises:
        ValueError: If two replacements overlap.
    """
    ordered: List[Tuple[SourceRange, str]] = sorted(self.replacements.items())
    for (prev, _), (cur, _) in zip(ordered, ordered[1:]):
      if cur[0] < prev[1]:
        raise ValueError(f"Overlapping replacements {prev} and {cur} in {self.resource}")

    result = source
    for (start, end), text in reversed(ordered):
      result = result[:start] + text + result[end:]

    if not self.variables:
      return result

    header = "".join(f"var {name} = {expression};\n" for name, expression in self.variables.items())
    insert_at = prologue_end(source)
    if insert_at and not source[:insert_at].endswith("\n"):
      header = "\n" + header
    return result[:insert_at] + header + result[insert_at:]
