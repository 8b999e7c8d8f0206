"""
Autofill Plugin Facade.

Wires the import tracker and the call site rewriter to the host's per-file
traversal. Each file goes through two phases:

1.  **Imports**: every import specifier is reported with `on_import_specifier`.
2.  **Calls**: every call expression is reported with `on_call_expression`.

The first call event of a file closes its import phase. Import events that
arrive later raise `BindingPhaseError` instead of silently producing a partial
binding set. Hosts that already hold both lists can use `process_module`,
which runs the phases in order.

Usage::

    plugin = I18nAutofillPlugin(PluginOptions(fallback_locale="en"))
    compilation = plugin.create_compilation()

    state = compilation.module("/app/Header/Header.tsx")
    plugin.process_module(state, imports, calls)
    new_source = state.render(source)
"""

import logging
from typing import Any, Iterable, Optional

from i18n_autofill.config import PluginOptions
from i18n_autofill.core.bindings import ImportBindingTracker
from i18n_autofill.core.compilation import Compilation, ModuleState
from i18n_autofill.core.filesystem import InputFileSystem
from i18n_autofill.core.nodes import ImportSpecifier
from i18n_autofill.core.rewriter import CallSiteRewriter

PLUGIN_NAME = "I18nAutofillPlugin"

logger = logging.getLogger(__name__)


class I18nAutofillPlugin:
  """
  Build-time pass filling in ``useI18n()`` / ``withI18n()`` arguments.
  """

  def __init__(self, options: Optional[PluginOptions] = None):
    """
    Args:
        options: Plugin options. Defaults to ``PluginOptions()`` (fallback 'en').
    """
    self.options = options or PluginOptions()
    self.rewriter = CallSiteRewriter(self.options)

  def create_compilation(self, fs: Optional[InputFileSystem] = None) -> Compilation:
    """
    Starts a build run.

    Args:
        fs: Host file system. Defaults to the real disk.

    Returns:
        Compilation: Fresh per-build context.
    """
    return Compilation(fs=fs)

  def _tracker(self, state: ModuleState) -> ImportBindingTracker:
    compilation = state.compilation
    return ImportBindingTracker(
      compilation.bindings,
      import_sources=self.options.import_sources,
      tracer=compilation.tracer,
    )

  def on_import_specifier(self, state: ModuleState, specifier: ImportSpecifier) -> bool:
    """
    Import phase event.

    Returns:
        bool: True if the specifier bound a recognized export.

    Raises:
        BindingPhaseError: If the file's call phase already started.
    """
    return self._tracker(state).observe(state.resource, specifier)

  def begin_calls(self, state: ModuleState) -> None:
    """
    Closes the import phase of a file. Idempotent.

    A file with no recognized import is marked as skipped so none of its
    calls are inspected. Files inside `vendor_directories` are traced with
    the 'vendored' outcome instead of 'skipped'.
    """
    bindings = state.compilation.bindings
    if bindings.is_sealed(state.resource):
      return

    bindings.seal(state.resource)
    if state.resource not in bindings:
      state.skipped = True
      if self.options.is_vendored(state.resource):
        logger.debug("Skipping vendored module %s", state.resource)
        state.compilation.tracer.log_inspection(
          state.resource, "vendored", "third-party module without recognized imports"
        )
      else:
        state.compilation.tracer.log_inspection(state.resource, "skipped", "no recognized imports")

  def on_call_expression(self, state: ModuleState, call: Any) -> int:
    """
    Call phase event.

    Returns:
        int: Number of call sites rewritten by this event.
    """
    self.begin_calls(state)
    return self.rewriter.visit_call(state, call)

  def process_module(
    self,
    state: ModuleState,
    imports: Iterable[ImportSpecifier],
    calls: Iterable[Any],
  ) -> int:
    """
    Runs both phases for one file.

    Args:
        state: Per-file state from `Compilation.module`.
        imports: All import specifiers of the file.
        calls: All call expressions of the file, in traversal order.

    Returns:
        int: Number of call sites rewritten.
    """
    tracer = state.compilation.tracer

    tracer.start_phase("Imports", state.resource)
    for specifier in imports:
      self.on_import_specifier(state, specifier)
    tracer.end_phase()

    tracer.start_phase("Calls", state.resource)
    self.begin_calls(state)
    rewritten = 0
    if not state.skipped:
      for call in calls:
        rewritten += self.on_call_expression(state, call)
    tracer.end_phase()

    return rewritten
