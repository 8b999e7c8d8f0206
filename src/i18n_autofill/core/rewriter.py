"""
Call Site Rewriting.

Turns each eligible ``useI18n()`` / ``withI18n()`` call into one carrying the
component's translation bundle description. Per candidate the rewriter:

1.  Resolves the locale manifest of the component directory (once per file).
2.  Aborts with a build diagnostic if locale files exist without the fallback.
3.  Declares the fallback dictionary and the loader as module variables.
4.  Registers the loader module in the virtual module registry.
5.  Replaces the call's argument list with the synthesized object literal.

Nothing here raises for a resolution failure; the worst outcome is an
untouched call site plus a diagnostic.
"""

import logging
import os
from typing import Any

from rich.markup import escape

from i18n_autofill.config import PluginOptions
from i18n_autofill.core.compilation import ModuleState
from i18n_autofill.core.ids import camel_case, chunk_name, generate_id
from i18n_autofill.core.manifest import TRANSLATION_DIRECTORY_NAME, LocaleManifest, resolve_manifest
from i18n_autofill.core.matcher import RewriteCandidate, find_candidates
from i18n_autofill.core.nodes import SourceRange, arguments_range
from i18n_autofill.core.synthesizer import (
  TRANSLATION_FACTORY_FILE,
  TRANSLATION_FACTORY_NAME,
  SynthesizedArgument,
  build_factory_source,
  i18n_call_arguments,
  require_expression,
)
from i18n_autofill.core.virtual_modules import InjectedModule, factory_module_path
from i18n_autofill.utils.console import log_warning

logger = logging.getLogger(__name__)


def missing_fallback_message(resource: str, identifier: str, fallback_path: str) -> str:
  """Diagnostic text for a component with locale files but no fallback file."""
  return (
    f"{resource}\n"
    f"{identifier}'s arguments were not automatically filled in because "
    f"the fallback translation file was not found at {fallback_path}\n"
  )


def component_name(resource: str) -> str:
  """``/src/Header/Header.tsx`` -> ``Header``."""
  return os.path.basename(resource).split(".")[0]


class CallSiteRewriter:
  """
  Applies the autofill rewrite to the calls of a module.
  """

  def __init__(self, options: PluginOptions):
    self.options = options

  def visit_call(self, state: ModuleState, call: Any) -> int:
    """
    Handles one call expression of a module.

    Args:
        state: Per-file state; its bindings must already be collected.
        call: CallExpression-like node.

    Returns:
        int: Number of call sites rewritten.
    """
    if state.skipped:
      return 0

    local_names = state.compilation.bindings.local_names(state.resource)
    candidates = find_candidates(call, local_names)
    if not candidates:
      return 0

    return sum(1 for candidate in candidates if self.rewrite(state, candidate))

  def manifest_for(self, state: ModuleState) -> LocaleManifest:
    """Resolves the module's manifest once and reuses it for later candidates."""
    if state.manifest is None:
      state.manifest = resolve_manifest(
        state.compilation.fs,
        state.context,
        self.options.fallback_locale,
        validate=self.options.validate_locale_names,
      )
      if state.manifest.rejected:
        state.compilation.tracer.log_inspection(
          state.resource, "ignored_entries", ", ".join(state.manifest.rejected)
        )
    return state.manifest

  def rewrite(self, state: ModuleState, candidate: RewriteCandidate) -> bool:
    """
    Rewrites one candidate.

    Args:
        state: Per-file state.
        candidate: Eligible zero-argument call.

    Returns:
        bool: True if the call's arguments were replaced.
    """
    compilation = state.compilation
    tracer = compilation.tracer
    target_range = arguments_range(candidate.call)

    if target_range in state.replacements:
      # Already handled, e.g. visited once via compose(...) and once directly.
      return False

    manifest = self.manifest_for(state)
    if manifest.is_empty:
      tracer.log_inspection(f"{candidate.identifier}()", "skipped", "no translation files")
      return False

    if not manifest.has_fallback:
      self._report_missing_fallback(state, candidate, manifest, target_range)
      return False

    fallback_binding = camel_case(self.options.fallback_locale)
    component_id = generate_id(component_name(state.resource))

    state.add_variable(fallback_binding, require_expression(manifest.fallback_relative_path()))
    state.add_variable(
      TRANSLATION_FACTORY_NAME,
      require_expression(f"./{TRANSLATION_DIRECTORY_NAME}/{TRANSLATION_FACTORY_FILE}"),
    )

    module = InjectedModule(
      path=factory_module_path(state.context),
      source=build_factory_source(chunk_name(component_id)),
    )
    compilation.virtual_modules.register(module)

    replacement = i18n_call_arguments(
      SynthesizedArgument.build(component_id, manifest.locales, fallback_binding=fallback_binding)
    )
    state.replace(target_range, replacement)

    tracer.log_rewrite(state.resource, candidate.identifier, replacement)
    logger.debug("Filled %s() in %s with id %s", candidate.identifier, state.resource, component_id)
    return True

  def _report_missing_fallback(
    self,
    state: ModuleState,
    candidate: RewriteCandidate,
    manifest: LocaleManifest,
    target_range: SourceRange,
  ) -> None:
    if target_range in state.reported:
      return
    state.reported.add(target_range)

    message = missing_fallback_message(state.resource, candidate.identifier, manifest.fallback_relative_path())
    state.compilation.report_error(message)
    log_warning(
      f"[path]{escape(state.resource)}[/path]: {escape(candidate.identifier)}() left unchanged, "
      f"missing {escape(manifest.fallback_relative_path())}"
    )
