"""
Inspect Command Handler.

Runs the autofill pass against a single component without a bundler and
prints what a build would produce:
1.  The component id and chunk name.
2.  The locale manifest (fallback, lazy locales, ignored entries).
3.  The replacement argument text for a ``useI18n()`` call.
4.  The injected loader module source.
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

from i18n_autofill.config import PluginOptions
from i18n_autofill.core.ids import chunk_name, generate_id
from i18n_autofill.core.nodes import CallExpression, Identifier, ImportSpecifier
from i18n_autofill.core.plugin import I18nAutofillPlugin
from i18n_autofill.core.rewriter import component_name
from i18n_autofill.core.virtual_modules import factory_module_path
from i18n_autofill.enums import I18nExport
from i18n_autofill.utils.console import console, get_console, log_error, log_info, log_success, set_console

_SAMPLE_SOURCE = "useI18n()"


def _sample_call() -> CallExpression:
  callee = Identifier(I18nExport.USE_I18N.value, range=(0, len(I18nExport.USE_I18N.value)))
  return CallExpression(callee=callee, arguments=[], range=(0, len(_SAMPLE_SOURCE)))


def handle_inspect(
  path: Path,
  fallback_locale: Optional[str] = None,
  validate: Optional[bool] = None,
  json_mode: bool = False,
) -> int:
  """
  Handles the 'inspect' command execution.

  Args:
      path: Component source file. It does not need to exist; only its
          directory and name are used.
      fallback_locale: Override for the fallback locale.
      validate: Override for locale-name validation.
      json_mode: If True, print a JSON report to stdout and suppress logs.

  Returns:
      int: 0 when the component would be rewritten or has nothing to localize,
      1 when the fallback file is missing or configuration is invalid.
  """
  try:
    options = PluginOptions.load(
      fallback_locale=fallback_locale,
      validate_locale_names=validate,
      search_path=path.parent if path.parent.exists() else None,
    )
  except ValueError as e:
    log_error(str(e))
    return 1

  resource = str(path.resolve())
  plugin = I18nAutofillPlugin(options)
  compilation = plugin.create_compilation()
  state = compilation.module(resource)

  source = options.import_sources[0] if options.import_sources else ""
  specifier = ImportSpecifier(source, I18nExport.USE_I18N.value, I18nExport.USE_I18N.value)
  if json_mode:
    # Keep stdout clean for the JSON document
    previous = get_console()
    set_console(Console(stderr=True))
    try:
      plugin.process_module(state, [specifier], [_sample_call()])
    finally:
      set_console(previous)
  else:
    plugin.process_module(state, [specifier], [_sample_call()])

  component_id = generate_id(component_name(resource))
  manifest = state.manifest
  factory_path = factory_module_path(state.context)

  report: Dict[str, Any] = {
    "component": resource,
    "id": component_id,
    "chunk_name": chunk_name(component_id),
    "fallback_locale": options.fallback_locale,
    "fallback_found": bool(manifest and manifest.has_fallback),
    "locales": manifest.locales if manifest else [],
    "ignored_entries": manifest.rejected if manifest else [],
    "arguments": next(iter(state.replacements.values()), None),
    "factory_path": factory_path if compilation.virtual_modules.exists(factory_path) else None,
    "factory_source": (
      compilation.virtual_modules.read(factory_path) if compilation.virtual_modules.exists(factory_path) else None
    ),
    "errors": list(compilation.errors),
  }

  if json_mode:
    print(json.dumps(report, indent=2))
    return 1 if compilation.has_errors else 0

  _print_report(report)

  if compilation.has_errors:
    for message in compilation.errors:
      log_error(escape(message.strip()))
    return 1

  if report["arguments"] is None:
    log_info(f"Nothing to localize for [path]{escape(resource)}[/path]")
  else:
    log_success(f"{escape(component_id)}: {len(report['locales'])} lazy locale(s)")
  return 0


def _print_report(report: Dict[str, Any]) -> None:
  table = Table(title="Translation Bundle", show_header=False)
  table.add_column("Field", style="bold")
  table.add_column("Value")
  table.add_row("Component", escape(report["component"]))
  table.add_row("Id", report["id"])
  table.add_row("Chunk", report["chunk_name"])
  table.add_row("Fallback", f"{report['fallback_locale']} ({'found' if report['fallback_found'] else 'missing'})")
  table.add_row("Locales", ", ".join(report["locales"]) or "-")
  if report["ignored_entries"]:
    table.add_row("Ignored", escape(", ".join(report["ignored_entries"])))
  console.print(table)

  if report["arguments"]:
    console.print(Syntax(report["arguments"], "javascript"))
  if report["factory_source"]:
    console.print(Syntax(report["factory_source"], "javascript"))
