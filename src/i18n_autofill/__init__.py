"""
i18n-autofill Package.

A build-time pass that fills in the arguments of zero-argument ``useI18n()``
and ``withI18n()`` calls with a description of the component's translation
bundle, and injects a lazy per-locale loader module next to it.

Usage
-----

.. code-block:: python

    from i18n_autofill import I18nAutofillPlugin, PluginOptions
    from i18n_autofill.core.nodes import CallExpression, Identifier, ImportSpecifier

    plugin = I18nAutofillPlugin(PluginOptions(fallback_locale="en"))
    compilation = plugin.create_compilation()

    state = compilation.module("/app/Header/Header.tsx")
    plugin.process_module(state, imports, calls)

    print(state.render(source))
    for module in compilation.virtual_modules:
      print(module.path)
"""

from i18n_autofill.config import PluginOptions
from i18n_autofill.core.bindings import BindingPhaseError
from i18n_autofill.core.compilation import Compilation, ModuleState
from i18n_autofill.core.ids import generate_id
from i18n_autofill.core.plugin import I18nAutofillPlugin

__version__ = "0.1.0"

__all__ = [
  "BindingPhaseError",
  "Compilation",
  "I18nAutofillPlugin",
  "ModuleState",
  "PluginOptions",
  "generate_id",
  "__version__",
]
