"""
Code Synthesis.

Produces the two pieces of JavaScript the pass emits:

1.  The replacement argument list for a ``useI18n()`` / ``withI18n()`` call::

        ({
          id: 'Header_1a2b3',
          fallback: en,
          translations(locale) { ... },
        })

2.  The lazy loader module injected at ``translations/translationFactory.js``,
    whose default export imports one locale file on demand.

Both are pure functions of their inputs so repeated builds emit byte-identical
output.
"""

import json
from dataclasses import dataclass, field
from string import Template
from typing import Optional, Sequence, Tuple

TRANSLATION_FACTORY_NAME = "translationFactory"
TRANSLATION_FACTORY_FILE = "translationFactory.js"

_CALL_ARGUMENTS_TEMPLATE = Template(
  """({
    id: $id,${fallback_entry}
    translations(locale) {
      const translations = [$locales];

      if (translations.indexOf(locale) < 0) {
        return;
      }

      return $factory(locale);
    },
  })"""
)

_FACTORY_TEMPLATE = Template(
  """export default async function $factory(locale) {
  const dictionary = await import(
    /* webpackChunkName: $chunk, webpackMode: "lazy-once" */
    `./$${locale}.json`
  );
  return dictionary && dictionary.default;
}
"""
)


@dataclass(frozen=True)
class SynthesizedArgument:
  """
  Data backing the generated argument object.
  """

  id: str
  locales: Tuple[str, ...] = field(default_factory=tuple)
  """Sorted non-fallback locale names (unquoted)."""

  fallback_binding: Optional[str] = None
  """Module-level binding holding the fallback dictionary, if any."""

  factory_binding: str = TRANSLATION_FACTORY_NAME

  @classmethod
  def build(
    cls, component_id: str, locales: Sequence[str], fallback_binding: Optional[str] = None
  ) -> "SynthesizedArgument":
    return cls(id=component_id, locales=tuple(sorted(locales)), fallback_binding=fallback_binding)


def i18n_call_arguments(argument: SynthesizedArgument) -> str:
  """
  Renders the replacement argument list, parentheses included.

  Args:
      argument: Id, fallback binding and locale list.

  Returns:
      str: JavaScript source for ``(<object literal>)``.
  """
  fallback_entry = ""
  if argument.fallback_binding:
    fallback_entry = f"\n    fallback: {argument.fallback_binding},"

  return _CALL_ARGUMENTS_TEMPLATE.substitute(
    id=json.dumps(argument.id),
    fallback_entry=fallback_entry,
    locales=", ".join(json.dumps(locale) for locale in argument.locales),
    factory=argument.factory_binding,
  )


def build_factory_source(chunk_name: str, factory_name: str = TRANSLATION_FACTORY_NAME) -> str:
  """
  Renders the lazy loader module.

  Args:
      chunk_name: Code-splitting chunk name shared by the component's locales.
      factory_name: Name of the exported function.

  Returns:
      str: JavaScript module source.
  """
  return _FACTORY_TEMPLATE.substitute(factory=factory_name, chunk=json.dumps(chunk_name))


def require_expression(request: str) -> str:
  """
  Renders a CommonJS require of a module request.

  Args:
      request: Module request relative to the requiring file (``./translations/en.json``).

  Returns:
      str: ``require("<request>")``.
  """
  return f"require({json.dumps(request)})"
