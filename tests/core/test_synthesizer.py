"""
Tests for Code Synthesis.

Verifies:
1. Argument object shape (id, optional fallback, locale guard, loader call).
2. Loader module shape (default export, chunk tag, lazy JSON import).
3. Output is a pure function of the inputs.
"""

from i18n_autofill.core.synthesizer import (
  SynthesizedArgument,
  build_factory_source,
  i18n_call_arguments,
  require_expression,
)

EXPECTED_ARGUMENTS = """({
    id: "Header_3t1g",
    fallback: en,
    translations(locale) {
      const translations = ["de", "fr"];

      if (translations.indexOf(locale) < 0) {
        return;
      }

      return translationFactory(locale);
    },
  })"""

EXPECTED_FACTORY = """export default async function translationFactory(locale) {
  const dictionary = await import(
    /* webpackChunkName: "Header_3t1g-i18n", webpackMode: "lazy-once" */
    `./${locale}.json`
  );
  return dictionary && dictionary.default;
}
"""


def test_call_arguments_exact_text():
  arg = SynthesizedArgument.build("Header_3t1g", ["fr", "de"], fallback_binding="en")
  assert i18n_call_arguments(arg) == EXPECTED_ARGUMENTS


def test_build_sorts_locales():
  arg = SynthesizedArgument.build("X_1", ["it", "de", "fr"])
  assert arg.locales == ("de", "fr", "it")


def test_call_arguments_without_fallback():
  text = i18n_call_arguments(SynthesizedArgument.build("Header_3t1g", ["fr"]))

  assert "fallback" not in text
  assert 'id: "Header_3t1g",' in text
  assert 'const translations = ["fr"];' in text


def test_call_arguments_without_locales():
  text = i18n_call_arguments(SynthesizedArgument.build("Header_3t1g", [], fallback_binding="en"))
  assert "const translations = [];" in text


def test_call_arguments_quote_locales_as_json():
  text = i18n_call_arguments(SynthesizedArgument.build("X_1", ['we"ird']))
  assert r'["we\"ird"]' in text


def test_call_arguments_are_wrapped_in_parentheses():
  text = i18n_call_arguments(SynthesizedArgument.build("X_1", []))
  assert text.startswith("({")
  assert text.endswith("})")


def test_factory_source_exact_text():
  assert build_factory_source("Header_3t1g-i18n") == EXPECTED_FACTORY


def test_factory_source_is_deterministic():
  assert build_factory_source("A-i18n") == build_factory_source("A-i18n")


def test_factory_source_custom_name():
  assert "export default async function loadLocale(locale)" in build_factory_source("A-i18n", "loadLocale")


def test_require_expression():
  assert require_expression("./translations/en.json") == 'require("./translations/en.json")'
