"""
Tests for Locale Manifest Resolution.

Verifies:
1. Missing directories yield an empty manifest.
2. Partitioning into fallback and sorted lazy locales.
3. Locale-name validation and the permissive mode.
"""

import os

from i18n_autofill.core.filesystem import MemoryFileSystem, OSFileSystem
from i18n_autofill.core.manifest import (
  LocaleManifest,
  is_locale_file_name,
  list_translation_files,
  resolve_manifest,
  translations_directory,
)


def test_missing_directory_is_empty(tmp_path):
  assert list_translation_files(OSFileSystem(), str(tmp_path)) == []
  manifest = resolve_manifest(OSFileSystem(), str(tmp_path), "en")
  assert manifest.is_empty
  assert not manifest.has_fallback


def test_listing_reads_translations_subdirectory(make_component):
  component = make_component(translations=["en.json", "fr.json", "de.json"])
  entries = list_translation_files(OSFileSystem(), os.path.dirname(component))
  assert sorted(entries) == ["de.json", "en.json", "fr.json"]


def test_locales_sorted_without_fallback(make_component):
  component = make_component(translations=["en.json", "fr.json", "de.json"])
  manifest = resolve_manifest(OSFileSystem(), os.path.dirname(component), "en")

  assert manifest.has_fallback
  assert manifest.locales == ["de", "fr"]
  assert manifest.quoted_locales() == ('"de"', '"fr"')


def test_missing_fallback_detected():
  manifest = LocaleManifest.from_listing(["fr.json", "de.json"], "en")
  assert not manifest.is_empty
  assert not manifest.has_fallback
  assert manifest.fallback_relative_path() == "./translations/en.json"


def test_fallback_suffix_does_not_match_other_locales():
  """'fr-en.json' ends with 'en.json' but is not the fallback."""
  manifest = LocaleManifest.from_listing(["en.json", "fr-en.json"], "en")
  assert manifest.locales == ["fr-en"]


def test_non_locale_entries_rejected_by_default():
  manifest = LocaleManifest.from_listing(["en.json", "README.md", ".DS_Store", "fr.json"], "en")
  assert manifest.files == ["en.json", "fr.json"]
  assert manifest.rejected == ["README.md", ".DS_Store"]
  assert manifest.locales == ["fr"]


def test_permissive_mode_keeps_every_entry():
  manifest = LocaleManifest.from_listing(["en.json", "README.md"], "en", validate=False)
  assert manifest.rejected == []
  assert manifest.locales == ["README"]


def test_directory_with_only_junk_is_empty():
  manifest = LocaleManifest.from_listing(["notes.txt"], "en")
  assert manifest.is_empty


def test_is_locale_file_name():
  assert is_locale_file_name("en.json")
  assert is_locale_file_name("pt-BR.json")
  assert is_locale_file_name("zh_Hant_TW.json")
  assert is_locale_file_name("es-419.json")
  assert not is_locale_file_name("en.js")
  assert not is_locale_file_name("translationFactory.js")
  assert not is_locale_file_name("e.json")
  assert not is_locale_file_name("en.json.bak")


def test_memory_file_system_listing():
  fs = MemoryFileSystem({"/app/Header/translations/en.json": "{}", "/app/Header/translations/fr.json": "{}"})
  manifest = resolve_manifest(fs, "/app/Header", "en")
  assert manifest.locales == ["fr"]


def test_prefetched_entries_skip_file_system():
  manifest = resolve_manifest(MemoryFileSystem(), "/nowhere", "en", entries=["en.json", "it.json"])
  assert manifest.locales == ["it"]


def test_translations_directory():
  assert translations_directory("/app/Header") == os.path.join("/app/Header", "translations")


def test_fallback_kept_when_its_name_is_not_a_locale_code():
  manifest = LocaleManifest.from_listing(["default.json", "fr.json", "notes.json"], "default")

  assert manifest.has_fallback
  assert manifest.files == ["default.json", "fr.json"]
  assert manifest.rejected == ["notes.json"]
  assert manifest.locales == ["fr"]
