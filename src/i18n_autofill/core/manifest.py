"""
Locale Manifest Resolution.

Translation files live beside each component::

    Header/
      Header.tsx
      translations/
        en.json
        fr.json

`list_translation_files` returns the raw directory listing. `LocaleManifest`
partitions that listing into the fallback file and the remaining locales.
"""

import json
import logging
import os
import re
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from i18n_autofill.core.filesystem import InputFileSystem

TRANSLATION_DIRECTORY_NAME = "translations"
TRANSLATION_EXTENSION = ".json"

# ll / lll, then optional script/region/variant subtags (en, en-US, zh_Hant_TW, es-419)
LOCALE_NAME_PATTERN = re.compile(r"^[A-Za-z]{2,3}(?:[-_][A-Za-z0-9]{2,8})*$")

logger = logging.getLogger(__name__)


def translations_directory(component_dir: str) -> str:
  """Returns the translations directory of a component directory."""
  return os.path.join(component_dir, TRANSLATION_DIRECTORY_NAME)


def list_translation_files(fs: InputFileSystem, component_dir: str) -> List[str]:
  """
  Lists entries of a component's translations directory.

  A missing or unreadable directory means "nothing to localize" and yields an
  empty list.

  Args:
      fs: Host file system.
      component_dir: Directory containing the component source file.

  Returns:
      List[str]: Entry names in the order the file system reports them.
  """
  path = translations_directory(component_dir)
  try:
    return list(fs.listdir(path))
  except OSError as e:
    logger.debug("No translations at %s (%s)", path, e)
    return []


def is_locale_file_name(name: str) -> bool:
  """
  Checks whether a directory entry looks like ``<locale>.json``.

  Args:
      name: Entry name.

  Returns:
      bool: True for names such as ``en.json`` or ``pt-BR.json``.
  """
  base, ext = os.path.splitext(name)
  return ext == TRANSLATION_EXTENSION and bool(LOCALE_NAME_PATTERN.match(base))


@dataclass
class LocaleManifest:
  """
  Translation files of one component, split into fallback and lazy locales.
  """

  fallback_locale: str
  """Configured fallback locale code (e.g. 'en')."""

  files: List[str] = field(default_factory=list)
  """Accepted entry names, in listing order."""

  rejected: List[str] = field(default_factory=list)
  """Entries dropped by locale-name validation."""

  @classmethod
  def from_listing(cls, entries: Iterable[str], fallback_locale: str, validate: bool = True) -> "LocaleManifest":
    """
    Builds a manifest from a raw directory listing.

    Args:
        entries: Directory entry names.
        fallback_locale: Locale bundled eagerly.
        validate: If True, drop entries that are not ``<locale>.json``. The
            fallback file itself is always kept, whatever its name.

    Returns:
        LocaleManifest: The partitioned manifest.
    """
    fallback_file = f"{fallback_locale}{TRANSLATION_EXTENSION}"
    accepted: List[str] = []
    rejected: List[str] = []
    for entry in entries:
      if not validate or entry == fallback_file or is_locale_file_name(entry):
        accepted.append(entry)
      else:
        rejected.append(entry)

    if rejected:
      logger.debug("Ignoring non-locale translation entries: %s", ", ".join(rejected))

    return cls(fallback_locale=fallback_locale, files=accepted, rejected=rejected)

  @property
  def fallback_file(self) -> str:
    return f"{self.fallback_locale}{TRANSLATION_EXTENSION}"

  @property
  def is_empty(self) -> bool:
    return not self.files

  @property
  def has_fallback(self) -> bool:
    return self.fallback_file in self.files

  @property
  def locale_files(self) -> List[str]:
    """Entries other than the fallback file."""
    return [f for f in self.files if f != self.fallback_file]

  @property
  def locales(self) -> List[str]:
    """
    Sorted base names of the non-fallback entries.

    Returns:
        List[str]: e.g. ``["de", "fr"]`` for ``en.json, fr.json, de.json``.
    """
    return sorted(os.path.splitext(f)[0] for f in self.locale_files)

  def quoted_locales(self) -> Tuple[str, ...]:
    """Locale names as JSON string literals, ready for code generation."""
    return tuple(json.dumps(locale) for locale in self.locales)

  def fallback_relative_path(self) -> str:
    """Fallback file path relative to the component directory."""
    return "./" + "/".join([TRANSLATION_DIRECTORY_NAME, self.fallback_file])


def resolve_manifest(
  fs: InputFileSystem,
  component_dir: str,
  fallback_locale: str,
  validate: bool = True,
  entries: Optional[List[str]] = None,
) -> LocaleManifest:
  """
  Lists and partitions a component's translation files.

  Args:
      fs: Host file system.
      component_dir: Directory containing the component.
      fallback_locale: Locale bundled eagerly.
      validate: Apply locale-name validation.
      entries: Pre-fetched listing, skips the file system when given.

  Returns:
      LocaleManifest: Possibly empty manifest.
  """
  listing = entries if entries is not None else list_translation_files(fs, component_dir)
  return LocaleManifest.from_listing(listing, fallback_locale, validate=validate)
