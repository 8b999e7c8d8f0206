"""
Plugin Configuration Store.

Options are recognized once, when the plugin is constructed. They can be
given explicitly or read from the ``[tool.i18n_autofill]`` table of the
nearest ``pyproject.toml``.
"""

import tomllib
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field, ValidationError, field_validator

TOOL_SECTION = "i18n_autofill"


class PluginOptions(BaseModel):
  """
  Configuration container for the translation autofill pass.
  """

  fallback_locale: str = Field("en", description="Locale bundled eagerly as the fallback dictionary.")
  import_sources: List[str] = Field(
    default_factory=list,
    description="Module specifiers allowed to provide useI18n/withI18n. Empty accepts any source.",
  )
  validate_locale_names: bool = Field(
    True,
    description="If True, only '<locale>.json' entries with a locale-code name enter the manifest.",
  )
  vendor_directories: List[str] = Field(
    default_factory=lambda: ["node_modules"],
    description="Path segments marking third-party dependency directories.",
  )

  @field_validator("fallback_locale")
  @classmethod
  def validate_fallback_locale(cls, v: str) -> str:
    """
    Ensures the fallback locale is usable as a file name.

    Args:
        v (str): The raw locale code.

    Returns:
        str: The stripped locale code.

    Raises:
        ValueError: If the locale is empty or contains a path separator.
    """
    v_clean = v.strip()
    if not v_clean:
      raise ValueError("fallback_locale must not be empty")
    if "/" in v_clean or "\\" in v_clean:
      raise ValueError(f"fallback_locale must be a bare locale code, got '{v_clean}'")
    return v_clean

  @property
  def fallback_file_name(self) -> str:
    """
    Returns:
        str: The translation file name of the fallback locale (e.g. 'en.json').
    """
    return f"{self.fallback_locale}.json"

  def is_vendored(self, resource: str) -> bool:
    """
    Checks whether a module lives in a third-party dependency directory.

    Args:
        resource (str): Module path, POSIX or Windows separators.

    Returns:
        bool: True if any path segment is one of `vendor_directories`.
    """
    parts = resource.replace("\\", "/").split("/")
    return any(d in parts for d in self.vendor_directories)

  @classmethod
  def from_mapping(cls, data: Optional[Dict[str, Any]]) -> "PluginOptions":
    """
    Validates a raw settings dictionary.

    Args:
        data: Unstructured option values (e.g. parsed TOML or CLI flags).

    Returns:
        PluginOptions: The validated options.

    Raises:
        ValueError: If validation fails.
    """
    try:
      return cls.model_validate(data or {})
    except ValidationError as e:
      raise ValueError(f"Plugin configuration validation failed: {e}")

  @classmethod
  def load(
    cls,
    fallback_locale: Optional[str] = None,
    import_sources: Optional[List[str]] = None,
    validate_locale_names: Optional[bool] = None,
    search_path: Optional[Path] = None,
  ) -> "PluginOptions":
    """
    Loads options from pyproject.toml and overrides them with explicit arguments.

    Args:
        fallback_locale (Optional[str]): Override for the fallback locale.
        import_sources (Optional[List[str]]): Override for accepted import sources.
        validate_locale_names (Optional[bool]): Override for manifest validation.
        search_path (Optional[Path]): Directory to start searching for TOML config.

    Returns:
        PluginOptions: The fully resolved options.
    """
    start_dir = search_path or Path.cwd()
    toml_config, _ = _load_toml_settings(start_dir)

    merged = dict(toml_config)
    if fallback_locale is not None:
      merged["fallback_locale"] = fallback_locale
    if import_sources is not None:
      merged["import_sources"] = import_sources
    if validate_locale_names is not None:
      merged["validate_locale_names"] = validate_locale_names

    return cls.from_mapping(merged)


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Searches parents for 'pyproject.toml' and extracts the tool section.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The config dict and the directory it was found in.
  """
  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.exists() and toml_path.is_file():
      try:
        with open(toml_path, "rb") as f:
          data = tomllib.load(f)
      except (OSError, tomllib.TOMLDecodeError):
        return {}, None

      tool_section = data.get("tool", {})
      return tool_section.get(TOOL_SECTION, {}), parent

  return {}, None
