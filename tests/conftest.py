"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- Builders for component directories and call expression nodes.
- Console isolation so log capture in one test does not leak into another.
"""

import sys
from pathlib import Path
from typing import Iterable, List, Optional

import pytest

# Add src to path so we can import 'i18n_autofill' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from i18n_autofill.core.nodes import CallExpression, Identifier  # noqa: E402
from i18n_autofill.utils.console import reset_console  # noqa: E402


def _matching_paren(source: str, open_index: int) -> int:
  depth = 0
  for i in range(open_index, len(source)):
    if source[i] == "(":
      depth += 1
    elif source[i] == ")":
      depth -= 1
      if depth == 0:
        return i
  raise ValueError(f"Unbalanced parenthesis at {open_index}")


def build_call(source: str, name: str, occurrence: int = 0, arguments: Optional[List] = None) -> CallExpression:
  """
  Builds a CallExpression node for the n-th ``name(`` in ``source``.

  Ranges are real offsets into ``source`` so rendered output can be checked.
  """
  needle = f"{name}("
  start = -1
  for _ in range(occurrence + 1):
    start = source.index(needle, start + 1)

  open_paren = start + len(name)
  close_paren = _matching_paren(source, open_paren)
  callee = Identifier(name, range=(start, open_paren))
  return CallExpression(callee=callee, arguments=list(arguments or []), range=(start, close_paren + 1))


@pytest.fixture
def call_at():
  """Returns the `build_call` helper."""
  return build_call


@pytest.fixture
def make_component(tmp_path):
  """
  Factory creating ``<tmp>/<dirname>/<filename>`` plus optional translation files.

  Returns the absolute component path as a string.
  """

  def _make(
    filename: str = "Header.tsx",
    translations: Optional[Iterable[str]] = ("en.json", "fr.json"),
    dirname: str = "Header",
  ) -> str:
    component_dir = tmp_path / dirname
    component_dir.mkdir(parents=True, exist_ok=True)
    component = component_dir / filename
    component.write_text("export {};\n", encoding="utf-8")

    if translations is not None:
      translations_dir = component_dir / "translations"
      translations_dir.mkdir(exist_ok=True)
      for entry in translations:
        (translations_dir / entry).write_text("{}", encoding="utf-8")

    return str(component)

  return _make


@pytest.fixture(autouse=True)
def cleanup_console():
  """Ensures console is reset to stdout after every test."""
  reset_console()
  yield
  reset_console()
