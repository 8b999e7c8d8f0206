"""
Identifier Generation.

Component ids follow the scoped-name scheme used by CSS modules: the legible
file name plus a short hash of the full input, so ids stay readable in bundle
output while remaining stable across builds.
"""

import os
import re

_BASE36_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_HASH_LENGTH = 5
_WORD_SPLIT = re.compile(r"[^A-Za-z0-9]+|(?<=[a-z0-9])(?=[A-Z])")


def string_hash(text: str) -> int:
  """
  Computes the djb2-xor hash used by the ``string-hash`` npm package.

  Characters are consumed from the end as UTF-16 code units, so ids generated
  here agree with ids computed by JavaScript tooling for the same file name.

  Args:
      text: Input string.

  Returns:
      int: Unsigned 32-bit hash.
  """
  data = text.encode("utf-16-le")
  units = [int.from_bytes(data[i : i + 2], "little") for i in range(0, len(data), 2)]

  value = 5381
  for unit in reversed(units):
    value = ((value * 33) ^ unit) & 0xFFFFFFFF
  return value


def to_base36(value: int) -> str:
  """
  Encodes a non-negative integer in lowercase base 36.

  Args:
      value: Integer to encode.

  Returns:
      str: Base-36 digits, "0" for zero.
  """
  if value < 0:
    raise ValueError("to_base36 expects a non-negative integer")
  if value == 0:
    return "0"

  digits = []
  while value:
    value, rem = divmod(value, 36)
    digits.append(_BASE36_DIGITS[rem])
  return "".join(reversed(digits))


def generate_id(filename: str) -> str:
  """
  Builds a stable component id from a file name.

  Example:
    >>> generate_id("a")
    'a_3t1g'

  Args:
      filename: File base name, with or without extension.

  Returns:
      str: ``"<basename>_<hash>"`` where hash is at most five base-36 characters.
  """
  digest = to_base36(string_hash(filename))[:_HASH_LENGTH]
  legible, _ = os.path.splitext(os.path.basename(filename))
  return f"{legible}_{digest}"


def chunk_name(component_id: str) -> str:
  """Chunk name grouping a component's lazily loaded locale files."""
  return f"{component_id}-i18n"


def camel_case(text: str) -> str:
  """
  Converts a locale code (or any identifier-ish text) to camelCase.

  Example:
    >>> camel_case("en-US")
    'enUs'

  Args:
      text: Text with words separated by punctuation or case changes.

  Returns:
      str: A JavaScript-safe camelCase identifier. Leading digits get an
      underscore prefix.
  """
  words = [w for w in _WORD_SPLIT.split(text) if w]
  if not words:
    return "_"

  head, *tail = words
  result = head.lower() + "".join(w[:1].upper() + w[1:].lower() for w in tail)
  if result[0].isdigit():
    result = f"_{result}"
  return result
