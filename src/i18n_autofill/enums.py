"""
Enumerations for i18n-autofill.

Names shared between the import tracker, the call matcher and the code
synthesizer.
"""

from enum import Enum


class I18nExport(str, Enum):
  """
  Exports of the localization library whose zero-argument calls get filled in.
  """

  USE_I18N = "useI18n"  # hook form
  WITH_I18N = "withI18n"  # higher-order component form

  @classmethod
  def names(cls) -> frozenset:
    """Returns the raw export names."""
    return frozenset(member.value for member in cls)


class NodeType(str, Enum):
  """
  ESTree node type tags consumed by the call matcher.
  """

  IDENTIFIER = "Identifier"
  CALL_EXPRESSION = "CallExpression"
  LITERAL = "Literal"
  TYPE_ARGUMENTS = "TSTypeParameterInstantiation"
