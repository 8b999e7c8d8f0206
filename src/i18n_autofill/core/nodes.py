"""
Narrow Node Interfaces.

The pass reads a handful of fields from the host parser's ESTree nodes:
the node ``type`` tag, an identifier's ``name``, a call's ``callee``,
``arguments`` and optional type arguments, and source ``range`` offsets for
replacement. Fields are read with ``getattr``, so any host node object with
those attributes can be passed in.

The dataclasses are lightweight concrete nodes used by hosts that do not
carry their own AST objects, and by the test suite.
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

from i18n_autofill.enums import NodeType

SourceRange = Tuple[int, int]


@dataclass(frozen=True)
class ImportSpecifier:
  """
  One named import, as reported by the host's import-specifier event.

  ``import { useI18n as useTranslation } from '@shopify/react-i18n'`` yields
  ``ImportSpecifier('@shopify/react-i18n', 'useI18n', 'useTranslation')``.
  """

  source: str
  export_name: str
  local_name: str


@dataclass
class Identifier:
  name: str
  range: Optional[SourceRange] = None
  type: str = field(default=NodeType.IDENTIFIER.value, init=False)


@dataclass
class Literal:
  value: Any
  range: Optional[SourceRange] = None
  type: str = field(default=NodeType.LITERAL.value, init=False)


@dataclass
class TypeArguments:
  """``<Props>`` between a callee and its argument list (TypeScript, Flow)."""

  range: Optional[SourceRange] = None
  type: str = field(default=NodeType.TYPE_ARGUMENTS.value, init=False)


@dataclass(eq=False)
class CallExpression:
  """
  A call ``callee<type_arguments>(arguments...)``.

  ``range`` spans the whole call; the argument list begins where the callee,
  or its type arguments when present, end.
  """

  callee: Any
  arguments: List[Any] = field(default_factory=list)
  range: Optional[SourceRange] = None
  type_arguments: Optional[TypeArguments] = None
  type: str = field(default=NodeType.CALL_EXPRESSION.value, init=False)


def node_type(node: Any) -> str:
  """Returns the ESTree ``type`` tag of a node, '' when absent."""
  value = getattr(node, "type", "")
  return value.value if isinstance(value, NodeType) else value


def is_identifier(node: Any, name: Optional[str] = None) -> bool:
  """
  Checks for an Identifier node, optionally with a specific name.

  Args:
      node: Any host node.
      name: Required identifier name, or None for any.

  Returns:
      bool: True on match.
  """
  if node_type(node) != NodeType.IDENTIFIER.value:
    return False
  return name is None or getattr(node, "name", None) == name


def is_call(node: Any) -> bool:
  return node_type(node) == NodeType.CALL_EXPRESSION.value


def callee_name(call: Any) -> Optional[str]:
  """
  Returns the callee name of a call whose callee is a plain identifier.

  Args:
      call: A CallExpression-like node.

  Returns:
      Optional[str]: The identifier name, or None for member calls and other callees.
  """
  callee = getattr(call, "callee", None)
  if not is_identifier(callee):
    return None
  return callee.name


def type_arguments_of(call: Any) -> Any:
  """
  Returns the type arguments node of a call, or None.

  ESTree parsers disagree on the attribute name: typescript-estree uses
  ``typeArguments`` (formerly ``typeParameters``), Babel uses
  ``typeParameters``.
  """
  for attr in ("type_arguments", "typeArguments", "typeParameters"):
    node = getattr(call, attr, None)
    if node is not None:
      return node
  return None


def arguments_range(call: Any) -> SourceRange:
  """
  Source range covering a call's parenthesized argument list.

  Type arguments stay outside the range, so ``useI18n<Props>()`` keeps
  ``<Props>``.

  Args:
      call: A CallExpression-like node whose callee and itself carry ranges.

  Returns:
      SourceRange: ``(end of callee or type arguments, end of call)``.

  Raises:
      ValueError: If the host did not supply ranges.
  """
  call_range = getattr(call, "range", None)
  callee_range = getattr(getattr(call, "callee", None), "range", None)
  if not call_range or not callee_range:
    raise ValueError("Call expression and callee must carry source ranges to be rewritten")

  start = callee_range[1]
  type_range = getattr(type_arguments_of(call), "range", None)
  if type_range:
    start = max(start, type_range[1])
  return start, call_range[1]
