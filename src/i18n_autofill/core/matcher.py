"""
Call Site Matching.

A call is a candidate for autofill when it invokes a tracked local name with
no arguments, either directly::

    const [i18n] = useI18n();

or one level inside ``compose``::

    export default compose(withI18n(), withRouter())(Header);

Calls that already carry arguments are left alone so manual configuration
always wins.
"""

from dataclasses import dataclass
from typing import Any, Collection, List

from i18n_autofill.core.nodes import callee_name, is_call

COMPOSE_NAME = "compose"


@dataclass(eq=False)
class RewriteCandidate:
  call: Any
  """The zero-argument call whose arguments get filled in."""

  identifier: str
  """Tracked local name the callee matched."""

  composed: bool = False
  """True when found as an argument of ``compose(...)``."""


def _zero_arg_call_of(node: Any, local_names: Collection[str]) -> bool:
  return is_call(node) and callee_name(node) in local_names and len(node.arguments) == 0


def find_candidates(call: Any, local_names: Collection[str]) -> List[RewriteCandidate]:
  """
  Collects the eligible calls of one call expression.

  Args:
      call: A CallExpression-like node visited by the host.
      local_names: Identifiers bound to the recognized exports in this file.

  Returns:
      List[RewriteCandidate]: Zero or more candidates, in argument order.
  """
  if not local_names:
    return []

  name = callee_name(call)
  if name is None:
    return []

  if name in local_names:
    if _zero_arg_call_of(call, local_names):
      return [RewriteCandidate(call=call, identifier=name)]
    return []

  if name == COMPOSE_NAME:
    return [
      RewriteCandidate(call=arg, identifier=callee_name(arg), composed=True)
      for arg in call.arguments
      if _zero_arg_call_of(arg, local_names)
    ]

  return []
