"""
Tests for Call Site Matching.

Verifies:
1. Direct zero-argument calls of tracked names are candidates.
2. compose(...) yields one candidate per tracked zero-argument sub-call.
3. Calls with arguments, member callees and untracked names are ignored.
"""

from i18n_autofill.core.matcher import find_candidates
from i18n_autofill.core.nodes import CallExpression, Identifier, Literal


def _call(name, *args):
  return CallExpression(callee=Identifier(name), arguments=list(args))


def test_direct_zero_argument_call():
  call = _call("useI18nAlias")
  candidates = find_candidates(call, {"useI18nAlias"})

  assert len(candidates) == 1
  assert candidates[0].call is call
  assert candidates[0].identifier == "useI18nAlias"
  assert not candidates[0].composed


def test_call_with_arguments_is_not_eligible():
  call = _call("useI18n", Literal({"id": "custom"}))
  assert find_candidates(call, {"useI18n"}) == []


def test_untracked_name_is_ignored():
  assert find_candidates(_call("useState"), {"useI18n"}) == []


def test_no_bindings_means_no_candidates():
  assert find_candidates(_call("useI18n"), set()) == []


def test_member_callee_is_ignored():
  call = CallExpression(callee=type("Member", (), {"type": "MemberExpression"})())
  assert find_candidates(call, {"useI18n"}) == []


def test_compose_with_single_tracked_call():
  """compose(useI18nAlias(), other()) -> exactly one candidate."""
  tracked = _call("useI18nAlias")
  compose = _call("compose", tracked, _call("other"))

  candidates = find_candidates(compose, {"useI18nAlias"})

  assert len(candidates) == 1
  assert candidates[0].call is tracked
  assert candidates[0].composed


def test_compose_with_several_tracked_calls():
  first = _call("withI18n")
  second = _call("useI18n")
  compose = _call("compose", first, _call("withRouter"), second)

  candidates = find_candidates(compose, {"withI18n", "useI18n"})

  assert [c.call for c in candidates] == [first, second]
  assert [c.identifier for c in candidates] == ["withI18n", "useI18n"]


def test_compose_skips_sub_calls_with_arguments():
  compose = _call("compose", _call("withI18n", Literal(1)), Identifier("withI18n"))
  assert find_candidates(compose, {"withI18n"}) == []


def test_compose_with_no_tracked_calls():
  compose = _call("compose", _call("withRouter"))
  assert find_candidates(compose, {"withI18n"}) == []


def test_tracked_name_called_compose():
  """A binding aliased to 'compose' is matched as a direct call."""
  call = _call("compose")
  candidates = find_candidates(call, {"compose"})
  assert len(candidates) == 1
  assert not candidates[0].composed
