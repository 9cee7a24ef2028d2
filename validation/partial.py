#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Lenient (keystroke-time) validation of address expressions.

Text that is merely unfinished passes; text that no further typing can fix
is rejected. After the strict check, an ordered battery of guards runs and
the first one that fires rejects. Only then is the lenient grammar tried.
The order matters: the grammar alone accepts several states the guards
have already ruled out (e.g. "10.0.0.1." matches the partial IPv4 pattern).
"""

from __future__ import annotations

from typing import Callable, Optional, Tuple

from models.schemas import AddressFamily, CidrItem, Expression, PartialOutcome, Token
from validation.classifier import classify
from validation.family import families_mixed, range_descending
from validation.full import is_fully_valid
from validation.grammar import IPV4_FULL_RE, ITEM_PARTIAL_RE
from validation.literals import DEFAULT_CHECKER, LiteralChecker
from validation.tokenizer import tokenize

_LIST_SEPARATORS = ".:/-"
_MASK_BOUNDS = {AddressFamily.IPV4: 32, AddressFamily.IPV6: 128}


# ----------------------------------------------------------------------
# Guards (each returns True to reject)
# ----------------------------------------------------------------------
def _trailing_dot_after_quad(expression: Expression) -> bool:
    for token in expression.tokens():
        text = token.text
        if text.endswith(".") and IPV4_FULL_RE.fullmatch(text[:-1].strip()):
            return True
    return False


def _range_left_dangling_dot(expression: Expression) -> bool:
    return any(r.left.text.endswith(".") for r in expression.ranges())


def _incompatible_range_sides(expression: Expression) -> bool:
    """A complete IPv4 side against an IPv4 side that still has only 1-2 dots."""
    for r in expression.ranges():
        for done, other in ((r.left, r.right), (r.right, r.left)):
            if not (done.complete and done.family == AddressFamily.IPV4):
                continue
            if ":" not in other.text and 1 <= other.text.count(".") <= 2:
                return True
    return False


def _bare_list_items(expression: Expression) -> bool:
    items = expression.items
    if len(items) < 2:
        return False
    return any(
        not any(sep in item.text for sep in _LIST_SEPARATORS) for item in items[:-1]
    )


def _triple_colon(expression: Expression) -> bool:
    return ":::" in expression.text


def _ipv6_shape_impossible(token: Token) -> bool:
    text = token.text
    groups = text.split(":")
    if any(len(g) > 4 for g in groups):
        return True
    compressions = text.count("::")
    if compressions > 1:
        return True
    filled = [g for g in groups if g]
    if text.startswith(":") and not text.startswith("::") and filled:
        return True
    if text.endswith(":") and not text.endswith("::") and len(filled) > 1:
        return True
    if compressions == 0:
        return len(filled) == 7 or len(filled) > 8
    return len(filled) >= 7


def _ipv6_structure(expression: Expression) -> bool:
    # complete tokens already passed the stricter structural check
    return any(
        ":" in t.text and not t.complete and _ipv6_shape_impossible(t)
        for t in expression.tokens()
    )


def _mask_value(mask: str) -> Optional[int]:
    if not mask or not (mask.isascii() and mask.isdigit()):
        return None
    try:
        return int(mask)
    except ValueError:
        return None


def _mask_over_bound(expression: Expression) -> bool:
    for item in expression.items:
        if not isinstance(item, CidrItem) or not item.address.complete:
            continue
        value = _mask_value(item.mask)
        bound = _MASK_BOUNDS.get(item.address.family)
        if value is not None and bound is not None and value > bound:
            return True
    return False


def _range_order(expression: Expression) -> bool:
    return any(range_descending(r.left, r.right) for r in expression.ranges())


def _range_family_mismatch(expression: Expression) -> bool:
    return any(families_mixed(r.left, r.right) for r in expression.ranges())


GUARDS: Tuple[Tuple[str, Callable[[Expression], bool]], ...] = (
    ("trailing_dot_after_quad", _trailing_dot_after_quad),
    ("range_left_dangling_dot", _range_left_dangling_dot),
    ("incompatible_range_sides", _incompatible_range_sides),
    ("bare_list_items", _bare_list_items),
    ("triple_colon", _triple_colon),
    ("ipv6_structure", _ipv6_structure),
    ("mask_over_bound", _mask_over_bound),
    ("range_order", _range_order),
    ("range_family_mismatch", _range_family_mismatch),
)


# ----------------------------------------------------------------------
# Lenient grammar
# ----------------------------------------------------------------------
def matches_partial_grammar(expression: Expression) -> bool:
    """Every item matches the lenient item pattern; one trailing empty item is allowed."""
    items = expression.items
    if not items:
        return True
    last = len(items) - 1
    for index, item in enumerate(items):
        if not item.text:
            if index == last and index > 0:
                continue
            return False
        if not ITEM_PARTIAL_RE.fullmatch(item.text):
            return False
    return True


def _dangling_dash_accepted(text: str, checker: LiteralChecker) -> bool:
    stripped = text.rstrip()
    if not stripped.endswith("-"):
        return False
    prefix = stripped[:-1]
    if not prefix.strip() or "-" in prefix:
        return False
    return matches_partial_grammar(tokenize(prefix, checker))


# ----------------------------------------------------------------------
# Entry point
# ----------------------------------------------------------------------
def _reject(expression: Expression, guard: str) -> PartialOutcome:
    kind, message_key = classify(expression)
    return PartialOutcome(valid=False, guard=guard, kind=kind, message_key=message_key)


def partial_outcome(expression: Expression, checker: LiteralChecker = DEFAULT_CHECKER) -> PartialOutcome:
    if expression.empty:
        return PartialOutcome(valid=True, guard="empty")
    if is_fully_valid(expression, checker):
        return PartialOutcome(valid=True, guard="full_match")

    for name, guard in GUARDS:
        if guard(expression):
            return _reject(expression, name)

    if matches_partial_grammar(expression):
        return PartialOutcome(valid=True, guard="partial_grammar")
    if _dangling_dash_accepted(expression.text, checker):
        return PartialOutcome(valid=True, guard="dangling_dash")
    return _reject(expression, "no_match")


def is_expression_partially_valid(text: str, checker: Optional[LiteralChecker] = None) -> PartialOutcome:
    checker = checker or DEFAULT_CHECKER
    return partial_outcome(tokenize(text, checker), checker)
