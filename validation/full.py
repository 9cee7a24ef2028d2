"""
Strict (submit-time) validation of address expressions.
"""

from __future__ import annotations

from typing import Optional

from models.schemas import AddressFamily, CidrItem, Expression, Item, RangeItem
from validation.family import range_descending
from validation.grammar import ITEM_FULL_RE
from validation.literals import DEFAULT_CHECKER, LiteralChecker
from validation.tokenizer import tokenize


def is_item_fully_valid(item: Item, checker: LiteralChecker = DEFAULT_CHECKER) -> bool:
    if not item.text or not ITEM_FULL_RE.fullmatch(item.text):
        return False

    if isinstance(item, RangeItem):
        left, right = item.left, item.right
        return (
            left.complete
            and right.complete
            and left.family == right.family
            and not range_descending(left, right)
        )

    if isinstance(item, CidrItem):
        address = item.address
        if not address.complete:
            return False
        if address.family == AddressFamily.IPV4:
            return checker.validate_cidr_v4(address.text, item.mask)
        return checker.validate_cidr_v6(address.text, item.mask)

    return item.token.complete


def is_fully_valid(expression: Expression, checker: LiteralChecker = DEFAULT_CHECKER) -> bool:
    if expression.empty:
        return True
    return all(is_item_fully_valid(item, checker) for item in expression.items)


def is_expression_fully_valid(text: str, checker: Optional[LiteralChecker] = None) -> bool:
    checker = checker or DEFAULT_CHECKER
    return is_fully_valid(tokenize(text, checker), checker)
