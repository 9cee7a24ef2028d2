"""
Tokenizer: raw text -> Expression.

Split on commas into items, each item on its first '-' into a range, else on
its first '/' into (address, mask). Never fails: malformed text still yields
an Expression whose tokens are Unknown and/or Partial.
"""

from __future__ import annotations

from typing import Optional

from models.schemas import CidrItem, Expression, Item, RangeItem, SingleItem
from validation.family import make_token
from validation.literals import DEFAULT_CHECKER, LiteralChecker


def _parse_item(piece: str, checker: LiteralChecker) -> Item:
    if "-" in piece:
        left, _, right = piece.partition("-")
        return RangeItem(
            text=piece,
            left=make_token(left.strip(), checker),
            right=make_token(right.strip(), checker),
        )
    if "/" in piece:
        # no whitespace is allowed around the slash, so nothing is stripped
        address, _, mask = piece.partition("/")
        return CidrItem(text=piece, address=make_token(address, checker), mask=mask)
    return SingleItem(text=piece, token=make_token(piece, checker))


def tokenize(text: str, checker: Optional[LiteralChecker] = None) -> Expression:
    checker = checker or DEFAULT_CHECKER
    trimmed = text.strip()
    if not trimmed:
        return Expression(text="", items=())
    items = tuple(_parse_item(piece.strip(), checker) for piece in trimmed.split(","))
    return Expression(text=trimmed, items=items)
