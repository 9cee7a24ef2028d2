"""
Error classifier: names a partial-mode rejection.

The guard battery decides whether text is rejected; this module re-inspects
the same expression with a fixed priority list to pick one ErrorKind.
"""

from __future__ import annotations

from typing import NamedTuple

from models.schemas import ErrorKind, Expression
from models.settings import RANGE_EXPECTED_KEY
from validation.family import families_mixed, range_descending
from validation.grammar import ALLOWED_CHARS_RE


class Classification(NamedTuple):
    kind: ErrorKind
    message_key: str


def has_disallowed_chars(text: str) -> bool:
    return not ALLOWED_CHARS_RE.fullmatch(text)


def classify(expression: Expression) -> Classification:
    text = expression.text
    ranges = expression.ranges()

    if any(families_mixed(r.left, r.right) for r in ranges):
        kind = ErrorKind.VERSION_MISMATCH
    elif has_disallowed_chars(text):
        kind = ErrorKind.INVALID_CHARS
    elif any(range_descending(r.left, r.right) for r in ranges):
        kind = ErrorKind.RANGE_ORDER
    elif "-" in text:
        return Classification(ErrorKind.INVALID_FORMAT, RANGE_EXPECTED_KEY)
    elif "/" in text:
        kind = ErrorKind.INVALID_SUBNET
    else:
        kind = ErrorKind.INVALID_FORMAT
    return Classification(kind, kind.value)
