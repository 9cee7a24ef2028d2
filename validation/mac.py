"""
MAC (hardware) address validation: XX-XX-XX-XX-XX-XX, comma-separated lists.

Partial mode follows the same list rule as addresses: every item before the
last must be complete, the last may still be in progress or empty.
"""

from __future__ import annotations

import re
from typing import Tuple

from models.schemas import ErrorKind, PartialOutcome

MAC_GROUPS = 6

HEX2_RE = re.compile(r"[0-9a-fA-F]{2}", re.ASCII)
HEX0_2_RE = re.compile(r"[0-9a-fA-F]{0,2}", re.ASCII)
MAC_FULL_RE = re.compile(r"[0-9a-fA-F]{2}(?:-[0-9a-fA-F]{2}){5}", re.ASCII)
MAC_ALLOWED_CHARS_RE = re.compile(r"[0-9a-fA-F,\s-]*", re.ASCII)


def split_mac_items(text: str) -> Tuple[str, ...]:
    trimmed = text.strip()
    if not trimmed:
        return ()
    return tuple(piece.strip() for piece in trimmed.split(","))


def is_single_mac_full(token: str) -> bool:
    return bool(MAC_FULL_RE.fullmatch(token))


def is_single_mac_partial(token: str) -> bool:
    """1-6 groups; all but the last exactly two hex digits, the last 0-2."""
    if not token:
        return False
    groups = token.split("-")
    if len(groups) > MAC_GROUPS:
        return False
    *head, last = groups
    return all(HEX2_RE.fullmatch(g) for g in head) and bool(HEX0_2_RE.fullmatch(last))


def is_mac_list_fully_valid(text: str) -> bool:
    return all(is_single_mac_full(item) for item in split_mac_items(text))


def mac_partial_outcome(text: str) -> PartialOutcome:
    items = split_mac_items(text)
    if not items:
        return PartialOutcome(valid=True, guard="empty")
    if not MAC_ALLOWED_CHARS_RE.fullmatch(text):
        return PartialOutcome(
            valid=False,
            guard="mac_chars",
            kind=ErrorKind.INVALID_CHARS,
            message_key=ErrorKind.INVALID_CHARS.value,
        )

    *head, last = items
    if all(is_single_mac_full(item) for item in head) and (
        (not last and head) or is_single_mac_partial(last)
    ):
        return PartialOutcome(valid=True, guard="mac_grammar")
    return PartialOutcome(
        valid=False,
        guard="mac_grammar",
        kind=ErrorKind.INVALID_MAC,
        message_key=ErrorKind.INVALID_MAC.value,
    )
