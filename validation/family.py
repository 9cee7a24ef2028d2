"""
Address family classification and numeric conversion of complete tokens.
"""

from __future__ import annotations

from typing import Optional

from models.schemas import AddressFamily, Completeness, Token
from validation.grammar import IPV4_FULL_RE, IPV6_FULL_RE, ipv6_structure_ok
from validation.literals import DEFAULT_CHECKER, LiteralChecker

_IPV4_CHARS = frozenset("0123456789.")
_IPV6_CHARS = frozenset("0123456789abcdefABCDEF:")


def classify_family(text: str) -> AddressFamily:
    """Shape only: a colon plus hex means IPv6, digits and dots mean IPv4."""
    if not text:
        return AddressFamily.UNKNOWN
    if ":" in text and all(c in _IPV6_CHARS for c in text):
        return AddressFamily.IPV6
    if all(c in _IPV4_CHARS for c in text):
        return AddressFamily.IPV4
    return AddressFamily.UNKNOWN


def is_complete(text: str, family: AddressFamily, checker: LiteralChecker = DEFAULT_CHECKER) -> bool:
    if family == AddressFamily.IPV4:
        return bool(IPV4_FULL_RE.fullmatch(text)) and checker.validate_ipv4_literal(text)
    if family == AddressFamily.IPV6:
        return (
            bool(IPV6_FULL_RE.fullmatch(text))
            and ipv6_structure_ok(text)
            and checker.validate_ipv6_literal(text)
        )
    return False


def make_token(text: str, checker: LiteralChecker = DEFAULT_CHECKER) -> Token:
    family = classify_family(text)
    completeness = Completeness.COMPLETE if is_complete(text, family, checker) else Completeness.PARTIAL
    return Token(text=text, family=family, completeness=completeness)


# ----------------------------------------------------------------------
# Numeric values (range ordering)
# ----------------------------------------------------------------------
def ipv4_to_int(text: str) -> int:
    octets = text.split(".")
    if len(octets) != 4:
        raise ValueError(f"Expected 4 octets: {text!r}")
    value = 0
    for octet in octets:
        part = int(octet)
        if not 0 <= part <= 255:
            raise ValueError(f"Octet out of range: {octet!r}")
        value = (value << 8) | part
    return value


def ipv6_to_int(text: str) -> int:
    if "::" in text:
        head, _, tail = text.partition("::")
        left = head.split(":") if head else []
        right = tail.split(":") if tail else []
        missing = 8 - (len(left) + len(right))
        if missing < 1:
            raise ValueError(f"Compression leaves no room: {text!r}")
        groups = left + ["0"] * missing + right
    else:
        groups = text.split(":")
    if len(groups) != 8:
        raise ValueError(f"Expected 8 groups: {text!r}")
    value = 0
    for group in groups:
        part = int(group, 16)
        if not 0 <= part <= 0xFFFF:
            raise ValueError(f"Group out of range: {group!r}")
        value = (value << 16) | part
    return value


def numeric_value(token: Token) -> Optional[int]:
    """Unsigned value of a complete token, or None when it cannot be computed."""
    if not token.complete:
        return None
    try:
        if token.family == AddressFamily.IPV4:
            return ipv4_to_int(token.text)
        if token.family == AddressFamily.IPV6:
            return ipv6_to_int(token.text)
    except ValueError:
        return None
    return None


def range_descending(left: Token, right: Token) -> bool:
    """True only when both sides are complete, same family, and start > end."""
    if not (left.complete and right.complete) or left.family != right.family:
        return False
    start, end = numeric_value(left), numeric_value(right)
    if start is None or end is None:
        return False
    return start > end


def families_mixed(left: Token, right: Token) -> bool:
    return {left.family, right.family} == {AddressFamily.IPV4, AddressFamily.IPV6}
