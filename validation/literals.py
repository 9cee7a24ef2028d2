"""
Literal checkers: the capability that confirms a token is a complete IP
literal (or a CIDR pair).

The regex checker is always available. The ``ipaddress`` checker layers the
standard library parser on top; callers still require the grammar tables to
agree, so a checker can only narrow what counts as complete.
"""

from __future__ import annotations

import ipaddress
from typing import Dict, Protocol, Type

from validation.grammar import (
    IPV4_FULL_RE,
    IPV6_FULL_RE,
    MASK_V4_RE,
    MASK_V6_RE,
    ipv6_structure_ok,
)


class LiteralChecker(Protocol):
    """Protocol for IP literal checkers. Implementations never raise."""

    def validate_ipv4_literal(self, text: str) -> bool:
        ...

    def validate_ipv6_literal(self, text: str) -> bool:
        ...

    def validate_cidr_v4(self, address: str, mask: str) -> bool:
        ...

    def validate_cidr_v6(self, address: str, mask: str) -> bool:
        ...


class RegexLiteralChecker:
    name = "regex"

    def validate_ipv4_literal(self, text: str) -> bool:
        return bool(IPV4_FULL_RE.fullmatch(text))

    def validate_ipv6_literal(self, text: str) -> bool:
        return bool(IPV6_FULL_RE.fullmatch(text)) and ipv6_structure_ok(text)

    def validate_cidr_v4(self, address: str, mask: str) -> bool:
        return self.validate_ipv4_literal(address) and bool(MASK_V4_RE.fullmatch(mask))

    def validate_cidr_v6(self, address: str, mask: str) -> bool:
        return self.validate_ipv6_literal(address) and bool(MASK_V6_RE.fullmatch(mask))


class IpaddressLiteralChecker:
    name = "ipaddress"

    def validate_ipv4_literal(self, text: str) -> bool:
        try:
            ipaddress.IPv4Address(text)
            return True
        except ValueError:
            return False

    def validate_ipv6_literal(self, text: str) -> bool:
        # zone ids ("fe80::1%eth0") are accepted by ipaddress but not here
        if "%" in text:
            return False
        try:
            ipaddress.IPv6Address(text)
            return True
        except ValueError:
            return False

    @staticmethod
    def _network(address: str, mask: str, version: int) -> bool:
        # ip_network also takes dotted netmasks; only prefix lengths count here
        if not (mask.isascii() and mask.isdigit()):
            return False
        try:
            net = ipaddress.ip_network(f"{address}/{mask}", strict=False)
        except ValueError:
            return False
        return net.version == version

    def validate_cidr_v4(self, address: str, mask: str) -> bool:
        return self.validate_ipv4_literal(address) and self._network(address, mask, 4)

    def validate_cidr_v6(self, address: str, mask: str) -> bool:
        return self.validate_ipv6_literal(address) and self._network(address, mask, 6)


CHECKERS: Dict[str, Type] = {
    RegexLiteralChecker.name: RegexLiteralChecker,
    IpaddressLiteralChecker.name: IpaddressLiteralChecker,
}

DEFAULT_CHECKER: LiteralChecker = RegexLiteralChecker()


def get_literal_checker(name: str = "regex") -> LiteralChecker:
    try:
        return CHECKERS[name.lower()]()
    except KeyError:
        raise ValueError(
            f"Unknown literal checker '{name}'. Expected one of {sorted(CHECKERS)}."
        ) from None
