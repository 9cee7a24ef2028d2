#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Grammar tables for address expressions.

Leaf patterns (octet, IPv4, IPv6, CIDR masks) and the per-item compositions
(single, CIDR, range) for both the strict and the lenient grammar. Lists are
not expressed here: the tokenizer splits on commas and each item is matched
on its own.

All patterns are compiled once at import with re.ASCII (digits and
whitespace are ASCII only) and only ever used with fullmatch.
"""

from __future__ import annotations

import re

# ----------------------------------------------------------------------
# IPv4
# ----------------------------------------------------------------------
OCTET = r"(?:25[0-5]|2[0-4]\d|1\d{2}|[1-9]?\d)"

IPV4_FULL = rf"{OCTET}(?:\.{OCTET}){{3}}"

# "192.", "192.168", "192.168.1." ...
IPV4_PARTIAL = rf"{OCTET}(?:\.{OCTET}){{0,2}}(?:\.{OCTET}?\.?)?"

# ----------------------------------------------------------------------
# IPv6
# ----------------------------------------------------------------------
H16 = r"[0-9a-fA-F]{1,4}"

IPV6_FULL = "(?:" + "|".join((
    rf"(?:{H16}:){{7}}{H16}",                 # 1:2:3:4:5:6:7:8
    rf"(?:{H16}:){{1,7}}:",                   # 1:: ... 1:2:3:4:5:6:7::
    rf"(?:{H16}:){{1,6}}:{H16}",              # 1::8 ... 1:2:3:4:5:6::8
    rf"(?:{H16}:){{1,5}}(?::{H16}){{1,2}}",
    rf"(?:{H16}:){{1,4}}(?::{H16}){{1,3}}",
    rf"(?:{H16}:){{1,3}}(?::{H16}){{1,4}}",
    rf"(?:{H16}:){{1,2}}(?::{H16}){{1,5}}",
    rf"{H16}:(?::{H16}){{1,6}}",
    rf":(?::{H16}){{1,7}}",                   # ::2 ... ::2:3:4:5:6:7:8
    r"::",
)) + ")"

# At least one colon inside this token, hex digits and colons only.
IPV6_PARTIAL = r"(?=[0-9a-fA-F]*:)[0-9a-fA-F:]{1,39}"

# ----------------------------------------------------------------------
# CIDR
# ----------------------------------------------------------------------
MASK_V4 = r"(?:3[0-2]|[12]\d|\d)"
MASK_V6 = r"(?:12[0-8]|1[01]\d|\d{1,2})"

IPV4_CIDR_FULL = rf"{IPV4_FULL}/{MASK_V4}"
IPV6_CIDR_FULL = rf"{IPV6_FULL}/{MASK_V6}"

# A slash is only accepted once the IPv4 address is complete ("192.168.1/24" is not).
IPV4_CIDR_PARTIAL = rf"{IPV4_FULL}/\d{{0,2}}"
IPV6_CIDR_PARTIAL = rf"{IPV6_PARTIAL}/\d{{0,3}}"

# ----------------------------------------------------------------------
# Ranges
# ----------------------------------------------------------------------
IPV4_RANGE_FULL = rf"{IPV4_FULL}\s*-\s*{IPV4_FULL}"
IPV6_RANGE_FULL = rf"{IPV6_FULL}\s*-\s*{IPV6_FULL}"

# Right side may be missing, including a dangling "192.168.1.1-".
IPV4_RANGE_PARTIAL = rf"{IPV4_PARTIAL}(?:\s*-\s*(?:{IPV4_PARTIAL})?)?"
IPV6_RANGE_PARTIAL = rf"{IPV6_PARTIAL}(?:\s*-\s*(?:{IPV6_PARTIAL})?)?"

# ----------------------------------------------------------------------
# Items (one comma-separated unit)
# ----------------------------------------------------------------------
ITEM_FULL = "(?:" + "|".join((
    IPV4_CIDR_FULL, IPV4_RANGE_FULL, IPV4_FULL,
    IPV6_CIDR_FULL, IPV6_RANGE_FULL, IPV6_FULL,
)) + ")"

ITEM_PARTIAL = "(?:" + "|".join((
    IPV4_CIDR_PARTIAL, IPV4_RANGE_PARTIAL,
    IPV6_CIDR_PARTIAL, IPV6_RANGE_PARTIAL,
)) + ")"

IPV4_FULL_RE = re.compile(IPV4_FULL, re.ASCII)
IPV4_PARTIAL_RE = re.compile(IPV4_PARTIAL, re.ASCII)
IPV6_FULL_RE = re.compile(IPV6_FULL, re.ASCII)
IPV6_PARTIAL_RE = re.compile(IPV6_PARTIAL, re.ASCII)
MASK_V4_RE = re.compile(MASK_V4, re.ASCII)
MASK_V6_RE = re.compile(MASK_V6, re.ASCII)
ITEM_FULL_RE = re.compile(ITEM_FULL, re.ASCII)
ITEM_PARTIAL_RE = re.compile(ITEM_PARTIAL, re.ASCII)

# Characters that may appear anywhere in an address expression.
ALLOWED_CHARS_RE = re.compile(r"[0-9a-fA-F:.,\s/-]*", re.ASCII)


def ipv6_structure_ok(text: str) -> bool:
    """
    Post-regex structural check for a complete IPv6 literal: at most one
    '::'; exactly 8 groups without it, at most 7 filled groups with it.
    """
    compressions = text.count("::")
    if compressions > 1:
        return False
    filled = [g for g in text.split(":") if g]
    if compressions == 0:
        return len(filled) == 8
    return len(filled) <= 7
