import pytest

from validation.grammar import (
    ALLOWED_CHARS_RE,
    IPV4_FULL_RE,
    IPV4_PARTIAL_RE,
    IPV6_FULL_RE,
    IPV6_PARTIAL_RE,
    ITEM_FULL_RE,
    ITEM_PARTIAL_RE,
    MASK_V4_RE,
    MASK_V6_RE,
    ipv6_structure_ok,
)
from validation.literals import IpaddressLiteralChecker, RegexLiteralChecker, get_literal_checker


@pytest.mark.parametrize("value", ["0.0.0.0", "192.168.1.1", "255.255.255.255", "10.0.0.1"])
def test_ipv4_full_accepts(value):
    assert IPV4_FULL_RE.fullmatch(value)


@pytest.mark.parametrize("value", ["256.0.0.1", "01.2.3.4", "1.2.3", "1.2.3.4.5", "a.b.c.d"])
def test_ipv4_full_rejects(value):
    assert not IPV4_FULL_RE.fullmatch(value)


@pytest.mark.parametrize("value", ["1", "192.", "192.168", "192.168.1.", "192.168.1.1"])
def test_ipv4_partial_accepts_typing_states(value):
    assert IPV4_PARTIAL_RE.fullmatch(value)


@pytest.mark.parametrize("value", ["192.168.1.1.1", "300", "a"])
def test_ipv4_partial_rejects(value):
    assert not IPV4_PARTIAL_RE.fullmatch(value)


@pytest.mark.parametrize(
    "value",
    [
        "::",
        "::1",
        "fe80::1",
        "2001:db8::1",
        "2001:0db8:85a3:0000:0000:8a2e:0370:7334",
        "1:2:3:4:5:6:7::",
        "1:2:3:4:5:6::8",
    ],
)
def test_ipv6_full_accepts(value):
    assert IPV6_FULL_RE.fullmatch(value)


@pytest.mark.parametrize("value", ["gggg::1", "12345::1", "1:2:3:4:5:6:7", "2001:db8:::1"])
def test_ipv6_full_rejects(value):
    assert not IPV6_FULL_RE.fullmatch(value)


def test_ipv6_partial_needs_a_colon():
    assert IPV6_PARTIAL_RE.fullmatch("2001:")
    assert IPV6_PARTIAL_RE.fullmatch(":")
    assert not IPV6_PARTIAL_RE.fullmatch("abc")


def test_ipv6_structure_check():
    assert ipv6_structure_ok("1:2:3:4:5:6:7:8")
    assert ipv6_structure_ok("::")
    assert ipv6_structure_ok("1:2:3:4:5:6:7::")
    assert not ipv6_structure_ok("1::2::3")
    assert not ipv6_structure_ok("1:2:3:4:5:6:7")
    assert not ipv6_structure_ok("1:2:3:4::5:6:7:8")


def test_partial_ipv4_cidr_requires_complete_address():
    assert not ITEM_PARTIAL_RE.fullmatch("192.168.1/24")
    assert ITEM_PARTIAL_RE.fullmatch("192.168.1.1/")
    assert ITEM_PARTIAL_RE.fullmatch("192.168.1.1/2")


def test_partial_ipv6_cidr_accepts_partial_address():
    assert ITEM_PARTIAL_RE.fullmatch("2001:db8/12")
    assert ITEM_PARTIAL_RE.fullmatch("2001:db8:/12")
    assert not ITEM_PARTIAL_RE.fullmatch("2001/12")
    assert ITEM_PARTIAL_RE.fullmatch("::1/128")


def test_item_full_masks_are_bounded():
    assert ITEM_FULL_RE.fullmatch("10.0.0.0/32")
    assert not ITEM_FULL_RE.fullmatch("10.0.0.0/33")
    assert ITEM_FULL_RE.fullmatch("::/128")
    assert not ITEM_FULL_RE.fullmatch("::/129")


def test_allowed_characters():
    assert ALLOWED_CHARS_RE.fullmatch("10.0.0.1 - fe80::1/64,")
    assert not ALLOWED_CHARS_RE.fullmatch("10.0.0.x")


def test_digits_are_ascii_only():
    assert not MASK_V4_RE.fullmatch("Ù¡")
    assert not MASK_V6_RE.fullmatch("Ù¡Ù¢")
    assert not IPV4_PARTIAL_RE.fullmatch("Ù¡.Ù¢")
    assert not ALLOWED_CHARS_RE.fullmatch("10.0.0.0/Ù¡")


@pytest.mark.parametrize("checker", [RegexLiteralChecker(), IpaddressLiteralChecker()])
def test_literal_checkers_agree_on_common_literals(checker):
    assert checker.validate_ipv4_literal("192.168.1.1")
    assert not checker.validate_ipv4_literal("192.168.1")
    assert checker.validate_ipv6_literal("2001:db8::1")
    assert not checker.validate_ipv6_literal("2001:db8::1::1")
    assert checker.validate_cidr_v4("10.0.0.0", "8")
    assert not checker.validate_cidr_v4("10.0.0.0", "33")
    assert checker.validate_cidr_v6("fe80::", "10")
    assert not checker.validate_cidr_v6("fe80::", "129")
    assert not checker.validate_cidr_v4("10.0.0.0", "١")


def test_ipaddress_checker_rejects_zone_ids_and_netmasks():
    checker = IpaddressLiteralChecker()
    assert not checker.validate_ipv6_literal("fe80::1%eth0")
    assert not checker.validate_cidr_v4("10.0.0.0", "255.0.0.0")


def test_get_literal_checker():
    assert isinstance(get_literal_checker("regex"), RegexLiteralChecker)
    assert isinstance(get_literal_checker("IPADDRESS"), IpaddressLiteralChecker)
    with pytest.raises(ValueError):
        get_literal_checker("native")
