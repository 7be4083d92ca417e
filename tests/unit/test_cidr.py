"""Tests for the IPv4 target helpers."""

import pytest

from streamgate.policy.cidr import (
    get_cidr_ipv4,
    get_cidr_mask,
    ipv4_within_mask,
    is_ipv4,
)


@pytest.mark.parametrize("text", ["10.0.0.1", "0.0.0.0", "255.255.255.255"])
def test_is_ipv4_valid(text: str):
    assert is_ipv4(text)


@pytest.mark.parametrize(
    "text", ["", "all", "10.0.0", "256.1.1.1", "10.0.0.0/8", "::1", "example.com"]
)
def test_is_ipv4_invalid(text: str):
    assert not is_ipv4(text)


def test_get_cidr_ipv4():
    assert get_cidr_ipv4("192.168.1.0/24") == "192.168.1.0"
    assert get_cidr_ipv4("192.168.1.10") == "192.168.1.10"
    assert get_cidr_ipv4("all") == "all"


def test_get_cidr_mask_from_bits():
    assert get_cidr_mask("10.0.0.0/8") == "255.0.0.0"
    assert get_cidr_mask("192.168.1.0/24") == "255.255.255.0"
    assert get_cidr_mask("1.2.3.4/32") == "255.255.255.255"
    assert get_cidr_mask("0.0.0.0/0") == "0.0.0.0"


def test_get_cidr_mask_dotted():
    assert get_cidr_mask("10.0.0.0/255.0.0.0") == "255.0.0.0"


@pytest.mark.parametrize("target", ["10.0.0.1", "all", "10.0.0.0/", "10.0.0.0/33", "10.0.0.0/x"])
def test_get_cidr_mask_missing_or_malformed(target: str):
    assert get_cidr_mask(target) == ""


def test_within_mask():
    assert ipv4_within_mask("192.168.1.50", "192.168.1.0", "255.255.255.0")
    assert not ipv4_within_mask("192.168.2.50", "192.168.1.0", "255.255.255.0")
    assert ipv4_within_mask("8.8.8.8", "0.0.0.0", "0.0.0.0")


def test_within_mask_rejects_invalid_operands():
    assert not ipv4_within_mask("::1", "192.168.1.0", "255.255.255.0")
    assert not ipv4_within_mask("192.168.1.1", "bogus", "255.255.255.0")
    assert not ipv4_within_mask("192.168.1.1", "192.168.1.0", "")
