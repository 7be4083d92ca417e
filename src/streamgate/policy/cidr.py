"""IPv4 helpers for rule targets — pure functions, never raise on bad input."""

from __future__ import annotations

import ipaddress

_DELIMITER = "/"


def is_ipv4(text: str) -> bool:
    """Return True if text is a dotted-quad IPv4 literal."""
    try:
        ipaddress.IPv4Address(text)
    except ValueError:
        return False
    return True


def get_cidr_ipv4(target: str) -> str:
    """Network portion of ``network/mask``; the whole string without a mask."""
    return target.split(_DELIMITER, 1)[0]


def get_cidr_mask(target: str) -> str:
    """Mask of ``network/mask`` as a dotted netmask, or "" if absent or malformed.

    Accepts prefix bits (``10.0.0.0/8``) or a dotted mask
    (``10.0.0.0/255.0.0.0``).
    """
    if _DELIMITER not in target:
        return ""
    mask = target.split(_DELIMITER, 1)[1]

    if is_ipv4(mask):
        return mask

    if not (mask.isascii() and mask.isdigit()):
        return ""
    bits = int(mask)
    if bits > 32:
        return ""
    value = (0xFFFFFFFF << (32 - bits)) & 0xFFFFFFFF
    return str(ipaddress.IPv4Address(value))


def ipv4_within_mask(address: str, network: str, mask: str) -> bool:
    """True if address and network agree on every bit set in mask."""
    if not (is_ipv4(address) and is_ipv4(network) and is_ipv4(mask)):
        return False
    mask_value = int(ipaddress.IPv4Address(mask))
    return (int(ipaddress.IPv4Address(address)) & mask_value) == (
        int(ipaddress.IPv4Address(network)) & mask_value
    )
