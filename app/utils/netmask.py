"""
Subnet mask helpers.
"""
import ipaddress
import re
from typing import Optional

from app.core.exceptions import InvalidMaskError

FULL_MASK = "255.255.255.255"

_DOTTED_DECIMAL_RE = re.compile(r"^[0-9]{1,3}(?:\.[0-9]{1,3}){3}$")


def mask_to_prefixlen(mask: Optional[str] = None) -> str:
    """
    Convert a dotted-decimal subnet mask to a prefix length.

    The mask is read as the netmask of the 0.0.0.0 network and the result is
    its count of leading one bits. A missing mask means a full host mask.

    Args:
        mask: Dotted-decimal mask, or None

    Returns:
        The prefix length as a decimal string, e.g. "24"

    Raises:
        InvalidMaskError: If the mask is not a contiguous dotted-decimal
            netmask (inverse masks such as 0.0.0.255 included)
    """
    if mask is None:
        mask = FULL_MASK

    if not isinstance(mask, str) or not _DOTTED_DECIMAL_RE.match(mask):
        raise InvalidMaskError(str(mask))

    try:
        address = ipaddress.IPv4Address(mask)
        network = ipaddress.IPv4Network(f"0.0.0.0/{mask}")
    except ValueError as e:
        raise InvalidMaskError(mask) from e

    # ipaddress also reads inverse (host) masks; only netmasks are valid here
    if network.netmask != address:
        raise InvalidMaskError(mask)

    return str(network.prefixlen)
