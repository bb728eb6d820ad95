"""
Helpers for locating configuration blocks in a running configuration.
"""
import re
import logging
from typing import List, Optional

logger = logging.getLogger(__name__)

STANDARD_ACL_HEADING = "ip access-list standard {name}"

STANDARD_ACL_NAME_RE = re.compile(r"ip access-list standard (\S+)")


def acl_heading(name: str) -> str:
    """Return the heading line of the named standard ACL."""
    return STANDARD_ACL_HEADING.format(name=name)


def get_block(config: str, heading: str) -> Optional[str]:
    """
    Return a configuration block by its heading line.

    The block is the heading line followed by every indented line under it,
    up to the next line that starts in the first column.

    Args:
        config: Full configuration text
        heading: The exact heading line, e.g. "ip access-list standard MGMT"

    Returns:
        The block text, or None if the heading is not present
    """
    block: List[str] = []
    in_block = False

    for line in config.splitlines():
        if in_block:
            if line[:1].isspace():
                block.append(line)
                continue
            break
        if line.rstrip() == heading:
            in_block = True
            block.append(line.rstrip())

    if not in_block:
        return None
    return "\n".join(block)


def find_standard_acl_names(config: str) -> List[str]:
    """Return the names of all standard ACLs in the config, in order of appearance."""
    names: List[str] = []
    for name in STANDARD_ACL_NAME_RE.findall(config):
        if name not in names:
            names.append(name)
    return names
