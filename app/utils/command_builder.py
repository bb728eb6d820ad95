"""
Builders for standard ACL configuration commands.
"""
from typing import List

from app.utils.config_blocks import acl_heading
from app.utils.parsers.acl_models import ACLEntry

EXIT_COMMAND = "exit"


def build_entry(entry: ACLEntry) -> str:
    """
    Render one entry as the command line the device expects.

    No validation is done; the entry is trusted as given.

    Example:
        "30 deny 192.168.1.0/24 log"
    """
    command = f"{entry.seqno} " if entry.seqno else ""
    command += f"{entry.action} {entry.srcaddr}/{entry.srcprefixlen}"
    if entry.log:
        command += " log"
    return command


def build_no_entry(seqno: str) -> str:
    """Render the command that removes the entry with the given seqno."""
    return f"no {seqno}"


def in_acl_context(name: str, commands: List[str]) -> List[str]:
    """Wrap commands so they run inside the named ACL's configuration mode."""
    return [acl_heading(name), *commands, EXIT_COMMAND]
