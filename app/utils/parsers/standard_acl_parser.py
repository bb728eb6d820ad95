"""
Parser for standard IP access list configuration blocks.

A block looks like::

    ip access-list standard MGMT
       10 permit host 10.1.1.1
       20 permit 10.10.10.0 255.255.255.0 log
       30 deny any

Every line starting with a sequence number followed by a permit/deny verb is
a rule line. The tokens after the verb are matched against an ordered list of
optional fields; each field can match at most once and never out of order.
"""
import re
import logging
from typing import Callable, Dict, List, Optional, Tuple

from app.core.exceptions import MalformedEntryLine
from app.utils.netmask import mask_to_prefixlen
from app.utils.parsers.acl_models import ACLEntries, ACLEntry
from app.utils.parsers.base_parser import BaseParser

logger = logging.getLogger(__name__)

ANY_ADDRESS = "0.0.0.0"

# <seqno> <p...|d...>
RULE_LINE_RE = re.compile(r"^[0-9]+\s+[pd]")

SEQNO_RE = re.compile(r"^[0-9]+$")
ACTION_RE = re.compile(r"^[pd]\w+$")
ADDRESS_RE = re.compile(r"^([0-9]+(?:\.[0-9]+){3})(?:/([0-9]{1,2}))?$")
MASK_RE = re.compile(r"^[0-9]+(?:\.[0-9]+){3}$")


def _keyword(word: str) -> Callable[[str], Optional[Dict[str, str]]]:
    def match(token: str) -> Optional[Dict[str, str]]:
        return {word: token} if token == word else None
    return match


def _address(token: str) -> Optional[Dict[str, str]]:
    match = ADDRESS_RE.match(token)
    if not match:
        return None
    fields = {"address": match.group(1)}
    if match.group(2) is not None:
        fields["prefixlen"] = match.group(2)
    return fields


def _mask(token: str) -> Optional[Dict[str, str]]:
    return {"mask": token} if MASK_RE.match(token) else None


# Optional fields after the action, in the only order they may appear
FIELD_MATCHERS: List[Tuple[str, Callable[[str], Optional[Dict[str, str]]]]] = [
    ("any", _keyword("any")),
    ("host", _keyword("host")),
    ("address", _address),
    ("mask", _mask),
    ("log", _keyword("log")),
]


def tokenize_entry_line(line: str) -> Dict[str, str]:
    """
    Split a rule line into its named fields.

    Args:
        line: A single rule line, e.g. "20 permit 10.0.0.0 255.0.0.0 log"

    Returns:
        Mapping of matched field names (seqno, action, any, host, address,
        prefixlen, mask, log) to their tokens

    Raises:
        MalformedEntryLine: If the line does not match the entry grammar
    """
    tokens = line.split()
    if len(tokens) < 2 or not SEQNO_RE.match(tokens[0]) or not ACTION_RE.match(tokens[1]):
        raise MalformedEntryLine(line)

    fields = {"seqno": tokens[0], "action": tokens[1]}

    stage = 0
    for token in tokens[2:]:
        while stage < len(FIELD_MATCHERS):
            _, matcher = FIELD_MATCHERS[stage]
            stage += 1
            matched = matcher(token)
            if matched is not None:
                fields.update(matched)
                break
        else:
            raise MalformedEntryLine(line, token)

    return fields


class StandardACLParser(BaseParser):
    """Parser for the body of an `ip access-list standard` block."""

    def __init__(self, config_content: str, skip_malformed: bool = False):
        """
        Args:
            config_content: The ACL configuration block
            skip_malformed: Log and skip rule lines that do not match the
                entry grammar instead of raising MalformedEntryLine
        """
        super().__init__(config_content)
        self.skip_malformed = skip_malformed

    def rule_lines(self) -> List[str]:
        """Return the stripped lines that look like rule entries."""
        return [
            line.strip() for line in self.lines
            if RULE_LINE_RE.match(line.strip())
        ]

    def parse_entry(self, line: str) -> ACLEntry:
        """Build an ACLEntry from a single rule line."""
        fields = tokenize_entry_line(line)

        # "host" is part of the grammar but never changes the derived entry
        prefixlen = fields.get("prefixlen")
        if prefixlen is None:
            prefixlen = mask_to_prefixlen(fields.get("mask"))

        return ACLEntry(
            seqno=fields["seqno"],
            action=fields["action"],
            srcaddr=fields.get("address", ANY_ADDRESS),
            srcprefixlen=prefixlen,
            log="log" in fields,
        )

    def parse_entries(self) -> ACLEntries:
        """
        Parse all rule entries in the block.

        Returns:
            Entries keyed by seqno; a repeated seqno keeps the last line

        Raises:
            MalformedEntryLine: If a rule line fails the entry grammar and
                skip_malformed is off
            InvalidMaskError: If a mask token is not a valid netmask
        """
        entries: ACLEntries = {}

        for line in self.rule_lines():
            try:
                entry = self.parse_entry(line)
            except MalformedEntryLine as e:
                if not self.skip_malformed:
                    raise
                logger.warning(f"Skipping ACL line: {e}")
                continue
            entries[entry.seqno] = entry

        logger.debug(f"Parsed {len(entries)} ACL entries")
        return entries
