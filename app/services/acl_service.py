"""
Service for translating standard ACLs between configuration text and entries.
"""
import logging
from typing import Dict, List, Optional

from app.core.config import settings
from app.utils.command_builder import build_entry, build_no_entry, in_acl_context
from app.utils.config_blocks import acl_heading, find_standard_acl_names, get_block
from app.utils.parsers.acl_models import ACLEntries, ACLEntry
from app.utils.parsers.standard_acl_parser import StandardACLParser

logger = logging.getLogger(__name__)


class ACLService:
    """Service for standard ACL parsing and command generation."""

    def __init__(self, skip_malformed: Optional[bool] = None):
        """
        Initialize ACL service.

        Args:
            skip_malformed: Skip rule lines that fail the entry grammar
                instead of failing the parse. Defaults to the
                ACL_SKIP_MALFORMED_LINES setting.
        """
        if skip_malformed is None:
            skip_malformed = settings.ACL_SKIP_MALFORMED_LINES
        self.skip_malformed = skip_malformed

    # Reading

    def parse(self, config_block: str) -> ACLEntries:
        """Parse an ACL configuration block into entries keyed by seqno."""
        parser = StandardACLParser(config_block, skip_malformed=self.skip_malformed)
        return parser.parse_entries()

    def get(self, config_block: Optional[str]) -> Optional[ACLEntries]:
        """
        Return the entries of an ACL block.

        Args:
            config_block: The ACL configuration block, or None if the
                block was not found

        Returns:
            Entries keyed by seqno, or None when there is no block
        """
        if config_block is None:
            return None
        return self.parse(config_block)

    def get_from_config(self, config: str, name: str) -> Optional[ACLEntries]:
        """Look up the named ACL in a full configuration and parse it."""
        return self.get(get_block(config, acl_heading(name)))

    def getall(self, config: str) -> Dict[str, ACLEntries]:
        """
        Parse every standard ACL in a full configuration.

        Returns:
            Entries of each ACL keyed by ACL name; empty if there are none
        """
        acls: Dict[str, ACLEntries] = {}
        for name in find_standard_acl_names(config):
            entries = self.get_from_config(config, name)
            if entries is not None:
                acls[name] = entries
        logger.info(f"Found {len(acls)} standard ACLs in configuration")
        return acls

    # Writing

    def render(self, entry: ACLEntry) -> str:
        return build_entry(entry)

    def build_create_command(self, name: str) -> List[str]:
        return [acl_heading(name)]

    def build_delete_command(self, name: str) -> List[str]:
        return [f"no {acl_heading(name)}"]

    def build_default_command(self, name: str) -> List[str]:
        return [f"default {acl_heading(name)}"]

    def build_add_command(self, name: str, entry: ACLEntry) -> List[str]:
        """Commands that add an entry to the named ACL."""
        return in_acl_context(name, [build_entry(entry)])

    def build_update_command(self, name: str, entry: ACLEntry) -> List[str]:
        """Commands that replace the entry with the same seqno in the named ACL."""
        return in_acl_context(name, [build_no_entry(entry.seqno), build_entry(entry)])

    def build_remove_command(self, name: str, seqno: str) -> List[str]:
        """Commands that remove the entry with the given seqno from the named ACL."""
        return in_acl_context(name, [build_no_entry(seqno)])
