"""
Base parser class for ACL configuration blocks.
"""
from abc import ABC, abstractmethod
import logging

from app.utils.parsers.acl_models import ACLEntries

logger = logging.getLogger(__name__)


class BaseParser(ABC):
    """Base class for ACL configuration parsers."""
    
    def __init__(self, config_content: str):
        """
        Initialize parser with config content.
        
        Args:
            config_content: The ACL configuration block as string
        """
        self.config_content = config_content
        self.lines = config_content.splitlines()
    
    @abstractmethod
    def parse_entries(self) -> ACLEntries:
        """Parse the rule entries of the ACL, keyed by sequence number."""
        pass
