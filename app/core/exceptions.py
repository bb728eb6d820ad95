"""
Errors raised while translating ACL configuration text.
"""
from typing import Optional


class ACLError(ValueError):
    """Base class for ACL translation errors."""


class InvalidMaskError(ACLError):
    """A subnet mask token is not a valid dotted-decimal netmask."""

    def __init__(self, mask: str):
        self.mask = mask
        super().__init__(f"Invalid subnet mask: {mask!r}")


class MalformedEntryLine(ACLError):
    """A rule line passed the line filter but does not match the entry grammar."""

    def __init__(self, line: str, token: Optional[str] = None):
        self.line = line
        self.token = token
        if token is None:
            message = f"Malformed ACL entry line: {line!r}"
        else:
            message = f"Malformed ACL entry line: {line!r} (unexpected token {token!r})"
        super().__init__(message)
