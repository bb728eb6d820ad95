"""
Pydantic models for structured ACL representation.
"""
from typing import Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator


class ACLEntry(BaseModel):
    """One rule line of a standard IP access list."""

    model_config = ConfigDict(frozen=True)

    seqno: Optional[str] = None
    action: str  # e.g., "permit" / "deny" / "remark"
    srcaddr: str = "0.0.0.0"
    srcprefixlen: str = "32"
    log: bool = False

    @field_validator("seqno", "srcprefixlen", mode="before")
    @classmethod
    def coerce_number(cls, v: Union[int, str, None]) -> Optional[str]:
        """Accept integers for numeric fields and store them as strings."""
        if isinstance(v, bool):
            raise ValueError("must be a string or integer")
        if isinstance(v, int):
            return str(v)
        return v


# Entries of one ACL keyed by sequence number
ACLEntries = Dict[str, ACLEntry]
