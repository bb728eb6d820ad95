"""Schemas for ACL translation endpoints."""
import re
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, Field, field_validator

from app.utils.parsers.acl_models import ACLEntry

# ACL names are a single token on the heading line
ACL_NAME_PATTERN = r"^\S+$"

_SEQNO_RE = re.compile(r"^[0-9]+$")


def validate_seqno(v: Union[int, str, None]) -> str:
    """Return the seqno as a string of ASCII digits."""
    v = "" if v is None else str(v).strip()
    if not _SEQNO_RE.match(v):
        raise ValueError("seqno must be a number")
    return v


class ConfigRequest(BaseModel):
    """Request schema carrying configuration text."""
    config: str = Field(..., description="ACL block or full running configuration")


class ACLLookupRequest(ConfigRequest):
    """Request schema for looking up one ACL in a full configuration."""
    name: str = Field(..., pattern=ACL_NAME_PATTERN, description="Standard ACL name")


class EntryRequest(BaseModel):
    """Request schema carrying a single ACL entry."""
    entry: ACLEntry


class UpdateEntryRequest(EntryRequest):
    """Request schema for replacing an existing entry."""

    @field_validator("entry")
    @classmethod
    def require_seqno(cls, v: ACLEntry) -> ACLEntry:
        """An update targets an existing seqno, so a numeric one must be given."""
        validate_seqno(v.seqno)
        return v


class RemoveEntryRequest(BaseModel):
    """Request schema for removing an entry by seqno."""
    seqno: Union[int, str] = Field(..., description="Sequence number of the entry to remove")

    @field_validator("seqno")
    @classmethod
    def normalize_seqno(cls, v: Union[int, str]) -> str:
        return validate_seqno(v)


class ACLEntriesResponse(BaseModel):
    """Response schema for parsed entries."""
    name: Optional[str] = None
    entries: Dict[str, ACLEntry]


class ACLScanResponse(BaseModel):
    """Response schema for every standard ACL in a configuration."""
    acls: Dict[str, Dict[str, ACLEntry]]
    total: int


class RenderResponse(BaseModel):
    """Response schema for a rendered entry."""
    command: str


class CommandsResponse(BaseModel):
    """Response schema for an ordered list of configuration commands."""
    name: str
    commands: List[str]
