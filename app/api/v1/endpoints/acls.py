"""
Standard ACL translation endpoints.
"""
import logging
from fastapi import APIRouter, HTTPException, Path, status

from app.core.config import settings
from app.core.exceptions import ACLError
from app.schemas.acl import (
    ACL_NAME_PATTERN,
    ACLEntriesResponse,
    ACLLookupRequest,
    ACLScanResponse,
    CommandsResponse,
    ConfigRequest,
    EntryRequest,
    RemoveEntryRequest,
    RenderResponse,
    UpdateEntryRequest,
)
from app.services.acl_service import ACLService

logger = logging.getLogger(__name__)

router = APIRouter()


def _check_config_size(config: str):
    """Reject configuration text above MAX_CONFIG_SIZE."""
    if len(config) > settings.MAX_CONFIG_SIZE:
        raise HTTPException(
            status_code=413,
            detail=f"Configuration exceeds maximum size of {settings.MAX_CONFIG_SIZE} characters"
        )


def _parse_error(e: ACLError) -> HTTPException:
    logger.warning(f"ACL parse error: {e}")
    return HTTPException(
        status_code=422,
        detail=str(e)
    )


@router.post("/parse", response_model=ACLEntriesResponse)
async def parse_acl_block(request: ConfigRequest):
    """
    Parse a standard ACL configuration block into entries keyed by seqno.
    """
    _check_config_size(request.config)
    try:
        entries = ACLService().parse(request.config)
    except ACLError as e:
        raise _parse_error(e)
    return ACLEntriesResponse(entries=entries)


@router.post("/lookup", response_model=ACLEntriesResponse)
async def lookup_acl(request: ACLLookupRequest):
    """
    Find a named standard ACL in a full configuration and parse it.

    Returns HTTP 404 when the configuration has no block for the ACL.
    """
    _check_config_size(request.config)
    try:
        entries = ACLService().get_from_config(request.config, request.name)
    except ACLError as e:
        raise _parse_error(e)

    if entries is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Standard ACL {request.name} not found in configuration"
        )
    return ACLEntriesResponse(name=request.name, entries=entries)


@router.post("/scan", response_model=ACLScanResponse)
async def scan_acls(request: ConfigRequest):
    """
    Parse every standard ACL found in a full configuration.
    """
    _check_config_size(request.config)
    try:
        acls = ACLService().getall(request.config)
    except ACLError as e:
        raise _parse_error(e)
    return ACLScanResponse(acls=acls, total=len(acls))


@router.post("/render", response_model=RenderResponse)
async def render_entry(request: EntryRequest):
    """Render a single entry as a configuration command line."""
    return RenderResponse(command=ACLService().render(request.entry))


@router.post("/{name}/commands/create", response_model=CommandsResponse)
async def create_acl_commands(name: str = Path(..., pattern=ACL_NAME_PATTERN)):
    """Commands that create an empty standard ACL."""
    return CommandsResponse(name=name, commands=ACLService().build_create_command(name))


@router.post("/{name}/commands/delete", response_model=CommandsResponse)
async def delete_acl_commands(name: str = Path(..., pattern=ACL_NAME_PATTERN)):
    """Commands that delete a standard ACL."""
    return CommandsResponse(name=name, commands=ACLService().build_delete_command(name))


@router.post("/{name}/commands/default", response_model=CommandsResponse)
async def default_acl_commands(name: str = Path(..., pattern=ACL_NAME_PATTERN)):
    """Commands that reset a standard ACL to its default (removed) state."""
    return CommandsResponse(name=name, commands=ACLService().build_default_command(name))


@router.post("/{name}/commands/add", response_model=CommandsResponse)
async def add_entry_commands(request: EntryRequest, name: str = Path(..., pattern=ACL_NAME_PATTERN)):
    """Commands that add an entry to a standard ACL."""
    commands = ACLService().build_add_command(name, request.entry)
    logger.info(f"Built add command for ACL {name}: {len(commands)} lines")
    return CommandsResponse(name=name, commands=commands)


@router.post("/{name}/commands/update", response_model=CommandsResponse)
async def update_entry_commands(request: UpdateEntryRequest, name: str = Path(..., pattern=ACL_NAME_PATTERN)):
    """Commands that replace the entry with the same seqno in a standard ACL."""
    commands = ACLService().build_update_command(name, request.entry)
    logger.info(f"Built update command for ACL {name} seqno {request.entry.seqno}")
    return CommandsResponse(name=name, commands=commands)


@router.post("/{name}/commands/remove", response_model=CommandsResponse)
async def remove_entry_commands(request: RemoveEntryRequest, name: str = Path(..., pattern=ACL_NAME_PATTERN)):
    """Commands that remove an entry from a standard ACL by seqno."""
    commands = ACLService().build_remove_command(name, request.seqno)
    logger.info(f"Built remove command for ACL {name} seqno {request.seqno}")
    return CommandsResponse(name=name, commands=commands)
