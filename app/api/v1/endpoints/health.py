"""
Health check endpoint for monitoring and diagnostics.
"""
import logging
from fastapi import APIRouter

from app.core.config import settings
from app.utils.parsers.standard_acl_parser import StandardACLParser

logger = logging.getLogger(__name__)

router = APIRouter()

# Parsed on every health check to prove the parser is importable and working
_PROBE_BLOCK = "ip access-list standard HEALTH\n   10 permit any\n"


@router.get("/health")
async def health_check():
    """
    Health check endpoint that verifies:
    - API is running
    - The ACL parser handles a known block

    Returns:
        {
            "ok": true,
            "parser": true
        }
    """
    parser_ok = len(StandardACLParser(_PROBE_BLOCK).parse_entries()) == 1
    if not parser_ok:
        logger.error("Parser health check returned an unexpected result")

    return {
        "ok": parser_ok,
        "parser": parser_ok,
        "environment": settings.APP_ENV,
    }
