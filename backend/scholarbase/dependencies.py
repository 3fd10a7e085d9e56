import logging
from fastapi import Depends, Query
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from typing import Optional

from scholarbase.core.security import decode_token

logger = logging.getLogger(__name__)

# Declares bearer auth in the OpenAPI document. Tokens are NOT enforced.
security = HTTPBearer(auto_error=False, description="JWT token for authentication (not enforced)")


async def bearer_not_enforced(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)
) -> Optional[str]:
    """Pass-through bearer stage: logs who the token claims to be and never rejects"""
    if credentials is None:
        logger.debug("Request without bearer token")
        return None

    payload = decode_token(credentials.credentials)
    if payload is None:
        logger.debug("Bearer token presented but could not be decoded (not enforced)")
    else:
        logger.debug(f"Bearer token for {payload.get('sub')} (not enforced)")
    return credentials.credentials


def get_pagination_params(
    limit: int = Query(20, ge=1, description="Number of items to return"),
    offset: int = Query(0, ge=0, description="Number of items to skip")
) -> dict:
    """Get limit/offset pagination parameters"""
    return {
        "limit": limit,
        "offset": offset
    }
