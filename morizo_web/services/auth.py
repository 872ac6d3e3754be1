from __future__ import annotations

from typing import Optional

from fastapi import Header, HTTPException, status

from morizo_web.telemetry import LogCategory, get_logger, mask_token

logger = get_logger(LogCategory.AUTH)


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    if not authorization or not authorization.startswith("Bearer "):
        return None
    token = authorization[7:].strip()
    if not token or token in ("null", "undefined"):
        return None
    return token


def authenticate_request(authorization: Optional[str] = Header(None)) -> str:
    """
    Dependency yielding the caller's bearer token. The token itself is
    verified by the Morizo AI backend; here we only require one to exist.
    """
    token = extract_bearer_token(authorization)
    if token is None:
        logger.warning("authentication failed: missing or malformed Authorization header")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )
    logger.debug("authenticated caller token=%s", mask_token(token))
    return token
