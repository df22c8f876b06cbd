from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from redis import asyncio as aioredis
from app.core.config import settings
from app.core.database import get_redis
from app.core.security import decode_token

oauth2_scheme = OAuth2PasswordBearer(tokenUrl=settings.AUTH_TOKEN_URL)


async def get_current_user_id(
    token: str = Depends(oauth2_scheme),
    redis: aioredis.Redis = Depends(get_redis)
) -> str:
    """
    Resolve the caller's user id from a bearer token.

    Users are registered and logged in by the identity service; this only
    verifies the access token it issued and returns the ``sub`` claim.
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    try:
        payload = decode_token(token)
        user_id = payload.get("sub")
        token_type = payload.get("type")

        if user_id is None or token_type != "access":
            raise credentials_exception

    except HTTPException:
        raise credentials_exception

    # Check if token is blacklisted (logged out)
    is_blacklisted = await redis.get(f"blacklist:{token}")
    if is_blacklisted:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token has been revoked"
        )

    return str(user_id)
