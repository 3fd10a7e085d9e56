from typing import Optional, Dict, Any
from datetime import datetime, timedelta, timezone
from jose import JWTError, jwt
from scholarbase.config import settings


def create_access_token(data: Dict[str, Any], expires_in: Optional[int] = None) -> str:
    """Create a signed JWT access token that expires after ``expires_in`` seconds"""
    to_encode = data.copy()

    if expires_in is None:
        expires_in = settings.ACCESS_TOKEN_EXPIRE_SECONDS

    now = datetime.now(timezone.utc)
    to_encode.update({
        "exp": now + timedelta(seconds=expires_in),
        "type": "access",
        "iat": now
    })

    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_token(token: str) -> Optional[Dict[str, Any]]:
    """Decode and verify a JWT token"""
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        return None
