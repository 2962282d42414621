import logging
from datetime import datetime, timedelta, timezone

import jwt
from passlib.context import CryptContext

from kidcode.core.config import settings
from kidcode.core.database import MAX_ROW_ID
from kidcode.core.exceptions import Unauthorized
from kidcode.schemas.user_schema import TokenData

logger = logging.getLogger(__name__)

_pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=settings.BCRYPT_ROUNDS)


def hash_password(password: str) -> str:
    return _pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return _pwd_context.verify(password, password_hash)
    except ValueError:
        # Malformed hash in the store; treat as a failed login
        logger.warning("Stored password hash could not be parsed.")
        return False


def create_access_token(user_id: int, email: str, expires_delta: timedelta | None = None) -> str:
    """
    Issues a signed bearer token for the given user.
    The user id travels in `sub` as a string, as JWT requires.
    """
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(days=settings.JWT_EXPIRE_DAYS))
    payload = {
        "sub": str(user_id),
        "email": email,
        "iat": int(now.timestamp()),
        "exp": int(expire.timestamp()),
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> TokenData:
    """
    Verifies a bearer token and extracts the user reference.

    Raises:
        Unauthorized: if the token is expired, tampered with, or lacks a usable subject.
    """
    try:
        payload = jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    except jwt.ExpiredSignatureError:
        logger.warning("Bearer token expired.")
        raise Unauthorized("Session expired. Please log in again.")
    except jwt.InvalidTokenError as e:
        logger.warning(f"Bearer token verification failed: {e}")
        raise Unauthorized("Invalid token")

    subject = payload.get("sub")
    try:
        user_id = int(subject)
    except (TypeError, ValueError):
        logger.warning(f"Bearer token has an unusable subject: {subject!r}")
        raise Unauthorized("Invalid token")
    if not 1 <= user_id <= MAX_ROW_ID:
        logger.warning(f"Bearer token subject out of range: {subject!r}")
        raise Unauthorized("Invalid token")

    return TokenData(user_id=user_id, email=payload.get("email"))
