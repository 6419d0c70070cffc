import base64
import hashlib
import hmac
import logging
import os
from datetime import datetime, timedelta, timezone

import jwt
from fastapi import HTTPException, Request
from starlette.status import HTTP_401_UNAUTHORIZED, HTTP_429_TOO_MANY_REQUESTS
from .config import settings
from .cache import cache

logger = logging.getLogger(__name__)

TOKEN_COOKIE = "token"
TOKEN_HEADER = "x-access-token"
PBKDF2_ITERATIONS = 120_000

# ----- Passwords -----

def hash_password(password: str, salt: bytes | None = None) -> str:
    """PBKDF2-SHA256, stored as pbkdf2_sha256$iterations$salt$hash."""
    salt = salt or os.urandom(16)
    digest = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, PBKDF2_ITERATIONS)
    return "pbkdf2_sha256${}${}${}".format(
        PBKDF2_ITERATIONS,
        base64.b64encode(salt).decode("ascii"),
        base64.b64encode(digest).decode("ascii"),
    )

def verify_password(password: str, stored: str) -> bool:
    try:
        scheme, iterations, salt_b64, hash_b64 = stored.split("$")
    except ValueError:
        return False
    if scheme != "pbkdf2_sha256":
        return False
    # A corrupt record fails the check instead of erroring the login
    try:
        salt = base64.b64decode(salt_b64, validate=True)
        expected = base64.b64decode(hash_b64, validate=True)
        digest = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, int(iterations))
    except (ValueError, OverflowError):
        return False
    return hmac.compare_digest(digest, expected)

# ----- Tokens -----

def issue_token(user_id: str, email: str, role: str) -> str:
    now = datetime.now(timezone.utc)
    claims = {
        "id": user_id,
        "email": email,
        "role": role,
        "iat": now,
        "exp": now + timedelta(seconds=settings.TOKEN_TTL_SECONDS),
    }
    return jwt.encode(claims, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)

def decode_token(token: str) -> dict | None:
    try:
        return jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    except jwt.PyJWTError as exc:
        logger.warning("JWT verification failed: %s", exc)
        return None

def current_user(request: Request) -> dict | None:
    """
    Optional auth dependency: token claims from the cookie or the
    x-access-token header, or None for anonymous callers.
    A bad token is treated as anonymous rather than rejected.
    """
    token = request.cookies.get(TOKEN_COOKIE) or request.headers.get(TOKEN_HEADER)
    if not token:
        return None
    return decode_token(token)

def require_user(request: Request) -> dict:
    user = current_user(request)
    if user is None:
        raise HTTPException(status_code=HTTP_401_UNAUTHORIZED, detail="Not authenticated")
    return user

# ----- Rate limiting -----

def rate_limit(request: Request):
    """
    Basic RPM limiter.
    Uses Redis if available else in-process.
    Keyed by access token (if present) or client IP.
    """
    rpm = max(1, settings.RATE_LIMIT_RPM)
    client_ip = request.client.host if request.client else "unknown"
    token = request.cookies.get(TOKEN_COOKIE) or request.headers.get(TOKEN_HEADER) or "anon"
    caller = hashlib.sha256(token.encode("utf-8")).hexdigest()[:16]
    minute_bucket = datetime.now(timezone.utc).strftime("%Y%m%d%H%M")
    key = f"rate:{caller}:{client_ip}:{minute_bucket}"

    if cache.incr(key) > rpm:
        raise HTTPException(status_code=HTTP_429_TOO_MANY_REQUESTS, detail="Rate limit exceeded")
