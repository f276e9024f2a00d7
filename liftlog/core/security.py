"""Identity token verification.

Tokens are issued by the external identity provider; this service only
verifies them and reads the subject. Mapping the subject to an internal user
is done by liftlog.services.identity.
"""

import logging
from typing import Any

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from liftlog.core.config import get_settings

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


class IdentityError(Exception):
    """Raised when an identity token cannot be verified."""


def decode_identity_token(token: str) -> dict[str, Any]:
    """
    Decode and verify an identity token.

    Args:
        token: The encoded JWT

    Returns:
        The verified claims

    Raises:
        IdentityError: If the signature, expiry, issuer or audience is invalid
    """
    settings = get_settings()
    if not settings.identity_secret:
        raise IdentityError("Identity verification is not configured")
    options = {"verify_aud": settings.identity_audience is not None}
    try:
        return jwt.decode(
            token,
            settings.identity_secret,
            algorithms=[settings.identity_algorithm],
            audience=settings.identity_audience,
            issuer=settings.identity_issuer,
            options=options,
        )
    except JWTError as e:
        raise IdentityError(str(e)) from e


def verify_identity_token(token: str) -> str:
    """
    Verify a token and return its subject (the external user id).

    Raises:
        IdentityError: If the token is invalid or carries no subject
    """
    claims = decode_identity_token(token)
    subject = claims.get("sub")
    if not subject or not isinstance(subject, str):
        raise IdentityError("Token has no subject")
    return subject


def get_external_subject(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> str:
    """
    Dependency returning the verified external subject of the caller.

    Raises:
        HTTPException: 401 if no bearer token is present or it fails verification
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise credentials_exception
    try:
        return verify_identity_token(credentials.credentials)
    except IdentityError as e:
        logger.warning("Rejected identity token: %s", e)
        raise credentials_exception
