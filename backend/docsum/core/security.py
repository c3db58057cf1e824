from typing import Any
import jwt
from docsum.core.config import settings


def decode_token(token: str) -> dict[str, Any]:
    """Verify a bearer token issued by the identity provider and return its claims.

    Raises ``jwt.PyJWTError`` on a bad signature, expiry, or a missing ``sub``.
    Issuer and audience are only checked when configured.
    """
    options = {
        "require": ["exp", "sub"],
        "verify_iss": settings.jwt_issuer is not None,
        "verify_aud": settings.jwt_audience is not None,
    }
    return jwt.decode(
        token,
        settings.jwt_secret,
        algorithms=[settings.jwt_algorithm],
        issuer=settings.jwt_issuer,
        audience=settings.jwt_audience,
        options=options,
    )
