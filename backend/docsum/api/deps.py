import jwt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from docsum.core.exceptions import Unauthorized
from docsum.core.logging import caller_ctx_var
from docsum.core.security import decode_token
from docsum.services.identity import CallerContext

_bearer = HTTPBearer(auto_error=False)


async def get_caller(creds: HTTPAuthorizationCredentials | None = Depends(_bearer)) -> CallerContext:
    if not creds or creds.scheme.lower() != "bearer":
        raise Unauthorized()
    try:
        claims = decode_token(creds.credentials)
    except jwt.PyJWTError:
        raise Unauthorized("Invalid token")
    subject = str(claims.get("sub") or "").strip()
    if not subject:
        raise Unauthorized("Invalid token")
    caller_ctx_var.set(subject)
    return CallerContext(subject=subject)
