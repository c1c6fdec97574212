import hmac
import logging
from dataclasses import dataclass
from typing import Optional

from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

COOKIE_NAME = "growth_admin"
COOKIE_VALUE = "1"
SESSION_TTL_SECONDS = 60 * 60 * 8

INVALID_KEY_ERROR = "Invalid access key"


@dataclass(frozen=True)
class AuthResult:
    ok: bool
    error: Optional[str] = None

    @classmethod
    def accepted(cls):
        return cls(ok=True)

    @classmethod
    def rejected(cls):
        return cls(ok=False, error=INVALID_KEY_ERROR)

    def to_dict(self):
        if self.ok:
            return {"ok": True}
        return {"ok": False, "error": self.error}


def extract_key(body) -> Optional[str]:
    """Pull the submitted key out of a decoded login body.

    Anything that is not an object with a string ``key`` counts as an
    empty submission.
    """
    if not isinstance(body, dict):
        return None
    key = body.get("key")
    if not isinstance(key, str):
        return None
    return key


def authenticate(settings, submitted_key: Optional[str]) -> AuthResult:
    expected = settings.admin_access_key
    if not submitted_key or not expected:
        return AuthResult.rejected()
    if not hmac.compare_digest(submitted_key.encode("utf-8"), expected.encode("utf-8")):
        return AuthResult.rejected()
    return AuthResult.accepted()


def has_valid_session(credential: Optional[str]) -> bool:
    return credential == COOKIE_VALUE


def session_cookie_kwargs(settings) -> dict:
    return {
        "key": COOKIE_NAME,
        "value": COOKIE_VALUE,
        "max_age": SESSION_TTL_SECONDS,
        "httponly": True,
        "secure": settings.production,
        "samesite": "lax",
        "path": "/",
    }


def clear_session_cookie_kwargs(settings) -> dict:
    return {
        "key": COOKIE_NAME,
        "value": "",
        "max_age": 0,
        "httponly": True,
        "secure": settings.production,
        "samesite": "lax",
        "path": "/",
    }


def login_response(settings, result: AuthResult) -> JSONResponse:
    if not result.ok:
        logger.warning("Admin login rejected")
        return JSONResponse(result.to_dict(), status_code=401)

    response = JSONResponse(result.to_dict())
    response.set_cookie(**session_cookie_kwargs(settings))
    logger.info(f"Admin login accepted, session valid for {SESSION_TTL_SECONDS}s")
    return response


def logout_response(settings) -> JSONResponse:
    response = JSONResponse({"ok": True})
    response.set_cookie(**clear_session_cookie_kwargs(settings))
    logger.info("Admin session cleared")
    return response
