import logging
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlencode

from fastapi import Request
from fastapi.responses import RedirectResponse
from starlette.middleware.base import BaseHTTPMiddleware

from app.auth import COOKIE_NAME, has_valid_session
from app.paths import LOGIN_PATH, is_excluded, is_public

logger = logging.getLogger(__name__)

CALLBACK_PARAM = "callbackUrl"


def raw_request_path(request: Request) -> str:
    raw = request.scope.get("raw_path")
    if raw:
        return raw.split(b"?", 1)[0].decode("latin-1")
    return request.scope["path"]


@dataclass(frozen=True)
class GateDecision:
    redirect_to: Optional[str] = None

    @property
    def pass_through(self) -> bool:
        return self.redirect_to is None

    @classmethod
    def allow(cls):
        return cls()

    @classmethod
    def redirect(cls, target: str):
        return cls(redirect_to=target)


def login_redirect_target(path: str, query: str = "", login_path: str = LOGIN_PATH) -> str:
    callback = f"{path}?{query}" if query else path
    return f"{login_path}?{urlencode({CALLBACK_PARAM: callback})}"


def authorize(
    settings, path: str, query: str, credential: Optional[str], raw_path: Optional[str] = None
) -> GateDecision:
    """Decide whether a request may reach the application.

    Public paths pass without looking at the credential. Everything else
    needs the session marker, otherwise the caller is sent to the login
    page with the original path and query kept in ``callbackUrl``. The callback
    uses ``raw_path`` (still percent-encoded) when the server provides it.
    """
    if is_public(path, settings.public_paths, settings.asset_prefixes):
        return GateDecision.allow()

    if has_valid_session(credential):
        return GateDecision.allow()

    return GateDecision.redirect(login_redirect_target(raw_path or path, query, settings.login_path))


# Only wraps "http" scopes; the console serves no websocket routes.
class AccessGateMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, settings):
        super().__init__(app)
        self.settings = settings

    async def dispatch(self, request: Request, call_next):
        path = request.url.path
        if is_excluded(path, self.settings.excluded_prefixes):
            return await call_next(request)

        decision = authorize(
            self.settings,
            path,
            request.url.query,
            request.cookies.get(COOKIE_NAME),
            raw_path=raw_request_path(request),
        )
        if decision.pass_through:
            return await call_next(request)

        logger.debug(f"No admin session for {path}, redirecting to {decision.redirect_to}")
        return RedirectResponse(url=decision.redirect_to, status_code=307)
