import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.staticfiles import StaticFiles
from fastapi.responses import HTMLResponse, RedirectResponse

from app.auth import authenticate, extract_key, login_response, logout_response
from app.config import load_settings
from app.gate import AccessGateMiddleware, CALLBACK_PARAM
from app.paths import LOGIN_PATH
from app.templates_globals import STATIC_DIR, templates

logger = logging.getLogger(__name__)

DEFAULT_CALLBACK = "/dashboard"


def safe_callback(callback):
    # Only same-origin paths; "//host" and "/\host" are protocol-relative.
    if not callback or not callback.startswith("/") or callback.startswith(("//", "/\\")):
        return DEFAULT_CALLBACK
    return callback


@asynccontextmanager
async def lifespan(app: FastAPI):
    if not app.state.settings.admin_access_key:
        logger.warning("ADMIN_ACCESS_KEY is not set, every login will be rejected")
    yield


def create_app(settings=None) -> FastAPI:
    settings = settings or load_settings()

    app = FastAPI(title="Growth OS Admin", lifespan=lifespan)
    app.state.settings = settings

    app.add_middleware(AccessGateMiddleware, settings=settings)

    app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

    @app.get(LOGIN_PATH, response_class=HTMLResponse)
    async def login_page(request: Request):
        callback = safe_callback(request.query_params.get(CALLBACK_PARAM))
        return templates.TemplateResponse(request, "login.html", {"callback_url": callback})

    @app.post("/api/login")
    async def login_submit(request: Request):
        try:
            body = await request.json()
        except (ValueError, RecursionError):
            body = {}
        result = authenticate(settings, extract_key(body))
        return login_response(settings, result)

    @app.post("/api/logout")
    async def logout_route():
        return logout_response(settings)

    @app.get("/")
    async def index():
        return RedirectResponse(url=DEFAULT_CALLBACK, status_code=307)

    @app.get("/dashboard", response_class=HTMLResponse)
    async def dashboard(request: Request):
        return templates.TemplateResponse(request, "dashboard.html", {})

    return app


app = create_app()
