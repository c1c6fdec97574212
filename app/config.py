import os
from dataclasses import dataclass
from typing import Optional, Tuple

from dotenv import load_dotenv

from app.paths import ASSET_PREFIXES, EXCLUDED_PREFIXES, LOGIN_PATH, PUBLIC_PATHS

load_dotenv()


@dataclass(frozen=True)
class Settings:
    admin_access_key: Optional[str]
    production: bool = False
    login_path: str = LOGIN_PATH
    public_paths: Tuple[str, ...] = PUBLIC_PATHS
    asset_prefixes: Tuple[str, ...] = ASSET_PREFIXES
    excluded_prefixes: Tuple[str, ...] = EXCLUDED_PREFIXES


def load_settings() -> Settings:
    """Build the process-wide settings from the environment.

    Read once at startup; the result is passed to the app factory.
    """
    key = os.getenv("ADMIN_ACCESS_KEY") or None
    app_env = (os.getenv("APP_ENV") or "development").strip().lower()
    return Settings(
        admin_access_key=key,
        production=app_env == "production",
    )
