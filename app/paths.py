LOGIN_PATH = "/auth/login"

PUBLIC_PATHS = (LOGIN_PATH, "/api/login", "/api/logout")
ASSET_PREFIXES = ("/static/", "/favicon")

# Requests under these never reach the gate.
EXCLUDED_PREFIXES = ("/static/", "/favicon.ico")


def _matches_prefix(path, prefixes):
    for prefix in prefixes:
        if path.startswith(prefix):
            return True
    return False


def is_public(path, public_paths=PUBLIC_PATHS, asset_prefixes=ASSET_PREFIXES):
    if not path:
        return False
    return _matches_prefix(path, public_paths) or _matches_prefix(path, asset_prefixes)


def is_excluded(path, excluded_prefixes=EXCLUDED_PREFIXES):
    if not path:
        return False
    return _matches_prefix(path, excluded_prefixes)
