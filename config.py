import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


def _setting(key: str, default):
    """env.yaml value, overridden by a PB_<key> environment variable"""
    value = os.environ.get(f"PB_{key}")
    if value is None:
        return data.get(key, default)
    if isinstance(default, bool):
        return value.lower() in ("1", "true", "yes")
    if isinstance(default, int):
        return int(value)
    return value


class ApplicationConfig:
    DB_URI = _setting("DB_URI", "sqlite+aiosqlite:///./pastes.db")
    API_HOST = _setting("API_HOST", "0.0.0.0")
    API_PORT = _setting("API_PORT", 3001)
    SERVE_PATH = _setting("SERVE_PATH", "/p/")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = _setting("LOG_LEVEL", "INFO")
    SESSION_COOKIE_NAME = data.get("SESSION_COOKIE_NAME", "session")
    SESSION_COOKIE_SECURE = bool(_setting("SESSION_COOKIE_SECURE", False))
    ENABLE_SWEEPER = bool(_setting("ENABLE_SWEEPER", True))
    SWEEP_INTERVAL_SECONDS = _setting("SWEEP_INTERVAL_SECONDS", 3600)
