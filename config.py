import os
from typing import Optional

import yaml
from sqlalchemy.engine import URL

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.environ.get("CONFIG_FILE", os.path.join(ROOT_PATH, "env.yaml"))

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


def get_setting(name: str, default=None):
    """Environment variable, then env.yaml, then default"""
    value = os.environ[name] if name in os.environ else data.get(name, default)
    # Let YAML parse "true", "3600", "[a, b]" into native types, whichever source
    if isinstance(value, str) and value:
        return yaml.safe_load(value)
    return value


def get_list_setting(name: str, default=None) -> list:
    """A list setting; a plain string is read as comma-separated items"""
    value = get_setting(name, default)
    if value is None:
        return []
    if isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value]
    return [str(value)]


def get_secret(name: str, default: Optional[str] = None) -> Optional[str]:
    """Like get_setting, but NAME_FILE (e.g. a mounted secret) takes precedence"""
    secret_file = os.environ.get(f"{name}_FILE") or data.get(f"{name}_FILE")
    if secret_file:
        with open(secret_file, "r") as r_file:
            return r_file.read().strip()
    value = os.environ.get(name, data.get(name, default))
    return None if value is None else str(value)


def build_db_uri(
    driver: str,
    host: Optional[str],
    user: Optional[str],
    password: Optional[str],
    database: Optional[str],
    port: Optional[int] = None,
    charset: Optional[str] = None,
) -> str:
    query = {"charset": charset} if charset else {}
    url = URL.create(
        drivername=driver,
        username=user,
        password=password,
        host=host,
        port=int(port) if port else None,
        database=database,
        query=query,
    )
    return url.render_as_string(hide_password=False)


def _resolve_db_uri() -> str:
    explicit = get_secret("DB_URI")
    if explicit:
        return explicit

    host = get_setting("DB_HOST")
    if not host:
        return "sqlite+aiosqlite:///./credential_gate.db"

    return build_db_uri(
        driver=get_setting("DB_DRIVER", "mysql+aiomysql"),
        host=host,
        port=get_setting("DB_PORT"),
        user=get_setting("DB_USER"),
        password=get_secret("DB_PASSWORD"),
        database=get_setting("DB_NAME"),
        charset=get_setting("DB_CHARSET", "utf8mb4"),
    )


class ApplicationConfig:
    DB_URI = _resolve_db_uri()
    API_PORT = int(get_setting("API_PORT", 8000))
    API_HOST = get_setting("API_HOST", "0.0.0.0")
    CORS_ORIGINS = get_list_setting("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = bool(get_setting("CORS_ALLOW_CREDENTIALS", True))
    LOG_LEVEL = str(get_setting("LOG_LEVEL", "INFO")).upper()
    BCRYPT_ROUNDS = int(get_setting("BCRYPT_ROUNDS", 12))
    USERNAME_CASE_SENSITIVE = bool(get_setting("USERNAME_CASE_SENSITIVE", True))
    SINGLE_SESSION_PER_USER = bool(get_setting("SINGLE_SESSION_PER_USER", True))
    SESSION_TTL_SECONDS = int(get_setting("SESSION_TTL_SECONDS", 3600))
    SESSION_COOKIE_NAME = get_setting("SESSION_COOKIE_NAME", "session_id")
    SESSION_COOKIE_PATH = get_setting("SESSION_COOKIE_PATH", "/")
    SESSION_COOKIE_SECURE = bool(get_setting("SESSION_COOKIE_SECURE", True))
    SESSION_COOKIE_SAMESITE = str(get_setting("SESSION_COOKIE_SAMESITE", "strict")).lower()
