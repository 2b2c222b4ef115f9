"""Application configuration and constants."""
import logging
import os


def _parse_int_env(name: str, default: int) -> int:
    """Parse integer from environment variable."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _parse_float_env(name: str, default: float) -> float:
    """Parse float from environment variable."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _parse_list_env(name: str, default: list[str]) -> list[str]:
    """Parse comma separated list from environment variable."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    values = [value.strip() for value in raw.split(",")]
    return [value for value in values if value] or default


# Server
HOST = os.environ.get("SHUNT_QUIZ_HOST", "127.0.0.1")
PORT = _parse_int_env("SHUNT_QUIZ_PORT", 8000)
CORS_ALLOW_ORIGINS = _parse_list_env("CORS_ALLOW_ORIGINS", ["*"])

# Logging
LOG_LEVEL = logging.getLevelName(os.environ.get("LOG_LEVEL", "INFO").upper())
if not isinstance(LOG_LEVEL, int):
    LOG_LEVEL = logging.INFO

# Generative AI proxy
GEMINI_API_KEY = os.environ.get("GEMINI_API_KEY", "")
GEMINI_MODEL = os.environ.get("GEMINI_MODEL", "gemini-2.5-flash")
GEMINI_API_BASE = os.environ.get(
    "GEMINI_API_BASE", "https://generativelanguage.googleapis.com/v1/models"
)
GENERATE_TIMEOUT_SECONDS = _parse_float_env("GENERATE_TIMEOUT_SECONDS", 30.0)
