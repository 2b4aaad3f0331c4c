import os
from dotenv import load_dotenv

# ✅ Load environment variables (optional .env file for local runs)
load_dotenv()


def _get_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _normalize_database_url(value: str) -> str:
    # Hosted Postgres providers hand out sync-style URLs
    if value.startswith("postgres://"):
        return "postgresql+asyncpg://" + value[len("postgres://"):]
    if value.startswith("postgresql://"):
        return value.replace("postgresql://", "postgresql+asyncpg://", 1)
    return value


DATABASE_URL = _normalize_database_url(
    os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./player_stats.db")
)
SQL_ECHO = _get_bool("SQL_ECHO")

LEADERBOARD_DEFAULT_LIMIT = int(os.getenv("LEADERBOARD_DEFAULT_LIMIT", 10))
LEADERBOARD_MAX_LIMIT = int(os.getenv("LEADERBOARD_MAX_LIMIT", 100))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 8080))
FORWARDED_ALLOW_IPS = os.getenv("FORWARDED_ALLOW_IPS", "*")
