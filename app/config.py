import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

# Full SQLAlchemy URL - overrides the DB_* settings below when present
DATABASE_URL = os.getenv("DATABASE_URL")

# MySQL Configuration
DB_HOST = os.getenv("DB_HOST")
DB_PORT = int(os.getenv("DB_PORT", "3306"))
DB_USER = os.getenv("DB_USER")
DB_PASSWORD = os.getenv("DB_PASSWORD")
DB_NAME = os.getenv("DB_NAME")

# Server
HOST = os.getenv("HOST", "0.0.0.0")  # noqa: S104 - listen on all interfaces
PORT = int(os.getenv("PORT", "5000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# CORS - all origins permitted unless narrowed explicitly
ALLOWED_ORIGINS = [
    origin.strip() for origin in os.getenv("ALLOWED_ORIGINS", "*").split(",") if origin.strip()
]


def missing_database_settings() -> list[str]:
    """Names of the required database settings that are not configured"""
    if DATABASE_URL:
        return []
    required = {
        "DB_HOST": DB_HOST,
        "DB_USER": DB_USER,
        "DB_PASSWORD": DB_PASSWORD,
        "DB_NAME": DB_NAME,
    }
    return [name for name, value in required.items() if value is None]
