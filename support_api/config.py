"""Application settings"""
import os
from pathlib import Path

BASE_DIR = Path(__file__).parent.parent

DATABASE_URL = os.getenv(
    "DATABASE_URL",
    f"sqlite:///{BASE_DIR / 'data' / 'support.db'}"
)

API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "8000"))

# Wall-clock zone used to decide which helplines are open now
HELPLINE_TIMEZONE = os.getenv("HELPLINE_TIMEZONE", "Europe/London")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Engine settings
DATABASE_ECHO = os.getenv("DATABASE_ECHO", "false").lower() == "true"
SQLITE_WAL = os.getenv("SQLITE_WAL", "true").lower() == "true"
