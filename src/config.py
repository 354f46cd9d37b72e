"""
Runtime settings for the Challonge points service.

Values come from the environment. A .env file in the project root is loaded
when CHALLONGE_API_KEY is not already set, so the key stays out of the code.
"""
import os
from pathlib import Path

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parent.parent

if not os.environ.get("CHALLONGE_API_KEY"):
    dotenv_path = PROJECT_ROOT / ".env"
    if dotenv_path.exists():
        load_dotenv(dotenv_path)

API_KEY = os.environ.get("CHALLONGE_API_KEY", "").strip()

BASE_URL = os.environ.get("CHALLONGE_BASE_URL", "https://api.challonge.com/v1").rstrip("/")

# HTTP timeout in seconds and retry policy for transient failures
REQUEST_TIMEOUT = float(os.environ.get("CHALLONGE_TIMEOUT", "20"))
MAX_RETRIES = int(os.environ.get("CHALLONGE_RETRIES", "3"))
BACKOFF = float(os.environ.get("CHALLONGE_BACKOFF", "0.8"))

PORT = int(os.environ.get("PORT", "3000"))

USER_AGENT = "challonge-points/1.0"
