"""
Application configuration (env, settings, constants).

Responsibility: Centralize config loading, environment variables, and app-wide
constants. Keeps the rest of the app decoupled from how config is sourced.
"""

import os

from dotenv import load_dotenv

load_dotenv()

# Firestore target (from env)
PROJECT_ID: str = os.getenv("PROJECT_ID", "").strip()
DATABASE_ID: str = os.getenv("DATABASE_ID", "").strip() or "(default)"

# Firestore REST API
FIRESTORE_BASE_URL: str = (
    os.getenv("FIRESTORE_BASE_URL", "https://firestore.googleapis.com/v1").strip().rstrip("/")
    or "https://firestore.googleapis.com/v1"
)
FIRESTORE_SCOPE: str = "https://www.googleapis.com/auth/datastore"

# API timeouts (seconds)
FIRESTORE_API_TIMEOUT: float = 30.0

# Collections queried by the dashboard endpoints
RESTAURANTS_COLLECTION: str = "restaurants"
DEAD_LETTERS_PARENT: str = "dead-letters/NANALL"

# Server
HOST: str = os.getenv("HOST", "0.0.0.0").strip() or "0.0.0.0"
PORT: int = int(os.getenv("PORT", "4000").strip() or "4000")
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO"
