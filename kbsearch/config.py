import os
from dotenv import load_dotenv
from pathlib import Path

# Go up one level from kbsearch/ to root/
env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

APP_NAME = os.getenv("APP_NAME", "Knowledge Base Search")
APP_VERSION = os.getenv("APP_VERSION", "0.1.0")

# Storage
DB_URL = os.getenv("DB_URL", "sqlite:///knowledge_base.db")
DB_ECHO = os.getenv("DB_ECHO", "false").strip().lower() in ("1", "true", "yes")
STORE_BACKEND = os.getenv("STORE_BACKEND", "sql").strip().lower()  # sql | memory
