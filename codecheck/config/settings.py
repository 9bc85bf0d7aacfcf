"""
Environment settings loaded from .env file.
"""
import os
from dotenv import load_dotenv

load_dotenv()


# --- Logging ---
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

# --- GraphQL schemas (pre-fetched introspection documents) ---
GRAPHQL_SCHEMA_DIR: str = os.getenv("GRAPHQL_SCHEMA_DIR", "./data/graphql")
DEFAULT_GRAPHQL_SCHEMA: str = os.getenv("DEFAULT_GRAPHQL_SCHEMA", "admin")

# --- Dispatcher ---
MAX_VALIDATION_WORKERS: int = int(os.getenv("MAX_VALIDATION_WORKERS", "8"))

# --- Reporting ---
MAX_DETAIL_SNIPPET_CHARS: int = int(os.getenv("MAX_DETAIL_SNIPPET_CHARS", "80"))
