# services/config.py
import os
from typing import List, Optional

from dotenv import load_dotenv

# Load env for local dev; in production rely on host envs
load_dotenv()

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

def _sanitize(v: Optional[str]) -> Optional[str]:
    if v is None:
        return None
    v = v.strip()
    return v or None

def _env_str(name: str, default: str) -> str:
    return _sanitize(os.getenv(name)) or default

def _env_int(name: str, default: int) -> int:
    raw = _sanitize(os.getenv(name))
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default

def _env_log_level(name: str, default: str) -> str:
    # only names uvicorn also accepts
    raw = (_sanitize(os.getenv(name)) or default).upper()
    return raw if raw in LOG_LEVELS else default

def _env_list(name: str, default: str) -> List[str]:
    raw = _env_str(name, default)
    return [p.strip() for p in raw.split(",") if p.strip()]

# -----------------------------
# MongoDB
# -----------------------------
MONGODB_URI        = _env_str("MONGODB_URI", "mongodb://localhost:27017/hubsautos")
MONGODB_DATABASE   = _env_str("MONGODB_DATABASE", "hubsautos")
MONGODB_COLLECTION = _env_str("MONGODB_COLLECTION", "formAutos")
# used for the startup ping and as maxTimeMS on every catalog query
MONGODB_TIMEOUT_MS = _env_int("MONGODB_TIMEOUT_MS", 5000)

# -----------------------------
# HTTP
# -----------------------------
HOST         = _env_str("HOST", "0.0.0.0")
PORT         = _env_int("PORT", 3000)
CORS_ORIGINS = _env_list("CORS_ORIGINS", "*")
LOG_LEVEL    = _env_log_level("LOG_LEVEL", "INFO")

API_VERSION = "1.0.0"
