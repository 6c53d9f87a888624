# src/alphacala/config.py
import os
from typing import List

# ---------------------------------------------------------------------
# Env helpers
# ---------------------------------------------------------------------
def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None

def _env_list(name: str, default: List[str]) -> List[str]:
    raw = os.getenv(name)
    if not raw:
        return list(default)
    return [item.strip() for item in raw.split(",") if item.strip()]

# ---------------------------------------------------------------------
# Game / search
# ---------------------------------------------------------------------
START_SEEDS  = _env_int("ALPHACALA_SEEDS", 4)
SEARCH_DEPTH = _env_int("ALPHACALA_DEPTH", 20)
API_DEPTH    = _env_int("ALPHACALA_API_DEPTH", 8)   # cap for /api/move

# ---------------------------------------------------------------------
# HTTP API
# ---------------------------------------------------------------------
CORS_ORIGINS = _env_list("ALPHACALA_CORS_ORIGINS", [
    "http://localhost:5173",   # dev UI
    "http://127.0.0.1:5173",
    "http://localhost:8080",
    "http://127.0.0.1:8080",
])
