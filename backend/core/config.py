# backend/core/config.py
import os

API_TITLE = "FinFit API"

# -------------------------------- Server ---------------------------------
DEFAULT_HOST = os.getenv("FINFIT_HOST", "127.0.0.1")
DEFAULT_PORT = int(os.getenv("FINFIT_PORT", "8000"))
LOG_LEVEL    = os.getenv("FINFIT_LOG_LEVEL", "info")

# streamlit dashboard and the web client dev server
CORS_ORIGINS = [
    o.strip()
    for o in os.getenv(
        "FINFIT_CORS_ORIGINS",
        "http://localhost:5173,http://127.0.0.1:5173,http://localhost:8501",
    ).split(",")
    if o.strip()
]

SEED_DEMO = os.getenv("FINFIT_SEED_DEMO", "0").lower() in ("1", "true", "yes")
