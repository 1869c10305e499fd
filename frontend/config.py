# frontend/config.py
import os

API_URL = os.getenv("FINFIT_API_URL", "http://127.0.0.1:8000")
API_TIMEOUT = float(os.getenv("FINFIT_API_TIMEOUT", "10"))
PAGE_SIZE = int(os.getenv("FINFIT_PAGE_SIZE", "10"))
