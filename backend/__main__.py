# backend/__main__.py (python -m backend)
import uvicorn

from backend.core.config import DEFAULT_HOST, DEFAULT_PORT, LOG_LEVEL


def main():
    uvicorn.run("backend.app:app", host=DEFAULT_HOST, port=DEFAULT_PORT, log_level=LOG_LEVEL)


if __name__ == "__main__":
    main()
