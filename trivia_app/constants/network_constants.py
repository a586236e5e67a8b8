"""Network configuration constants for the trivia web server."""

DEFAULT_HOST: str = "0.0.0.0"
DEFAULT_PORT: int = 8000
UVICORN_LOG_LEVEL: str = "info"
