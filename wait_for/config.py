import os
from dotenv import load_dotenv

load_dotenv()

APP_NAME = "wait-for"
VERSION = "0.1.0"


class Settings:
    # Kept as text; the CLI validates it like a --timeout value.
    WAIT_FOR_TIMEOUT: str = os.getenv("WAIT_FOR_TIMEOUT", "15")
    WAIT_FOR_COLOR: str = os.getenv("WAIT_FOR_COLOR", "auto")
    WAIT_FOR_LOG_LEVEL: str = os.getenv("WAIT_FOR_LOG_LEVEL", "WARNING").upper()

    # Per-attempt bounds, independent of the overall timeout.
    TCP_CONNECT_TIMEOUT_S: float = 1.0
    HTTP_TIMEOUT_S: float = 2.0
    RETRY_INTERVAL_S: float = 1.0


settings = Settings()
