import os

from dotenv import load_dotenv

_settings = None

DEFAULT_GATEWAY_URL = "http://localhost:9091"
DEFAULT_TIMEOUT_SECONDS = 30.0
LABELS_ENV_VAR = "PROMPIPE_LABELS"


class Settings:
    def __init__(self):
        load_dotenv()
        self.LABELS = os.getenv(LABELS_ENV_VAR, "")
        self.GATEWAY_URL = os.getenv("PROMPIPE_GATEWAY_URL", DEFAULT_GATEWAY_URL)
        timeout = os.getenv("PROMPIPE_TIMEOUT", str(DEFAULT_TIMEOUT_SECONDS))
        try:
            self.TIMEOUT = float(timeout)
        except ValueError:
            raise ValueError(f"Invalid PROMPIPE_TIMEOUT: {timeout}") from None
        if self.TIMEOUT <= 0:
            raise ValueError(f"PROMPIPE_TIMEOUT must be greater than 0, got {timeout}")


def get_settings():
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
