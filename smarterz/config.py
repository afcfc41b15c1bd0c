import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

API_BASE = "https://theeduverse.xyz/api"
DEFAULT_PORT = 3000


@dataclass
class Settings:
    port: int = DEFAULT_PORT
    host: str = "0.0.0.0"
    api_base: str = API_BASE
    cache_file: str = "cache.json"


def load_settings() -> Settings:
    """Build settings from the environment. Only PORT is configurable."""
    load_dotenv(find_dotenv(usecwd=True))

    port = os.environ.get("PORT", "").strip()
    if not port:
        return Settings()
    try:
        return Settings(port=int(port))
    except ValueError:
        raise ValueError(f"PORT must be an integer, got {port!r}") from None
