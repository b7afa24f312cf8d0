# src/wordfinder/core/config.py
"""
Settings for the WordsAPI provider.

Read from the environment, after loading the nearest .env file.
"""

import logging
import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

from wordfinder.core.errors import ProviderConfigError

logger = logging.getLogger(__name__)

DEFAULT_HOST = "wordsapiv1.p.rapidapi.com"
DEFAULT_BASE_URL = f"https://{DEFAULT_HOST}"
DEFAULT_TIMEOUT = 10.0


@dataclass(frozen=True)
class Settings:
    api_key: str
    host: str = DEFAULT_HOST
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT


def _read_timeout(raw: str | None) -> float:
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError:
        logger.warning("WORDSAPI_TIMEOUT=%r is not a number, using %.1fs", raw, DEFAULT_TIMEOUT)
        return DEFAULT_TIMEOUT
    if timeout <= 0:
        logger.warning("WORDSAPI_TIMEOUT=%r must be positive, using %.1fs", raw, DEFAULT_TIMEOUT)
        return DEFAULT_TIMEOUT
    return timeout


def load_settings(env: dict[str, str] | None = None, use_dotenv: bool = True) -> Settings:
    """Build Settings from `env` (default: os.environ). Raises if the API key is missing."""
    if env is None:
        if use_dotenv:
            load_dotenv(find_dotenv(usecwd=True))
        env = dict(os.environ)

    api_key = (env.get("WORDSAPI_KEY") or "").strip()
    if not api_key:
        raise ProviderConfigError("WORDSAPI_KEY is not set (add it to your environment or .env file)")

    host = (env.get("WORDSAPI_HOST") or DEFAULT_HOST).strip()
    base_url = (env.get("WORDSAPI_BASE_URL") or f"https://{host}").strip().rstrip("/")

    return Settings(
        api_key=api_key,
        host=host,
        base_url=base_url,
        timeout=_read_timeout(env.get("WORDSAPI_TIMEOUT")),
    )
