"""
Process-wide configuration.

Values come from the environment (a local `.env` file is honoured). The API key is
mandatory: `load_config` raises `MissingApiKeyError` when it is absent, and the app
refuses to start.
"""
import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from image_enhancer.errors import MissingApiKeyError

API_KEY_VARS = ("GEMINI_API_KEY", "API_KEY")
DEFAULT_MODEL = "gemini-2.5-flash-image"
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class AppConfig:
    api_key: str
    model: str = DEFAULT_MODEL
    log_level: str = DEFAULT_LOG_LEVEL


def load_config(environ: Optional[Mapping[str, str]] = None) -> AppConfig:
    """Build the config from `environ` (defaults to os.environ after loading .env)."""
    if environ is None:
        load_dotenv()
        environ = os.environ

    api_key = next((environ[name].strip() for name in API_KEY_VARS if environ.get(name, "").strip()), None)
    if not api_key:
        raise MissingApiKeyError(API_KEY_VARS)

    return AppConfig(
        api_key=api_key,
        model=environ.get("IMAGE_ENHANCER_MODEL") or DEFAULT_MODEL,
        log_level=(environ.get("IMAGE_ENHANCER_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
    )


def setup_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
