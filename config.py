import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv


DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_ENCODING = "utf-8"


@dataclass(frozen=True)
class Settings:
    log_level: str = DEFAULT_LOG_LEVEL
    encoding: str = DEFAULT_ENCODING


def _as_log_level(value: Optional[str]) -> str:
    name = (value or "").strip().upper()
    if name in logging.getLevelNamesMapping():
        return name
    return DEFAULT_LOG_LEVEL


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build settings from the environment.

    A .env file in the working directory is loaded first, without
    overriding variables that are already set.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    return Settings(
        log_level=_as_log_level(environ.get("LOG_ANALYZER_LOG_LEVEL")),
        encoding=environ.get("LOG_ANALYZER_ENCODING") or DEFAULT_ENCODING,
    )
