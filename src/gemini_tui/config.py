"""
Startup settings read from the environment (and a local .env file).
"""

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv

from gemini_tui.core.errors import ConfigError
from gemini_tui.core.gemini_client import DEFAULT_BASE_URL, DEFAULT_MODEL

DEFAULT_TIMEOUT = 120.0


@dataclass(frozen=True)
class Settings:
    api_key: str
    model: str = DEFAULT_MODEL
    base_url: str = DEFAULT_BASE_URL
    timeout: Optional[float] = DEFAULT_TIMEOUT

    def with_overrides(self, *, model: Optional[str] = None, timeout: Optional[str] = None) -> "Settings":
        updated = self
        if model:
            updated = replace(updated, model=model)
        if timeout is not None:
            updated = replace(updated, timeout=parse_timeout(timeout))
        return updated


def parse_timeout(value: Optional[str]) -> Optional[float]:
    """Seconds as a float; empty, ``0`` or ``none`` disables the timeout."""
    if value is None or value.strip() == "":
        return DEFAULT_TIMEOUT
    if value.strip().lower() in {"0", "none", "off"}:
        return None
    try:
        seconds = float(value)
    except ValueError as exc:
        raise ConfigError(f"GEMINI_TIMEOUT must be a number of seconds, got {value!r}") from exc
    if seconds < 0:
        raise ConfigError(f"GEMINI_TIMEOUT must not be negative, got {value!r}")
    return seconds or None


def load_settings(environ: Optional[Mapping[str, str]] = None, *, dotenv: bool = True) -> Settings:
    if dotenv:
        load_dotenv(find_dotenv(usecwd=True))
    env = os.environ if environ is None else environ

    api_key = (env.get("GEMINI_API_KEY") or "").strip()
    if not api_key:
        raise ConfigError("GEMINI_API_KEY must be set in the environment or a .env file")

    return Settings(
        api_key=api_key,
        model=env.get("GEMINI_MODEL") or DEFAULT_MODEL,
        base_url=env.get("GEMINI_API_BASE") or DEFAULT_BASE_URL,
        timeout=parse_timeout(env.get("GEMINI_TIMEOUT")),
    )
