"""Configurações compartilhadas carregadas a partir de variáveis de ambiente."""
from __future__ import annotations

import os
from datetime import datetime
from functools import lru_cache

from dotenv import load_dotenv

from mercury.domain.entities.source import (
    DEFAULT_CONTENT_QUERY,
    DEFAULT_LINKS_QUERY,
    DEFAULT_LISTING_URL,
)
from mercury.infrastructure.retriever import (
    DEFAULT_MAX_BODY_SIZE,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
)
from mercury.parsing.dates import EPOCH_THRESHOLD

load_dotenv()

_DEFAULT_API_BIND_HOST = "0.0.0.0"
_DEFAULT_API_PORT = 8080
_DEFAULT_CACHE_DIR = "./cache"


@lru_cache(maxsize=None)
def get_cache_dir() -> str:
    """Diretório do cache de páginas; string vazia desabilita o cache."""

    return os.getenv("MERCURY_CACHE_DIR", _DEFAULT_CACHE_DIR)


@lru_cache(maxsize=None)
def get_user_agent() -> str:
    return os.getenv("MERCURY_USER_AGENT", DEFAULT_USER_AGENT)


@lru_cache(maxsize=None)
def get_max_body_size() -> int:
    """Limite, em bytes, do corpo lido de cada resposta HTTP."""

    return int(os.getenv("MERCURY_MAX_BODY_SIZE", DEFAULT_MAX_BODY_SIZE))


@lru_cache(maxsize=None)
def get_http_timeout() -> float:
    return float(os.getenv("MERCURY_HTTP_TIMEOUT", DEFAULT_TIMEOUT))


@lru_cache(maxsize=None)
def get_listing_url() -> str:
    return os.getenv("MERCURY_LISTING_URL", DEFAULT_LISTING_URL)


@lru_cache(maxsize=None)
def get_links_selector() -> str:
    return os.getenv("MERCURY_LINKS_SELECTOR", DEFAULT_LINKS_QUERY)


@lru_cache(maxsize=None)
def get_content_selector() -> str:
    return os.getenv("MERCURY_CONTENT_SELECTOR", DEFAULT_CONTENT_QUERY)


@lru_cache(maxsize=None)
def get_min_hearing_time() -> datetime:
    """Data mínima aceita para uma audiência (``YYYY-MM-DD``)."""

    value = os.getenv("MERCURY_MIN_HEARING_DATE")
    if not value:
        return EPOCH_THRESHOLD
    return datetime.fromisoformat(value)


@lru_cache(maxsize=None)
def get_telegram_token() -> str:
    return os.getenv("TELEGRAM_TOKEN", "")


@lru_cache(maxsize=None)
def get_telegram_chat_id() -> str:
    return os.getenv("TELEGRAM_CHAT_ID", "")


@lru_cache(maxsize=None)
def get_api_token() -> str:
    """Token exigido no cabeçalho ``Authorization``; vazio desativa a checagem."""

    return os.getenv("MERCURY_API_TOKEN", "")


@lru_cache(maxsize=None)
def get_api_bind_host() -> str:
    return os.getenv("MERCURY_API_HOST", _DEFAULT_API_BIND_HOST)


@lru_cache(maxsize=None)
def get_api_port() -> int:
    return int(os.getenv("MERCURY_API_PORT", os.getenv("PORT", _DEFAULT_API_PORT)))


@lru_cache(maxsize=None)
def get_log_level() -> str:
    return os.getenv("MERCURY_LOG_LEVEL", "INFO")


__all__ = [
    "get_api_bind_host",
    "get_api_port",
    "get_api_token",
    "get_cache_dir",
    "get_content_selector",
    "get_http_timeout",
    "get_links_selector",
    "get_listing_url",
    "get_log_level",
    "get_max_body_size",
    "get_min_hearing_time",
    "get_telegram_chat_id",
    "get_telegram_token",
    "get_user_agent",
]
