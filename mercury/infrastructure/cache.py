"""Cache local de páginas indexado por um digest da URL."""
from __future__ import annotations

import hashlib
import logging
from pathlib import Path
from typing import Callable
from urllib.parse import urlsplit

from mercury.domain.errors import CacheError


def cache_key(url: str) -> str:
    """Monta o nome do arquivo de cache: ``<host>_<md5 da URL>``.

    O nome serve para depuração humana; não é uma fronteira de segurança.
    """

    digest = hashlib.md5(url.encode("utf-8")).hexdigest()
    hostname = urlsplit(url).hostname
    if hostname:
        return f"{hostname}_{digest}"
    return digest


class FileCacheStore:
    """Guarda um arquivo por URL em um diretório configurado, sem expiração.

    A ausência do arquivo é o único sinal de invalidação. Um diretório vazio
    desabilita o cache: leituras falham e gravações são ignoradas.
    """

    def __init__(
        self,
        directory: str | Path | None,
        *,
        key_func: Callable[[str], str] = cache_key,
    ) -> None:
        self._directory = Path(directory) if directory else None
        self._key_func = key_func
        self._log = logging.getLogger("mercury.cache")

    @property
    def enabled(self) -> bool:
        return self._directory is not None

    def path_for(self, url: str) -> Path:
        if self._directory is None:
            raise CacheError(self._key_func(url), "cache directory is not set")
        return self._directory / self._key_func(url)

    def load(self, url: str) -> bytes:
        """Lê a entrada de ``url``; qualquer falha vira ``CacheError``."""

        path = self.path_for(url)
        try:
            return path.read_bytes()
        except OSError as exc:
            raise CacheError(path.name, str(exc)) from exc

    def save(self, url: str, body: bytes) -> None:
        """Grava ``body`` sobrescrevendo a entrada existente."""

        if self._directory is None:
            self._log.debug("diretório de cache não configurado; ignorando %s", url)
            return
        path = self.path_for(url)
        try:
            self._directory.mkdir(mode=0o750, parents=True, exist_ok=True)
            path.write_bytes(body)
        except OSError as exc:
            raise CacheError(path.name, str(exc)) from exc
        self._log.debug("página %s salva em %s", url, path)


__all__ = ["FileCacheStore", "cache_key"]
