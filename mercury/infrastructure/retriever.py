"""Busca de páginas com cache local e extração de links e textos por seletor."""
from __future__ import annotations

import codecs
import logging
import re
from typing import Iterator, List

import requests
from bs4 import BeautifulSoup, UnicodeDammit
from bs4.builder import ParserRejectedMarkup
from soupsieve import SelectorSyntaxError

from mercury.domain import Selector
from mercury.domain.errors import CacheError, FetchError
from mercury.parsing.normalization import collapse_whitespace

from .cache import FileCacheStore

DEFAULT_USER_AGENT = "urbanist-public-hearings (https://t.me/public_bryansk_bot)"
DEFAULT_MAX_BODY_SIZE = 1024 * 1024
DEFAULT_TIMEOUT = 30.0

_CHUNK_SIZE = 64 * 1024
_CHARSET_RE = re.compile(r"charset\s*=\s*[\"']?([\w.:-]+)", re.IGNORECASE)

_DEFAULT_HEADERS = {
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "ru-RU,ru;q=0.9,en-US;q=0.8,en;q=0.7",
}


class ContentRetriever:
    """Obtém páginas via ``requests`` (ou cache) e as interpreta com BeautifulSoup."""

    def __init__(
        self,
        session: requests.Session | None = None,
        cache: FileCacheStore | None = None,
        *,
        user_agent: str = DEFAULT_USER_AGENT,
        max_body_size: int = DEFAULT_MAX_BODY_SIZE,
        timeout: float | None = DEFAULT_TIMEOUT,
    ) -> None:
        self._session = session or requests.Session()
        self._cache = cache or FileCacheStore(None)
        self._user_agent = user_agent or DEFAULT_USER_AGENT
        self._max_body_size = max_body_size if max_body_size > 0 else DEFAULT_MAX_BODY_SIZE
        self._timeout = timeout
        self._log = logging.getLogger("mercury.retriever")

    def fetch_links(
        self, page_url: str, selector: Selector, force: bool = False
    ) -> List[str]:
        """Retorna o destino de cada elemento que corresponde ao seletor.

        O atributo lido é ``selector.attribute`` (``href`` quando ausente);
        elementos sem o atributo são ignorados.
        """

        attribute = selector.attribute or "href"
        links = [
            str(node[attribute])
            for node in self._select(page_url, selector, force)
            if node.has_attr(attribute)
        ]
        self._log.debug("%d links em %s", len(links), page_url)
        return links

    def fetch_content(
        self, page_url: str, selector: Selector, force: bool = False
    ) -> List[str]:
        """Retorna o texto normalizado de cada elemento do seletor.

        Apenas fragmentos vazios após a normalização são descartados.
        """

        content: List[str] = []
        for node in self._select(page_url, selector, force):
            text = collapse_whitespace(node.get_text())
            if text:
                content.append(text)
        self._log.debug("%d parágrafos em %s", len(content), page_url)
        return content

    def fetch(self, url: str, force: bool = False) -> bytes:
        """Retorna o corpo da página em UTF-8, usando o cache quando possível."""

        if not force:
            try:
                body = self._cache.load(url)
            except CacheError as exc:
                self._log.debug("cache indisponível para %s: %s", url, exc)
            else:
                self._log.debug("%s carregada do cache", url)
                return body

        self._log.info("GET %s", url)
        try:
            response = self._session.get(
                url,
                headers=self._build_headers(),
                timeout=self._timeout,
                stream=True,
            )
        except requests.RequestException as exc:
            raise FetchError(url, str(exc)) from exc

        try:
            self._log.debug("%s respondeu %s", url, response.status_code)
            if response.status_code != 200:
                raise FetchError(
                    url, "unexpected response status", status_code=response.status_code
                )
            raw = self._read_limited(url, response)
            content_type = response.headers.get("Content-Type", "")
        finally:
            response.close()

        body = self._decode(url, raw, content_type)
        try:
            self._cache.save(url, body)
        except CacheError as exc:
            self._log.warning("falha ao gravar cache de %s: %s", url, exc)
        return body

    def _select(self, page_url: str, selector: Selector, force: bool) -> list:
        body = self.fetch(page_url, force)
        try:
            soup = BeautifulSoup(body.decode("utf-8", errors="replace"), "html.parser")
        except ParserRejectedMarkup as exc:
            raise FetchError(page_url, f"cannot parse markup: {exc}") from exc
        try:
            return soup.select(selector.query)
        except SelectorSyntaxError as exc:
            raise FetchError(page_url, f"invalid selector '{selector.query}': {exc}") from exc

    def _build_headers(self) -> dict[str, str]:
        headers = dict(_DEFAULT_HEADERS)
        headers["User-Agent"] = self._user_agent
        return headers

    def _read_limited(self, url: str, response: requests.Response) -> bytes:
        """Lê o corpo até ``max_body_size`` bytes; o excedente é descartado."""

        buffer = bytearray()
        try:
            for chunk in self._iter_chunks(response):
                buffer.extend(chunk)
                if len(buffer) >= self._max_body_size:
                    self._log.debug(
                        "corpo de %s truncado em %d bytes", url, self._max_body_size
                    )
                    break
        except requests.RequestException as exc:
            raise FetchError(url, f"error reading response body: {exc}") from exc
        return bytes(buffer[: self._max_body_size])

    @staticmethod
    def _iter_chunks(response: requests.Response) -> Iterator[bytes]:
        for chunk in response.iter_content(chunk_size=_CHUNK_SIZE):
            if chunk:
                yield chunk

    def _decode(self, url: str, raw: bytes, content_type: str) -> bytes:
        """Converte o corpo para UTF-8 usando o charset declarado pela resposta."""

        declared = _declared_charset(content_type)
        if declared:
            try:
                return raw.decode(declared, errors="replace").encode("utf-8")
            except (LookupError, UnicodeError) as exc:
                self._log.warning(
                    "charset %r inválido em %s (%s); detectando pelo conteúdo",
                    declared,
                    url,
                    exc,
                )

        dammit = UnicodeDammit(raw, is_html=True)
        if dammit.unicode_markup is None:
            raise FetchError(url, "cannot detect response charset")
        return dammit.unicode_markup.encode("utf-8")


def _declared_charset(content_type: str) -> str | None:
    match = _CHARSET_RE.search(content_type or "")
    if not match:
        return None
    try:
        return codecs.lookup(match.group(1)).name
    except LookupError:
        return None


__all__ = [
    "ContentRetriever",
    "DEFAULT_MAX_BODY_SIZE",
    "DEFAULT_TIMEOUT",
    "DEFAULT_USER_AGENT",
]
