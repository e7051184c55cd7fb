"""Serviço de orquestração da coleta e publicação de audiências."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional
from urllib.parse import urljoin

from mercury.domain import Hearing, HearingSource
from mercury.domain.errors import FetchError, HearingNotFoundError, ParseError
from mercury.domain.ports import HearingPublisher
from mercury.domain.repositories import HearingRepository
from mercury.infrastructure.retriever import ContentRetriever
from mercury.parsing import HearingParser


@dataclass(slots=True)
class LinkFailure:
    """Link descartado durante a coleta e o motivo da falha."""

    url: str
    kind: str
    message: str


@dataclass(slots=True)
class CollectionResult:
    """Resumo de uma execução de coleta de audiências."""

    total_links: int
    created: List[Hearing] = field(default_factory=list)
    failures: List[LinkFailure] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.created)


class HearingsService:
    """Coordena busca, análise, persistência e publicação das audiências."""

    def __init__(
        self,
        retriever: ContentRetriever,
        parser: HearingParser,
        repository: HearingRepository,
        publisher: HearingPublisher,
        *,
        source: HearingSource | None = None,
        status_publisher: Callable[[str], None] | None = None,
    ) -> None:
        """Configura o serviço com todas as dependências necessárias.

        Args:
            retriever: Responsável por baixar páginas e aplicar os seletores.
            parser: Converte os parágrafos de um anúncio em ``Hearing``.
            repository: Armazenamento definitivo das audiências.
            publisher: Destino das mensagens renderizadas.
            source: Página de listagem e seletores do site monitorado.
            status_publisher: Callback opcional usado para publicar mensagens
                de status durante a coleta.
        """

        self._retriever = retriever
        self._parser = parser
        self._repository = repository
        self._publisher = publisher
        self._source = source or HearingSource()
        self._status_publisher = status_publisher
        self._log = logging.getLogger("mercury.service")

    @property
    def source(self) -> HearingSource:
        return self._source

    def _publish_status(
        self,
        message: str,
        status_publisher: Callable[[str], None] | None = None,
    ) -> None:
        self._log.info(message)
        callback = status_publisher or self._status_publisher
        if callback:
            callback(message)

    def fetch_links(self, force: bool = True) -> List[str]:
        """Lista os anúncios publicados, dos mais antigos para os mais novos."""

        links = self._retriever.fetch_links(
            self._source.listing_url, self._source.links, force
        )
        resolved = [urljoin(self._source.listing_url, link) for link in links]
        resolved.reverse()
        return resolved

    def fetch(self, url: str, force: bool = False) -> Hearing:
        """Baixa e analisa um anúncio.

        Raises:
            FetchError: quando a página não pôde ser obtida.
            ParseError: quando o texto não segue o formato esperado.
        """

        paragraphs = self._retriever.fetch_content(url, self._source.content, force)
        return self._parser.parse(paragraphs, url)

    def collect_new(
        self,
        force: bool = True,
        status_publisher: Callable[[str], None] | None = None,
    ) -> CollectionResult:
        """Processa todos os links ainda não armazenados.

        Falhas de busca ou de análise de um link são registradas em
        ``failures`` e a coleta segue para o próximo link.
        """

        links = self.fetch_links(force=force)
        result = CollectionResult(total_links=len(links))
        self._publish_status(f"{len(links)} links encontrados", status_publisher)

        for url in links:
            if self._repository.exists(url):
                self._log.debug("%s já armazenado", url)
                continue
            try:
                hearing = self.fetch(url)
            except (FetchError, ParseError) as exc:
                self._log.warning("link %s ignorado (%s): %s", url, exc.kind, exc)
                result.failures.append(
                    LinkFailure(url=url, kind=exc.kind, message=str(exc))
                )
                continue
            try:
                self._repository.create(hearing)
            except ValueError as exc:
                self._log.warning("link %s não foi gravado: %s", url, exc)
                continue
            result.created.append(hearing)
            self._publish_status(
                f"nova audiência em {hearing.time:%d.%m.%Y %H:%M}: {url}",
                status_publisher,
            )

        self._publish_status(
            f"Coleta finalizada. Novas: {len(result.created)}, "
            f"falhas: {len(result.failures)}",
            status_publisher,
        )
        return result

    def reparse(self, url: str) -> Hearing:
        """Analisa novamente os parágrafos originais de uma audiência armazenada."""

        stored = self._repository.find(url)
        if stored is None:
            raise HearingNotFoundError(url)
        hearing = self._parser.parse(list(stored.raw), url)
        self._repository.update(hearing)
        return hearing.with_published(stored.published)

    def find(self, url: str) -> Optional[Hearing]:
        return self._repository.find(url)

    def list_hearings(self) -> List[Hearing]:
        """Audiências armazenadas, das mais recentes para as mais antigas."""

        hearings = list(self._repository.list_all())
        hearings.reverse()
        return hearings

    def list_unpublished(self, mark: bool = True) -> List[Hearing]:
        """Audiências ainda não publicadas; com ``mark`` elas passam a publicadas."""

        hearings = list(self._repository.list_unpublished())
        if mark and hearings:
            self._repository.mark_published(hearing.url for hearing in hearings)
        return hearings

    def publish_pending(self, fmt: str = "markdown") -> int:
        """Envia cada audiência pendente e a marca como publicada.

        Interrompe no primeiro ``PublishError``; as já enviadas permanecem
        marcadas.
        """

        sent = 0
        for hearing in list(self._repository.list_unpublished()):
            self._publisher.publish(hearing.render(fmt))
            self._repository.mark_published([hearing.url])
            sent += 1
        self._log.info("%d audiências publicadas", sent)
        return sent


__all__ = ["CollectionResult", "HearingsService", "LinkFailure"]
