"""Entidade que descreve o site de onde os anúncios são coletados."""
from __future__ import annotations

from dataclasses import dataclass, field

from .selector import Selector

DEFAULT_LISTING_URL = (
    "https://bga32.ru/arxitektura-i-gradostroitelstvo/publichnye-slushaniya/"
)
DEFAULT_LINKS_QUERY = ".thecontent ol li a"
DEFAULT_CONTENT_QUERY = ".thecontent p"


@dataclass(frozen=True)
class HearingSource:
    """Agrupa a página de listagem e os seletores usados para raspar o site."""

    #: Página que enumera todos os anúncios publicados.
    listing_url: str = DEFAULT_LISTING_URL
    #: Seletor das âncoras da listagem; o atributo lido é o destino do link.
    links: Selector = field(
        default_factory=lambda: Selector(query=DEFAULT_LINKS_QUERY, attribute="href")
    )
    #: Seletor dos parágrafos que compõem o corpo de um anúncio.
    content: Selector = field(
        default_factory=lambda: Selector(query=DEFAULT_CONTENT_QUERY)
    )
