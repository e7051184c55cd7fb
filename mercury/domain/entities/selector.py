"""Seletor CSS aplicado às páginas do site de audiências."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Selector:
    """Par consulta CSS e atributo lido em cada nó encontrado.

    Para a listagem o atributo é ``href``; para o corpo do anúncio fica vazio
    e o texto normalizado de cada parágrafo é usado.
    """

    #: Consulta CSS, por exemplo ``.thecontent ol li a``.
    query: str
    #: Atributo extraído dos nós; ``None`` indica leitura do texto.
    attribute: Optional[str] = None
