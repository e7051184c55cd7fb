"""Funções de limpeza de texto aplicadas aos parágrafos raspados."""
from __future__ import annotations

from .patterns import CLEAN_LINE, WHITESPACE


def collapse_whitespace(text: str) -> str:
    """Converte qualquer sequência de espaços em um único espaço ASCII."""

    return WHITESPACE.sub(" ", text).strip()


def clean_line(text: str) -> str:
    """Remove marcador de lista e pontuação final de uma linha de tema.

    A limpeza é opcional: quando a linha não termina com ``.`` ou ``;`` o
    texto original é devolvido sem nenhuma alteração.
    """

    match = CLEAN_LINE.match(text)
    if not match:
        return text
    return match.group("line")


__all__ = ["clean_line", "collapse_whitespace"]
