"""Interface de linha de comando para operar o coletor de audiências."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Sequence

from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from mercury.container import build_container
from mercury.domain import Hearing
from mercury.domain.errors import MercuryError
from mercury.settings import get_log_level


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Mercury - coletor de audiências públicas")
    parser.add_argument(
        "--log-level",
        default=None,
        help="Nível de log (DEBUG, INFO, WARNING...). Padrão: MERCURY_LOG_LEVEL ou INFO",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    links = subparsers.add_parser("links", help="Lista os links de anúncios do site")
    links.add_argument(
        "--cached", action="store_true", help="Usa a listagem do cache, se existir"
    )

    fetch = subparsers.add_parser("fetch", help="Baixa e analisa um único anúncio")
    fetch.add_argument("url", help="URL do anúncio")
    fetch.add_argument(
        "--force", action="store_true", help="Ignora o cache e baixa a página novamente"
    )
    fetch.add_argument("--json", action="store_true", help="Imprime o resultado em JSON")

    collect = subparsers.add_parser(
        "collect", help="Coleta e grava todos os anúncios ainda não armazenados"
    )
    collect.add_argument(
        "--publish", action="store_true", help="Publica as audiências pendentes ao final"
    )

    subparsers.add_parser("list", help="Lista as audiências armazenadas")

    unpublished = subparsers.add_parser(
        "unpublished", help="Mostra as audiências ainda não publicadas"
    )
    unpublished.add_argument(
        "--format", choices=("text", "markdown"), default="text", dest="fmt"
    )
    unpublished.add_argument(
        "--dry-run",
        action="store_true",
        help="Não marca as audiências exibidas como publicadas",
    )

    publish = subparsers.add_parser("publish", help="Envia as audiências pendentes")
    publish.add_argument(
        "--format", choices=("text", "markdown"), default="markdown", dest="fmt"
    )

    reparse = subparsers.add_parser(
        "reparse", help="Analisa novamente os parágrafos originais de uma audiência"
    )
    reparse.add_argument("url", help="URL da audiência armazenada")

    subparsers.add_parser("serve", help="Inicia a API HTTP")

    return parser.parse_args(argv)


def _hearing_to_json(hearing: Hearing) -> str:
    payload = hearing.to_mapping()
    payload["time"] = hearing.time.isoformat()
    return json.dumps(payload, ensure_ascii=False, indent=2)


def _print_hearing(console: Console, hearing: Hearing) -> None:
    status = "[green]publicada[/green]" if hearing.published else "[yellow]pendente[/yellow]"
    console.print(
        f"[bold]{hearing.time:%d.%m.%Y %H:%M}[/bold] {escape(hearing.place)} ({status})"
    )
    for topic in hearing.topics:
        console.print(f"  - {topic}", markup=False)
    console.print(f"  {hearing.url}", style="dim", markup=False)


def main(argv: Sequence[str] | None = None) -> int:
    load_dotenv()
    args = parse_args(argv)
    console = Console()
    level_name = args.log_level or get_log_level()
    handler = RichHandler(console=console, markup=False, rich_tracebacks=True)
    logging.basicConfig(
        level=getattr(logging, str(level_name).upper(), logging.INFO),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )
    logger = logging.getLogger("mercury.cli")

    if args.command == "serve":
        from mercury.api import run

        run()
        return 0

    container = build_container()
    service = container.hearings_service

    try:
        if args.command == "links":
            for link in service.fetch_links(force=not args.cached):
                console.print(link, markup=False)
        elif args.command == "fetch":
            hearing = service.fetch(args.url, force=args.force)
            if args.json:
                console.print_json(_hearing_to_json(hearing))
            else:
                console.print(hearing.to_text(), markup=False)
        elif args.command == "collect":
            result = service.collect_new(status_publisher=console.log)
            for failure in result.failures:
                console.print(
                    f"[red]{failure.kind}[/red] {escape(failure.url)}: {escape(failure.message)}",
                    highlight=False,
                )
            if args.publish:
                sent = service.publish_pending()
                console.print(f"[green]{sent} audiências publicadas.[/green]")
        elif args.command == "list":
            hearings = service.list_hearings()
            if not hearings:
                console.print("[yellow]Nenhuma audiência armazenada.[/yellow]")
            for hearing in hearings:
                _print_hearing(console, hearing)
        elif args.command == "unpublished":
            for hearing in service.list_unpublished(mark=not args.dry_run):
                console.print(hearing.render(args.fmt), markup=False)
        elif args.command == "publish":
            sent = service.publish_pending(args.fmt)
            console.print(f"[green]{sent} audiências publicadas.[/green]")
        elif args.command == "reparse":
            hearing = service.reparse(args.url)
            console.print(hearing.to_text(), markup=False)
    except MercuryError as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
