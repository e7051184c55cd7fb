"""Aplicação FastAPI com as rotas de consulta, coleta e publicação de audiências."""
from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable

import uvicorn
from dotenv import load_dotenv
from fastapi import APIRouter, Depends, FastAPI, Header, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from mercury.container import MercuryContainer, build_container
from mercury.domain import Hearing
from mercury.domain.errors import MercuryError
from mercury.settings import get_api_bind_host, get_api_port, get_api_token

log = logging.getLogger("mercury.api")


class HearingResponse(BaseModel):
    """Representação de uma audiência retornada pela API."""

    #: Endereço do anúncio original.
    url: str
    #: Local da audiência.
    place: str
    #: Data e hora local da audiência.
    time: datetime
    #: Temas tratados na audiência.
    topics: list[str] = Field(default_factory=list)
    #: Parágrafos de procedimento para envio de propostas.
    proposals: list[str] = Field(default_factory=list)
    #: Parágrafos originais raspados do site.
    raw: list[str] = Field(default_factory=list)
    #: Indica se a audiência já foi publicada.
    published: bool = False

    @classmethod
    def from_domain(cls, hearing: Hearing) -> "HearingResponse":
        return cls(
            url=hearing.url,
            place=hearing.place,
            time=hearing.time,
            topics=list(hearing.topics),
            proposals=list(hearing.proposals),
            raw=list(hearing.raw),
            published=hearing.published,
        )


class HearingListResponse(BaseModel):
    data: list[HearingResponse]


class LinksResponse(BaseModel):
    data: list[str]


class StatusResponse(BaseModel):
    status: str


class MessagesResponse(BaseModel):
    messages: list[str] = Field(alias="list")


def configure_cors(app: FastAPI) -> None:
    """Aplica a configuração padrão de CORS utilizada pelos serviços."""

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def require_token(token: str) -> Callable[..., None]:
    """Cria a dependência que valida ``Authorization: Bearer <token>``."""

    def dependency(authorization: str | None = Header(default=None)) -> None:
        if not token:
            return
        if not authorization:
            raise HTTPException(status_code=401, detail="missing token")
        value = authorization
        if value.lower().startswith("bearer "):
            value = value[7:]
        if value != token:
            raise HTTPException(status_code=401, detail="invalid token")

    return dependency


def include_routes(
    app: FastAPI, container: MercuryContainer, *, token: str = "", prefix: str = ""
) -> None:
    """Registra as rotas de audiências na aplicação informada."""

    router = APIRouter(
        prefix=f"{prefix}/hearings",
        tags=["Audiências"],
        dependencies=[Depends(require_token(token))],
    )
    service = container.hearings_service

    def handle_error(exc: MercuryError, action: str) -> HTTPException:
        log.error("falha ao %s: %s", action, exc)
        return HTTPException(status_code=500, detail=str(exc))

    @router.get("", response_model=HearingListResponse)
    @router.get("/", response_model=HearingListResponse, include_in_schema=False)
    def list_hearings() -> HearingListResponse:
        try:
            hearings = service.list_hearings()
        except MercuryError as exc:
            raise handle_error(exc, "listar audiências")
        return HearingListResponse(
            data=[HearingResponse.from_domain(item) for item in hearings]
        )

    @router.post("/new", response_model=StatusResponse)
    def new_hearings(publish: bool = Query(default=False)) -> StatusResponse:
        try:
            result = service.collect_new()
            count = len(result)
            extra = ""
            if publish:
                count = service.publish_pending("markdown")
                extra = " and published"
        except MercuryError as exc:
            raise handle_error(exc, "buscar novas audiências")
        return StatusResponse(status=f"found{extra} {count} new hearings")

    @router.get("/new", response_model=MessagesResponse)
    def unpublished_hearings(
        fmt: str = Query(default="text", alias="format"),
        dry_run: bool = Query(default=False, alias="dry-run"),
    ) -> MessagesResponse:
        try:
            hearings = service.list_unpublished(mark=not dry_run)
        except MercuryError as exc:
            raise handle_error(exc, "listar audiências não publicadas")
        return MessagesResponse.model_validate(
            {"list": [item.render(fmt) for item in hearings]}
        )

    @router.get("/links", response_model=LinksResponse)
    def hearing_links() -> LinksResponse:
        try:
            links = service.fetch_links()
        except MercuryError as exc:
            raise handle_error(exc, "buscar links")
        return LinksResponse(data=links)

    app.include_router(router)


def create_app(
    container: MercuryContainer | None = None, *, token: str | None = None
) -> FastAPI:
    """Cria a aplicação FastAPI com as rotas de audiências configuradas."""

    container = container or build_container()
    app = FastAPI(
        title="Mercury API",
        version="1.0.0",
        description="Coleta e publicação de audiências públicas.",
    )
    configure_cors(app)
    include_routes(
        app, container, token=get_api_token() if token is None else token
    )
    return app


def run() -> None:
    """Executa a API utilizando o Uvicorn."""

    load_dotenv()
    uvicorn.run(
        "mercury.api:create_app",
        host=get_api_bind_host(),
        port=get_api_port(),
        factory=True,
    )


__all__ = ["HearingResponse", "configure_cors", "create_app", "include_routes", "run"]
