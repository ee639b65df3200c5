# api/interfaces/api/main.py
from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from api.domain.associado.elegibilidade import ElegibilidadeIndisponivelError
from api.infrastructure.config import get_settings
from api.infrastructure.log import configurar_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    from api.infrastructure.duckdb_connection import get_connection
    configurar_logging(get_settings().log_level)
    get_connection()  # valida conexao e schema no startup
    logger.info("API de sessao de votacao iniciada")
    yield

    from api.interfaces.api.dependencies import fechar_gateways
    fechar_gateways()


app = FastAPI(
    title="Sessao de Votacao API",
    debug=get_settings().debug,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url=None,
)


@app.middleware("http")
async def add_security_headers(request: Request, call_next: object) -> Response:
    response = await call_next(request)  # type: ignore[misc]
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    return response  # type: ignore[return-value]


@app.exception_handler(RequestValidationError)
async def corpo_invalido(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Corpo malformado e 400, nao o 422 padrao do FastAPI
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})


@app.exception_handler(ElegibilidadeIndisponivelError)
async def elegibilidade_indisponivel(request: Request, exc: ElegibilidadeIndisponivelError) -> JSONResponse:
    return JSONResponse(
        status_code=503,
        content={"detail": "Servico de elegibilidade indisponivel. Tente novamente."},
    )


from api.interfaces.api.routes.pauta_routes import router as pauta_router  # noqa: E402
from api.interfaces.api.routes.voto_routes import router as voto_router  # noqa: E402

app.include_router(pauta_router)
app.include_router(voto_router)
