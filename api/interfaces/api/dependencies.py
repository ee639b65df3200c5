# api/interfaces/api/dependencies.py
from __future__ import annotations

from collections.abc import Callable, Generator
from datetime import datetime

import duckdb
from fastapi import Depends

from api.application.services.pauta_service import PautaService
from api.application.services.votacao_service import VotacaoService, agora_utc
from api.domain.associado.elegibilidade import ElegibilidadeGateway
from api.infrastructure.config import get_settings
from api.infrastructure.duckdb_connection import get_connection
from api.infrastructure.elegibilidade_gateway import (
    ElegibilidadeSempreApta,
    HttpxElegibilidadeGateway,
)
from api.infrastructure.repositories.duckdb_pauta_repo import DuckDBPautaRepo
from api.infrastructure.repositories.duckdb_voto_repo import DuckDBVotoRepo


def get_cursor() -> Generator[duckdb.DuckDBPyConnection, None, None]:
    """Um cursor por requisicao; a conexao compartilhada nao e thread-safe."""
    cursor = get_connection().cursor()
    try:
        yield cursor
    finally:
        cursor.close()


def get_relogio() -> Callable[[], datetime]:
    return agora_utc


_gateways_http: dict[tuple[str, float], HttpxElegibilidadeGateway] = {}


def _gateway_http(base_url: str, timeout: float) -> HttpxElegibilidadeGateway:
    chave = (base_url, timeout)
    if chave not in _gateways_http:
        _gateways_http[chave] = HttpxElegibilidadeGateway(base_url, timeout=timeout)
    return _gateways_http[chave]


def fechar_gateways() -> None:
    """Chamado no shutdown da app: fecha os httpx.Client reutilizados entre requisicoes."""
    while _gateways_http:
        _, gateway = _gateways_http.popitem()
        gateway.close()


def get_elegibilidade_gateway() -> ElegibilidadeGateway:
    settings = get_settings()
    if not settings.eligibility_url:
        return ElegibilidadeSempreApta()
    return _gateway_http(settings.eligibility_url, settings.eligibility_timeout)


def get_votacao_service(
    cursor: duckdb.DuckDBPyConnection = Depends(get_cursor),  # noqa: B008
    elegibilidade: ElegibilidadeGateway = Depends(get_elegibilidade_gateway),  # noqa: B008
    relogio: Callable[[], datetime] = Depends(get_relogio),  # noqa: B008
) -> VotacaoService:
    return VotacaoService(
        pauta_repo=DuckDBPautaRepo(cursor),
        voto_repo=DuckDBVotoRepo(cursor),
        elegibilidade=elegibilidade,
        relogio=relogio,
    )


def get_pauta_service(
    cursor: duckdb.DuckDBPyConnection = Depends(get_cursor),  # noqa: B008
    relogio: Callable[[], datetime] = Depends(get_relogio),  # noqa: B008
) -> PautaService:
    return PautaService(
        pauta_repo=DuckDBPautaRepo(cursor),
        duracao_padrao_minutos=get_settings().session_default_minutes,
        relogio=relogio,
    )
