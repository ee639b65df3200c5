# api/application/services/pauta_service.py
from __future__ import annotations

import logging
import secrets
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta

from api.domain.pauta.entities import Pauta
from api.domain.pauta.repository import PautaRepository
from api.domain.pauta.value_objects import ErroPauta

from .votacao_service import agora_utc

logger = logging.getLogger(__name__)


def novo_id_pauta() -> str:
    """24 caracteres hex minusculos."""
    return secrets.token_hex(12)


@dataclass(frozen=True)
class ResultadoPauta:
    pauta: Pauta | None = None
    erro: ErroPauta | None = None


class PautaService:
    """Ciclo de vida administrativo da pauta: criar, consultar, abrir e encerrar sessao."""

    def __init__(
        self,
        pauta_repo: PautaRepository,
        duracao_padrao_minutos: int = 1,
        relogio: Callable[[], datetime] = agora_utc,
    ) -> None:
        self._pauta_repo = pauta_repo
        self._duracao_padrao_minutos = duracao_padrao_minutos
        self._relogio = relogio

    def criar(self, titulo: str, descricao: str | None = None) -> Pauta:
        pauta = self._pauta_repo.salvar(
            Pauta(id=novo_id_pauta(), titulo=titulo.strip(), descricao=descricao)
        )
        logger.info("Pauta criada: id=%s", pauta.id)
        return pauta

    def obter(self, pauta_id: str) -> Pauta | None:
        return self._pauta_repo.buscar_por_id(pauta_id)

    def listar(self, limit: int, offset: int) -> list[Pauta]:
        return self._pauta_repo.listar(limit, offset)

    def iniciar_sessao(self, pauta_id: str, duracao_minutos: int | None = None) -> ResultadoPauta:
        pauta = self._pauta_repo.buscar_por_id(pauta_id)
        if pauta is None:
            return ResultadoPauta(erro=ErroPauta.PAUTA_NAO_ENCONTRADA)
        if pauta.sessao_iniciada:
            return ResultadoPauta(erro=ErroPauta.SESSAO_JA_INICIADA)

        minutos = duracao_minutos if duracao_minutos is not None else self._duracao_padrao_minutos
        aberta = pauta.iniciar_sessao(self._relogio(), timedelta(minutes=minutos))
        self._pauta_repo.salvar(aberta)
        logger.info("Sessao iniciada: pauta=%s ate %s", aberta.id, aberta.encerramento)
        return ResultadoPauta(pauta=aberta)

    def encerrar_sessao(self, pauta_id: str) -> ResultadoPauta:
        pauta = self._pauta_repo.buscar_por_id(pauta_id)
        if pauta is None:
            return ResultadoPauta(erro=ErroPauta.PAUTA_NAO_ENCONTRADA)

        agora = self._relogio()
        if not pauta.aberta(agora):
            return ResultadoPauta(erro=ErroPauta.SESSAO_NAO_ABERTA)

        encerrada = pauta.encerrar_sessao(agora)
        self._pauta_repo.salvar(encerrada)
        logger.info("Sessao encerrada: pauta=%s", encerrada.id)
        return ResultadoPauta(pauta=encerrada)
