# api/application/services/votacao_service.py
#
# Registro de voto: cadeia de guardas sequencial, curto-circuito na primeira recusa.
#
# Ordem das guardas (fixa):
#   1. escolha e um dos dois literais reconhecidos
#   2. identificador do associado tem formato valido (antes de qualquer IO)
#   3. pauta existe
#   4. sessao da pauta esta aberta
#   5. associado ainda nao votou nesta pauta
#   6. associado esta apto a votar (colaborador externo)
# So entao um unico Voto e persistido.
#
# Invariantes:
#   - Recusas nao alteram estado: repetir a mesma chamada recusada devolve o
#     mesmo ErroVoto.
#   - check-then-act: a verificacao 5 pode correr contra outra requisicao para
#     o mesmo par. A chave primaria (pauta_id, associado) no armazenamento e a
#     rede de seguranca; VotoDuplicadoError no insert vira VOTO_JA_EXISTE.
#   - Falhas inesperadas de colaboradores (banco, ElegibilidadeIndisponivelError)
#     propagam; nao fazem parte do vocabulario de ErroVoto.
from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime

from api.domain.associado.elegibilidade import ElegibilidadeGateway
from api.domain.associado.value_objects import (
    IdentificadorAssociado,
    identificador_valido,
    mascarar,
)
from api.domain.pauta.repository import PautaRepository
from api.domain.voto.entities import Voto
from api.domain.voto.repository import VotoDuplicadoError, VotoRepository
from api.domain.voto.value_objects import EscolhaVoto, ErroVoto

logger = logging.getLogger(__name__)


def agora_utc() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True)
class ResultadoVoto:
    voto: Voto | None = None
    erro: ErroVoto | None = None

    @property
    def aceito(self) -> bool:
        return self.erro is None


class VotacaoService:
    """Imperative Shell: orquestra IO (repos, gateway) em torno das guardas puras."""

    def __init__(
        self,
        pauta_repo: PautaRepository,
        voto_repo: VotoRepository,
        elegibilidade: ElegibilidadeGateway,
        relogio: Callable[[], datetime] = agora_utc,
    ) -> None:
        self._pauta_repo = pauta_repo
        self._voto_repo = voto_repo
        self._elegibilidade = elegibilidade
        self._relogio = relogio

    def votar(self, pauta_id: str, associado_raw: str, escolha_raw: str) -> ResultadoVoto:
        escolha = EscolhaVoto.de_literal(escolha_raw)
        if escolha is None:
            return self._recusar(ErroVoto.ESCOLHA_INVALIDA, pauta_id, associado_raw)

        if not identificador_valido(associado_raw):
            return self._recusar(ErroVoto.ASSOCIADO_INVALIDO, pauta_id, associado_raw)
        associado = IdentificadorAssociado(associado_raw)

        pauta = self._pauta_repo.buscar_por_id(pauta_id)
        if pauta is None:
            return self._recusar(ErroVoto.PAUTA_NAO_ENCONTRADA, pauta_id, associado_raw)

        agora = self._relogio()
        if not pauta.aberta(agora):
            return self._recusar(ErroVoto.PAUTA_FECHADA, pauta_id, associado_raw)

        if self._voto_repo.buscar_por_pauta_e_associado(pauta_id, associado) is not None:
            return self._recusar(ErroVoto.VOTO_JA_EXISTE, pauta_id, associado_raw)

        if not self._elegibilidade.associado_apto_a_votar(associado):
            return self._recusar(ErroVoto.ASSOCIADO_NAO_APTO, pauta_id, associado_raw)

        voto = Voto(pauta_id=pauta_id, associado=associado, escolha=escolha, registrado_em=agora)
        try:
            salvo = self._voto_repo.salvar(voto)
        except VotoDuplicadoError:
            # Outra requisicao para o mesmo par venceu a corrida entre a guarda 5 e o insert
            return self._recusar(ErroVoto.VOTO_JA_EXISTE, pauta_id, associado_raw)

        logger.info("Voto registrado: pauta=%s associado=%s", pauta_id, associado.mascarado)
        return ResultadoVoto(voto=salvo)

    @staticmethod
    def _recusar(erro: ErroVoto, pauta_id: str, associado_raw: str) -> ResultadoVoto:
        logger.info(
            "Voto recusado (%s): pauta=%s associado=%s",
            erro.value,
            pauta_id,
            mascarar(associado_raw) if isinstance(associado_raw, str) else "***",
        )
        return ResultadoVoto(erro=erro)
