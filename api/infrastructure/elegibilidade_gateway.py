# api/infrastructure/elegibilidade_gateway.py
#
# Consulta de elegibilidade do associado a um servico externo de CPF.
#
# Design decisions:
#   - Contrato do servico: GET {base_url}/users/{cpf} responde
#     {"status": "ABLE_TO_VOTE"} ou {"status": "UNABLE_TO_VOTE"}; 404 para CPF
#     desconhecido.
#   - Apenas respostas definitivas viram bool: ABLE_TO_VOTE -> True,
#     UNABLE_TO_VOTE ou 404 -> False. Timeout, erro de transporte, 5xx ou
#     status desconhecido levantam ElegibilidadeIndisponivelError; a rota
#     responde 503 em vez de recusar o voto por um motivo que nao e de negocio.
#   - O httpx.Client e injetavel para testes (httpx.MockTransport).
from __future__ import annotations

import logging

import httpx

from api.domain.associado.elegibilidade import ElegibilidadeIndisponivelError
from api.domain.associado.value_objects import IdentificadorAssociado

logger = logging.getLogger(__name__)

_APTO = "ABLE_TO_VOTE"
_INAPTO = "UNABLE_TO_VOTE"


class HttpxElegibilidadeGateway:
    def __init__(self, base_url: str, client: httpx.Client | None = None, timeout: float = 5.0) -> None:
        self._base_url = base_url.rstrip("/")
        self._client = client or httpx.Client(timeout=timeout, follow_redirects=True)

    def associado_apto_a_votar(self, associado: IdentificadorAssociado) -> bool:
        url = f"{self._base_url}/users/{associado.valor}"
        try:
            response = self._client.get(url)
        except httpx.HTTPError as err:
            logger.exception("Servico de elegibilidade inacessivel (associado=%s)", associado.mascarado)
            raise ElegibilidadeIndisponivelError("Servico de elegibilidade inacessivel") from err

        if response.status_code == httpx.codes.NOT_FOUND:
            return False
        if response.status_code != httpx.codes.OK:
            logger.error(
                "Servico de elegibilidade respondeu %s (associado=%s)",
                response.status_code,
                associado.mascarado,
            )
            raise ElegibilidadeIndisponivelError(
                f"Servico de elegibilidade respondeu {response.status_code}"
            )

        try:
            status = response.json().get("status")
        except (ValueError, AttributeError) as err:
            raise ElegibilidadeIndisponivelError("Resposta de elegibilidade malformada") from err

        if status == _APTO:
            return True
        if status == _INAPTO:
            return False
        raise ElegibilidadeIndisponivelError(f"Status de elegibilidade desconhecido: {status!r}")

    def close(self) -> None:
        self._client.close()


class ElegibilidadeSempreApta:
    """Usado quando ELIGIBILITY_URL nao esta configurada."""

    def associado_apto_a_votar(self, associado: IdentificadorAssociado) -> bool:
        return True
