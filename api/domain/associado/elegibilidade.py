# api/domain/associado/elegibilidade.py
from __future__ import annotations

from typing import Protocol

from .value_objects import IdentificadorAssociado


class ElegibilidadeIndisponivelError(RuntimeError):
    """Servico externo de elegibilidade nao deu resposta definitiva."""


class ElegibilidadeGateway(Protocol):
    def associado_apto_a_votar(self, associado: IdentificadorAssociado) -> bool: ...
