# api/domain/voto/repository.py
from __future__ import annotations

from typing import Protocol

from api.domain.associado.value_objects import IdentificadorAssociado

from .entities import Voto


class VotoDuplicadoError(Exception):
    """O armazenamento recusou o insert: ja existe voto para (pauta, associado)."""


class VotoRepository(Protocol):
    def buscar_por_pauta_e_associado(
        self, pauta_id: str, associado: IdentificadorAssociado
    ) -> Voto | None: ...

    def salvar(self, voto: Voto) -> Voto:
        """Raises VotoDuplicadoError se o par (pauta, associado) ja existir."""
        ...
