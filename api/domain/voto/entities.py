# api/domain/voto/entities.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from api.domain.associado.value_objects import IdentificadorAssociado

from .value_objects import EscolhaVoto


@dataclass(frozen=True)
class Voto:
    """Registro insert-once. Nunca alterado nem removido."""

    pauta_id: str
    associado: IdentificadorAssociado
    escolha: EscolhaVoto
    registrado_em: datetime
