# api/domain/pauta/repository.py
from __future__ import annotations

from typing import Protocol

from .entities import Pauta


class PautaRepository(Protocol):
    def buscar_por_id(self, pauta_id: str) -> Pauta | None: ...
    def listar(self, limit: int, offset: int) -> list[Pauta]: ...
    def salvar(self, pauta: Pauta) -> Pauta: ...
