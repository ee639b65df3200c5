# api/application/dtos/pauta_dto.py
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from api.domain.pauta.entities import Pauta


class PautaCreateDTO(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    description: str | None = Field(default=None, max_length=2000)


class SessaoStartDTO(BaseModel):
    duration_minutes: int | None = Field(default=None, ge=1)


class PautaDTO(BaseModel):
    id: str
    title: str
    description: str | None
    opening_time: str | None
    closing_time: str | None
    open: bool

    @classmethod
    def from_domain(cls, pauta: Pauta, referencia: datetime) -> PautaDTO:
        return cls(
            id=pauta.id,
            title=pauta.titulo,
            description=pauta.descricao,
            opening_time=pauta.abertura.isoformat() if pauta.abertura else None,
            closing_time=pauta.encerramento.isoformat() if pauta.encerramento else None,
            open=pauta.aberta(referencia),
        )
