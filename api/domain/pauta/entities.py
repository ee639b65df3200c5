# api/domain/pauta/entities.py
from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime, timedelta


@dataclass(frozen=True)
class Pauta:
    """Pauta votavel. Sessao fechada ate ser iniciada; imutavel depois de encerrada."""

    id: str
    titulo: str
    descricao: str | None = None
    abertura: datetime | None = None
    encerramento: datetime | None = None  # exclusivo

    def __post_init__(self) -> None:
        if not self.titulo.strip():
            raise ValueError("Titulo da pauta nao pode ser vazio")
        if (self.abertura is None) != (self.encerramento is None):
            raise ValueError("Abertura e encerramento devem ser informados juntos")
        if self.abertura is not None and self.encerramento is not None:
            if self.encerramento < self.abertura:
                raise ValueError("Encerramento anterior a abertura")

    @property
    def sessao_iniciada(self) -> bool:
        return self.abertura is not None

    def aberta(self, referencia: datetime) -> bool:
        """Puro: recebe o instante de referencia, nunca chama datetime.now()."""
        if self.abertura is None or self.encerramento is None:
            return False
        return self.abertura <= referencia < self.encerramento

    def iniciar_sessao(self, referencia: datetime, duracao: timedelta) -> Pauta:
        if self.sessao_iniciada:
            raise ValueError("Sessao da pauta ja foi iniciada")
        if duracao <= timedelta(0):
            raise ValueError("Duracao da sessao deve ser positiva")
        return replace(self, abertura=referencia, encerramento=referencia + duracao)

    def encerrar_sessao(self, referencia: datetime) -> Pauta:
        if not self.aberta(referencia):
            raise ValueError("Sessao da pauta nao esta aberta")
        return replace(self, encerramento=referencia)
