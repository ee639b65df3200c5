# api/domain/pauta/value_objects.py
from __future__ import annotations

from enum import Enum


class ErroPauta(str, Enum):
    PAUTA_NAO_ENCONTRADA = "PAUTA_NAO_ENCONTRADA"
    SESSAO_JA_INICIADA = "SESSAO_JA_INICIADA"
    SESSAO_NAO_ABERTA = "SESSAO_NAO_ABERTA"
