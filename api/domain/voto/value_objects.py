# api/domain/voto/value_objects.py
from __future__ import annotations

import unicodedata
from enum import Enum


class EscolhaVoto(str, Enum):
    SIM = "Sim"
    NAO = "Não"

    @classmethod
    def de_literal(cls, raw: str) -> EscolhaVoto | None:
        """Literal exato (case-sensitive), apos normalizacao NFC. None se nao reconhecido."""
        if not isinstance(raw, str):
            return None
        try:
            return cls(unicodedata.normalize("NFC", raw))
        except ValueError:
            return None


class ErroVoto(str, Enum):
    """Recusas de negocio do registro de voto, na ordem em que sao verificadas."""

    ESCOLHA_INVALIDA = "ESCOLHA_INVALIDA"
    ASSOCIADO_INVALIDO = "ASSOCIADO_INVALIDO"
    PAUTA_NAO_ENCONTRADA = "PAUTA_NAO_ENCONTRADA"
    PAUTA_FECHADA = "PAUTA_FECHADA"
    VOTO_JA_EXISTE = "VOTO_JA_EXISTE"
    ASSOCIADO_NAO_APTO = "ASSOCIADO_NAO_APTO"
