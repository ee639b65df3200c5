# api/domain/associado/value_objects.py
from __future__ import annotations

import re
from dataclasses import dataclass

_ONZE_DIGITOS = re.compile(r"[0-9]{11}")


def identificador_valido(raw: str) -> bool:
    """Puro. True sse raw sao exatamente 11 digitos ASCII.

    Sem normalizacao: pontuacao ("383.475.410-27") e rejeitada.
    """
    return isinstance(raw, str) and _ONZE_DIGITOS.fullmatch(raw) is not None


@dataclass(frozen=True)
class IdentificadorAssociado:
    """Identificador do associado (CPF). repr/str sempre mascarados."""

    _valor: str

    def __init__(self, raw: str) -> None:
        if not identificador_valido(raw):
            raise ValueError("Identificador de associado invalido")
        object.__setattr__(self, "_valor", raw)

    @property
    def valor(self) -> str:
        return self._valor

    @property
    def mascarado(self) -> str:
        """***.XXX.XXX-**, formato seguro para logs."""
        return mascarar(self._valor)

    def __repr__(self) -> str:
        return f"IdentificadorAssociado({self.mascarado!r})"

    def __str__(self) -> str:
        return self.mascarado


def mascarar(raw: str) -> str:
    """Mascara qualquer entrada para log, inclusive identificadores invalidos."""
    if len(raw) != 11:
        return "***"
    return f"***.{raw[3:6]}.{raw[6:9]}-**"
