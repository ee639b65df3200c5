# api/infrastructure/repositories/duckdb_pauta_repo.py
from __future__ import annotations

from datetime import UTC, datetime

import duckdb

from api.domain.pauta.entities import Pauta


def para_coluna(valor: datetime | None) -> datetime | None:
    """Coluna TIMESTAMP guarda UTC sem fuso."""
    if valor is None:
        return None
    return valor.astimezone(UTC).replace(tzinfo=None)


def de_coluna(valor: datetime | None) -> datetime | None:
    if valor is None:
        return None
    return valor.replace(tzinfo=UTC)


class DuckDBPautaRepo:
    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    def buscar_por_id(self, pauta_id: str) -> Pauta | None:
        row = self._conn.execute(
            "SELECT id, titulo, descricao, abertura, encerramento FROM dim_pauta WHERE id = ?",
            [pauta_id],
        ).fetchone()
        if row is None:
            return None
        return self._hidratar(row)

    def listar(self, limit: int, offset: int) -> list[Pauta]:
        rows = self._conn.execute(
            """SELECT id, titulo, descricao, abertura, encerramento
               FROM dim_pauta ORDER BY id LIMIT ? OFFSET ?""",
            [limit, offset],
        ).fetchall()
        return [self._hidratar(r) for r in rows]

    def salvar(self, pauta: Pauta) -> Pauta:
        self._conn.execute(
            """INSERT INTO dim_pauta (id, titulo, descricao, abertura, encerramento)
               VALUES (?, ?, ?, ?, ?)
               ON CONFLICT (id) DO UPDATE SET
                   titulo = excluded.titulo,
                   descricao = excluded.descricao,
                   abertura = excluded.abertura,
                   encerramento = excluded.encerramento""",
            [
                pauta.id,
                pauta.titulo,
                pauta.descricao,
                para_coluna(pauta.abertura),
                para_coluna(pauta.encerramento),
            ],
        )
        return pauta

    def _hidratar(self, row: tuple) -> Pauta:  # type: ignore[type-arg]
        """Colunas: id(0), titulo(1), descricao(2), abertura(3), encerramento(4)"""
        return Pauta(
            id=str(row[0]),
            titulo=str(row[1]),
            descricao=str(row[2]) if row[2] is not None else None,
            abertura=de_coluna(row[3]),
            encerramento=de_coluna(row[4]),
        )
