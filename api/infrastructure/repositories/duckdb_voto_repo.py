# api/infrastructure/repositories/duckdb_voto_repo.py
#
# DuckDB repository for Voto.
#
# Design decisions:
#   - fato_voto has a composite PRIMARY KEY (pauta_id, associado). The service
#     checks for an existing vote before inserting, but two concurrent requests
#     for the same pair can both pass that check. The key makes the second
#     INSERT fail, and the failure is translated here to the domain's
#     VotoDuplicadoError so the service never sees a DuckDB type.
#   - The violation surfaces two ways. If the other vote is already committed,
#     the INSERT itself raises duckdb.ConstraintException. If both inserts run
#     at the same time on separate cursors, the loser fails at commit with
#     duckdb.TransactionException reporting the duplicate key. Any other
#     TransactionException is re-raised untouched.
#   - Votes are insert-only: there is no update or delete method.
#
# Invariants:
#   - Never interpolates user input into SQL strings; all parameters use ?.
#   - Returns None (not raising) when no vote is found.
from __future__ import annotations

import duckdb

from api.domain.associado.value_objects import IdentificadorAssociado
from api.domain.voto.entities import Voto
from api.domain.voto.repository import VotoDuplicadoError
from api.domain.voto.value_objects import EscolhaVoto

from .duckdb_pauta_repo import de_coluna, para_coluna

_MARCAS_CHAVE_DUPLICADA = ("PRIMARY KEY or UNIQUE constraint", "duplicate key")


class DuckDBVotoRepo:
    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    def buscar_por_pauta_e_associado(
        self, pauta_id: str, associado: IdentificadorAssociado
    ) -> Voto | None:
        row = self._conn.execute(
            """SELECT pauta_id, associado, escolha, registrado_em
               FROM fato_voto WHERE pauta_id = ? AND associado = ?""",
            [pauta_id, associado.valor],
        ).fetchone()
        if row is None:
            return None
        return Voto(
            pauta_id=str(row[0]),
            associado=IdentificadorAssociado(str(row[1])),
            escolha=EscolhaVoto(str(row[2])),
            registrado_em=de_coluna(row[3]),  # type: ignore[arg-type]
        )

    def salvar(self, voto: Voto) -> Voto:
        try:
            self._conn.execute(
                "INSERT INTO fato_voto (pauta_id, associado, escolha, registrado_em) VALUES (?, ?, ?, ?)",
                [voto.pauta_id, voto.associado.valor, voto.escolha.value, para_coluna(voto.registrado_em)],
            )
        except duckdb.ConstraintException as err:
            raise VotoDuplicadoError(voto.pauta_id) from err
        except duckdb.TransactionException as err:
            if not _viola_chave(err):
                raise
            raise VotoDuplicadoError(voto.pauta_id) from err
        return voto


def _viola_chave(err: duckdb.TransactionException) -> bool:
    mensagem = str(err)
    return any(marca in mensagem for marca in _MARCAS_CHAVE_DUPLICADA)
