# tests/integration/conftest.py
from __future__ import annotations

import os
from collections.abc import Generator
from datetime import UTC, datetime, timedelta

import duckdb
import pytest
from fastapi.testclient import TestClient

from api.domain.associado.value_objects import IdentificadorAssociado

# Elegibilidade externa desligada por padrao em testes
os.environ["ELIGIBILITY_URL"] = ""
os.environ["SESSION_DEFAULT_MINUTES"] = "1"

AGORA = datetime(2026, 5, 4, 14, 0, tzinfo=UTC)
PAUTA_ABERTA = "608d817df3117478ca0f7432"
PAUTA_NAO_INICIADA = "60a1f2b3c4d5e6f708192a3b"
PAUTA_INEXISTENTE = "608ded0cc66aaf5bd61759de"
ASSOCIADO = "38347541027"


def _naive(dt: datetime) -> datetime:
    return dt.astimezone(UTC).replace(tzinfo=None)


class ElegibilidadeControlada:
    def __init__(self) -> None:
        self.inaptos: set[str] = set()

    def associado_apto_a_votar(self, associado: IdentificadorAssociado) -> bool:
        return associado.valor not in self.inaptos


@pytest.fixture()
def test_db() -> Generator[duckdb.DuckDBPyConnection, None, None]:
    """DuckDB in-memory com schema e pautas deterministicas. Um banco por teste."""
    from api.infrastructure.duckdb_connection import aplicar_schema

    conn = duckdb.connect(":memory:")
    aplicar_schema(conn)
    conn.execute(
        "INSERT INTO dim_pauta VALUES (?, ?, ?, ?, ?), (?, ?, ?, ?, ?)",
        [
            PAUTA_ABERTA, "Aprovacao das contas de 2025", "Assembleia geral ordinaria",
            _naive(AGORA - timedelta(minutes=5)), _naive(AGORA + timedelta(minutes=55)),
            PAUTA_NAO_INICIADA, "Reforma do estatuto", None, None, None,
        ],
    )
    yield conn
    conn.close()


@pytest.fixture()
def elegibilidade() -> ElegibilidadeControlada:
    return ElegibilidadeControlada()


@pytest.fixture()
def client(
    test_db: duckdb.DuckDBPyConnection,
    elegibilidade: ElegibilidadeControlada,
) -> Generator[TestClient, None, None]:
    """TestClient com DuckDB in-memory, relogio fixo e elegibilidade controlada."""
    from api.infrastructure import duckdb_connection
    duckdb_connection.set_connection(test_db)

    from api.infrastructure.config import get_settings
    get_settings.cache_clear()

    from api.interfaces.api.dependencies import get_elegibilidade_gateway, get_relogio
    from api.interfaces.api.main import app

    app.dependency_overrides[get_relogio] = lambda: (lambda: AGORA)
    app.dependency_overrides[get_elegibilidade_gateway] = lambda: elegibilidade
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
    duckdb_connection.set_connection(None)


@pytest.fixture()
def pauta_fechada(test_db: duckdb.DuckDBPyConnection) -> str:
    """Mesmo id da pauta inexistente, agora com sessao ja encerrada."""
    test_db.execute(
        "INSERT INTO dim_pauta VALUES (?, ?, ?, ?, ?)",
        [
            PAUTA_INEXISTENTE, "Eleicao do conselho fiscal", None,
            _naive(AGORA - timedelta(hours=2)), _naive(AGORA - timedelta(hours=1)),
        ],
    )
    return PAUTA_INEXISTENTE
