from datetime import UTC, datetime, timedelta

import pytest

from api.application.services.pauta_service import PautaService, novo_id_pauta
from api.domain.pauta.entities import Pauta
from api.domain.pauta.value_objects import ErroPauta

AGORA = datetime(2026, 5, 4, 14, 0, tzinfo=UTC)


class PautaRepoEmMemoria:
    def __init__(self) -> None:
        self.pautas: dict[str, Pauta] = {}

    def buscar_por_id(self, pauta_id: str) -> Pauta | None:
        return self.pautas.get(pauta_id)

    def listar(self, limit: int, offset: int) -> list[Pauta]:
        return sorted(self.pautas.values(), key=lambda p: p.id)[offset : offset + limit]

    def salvar(self, pauta: Pauta) -> Pauta:
        self.pautas[pauta.id] = pauta
        return pauta


@pytest.fixture()
def repo() -> PautaRepoEmMemoria:
    return PautaRepoEmMemoria()


@pytest.fixture()
def service(repo: PautaRepoEmMemoria) -> PautaService:
    return PautaService(repo, duracao_padrao_minutos=1, relogio=lambda: AGORA)


def test_novo_id_tem_24_hex():
    pauta_id = novo_id_pauta()
    assert len(pauta_id) == 24
    int(pauta_id, 16)


def test_criar_pauta_fechada(service: PautaService, repo: PautaRepoEmMemoria):
    pauta = service.criar("  Aprovacao das contas  ", "Exercicio 2025")
    assert pauta.titulo == "Aprovacao das contas"
    assert pauta.sessao_iniciada is False
    assert repo.pautas[pauta.id] == pauta


def test_criar_pauta_titulo_vazio_invalido(service: PautaService):
    with pytest.raises(ValueError):
        service.criar("   ")


def test_iniciar_sessao_duracao_padrao(service: PautaService):
    pauta = service.criar("Contas")
    resultado = service.iniciar_sessao(pauta.id)
    assert resultado.erro is None
    assert resultado.pauta is not None
    assert resultado.pauta.abertura == AGORA
    assert resultado.pauta.encerramento == AGORA + timedelta(minutes=1)


def test_iniciar_sessao_duracao_informada(service: PautaService, repo: PautaRepoEmMemoria):
    pauta = service.criar("Contas")
    service.iniciar_sessao(pauta.id, duracao_minutos=30)
    assert repo.pautas[pauta.id].encerramento == AGORA + timedelta(minutes=30)


def test_iniciar_sessao_pauta_inexistente(service: PautaService):
    assert service.iniciar_sessao("608ded0cc66aaf5bd61759de").erro is ErroPauta.PAUTA_NAO_ENCONTRADA


def test_iniciar_sessao_duas_vezes(service: PautaService):
    pauta = service.criar("Contas")
    service.iniciar_sessao(pauta.id)
    assert service.iniciar_sessao(pauta.id).erro is ErroPauta.SESSAO_JA_INICIADA


def test_encerrar_sessao_aberta(service: PautaService, repo: PautaRepoEmMemoria):
    pauta = service.criar("Contas")
    service.iniciar_sessao(pauta.id, duracao_minutos=10)
    resultado = service.encerrar_sessao(pauta.id)
    assert resultado.erro is None
    assert repo.pautas[pauta.id].aberta(AGORA) is False


def test_encerrar_sessao_nunca_iniciada(service: PautaService):
    pauta = service.criar("Contas")
    assert service.encerrar_sessao(pauta.id).erro is ErroPauta.SESSAO_NAO_ABERTA


def test_encerrar_sessao_pauta_inexistente(service: PautaService):
    assert service.encerrar_sessao("608ded0cc66aaf5bd61759de").erro is ErroPauta.PAUTA_NAO_ENCONTRADA


def test_sessao_encerrada_nao_reabre(service: PautaService):
    pauta = service.criar("Contas")
    service.iniciar_sessao(pauta.id)
    service.encerrar_sessao(pauta.id)
    assert service.iniciar_sessao(pauta.id).erro is ErroPauta.SESSAO_JA_INICIADA


def test_listar_paginado(service: PautaService):
    for i in range(3):
        service.criar(f"Pauta {i}")
    assert len(service.listar(limit=2, offset=0)) == 2
    assert len(service.listar(limit=2, offset=2)) == 1
