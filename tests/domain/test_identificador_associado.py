import pytest

from api.domain.associado.value_objects import (
    IdentificadorAssociado,
    identificador_valido,
    mascarar,
)


def test_identificador_valido_onze_digitos():
    assert identificador_valido("38347541027") is True


def test_identificador_comprimento_errado():
    assert identificador_valido("0123456789") is False
    assert identificador_valido("383475410270") is False
    assert identificador_valido("") is False


def test_identificador_com_pontuacao_invalido():
    """Formato estrutural: somente digitos, sem mascara."""
    assert identificador_valido("383.475.410-27") is False


def test_identificador_nao_numerico_invalido():
    assert identificador_valido("3834754102a") is False
    assert identificador_valido(" 8347541027") is False


def test_identificador_digitos_unicode_nao_ascii_invalido():
    assert identificador_valido("٣٨٣٤٧٥٤١٠٢٧") is False


def test_qualquer_sequencia_de_onze_digitos_valida():
    """Regra estrutural: nao ha verificacao de digitos verificadores."""
    for raw in ("12345678901", "38347541028", "11111111111", "00000000000"):
        assert identificador_valido(raw) is True


def test_identificador_nao_string_invalido():
    assert identificador_valido(38347541027) is False  # type: ignore[arg-type]
    assert identificador_valido(None) is False  # type: ignore[arg-type]


def test_value_object_rejeita_invalido():
    with pytest.raises(ValueError, match="invalido"):
        IdentificadorAssociado("0123456789")


def test_repr_nunca_mostra_completo():
    associado = IdentificadorAssociado("38347541027")
    assert "38347541027" not in repr(associado)
    assert "38347541027" not in str(associado)
    assert str(associado) == "***.475.410-**"


def test_igualdade_por_valor():
    assert IdentificadorAssociado("38347541027") == IdentificadorAssociado("38347541027")
    assert hash(IdentificadorAssociado("38347541027")) == hash(IdentificadorAssociado("38347541027"))


def test_mascarar_entrada_de_tamanho_errado():
    assert mascarar("0123456789") == "***"
