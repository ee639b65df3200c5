# api/interfaces/api/routes/voto_routes.py
from fastapi import APIRouter, Depends, HTTPException, Response

from api.application.dtos.voto_dto import VotoRequestDTO
from api.application.services.votacao_service import VotacaoService
from api.domain.voto.value_objects import ErroVoto
from api.interfaces.api.dependencies import get_votacao_service

router = APIRouter()

# Sem logica de negocio aqui: so traducao ErroVoto -> HTTP
_HTTP_POR_ERRO: dict[ErroVoto, tuple[int, str]] = {
    ErroVoto.ESCOLHA_INVALIDA: (400, "Escolha invalida: use 'Sim' ou 'Não'"),
    ErroVoto.ASSOCIADO_INVALIDO: (400, "Identificador de associado invalido"),
    ErroVoto.PAUTA_NAO_ENCONTRADA: (404, "Pauta nao encontrada"),
    ErroVoto.PAUTA_FECHADA: (406, "Sessao de votacao da pauta esta fechada"),
    ErroVoto.VOTO_JA_EXISTE: (406, "Associado ja votou nesta pauta"),
    ErroVoto.ASSOCIADO_NAO_APTO: (403, "Associado nao esta apto a votar"),
}


@router.post("/agenda/{agenda_id}/vote", status_code=200, response_class=Response)
def votar(
    agenda_id: str,
    body: VotoRequestDTO,
    service: VotacaoService = Depends(get_votacao_service),  # noqa: B008
) -> Response:
    resultado = service.votar(agenda_id, body.associate, body.choice)
    if resultado.erro is not None:
        status_code, detail = _HTTP_POR_ERRO[resultado.erro]
        raise HTTPException(status_code=status_code, detail=detail)
    return Response(status_code=200)
