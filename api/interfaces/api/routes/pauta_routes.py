# api/interfaces/api/routes/pauta_routes.py
from collections.abc import Callable
from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Query

from api.application.dtos.pauta_dto import PautaCreateDTO, PautaDTO, SessaoStartDTO
from api.application.services.pauta_service import PautaService, ResultadoPauta
from api.domain.pauta.value_objects import ErroPauta
from api.interfaces.api.dependencies import get_pauta_service, get_relogio

router = APIRouter()

_HTTP_POR_ERRO: dict[ErroPauta, tuple[int, str]] = {
    ErroPauta.PAUTA_NAO_ENCONTRADA: (404, "Pauta nao encontrada"),
    ErroPauta.SESSAO_JA_INICIADA: (406, "Sessao de votacao da pauta ja foi iniciada"),
    ErroPauta.SESSAO_NAO_ABERTA: (406, "Sessao de votacao da pauta nao esta aberta"),
}


def _responder(resultado: ResultadoPauta, referencia: datetime) -> PautaDTO:
    if resultado.erro is not None:
        status_code, detail = _HTTP_POR_ERRO[resultado.erro]
        raise HTTPException(status_code=status_code, detail=detail)
    if resultado.pauta is None:
        raise HTTPException(status_code=500, detail="Pauta ausente no resultado")
    return PautaDTO.from_domain(resultado.pauta, referencia)


@router.post("/agenda", response_model=PautaDTO, status_code=201)
def criar_pauta(
    body: PautaCreateDTO,
    service: PautaService = Depends(get_pauta_service),  # noqa: B008
    relogio: Callable[[], datetime] = Depends(get_relogio),  # noqa: B008
) -> PautaDTO:
    try:
        pauta = service.criar(body.title, body.description)
    except ValueError as err:
        raise HTTPException(status_code=400, detail="Titulo da pauta invalido") from err
    return PautaDTO.from_domain(pauta, relogio())


@router.get("/agenda", response_model=list[PautaDTO])
def listar_pautas(
    limit: int = Query(default=20, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
    service: PautaService = Depends(get_pauta_service),  # noqa: B008
    relogio: Callable[[], datetime] = Depends(get_relogio),  # noqa: B008
) -> list[PautaDTO]:
    agora = relogio()
    return [PautaDTO.from_domain(p, agora) for p in service.listar(limit, offset)]


@router.get("/agenda/{agenda_id}", response_model=PautaDTO)
def obter_pauta(
    agenda_id: str,
    service: PautaService = Depends(get_pauta_service),  # noqa: B008
    relogio: Callable[[], datetime] = Depends(get_relogio),  # noqa: B008
) -> PautaDTO:
    pauta = service.obter(agenda_id)
    if pauta is None:
        raise HTTPException(status_code=404, detail="Pauta nao encontrada")
    return PautaDTO.from_domain(pauta, relogio())


@router.post("/agenda/{agenda_id}/start", response_model=PautaDTO)
def iniciar_sessao(
    agenda_id: str,
    body: SessaoStartDTO | None = None,
    service: PautaService = Depends(get_pauta_service),  # noqa: B008
    relogio: Callable[[], datetime] = Depends(get_relogio),  # noqa: B008
) -> PautaDTO:
    return _responder(service.iniciar_sessao(agenda_id, body.duration_minutes if body else None), relogio())


@router.post("/agenda/{agenda_id}/close", response_model=PautaDTO)
def encerrar_sessao(
    agenda_id: str,
    service: PautaService = Depends(get_pauta_service),  # noqa: B008
    relogio: Callable[[], datetime] = Depends(get_relogio),  # noqa: B008
) -> PautaDTO:
    return _responder(service.encerrar_sessao(agenda_id), relogio())
