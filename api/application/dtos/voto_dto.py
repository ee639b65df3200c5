# api/application/dtos/voto_dto.py
from pydantic import BaseModel


class VotoRequestDTO(BaseModel):
    """Formato de associate/choice e validado pelo VotacaoService, nao aqui."""

    associate: str
    choice: str
