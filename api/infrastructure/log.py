# api/infrastructure/log.py
#
# Configuracao unica de logging da API.
#
# Design decisions:
#   - stdlib logging com um logger por modulo (logging.getLogger(__name__)).
#   - Configurado uma vez, no lifespan da app; basicConfig nao sobrescreve
#     handlers ja instalados (ex.: uvicorn, caplog do pytest).
#   - Recusas de negocio sao INFO, nao anomalias. Identificadores de associado
#     so aparecem mascarados.
from __future__ import annotations

import logging

_FORMATO = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configurar_logging(level: str) -> None:
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=_FORMATO)
    logging.getLogger("api").setLevel(getattr(logging, level, logging.INFO))
