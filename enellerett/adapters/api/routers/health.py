# enellerett/adapters/api/routers/health.py
from typing import Dict, Union

import structlog
from fastapi import APIRouter, Depends, Response, status

from enellerett.adapters.api.dependencies import get_lexicon_store
from enellerett.core.ports.lexicon_store import ILexiconStore

logger = structlog.get_logger()

router = APIRouter(prefix="/health", tags=["System"])


@router.get("/live", status_code=status.HTTP_200_OK)
def liveness_probe():
    """
    Liveness Probe.
    Returns 200 OK if the process is serving HTTP.
    """
    return {"status": "ok", "service": "enellerett"}


@router.get("/ready", status_code=status.HTTP_200_OK)
def readiness_probe(
    response: Response,
    store: ILexiconStore = Depends(get_lexicon_store),
) -> Dict[str, Union[str, int]]:
    """
    Readiness Probe.
    Returns 503 Service Unavailable if the lexicon holds no words.
    """
    entries = len(store)
    if entries == 0:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        logger.warning("readiness_probe_failed", entries=entries)
        return {"lexicon": "empty", "entries": entries}

    return {"lexicon": "up", "entries": entries}
