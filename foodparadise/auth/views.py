# module foodparadise.auth.views
import logging
from typing import Any, Dict
from fastapi import APIRouter, Body, Depends, HTTPException

from foodparadise.utils.rate_limit import optional_rate_limit
from .tokens import issue_token

logger = logging.getLogger(__name__)
router = APIRouter(tags=["Auth API"])

@router.post("/jwt", dependencies=[Depends(optional_rate_limit(times=20, seconds=60))])
def create_token(payload: Dict[str, Any] = Body(...)):
    """
    Signe le payload utilisateur reçu (au minimum {"email": ...}) et renvoie {"token": ...}.
    - Durée de validité: ACCESS_TOKEN_TTL_SECONDS (1h par défaut).
    """
    try:
        token = issue_token(payload)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"token": token}
