"""
Gardes d'accès (dépendances FastAPI), évaluées dans l'ordre avant la vue:
  1) verify_token_dependency: Bearer -> claims (request.state.claims)
  2) require_role(...) / require_admin: relecture du rôle en base
  3) require_self: l'email demandé doit être celui du token
Chaque garde lève une AppError typée (401/403) ou passe le contexte enrichi.
"""
from typing import Any, Dict
from fastapi import Depends, Request

from foodparadise.auth.roles import ADMIN, authorize, check_same_identity
from foodparadise.auth.tokens import extract_bearer_token, verify_token
from foodparadise.infra.supabase_client import get_db

def verify_token_dependency(request: Request) -> Dict[str, Any]:
    raw = extract_bearer_token(request.headers.get("Authorization"))
    claims = verify_token(raw)
    request.state.claims = claims
    return claims

def require_role(required_role: str):
    def _guard(
        claims: Dict[str, Any] = Depends(verify_token_dependency),
        db=Depends(get_db),
    ) -> Dict[str, Any]:
        return authorize(db, claims, required_role)
    _guard.__name__ = f"require_{required_role}"
    return _guard

require_admin = require_role(ADMIN)

def require_self(email: str, claims: Dict[str, Any] = Depends(verify_token_dependency)) -> Dict[str, Any]:
    check_same_identity(email, claims)
    return claims
