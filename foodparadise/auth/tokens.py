"""
Jetons d'accès signés (JWT HS256, secret partagé).
- issue_token: signe un payload utilisateur (doit contenir email) avec iat/exp.
- extract_bearer_token: lit l'en-tête Authorization "Bearer <token>".
- verify_token: valide signature/expiration et renvoie les claims décodés.
Aucune E/S: uniquement du calcul.
"""
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
import jwt

from foodparadise.config import ACCESS_TOKEN_SECRET, ACCESS_TOKEN_TTL_SECONDS, JWT_ALGORITHM
from foodparadise.errors import InvalidCredential, MissingCredential

RESERVED_CLAIMS = ("iat", "exp")

def _secret() -> str:
    if not ACCESS_TOKEN_SECRET:
        raise RuntimeError("ACCESS_TOKEN_SECRET manquant")
    return ACCESS_TOKEN_SECRET

def issue_token(payload: Dict[str, Any], expires_in: Optional[int] = None) -> str:
    email = str((payload or {}).get("email") or "").strip()
    if not email:
        raise ValueError("email requis pour signer un token")
    now = datetime.now(tz=timezone.utc)
    ttl = ACCESS_TOKEN_TTL_SECONDS if expires_in is None else expires_in
    claims = {k: v for k, v in payload.items() if k not in RESERVED_CLAIMS}
    claims["email"] = email
    claims["iat"] = now
    claims["exp"] = now + timedelta(seconds=ttl)
    return jwt.encode(claims, _secret(), algorithm=JWT_ALGORITHM)

def extract_bearer_token(authorization: Optional[str]) -> str:
    header = (authorization or "").strip()
    if not header:
        raise MissingCredential()
    parts = header.split(None, 1)
    if len(parts) < 2 or not parts[1].strip():
        raise MissingCredential()
    if parts[0].lower() != "bearer":
        raise InvalidCredential()
    return parts[1].strip()

def verify_token(raw_token: str) -> Dict[str, Any]:
    if not raw_token:
        raise MissingCredential()
    try:
        claims = jwt.decode(
            raw_token,
            _secret(),
            algorithms=[JWT_ALGORITHM],
            options={"require": ["exp", "iat"]},
        )
    except jwt.PyJWTError as e:
        raise InvalidCredential() from e
    if not claims.get("email"):
        raise InvalidCredential()
    return claims
