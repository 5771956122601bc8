"""
Autorité des rôles.
Les rôles forment un ordre total guest < member < admin; un appelant satisfait
un rôle requis si son rang est au moins celui du rôle requis.
"""
from typing import Any, Dict
import logging

from foodparadise.errors import Forbidden
from foodparadise.users import repository as users_repository

logger = logging.getLogger(__name__)

GUEST = "guest"
MEMBER = "member"
ADMIN = "admin"

ROLE_RANK = {GUEST: 0, MEMBER: 1, ADMIN: 2}

def normalize_role(role: Any) -> str:
    role_lower = str(role or "").strip().lower()
    return role_lower if role_lower in ROLE_RANK else GUEST

def role_satisfies(actual: Any, required: str) -> bool:
    return ROLE_RANK[normalize_role(actual)] >= ROLE_RANK[required]

def authorize(db, claims: Dict[str, Any], required_role: str) -> Dict[str, Any]:
    """Relit l'utilisateur par email et vérifie son rôle; renvoie la ligne utilisateur."""
    email = (claims or {}).get("email")
    user = users_repository.get_user_by_email(db, email) if email else None
    if not user:
        raise Forbidden()
    if not role_satisfies(user.get("role"), required_role):
        logger.info("auth.roles.authorize refused role=%s required=%s", normalize_role(user.get("role")), required_role)
        raise Forbidden()
    return user

def check_same_identity(email: str, claims: Dict[str, Any]) -> None:
    """Un utilisateur ne peut interroger que sa propre identité."""
    if not email or email != (claims or {}).get("email"):
        raise Forbidden()
