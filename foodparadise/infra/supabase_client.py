"""
Client Supabase partagé (clé service, opérations côté serveur).
- init_clients(): appelé au démarrage (lifespan), crée le client unique.
- close_clients(): appelé à l'arrêt, libère la référence et ferme la session HTTP PostgREST.
- get_db(): dépendance FastAPI qui injecte le client dans les vues.
"""
import logging
from typing import Optional
from fastapi import Request
from supabase import create_client, Client
from foodparadise.config import SUPABASE_URL, SUPABASE_KEY, SUPABASE_SERVICE_KEY
from foodparadise.errors import StorageUnavailable

logger = logging.getLogger(__name__)

_service_supabase: Optional[Client] = None

def init_clients() -> Optional[Client]:
    global _service_supabase
    key = SUPABASE_SERVICE_KEY or SUPABASE_KEY
    if not SUPABASE_URL or not key:
        logger.warning("SUPABASE_URL/SUPABASE_SERVICE_KEY manquants: stockage désactivé")
        _service_supabase = None
        return None
    if _service_supabase is None:
        _service_supabase = create_client(SUPABASE_URL, key)
    return _service_supabase

def close_clients() -> None:
    global _service_supabase
    client, _service_supabase = _service_supabase, None
    if client is None:
        return
    try:
        client.postgrest.session.close()
    except Exception:
        logger.warning("Fermeture de la session PostgREST impossible", exc_info=True)

def get_db(request: Request) -> Client:
    """Client de stockage attaché à l'application par le lifespan."""
    client = getattr(request.app.state, "supabase", None)
    if client is None:
        raise StorageUnavailable()
    return client
