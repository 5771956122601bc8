"""
Accès aux données pour la feature 'payments' (ledger en ajout seul).
Aucune fonction de ce module ne modifie ni ne supprime un paiement.
"""
from typing import Any, Dict, Iterator, List, Optional
import logging

from foodparadise.config import ANALYTICS_PAGE_SIZE

logger = logging.getLogger(__name__)

TABLE = "payments"

# module foodparadise.payments.repository
def insert_payment(db, row: Dict[str, Any]) -> Optional[dict]:
    """Ajoute un paiement au ledger et renvoie la ligne créée."""
    try:
        res = db.table(TABLE).insert(row).execute()
        rows = res.data or []
        return rows[0] if isinstance(rows, list) and rows else None
    except Exception:
        logger.exception("payments.repository.insert_payment failed email=%s", row.get("email"))
        raise

def list_by_email(db, email: str) -> List[dict]:
    if not email:
        return []
    try:
        res = db.table(TABLE).select("*").eq("email", email).order("created_at", desc=True).execute()
        return res.data or []
    except Exception:
        logger.exception("payments.repository.list_by_email failed")
        raise

def iter_payments(db, columns: str = "*", page_size: int = ANALYTICS_PAGE_SIZE) -> Iterator[dict]:
    """
    Parcourt tout le ledger page par page, par curseur sur l'id (keyset).
    PostgREST plafonne les réponses: une seule requête peut tronquer le résultat.
    Un paiement inséré pendant le parcours ne décale pas les pages suivantes:
    aucune ligne n'est lue deux fois.
    """
    last_id = None
    while True:
        query = db.table(TABLE).select(columns).order("id", desc=False)
        if last_id is not None:
            query = query.gt("id", last_id)
        try:
            res = query.limit(page_size).execute()
        except Exception:
            logger.exception("payments.repository.iter_payments failed after_id=%s", last_id)
            raise
        rows = res.data or []
        yield from rows
        if len(rows) < page_size:
            return
        last_id = rows[-1].get("id")
