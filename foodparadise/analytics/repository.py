from typing import Optional
import logging

logger = logging.getLogger(__name__)

# module foodparadise.analytics.repository
def count_table_rows(db, table_name: str, method: str = "estimated") -> int:
    """
    Compte les lignes d'une table via PostgREST.
    - count='estimated' par défaut: valeur approchée, rapide sur de gros volumes.
    - Fallback sur len(data) si le compte n'est pas renvoyé.
    """
    try:
        res = db.table(table_name).select("id", count=method).execute()
    except Exception:
        logger.exception("analytics.repository.count_table_rows failed table=%s", table_name)
        raise
    count: Optional[int] = getattr(res, "count", None)
    if count is not None:
        return int(count)
    return len(res.data or [])
