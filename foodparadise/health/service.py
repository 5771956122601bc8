from urllib.parse import urlparse
import socket
from foodparadise.config import SUPABASE_URL

TABLES = ("users", "menu", "carts", "payments")

def _check_table(client, name: str):
    try:
        res = client.table(name).select("*").limit(1).execute()
        cnt = len(res.data or [])
        return {"ok": True, "rows": cnt}
    except Exception as e:
        return {"ok": False, "error": str(e)}

def health_supabase_info(client):
    """Sonde de diagnostic: résolution DNS de SUPABASE_URL puis lecture d'une ligne par table."""
    parsed = urlparse(SUPABASE_URL) if SUPABASE_URL else None
    hostname = parsed.hostname if parsed else None
    dns_ok = None
    dns_error = None
    if hostname:
        try:
            socket.getaddrinfo(hostname, 443)
            dns_ok = True
        except Exception as e:
            dns_ok = False
            dns_error = str(e)

    info = {
        "hostname": hostname,
        "dns_ok": dns_ok,
        "dns_error": dns_error,
        "connect_ok": False,
        "tables": {},
    }
    if client is None:
        info["error"] = "client non initialisé"
        return info
    for t in TABLES:
        info["tables"][t] = _check_table(client, t)
    info["connect_ok"] = all(t["ok"] for t in info["tables"].values())
    return info
