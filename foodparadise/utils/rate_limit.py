from typing import Dict, Any, List
from fastapi import Request, Response, HTTPException
import logging
import os
import time
import hashlib

logger = logging.getLogger(__name__)

def _client_key(req: Request) -> str:
    # Priorité: token Bearer (hashé) puis IP, toujours suffixé par le chemin
    path = req.url.path
    auth_header = req.headers.get("Authorization", "")
    token = auth_header[7:].strip() if auth_header.lower().startswith("bearer ") else ""
    if token:
        h = hashlib.sha256(token.encode("utf-8")).hexdigest()[:16]
        return f"user:{h}:{path}"
    ip = req.client.host if req.client else "local"
    return f"ip:{ip}:{path}"

def optional_rate_limit(times: int, seconds: int):
    async def _dep(request: Request, response: Response):
        # Fallback mémoire (dev/tests) si demandé
        if os.getenv("LOCAL_RATE_LIMIT_FALLBACK") == "1":
            now = time.time()
            key = _client_key(request)
            store = _evict_expired(getattr(request.app.state, "_rl_store", {}), now, seconds)
            hits = store.get(key, [])
            if len(hits) >= times:
                raise HTTPException(status_code=429, detail="Too Many Requests")
            hits.append(now)
            store[key] = hits
            request.app.state._rl_store = store
            return

        # Respecter le flag global posé par le lifespan
        if not getattr(request.app.state, "rate_limit_enabled", False):
            return

        from fastapi_limiter.depends import RateLimiter

        async def _identifier(req: Request) -> str:
            return _client_key(req)
        try:
            return await RateLimiter(times=times, seconds=seconds, identifier=_identifier)(request, response)
        except HTTPException:
            raise
        except Exception:
            # Redis tombé après le démarrage: la requête passe sans limitation (pas de 500)
            logger.warning("rate limiter unavailable path=%s", request.url.path, exc_info=True)
            return
    return _dep

def _evict_expired(store: Dict[str, List[float]], now: float, seconds: int) -> Dict[str, List[float]]:
    """Retire les horodatages hors fenêtre et les clés devenues vides."""
    for key in list(store):
        hits = [t for t in store[key] if now - t < seconds]
        if hits:
            store[key] = hits
        else:
            del store[key]
    return store

def rate_limit_health_info(request: Request) -> Dict[str, Any]:
    from fastapi_limiter import FastAPILimiter
    enabled = getattr(request.app.state, "rate_limit_enabled", None)
    limiter_ready = getattr(FastAPILimiter, "redis", None) is not None
    return {
        "enabled": (bool(enabled) if enabled is not None else None),
        "ready": limiter_ready,
        "backend": "redis" if limiter_ready else None,
    }
