"""
Lifespan FastAPI: initialisation/arrêt des ressources partagées.
- Crée le client Supabase unique (app.state.supabase) et le libère à l'arrêt.
- Initialise FastAPILimiter (Redis) avec options de test (fakeredis).
- Variables d'environnement supportées:
  - DISABLE_FASTAPI_LIMITER_INIT_FOR_TESTS=1: désactive complètement (tests)
  - USE_FAKE_REDIS_FOR_TESTS=1: utilise fakeredis (tests)
  - LOCAL_RATE_LIMIT_FALLBACK=1: active un fallback local si l'init échoue
"""
import os
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi_limiter import FastAPILimiter
import redis.asyncio as aioredis

from foodparadise.infra.supabase_client import init_clients, close_clients

async def _init_rate_limiter(app: FastAPI, logger: logging.Logger) -> None:
    """
    Configure le rate limiting et gère les fallbacks.
    - En cas d'échec de Redis et sans fallback, le rate limiting est désactivé proprement.
    """
    if os.getenv("DISABLE_FASTAPI_LIMITER_INIT_FOR_TESTS") == "1":
        app.state.rate_limit_enabled = False
        logger.info("Rate limiting disabled by DISABLE_FASTAPI_LIMITER_INIT_FOR_TESTS")
        return
    try:
        if os.getenv("USE_FAKE_REDIS_FOR_TESTS") == "1":
            from fakeredis.aioredis import FakeRedis
            r = FakeRedis(decode_responses=True)
        else:
            redis_url = os.getenv("RATE_LIMIT_REDIS_URL", "redis://127.0.0.1:6379/0")
            r = aioredis.from_url(redis_url, encoding="utf-8", decode_responses=True)

        await FastAPILimiter.init(r)
        app.state.rate_limit_enabled = True
        logger.info("Rate limiting enabled")
    except Exception as e:
        app.state.rate_limit_enabled = False
        if os.getenv("LOCAL_RATE_LIMIT_FALLBACK") == "1":
            logger.warning(f"Rate limiting falling back to local in-memory due to init error: {e}")
        else:
            logger.warning(f"Rate limiting disabled due to init error: {e}")

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger = logging.getLogger("uvicorn.error")
    app.state.supabase = init_clients()
    if app.state.supabase is not None:
        logger.info("Supabase client ready")
    await _init_rate_limiter(app, logger)

    yield

    if getattr(app.state, "rate_limit_enabled", False):
        await FastAPILimiter.close()
    close_clients()
    app.state.supabase = None
    logger.info("Shared resources released")
