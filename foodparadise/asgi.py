"""
ASGI entrypoint: expose `app` for process managers / deployments.

- En production, un process manager (ex: gunicorn/uvicorn-workers) importe `foodparadise.asgi:app`.
- Toute la configuration FastAPI est centralisée dans foodparadise.app_setup.factory.
"""

from foodparadise.app import app

if __name__ == "__main__":
    import os
    import uvicorn
    uvicorn.run(
        "foodparadise.asgi:app",
        host="0.0.0.0",
        port=int(os.getenv("PORT", "5000")),
        reload=True,
    )
