from fastapi import Request, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.trustedhost import TrustedHostMiddleware
from foodparadise.config import HTTPS_ONLY, CORS_ORIGINS, ALLOWED_HOSTS

"""
Middlewares transverses de l'application.
- register_basic_middlewares: CORS et TrustedHost.
- register_security_middleware: en-têtes de sécurité (API JSON uniquement, pas de CSP de pages).
Notes:
- Pas de cookie de session: l'authentification passe par l'en-tête Bearer, donc pas de CSRF.
"""
def register_basic_middlewares(app: FastAPI) -> None:
    """
    Ajoute les middlewares « de base »:
    - CORSMiddleware: autorise les origines définies (front Vite en dev).
    - TrustedHostMiddleware: limite les hôtes acceptés (défense host header).
    """
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(
        TrustedHostMiddleware,
        allowed_hosts=ALLOWED_HOSTS + ["*"] if "*" in CORS_ORIGINS else ALLOWED_HOSTS,
    )

def register_security_middleware(app: FastAPI) -> None:
    @app.middleware("http")
    async def security_headers(request: Request, call_next):
        response = await call_next(request)
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("Referrer-Policy", "no-referrer")
        if HTTPS_ONLY:
            response.headers.setdefault("Strict-Transport-Security", "max-age=63072000; includeSubDomains; preload")
        # Les réponses authentifiées ne doivent pas être mises en cache
        if request.headers.get("authorization"):
            response.headers["Cache-Control"] = "no-store"
        return response
