"""
Registre central des routers.
- Auth: /jwt
- Domaine: users, carts, menu/reviews, payments, analytics
- Health: /health
"""
from fastapi import FastAPI
from foodparadise.auth.views import router as auth_router
from foodparadise.users.views import router as users_router
from foodparadise.carts.views import router as carts_router
from foodparadise.menu.views import router as menu_router
from foodparadise.payments.views import router as payments_router
from foodparadise.analytics.views import router as analytics_router
from foodparadise.health.router import router as health_router

def register_routers(app: FastAPI) -> None:
    """
    Agrège tous les routers de l'application.
    - L'ordre n'a pas d'impact sauf conflits de chemins (évités par préfixes).
    """
    app.include_router(auth_router)
    app.include_router(users_router)
    app.include_router(carts_router)
    app.include_router(menu_router)
    app.include_router(payments_router)
    app.include_router(analytics_router)
    app.include_router(health_router)
